"""インフラストラクチャ層モジュール."""
# AfterpayPaymentProvider は requests に依存するため、必要な時に
# storefront.infrastructure.providers.afterpay_payment_provider から直接インポートする
from .providers import MockPaymentProvider, StaticItemCatalog, create_payment_provider
from .repositories import (
    InMemoryCartRepository,
    InMemoryCheckoutAttemptRepository,
    InMemoryPaymentRepository,
)

__all__ = [
    "InMemoryCartRepository",
    "InMemoryCheckoutAttemptRepository",
    "InMemoryPaymentRepository",
    "MockPaymentProvider",
    "StaticItemCatalog",
    "create_payment_provider",
]
