"""プロバイダ実装モジュール."""
from .mock_payment_provider import MockPaymentProvider
from .payment_provider_factory import create_payment_provider
from .static_item_catalog import StaticItemCatalog

__all__ = [
    "MockPaymentProvider",
    "StaticItemCatalog",
    "create_payment_provider",
]
