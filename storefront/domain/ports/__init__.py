"""ポートモジュール."""
from .cart_repository import CartRepository
from .checkout_attempt_repository import CheckoutAttemptRepository
from .item_catalog import ItemCatalog
from .payment_provider import PaymentProvider, PaymentProviderError, PaymentProviderTimeoutError
from .payment_repository import PaymentRepository

__all__ = [
    "CartRepository",
    "CheckoutAttemptRepository",
    "ItemCatalog",
    "PaymentProvider",
    "PaymentProviderError",
    "PaymentProviderTimeoutError",
    "PaymentRepository",
]
