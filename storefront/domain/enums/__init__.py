"""列挙型モジュール."""
from .cart_status import CartStatus
from .checkout_attempt_status import CheckoutAttemptStatus
from .checkout_result_status import CheckoutResultStatus
from .payment_status import PaymentStatus
from .payment_type import PaymentType

__all__ = [
    "CartStatus",
    "CheckoutAttemptStatus",
    "CheckoutResultStatus",
    "PaymentStatus",
    "PaymentType",
]
