"""識別子モジュール."""
from .cart_id import CartId
from .item_id import ItemId
from .payment_id import PaymentId
from .session_id import SessionId

__all__ = [
    "CartId",
    "ItemId",
    "PaymentId",
    "SessionId",
]
