"""エンティティモジュール."""
from .cart import Cart
from .cart_line import CartLine
from .checkout_attempt import CheckoutAttempt
from .item import Item
from .payment import Payment

__all__ = [
    "Cart",
    "CartLine",
    "CheckoutAttempt",
    "Item",
    "Payment",
]
