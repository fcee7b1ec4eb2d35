"""ドメインサービスモジュール."""
from .cart_to_checkout_converter import DEFAULT_CURRENCY, CartToCheckoutConverter
from .redirect_url_builder import PAYMENT_RESULT_PATH, RedirectUrlBuilder

__all__ = [
    "CartToCheckoutConverter",
    "DEFAULT_CURRENCY",
    "PAYMENT_RESULT_PATH",
    "RedirectUrlBuilder",
]
