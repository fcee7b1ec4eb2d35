"""値オブジェクトモジュール."""
from .checkout_request import CheckoutRequest
from .consumer import Consumer
from .money import Money
from .provider_checkout import ProviderCheckout
from .redirect_urls import RedirectUrls

__all__ = [
    "CheckoutRequest",
    "Consumer",
    "Money",
    "ProviderCheckout",
    "RedirectUrls",
]
