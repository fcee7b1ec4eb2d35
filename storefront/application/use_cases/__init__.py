"""ユースケースモジュール."""
from .add_to_cart import AddToCartUseCase
from .create_provider_checkout import CreateProviderCheckoutUseCase
from .errors import (
    CartItemNotFoundError,
    CartNotFoundError,
    EmptyCartError,
    ItemNotFoundError,
    ProviderNotConfiguredError,
)
from .finalize_checkout import FinalizeCheckoutResult, FinalizeCheckoutUseCase
from .get_cart import GetCartUseCase
from .get_payment import GetPaymentUseCase
from .get_provider_configuration import GetProviderConfigurationUseCase
from .initiate_checkout import InitiateCheckoutResult, InitiateCheckoutUseCase
from .list_items import ListItemsUseCase
from .remove_from_cart import RemoveFromCartUseCase
from .update_cart_item_quantity import UpdateCartItemQuantityUseCase

__all__ = [
    # Catalog Use Cases
    "ListItemsUseCase",
    # Cart Use Cases
    "AddToCartUseCase",
    "GetCartUseCase",
    "RemoveFromCartUseCase",
    "UpdateCartItemQuantityUseCase",
    # Checkout Use Cases
    "FinalizeCheckoutResult",
    "FinalizeCheckoutUseCase",
    "GetPaymentUseCase",
    "InitiateCheckoutResult",
    "InitiateCheckoutUseCase",
    # Provider Use Cases
    "CreateProviderCheckoutUseCase",
    "GetProviderConfigurationUseCase",
    # Errors
    "CartItemNotFoundError",
    "CartNotFoundError",
    "EmptyCartError",
    "ItemNotFoundError",
    "ProviderNotConfiguredError",
]
