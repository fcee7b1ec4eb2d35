"""リポジトリ実装モジュール."""
from .in_memory_cart_repository import InMemoryCartRepository
from .in_memory_checkout_attempt_repository import InMemoryCheckoutAttemptRepository
from .in_memory_payment_repository import InMemoryPaymentRepository

__all__ = [
    "InMemoryCartRepository",
    "InMemoryCheckoutAttemptRepository",
    "InMemoryPaymentRepository",
]
