"""アプリケーションサービスモジュール."""
from .cart_store import CartStore
from .payment_ledger import PaymentLedger
from .session_lock_registry import SessionLockRegistry

__all__ = [
    "CartStore",
    "PaymentLedger",
    "SessionLockRegistry",
]
