"""決済ステータスの列挙型."""
from __future__ import annotations

from enum import Enum


class PaymentStatus(str, Enum):
    """決済記録のステータス."""

    PENDING = "PENDING"
    AUTHORIZED = "AUTHORIZED"
    CAPTURED = "CAPTURED"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"

    def can_transition_to(self, new_status: PaymentStatus) -> bool:
        """指定ステータスへ遷移可能か判定する."""
        return new_status in _ALLOWED_TRANSITIONS[self]

    def is_terminal(self) -> bool:
        """終端ステータスか判定する."""
        return not _ALLOWED_TRANSITIONS[self]


_ALLOWED_TRANSITIONS: dict[PaymentStatus, frozenset[PaymentStatus]] = {
    PaymentStatus.PENDING: frozenset({
        PaymentStatus.AUTHORIZED,
        PaymentStatus.CAPTURED,
        PaymentStatus.COMPLETED,
        PaymentStatus.FAILED,
    }),
    PaymentStatus.AUTHORIZED: frozenset({
        PaymentStatus.CAPTURED,
        PaymentStatus.COMPLETED,
        PaymentStatus.FAILED,
    }),
    PaymentStatus.CAPTURED: frozenset({
        PaymentStatus.COMPLETED,
        PaymentStatus.REFUNDED,
        PaymentStatus.FAILED,
    }),
    PaymentStatus.COMPLETED: frozenset({PaymentStatus.REFUNDED}),
    PaymentStatus.FAILED: frozenset(),
    PaymentStatus.REFUNDED: frozenset(),
}
