"""カートステータスの列挙型."""
from __future__ import annotations

from enum import Enum


class CartStatus(str, Enum):
    """カートのステータス（OPEN → IN_PROGRESS → COMPLETED の一方向のみ）."""

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"

    def can_transition_to(self, new_status: CartStatus) -> bool:
        """指定ステータスへ遷移可能か判定する."""
        return new_status in _ALLOWED_TRANSITIONS[self]

    def is_terminal(self) -> bool:
        """終端ステータスか判定する."""
        return not _ALLOWED_TRANSITIONS[self]


_ALLOWED_TRANSITIONS: dict[CartStatus, frozenset[CartStatus]] = {
    CartStatus.OPEN: frozenset({CartStatus.IN_PROGRESS, CartStatus.COMPLETED}),
    CartStatus.IN_PROGRESS: frozenset({CartStatus.COMPLETED}),
    CartStatus.COMPLETED: frozenset(),
}
