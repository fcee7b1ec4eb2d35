"""チェックアウト試行ステータスの列挙型."""
from __future__ import annotations

from enum import Enum


class CheckoutAttemptStatus(str, Enum):
    """1回のチェックアウト試行の進行状況."""

    PROVIDER_SESSION_REQUESTED = "PROVIDER_SESSION_REQUESTED"
    PROVIDER_SESSION_CREATED = "PROVIDER_SESSION_CREATED"
    RESULT_RECEIVED = "RESULT_RECEIVED"
    FINALIZED = "FINALIZED"

    def can_transition_to(self, new_status: CheckoutAttemptStatus) -> bool:
        """指定ステータスへ遷移可能か判定する."""
        return new_status in _ALLOWED_TRANSITIONS[self]


# RESULT_RECEIVED（キャンセル通知済み）からも FINALIZED へ進める
_ALLOWED_TRANSITIONS: dict[CheckoutAttemptStatus, frozenset[CheckoutAttemptStatus]] = {
    CheckoutAttemptStatus.PROVIDER_SESSION_REQUESTED: frozenset({
        CheckoutAttemptStatus.PROVIDER_SESSION_CREATED,
    }),
    CheckoutAttemptStatus.PROVIDER_SESSION_CREATED: frozenset({
        CheckoutAttemptStatus.RESULT_RECEIVED,
        CheckoutAttemptStatus.FINALIZED,
    }),
    CheckoutAttemptStatus.RESULT_RECEIVED: frozenset({CheckoutAttemptStatus.FINALIZED}),
    CheckoutAttemptStatus.FINALIZED: frozenset(),
}
