"""チェックアウト試行エンティティ."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

from ..enums import CheckoutAttemptStatus, PaymentType
from ..exceptions import InvalidStatusTransitionError
from ..identifiers import CartId, SessionId
from ..value_objects import Money, ProviderCheckout


@dataclass
class CheckoutAttempt:
    """プロバイダのチェックアウトセッション1件分の進行状況."""

    session_id: SessionId
    cart_id: CartId
    payment_type: PaymentType
    amount: Money
    status: CheckoutAttemptStatus
    created_at: datetime
    updated_at: datetime
    checkout: ProviderCheckout | None = None

    @classmethod
    def request(
        cls,
        session_id: SessionId,
        cart_id: CartId,
        payment_type: PaymentType,
        amount: Money,
    ) -> CheckoutAttempt:
        """プロバイダへの依頼前の試行を作成する."""
        now = datetime.now(timezone.utc)
        return cls(
            session_id=session_id,
            cart_id=cart_id,
            payment_type=payment_type,
            amount=amount,
            status=CheckoutAttemptStatus.PROVIDER_SESSION_REQUESTED,
            created_at=now,
            updated_at=now,
        )

    @property
    def token(self) -> str | None:
        """プロバイダのチェックアウトトークン."""
        return self.checkout.token if self.checkout else None

    def mark_session_created(self, checkout: ProviderCheckout) -> None:
        """プロバイダのセッション作成完了を記録する."""
        self._transition_to(CheckoutAttemptStatus.PROVIDER_SESSION_CREATED)
        self.checkout = checkout

    def mark_result_received(self) -> None:
        """キャンセル結果の受信を記録する."""
        self._transition_to(CheckoutAttemptStatus.RESULT_RECEIVED)

    def mark_finalized(self) -> None:
        """決済確定を記録する."""
        self._transition_to(CheckoutAttemptStatus.FINALIZED)

    def _transition_to(self, new_status: CheckoutAttemptStatus) -> None:
        if not self.status.can_transition_to(new_status):
            raise InvalidStatusTransitionError("CheckoutAttempt", self.status, new_status)
        self.status = new_status
        self.updated_at = datetime.now(timezone.utc)
