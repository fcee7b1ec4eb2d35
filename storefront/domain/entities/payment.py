"""決済記録エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from typing import Any

from ..enums import PaymentStatus, PaymentType
from ..exceptions import InvalidStatusTransitionError
from ..identifiers import CartId, PaymentId
from ..value_objects import Money


@dataclass
class Payment:
    """1回の決済試行の記録.

    金額は作成時点のカート合計のスナップショットで、後から再計算しない。
    """

    payment_id: PaymentId
    cart_id: CartId
    payment_type: PaymentType
    status: PaymentStatus
    amount: Money
    currency: str
    created_at: datetime
    updated_at: datetime
    provider_transaction_id: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        cart_id: CartId,
        payment_type: PaymentType,
        amount: Money,
        currency: str,
        provider_transaction_id: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Payment:
        """PENDING 状態の決済記録を作成する."""
        if not currency:
            raise ValueError("Currency cannot be empty")
        now = datetime.now(timezone.utc)
        return cls(
            payment_id=PaymentId.generate(),
            cart_id=cart_id,
            payment_type=payment_type,
            status=PaymentStatus.PENDING,
            amount=amount,
            currency=currency,
            created_at=now,
            updated_at=now,
            provider_transaction_id=provider_transaction_id,
            metadata=dict(metadata or {}),
        )

    def transition_to(self, new_status: PaymentStatus) -> None:
        """ステータスを遷移させる.

        Raises:
            InvalidStatusTransitionError: 許可されていない遷移の場合
        """
        if not self.status.can_transition_to(new_status):
            raise InvalidStatusTransitionError("Payment", self.status, new_status)
        self.status = new_status
        self.updated_at = datetime.now(timezone.utc)

    def snapshot(self) -> Payment:
        """台帳外へ渡すための複製を返す."""
        return replace(self, metadata=dict(self.metadata))
