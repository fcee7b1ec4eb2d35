"""決済台帳."""
import logging
from typing import Any

from storefront.domain.entities import Payment
from storefront.domain.enums import PaymentStatus, PaymentType
from storefront.domain.identifiers import CartId, PaymentId
from storefront.domain.ports import PaymentRepository
from storefront.domain.value_objects import Money

logger = logging.getLogger(__name__)


class PaymentLedger:
    """決済試行の記録を識別子ごとに保持する台帳.

    呼び出し元には常に複製を返し、保存済みの記録は台帳経由でしか変更できない。
    """

    def __init__(self, payment_repository: PaymentRepository) -> None:
        """初期化.

        Args:
            payment_repository: 決済記録リポジトリ
        """
        self._payment_repository = payment_repository

    def create(
        self,
        cart_id: CartId,
        payment_type: PaymentType,
        amount: Money,
        currency: str,
        provider_transaction_id: str | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Payment:
        """PENDING の決済記録を作成する."""
        payment = Payment.create(
            cart_id=cart_id,
            payment_type=payment_type,
            amount=amount,
            currency=currency,
            provider_transaction_id=provider_transaction_id,
            metadata=metadata,
        )
        self._payment_repository.save(payment)
        logger.info(
            "Recorded payment %s for cart %s: %s %s",
            payment.payment_id,
            cart_id,
            amount.to_decimal_string(),
            currency,
        )
        return payment.snapshot()

    def update_status(self, payment_id: PaymentId, new_status: PaymentStatus) -> Payment | None:
        """ステータスを更新する.

        Returns:
            更新後の決済記録（存在しない場合はNone）

        Raises:
            InvalidStatusTransitionError: 許可されていない遷移の場合
        """
        payment = self._payment_repository.find_by_id(payment_id)
        if payment is None:
            return None
        payment.transition_to(new_status)
        self._payment_repository.save(payment)
        return payment.snapshot()

    def get_by_id(self, payment_id: PaymentId) -> Payment | None:
        """決済IDで取得する."""
        payment = self._payment_repository.find_by_id(payment_id)
        return payment.snapshot() if payment else None

    def get_by_cart_id(self, cart_id: CartId) -> list[Payment]:
        """カートに紐づく全決済試行を取得する."""
        return [p.snapshot() for p in self._payment_repository.find_by_cart_id(cart_id)]
