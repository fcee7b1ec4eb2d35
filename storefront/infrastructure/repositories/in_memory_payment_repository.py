"""決済記録リポジトリのインメモリ実装."""
from storefront.domain.entities import Payment
from storefront.domain.identifiers import CartId, PaymentId
from storefront.domain.ports import PaymentRepository


class InMemoryPaymentRepository(PaymentRepository):
    """決済記録リポジトリのインメモリ実装."""

    def __init__(self) -> None:
        """初期化."""
        self._payments: dict[str, Payment] = {}

    def save(self, payment: Payment) -> None:
        """決済記録を保存する."""
        self._payments[payment.payment_id.value] = payment

    def find_by_id(self, payment_id: PaymentId) -> Payment | None:
        """決済IDで検索する."""
        return self._payments.get(payment_id.value)

    def find_by_cart_id(self, cart_id: CartId) -> list[Payment]:
        """カートIDで検索する（作成日時の昇順）."""
        return sorted(
            (payment for payment in self._payments.values() if payment.cart_id == cart_id),
            key=lambda payment: payment.created_at,
        )
