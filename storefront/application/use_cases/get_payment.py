"""決済記録取得ユースケース."""
from storefront.application.services import CartStore, PaymentLedger
from storefront.domain.entities import Payment
from storefront.domain.identifiers import PaymentId, SessionId


class GetPaymentUseCase:
    """セッションが所有するカートの決済記録を取得するユースケース."""

    def __init__(self, payment_ledger: PaymentLedger, cart_store: CartStore) -> None:
        """初期化."""
        self._payment_ledger = payment_ledger
        self._cart_store = cart_store

    def execute(self, session_id: SessionId, payment_id: PaymentId) -> Payment | None:
        """決済記録を取得する.

        Returns:
            決済記録（存在しない、または他セッションのカートの場合はNone）
        """
        payment = self._payment_ledger.get_by_id(payment_id)
        if payment is None:
            return None
        cart = self._cart_store.get_by_id(payment.cart_id)
        if cart is None or cart.session_id != session_id:
            return None
        return payment
