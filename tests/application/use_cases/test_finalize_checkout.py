"""FinalizeCheckoutUseCaseのテスト."""
import pytest

from storefront.application.services import CartStore, PaymentLedger, SessionLockRegistry
from storefront.application.use_cases import (
    CartNotFoundError,
    FinalizeCheckoutUseCase,
    InitiateCheckoutUseCase,
)
from storefront.config import Settings
from storefront.domain.entities import Item
from storefront.domain.enums import (
    CartStatus,
    CheckoutAttemptStatus,
    CheckoutResultStatus,
    PaymentStatus,
    PaymentType,
)
from storefront.domain.identifiers import ItemId, SessionId
from storefront.domain.value_objects import Consumer, Money
from storefront.infrastructure.providers import MockPaymentProvider
from storefront.infrastructure.repositories import (
    InMemoryCartRepository,
    InMemoryCheckoutAttemptRepository,
    InMemoryPaymentRepository,
)

SESSION_ID = SessionId("sess-1")


def _make_item(price: int = 2500) -> Item:
    return Item(
        item_id=ItemId("item-001"),
        name="Tote",
        description="",
        price=Money(price),
        image_url="",
        sku="TOTE-1",
    )


class TestFinalizeCheckoutUseCase:
    """FinalizeCheckoutUseCaseの単体テスト."""

    def setup_method(self) -> None:
        self.cart_store = CartStore(InMemoryCartRepository(), SessionLockRegistry())
        self.ledger = PaymentLedger(InMemoryPaymentRepository())
        self.attempts = InMemoryCheckoutAttemptRepository()
        self.use_case = FinalizeCheckoutUseCase(self.cart_store, self.ledger, self.attempts)

    def _start_checkout(self) -> None:
        InitiateCheckoutUseCase(
            cart_store=self.cart_store,
            checkout_attempt_repository=self.attempts,
            payment_provider=MockPaymentProvider(token="tok_1"),
            settings=Settings(payment_provider="mock", redirect_base_url="https://shop.test"),
        ).execute(SESSION_ID, Consumer(email="buyer@example.com"))

    def test_成功で決済記録が作られカートが完了する(self) -> None:
        self.cart_store.add_item(SESSION_ID, _make_item())
        self.cart_store.add_item(SESSION_ID, _make_item())

        result = self.use_case.execute(
            SESSION_ID, CheckoutResultStatus.SUCCESS, PaymentType.AFTERPAY, "tok_1"
        )

        assert result.message == "Payment completed successfully with afterpay"
        assert result.already_completed is False
        assert result.cart.status == CartStatus.COMPLETED
        assert result.cart.payment_id == result.payment.payment_id
        payment = self.ledger.get_by_id(result.payment.payment_id)
        assert payment.status == PaymentStatus.COMPLETED
        assert payment.amount == Money(5000)
        assert payment.currency == "USD"
        assert payment.payment_type == PaymentType.AFTERPAY
        assert payment.provider_transaction_id == "tok_1"
        assert payment.metadata["session_id"] == "sess-1"
        assert "completed_at" in payment.metadata

    def test_成功後は新しいOPENカートが使われる(self) -> None:
        self.cart_store.add_item(SESSION_ID, _make_item())
        result = self.use_case.execute(SESSION_ID, CheckoutResultStatus.SUCCESS, PaymentType.AFTERPAY)

        new_cart = self.cart_store.get_or_create_open_cart(SESSION_ID)

        assert new_cart.cart_id != result.cart.cart_id
        assert new_cart.is_empty()
        assert self.cart_store.get_by_id(result.cart.cart_id).status == CartStatus.COMPLETED

    def test_キャンセルでは決済記録を作らずカートも変えない(self) -> None:
        self.cart_store.add_item(SESSION_ID, _make_item())

        result = self.use_case.execute(
            SESSION_ID, CheckoutResultStatus.CANCELLED, PaymentType.CASH_APP_PAY, "tok_1"
        )

        assert result.message == "Payment was cancelled with cash_app_pay"
        assert result.payment is None
        cart = self.cart_store.get_open_cart_for_session(SESSION_ID)
        assert cart.status == CartStatus.OPEN
        assert cart.get_total() == Money(2500)
        assert self.ledger.get_by_cart_id(cart.cart_id) == []

    def test_カートが無い場合エラー(self) -> None:
        with pytest.raises(CartNotFoundError):
            self.use_case.execute(SESSION_ID, CheckoutResultStatus.SUCCESS, PaymentType.AFTERPAY)

    def test_完了済みカートへの再通知では決済を重複作成しない(self) -> None:
        self.cart_store.add_item(SESSION_ID, _make_item())
        first = self.use_case.execute(
            SESSION_ID, CheckoutResultStatus.SUCCESS, PaymentType.AFTERPAY, "tok_1"
        )

        second = self.use_case.execute(
            SESSION_ID, CheckoutResultStatus.SUCCESS, PaymentType.AFTERPAY, "tok_1"
        )

        assert second.already_completed is True
        assert second.payment.payment_id == first.payment.payment_id
        assert len(self.ledger.get_by_cart_id(first.cart.cart_id)) == 1

    def test_成功時にチェックアウト試行が確定する(self) -> None:
        self.cart_store.add_item(SESSION_ID, _make_item())
        self._start_checkout()

        self.use_case.execute(SESSION_ID, CheckoutResultStatus.SUCCESS, PaymentType.AFTERPAY, "tok_1")

        assert self.attempts.find_by_token("tok_1").status == CheckoutAttemptStatus.FINALIZED

    def test_キャンセル時にチェックアウト試行が結果受信になる(self) -> None:
        self.cart_store.add_item(SESSION_ID, _make_item())
        self._start_checkout()

        self.use_case.execute(SESSION_ID, CheckoutResultStatus.CANCELLED, PaymentType.AFTERPAY, "tok_1")

        assert self.attempts.find_by_token("tok_1").status == CheckoutAttemptStatus.RESULT_RECEIVED

    def test_キャンセル後に再度成功を受け取れる(self) -> None:
        self.cart_store.add_item(SESSION_ID, _make_item())
        self._start_checkout()
        self.use_case.execute(SESSION_ID, CheckoutResultStatus.CANCELLED, PaymentType.AFTERPAY, "tok_1")

        result = self.use_case.execute(
            SESSION_ID, CheckoutResultStatus.SUCCESS, PaymentType.AFTERPAY, "tok_1"
        )

        assert result.cart.status == CartStatus.COMPLETED
        assert self.attempts.find_by_token("tok_1").status == CheckoutAttemptStatus.FINALIZED

    def test_決済金額は確定時点のカート合計(self) -> None:
        self.cart_store.add_item(SESSION_ID, _make_item())
        self._start_checkout()
        # チェックアウト開始後のカート変更も確定時の合計に反映される
        self.cart_store.set_line_quantity(SESSION_ID, ItemId("item-001"), 3)

        result = self.use_case.execute(
            SESSION_ID, CheckoutResultStatus.SUCCESS, PaymentType.AFTERPAY, "tok_1"
        )

        assert result.payment.amount == Money(7500)
