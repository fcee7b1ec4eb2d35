"""決済結果確定ユースケース."""
import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from storefront.application.services import CartStore, PaymentLedger
from storefront.domain.entities import Cart, CheckoutAttempt, Payment
from storefront.domain.enums import (
    CartStatus,
    CheckoutAttemptStatus,
    CheckoutResultStatus,
    PaymentStatus,
    PaymentType,
)
from storefront.domain.identifiers import SessionId
from storefront.domain.ports import CheckoutAttemptRepository
from storefront.domain.services import DEFAULT_CURRENCY

from .errors import CartNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FinalizeCheckoutResult:
    """決済結果確定の結果."""

    status: CheckoutResultStatus
    payment_type: PaymentType
    message: str
    cart: Cart
    payment: Payment | None = None
    already_completed: bool = False


class FinalizeCheckoutUseCase:
    """プロバイダからのリダイレクト結果で決済記録とカートを確定するユースケース.

    リダイレクトで渡された結果はプロバイダ側で検証せずにそのまま信頼する。
    完了済みのカートに対する再通知では新しい決済記録を作らない。
    """

    def __init__(
        self,
        cart_store: CartStore,
        payment_ledger: PaymentLedger,
        checkout_attempt_repository: CheckoutAttemptRepository,
    ) -> None:
        """初期化."""
        self._cart_store = cart_store
        self._payment_ledger = payment_ledger
        self._checkout_attempt_repository = checkout_attempt_repository

    def execute(
        self,
        session_id: SessionId,
        status: CheckoutResultStatus,
        payment_type: PaymentType,
        provider_token: str | None = None,
    ) -> FinalizeCheckoutResult:
        """決済結果を確定する.

        Args:
            session_id: セッションID
            status: リダイレクトで通知された結果
            payment_type: 決済プロバイダ
            provider_token: プロバイダのチェックアウトトークン

        Returns:
            確定結果

        Raises:
            CartNotFoundError: セッションにカートが無い場合
        """
        with self._cart_store.locks.hold(session_id):
            cart = self._cart_store.get_latest_cart_for_session(session_id)
            if cart is None:
                raise CartNotFoundError("Cart not found for this session.")

            if cart.status == CartStatus.COMPLETED:
                return self._already_completed(cart, status, payment_type)

            attempt = self._find_attempt(provider_token, cart)

            if status == CheckoutResultStatus.CANCELLED:
                if attempt is not None and attempt.status.can_transition_to(
                    CheckoutAttemptStatus.RESULT_RECEIVED
                ):
                    attempt.mark_result_received()
                    self._checkout_attempt_repository.save(attempt)
                logger.info("Payment cancelled for cart %s with %s", cart.cart_id, payment_type.value)
                return FinalizeCheckoutResult(
                    status=status,
                    payment_type=payment_type,
                    message=f"Payment was cancelled with {payment_type.value}",
                    cart=cart,
                )

            return self._complete(session_id, cart, status, payment_type, provider_token, attempt)

    def _complete(
        self,
        session_id: SessionId,
        cart: Cart,
        status: CheckoutResultStatus,
        payment_type: PaymentType,
        provider_token: str | None,
        attempt: CheckoutAttempt | None,
    ) -> FinalizeCheckoutResult:
        payment = self._payment_ledger.create(
            cart_id=cart.cart_id,
            payment_type=payment_type,
            amount=cart.get_total(),
            currency=DEFAULT_CURRENCY,
            provider_transaction_id=provider_token,
            metadata={
                "session_id": session_id.value,
                "completed_at": datetime.now(timezone.utc).isoformat(),
            },
        )
        payment = self._payment_ledger.update_status(payment.payment_id, PaymentStatus.COMPLETED)
        updated_cart = self._cart_store.transition_status(
            cart.cart_id, CartStatus.COMPLETED, payment.payment_id
        )

        if attempt is not None:
            attempt.mark_finalized()
            self._checkout_attempt_repository.save(attempt)

        logger.info(
            "Payment %s completed for cart %s with %s",
            payment.payment_id,
            cart.cart_id,
            payment_type.value,
        )
        return FinalizeCheckoutResult(
            status=status,
            payment_type=payment_type,
            message=f"Payment completed successfully with {payment_type.value}",
            cart=updated_cart,
            payment=payment,
        )

    def _already_completed(
        self,
        cart: Cart,
        status: CheckoutResultStatus,
        payment_type: PaymentType,
    ) -> FinalizeCheckoutResult:
        payment = self._payment_ledger.get_by_id(cart.payment_id) if cart.payment_id else None
        logger.info("Cart %s is already completed; ignoring %s result", cart.cart_id, status.value)
        completed_with = payment.payment_type if payment else payment_type
        return FinalizeCheckoutResult(
            status=status,
            payment_type=completed_with,
            message=f"Payment already completed with {completed_with.value}",
            cart=cart,
            payment=payment,
            already_completed=True,
        )

    def _find_attempt(self, provider_token: str | None, cart: Cart) -> CheckoutAttempt | None:
        if not provider_token:
            return None
        attempt = self._checkout_attempt_repository.find_by_token(provider_token)
        if attempt is None or attempt.cart_id != cart.cart_id:
            return None
        return attempt
