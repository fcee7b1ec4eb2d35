"""チェックアウト開始ユースケース."""
import logging
from dataclasses import dataclass

from storefront.application.services import CartStore
from storefront.config import Settings
from storefront.domain.entities import Cart, CheckoutAttempt
from storefront.domain.enums import PaymentType
from storefront.domain.identifiers import SessionId
from storefront.domain.ports import CheckoutAttemptRepository, PaymentProvider
from storefront.domain.services import CartToCheckoutConverter, RedirectUrlBuilder
from storefront.domain.value_objects import Consumer, ProviderCheckout

from .errors import CartNotFoundError, EmptyCartError, ProviderNotConfiguredError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InitiateCheckoutResult:
    """チェックアウト開始結果."""

    cart: Cart
    checkout: ProviderCheckout


class InitiateCheckoutUseCase:
    """セッションのカートからプロバイダのチェックアウトセッションを作成するユースケース.

    決済記録はまだ作成せず、カートもOPENのまま残す。
    """

    def __init__(
        self,
        cart_store: CartStore,
        checkout_attempt_repository: CheckoutAttemptRepository,
        payment_provider: PaymentProvider,
        settings: Settings,
    ) -> None:
        """初期化."""
        self._cart_store = cart_store
        self._checkout_attempt_repository = checkout_attempt_repository
        self._payment_provider = payment_provider
        self._settings = settings

    def execute(
        self,
        session_id: SessionId,
        consumer: Consumer,
        is_cash_app_pay: bool = False,
        request_host: str | None = None,
    ) -> InitiateCheckoutResult:
        """チェックアウトを開始する.

        Args:
            session_id: セッションID
            consumer: 購入者情報
            is_cash_app_pay: Cash App Pay で支払うか
            request_host: リダイレクト先のベースURLを推定するためのHost

        Returns:
            カートのスナップショットとプロバイダのチェックアウト情報

        Raises:
            ProviderNotConfiguredError: 決済プロバイダの認証情報が未設定の場合
            CartNotFoundError: セッションにOPENカートが無い場合
            EmptyCartError: カートが空の場合
            PaymentProviderError: プロバイダ呼び出しに失敗した場合
        """
        if not self._settings.provider_configured:
            raise ProviderNotConfiguredError(
                "Afterpay is not configured. Please set AFTERPAY_MERCHANT_ID "
                "and AFTERPAY_SECRET_KEY environment variables."
            )

        payment_type = PaymentType.from_cash_app_pay_flag(is_cash_app_pay)
        base_url = RedirectUrlBuilder.resolve_base_url(
            self._settings.redirect_base_url,
            request_host,
            self._settings.is_production,
        )
        redirect_urls = RedirectUrlBuilder.build(base_url, payment_type)

        # ロック内で取得したスナップショットだけを使い、プロバイダ呼び出し中はロックを持たない
        cart = self._cart_store.get_open_cart_for_session(session_id)
        if cart is None:
            raise CartNotFoundError("Cart not found for this session.")
        if cart.is_empty():
            raise EmptyCartError("Cart is empty. Add items before creating checkout.")

        request = CartToCheckoutConverter.convert(
            cart=cart,
            consumer=consumer,
            redirect_urls=redirect_urls,
            is_cash_app_pay=is_cash_app_pay,
        )
        attempt = CheckoutAttempt.request(
            session_id=session_id,
            cart_id=cart.cart_id,
            payment_type=payment_type,
            amount=cart.get_total(),
        )

        checkout = self._payment_provider.create_checkout(request)

        attempt.mark_session_created(checkout)
        self._checkout_attempt_repository.save(attempt)
        logger.info(
            "Checkout started for cart %s with %s: amount=%s",
            cart.cart_id,
            payment_type.value,
            request.amount,
        )
        return InitiateCheckoutResult(cart=cart, checkout=checkout)
