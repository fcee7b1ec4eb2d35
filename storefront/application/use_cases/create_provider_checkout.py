"""カートを介さないチェックアウト作成ユースケース."""
from storefront.config import Settings
from storefront.domain.ports import PaymentProvider
from storefront.domain.value_objects import CheckoutRequest, ProviderCheckout

from .errors import ProviderNotConfiguredError


class CreateProviderCheckoutUseCase:
    """呼び出し側が組み立てたリクエストをそのままプロバイダに渡すユースケース."""

    def __init__(self, payment_provider: PaymentProvider, settings: Settings) -> None:
        """初期化."""
        self._payment_provider = payment_provider
        self._settings = settings

    def execute(self, request: CheckoutRequest) -> ProviderCheckout:
        """チェックアウトを作成する.

        Raises:
            ProviderNotConfiguredError: 認証情報が未設定の場合
            PaymentProviderError: プロバイダ呼び出しに失敗した場合
        """
        if not self._settings.provider_configured:
            raise ProviderNotConfiguredError("Afterpay is not configured.")
        return self._payment_provider.create_checkout(request)
