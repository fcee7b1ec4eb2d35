"""決済プロバイダ設定取得ユースケース."""
from typing import Any

from storefront.config import Settings
from storefront.domain.ports import PaymentProvider

from .errors import ProviderNotConfiguredError


class GetProviderConfigurationUseCase:
    """プロバイダの加盟店設定（注文金額の上下限など）を取得するユースケース."""

    def __init__(self, payment_provider: PaymentProvider, settings: Settings) -> None:
        """初期化."""
        self._payment_provider = payment_provider
        self._settings = settings

    def execute(self) -> dict[str, Any]:
        """加盟店設定を取得する.

        Raises:
            ProviderNotConfiguredError: 認証情報が未設定の場合
            PaymentProviderError: プロバイダ呼び出しに失敗した場合
        """
        if not self._settings.provider_configured:
            raise ProviderNotConfiguredError("Afterpay is not configured.")
        return self._payment_provider.get_configuration()
