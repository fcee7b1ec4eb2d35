"""決済プロバイダのモック実装."""
import uuid
from datetime import datetime, timedelta, timezone
from typing import Any

from storefront.domain.ports import PaymentProvider
from storefront.domain.value_objects import CheckoutRequest, ProviderCheckout


class MockPaymentProvider(PaymentProvider):
    """決済プロバイダのモック実装（ローカル開発・テスト用、エラー設定可能）."""

    def __init__(self, token: str | None = None) -> None:
        """初期化.

        Args:
            token: 固定で返すチェックアウトトークン（省略時は毎回生成）
        """
        self._token = token
        self._checkout_error: Exception | None = None
        self._configuration_error: Exception | None = None
        self.checkout_requests: list[CheckoutRequest] = []

    def set_checkout_error(self, error: Exception) -> None:
        """チェックアウト作成時にエラーを発生させる設定."""
        self._checkout_error = error

    def set_configuration_error(self, error: Exception) -> None:
        """設定取得時にエラーを発生させる設定."""
        self._configuration_error = error

    def create_checkout(self, request: CheckoutRequest) -> ProviderCheckout:
        """チェックアウトを作成する（エラー設定時は例外送出）."""
        self.checkout_requests.append(request)
        if self._checkout_error:
            raise self._checkout_error
        token = self._token or f"mock_{uuid.uuid4().hex}"
        expires = datetime.now(timezone.utc) + timedelta(hours=3)
        return ProviderCheckout(
            token=token,
            expires=expires.isoformat(),
            redirect_checkout_url=f"https://portal.sandbox.afterpay.com/checkout/?token={token}",
        )

    def get_configuration(self) -> dict[str, Any]:
        """加盟店設定を取得する（エラー設定時は例外送出）."""
        if self._configuration_error:
            raise self._configuration_error
        return {
            "minimumAmount": {"amount": "1.00", "currency": "USD"},
            "maximumAmount": {"amount": "2000.00", "currency": "USD"},
        }
