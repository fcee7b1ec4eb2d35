"""決済プロバイダインターフェース."""
from abc import ABC, abstractmethod
from typing import Any

from ..value_objects import CheckoutRequest, ProviderCheckout


class PaymentProviderError(Exception):
    """決済プロバイダのエラー（非2xx応答または通信失敗）."""

    def __init__(self, message: str, status_code: int | None = None, body: str | None = None) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(message)


class PaymentProviderTimeoutError(PaymentProviderError):
    """決済プロバイダ呼び出しのタイムアウト."""

    pass


class PaymentProvider(ABC):
    """後払い決済プロバイダ（Afterpay / Cash App Pay）のインターフェース."""

    @abstractmethod
    def create_checkout(self, request: CheckoutRequest) -> ProviderCheckout:
        """チェックアウトセッションを作成する.

        Raises:
            PaymentProviderError: プロバイダがエラーを返した、または通信に失敗した場合
        """
        pass

    @abstractmethod
    def get_configuration(self) -> dict[str, Any]:
        """加盟店設定（最小・最大注文金額など）を取得する.

        Raises:
            PaymentProviderError: プロバイダがエラーを返した、または通信に失敗した場合
        """
        pass
