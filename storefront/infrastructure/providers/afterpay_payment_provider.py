"""Afterpay 決済プロバイダ実装.

Afterpay Global API v2 でチェックアウト作成・加盟店設定取得を行う。
Cash App Pay も同じ API に isCashAppPay フラグを付けて作成する。
"""
import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from storefront.domain.ports import (
    PaymentProvider,
    PaymentProviderError,
    PaymentProviderTimeoutError,
)
from storefront.domain.value_objects import CheckoutRequest, ProviderCheckout

logger = logging.getLogger(__name__)

USER_AGENT = "Afterpay-Storefront-Backend"


class AfterpayPaymentProvider(PaymentProvider):
    """Afterpay Global API 経由の決済プロバイダ."""

    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        merchant_id: str,
        secret_key: str,
        base_url: str,
        timeout: int | None = None,
    ) -> None:
        """初期化."""
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout or self.DEFAULT_TIMEOUT
        self._session = self._create_session(merchant_id, secret_key)

    def _create_session(self, merchant_id: str, secret_key: str) -> requests.Session:
        """Basic 認証付きの HTTP セッションを作成する.

        チェックアウト作成(POST)は重複作成を避けるためリトライしない。
        リトライは冪等な GET のみ。
        """
        session = requests.Session()
        session.auth = (merchant_id, secret_key)
        session.headers.update({
            "User-Agent": USER_AGENT,
            "Content-Type": "application/json",
            "Accept": "application/json",
        })
        retry_strategy = Retry(
            total=3,
            backoff_factor=0.5,
            status_forcelist=[500, 502, 503, 504],
            allowed_methods=frozenset({"GET"}),
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        session.mount("http://", adapter)
        session.mount("https://", adapter)
        return session

    def create_checkout(self, request: CheckoutRequest) -> ProviderCheckout:
        """チェックアウトセッションを作成する."""
        url = f"{self._base_url}/v2/checkouts"
        # 購入者情報はログに出さない
        logger.info(
            "Creating checkout: amount=%s currency=%s is_cash_app_pay=%s",
            request.amount,
            request.currency,
            request.is_cash_app_pay,
        )
        response = self._send("POST", url, json=request.to_payload())

        try:
            checkout = ProviderCheckout.from_response(response.json())
        except (ValueError, KeyError) as e:
            raise PaymentProviderError(
                "Afterpay API returned an unexpected checkout response",
                status_code=response.status_code,
                body=response.text,
            ) from e

        logger.info("Checkout created: token=%s expires=%s", checkout.token, checkout.expires)
        return checkout

    def get_configuration(self) -> dict[str, Any]:
        """加盟店設定を取得する."""
        response = self._send("GET", f"{self._base_url}/v2/configuration")
        try:
            return response.json()
        except ValueError as e:
            raise PaymentProviderError(
                "Afterpay API returned an invalid configuration response",
                status_code=response.status_code,
                body=response.text,
            ) from e

    def _send(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """リクエストを送信し、非2xx応答・通信失敗をプロバイダエラーに変換する."""
        try:
            response = self._session.request(method, url, timeout=self._timeout, **kwargs)
        except requests.Timeout as e:
            logger.error("Afterpay API timed out: %s %s", method, url)
            raise PaymentProviderTimeoutError(
                f"Afterpay API timed out after {self._timeout}s"
            ) from e
        except requests.RequestException as e:
            logger.error("Afterpay API request failed: %s %s: %s", method, url, e)
            raise PaymentProviderError(f"Afterpay API request failed: {e}") from e

        if not response.ok:
            logger.error(
                "Afterpay API error: %s %s status=%s body=%s",
                method,
                url,
                response.status_code,
                response.text,
            )
            raise PaymentProviderError(
                f"Afterpay API error: {response.status_code}",
                status_code=response.status_code,
                body=response.text,
            )
        return response
