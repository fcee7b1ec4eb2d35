"""環境変数から読み込むアプリケーション設定."""
from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_AFTERPAY_API_URL = "https://global-api-sandbox.afterpay.com"
DEFAULT_PROVIDER_TIMEOUT = 30
DEFAULT_CART_TTL_HOURS = 24


def _get_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError as e:
        raise ValueError(f"{name} must be an integer: {raw}") from e
    if value <= 0:
        raise ValueError(f"{name} must be positive: {raw}")
    return value


@dataclass(frozen=True)
class Settings:
    """アプリケーション設定.

    決済プロバイダの認証情報が無い場合もアプリ自体は起動し、
    チェックアウト時に 503 を返す。
    """

    app_env: str = "development"
    redirect_base_url: str | None = None
    afterpay_merchant_id: str | None = None
    afterpay_secret_key: str | None = None
    afterpay_api_url: str = DEFAULT_AFTERPAY_API_URL
    payment_provider: str = "afterpay"
    provider_timeout: int = DEFAULT_PROVIDER_TIMEOUT
    cart_ttl_hours: int = DEFAULT_CART_TTL_HOURS

    @classmethod
    def from_env(cls) -> Settings:
        """環境変数から設定を読み込む.

        Raises:
            ValueError: 数値項目が不正な場合
        """
        return cls(
            app_env=os.environ.get("APP_ENV", "development"),
            redirect_base_url=os.environ.get("REDIRECT_BASE_URL") or None,
            afterpay_merchant_id=os.environ.get("AFTERPAY_MERCHANT_ID") or None,
            afterpay_secret_key=os.environ.get("AFTERPAY_SECRET_KEY") or None,
            afterpay_api_url=os.environ.get("AFTERPAY_API_URL", DEFAULT_AFTERPAY_API_URL),
            payment_provider=os.environ.get("PAYMENT_PROVIDER", "afterpay"),
            provider_timeout=_get_int("PAYMENT_PROVIDER_TIMEOUT", DEFAULT_PROVIDER_TIMEOUT),
            cart_ttl_hours=_get_int("CART_TTL_HOURS", DEFAULT_CART_TTL_HOURS),
        )

    @property
    def is_production(self) -> bool:
        """本番環境か判定する."""
        return self.app_env == "production"

    @property
    def provider_configured(self) -> bool:
        """決済プロバイダの認証情報が設定されているか判定する."""
        if self.payment_provider == "mock":
            return True
        return bool(self.afterpay_merchant_id and self.afterpay_secret_key)
