"""Settingsのテスト."""
import os
from unittest.mock import patch

import pytest

from storefront.config import Settings


class TestSettingsFromEnv:
    """環境変数からの読み込みテスト."""

    @patch.dict(os.environ, {}, clear=True)
    def test_既定値(self) -> None:
        settings = Settings.from_env()
        assert settings.app_env == "development"
        assert settings.afterpay_api_url == "https://global-api-sandbox.afterpay.com"
        assert settings.provider_timeout == 30
        assert settings.cart_ttl_hours == 24
        assert settings.redirect_base_url is None
        assert not settings.is_production
        assert not settings.provider_configured

    @patch.dict(
        os.environ,
        {
            "APP_ENV": "production",
            "REDIRECT_BASE_URL": "https://shop.test",
            "AFTERPAY_MERCHANT_ID": "merchant",
            "AFTERPAY_SECRET_KEY": "secret",
            "PAYMENT_PROVIDER_TIMEOUT": "15",
            "CART_TTL_HOURS": "48",
        },
        clear=True,
    )
    def test_環境変数から読み込む(self) -> None:
        settings = Settings.from_env()
        assert settings.is_production
        assert settings.redirect_base_url == "https://shop.test"
        assert settings.provider_configured
        assert settings.provider_timeout == 15
        assert settings.cart_ttl_hours == 48

    @patch.dict(os.environ, {"PAYMENT_PROVIDER_TIMEOUT": "abc"}, clear=True)
    def test_数値でないタイムアウトはエラー(self) -> None:
        with pytest.raises(ValueError, match="PAYMENT_PROVIDER_TIMEOUT must be an integer"):
            Settings.from_env()

    @patch.dict(os.environ, {"CART_TTL_HOURS": "0"}, clear=True)
    def test_0以下のTTLはエラー(self) -> None:
        with pytest.raises(ValueError, match="CART_TTL_HOURS must be positive"):
            Settings.from_env()

    def test_秘密鍵だけでは未設定扱い(self) -> None:
        assert not Settings(afterpay_secret_key="secret").provider_configured

    def test_mockプロバイダは認証情報なしで設定済み扱い(self) -> None:
        assert Settings(payment_provider="mock").provider_configured
