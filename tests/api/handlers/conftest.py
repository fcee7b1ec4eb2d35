"""ハンドラーテスト共通のフィクスチャ."""
import pytest

from storefront.api.dependencies import Dependencies
from storefront.config import Settings
from storefront.infrastructure.providers import MockPaymentProvider


@pytest.fixture(autouse=True)
def reset_dependencies():
    """各テスト前に依存性をリセット."""
    Dependencies.reset()
    Dependencies.set_settings(Settings(payment_provider="mock", redirect_base_url="https://shop.test"))
    yield
    Dependencies.reset()


@pytest.fixture
def provider() -> MockPaymentProvider:
    mock_provider = MockPaymentProvider(token="tok_1")
    Dependencies.set_payment_provider(mock_provider)
    return mock_provider
