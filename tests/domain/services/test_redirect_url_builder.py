"""RedirectUrlBuilderのテスト."""
import pytest

from storefront.domain.enums import PaymentType
from storefront.domain.services import RedirectUrlBuilder


class TestResolveBaseUrl:
    """ベースURL決定のテスト."""

    def test_設定値を優先し末尾のスラッシュを除く(self) -> None:
        base = RedirectUrlBuilder.resolve_base_url("https://shop.test/", "ignored.test", True)
        assert base == "https://shop.test"

    def test_本番ではhttpsでホストから推定する(self) -> None:
        assert RedirectUrlBuilder.resolve_base_url(None, "shop.test", True) == "https://shop.test"

    def test_本番以外ではhttpでホストから推定する(self) -> None:
        base = RedirectUrlBuilder.resolve_base_url(None, "localhost:3000", False)
        assert base == "http://localhost:3000"

    def test_設定値もホストも無い場合エラー(self) -> None:
        with pytest.raises(ValueError, match="request host"):
            RedirectUrlBuilder.resolve_base_url(None, None, False)


class TestBuild:
    """リダイレクトURL組み立てのテスト."""

    def test_確認とキャンセルが同じ結果コールバックを指す(self) -> None:
        urls = RedirectUrlBuilder.build("https://shop.test", PaymentType.AFTERPAY)
        assert urls.confirm_url == "https://shop.test/cart/payment/result?provider=afterpay"
        assert urls.cancel_url == urls.confirm_url

    def test_CashAppPayの場合はproviderがcash_app_pay(self) -> None:
        urls = RedirectUrlBuilder.build("https://shop.test", PaymentType.CASH_APP_PAY)
        assert urls.confirm_url.endswith("?provider=cash_app_pay")
