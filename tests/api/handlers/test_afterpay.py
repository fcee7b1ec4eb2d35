"""Afterpay直接呼び出しAPIハンドラーのテスト."""
import json

from storefront.api.dependencies import Dependencies
from storefront.api.handlers.afterpay import create_checkout, get_configuration
from storefront.config import Settings
from storefront.domain.ports import PaymentProviderError


def _checkout_body(**overrides) -> dict:
    body = {
        "amount": {"amount": "12.34", "currency": "USD"},
        "consumer": {"email": "buyer@example.com"},
        "merchant": {
            "redirectConfirmUrl": "https://shop.test/confirm",
            "redirectCancelUrl": "https://shop.test/cancel",
        },
    }
    body.update(overrides)
    return body


class TestGetConfiguration:
    """GET /afterpay/configuration のテスト."""

    def test_加盟店設定を返す(self, provider) -> None:
        response = get_configuration({}, None)
        assert response["statusCode"] == 200
        body = json.loads(response["body"])
        assert body["configuration"]["minimumAmount"]["amount"] == "1.00"

    def test_未設定なら503(self) -> None:
        Dependencies.set_settings(Settings())
        response = get_configuration({}, None)
        assert response["statusCode"] == 503

    def test_プロバイダエラーは502(self, provider) -> None:
        provider.set_configuration_error(PaymentProviderError("boom", status_code=500))
        response = get_configuration({}, None)
        assert response["statusCode"] == 502


class TestCreateCheckout:
    """POST /afterpay/checkout のテスト."""

    def test_チェックアウトが作成される(self, provider) -> None:
        response = create_checkout({"body": json.dumps(_checkout_body(isCashAppPay=True))}, None)

        assert response["statusCode"] == 200
        assert json.loads(response["body"])["token"] == "tok_1"
        request = provider.checkout_requests[0]
        assert request.amount == "12.34"
        assert request.is_cash_app_pay is True
        assert request.redirect_urls.cancel_url == "https://shop.test/cancel"

    def test_amountが無い場合400(self, provider) -> None:
        body = _checkout_body()
        del body["amount"]
        response = create_checkout({"body": json.dumps(body)}, None)
        assert response["statusCode"] == 400
        assert provider.checkout_requests == []

    def test_金額形式が不正な場合400(self, provider) -> None:
        body = _checkout_body(amount={"amount": "12.3", "currency": "USD"})
        response = create_checkout({"body": json.dumps(body)}, None)
        assert response["statusCode"] == 400

    def test_emailが無い場合400(self, provider) -> None:
        response = create_checkout({"body": json.dumps(_checkout_body(consumer={}))}, None)
        assert response["statusCode"] == 400
