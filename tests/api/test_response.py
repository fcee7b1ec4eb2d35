"""レスポンスヘルパーのテスト."""
import json
import os
from unittest.mock import patch

from storefront.api.response import (
    bad_request_response,
    get_cors_origin,
    not_found_response,
    precondition_failed_response,
    provider_error_response,
    provider_timeout_response,
    service_unavailable_response,
    success_response,
)


def _make_event(origin: str) -> dict:
    return {"headers": {"origin": origin}}


class TestGetCorsOrigin:
    """get_cors_originのテスト."""

    @patch.dict(os.environ, {"ALLOWED_ORIGINS": "https://shop.test,https://www.shop.test"}, clear=True)
    def test_許可オリジンはそのまま返す(self) -> None:
        assert get_cors_origin(_make_event("https://www.shop.test")) == "https://www.shop.test"

    @patch.dict(os.environ, {"ALLOWED_ORIGINS": "https://shop.test"}, clear=True)
    def test_非許可オリジンは先頭の許可オリジンを返す(self) -> None:
        assert get_cors_origin(_make_event("https://evil.example.com")) == "https://shop.test"

    @patch.dict(os.environ, {"ALLOWED_ORIGINS": "https://shop.test"}, clear=True)
    def test_開発用オリジンは既定で許可されない(self) -> None:
        assert get_cors_origin(_make_event("http://localhost:5173")) == "https://shop.test"

    @patch.dict(os.environ, {"ALLOW_DEV_ORIGINS": "true"}, clear=True)
    def test_ALLOW_DEV_ORIGINSで開発用オリジンを許可する(self) -> None:
        assert get_cors_origin(_make_event("http://localhost:5173")) == "http://localhost:5173"

    @patch.dict(os.environ, {}, clear=True)
    def test_許可オリジンが無い場合は空文字(self) -> None:
        assert get_cors_origin(None) == ""


class TestResponses:
    """レスポンス生成のテスト."""

    def test_成功レスポンス(self) -> None:
        response = success_response({"cart": None})
        assert response["statusCode"] == 200
        assert response["headers"]["Access-Control-Allow-Credentials"] == "true"
        assert json.loads(response["body"]) == {"cart": None}

    def test_エラーレスポンスのステータスとコード(self) -> None:
        cases = [
            (bad_request_response("bad"), 400, "BAD_REQUEST"),
            (not_found_response("Cart"), 404, "NOT_FOUND"),
            (precondition_failed_response("empty"), 400, "PRECONDITION_FAILED"),
            (provider_error_response(), 502, "PROVIDER_ERROR"),
            (service_unavailable_response("unconfigured"), 503, "SERVICE_UNAVAILABLE"),
            (provider_timeout_response(), 504, "PROVIDER_TIMEOUT"),
        ]
        for response, status_code, code in cases:
            assert response["statusCode"] == status_code
            assert json.loads(response["body"])["error"]["code"] == code

    def test_not_foundのメッセージ(self) -> None:
        body = json.loads(not_found_response("Cart")["body"])
        assert body["error"]["message"] == "Cart not found"
