"""API レスポンスユーティリティ."""
import json
import os
from typing import Any

DEV_ORIGINS = [
    "http://localhost:5173",
    "http://localhost:3000",
    "http://127.0.0.1:5173",
    "http://127.0.0.1:3000",
]


def get_allowed_origins() -> list[str]:
    """許可するオリジンの一覧を返す.

    ALLOWED_ORIGINS（カンマ区切り）に加え、ALLOW_DEV_ORIGINS=true のときはローカル開発用を許可する。
    """
    origins = [o.strip() for o in os.environ.get("ALLOWED_ORIGINS", "").split(",") if o.strip()]
    if os.environ.get("ALLOW_DEV_ORIGINS") == "true":
        origins.extend(DEV_ORIGINS)
    return origins


def get_cors_origin(event: dict | None = None) -> str:
    """リクエストの Origin ヘッダーから許可するオリジンを返す."""
    allowed = get_allowed_origins()
    if event:
        headers = event.get("headers") or {}
        origin = headers.get("origin") or headers.get("Origin") or ""
        if origin in allowed:
            return origin
    return allowed[0] if allowed else ""


def _headers(event: dict | None) -> dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": get_cors_origin(event),
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Headers": "Content-Type,Cookie",
        "Access-Control-Allow-Methods": "GET,POST,PUT,DELETE,OPTIONS",
    }


def success_response(body: Any, status_code: int = 200, event: dict | None = None) -> dict:
    """成功レスポンスを生成する.

    Args:
        body: レスポンスボディ
        status_code: HTTPステータスコード
        event: API Gatewayイベント（CORS Origin判定用）

    Returns:
        API Gatewayレスポンス形式の辞書
    """
    return {
        "statusCode": status_code,
        "headers": _headers(event),
        "body": json.dumps(body, ensure_ascii=False, default=str),
    }


def error_response(
    message: str, status_code: int = 400, error_code: str | None = None, event: dict | None = None,
) -> dict:
    """エラーレスポンスを生成する.

    Args:
        message: エラーメッセージ
        status_code: HTTPステータスコード
        error_code: エラーコード
        event: API Gatewayイベント（CORS Origin判定用）

    Returns:
        API Gatewayレスポンス形式の辞書
    """
    body = {"error": {"message": message}}
    if error_code:
        body["error"]["code"] = error_code

    return {
        "statusCode": status_code,
        "headers": _headers(event),
        "body": json.dumps(body, ensure_ascii=False),
    }


def not_found_response(resource: str = "Resource", event: dict | None = None) -> dict:
    """404 Not Foundレスポンスを生成する."""
    return error_response(f"{resource} not found", status_code=404, error_code="NOT_FOUND", event=event)


def bad_request_response(message: str, event: dict | None = None) -> dict:
    """400 Bad Requestレスポンスを生成する."""
    return error_response(message, status_code=400, error_code="BAD_REQUEST", event=event)


def precondition_failed_response(message: str, event: dict | None = None) -> dict:
    """前提条件違反（空のカートなど）の400レスポンスを生成する."""
    return error_response(message, status_code=400, error_code="PRECONDITION_FAILED", event=event)


def provider_error_response(
    message: str = "Payment provider request failed", event: dict | None = None,
) -> dict:
    """502 Bad Gatewayレスポンスを生成する."""
    return error_response(message, status_code=502, error_code="PROVIDER_ERROR", event=event)


def service_unavailable_response(message: str, event: dict | None = None) -> dict:
    """503 Service Unavailableレスポンスを生成する."""
    return error_response(message, status_code=503, error_code="SERVICE_UNAVAILABLE", event=event)


def provider_timeout_response(
    message: str = "Payment provider timed out", event: dict | None = None,
) -> dict:
    """504 Gateway Timeoutレスポンスを生成する."""
    return error_response(message, status_code=504, error_code="PROVIDER_TIMEOUT", event=event)
