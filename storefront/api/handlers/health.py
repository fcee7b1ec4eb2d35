"""ヘルスチェックAPI ハンドラー."""
from datetime import datetime, timezone
from typing import Any

from storefront.api.dependencies import Dependencies
from storefront.api.response import success_response
from storefront.api.session import attach_session_cookie, resolve_session


def health_check(event: dict, context: Any) -> dict:
    """稼働状況を返す.

    GET /health
    """
    return success_response(
        {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()},
        event=event,
    )


def get_me(event: dict, context: Any) -> dict:
    """現在のセッションIDを返す.

    GET /me
    """
    session = resolve_session(event)
    response = success_response({"session_id": str(session.session_id)}, event=event)
    return attach_session_cookie(response, session, Dependencies.get_settings().is_production)
