"""Cookie によるセッション識別."""
import logging
from dataclasses import dataclass
from http.cookies import CookieError, SimpleCookie

from storefront.domain.identifiers import SessionId

from .request import get_header

logger = logging.getLogger(__name__)

SESSION_COOKIE_NAME = "sessionId"
SESSION_MAX_AGE_SECONDS = 7 * 24 * 60 * 60
MAX_SESSION_ID_LENGTH = 128


@dataclass(frozen=True)
class RequestSession:
    """リクエストに紐づくセッション."""

    session_id: SessionId
    is_new: bool


def _read_cookie(event: dict) -> str | None:
    # HTTP API (payload v2) は cookies 配列、REST API は Cookie ヘッダー
    raw_cookies = event.get("cookies") or []
    cookie_header = "; ".join(raw_cookies) or get_header(event, "cookie")
    if not cookie_header:
        return None

    cookie = SimpleCookie()
    try:
        cookie.load(cookie_header)
    except CookieError:
        logger.warning("Ignoring malformed Cookie header")
        return None

    morsel = cookie.get(SESSION_COOKIE_NAME)
    if morsel is None or not morsel.value or len(morsel.value) > MAX_SESSION_ID_LENGTH:
        return None
    return morsel.value


def resolve_session(event: dict) -> RequestSession:
    """Cookie からセッションを取得する（無ければ新しく発行する）."""
    value = _read_cookie(event)
    if value is not None:
        return RequestSession(session_id=SessionId(value), is_new=False)
    return RequestSession(session_id=SessionId.generate(), is_new=True)


def attach_session_cookie(response: dict, session: RequestSession, secure: bool) -> dict:
    """レスポンスにセッション Cookie を付与する.

    有効期限はリクエストのたびに延長する。
    """
    attributes = [
        f"{SESSION_COOKIE_NAME}={session.session_id}",
        "Path=/",
        f"Max-Age={SESSION_MAX_AGE_SECONDS}",
        "HttpOnly",
        "SameSite=Lax",
    ]
    if secure:
        attributes.append("Secure")
    response["headers"]["Set-Cookie"] = "; ".join(attributes)
    return response
