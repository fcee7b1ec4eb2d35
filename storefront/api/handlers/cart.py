"""カートAPI ハンドラー."""
from typing import Any

from storefront.api.dependencies import Dependencies
from storefront.api.request import get_body, get_path_parameter
from storefront.api.response import (
    bad_request_response,
    not_found_response,
    success_response,
)
from storefront.api.serializers import cart_to_dict
from storefront.api.session import RequestSession, attach_session_cookie, resolve_session
from storefront.application.use_cases import (
    AddToCartUseCase,
    CartItemNotFoundError,
    CartNotFoundError,
    GetCartUseCase,
    ItemNotFoundError,
    RemoveFromCartUseCase,
    UpdateCartItemQuantityUseCase,
)
from storefront.domain.identifiers import ItemId


def _respond(response: dict, session: RequestSession) -> dict:
    return attach_session_cookie(response, session, Dependencies.get_settings().is_production)


def get_cart(event: dict, context: Any) -> dict:
    """セッションのカートを取得する.

    GET /cart

    Returns:
        カート情報（OPENカートが無い場合は cart: null）
    """
    session = resolve_session(event)
    use_case = GetCartUseCase(Dependencies.get_cart_store())
    cart = use_case.execute(session.session_id)

    body = {"cart": cart_to_dict(cart) if cart else None}
    return _respond(success_response(body, event=event), session)


def add_to_cart(event: dict, context: Any) -> dict:
    """商品をカートに1つ追加する.

    POST /cart/items

    Request Body:
        itemId: 商品ID

    Returns:
        更新後のカート
    """
    session = resolve_session(event)

    try:
        body = get_body(event)
    except ValueError as e:
        return _respond(bad_request_response(str(e), event=event), session)

    item_id_str = body.get("itemId")
    if not item_id_str:
        return _respond(bad_request_response("itemId is required", event=event), session)
    if not isinstance(item_id_str, str) or not item_id_str.strip():
        return _respond(
            bad_request_response("itemId must be a non-empty string", event=event), session
        )

    use_case = AddToCartUseCase(Dependencies.get_item_catalog(), Dependencies.get_cart_store())
    try:
        cart = use_case.execute(session.session_id, ItemId(item_id_str))
    except ItemNotFoundError:
        return _respond(not_found_response("Item", event=event), session)

    return _respond(success_response({"cart": cart_to_dict(cart)}, event=event), session)


def update_cart_item(event: dict, context: Any) -> dict:
    """明細の数量を変更する（0以下の場合は明細を削除）.

    PUT /cart/items/{item_id}

    Request Body:
        quantity: 数量（整数）
    """
    session = resolve_session(event)

    item_id_str = get_path_parameter(event, "item_id")
    if not item_id_str:
        return _respond(bad_request_response("item_id is required", event=event), session)

    try:
        body = get_body(event)
    except ValueError as e:
        return _respond(bad_request_response(str(e), event=event), session)

    quantity = body.get("quantity")
    if quantity is None:
        return _respond(bad_request_response("quantity is required", event=event), session)
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        return _respond(bad_request_response("quantity must be an integer", event=event), session)

    use_case = UpdateCartItemQuantityUseCase(Dependencies.get_cart_store())
    try:
        cart = use_case.execute(session.session_id, ItemId(item_id_str), quantity)
    except CartNotFoundError:
        return _respond(not_found_response("Cart", event=event), session)
    except CartItemNotFoundError:
        return _respond(not_found_response("Cart item", event=event), session)

    return _respond(success_response({"cart": cart_to_dict(cart)}, event=event), session)


def remove_from_cart(event: dict, context: Any) -> dict:
    """明細を削除する.

    DELETE /cart/items/{item_id}
    """
    session = resolve_session(event)

    item_id_str = get_path_parameter(event, "item_id")
    if not item_id_str:
        return _respond(bad_request_response("item_id is required", event=event), session)

    use_case = RemoveFromCartUseCase(Dependencies.get_cart_store())
    try:
        cart = use_case.execute(session.session_id, ItemId(item_id_str))
    except CartNotFoundError:
        return _respond(not_found_response("Cart", event=event), session)

    return _respond(success_response({"cart": cart_to_dict(cart)}, event=event), session)
