"""商品API ハンドラー."""
from typing import Any

from storefront.api.dependencies import Dependencies
from storefront.api.response import success_response
from storefront.api.serializers import item_to_dict
from storefront.application.use_cases import ListItemsUseCase


def get_items(event: dict, context: Any) -> dict:
    """商品一覧を取得する.

    GET /items
    """
    use_case = ListItemsUseCase(Dependencies.get_item_catalog())
    items = use_case.execute()
    return success_response({"items": [item_to_dict(item) for item in items]}, event=event)
