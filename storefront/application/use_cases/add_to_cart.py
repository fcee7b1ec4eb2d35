"""カート追加ユースケース."""
from storefront.application.services import CartStore
from storefront.domain.entities import Cart
from storefront.domain.identifiers import ItemId, SessionId
from storefront.domain.ports import ItemCatalog

from .errors import ItemNotFoundError


class AddToCartUseCase:
    """カタログ商品をセッションのカートに1つ追加するユースケース."""

    def __init__(self, item_catalog: ItemCatalog, cart_store: CartStore) -> None:
        """初期化.

        Args:
            item_catalog: 商品カタログ
            cart_store: カートストア
        """
        self._item_catalog = item_catalog
        self._cart_store = cart_store

    def execute(self, session_id: SessionId, item_id: ItemId) -> Cart:
        """商品をカートに追加する.

        Args:
            session_id: セッションID
            item_id: 商品ID

        Returns:
            更新後のカート

        Raises:
            ItemNotFoundError: 商品がカタログに存在しない場合
        """
        item = self._item_catalog.find_by_id(item_id)
        if item is None:
            raise ItemNotFoundError(f"Item not found: {item_id}")

        return self._cart_store.add_item(session_id, item)
