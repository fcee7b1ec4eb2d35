"""商品一覧取得ユースケース."""
from storefront.domain.entities import Item
from storefront.domain.ports import ItemCatalog


class ListItemsUseCase:
    """カタログの全商品を取得するユースケース."""

    def __init__(self, item_catalog: ItemCatalog) -> None:
        """初期化."""
        self._item_catalog = item_catalog

    def execute(self) -> list[Item]:
        """全商品を取得する."""
        return self._item_catalog.find_all()
