"""商品カタログインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Item
from ..identifiers import ItemId


class ItemCatalog(ABC):
    """読み取り専用の商品カタログ."""

    @abstractmethod
    def find_by_id(self, item_id: ItemId) -> Item | None:
        """商品IDで検索する."""
        pass

    @abstractmethod
    def find_all(self) -> list[Item]:
        """全商品を取得する."""
        pass
