"""カタログ商品エンティティ."""
from __future__ import annotations

from dataclasses import dataclass

from ..identifiers import ItemId
from ..value_objects import Money


@dataclass(frozen=True)
class Item:
    """購入可能な商品（起動時に一度だけ読み込まれ、変更されない）."""

    item_id: ItemId
    name: str
    description: str
    price: Money
    image_url: str
    sku: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.name:
            raise ValueError("Item name cannot be empty")
        if not self.sku:
            raise ValueError("Item SKU cannot be empty")
