"""カート明細エンティティ."""
from __future__ import annotations

from dataclasses import dataclass, replace

from ..identifiers import ItemId
from ..value_objects import Money


@dataclass(frozen=True)
class CartLine:
    """カート内の1商品分の明細（Cart集約内でのみ意味を持つ）."""

    item_id: ItemId
    quantity: int
    unit_price: Money  # 最初に追加した時点の価格

    def __post_init__(self) -> None:
        """バリデーション."""
        if isinstance(self.quantity, bool) or not isinstance(self.quantity, int):
            raise ValueError("Quantity must be an integer")
        if self.quantity < 1:
            raise ValueError("Quantity must be at least 1")

    @classmethod
    def create(cls, item_id: ItemId, unit_price: Money) -> CartLine:
        """数量1の明細を作成する."""
        return cls(item_id=item_id, quantity=1, unit_price=unit_price)

    def increment(self) -> CartLine:
        """数量を1増やした明細を返す（価格は据え置き）."""
        return replace(self, quantity=self.quantity + 1)

    def with_quantity(self, quantity: int) -> CartLine:
        """数量を差し替えた明細を返す."""
        return replace(self, quantity=quantity)

    def get_subtotal(self) -> Money:
        """小計を計算する."""
        return self.unit_price.multiply(self.quantity)
