"""カート集約ルート."""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone

from ..enums import CartStatus
from ..exceptions import CartNotOpenError, InvalidStatusTransitionError
from ..identifiers import CartId, ItemId, PaymentId, SessionId
from ..value_objects import Money

from .cart_line import CartLine
from .item import Item


@dataclass
class Cart:
    """セッションごとの購入予定商品を保持するコンテナ（集約ルート）.

    合計金額は保持せず、常に明細から再計算する。
    """

    cart_id: CartId
    session_id: SessionId
    _lines: list[CartLine] = field(default_factory=list)
    status: CartStatus = CartStatus.OPEN
    payment_id: PaymentId | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def create(cls, session_id: SessionId) -> Cart:
        """新しい空のカートを作成する."""
        now = datetime.now(timezone.utc)
        return cls(
            cart_id=CartId.generate(),
            session_id=session_id,
            _lines=[],
            status=CartStatus.OPEN,
            created_at=now,
            updated_at=now,
        )

    def add_item(self, item: Item) -> CartLine:
        """商品を1つ追加する.

        既に明細がある場合は数量を1増やし、最初に取り込んだ単価を維持する。
        """
        self._ensure_open()
        index = self._index_of(item.item_id)
        if index is None:
            line = CartLine.create(item.item_id, item.price)
            self._lines.append(line)
        else:
            line = self._lines[index].increment()
            self._lines[index] = line
        self._touch()
        return line

    def set_line_quantity(self, item_id: ItemId, quantity: int) -> bool:
        """明細の数量を設定する（0以下なら明細を削除）.

        Returns:
            明細が存在した場合True
        """
        self._ensure_open()
        index = self._index_of(item_id)
        if index is None:
            return False
        if quantity <= 0:
            self._lines.pop(index)
        else:
            self._lines[index] = self._lines[index].with_quantity(quantity)
        self._touch()
        return True

    def remove_line(self, item_id: ItemId) -> bool:
        """明細を削除する."""
        self._ensure_open()
        index = self._index_of(item_id)
        if index is None:
            return False
        self._lines.pop(index)
        self._touch()
        return True

    def transition_to(self, new_status: CartStatus, payment_id: PaymentId | None = None) -> None:
        """ステータスを遷移させる（必要なら決済IDを紐付ける）.

        Raises:
            InvalidStatusTransitionError: 逆方向・同一ステータスへの遷移の場合
        """
        if not self.status.can_transition_to(new_status):
            raise InvalidStatusTransitionError("Cart", self.status, new_status)
        self.status = new_status
        if payment_id is not None:
            self.payment_id = payment_id
        self._touch()

    def get_total(self) -> Money:
        """合計金額を計算する."""
        total = Money.zero()
        for line in self._lines:
            total = total.add(line.get_subtotal())
        return total

    def get_lines(self) -> list[CartLine]:
        """明細のリストを取得（防御的コピー）."""
        return list(self._lines)

    def get_line(self, item_id: ItemId) -> CartLine | None:
        """指定商品の明細を取得する."""
        index = self._index_of(item_id)
        return None if index is None else self._lines[index]

    def get_line_count(self) -> int:
        """明細数を取得する."""
        return len(self._lines)

    def is_empty(self) -> bool:
        """カートが空か判定する."""
        return len(self._lines) == 0

    def is_open(self) -> bool:
        """変更可能な状態か判定する."""
        return self.status == CartStatus.OPEN

    def snapshot(self) -> Cart:
        """ストア外へ渡すための複製を返す."""
        return replace(self, _lines=list(self._lines))

    def _ensure_open(self) -> None:
        if not self.is_open():
            raise CartNotOpenError(f"Cart {self.cart_id} is {self.status.value}")

    def _index_of(self, item_id: ItemId) -> int | None:
        for i, line in enumerate(self._lines):
            if line.item_id == item_id:
                return i
        return None

    def _touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)
