"""カートリポジトリのインメモリ実装."""
from datetime import datetime

from storefront.domain.entities import Cart
from storefront.domain.enums import CartStatus
from storefront.domain.identifiers import CartId, SessionId
from storefront.domain.ports import CartRepository


class InMemoryCartRepository(CartRepository):
    """カートリポジトリのインメモリ実装（プロセス内のみ有効）."""

    def __init__(self) -> None:
        """初期化."""
        self._carts: dict[str, Cart] = {}
        # セッションID → そのセッションのカートID（作成順）
        self._cart_ids_by_session: dict[str, list[str]] = {}

    def save(self, cart: Cart) -> None:
        """カートを保存する."""
        if cart.cart_id.value not in self._carts:
            self._cart_ids_by_session.setdefault(cart.session_id.value, []).append(
                cart.cart_id.value
            )
        self._carts[cart.cart_id.value] = cart

    def find_by_id(self, cart_id: CartId) -> Cart | None:
        """カートIDで検索する."""
        return self._carts.get(cart_id.value)

    def find_open_by_session_id(self, session_id: SessionId) -> Cart | None:
        """セッションのOPENカートを検索する."""
        for cart in self._carts_for_session(session_id):
            if cart.status == CartStatus.OPEN:
                return cart
        return None

    def find_latest_by_session_id(self, session_id: SessionId) -> Cart | None:
        """セッションの最新カートをステータスに関係なく検索する."""
        carts = self._carts_for_session(session_id)
        return carts[-1] if carts else None

    def delete(self, cart_id: CartId) -> None:
        """カートを削除する."""
        cart = self._carts.pop(cart_id.value, None)
        if cart is None:
            return
        ids = self._cart_ids_by_session.get(cart.session_id.value, [])
        if cart_id.value in ids:
            ids.remove(cart_id.value)
        if not ids:
            self._cart_ids_by_session.pop(cart.session_id.value, None)

    def find_stale_open_carts(self, updated_before: datetime) -> list[Cart]:
        """指定時刻より前から更新のないOPENカート（決済未紐付け）を検索する."""
        return [
            cart
            for cart in list(self._carts.values())
            if cart.status == CartStatus.OPEN
            and cart.payment_id is None
            and cart.updated_at < updated_before
        ]

    def _carts_for_session(self, session_id: SessionId) -> list[Cart]:
        ids = self._cart_ids_by_session.get(session_id.value, [])
        return [self._carts[cart_id] for cart_id in ids if cart_id in self._carts]
