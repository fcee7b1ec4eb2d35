"""カート明細削除ユースケース."""
from storefront.application.services import CartStore
from storefront.domain.entities import Cart
from storefront.domain.identifiers import ItemId, SessionId

from .errors import CartNotFoundError


class RemoveFromCartUseCase:
    """カートから明細を削除するユースケース（明細が無くてもエラーにしない）."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化."""
        self._cart_store = cart_store

    def execute(self, session_id: SessionId, item_id: ItemId) -> Cart:
        """明細を削除する.

        Raises:
            CartNotFoundError: セッションにOPENカートが無い場合
        """
        cart = self._cart_store.remove_line(session_id, item_id)
        if cart is None:
            raise CartNotFoundError("Cart not found for this session.")
        return cart
