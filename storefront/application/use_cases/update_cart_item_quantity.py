"""カート明細数量変更ユースケース."""
from storefront.application.services import CartStore
from storefront.domain.entities import Cart
from storefront.domain.identifiers import ItemId, SessionId

from .errors import CartItemNotFoundError, CartNotFoundError


class UpdateCartItemQuantityUseCase:
    """カート明細の数量を変更するユースケース（0以下は削除）."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化."""
        self._cart_store = cart_store

    def execute(self, session_id: SessionId, item_id: ItemId, quantity: int) -> Cart:
        """数量を変更する.

        Raises:
            CartNotFoundError: セッションにOPENカートが無い場合
            CartItemNotFoundError: カートに明細が無い場合
        """
        cart = self._cart_store.set_line_quantity(session_id, item_id, quantity)
        if cart is not None:
            return cart

        if self._cart_store.get_open_cart_for_session(session_id) is None:
            raise CartNotFoundError("Cart not found for this session.")
        raise CartItemNotFoundError(f"Item {item_id} is not in the cart.")
