"""カート取得ユースケース."""
from storefront.application.services import CartStore
from storefront.domain.entities import Cart
from storefront.domain.identifiers import SessionId


class GetCartUseCase:
    """セッションのOPENカートを取得するユースケース."""

    def __init__(self, cart_store: CartStore) -> None:
        """初期化.

        Args:
            cart_store: カートストア
        """
        self._cart_store = cart_store

    def execute(self, session_id: SessionId) -> Cart | None:
        """カートを取得する.

        Args:
            session_id: セッションID

        Returns:
            カート（まだ作成されていない場合はNone）
        """
        return self._cart_store.get_open_cart_for_session(session_id)
