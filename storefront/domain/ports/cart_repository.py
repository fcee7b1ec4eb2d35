"""カートリポジトリインターフェース."""
from abc import ABC, abstractmethod
from datetime import datetime

from ..entities import Cart
from ..identifiers import CartId, SessionId


class CartRepository(ABC):
    """カートリポジトリのインターフェース."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """カートを保存する."""
        pass

    @abstractmethod
    def find_by_id(self, cart_id: CartId) -> Cart | None:
        """カートIDで検索する."""
        pass

    @abstractmethod
    def find_open_by_session_id(self, session_id: SessionId) -> Cart | None:
        """セッションのOPENカートを検索する."""
        pass

    @abstractmethod
    def find_latest_by_session_id(self, session_id: SessionId) -> Cart | None:
        """セッションの最新カートをステータスに関係なく検索する."""
        pass

    @abstractmethod
    def delete(self, cart_id: CartId) -> None:
        """カートを削除する."""
        pass

    @abstractmethod
    def find_stale_open_carts(self, updated_before: datetime) -> list[Cart]:
        """指定時刻より前から更新のないOPENカート（決済未紐付け）を検索する."""
        pass
