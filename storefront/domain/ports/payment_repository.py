"""決済記録リポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import Payment
from ..identifiers import CartId, PaymentId


class PaymentRepository(ABC):
    """決済記録リポジトリのインターフェース."""

    @abstractmethod
    def save(self, payment: Payment) -> None:
        """決済記録を保存する."""
        pass

    @abstractmethod
    def find_by_id(self, payment_id: PaymentId) -> Payment | None:
        """決済IDで検索する."""
        pass

    @abstractmethod
    def find_by_cart_id(self, cart_id: CartId) -> list[Payment]:
        """カートIDで検索する（作成日時の昇順）."""
        pass
