"""チェックアウト試行リポジトリインターフェース."""
from abc import ABC, abstractmethod

from ..entities import CheckoutAttempt


class CheckoutAttemptRepository(ABC):
    """チェックアウト試行リポジトリのインターフェース."""

    @abstractmethod
    def save(self, attempt: CheckoutAttempt) -> None:
        """試行を保存する（トークン未発行の試行は保存できない）."""
        pass

    @abstractmethod
    def find_by_token(self, token: str) -> CheckoutAttempt | None:
        """チェックアウトトークンで検索する."""
        pass
