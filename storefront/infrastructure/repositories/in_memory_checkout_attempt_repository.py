"""チェックアウト試行リポジトリのインメモリ実装."""
import logging
from datetime import datetime, timedelta, timezone

from storefront.domain.entities import CheckoutAttempt
from storefront.domain.ports import CheckoutAttemptRepository

logger = logging.getLogger(__name__)

TTL_HOURS = 24


class InMemoryCheckoutAttemptRepository(CheckoutAttemptRepository):
    """チェックアウト試行リポジトリのインメモリ実装.

    保存のたびに TTL を過ぎた試行を破棄する。
    """

    def __init__(self, ttl_hours: int = TTL_HOURS) -> None:
        """初期化."""
        self._ttl = timedelta(hours=ttl_hours)
        self._attempts: dict[str, CheckoutAttempt] = {}

    def save(self, attempt: CheckoutAttempt) -> None:
        """試行を保存する."""
        if attempt.token is None:
            raise ValueError("Cannot save a checkout attempt without a provider token")
        self._purge_expired()
        self._attempts[attempt.token] = attempt

    def find_by_token(self, token: str) -> CheckoutAttempt | None:
        """チェックアウトトークンで検索する."""
        return self._attempts.get(token)

    def _purge_expired(self) -> None:
        cutoff = datetime.now(timezone.utc) - self._ttl
        expired = [token for token, a in self._attempts.items() if a.updated_at < cutoff]
        for token in expired:
            del self._attempts[token]
        if expired:
            logger.info("Purged %d expired checkout attempts", len(expired))
