"""セッション単位のロック管理."""
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from storefront.domain.identifiers import SessionId


class _Entry:
    """ロックと、保持中・待機中の利用者数."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.users = 0


class SessionLockRegistry:
    """セッションIDごとに1つのロックを払い出し、同一セッションの更新を直列化する.

    ロックは再入可能で、保持中のスレッドはストア操作を入れ子で呼び出せる。
    別セッション同士は互いにブロックしない。
    保持者も待機者もいなくなったロックはその場で登録から外す。
    """

    def __init__(self) -> None:
        """初期化."""
        self._guard = threading.Lock()
        self._entries: dict[str, _Entry] = {}

    def _acquire_entry(self, key: str) -> _Entry:
        with self._guard:
            entry = self._entries.get(key)
            if entry is None:
                entry = _Entry()
                self._entries[key] = entry
            entry.users += 1
            return entry

    def _release_entry(self, key: str, entry: _Entry) -> None:
        with self._guard:
            entry.users -= 1
            if entry.users == 0 and self._entries.get(key) is entry:
                del self._entries[key]

    @contextmanager
    def hold(self, session_id: SessionId) -> Iterator[None]:
        """セッションのロックを保持するコンテキスト."""
        key = session_id.value
        entry = self._acquire_entry(key)
        try:
            with entry.lock:
                yield
        finally:
            self._release_entry(key, entry)

    def __len__(self) -> int:
        with self._guard:
            return len(self._entries)
