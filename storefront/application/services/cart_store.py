"""カートストア."""
import logging
from datetime import datetime, timedelta, timezone

from storefront.domain.entities import Cart, Item
from storefront.domain.enums import CartStatus
from storefront.domain.identifiers import CartId, ItemId, PaymentId, SessionId
from storefront.domain.ports import CartRepository

from .session_lock_registry import SessionLockRegistry

logger = logging.getLogger(__name__)

DEFAULT_TTL_HOURS = 24


class CartStore:
    """全カートの唯一の管理者.

    セッションをキーにした操作はそのセッションのロック内で
    読み取り・変更・保存までを行い、呼び出し元には複製を返す。
    見つからない場合は例外ではなく None を返す。
    """

    def __init__(
        self,
        cart_repository: CartRepository,
        lock_registry: SessionLockRegistry,
        ttl_hours: int = DEFAULT_TTL_HOURS,
    ) -> None:
        """初期化.

        Args:
            cart_repository: カートリポジトリ
            lock_registry: セッションロック
            ttl_hours: 更新の無いOPENカートを破棄するまでの時間
        """
        self._cart_repository = cart_repository
        self._locks = lock_registry
        self._ttl = timedelta(hours=ttl_hours)

    @property
    def locks(self) -> SessionLockRegistry:
        """セッションロック."""
        return self._locks

    def get_or_create_open_cart(self, session_id: SessionId) -> Cart:
        """セッションのOPENカートを返す（無ければ空のカートを作成する）."""
        self.purge_expired()
        with self._locks.hold(session_id):
            return self._get_or_create_locked(session_id).snapshot()

    def add_item(self, session_id: SessionId, item: Item) -> Cart:
        """商品を1つ追加する（既存明細なら数量+1、単価は据え置き）."""
        self.purge_expired()
        with self._locks.hold(session_id):
            cart = self._get_or_create_locked(session_id)
            cart.add_item(item)
            self._cart_repository.save(cart)
            return cart.snapshot()

    def set_line_quantity(self, session_id: SessionId, item_id: ItemId, quantity: int) -> Cart | None:
        """明細の数量を設定する.

        Returns:
            更新後のカート（OPENカートまたは明細が無い場合はNone）
        """
        with self._locks.hold(session_id):
            cart = self._cart_repository.find_open_by_session_id(session_id)
            if cart is None:
                return None
            if not cart.set_line_quantity(item_id, quantity):
                return None
            self._cart_repository.save(cart)
            return cart.snapshot()

    def remove_line(self, session_id: SessionId, item_id: ItemId) -> Cart | None:
        """明細を削除する（明細が無くてもエラーにしない）.

        Returns:
            更新後のカート（OPENカートが無い場合はNone）
        """
        with self._locks.hold(session_id):
            cart = self._cart_repository.find_open_by_session_id(session_id)
            if cart is None:
                return None
            if cart.remove_line(item_id):
                self._cart_repository.save(cart)
            return cart.snapshot()

    def transition_status(
        self,
        cart_id: CartId,
        new_status: CartStatus,
        payment_id: PaymentId | None = None,
    ) -> Cart | None:
        """カートのステータスを遷移させる.

        Raises:
            InvalidStatusTransitionError: 許可されていない遷移の場合
        """
        cart = self._cart_repository.find_by_id(cart_id)
        if cart is None:
            return None
        with self._locks.hold(cart.session_id):
            cart.transition_to(new_status, payment_id)
            self._cart_repository.save(cart)
            return cart.snapshot()

    def get_by_id(self, cart_id: CartId) -> Cart | None:
        """カートIDで取得する."""
        cart = self._cart_repository.find_by_id(cart_id)
        return cart.snapshot() if cart else None

    def get_open_cart_for_session(self, session_id: SessionId) -> Cart | None:
        """セッションのOPENカートを取得する."""
        with self._locks.hold(session_id):
            cart = self._cart_repository.find_open_by_session_id(session_id)
            return cart.snapshot() if cart else None

    def get_latest_cart_for_session(self, session_id: SessionId) -> Cart | None:
        """セッションの最新カートをステータスに関係なく取得する."""
        with self._locks.hold(session_id):
            cart = self._cart_repository.find_latest_by_session_id(session_id)
            return cart.snapshot() if cart else None

    def purge_expired(self, now: datetime | None = None) -> int:
        """TTLを過ぎたOPENカートを破棄する.

        Returns:
            破棄件数
        """
        now = now or datetime.now(timezone.utc)
        cutoff = now - self._ttl
        purged = 0
        for stale in self._cart_repository.find_stale_open_carts(cutoff):
            with self._locks.hold(stale.session_id):
                cart = self._cart_repository.find_by_id(stale.cart_id)
                # ロック取得までに更新・遷移されたカートは残す
                if cart is None or not cart.is_open() or cart.updated_at >= cutoff:
                    continue
                self._cart_repository.delete(cart.cart_id)
                purged += 1
        if purged:
            logger.info("Purged %d stale open carts", purged)
        return purged

    def _get_or_create_locked(self, session_id: SessionId) -> Cart:
        cart = self._cart_repository.find_open_by_session_id(session_id)
        if cart is None:
            cart = Cart.create(session_id)
            self._cart_repository.save(cart)
            logger.info("Created cart %s", cart.cart_id)
        return cart
