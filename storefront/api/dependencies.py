"""依存性注入コンテナ."""
import threading

from storefront.application.services import CartStore, PaymentLedger, SessionLockRegistry
from storefront.config import Settings
from storefront.domain.ports import (
    CartRepository,
    CheckoutAttemptRepository,
    ItemCatalog,
    PaymentProvider,
    PaymentRepository,
)
from storefront.infrastructure import (
    InMemoryCartRepository,
    InMemoryCheckoutAttemptRepository,
    InMemoryPaymentRepository,
    StaticItemCatalog,
    create_payment_provider,
)


class Dependencies:
    """依存性を管理するコンテナ.

    ストアはプロセス内で一度だけ生成し、全ハンドラーで共有する。
    PAYMENT_PROVIDER=mock の場合はモックの決済プロバイダを使用する。
    """

    _build_lock = threading.RLock()
    _settings: Settings | None = None
    _item_catalog: ItemCatalog | None = None
    _cart_repository: CartRepository | None = None
    _payment_repository: PaymentRepository | None = None
    _checkout_attempt_repository: CheckoutAttemptRepository | None = None
    _lock_registry: SessionLockRegistry | None = None
    _cart_store: CartStore | None = None
    _payment_ledger: PaymentLedger | None = None
    _payment_provider: PaymentProvider | None = None

    @classmethod
    def get_settings(cls) -> Settings:
        """アプリケーション設定を取得する."""
        if cls._settings is None:
            with cls._build_lock:
                if cls._settings is None:
                    cls._settings = Settings.from_env()
        return cls._settings

    @classmethod
    def get_item_catalog(cls) -> ItemCatalog:
        """商品カタログを取得する."""
        if cls._item_catalog is None:
            with cls._build_lock:
                if cls._item_catalog is None:
                    cls._item_catalog = StaticItemCatalog()
        return cls._item_catalog

    @classmethod
    def get_cart_repository(cls) -> CartRepository:
        """カートリポジトリを取得する."""
        if cls._cart_repository is None:
            with cls._build_lock:
                if cls._cart_repository is None:
                    cls._cart_repository = InMemoryCartRepository()
        return cls._cart_repository

    @classmethod
    def get_payment_repository(cls) -> PaymentRepository:
        """決済記録リポジトリを取得する."""
        if cls._payment_repository is None:
            with cls._build_lock:
                if cls._payment_repository is None:
                    cls._payment_repository = InMemoryPaymentRepository()
        return cls._payment_repository

    @classmethod
    def get_checkout_attempt_repository(cls) -> CheckoutAttemptRepository:
        """チェックアウト試行リポジトリを取得する."""
        if cls._checkout_attempt_repository is None:
            with cls._build_lock:
                if cls._checkout_attempt_repository is None:
                    cls._checkout_attempt_repository = InMemoryCheckoutAttemptRepository()
        return cls._checkout_attempt_repository

    @classmethod
    def get_lock_registry(cls) -> SessionLockRegistry:
        """セッションロックを取得する."""
        if cls._lock_registry is None:
            with cls._build_lock:
                if cls._lock_registry is None:
                    cls._lock_registry = SessionLockRegistry()
        return cls._lock_registry

    @classmethod
    def get_cart_store(cls) -> CartStore:
        """カートストアを取得する."""
        if cls._cart_store is None:
            with cls._build_lock:
                if cls._cart_store is None:
                    cls._cart_store = CartStore(
                        cls.get_cart_repository(),
                        cls.get_lock_registry(),
                        ttl_hours=cls.get_settings().cart_ttl_hours,
                    )
        return cls._cart_store

    @classmethod
    def get_payment_ledger(cls) -> PaymentLedger:
        """決済台帳を取得する."""
        if cls._payment_ledger is None:
            with cls._build_lock:
                if cls._payment_ledger is None:
                    cls._payment_ledger = PaymentLedger(cls.get_payment_repository())
        return cls._payment_ledger

    @classmethod
    def get_payment_provider(cls) -> PaymentProvider:
        """決済プロバイダを取得する."""
        if cls._payment_provider is None:
            with cls._build_lock:
                if cls._payment_provider is None:
                    cls._payment_provider = create_payment_provider(cls.get_settings())
        return cls._payment_provider

    @classmethod
    def set_settings(cls, settings: Settings) -> None:
        """アプリケーション設定を設定する（テスト用）."""
        cls._settings = settings

    @classmethod
    def set_item_catalog(cls, catalog: ItemCatalog) -> None:
        """商品カタログを設定する（テスト用）."""
        cls._item_catalog = catalog

    @classmethod
    def set_cart_repository(cls, repository: CartRepository) -> None:
        """カートリポジトリを設定する（テスト用）.

        生成済みのカートストアは破棄する。
        """
        cls._cart_repository = repository
        cls._cart_store = None

    @classmethod
    def set_payment_repository(cls, repository: PaymentRepository) -> None:
        """決済記録リポジトリを設定する（テスト用）."""
        cls._payment_repository = repository
        cls._payment_ledger = None

    @classmethod
    def set_checkout_attempt_repository(cls, repository: CheckoutAttemptRepository) -> None:
        """チェックアウト試行リポジトリを設定する（テスト用）."""
        cls._checkout_attempt_repository = repository

    @classmethod
    def set_payment_provider(cls, provider: PaymentProvider) -> None:
        """決済プロバイダを設定する（テスト用）."""
        cls._payment_provider = provider

    @classmethod
    def reset(cls) -> None:
        """全ての依存性をリセットする（テスト用）."""
        cls._settings = None
        cls._item_catalog = None
        cls._cart_repository = None
        cls._payment_repository = None
        cls._checkout_attempt_repository = None
        cls._lock_registry = None
        cls._cart_store = None
        cls._payment_ledger = None
        cls._payment_provider = None
