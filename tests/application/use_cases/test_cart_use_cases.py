"""カート操作ユースケースのテスト."""
import pytest

from storefront.application.services import CartStore, SessionLockRegistry
from storefront.application.use_cases import (
    AddToCartUseCase,
    CartItemNotFoundError,
    CartNotFoundError,
    GetCartUseCase,
    ItemNotFoundError,
    ListItemsUseCase,
    RemoveFromCartUseCase,
    UpdateCartItemQuantityUseCase,
)
from storefront.domain.identifiers import ItemId, SessionId
from storefront.domain.value_objects import Money
from storefront.infrastructure.providers import StaticItemCatalog
from storefront.infrastructure.repositories import InMemoryCartRepository

SESSION_ID = SessionId("sess-1")


@pytest.fixture
def cart_store() -> CartStore:
    return CartStore(InMemoryCartRepository(), SessionLockRegistry())


@pytest.fixture
def catalog() -> StaticItemCatalog:
    return StaticItemCatalog()


class TestListItemsUseCase:
    """ListItemsUseCaseのテスト."""

    def test_カタログの全商品を返す(self, catalog: StaticItemCatalog) -> None:
        items = ListItemsUseCase(catalog).execute()
        assert len(items) == 5
        assert items[0].item_id == ItemId("item-001")


class TestGetCartUseCase:
    """GetCartUseCaseのテスト."""

    def test_カートが無ければNone(self, cart_store: CartStore) -> None:
        assert GetCartUseCase(cart_store).execute(SESSION_ID) is None

    def test_OPENカートを返す(self, cart_store: CartStore, catalog: StaticItemCatalog) -> None:
        AddToCartUseCase(catalog, cart_store).execute(SESSION_ID, ItemId("item-001"))
        cart = GetCartUseCase(cart_store).execute(SESSION_ID)
        assert cart.get_total() == Money(2500)


class TestAddToCartUseCase:
    """AddToCartUseCaseのテスト."""

    def test_カタログ価格で追加される(self, cart_store: CartStore, catalog: StaticItemCatalog) -> None:
        use_case = AddToCartUseCase(catalog, cart_store)
        use_case.execute(SESSION_ID, ItemId("item-001"))
        cart = use_case.execute(SESSION_ID, ItemId("item-001"))
        assert cart.get_line(ItemId("item-001")).quantity == 2
        assert cart.get_total() == Money(5000)

    def test_カタログに無い商品はエラー(self, cart_store: CartStore, catalog: StaticItemCatalog) -> None:
        with pytest.raises(ItemNotFoundError):
            AddToCartUseCase(catalog, cart_store).execute(SESSION_ID, ItemId("item-999"))
        assert cart_store.get_open_cart_for_session(SESSION_ID) is None


class TestUpdateCartItemQuantityUseCase:
    """UpdateCartItemQuantityUseCaseのテスト."""

    def test_数量を変更できる(self, cart_store: CartStore, catalog: StaticItemCatalog) -> None:
        AddToCartUseCase(catalog, cart_store).execute(SESSION_ID, ItemId("item-001"))
        cart = UpdateCartItemQuantityUseCase(cart_store).execute(SESSION_ID, ItemId("item-001"), 3)
        assert cart.get_total() == Money(7500)

    def test_カートが無い場合エラー(self, cart_store: CartStore) -> None:
        with pytest.raises(CartNotFoundError):
            UpdateCartItemQuantityUseCase(cart_store).execute(SESSION_ID, ItemId("item-001"), 3)

    def test_明細が無い場合エラー(self, cart_store: CartStore, catalog: StaticItemCatalog) -> None:
        AddToCartUseCase(catalog, cart_store).execute(SESSION_ID, ItemId("item-001"))
        with pytest.raises(CartItemNotFoundError):
            UpdateCartItemQuantityUseCase(cart_store).execute(SESSION_ID, ItemId("item-002"), 3)


class TestRemoveFromCartUseCase:
    """RemoveFromCartUseCaseのテスト."""

    def test_明細を削除できる(self, cart_store: CartStore, catalog: StaticItemCatalog) -> None:
        AddToCartUseCase(catalog, cart_store).execute(SESSION_ID, ItemId("item-001"))
        cart = RemoveFromCartUseCase(cart_store).execute(SESSION_ID, ItemId("item-001"))
        assert cart.is_empty()

    def test_カートが無い場合エラー(self, cart_store: CartStore) -> None:
        with pytest.raises(CartNotFoundError):
            RemoveFromCartUseCase(cart_store).execute(SESSION_ID, ItemId("item-001"))
