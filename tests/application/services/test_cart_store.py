"""CartStoreのテスト."""
import unittest
from datetime import datetime, timedelta, timezone

import pytest

from storefront.application.services import CartStore, SessionLockRegistry
from storefront.domain.entities import Item
from storefront.domain.enums import CartStatus
from storefront.domain.exceptions import InvalidStatusTransitionError
from storefront.domain.identifiers import CartId, ItemId, PaymentId, SessionId
from storefront.domain.value_objects import Money
from storefront.infrastructure.repositories import InMemoryCartRepository


def _make_item(item_id: str = "item-001", price: int = 2500) -> Item:
    return Item(
        item_id=ItemId(item_id),
        name=f"Item {item_id}",
        description="",
        price=Money(price),
        image_url="",
        sku=f"SKU-{item_id}",
    )


class TestCartStore(unittest.TestCase):
    """CartStoreの単体テスト."""

    def setUp(self) -> None:
        self.repository = InMemoryCartRepository()
        self.locks = SessionLockRegistry()
        self.store = CartStore(self.repository, self.locks)
        self.session_id = SessionId("sess-1")

    def test_OPENカートが無ければ作成される(self) -> None:
        cart = self.store.get_or_create_open_cart(self.session_id)
        assert cart.status == CartStatus.OPEN
        assert cart.is_empty()
        assert cart.session_id == self.session_id

    def test_2回目は同じカートが返る(self) -> None:
        first = self.store.get_or_create_open_cart(self.session_id)
        second = self.store.get_or_create_open_cart(self.session_id)
        assert first.cart_id == second.cart_id

    def test_セッションごとにOPENカートは1つ(self) -> None:
        self.store.add_item(self.session_id, _make_item("item-001"))
        self.store.add_item(self.session_id, _make_item("item-002"))
        self.store.get_or_create_open_cart(self.session_id)
        carts = self.repository._carts_for_session(self.session_id)
        assert len([c for c in carts if c.status == CartStatus.OPEN]) == 1

    def test_add_itemでカートが作成され明細が追加される(self) -> None:
        cart = self.store.add_item(self.session_id, _make_item())
        assert cart.get_total() == Money(2500)
        assert self.store.get_open_cart_for_session(self.session_id).get_total() == Money(2500)

    def test_返されたカートを変更してもストアに影響しない(self) -> None:
        cart = self.store.add_item(self.session_id, _make_item())
        cart.add_item(_make_item("item-002", price=100))
        stored = self.store.get_open_cart_for_session(self.session_id)
        assert stored.get_line_count() == 1

    def test_set_line_quantityで数量が変わる(self) -> None:
        self.store.add_item(self.session_id, _make_item())
        cart = self.store.set_line_quantity(self.session_id, ItemId("item-001"), 4)
        assert cart.get_total() == Money(10000)

    def test_set_line_quantityで0以下なら明細が消える(self) -> None:
        self.store.add_item(self.session_id, _make_item())
        cart = self.store.set_line_quantity(self.session_id, ItemId("item-001"), 0)
        assert cart.is_empty()

    def test_set_line_quantityでカートが無ければNone(self) -> None:
        assert self.store.set_line_quantity(self.session_id, ItemId("item-001"), 1) is None

    def test_set_line_quantityで明細が無ければNone(self) -> None:
        self.store.add_item(self.session_id, _make_item())
        assert self.store.set_line_quantity(self.session_id, ItemId("item-999"), 1) is None

    def test_remove_lineで明細が無くてもカートが返る(self) -> None:
        self.store.add_item(self.session_id, _make_item())
        cart = self.store.remove_line(self.session_id, ItemId("item-999"))
        assert cart.get_total() == Money(2500)

    def test_remove_lineでカートが無ければNone(self) -> None:
        assert self.store.remove_line(self.session_id, ItemId("item-001")) is None

    def test_存在しないカートIDの遷移はNone(self) -> None:
        assert self.store.transition_status(CartId("missing"), CartStatus.COMPLETED) is None

    def test_COMPLETEDに遷移すると新しいOPENカートが作られる(self) -> None:
        cart = self.store.add_item(self.session_id, _make_item())
        completed = self.store.transition_status(
            cart.cart_id, CartStatus.COMPLETED, PaymentId("pay-1")
        )
        assert completed.status == CartStatus.COMPLETED
        assert completed.payment_id == PaymentId("pay-1")
        assert self.store.get_open_cart_for_session(self.session_id) is None

        new_cart = self.store.get_or_create_open_cart(self.session_id)
        assert new_cart.cart_id != cart.cart_id
        latest = self.store.get_latest_cart_for_session(self.session_id)
        assert latest.cart_id == new_cart.cart_id

    def test_逆方向の遷移はエラーで状態は変わらない(self) -> None:
        cart = self.store.add_item(self.session_id, _make_item())
        self.store.transition_status(cart.cart_id, CartStatus.COMPLETED)
        with pytest.raises(InvalidStatusTransitionError):
            self.store.transition_status(cart.cart_id, CartStatus.OPEN)
        assert self.store.get_by_id(cart.cart_id).status == CartStatus.COMPLETED

    def test_別セッションのカートは独立している(self) -> None:
        other = SessionId("sess-2")
        self.store.add_item(self.session_id, _make_item())
        self.store.add_item(other, _make_item("item-002", price=100))
        assert self.store.get_open_cart_for_session(self.session_id).get_total() == Money(2500)
        assert self.store.get_open_cart_for_session(other).get_total() == Money(100)

    def test_セッションにカートが無ければ最新カートはNone(self) -> None:
        assert self.store.get_latest_cart_for_session(self.session_id) is None


class TestCartStorePurge(unittest.TestCase):
    """TTLによるカート破棄のテスト."""

    def setUp(self) -> None:
        self.repository = InMemoryCartRepository()
        self.locks = SessionLockRegistry()
        self.store = CartStore(self.repository, self.locks, ttl_hours=24)
        self.session_id = SessionId("sess-1")

    def test_TTLを過ぎたOPENカートが破棄される(self) -> None:
        cart = self.store.add_item(self.session_id, _make_item())
        later = datetime.now(timezone.utc) + timedelta(hours=25)

        purged = self.store.purge_expired(now=later)

        assert purged == 1
        assert self.store.get_by_id(cart.cart_id) is None
        assert len(self.locks) == 0

    def test_TTL内のカートは残る(self) -> None:
        cart = self.store.add_item(self.session_id, _make_item())
        later = datetime.now(timezone.utc) + timedelta(hours=23)

        assert self.store.purge_expired(now=later) == 0
        assert self.store.get_by_id(cart.cart_id) is not None

    def test_COMPLETEDのカートは破棄されない(self) -> None:
        cart = self.store.add_item(self.session_id, _make_item())
        self.store.transition_status(cart.cart_id, CartStatus.COMPLETED, PaymentId("pay-1"))
        later = datetime.now(timezone.utc) + timedelta(days=30)

        assert self.store.purge_expired(now=later) == 0
        assert self.store.get_by_id(cart.cart_id).status == CartStatus.COMPLETED
