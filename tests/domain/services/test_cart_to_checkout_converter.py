"""CartToCheckoutConverterのテスト."""
from storefront.domain.entities import Cart, Item
from storefront.domain.identifiers import ItemId, SessionId
from storefront.domain.services import CartToCheckoutConverter, RedirectUrlBuilder
from storefront.domain.enums import PaymentType
from storefront.domain.value_objects import Consumer, Money


class TestCartToCheckoutConverter:
    """CartToCheckoutConverterの単体テスト."""

    def test_カート合計が小数2桁の主単位文字列になる(self) -> None:
        cart = Cart.create(SessionId("sess-1"))
        item = Item(
            item_id=ItemId("item-001"),
            name="Tote",
            description="",
            price=Money(1899),
            image_url="",
            sku="TOTE-1",
        )
        cart.add_item(item)
        cart.add_item(item)

        request = CartToCheckoutConverter.convert(
            cart=cart,
            consumer=Consumer(email="buyer@example.com"),
            redirect_urls=RedirectUrlBuilder.build("https://shop.test", PaymentType.CASH_APP_PAY),
            is_cash_app_pay=True,
        )

        assert request.amount == "37.98"
        assert request.currency == "USD"
        assert request.is_cash_app_pay is True
        assert request.to_payload()["merchant"]["redirectCancelUrl"].endswith("cash_app_pay")
