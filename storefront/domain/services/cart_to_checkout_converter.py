"""カートからチェックアウト作成リクエストへの変換ドメインサービス."""
from ..entities import Cart
from ..value_objects import CheckoutRequest, Consumer, RedirectUrls

DEFAULT_CURRENCY = "USD"


class CartToCheckoutConverter:
    """カートの合計をプロバイダのチェックアウト作成リクエストに変換するサービス."""

    @staticmethod
    def convert(
        cart: Cart,
        consumer: Consumer,
        redirect_urls: RedirectUrls,
        is_cash_app_pay: bool,
        currency: str = DEFAULT_CURRENCY,
    ) -> CheckoutRequest:
        """カート合計（補助単位の整数）を小数2桁の主単位文字列にして組み立てる."""
        return CheckoutRequest(
            amount=cart.get_total().to_decimal_string(),
            currency=currency,
            consumer=consumer,
            redirect_urls=redirect_urls,
            is_cash_app_pay=is_cash_app_pay,
        )
