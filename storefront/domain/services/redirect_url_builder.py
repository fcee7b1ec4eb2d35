"""決済結果リダイレクトURLの組み立てドメインサービス."""
from ..enums import PaymentType
from ..value_objects import RedirectUrls

PAYMENT_RESULT_PATH = "/cart/payment/result"


class RedirectUrlBuilder:
    """プロバイダから戻ってくる決済結果コールバックのURLを組み立てるサービス."""

    @staticmethod
    def resolve_base_url(
        configured_base_url: str | None,
        request_host: str | None,
        is_production: bool,
    ) -> str:
        """ベースURLを決定する.

        設定値があればそれを使い、無ければリクエストのホストから推定する
        （本番は https、それ以外は http）。

        Raises:
            ValueError: 設定値もホストも無い場合
        """
        if configured_base_url:
            return configured_base_url.rstrip("/")
        if not request_host:
            raise ValueError("Cannot determine redirect base URL without a request host")
        scheme = "https" if is_production else "http"
        return f"{scheme}://{request_host}"

    @staticmethod
    def build(base_url: str, payment_type: PaymentType) -> RedirectUrls:
        """確認・キャンセル用のリダイレクトURLを組み立てる.

        どちらも同じ結果コールバックを指し、結果はプロバイダが status クエリで付与する。
        """
        url = f"{base_url.rstrip('/')}{PAYMENT_RESULT_PATH}?provider={payment_type.value}"
        return RedirectUrls(confirm_url=url, cancel_url=url)
