"""ユースケース共通のエラー."""


class CartNotFoundError(Exception):
    """セッションにカートが見つからないエラー."""

    pass


class CartItemNotFoundError(Exception):
    """カート内に指定商品の明細が見つからないエラー."""

    pass


class ItemNotFoundError(Exception):
    """カタログに商品が見つからないエラー."""

    pass


class EmptyCartError(Exception):
    """空のカートでチェックアウトしようとしたエラー."""

    pass


class ProviderNotConfiguredError(Exception):
    """決済プロバイダの認証情報が未設定のエラー."""

    pass
