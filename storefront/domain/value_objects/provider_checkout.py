"""プロバイダのチェックアウトセッションを表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ProviderCheckout:
    """プロバイダが発行したチェックアウトトークンとリダイレクト先."""

    token: str
    expires: str
    redirect_checkout_url: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.token:
            raise ValueError("Checkout token cannot be empty")

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> ProviderCheckout:
        """プロバイダAPIのレスポンスから生成する.

        Raises:
            KeyError: 必須フィールドが欠けている場合
        """
        return cls(
            token=data["token"],
            expires=data.get("expires", ""),
            redirect_checkout_url=data["redirectCheckoutUrl"],
        )

    def to_dict(self) -> dict[str, str]:
        """レスポンス用の辞書に変換する."""
        return {
            "token": self.token,
            "expires": self.expires,
            "redirectCheckoutUrl": self.redirect_checkout_url,
        }
