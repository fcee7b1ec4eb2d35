"""チェックアウト作成リクエストの値オブジェクト."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from .consumer import Consumer
from .redirect_urls import RedirectUrls

_AMOUNT_PATTERN = re.compile(r"^\d+\.\d{2}$")


@dataclass(frozen=True)
class CheckoutRequest:
    """プロバイダへ送るチェックアウト作成リクエスト."""

    amount: str
    currency: str
    consumer: Consumer
    redirect_urls: RedirectUrls | None = None
    is_cash_app_pay: bool = False

    def __post_init__(self) -> None:
        """バリデーション."""
        if not _AMOUNT_PATTERN.match(self.amount):
            raise ValueError(f"Invalid amount format: {self.amount}")
        if not self.currency:
            raise ValueError("Currency cannot be empty")

    def to_payload(self) -> dict[str, Any]:
        """プロバイダAPIのリクエストボディに変換する."""
        payload: dict[str, Any] = {
            "amount": {"amount": self.amount, "currency": self.currency},
            "consumer": self.consumer.to_payload(),
            "isCashAppPay": self.is_cash_app_pay,
        }
        if self.redirect_urls is not None:
            payload["merchant"] = {
                "redirectConfirmUrl": self.redirect_urls.confirm_url,
                "redirectCancelUrl": self.redirect_urls.cancel_url,
            }
        return payload
