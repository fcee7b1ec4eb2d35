"""決済結果ステータスの列挙型."""
from enum import Enum


class CheckoutResultStatus(str, Enum):
    """プロバイダからのリダイレクトで通知される決済結果."""

    SUCCESS = "SUCCESS"
    CANCELLED = "CANCELLED"
