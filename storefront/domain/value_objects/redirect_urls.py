"""リダイレクトURLの値オブジェクト."""
from dataclasses import dataclass


@dataclass(frozen=True)
class RedirectUrls:
    """決済完了・キャンセル時にプロバイダが購入者を戻すURL."""

    confirm_url: str
    cancel_url: str

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.confirm_url or not self.cancel_url:
            raise ValueError("Redirect URLs cannot be empty")
