"""金額を表現する値オブジェクト."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Money:
    """金額（補助通貨単位の整数、USDならセント）を表現する値オブジェクト."""

    value: int

    def __post_init__(self) -> None:
        """バリデーション."""
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise ValueError("Money value must be an integer")
        if self.value < 0:
            raise ValueError("Money value cannot be negative")

    @classmethod
    def of(cls, value: int) -> Money:
        """指定金額でMoneyを生成する."""
        return cls(value)

    @classmethod
    def zero(cls) -> Money:
        """ゼロを生成する."""
        return cls(0)

    def add(self, other: Money) -> Money:
        """金額を加算して新しいMoneyを返す."""
        return Money(self.value + other.value)

    def multiply(self, factor: int) -> Money:
        """金額を乗算して新しいMoneyを返す."""
        if factor < 0:
            raise ValueError("Factor cannot be negative")
        return Money(self.value * factor)

    def to_decimal_string(self) -> str:
        """プロバイダ形式の主通貨単位文字列に変換する（例: 5000 → "50.00"）."""
        major, minor = divmod(self.value, 100)
        return f"{major}.{minor:02d}"
