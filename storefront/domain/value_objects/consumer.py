"""購入者情報を表現する値オブジェクト."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

_EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")

# リクエストボディのキー → 属性名
_OPTIONAL_FIELDS = (
    ("givenNames", "given_names"),
    ("surname", "surname"),
    ("phoneNumber", "phone_number"),
)


@dataclass(frozen=True)
class Consumer:
    """チェックアウト時にプロバイダへ渡す購入者情報."""

    email: str
    given_names: str | None = None
    surname: str | None = None
    phone_number: str | None = None

    def __post_init__(self) -> None:
        """バリデーション."""
        if not self.email:
            raise ValueError("consumer.email is required")
        if not _EMAIL_PATTERN.match(self.email):
            raise ValueError(f"Invalid consumer.email format: {self.email}")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Consumer:
        """リクエストボディ（camelCase）から生成する.

        Raises:
            ValueError: email が無い、または各フィールドの型・形式が不正な場合
        """
        email = data.get("email")
        if not isinstance(email, str) or not email:
            raise ValueError("consumer.email is required")

        optional = {}
        for key, attr in _OPTIONAL_FIELDS:
            value = data.get(key)
            if value is None:
                continue
            if not isinstance(value, str):
                raise ValueError(f"consumer.{key} must be a string")
            optional[attr] = value

        return cls(email=email, **optional)

    def to_payload(self) -> dict[str, str]:
        """プロバイダAPI形式（camelCase）に変換する."""
        payload = {"email": self.email}
        for key, attr in _OPTIONAL_FIELDS:
            value = getattr(self, attr)
            if value is not None:
                payload[key] = value
        return payload
