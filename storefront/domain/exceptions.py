"""ドメイン例外."""
from enum import Enum


class InvalidStatusTransitionError(ValueError):
    """許可されていないステータス遷移."""

    def __init__(self, entity: str, current: Enum, requested: Enum) -> None:
        self.entity = entity
        self.current = current
        self.requested = requested
        super().__init__(
            f"{entity} cannot transition from {current.value} to {requested.value}"
        )


class CartNotOpenError(ValueError):
    """OPEN 以外のカートを変更しようとしたエラー."""

    pass
