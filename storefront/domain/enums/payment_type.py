"""決済手段の列挙型."""
from enum import Enum


class PaymentType(str, Enum):
    """後払い決済プロバイダの種別."""

    AFTERPAY = "afterpay"
    CASH_APP_PAY = "cash_app_pay"

    @classmethod
    def from_cash_app_pay_flag(cls, is_cash_app_pay: bool) -> "PaymentType":
        """Cash App Pay フラグから決済手段を決定する."""
        return cls.CASH_APP_PAY if is_cash_app_pay else cls.AFTERPAY
