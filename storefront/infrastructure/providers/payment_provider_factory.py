"""PaymentProvider ファクトリ."""
import logging

from storefront.config import Settings
from storefront.domain.ports import PaymentProvider

logger = logging.getLogger(__name__)


def create_payment_provider(settings: Settings) -> PaymentProvider:
    """設定に基づいてPaymentProviderを生成する.

    PAYMENT_PROVIDER:
        "mock"     → MockPaymentProvider（ローカル開発・テスト用）
        "afterpay" → AfterpayPaymentProvider
        未設定      → AfterpayPaymentProvider（デフォルト）
    """
    if settings.payment_provider == "mock":
        from storefront.infrastructure.providers.mock_payment_provider import MockPaymentProvider

        return MockPaymentProvider()

    if settings.payment_provider != "afterpay":
        logger.warning(
            "Unknown PAYMENT_PROVIDER=%s, falling back to Afterpay", settings.payment_provider
        )

    from storefront.infrastructure.providers.afterpay_payment_provider import (
        AfterpayPaymentProvider,
    )

    return AfterpayPaymentProvider(
        merchant_id=settings.afterpay_merchant_id or "",
        secret_key=settings.afterpay_secret_key or "",
        base_url=settings.afterpay_api_url,
        timeout=settings.provider_timeout,
    )
