"""Afterpay API ハンドラー（カートを介さない直接呼び出し）."""
import logging
from typing import Any

from storefront.api.dependencies import Dependencies
from storefront.api.request import get_body
from storefront.api.response import (
    bad_request_response,
    provider_error_response,
    provider_timeout_response,
    service_unavailable_response,
    success_response,
)
from storefront.application.use_cases import (
    CreateProviderCheckoutUseCase,
    GetProviderConfigurationUseCase,
    ProviderNotConfiguredError,
)
from storefront.domain.ports import PaymentProviderError, PaymentProviderTimeoutError
from storefront.domain.value_objects import CheckoutRequest, Consumer, RedirectUrls

logger = logging.getLogger(__name__)


def get_configuration(event: dict, context: Any) -> dict:
    """加盟店設定（注文金額の上下限）を取得する.

    GET /afterpay/configuration
    """
    use_case = GetProviderConfigurationUseCase(
        Dependencies.get_payment_provider(), Dependencies.get_settings()
    )
    try:
        configuration = use_case.execute()
    except ProviderNotConfiguredError as e:
        return service_unavailable_response(str(e), event=event)
    except PaymentProviderTimeoutError:
        return provider_timeout_response(event=event)
    except PaymentProviderError as e:
        logger.exception("Failed to fetch provider configuration: status=%s", e.status_code)
        return provider_error_response("Failed to fetch Afterpay configuration", event=event)

    return success_response({"configuration": configuration}, event=event)


def _parse_checkout_request(body: dict) -> CheckoutRequest:
    amount = body.get("amount")
    if not isinstance(amount, dict) or not amount.get("amount") or not amount.get("currency"):
        raise ValueError("amount.amount and amount.currency are required")
    if not isinstance(amount["amount"], str) or not isinstance(amount["currency"], str):
        raise ValueError("amount.amount and amount.currency must be strings")

    consumer_data = body.get("consumer")
    if not isinstance(consumer_data, dict):
        raise ValueError("consumer.email is required")
    consumer = Consumer.from_dict(consumer_data)

    redirect_urls = None
    merchant = body.get("merchant")
    if merchant is not None:
        if not isinstance(merchant, dict):
            raise ValueError("merchant must be an object")
        redirect_urls = RedirectUrls(
            confirm_url=merchant.get("redirectConfirmUrl") or "",
            cancel_url=merchant.get("redirectCancelUrl") or "",
        )

    is_cash_app_pay = body.get("isCashAppPay", False)
    if not isinstance(is_cash_app_pay, bool):
        raise ValueError("isCashAppPay must be a boolean")

    return CheckoutRequest(
        amount=amount["amount"],
        currency=amount["currency"],
        consumer=consumer,
        redirect_urls=redirect_urls,
        is_cash_app_pay=is_cash_app_pay,
    )


def create_checkout(event: dict, context: Any) -> dict:
    """リクエストの内容でそのままチェックアウトを作成する.

    POST /afterpay/checkout

    Request Body:
        amount: {"amount": "50.00", "currency": "USD"}
        consumer: 購入者情報（email 必須）
        merchant: {"redirectConfirmUrl", "redirectCancelUrl"}（任意）
        isCashAppPay: Cash App Pay で支払うか（任意）
    """
    try:
        body = get_body(event)
        request = _parse_checkout_request(body)
    except ValueError as e:
        return bad_request_response(str(e), event=event)

    use_case = CreateProviderCheckoutUseCase(
        Dependencies.get_payment_provider(), Dependencies.get_settings()
    )
    try:
        checkout = use_case.execute(request)
    except ProviderNotConfiguredError as e:
        return service_unavailable_response(str(e), event=event)
    except PaymentProviderTimeoutError:
        return provider_timeout_response(event=event)
    except PaymentProviderError as e:
        logger.exception("Failed to create checkout: status=%s", e.status_code)
        return provider_error_response("Failed to create Afterpay checkout", event=event)

    return success_response(checkout.to_dict(), event=event)
