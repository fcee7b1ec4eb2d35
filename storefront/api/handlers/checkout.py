"""チェックアウトAPI ハンドラー."""
import logging
from typing import Any

from storefront.api.dependencies import Dependencies
from storefront.api.request import get_body, get_host, get_query_parameter
from storefront.api.response import (
    bad_request_response,
    not_found_response,
    precondition_failed_response,
    provider_error_response,
    provider_timeout_response,
    service_unavailable_response,
    success_response,
)
from storefront.api.serializers import cart_to_dict, payment_to_dict
from storefront.api.session import RequestSession, attach_session_cookie, resolve_session
from storefront.application.use_cases import (
    CartNotFoundError,
    EmptyCartError,
    FinalizeCheckoutUseCase,
    InitiateCheckoutUseCase,
    ProviderNotConfiguredError,
)
from storefront.domain.enums import CheckoutResultStatus, PaymentType
from storefront.domain.ports import PaymentProviderError, PaymentProviderTimeoutError
from storefront.domain.value_objects import Consumer

logger = logging.getLogger(__name__)


def _respond(response: dict, session: RequestSession) -> dict:
    return attach_session_cookie(response, session, Dependencies.get_settings().is_production)


def create_checkout_from_cart(event: dict, context: Any) -> dict:
    """カートの内容でプロバイダのチェックアウトを作成する.

    POST /cart/checkout/afterpay

    Request Body:
        consumer: 購入者情報（email 必須、givenNames / surname / phoneNumber 任意）
        isCashAppPay: Cash App Pay で支払うか（省略時 false）

    Returns:
        カートとチェックアウト情報（token, expires, redirectCheckoutUrl）
    """
    session = resolve_session(event)

    try:
        body = get_body(event)
    except ValueError as e:
        return _respond(bad_request_response(str(e), event=event), session)

    consumer_data = body.get("consumer")
    if not isinstance(consumer_data, dict):
        return _respond(bad_request_response("consumer.email is required", event=event), session)
    try:
        consumer = Consumer.from_dict(consumer_data)
    except ValueError as e:
        return _respond(bad_request_response(str(e), event=event), session)

    is_cash_app_pay = body.get("isCashAppPay", False)
    if not isinstance(is_cash_app_pay, bool):
        return _respond(bad_request_response("isCashAppPay must be a boolean", event=event), session)

    use_case = InitiateCheckoutUseCase(
        cart_store=Dependencies.get_cart_store(),
        checkout_attempt_repository=Dependencies.get_checkout_attempt_repository(),
        payment_provider=Dependencies.get_payment_provider(),
        settings=Dependencies.get_settings(),
    )

    try:
        result = use_case.execute(
            session_id=session.session_id,
            consumer=consumer,
            is_cash_app_pay=is_cash_app_pay,
            request_host=get_host(event),
        )
    except ProviderNotConfiguredError as e:
        return _respond(service_unavailable_response(str(e), event=event), session)
    except CartNotFoundError:
        return _respond(not_found_response("Cart", event=event), session)
    except EmptyCartError as e:
        return _respond(precondition_failed_response(str(e), event=event), session)
    except PaymentProviderTimeoutError:
        logger.warning("Payment provider timed out while creating checkout")
        return _respond(provider_timeout_response(event=event), session)
    except PaymentProviderError as e:
        logger.exception("Failed to create checkout: status=%s", e.status_code)
        return _respond(provider_error_response(event=event), session)
    except ValueError as e:
        return _respond(bad_request_response(str(e), event=event), session)

    return _respond(
        success_response(
            {"cart": cart_to_dict(result.cart), "checkout": result.checkout.to_dict()},
            event=event,
        ),
        session,
    )


def handle_payment_result(event: dict, context: Any) -> dict:
    """プロバイダからのリダイレクト結果を確定する.

    GET /cart/payment/result

    Query Parameters:
        status: SUCCESS | CANCELLED
        provider: afterpay | cash_app_pay
        token: チェックアウトトークン（orderToken も可）
    """
    session = resolve_session(event)

    status_str = get_query_parameter(event, "status")
    provider_str = get_query_parameter(event, "provider")
    token = get_query_parameter(event, "token") or get_query_parameter(event, "orderToken")

    if not status_str or not provider_str:
        return _respond(
            bad_request_response("status and provider query parameters are required", event=event),
            session,
        )

    try:
        status = CheckoutResultStatus(status_str)
    except ValueError:
        return _respond(
            bad_request_response('Invalid status. Must be "SUCCESS" or "CANCELLED".', event=event),
            session,
        )

    try:
        payment_type = PaymentType(provider_str)
    except ValueError:
        return _respond(
            bad_request_response(
                'Invalid provider. Must be "afterpay" or "cash_app_pay".', event=event
            ),
            session,
        )

    use_case = FinalizeCheckoutUseCase(
        cart_store=Dependencies.get_cart_store(),
        payment_ledger=Dependencies.get_payment_ledger(),
        checkout_attempt_repository=Dependencies.get_checkout_attempt_repository(),
    )

    try:
        result = use_case.execute(
            session_id=session.session_id,
            status=status,
            payment_type=payment_type,
            provider_token=token,
        )
    except CartNotFoundError:
        return _respond(not_found_response("Cart", event=event), session)

    body = {
        "status": result.status.value,
        "provider": result.payment_type.value,
        "message": result.message,
        "cart": cart_to_dict(result.cart),
        "payment": payment_to_dict(result.payment) if result.payment else None,
        "already_completed": result.already_completed,
    }
    return _respond(success_response(body, event=event), session)
