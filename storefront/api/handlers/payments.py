"""決済記録API ハンドラー."""
from typing import Any

from storefront.api.dependencies import Dependencies
from storefront.api.request import get_path_parameter
from storefront.api.response import bad_request_response, not_found_response, success_response
from storefront.api.serializers import payment_to_dict
from storefront.api.session import attach_session_cookie, resolve_session
from storefront.application.use_cases import GetPaymentUseCase
from storefront.domain.identifiers import PaymentId


def get_payment(event: dict, context: Any) -> dict:
    """決済記録を取得する（自セッションのカートのもののみ）.

    GET /payments/{payment_id}
    """
    session = resolve_session(event)
    secure = Dependencies.get_settings().is_production

    payment_id_str = get_path_parameter(event, "payment_id")
    if not payment_id_str:
        return attach_session_cookie(
            bad_request_response("payment_id is required", event=event), session, secure
        )

    use_case = GetPaymentUseCase(Dependencies.get_payment_ledger(), Dependencies.get_cart_store())
    payment = use_case.execute(session.session_id, PaymentId(payment_id_str))
    if payment is None:
        return attach_session_cookie(not_found_response("Payment", event=event), session, secure)

    return attach_session_cookie(
        success_response({"payment": payment_to_dict(payment)}, event=event), session, secure
    )
