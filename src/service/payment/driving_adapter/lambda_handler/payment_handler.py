"""
Payment API Lambda handlers

    POST /payment/process -> process_payment (201)
    POST /payment/refund  -> issue_refund    (200)
"""

from typing import Any, Dict

from src.platform.config.di import container
from src.service.payment.driving_adapter.schema.payment_schema import (
    IssueRefundRequest,
    ProcessPaymentRequest,
)
from src.service.shared_kernel.driving_adapter.lambda_adapter import (
    api_gateway_handler,
    parse_request_body,
)


@api_gateway_handler(status_code=201)
async def process_payment(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    request = parse_request_body(event, ProcessPaymentRequest)
    use_case = container.process_payment_use_case()
    response = await use_case.execute(
        ticket_id=request.ticket_id,
        amount=request.amount,
        currency=request.currency,
        payment_method=request.payment_method,
    )
    return response.to_dict()


@api_gateway_handler()
async def issue_refund(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    request = parse_request_body(event, IssueRefundRequest)
    use_case = container.issue_refund_use_case()
    response = await use_case.execute(payment_id=request.payment_id, reason=request.reason)
    return response.to_dict()
