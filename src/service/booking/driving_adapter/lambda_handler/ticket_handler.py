"""
Booking API Lambda handlers

    POST /booking/reserve   -> reserve_ticket   (201)
    POST /booking/check-in  -> check_in_ticket  (200)
    POST /booking/cancel    -> cancel_ticket    (200)
"""

from typing import Any, Dict

from src.platform.config.di import container
from src.service.booking.driving_adapter.schema.ticket_schema import (
    ReserveTicketRequest,
    TicketIdRequest,
)
from src.service.shared_kernel.driving_adapter.lambda_adapter import (
    api_gateway_handler,
    parse_request_body,
)


@api_gateway_handler(status_code=201)
async def reserve_ticket(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    request = parse_request_body(event, ReserveTicketRequest)
    use_case = container.reserve_ticket_use_case()
    response = await use_case.execute(
        flight_id=request.flight_id,
        passenger_id=request.passenger_id,
        seat_number=request.seat_number,
        departure_time=request.departure_time,
        arrival_time=request.arrival_time,
    )
    return response.to_dict()


@api_gateway_handler()
async def check_in_ticket(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    request = parse_request_body(event, TicketIdRequest)
    use_case = container.check_in_ticket_use_case()
    response = await use_case.execute(ticket_id=request.ticket_id)
    return response.to_dict()


@api_gateway_handler()
async def cancel_ticket(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    request = parse_request_body(event, TicketIdRequest)
    use_case = container.cancel_ticket_use_case()
    response = await use_case.execute(ticket_id=request.ticket_id)
    return response.to_dict()
