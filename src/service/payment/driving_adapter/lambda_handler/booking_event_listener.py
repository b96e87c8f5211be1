"""
Booking event listeners (Payment context)

Targets of the payment stack's EventBridge rules for TicketReserved and
TicketCancelled from ``com.travier.booking``. They only log for now.
"""

from typing import Any, Dict

from src.platform.logging.loguru_io import Logger
from src.service.shared_kernel.driving_adapter.lambda_adapter import parse_event_bridge_event


@Logger.io
def log_ticket_reserved(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    detail_type, detail = parse_event_bridge_event(event)
    ticket_id = detail.get('ticketId') or detail.get('aggregateId')
    Logger.base.info(
        f'📥 [PAYMENT] {detail_type} received for ticket {ticket_id} '
        f'(flight={detail.get("flightId")}, passenger={detail.get("passengerId")})'
    )
    return {'status': 'ok', 'ticketId': ticket_id}


@Logger.io
def log_ticket_cancelled(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    detail_type, detail = parse_event_bridge_event(event)
    ticket_id = detail.get('ticketId') or detail.get('aggregateId')
    Logger.base.info(f'📥 [PAYMENT] {detail_type} received for ticket {ticket_id}')
    return {'status': 'ok', 'ticketId': ticket_id}
