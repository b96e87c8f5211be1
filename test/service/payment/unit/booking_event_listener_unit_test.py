import pytest

from src.service.payment.driving_adapter.lambda_handler.booking_event_listener import (
    log_ticket_cancelled,
    log_ticket_reserved,
)


def event_bridge_event(detail_type: str, detail) -> dict:
    return {
        'version': '0',
        'id': 'c1e3b1de-0000-0000-0000-000000000000',
        'detail-type': detail_type,
        'source': 'com.travier.booking',
        'time': '2024-01-01T09:00:00Z',
        'region': 'us-east-1',
        'detail': detail,
    }


@pytest.mark.unit
class TestBookingEventListener:
    def test_ticket_reserved(self) -> None:
        result = log_ticket_reserved(
            event_bridge_event(
                'TicketReserved',
                {
                    'eventName': 'TicketReserved',
                    'aggregateId': 'ticket-1',
                    'ticketId': 'ticket-1',
                    'flightId': 'FL1',
                    'passengerId': 'P1',
                },
            ),
            None,
        )

        assert result == {'status': 'ok', 'ticketId': 'ticket-1'}

    def test_ticket_cancelled_with_string_detail(self) -> None:
        result = log_ticket_cancelled(
            event_bridge_event(
                'TicketCancelled', '{"eventName": "TicketCancelled", "aggregateId": "ticket-2"}'
            ),
            None,
        )

        assert result == {'status': 'ok', 'ticketId': 'ticket-2'}
