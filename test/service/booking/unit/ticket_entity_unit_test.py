"""
Unit tests for the Ticket aggregate

Test Focus:
1. Construction: new tickets record TicketReserved, rehydrated ones record nothing
2. Transitions return a new Ticket; a rejected transition leaves the original untouched
3. Checked-in tickets cannot be cancelled
"""

import pytest

from src.platform.exception.exceptions import InvalidStateError, ValidationError
from src.service.booking.domain.entity.ticket_entity import Ticket
from src.service.booking.domain.enum.ticket_status import TicketStatus
from src.service.booking.domain.value_object.flight_time import FlightTime


FLIGHT_TIME = FlightTime(
    departure_time='2023-01-01T10:00:00Z', arrival_time='2023-01-01T12:00:00Z'
)


def new_ticket(**overrides) -> Ticket:
    kwargs = dict(
        flight_id='FL1',
        passenger_id='P1',
        seat_number='12A',
        booking_date='2024-01-01T09:00:00.000Z',
        flight_time=FLIGHT_TIME,
        id_generator=lambda: 'ticket-1',
    )
    kwargs.update(overrides)
    return Ticket.create(**kwargs)


def stored_ticket(status: TicketStatus) -> Ticket:
    return Ticket(
        ticket_id='ticket-9',
        flight_id='FL1',
        passenger_id='P1',
        seat_number='12A',
        booking_date='2024-01-01T09:00:00.000Z',
        flight_time=FLIGHT_TIME,
        status=status,
    )


@pytest.mark.unit
class TestTicketCreation:
    def test_new_ticket_is_reserved_with_one_reserved_event(self) -> None:
        ticket = new_ticket()

        assert ticket.ticket_id == 'ticket-1'
        assert ticket.status == TicketStatus.RESERVED
        events = ticket.get_events()
        assert [e.event_name for e in events] == ['TicketReserved']
        assert events[0].aggregate_id == 'ticket-1'
        assert events[0].to_payload() == {
            'eventName': 'TicketReserved',
            'timestamp': events[0].timestamp,
            'aggregateId': 'ticket-1',
            'ticketId': 'ticket-1',
            'flightId': 'FL1',
            'passengerId': 'P1',
            'seatNumber': '12A',
            'bookingDate': '2024-01-01T09:00:00.000Z',
        }

    def test_default_id_generator_produces_unique_ids(self) -> None:
        first = Ticket.create(
            flight_id='FL1',
            passenger_id='P1',
            seat_number='1A',
            booking_date='2024-01-01T09:00:00.000Z',
            flight_time=FLIGHT_TIME,
        )
        second = Ticket.create(
            flight_id='FL1',
            passenger_id='P1',
            seat_number='1B',
            booking_date='2024-01-01T09:00:00.000Z',
            flight_time=FLIGHT_TIME,
        )

        assert first.ticket_id and second.ticket_id
        assert first.ticket_id != second.ticket_id

    @pytest.mark.parametrize('status', list(TicketStatus))
    def test_supplied_id_records_no_event(self, status: TicketStatus) -> None:
        ticket = new_ticket(ticket_id='existing', status=status)

        assert ticket.ticket_id == 'existing'
        assert ticket.status == status
        assert ticket.get_events() == []

    def test_empty_id_counts_as_absent(self) -> None:
        ticket = new_ticket(ticket_id='')

        assert ticket.ticket_id == 'ticket-1'
        assert [e.event_name for e in ticket.get_events()] == ['TicketReserved']

    def test_rehydration_records_no_event(self) -> None:
        assert stored_ticket(TicketStatus.CHECKED_IN).get_events() == []

    def test_status_accepts_stored_string(self) -> None:
        ticket = Ticket(
            ticket_id='t',
            flight_id='FL1',
            passenger_id='P1',
            seat_number='12A',
            booking_date='2024-01-01T09:00:00.000Z',
            flight_time=FLIGHT_TIME,
            status='CHECKED_IN',
        )

        assert ticket.status is TicketStatus.CHECKED_IN

    def test_unknown_status_is_rejected(self) -> None:
        with pytest.raises(ValidationError):
            stored_ticket('BOARDED')  # type: ignore[arg-type]

    def test_blank_flight_id_is_rejected(self) -> None:
        with pytest.raises(ValidationError, match='flight_id is required'):
            new_ticket(flight_id='  ')


@pytest.mark.unit
class TestTicketEvents:
    def test_get_events_returns_a_copy(self) -> None:
        ticket = new_ticket()

        events = ticket.get_events()
        events.clear()

        assert len(ticket.get_events()) == 1

    def test_clear_events_is_idempotent(self) -> None:
        ticket = new_ticket()

        cleared = ticket.clear_events()

        assert cleared.get_events() == []
        assert cleared.clear_events().get_events() == []
        assert cleared == ticket
        assert len(ticket.get_events()) == 1


@pytest.mark.unit
class TestTicketCheckIn:
    def test_check_in_reserved_ticket(self) -> None:
        ticket = stored_ticket(TicketStatus.RESERVED)

        checked_in = ticket.check_in()

        assert checked_in.status == TicketStatus.CHECKED_IN
        assert [e.event_name for e in checked_in.get_events()] == ['TicketCheckedIn']
        assert checked_in.get_events()[0].to_payload()['ticketId'] == 'ticket-9'
        # Original instance is untouched
        assert ticket.status == TicketStatus.RESERVED
        assert ticket.get_events() == []

    def test_check_in_appends_to_existing_events(self) -> None:
        ticket = new_ticket().check_in()

        assert [e.event_name for e in ticket.get_events()] == ['TicketReserved', 'TicketCheckedIn']

    @pytest.mark.parametrize('status', [TicketStatus.CHECKED_IN, TicketStatus.CANCELLED])
    def test_check_in_non_reserved_ticket_fails(self, status: TicketStatus) -> None:
        ticket = stored_ticket(status)

        with pytest.raises(
            InvalidStateError, match='Cannot check in, as the ticket is not in a "Reserved" state'
        ):
            ticket.check_in()

        assert ticket.status == status
        assert ticket.get_events() == []


@pytest.mark.unit
class TestTicketCancel:
    def test_cancel_reserved_ticket(self) -> None:
        cancelled = stored_ticket(TicketStatus.RESERVED).cancel()

        assert cancelled.status == TicketStatus.CANCELLED
        assert [e.event_name for e in cancelled.get_events()] == ['TicketCancelled']

    def test_cancel_checked_in_ticket_is_rejected(self) -> None:
        """Checking in forecloses cancellation"""
        ticket = stored_ticket(TicketStatus.CHECKED_IN)

        with pytest.raises(
            InvalidStateError, match='Cannot cancel, as the ticket is already checked in'
        ):
            ticket.cancel()

        assert ticket.status == TicketStatus.CHECKED_IN
        assert ticket.get_events() == []

    def test_invalid_state_error_maps_to_conflict(self) -> None:
        with pytest.raises(InvalidStateError) as exc_info:
            stored_ticket(TicketStatus.CHECKED_IN).cancel()

        assert exc_info.value.status_code == 409

    def test_cancelling_a_cancelled_ticket_records_another_event(self) -> None:
        ticket = stored_ticket(TicketStatus.CANCELLED)

        again = ticket.cancel()

        assert again.status == TicketStatus.CANCELLED
        assert [e.event_name for e in again.get_events()] == ['TicketCancelled']
