"""Unit tests for the DomainEvent envelope and AggregateRoot event bookkeeping"""

from decimal import Decimal

import attrs
import pytest

from src.service.payment.domain.domain_event.payment_domain_event import RefundIssuedEvent
from src.service.shared_kernel.domain.aggregate_root import AggregateRoot
from src.service.shared_kernel.domain.domain_event import DomainEvent


@attrs.define(frozen=True, kw_only=True)
class _Counter(AggregateRoot):
    value: int = 0

    def bump(self) -> '_Counter':
        return self._with_event(
            DomainEvent(aggregate_id='counter', timestamp='2024-01-01T00:00:00.000Z'),
            value=self.value + 1,
        )


@pytest.mark.unit
class TestDomainEvent:
    def test_payload_is_flat_camel_case(self) -> None:
        event = RefundIssuedEvent(
            aggregate_id='payment-1',
            timestamp='2024-01-02T00:00:00.000Z',
            payment_id='payment-1',
            ticket_id='ticket-1',
            amount=Decimal('10.5'),
            currency='USD',
            refund_date='2024-01-02T00:00:00.000Z',
            reason='cancelled',
        )

        assert event.event_name == 'RefundIssued'
        assert event.to_payload() == {
            'eventName': 'RefundIssued',
            'timestamp': '2024-01-02T00:00:00.000Z',
            'aggregateId': 'payment-1',
            'paymentId': 'payment-1',
            'ticketId': 'ticket-1',
            'amount': Decimal('10.5'),
            'currency': 'USD',
            'refundDate': '2024-01-02T00:00:00.000Z',
            'reason': 'cancelled',
        }

    def test_timestamp_defaults_to_utc_millis(self) -> None:
        timestamp = DomainEvent(aggregate_id='x').timestamp

        assert timestamp.endswith('Z')
        assert len(timestamp) == len('2024-01-01T00:00:00.000Z')


@pytest.mark.unit
class TestAggregateRoot:
    def test_transitions_accumulate_events_without_mutating(self) -> None:
        start = _Counter()

        bumped = start.bump().bump()

        assert bumped.value == 2
        assert len(bumped.get_events()) == 2
        assert start.get_events() == []

    def test_pending_events_do_not_affect_equality(self) -> None:
        assert _Counter(value=1) == _Counter().bump()

    def test_clear_events_keeps_state(self) -> None:
        cleared = _Counter().bump().clear_events()

        assert cleared.value == 1
        assert cleared.get_events() == []
