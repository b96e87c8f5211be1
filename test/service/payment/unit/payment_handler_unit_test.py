from typing import Any, Dict

import orjson
import pytest

from src.service.payment.domain.enum.payment_status import PaymentStatus
from src.service.payment.driven_adapter.repo.payment_repo_in_memory_impl import (
    PaymentRepoInMemoryImpl,
)
from src.service.payment.driving_adapter.lambda_handler.payment_handler import (
    issue_refund,
    process_payment,
)
from src.service.shared_kernel.driven_adapter.message_queue.in_memory_event_publisher_impl import (
    InMemoryEventPublisherImpl,
)


def api_event(body: Dict[str, Any]) -> Dict[str, Any]:
    return {'httpMethod': 'POST', 'body': orjson.dumps(body).decode()}


def body_of(response: Dict[str, Any]) -> Any:
    return orjson.loads(response['body'])


@pytest.mark.unit
@pytest.mark.usefixtures('in_memory_container')
class TestPaymentHandlers:
    def test_process_payment_returns_201(
        self, payment_repo: PaymentRepoInMemoryImpl, event_publisher: InMemoryEventPublisherImpl
    ) -> None:
        response = process_payment(
            {'body': '{"ticketId": "ticket-1", "amount": 100.50, "currency": "usd", '
             '"paymentMethod": "CREDIT_CARD"}'},
            None,
        )

        assert response['statusCode'] == 201
        body = body_of(response)
        assert body['currency'] == 'USD'
        assert body['amount'] == 100.5
        assert body['status'] == 'COMPLETED'
        assert 'paymentDate' in body
        assert payment_repo.payments[body['paymentId']].status == PaymentStatus.COMPLETED
        assert event_publisher.event_names() == ['PaymentProcessed']

    def test_invalid_payment_method_returns_400_and_records_nothing(
        self, payment_repo: PaymentRepoInMemoryImpl
    ) -> None:
        response = process_payment(
            api_event(
                {'ticketId': 'ticket-1', 'amount': 10, 'currency': 'USD', 'paymentMethod': 'CASH'}
            ),
            None,
        )

        assert response['statusCode'] == 400
        assert 'PaymentMethod' in body_of(response)['detail']
        assert payment_repo.payments == {}

    def test_refund_flow(
        self, payment_repo: PaymentRepoInMemoryImpl, event_publisher: InMemoryEventPublisherImpl
    ) -> None:
        payment_id = body_of(
            process_payment(
                api_event(
                    {
                        'ticketId': 'ticket-1',
                        'amount': 42,
                        'currency': 'EUR',
                        'paymentMethod': 'PAYPAL',
                    }
                ),
                None,
            )
        )['paymentId']

        first = issue_refund(api_event({'paymentId': payment_id, 'reason': 'cancelled'}), None)
        second = issue_refund(api_event({'paymentId': payment_id, 'reason': 'again'}), None)

        assert first['statusCode'] == 200
        assert body_of(first)['status'] == 'REFUNDED'
        assert 'refundDate' in body_of(first)
        assert second['statusCode'] == 409
        assert body_of(second) == {'detail': 'Cannot refund payment that is in REFUNDED state'}
        assert event_publisher.event_names() == ['PaymentProcessed', 'RefundIssued']

    def test_refund_unknown_payment_returns_404(self) -> None:
        response = issue_refund(api_event({'paymentId': 'ghost', 'reason': 'x'}), None)

        assert response['statusCode'] == 404
        assert body_of(response) == {'detail': 'Payment with ID ghost not found'}

    def test_refund_requires_reason(self) -> None:
        response = issue_refund(api_event({'paymentId': 'payment-1'}), None)

        assert response['statusCode'] == 400
