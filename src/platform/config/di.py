"""
https://python-dependency-injector.ets-labs.org/index.html

One container per Lambda execution environment. Handlers resolve use cases
from ``container``; tests override the repo/publisher providers with the
in-memory adapters.
"""

from dependency_injector import containers, providers

from src.platform.aws.boto3_client import get_dynamodb_table, get_eventbridge_client
from src.platform.config.core_setting import Settings
from src.service.booking.app.command.cancel_ticket_use_case import CancelTicketUseCase
from src.service.booking.app.command.check_in_ticket_use_case import CheckInTicketUseCase
from src.service.booking.app.command.reserve_ticket_use_case import ReserveTicketUseCase
from src.service.booking.app.query.list_tickets_use_case import ListTicketsUseCase
from src.service.booking.domain.service.ticket_service import TicketService
from src.service.booking.driven_adapter.repo.ticket_repo_dynamodb_impl import (
    TicketRepoDynamoDBImpl,
)
from src.service.payment.app.command.issue_refund_use_case import IssueRefundUseCase
from src.service.payment.app.command.process_payment_use_case import ProcessPaymentUseCase
from src.service.payment.app.query.list_payments_use_case import ListPaymentsUseCase
from src.service.payment.domain.service.payment_service import PaymentService
from src.service.payment.driven_adapter.repo.payment_repo_dynamodb_impl import (
    PaymentRepoDynamoDBImpl,
)
from src.service.shared_kernel.driven_adapter.message_queue.event_bridge_publisher_impl import (
    EventBridgePublisherImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # AWS resources (created lazily, reused across warm invocations)
    tickets_table = providers.Singleton(
        get_dynamodb_table,
        table_name=config_service.provided.TICKETS_TABLE_NAME,
        region_name=config_service.provided.AWS_REGION,
        endpoint_url=config_service.provided.DYNAMODB_ENDPOINT_URL,
    )
    payments_table = providers.Singleton(
        get_dynamodb_table,
        table_name=config_service.provided.PAYMENTS_TABLE_NAME,
        region_name=config_service.provided.AWS_REGION,
        endpoint_url=config_service.provided.DYNAMODB_ENDPOINT_URL,
    )
    eventbridge_client = providers.Singleton(
        get_eventbridge_client,
        region_name=config_service.provided.AWS_REGION,
        endpoint_url=config_service.provided.EVENTBRIDGE_ENDPOINT_URL,
    )

    # Repositories
    ticket_repo = providers.Singleton(
        TicketRepoDynamoDBImpl,
        table=tickets_table,
        flight_id_index=config_service.provided.TICKETS_FLIGHT_ID_INDEX,
        passenger_id_index=config_service.provided.TICKETS_PASSENGER_ID_INDEX,
    )
    payment_repo = providers.Singleton(
        PaymentRepoDynamoDBImpl,
        table=payments_table,
        ticket_id_index=config_service.provided.PAYMENTS_TICKET_ID_INDEX,
    )

    # Event publishers (one source per bounded context)
    booking_event_publisher = providers.Singleton(
        EventBridgePublisherImpl,
        client=eventbridge_client,
        event_bus_name=config_service.provided.EVENT_BUS_NAME,
        source=config_service.provided.BOOKING_EVENT_SOURCE,
    )
    payment_event_publisher = providers.Singleton(
        EventBridgePublisherImpl,
        client=eventbridge_client,
        event_bus_name=config_service.provided.EVENT_BUS_NAME,
        source=config_service.provided.PAYMENT_EVENT_SOURCE,
    )

    # Domain services
    ticket_service = providers.Singleton(TicketService)
    payment_service = providers.Singleton(PaymentService)

    # Booking use cases
    reserve_ticket_use_case = providers.Factory(
        ReserveTicketUseCase,
        ticket_service=ticket_service,
        ticket_repo=ticket_repo,
        event_publisher=booking_event_publisher,
    )
    check_in_ticket_use_case = providers.Factory(
        CheckInTicketUseCase,
        ticket_service=ticket_service,
        ticket_repo=ticket_repo,
        event_publisher=booking_event_publisher,
    )
    cancel_ticket_use_case = providers.Factory(
        CancelTicketUseCase,
        ticket_service=ticket_service,
        ticket_repo=ticket_repo,
        event_publisher=booking_event_publisher,
    )
    list_tickets_use_case = providers.Factory(ListTicketsUseCase, ticket_repo=ticket_repo)

    # Payment use cases
    process_payment_use_case = providers.Factory(
        ProcessPaymentUseCase,
        payment_service=payment_service,
        payment_repo=payment_repo,
        event_publisher=payment_event_publisher,
    )
    issue_refund_use_case = providers.Factory(
        IssueRefundUseCase,
        payment_service=payment_service,
        payment_repo=payment_repo,
        event_publisher=payment_event_publisher,
    )
    list_payments_use_case = providers.Factory(ListPaymentsUseCase, payment_repo=payment_repo)


container = Container()


def cleanup() -> None:
    container.reset_singletons()
