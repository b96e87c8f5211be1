"""
Test Configuration and Fixtures

Environment is pinned before any application module is imported, because
``src.platform.config.core_setting.settings`` is built at import time.
No test talks to AWS: adapters get MagicMock tables/clients and the DI
container is overridden with the in-memory implementations.
"""

import os


def _early_setup_test_environment() -> None:
    os.environ['DEBUG'] = 'false'
    os.environ['LOG_FILE_ENABLED'] = 'false'
    os.environ.setdefault('AWS_REGION', 'us-east-1')
    os.environ.setdefault('AWS_DEFAULT_REGION', 'us-east-1')
    # Never let boto3 pick up real credentials during tests
    os.environ['AWS_ACCESS_KEY_ID'] = 'testing'
    os.environ['AWS_SECRET_ACCESS_KEY'] = 'testing'
    os.environ['SERVICE_NAME'] = 'test'


_early_setup_test_environment()

from typing import Callable, Iterator  # noqa: E402

import pytest  # noqa: E402

from src.platform.config.di import container  # noqa: E402
from src.service.booking.driven_adapter.repo.ticket_repo_in_memory_impl import (  # noqa: E402
    TicketRepoInMemoryImpl,
)
from src.service.payment.driven_adapter.repo.payment_repo_in_memory_impl import (  # noqa: E402
    PaymentRepoInMemoryImpl,
)
from src.service.shared_kernel.driven_adapter.message_queue.in_memory_event_publisher_impl import (  # noqa: E402
    InMemoryEventPublisherImpl,
)


FIXED_NOW = '2024-01-01T09:00:00.000Z'


@pytest.fixture
def fixed_clock() -> Callable[[], str]:
    return lambda: FIXED_NOW


@pytest.fixture
def ticket_repo() -> TicketRepoInMemoryImpl:
    return TicketRepoInMemoryImpl()


@pytest.fixture
def payment_repo() -> PaymentRepoInMemoryImpl:
    return PaymentRepoInMemoryImpl()


@pytest.fixture
def event_publisher() -> InMemoryEventPublisherImpl:
    return InMemoryEventPublisherImpl()


@pytest.fixture
def in_memory_container(
    ticket_repo: TicketRepoInMemoryImpl,
    payment_repo: PaymentRepoInMemoryImpl,
    event_publisher: InMemoryEventPublisherImpl,
) -> Iterator[None]:
    """Point every handler at the in-memory adapters for the duration of a test"""
    with (
        container.ticket_repo.override(ticket_repo),
        container.payment_repo.override(payment_repo),
        container.booking_event_publisher.override(event_publisher),
        container.payment_event_publisher.override(event_publisher),
    ):
        yield
