"""
DynamoDB Payment Repository

Table ``Payments`` keyed by ``paymentId`` with a GSI on ``ticketId``.
Amounts are stored as Number (Decimal); optional dates and the failure
reason are only written when set.
"""

from functools import partial
from typing import Any, Dict, List, Optional

import anyio
from botocore.exceptions import BotoCoreError, ClientError

from src.platform.aws.dynamodb_query import query_index
from src.platform.exception.exceptions import PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.payment.app.interface.i_payment_repo import IPaymentRepo
from src.service.payment.domain.entity.payment_entity import Payment
from src.service.payment.domain.value_object.money import Money


_OPTIONAL_FIELDS = (
    ('paymentDate', 'payment_date'),
    ('refundDate', 'refund_date'),
    ('failureReason', 'failure_reason'),
)


class PaymentRepoDynamoDBImpl(IPaymentRepo):
    def __init__(self, *, table: Any, ticket_id_index: str = 'TicketIdIndex') -> None:
        self.table = table
        self.ticket_id_index = ticket_id_index

    @staticmethod
    def to_item(payment: Payment) -> Dict[str, Any]:
        item: Dict[str, Any] = {
            'paymentId': payment.payment_id,
            'ticketId': payment.ticket_id,
            'amount': payment.amount.amount,
            'currency': payment.amount.currency,
            'paymentMethod': payment.payment_method.value,
            'status': payment.status.value,
        }
        for item_key, attr_name in _OPTIONAL_FIELDS:
            value = getattr(payment, attr_name)
            if value is not None:
                item[item_key] = value
        return item

    @staticmethod
    def from_item(item: Dict[str, Any]) -> Payment:
        return Payment(
            payment_id=item['paymentId'],
            ticket_id=item['ticketId'],
            amount=Money(amount=item['amount'], currency=item['currency']),
            payment_method=item['paymentMethod'],
            status=item['status'],
            **{attr_name: item.get(item_key) for item_key, attr_name in _OPTIONAL_FIELDS},
        )

    @Logger.io
    async def get_by_id(self, *, payment_id: str) -> Optional[Payment]:
        try:
            response = await anyio.to_thread.run_sync(
                partial(self.table.get_item, Key={'paymentId': payment_id})
            )
        except (ClientError, BotoCoreError) as e:
            raise PersistenceError(f'Failed to load payment {payment_id}: {e}') from e

        item = response.get('Item')
        return self.from_item(item) if item else None

    @Logger.io
    async def save(self, *, payment: Payment) -> None:
        try:
            await anyio.to_thread.run_sync(
                partial(self.table.put_item, Item=self.to_item(payment))
            )
        except (ClientError, BotoCoreError) as e:
            raise PersistenceError(f'Failed to save payment {payment.payment_id}: {e}') from e

    @Logger.io
    async def find_by_ticket_id(self, *, ticket_id: str) -> List[Payment]:
        try:
            items = await query_index(
                table=self.table,
                index_name=self.ticket_id_index,
                key_name='ticketId',
                key_value=ticket_id,
            )
        except (ClientError, BotoCoreError) as e:
            raise PersistenceError(
                f'Failed to query {self.ticket_id_index} for {ticket_id}: {e}'
            ) from e
        return [self.from_item(item) for item in items]
