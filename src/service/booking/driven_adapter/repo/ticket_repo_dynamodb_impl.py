"""
DynamoDB Ticket Repository

Table ``Tickets`` keyed by ``ticketId`` with GSIs on ``flightId`` and
``passengerId``. Items are the flat camelCase ticket record; pending events
are never stored.
"""

from functools import partial
from typing import Any, Dict, List, Optional

import anyio
from botocore.exceptions import BotoCoreError, ClientError

from src.platform.aws.dynamodb_query import query_index
from src.platform.exception.exceptions import PersistenceError
from src.platform.logging.loguru_io import Logger
from src.service.booking.app.interface.i_ticket_repo import ITicketRepo
from src.service.booking.domain.entity.ticket_entity import Ticket
from src.service.booking.domain.value_object.flight_time import FlightTime


class TicketRepoDynamoDBImpl(ITicketRepo):
    def __init__(
        self,
        *,
        table: Any,
        flight_id_index: str = 'FlightIdIndex',
        passenger_id_index: str = 'PassengerIdIndex',
    ) -> None:
        self.table = table
        self.flight_id_index = flight_id_index
        self.passenger_id_index = passenger_id_index

    @staticmethod
    def to_item(ticket: Ticket) -> Dict[str, Any]:
        return {
            'ticketId': ticket.ticket_id,
            'flightId': ticket.flight_id,
            'passengerId': ticket.passenger_id,
            'seatNumber': ticket.seat_number,
            'bookingDate': ticket.booking_date,
            'status': ticket.status.value,
            'departureTime': ticket.flight_time.departure_time,
            'arrivalTime': ticket.flight_time.arrival_time,
        }

    @staticmethod
    def from_item(item: Dict[str, Any]) -> Ticket:
        return Ticket(
            ticket_id=item['ticketId'],
            flight_id=item['flightId'],
            passenger_id=item['passengerId'],
            seat_number=item['seatNumber'],
            booking_date=item['bookingDate'],
            status=item['status'],
            flight_time=FlightTime(
                departure_time=item['departureTime'], arrival_time=item['arrivalTime']
            ),
        )

    @Logger.io
    async def get_by_id(self, *, ticket_id: str) -> Optional[Ticket]:
        try:
            response = await anyio.to_thread.run_sync(
                partial(self.table.get_item, Key={'ticketId': ticket_id})
            )
        except (ClientError, BotoCoreError) as e:
            raise PersistenceError(f'Failed to load ticket {ticket_id}: {e}') from e

        item = response.get('Item')
        return self.from_item(item) if item else None

    @Logger.io
    async def save(self, *, ticket: Ticket) -> None:
        try:
            await anyio.to_thread.run_sync(partial(self.table.put_item, Item=self.to_item(ticket)))
        except (ClientError, BotoCoreError) as e:
            raise PersistenceError(f'Failed to save ticket {ticket.ticket_id}: {e}') from e

    async def _find(self, *, index_name: str, key_name: str, key_value: str) -> List[Ticket]:
        try:
            items = await query_index(
                table=self.table, index_name=index_name, key_name=key_name, key_value=key_value
            )
        except (ClientError, BotoCoreError) as e:
            raise PersistenceError(f'Failed to query {index_name} for {key_value}: {e}') from e
        return [self.from_item(item) for item in items]

    @Logger.io
    async def find_by_flight_id(self, *, flight_id: str) -> List[Ticket]:
        return await self._find(
            index_name=self.flight_id_index, key_name='flightId', key_value=flight_id
        )

    @Logger.io
    async def find_by_passenger_id(self, *, passenger_id: str) -> List[Ticket]:
        return await self._find(
            index_name=self.passenger_id_index, key_name='passengerId', key_value=passenger_id
        )
