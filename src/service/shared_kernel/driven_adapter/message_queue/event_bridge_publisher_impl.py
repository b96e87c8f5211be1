"""
EventBridge Publisher Implementation

Concrete adapter that implements IEventPublisher with boto3 ``put_events``.
Each bounded context gets its own instance with its own ``source`` so the
payment stack's rules can match on ``com.travier.booking``.

boto3 is blocking, so the call runs in a worker thread.
"""

from datetime import datetime, timezone
from functools import partial
from typing import Any, Dict, List, Sequence

import anyio
from botocore.exceptions import BotoCoreError, ClientError

from src.platform.exception.exceptions import PublishError
from src.platform.logging.loguru_io import Logger
from src.platform.message_codec import MessageCodec
from src.service.shared_kernel.app.interface.i_event_publisher import IEventPublisher
from src.service.shared_kernel.domain.domain_event import DomainEvent


class EventBridgePublisherImpl(IEventPublisher):
    def __init__(self, *, client: Any, event_bus_name: str, source: str) -> None:
        self.client = client
        self.event_bus_name = event_bus_name
        self.source = source

    def _build_entry(self, event: DomainEvent) -> Dict[str, Any]:
        return {
            'EventBusName': self.event_bus_name,
            'Source': self.source,
            'DetailType': event.event_name,
            'Detail': MessageCodec.encode_message(data=event.to_payload()),
            'Time': datetime.now(timezone.utc),
        }

    async def _put_events(self, entries: List[Dict[str, Any]]) -> None:
        try:
            response = await anyio.to_thread.run_sync(
                partial(self.client.put_events, Entries=entries)
            )
        except (ClientError, BotoCoreError) as e:
            raise PublishError(f'Failed to publish events to {self.event_bus_name}: {e}') from e

        failed = response.get('FailedEntryCount', 0)
        if failed:
            reasons = [
                f'{result.get("ErrorCode")}: {result.get("ErrorMessage")}'
                for result in response.get('Entries', [])
                if result.get('ErrorCode')
            ]
            raise PublishError(
                f'{failed} of {len(entries)} events rejected by {self.event_bus_name}: '
                + '; '.join(reasons)
            )

    @Logger.io
    async def publish(self, *, event: DomainEvent) -> None:
        await self._put_events([self._build_entry(event)])
        Logger.base.info(f'📤 [PUBLISH] {event.event_name} for {event.aggregate_id}')

    @Logger.io
    async def publish_all(self, *, events: Sequence[DomainEvent]) -> None:
        if not events:
            return

        await self._put_events([self._build_entry(event) for event in events])
        Logger.base.info(
            f'📤 [PUBLISH] {len(events)} event(s): {", ".join(e.event_name for e in events)}'
        )
