"""
Domain Event base

Every event carries the envelope fields (event name, timestamp, aggregate id)
plus its own payload fields. Events are immutable snapshots taken at the
moment of the state change; nothing refers back to them after publishing.
"""

from typing import Any, ClassVar, Dict

import attrs
from pydantic.alias_generators import to_camel

from src.service.shared_kernel.domain.clock import utc_now_iso


_ENVELOPE_FIELDS = ('aggregate_id', 'timestamp')


@attrs.define(frozen=True, kw_only=True)
class DomainEvent:
    EVENT_NAME: ClassVar[str] = 'DomainEvent'

    aggregate_id: str
    timestamp: str = attrs.field(factory=utc_now_iso)

    @property
    def event_name(self) -> str:
        return self.EVENT_NAME

    def to_payload(self) -> Dict[str, Any]:
        """Flat camelCase representation used as the event bus detail."""
        payload: Dict[str, Any] = {
            'eventName': self.event_name,
            'timestamp': self.timestamp,
            'aggregateId': self.aggregate_id,
        }
        for field in attrs.fields(type(self)):
            if field.name in _ENVELOPE_FIELDS:
                continue
            payload[to_camel(field.name)] = getattr(self, field.name)
        return payload
