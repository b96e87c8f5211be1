"""
Aggregate Root base

[DDD Design Principles]
- Aggregates are immutable attrs instances; a transition returns a new
  aggregate built with ``attrs.evolve``
- Events raised by a transition ride along in ``pending_events`` until the
  use case has persisted the aggregate and handed the events to a publisher
- ``pending_events`` is process-local and never persisted
"""

from typing import Any, List, Self, Tuple

import attrs

from src.service.shared_kernel.domain.domain_event import DomainEvent


@attrs.define(frozen=True, kw_only=True)
class AggregateRoot:
    pending_events: Tuple[DomainEvent, ...] = attrs.field(
        factory=tuple, converter=tuple, eq=False, repr=False
    )

    def get_events(self) -> List[DomainEvent]:
        return list(self.pending_events)

    def clear_events(self) -> Self:
        return attrs.evolve(self, pending_events=())

    def _with_event(self, event: DomainEvent, **changes: Any) -> Self:
        return attrs.evolve(self, pending_events=(*self.pending_events, event), **changes)
