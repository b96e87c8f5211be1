"""
FlightTime Value Object

Departure/arrival pair of a flight. The caller's ISO-8601 strings are kept
as given; timestamps without an offset are read as UTC.
"""

import math
from datetime import datetime, timezone
from typing import Any

import attrs

from src.platform.exception.exceptions import ValidationError


def parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.strip())
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or not value.strip()


@attrs.define(frozen=True)
class FlightTime:
    departure_time: str
    arrival_time: str

    def __attrs_post_init__(self) -> None:
        if _is_blank(self.departure_time) or _is_blank(self.arrival_time):
            raise ValidationError('Invalid flight time data.')

        try:
            departure = parse_timestamp(self.departure_time)
            arrival = parse_timestamp(self.arrival_time)
        except ValueError:
            raise ValidationError('Invalid date format for flight times.') from None

        if departure >= arrival:
            raise ValidationError('Departure time must be before arrival time.')

    @property
    def departure(self) -> datetime:
        return parse_timestamp(self.departure_time)

    @property
    def arrival(self) -> datetime:
        return parse_timestamp(self.arrival_time)

    def duration_in_minutes(self) -> int:
        seconds = (self.arrival - self.departure).total_seconds()
        return math.floor(seconds / 60)

    def duration_in_hours(self) -> float:
        return self.duration_in_minutes() / 60
