from datetime import date

import attrs

from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.event_status import EventStatus


@attrs.define(frozen=True)
class EventSearchFilter:
    venue: str | None = None  # Case-insensitive substring of the venue name
    status: EventStatus | None = None
    date_from: date | None = None
    date_to: date | None = None


@attrs.define(frozen=True)
class EventSummary:
    event: EventEntity
    venue_capacity: int
    section_count: int
    total_seats: int
    available_seats: int


@attrs.define(frozen=True)
class EventStatusChange:
    before: EventEntity
    after: EventEntity

    @property
    def message(self) -> str:
        return f'Event status updated from {self.before.status.value} to {self.after.status.value}'
