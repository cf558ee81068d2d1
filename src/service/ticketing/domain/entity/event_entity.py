from datetime import date

import attrs

from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.domain.value_object.event_key import EventKey


@attrs.define
class EventEntity:
    name: str
    date: date
    venue_name: str
    venue_address: str
    status: EventStatus = EventStatus.SCHEDULED

    @property
    def key(self) -> EventKey:
        return EventKey(
            name=self.name,
            date=self.date,
            venue_name=self.venue_name,
            venue_address=self.venue_address,
        )
