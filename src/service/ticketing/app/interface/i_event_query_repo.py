from abc import ABC, abstractmethod
from datetime import date
from typing import List

from src.service.ticketing.app.dto.event_dto import EventSearchFilter, EventSummary
from src.service.ticketing.domain.entity.event_seat_entity import EventSeatEntity
from src.service.ticketing.domain.entity.venue_entity import VenueEntity


class IEventQueryRepo(ABC):
    """Event Query Repository Interface - CQRS Read Side"""

    @abstractmethod
    async def list_events(self, *, search: EventSearchFilter) -> List[EventSummary]:
        """Events with seat counts, ordered by date then name"""
        pass

    @abstractmethod
    async def list_venues(self) -> List[VenueEntity]:
        pass

    @abstractmethod
    async def list_event_seats(self, *, event_name: str, event_date: date) -> List[EventSeatEntity]:
        """Seat map ordered by section, row, number"""
        pass
