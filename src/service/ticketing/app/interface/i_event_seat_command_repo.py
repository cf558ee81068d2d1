"""
Event Seat Command Repository Interface

Seat rows are the point of contention between concurrent purchases. Both
operations re-check availability inside the caller's transaction; nothing
about seat state is cached in process.
"""

from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticketing.domain.entity.event_seat_entity import EventSeatEntity
from src.service.ticketing.domain.value_object.event_key import EventKey
from src.service.ticketing.domain.value_object.seat_position import SeatPosition


class IEventSeatCommandRepo(ABC):
    @abstractmethod
    async def get_available_for_update(
        self, *, event: EventKey, position: SeatPosition
    ) -> Optional[EventSeatEntity]:
        """
        Lock and return the seat if it exists and is AVAILABLE.

        Returns:
            The seat, or None when it is missing or already SOLD
        """
        pass

    @abstractmethod
    async def mark_sold(self, *, event: EventKey, position: SeatPosition) -> bool:
        """
        Guarded AVAILABLE -> SOLD transition.

        Returns:
            True only if exactly one row moved to SOLD
        """
        pass
