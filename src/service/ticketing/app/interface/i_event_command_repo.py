from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.domain.value_object.event_key import EventKey


class IEventCommandRepo(ABC):
    """Event repository inside a unit of work - CQRS Write Side"""

    @abstractmethod
    async def get_by_key(self, *, key: EventKey, for_update: bool = False) -> Optional[EventEntity]:
        pass

    @abstractmethod
    async def update_status(self, *, key: EventKey, status: EventStatus) -> bool:
        """Returns False when no event matched the key"""
        pass
