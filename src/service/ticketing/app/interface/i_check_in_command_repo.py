from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticketing.domain.entity.check_in_entity import CheckInEntity


class ICheckInCommandRepo(ABC):
    @abstractmethod
    async def get_by_qr_code(self, *, qr_code: str) -> Optional[CheckInEntity]:
        pass

    @abstractmethod
    async def create(self, *, check_in: CheckInEntity) -> bool:
        """Returns False when the ticket already has a check-in row"""
        pass
