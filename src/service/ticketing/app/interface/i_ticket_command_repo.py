from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticketing.domain.entity.ticket_entity import TicketEntity


class ITicketCommandRepo(ABC):
    @abstractmethod
    async def create(self, *, ticket: TicketEntity) -> TicketEntity:
        """
        Insert the ticket without disturbing the rest of the transaction.

        Raises:
            DuplicateQRCodeError: qr_code already taken; nothing was written
        """
        pass

    @abstractmethod
    async def get_by_qr_code(self, *, qr_code: str) -> Optional[TicketEntity]:
        pass
