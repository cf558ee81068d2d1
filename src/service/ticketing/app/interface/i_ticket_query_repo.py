from abc import ABC, abstractmethod
from typing import Optional

from src.service.ticketing.app.dto.ticket_dto import TicketDetail


class ITicketQueryRepo(ABC):
    @abstractmethod
    async def get_ticket_detail(self, *, qr_code: str) -> Optional[TicketDetail]:
        pass
