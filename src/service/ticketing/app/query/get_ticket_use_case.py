from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.ticket_dto import TicketDetail
from src.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.ticketing.domain.ticketing_error import TicketNotFoundError


class GetTicketUseCase:
    def __init__(self, ticket_query_repo: ITicketQueryRepo) -> None:
        self.ticket_query_repo = ticket_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        ticket_query_repo: ITicketQueryRepo = Depends(Provide[Container.ticket_query_repo]),
    ) -> Self:
        return cls(ticket_query_repo=ticket_query_repo)

    @Logger.io
    async def get_by_qr_code(self, *, qr_code: str) -> TicketDetail:
        detail = await self.ticket_query_repo.get_ticket_detail(qr_code=qr_code)
        if detail is None:
            raise TicketNotFoundError(qr_code)
        return detail
