from typing import Optional

from sqlalchemy import select

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.ticket_dto import TicketDetail
from src.service.ticketing.app.interface.i_ticket_query_repo import ITicketQueryRepo
from src.service.ticketing.driven_adapter.model.check_in_model import CheckInModel
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketing.driven_adapter.repo.model_mapper import model_to_ticket
from src.service.ticketing.driven_adapter.repo.query_repo_base import QueryRepoBase


class TicketQueryRepoImpl(QueryRepoBase, ITicketQueryRepo):
    @Logger.io
    async def get_ticket_detail(self, *, qr_code: str) -> Optional[TicketDetail]:
        async with self._get_session() as session:
            result = await session.execute(
                select(TicketModel, CheckInModel)
                .outerjoin(CheckInModel, CheckInModel.qr_code == TicketModel.qr_code)
                .where(TicketModel.qr_code == qr_code)
            )
            row = result.first()
            if row is None:
                return None

            ticket_model, check_in_model = row
            return TicketDetail(
                ticket=model_to_ticket(ticket_model),
                checkin_time=check_in_model.checkin_time if check_in_model else None,
                gate=check_in_model.gate if check_in_model else None,
            )
