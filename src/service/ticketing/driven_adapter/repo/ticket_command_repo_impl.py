from typing import Optional

from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_ticket_command_repo import ITicketCommandRepo
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.ticketing_error import DuplicateQRCodeError
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel
from src.service.ticketing.driven_adapter.repo.model_mapper import model_to_ticket


class TicketCommandRepoImpl(ITicketCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def create(self, *, ticket: TicketEntity) -> TicketEntity:
        try:
            # SAVEPOINT: a failed insert must not poison the surrounding purchase
            async with self.session.begin_nested():
                await self.session.execute(
                    insert(TicketModel).values(
                        qr_code=ticket.qr_code,
                        issue_date=ticket.issue_date,
                        status=ticket.status.value,
                        order_id=ticket.order_id,
                        event_name=ticket.event.name,
                        event_date=ticket.event.date,
                        venue_name=ticket.event.venue_name,
                        venue_address=ticket.event.venue_address,
                        section=ticket.position.section,
                        seat_row=ticket.position.row,
                        seat_number=ticket.position.number,
                    )
                )
        except IntegrityError as e:
            if await self._qr_code_exists(qr_code=ticket.qr_code):
                raise DuplicateQRCodeError(ticket.qr_code) from e
            raise

        return ticket

    @Logger.io
    async def get_by_qr_code(self, *, qr_code: str) -> Optional[TicketEntity]:
        result = await self.session.execute(
            select(TicketModel).where(TicketModel.qr_code == qr_code)
        )
        model = result.scalar_one_or_none()
        return model_to_ticket(model) if model else None

    async def _qr_code_exists(self, *, qr_code: str) -> bool:
        result = await self.session.execute(
            select(TicketModel.qr_code).where(TicketModel.qr_code == qr_code)
        )
        return result.scalar_one_or_none() is not None
