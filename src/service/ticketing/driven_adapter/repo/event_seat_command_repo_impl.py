from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_seat_command_repo import IEventSeatCommandRepo
from src.service.ticketing.domain.entity.event_seat_entity import EventSeatEntity
from src.service.ticketing.domain.enum.availability_status import AvailabilityStatus
from src.service.ticketing.domain.value_object.event_key import EventKey
from src.service.ticketing.domain.value_object.seat_position import SeatPosition
from src.service.ticketing.driven_adapter.model.event_seat_model import EventSeatModel
from src.service.ticketing.driven_adapter.repo.model_mapper import (
    model_to_event_seat,
    seat_key_clause,
)


class EventSeatCommandRepoImpl(IEventSeatCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_available_for_update(
        self, *, event: EventKey, position: SeatPosition
    ) -> Optional[EventSeatEntity]:
        # Row lock on PostgreSQL; SQLite serializes writers with BEGIN IMMEDIATE instead
        result = await self.session.execute(
            select(EventSeatModel)
            .where(
                *seat_key_clause(EventSeatModel, event, position),
                EventSeatModel.availability_status == AvailabilityStatus.AVAILABLE.value,
            )
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        model = result.scalar_one_or_none()
        return model_to_event_seat(model) if model else None

    @Logger.io
    async def mark_sold(self, *, event: EventKey, position: SeatPosition) -> bool:
        result = await self.session.execute(
            update(EventSeatModel)
            .where(
                *seat_key_clause(EventSeatModel, event, position),
                EventSeatModel.availability_status == AvailabilityStatus.AVAILABLE.value,
            )
            .values(availability_status=AvailabilityStatus.SOLD.value)
            .execution_options(synchronize_session=False)
        )
        sold = result.rowcount == 1  # type: ignore[attr-defined]
        if sold:
            Logger.base.info(f'💺 [SEAT] {event.name} {position.label} -> SOLD')
        return sold
