from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_command_repo import IEventCommandRepo
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.domain.value_object.event_key import EventKey
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.repo.model_mapper import event_key_clause, model_to_event


class EventCommandRepoImpl(IEventCommandRepo):
    def __init__(self, *, session: AsyncSession) -> None:
        self.session = session

    @Logger.io
    async def get_by_key(self, *, key: EventKey, for_update: bool = False) -> Optional[EventEntity]:
        stmt = select(EventModel).where(*event_key_clause(EventModel, key))
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return model_to_event(model) if model else None

    @Logger.io
    async def update_status(self, *, key: EventKey, status: EventStatus) -> bool:
        result = await self.session.execute(
            update(EventModel)
            .where(*event_key_clause(EventModel, key))
            .values(status=status.value)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1  # type: ignore[attr-defined]
