from typing import Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.event_dto import EventStatusChange
from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.domain.ticketing_error import (
    EventNotFoundError,
    InvalidEventStatusError,
)
from src.service.ticketing.domain.value_object.event_key import EventKey


class UpdateEventStatusUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
    ) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def update_status(self, *, event: EventKey, new_status: str) -> EventStatusChange:
        try:
            status = EventStatus(new_status)
        except ValueError:
            raise InvalidEventStatusError() from None

        change: EventStatusChange | None = None
        async with self.uow:
            before = await self.uow.event_command_repo.get_by_key(key=event, for_update=True)
            if before is not None and await self.uow.event_command_repo.update_status(
                key=event, status=status
            ):
                await self.uow.commit()
                change = EventStatusChange(before=before, after=attrs.evolve(before, status=status))

        if change is None:
            raise EventNotFoundError()

        Logger.base.info(f'🔁 [EVENT_STATUS] {event.name} on {event.date}: {change.message}')
        return change
