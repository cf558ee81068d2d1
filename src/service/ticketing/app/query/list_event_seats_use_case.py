from datetime import date
from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.domain.entity.event_seat_entity import EventSeatEntity


class ListEventSeatsUseCase:
    def __init__(self, event_query_repo: IEventQueryRepo) -> None:
        self.event_query_repo = event_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        event_query_repo: IEventQueryRepo = Depends(Provide[Container.event_query_repo]),
    ) -> Self:
        return cls(event_query_repo=event_query_repo)

    @Logger.io
    async def list_seats(self, *, event_name: str, event_date: date) -> List[EventSeatEntity]:
        """Seat map for one event; an unknown event yields an empty map"""
        seats = await self.event_query_repo.list_event_seats(
            event_name=event_name, event_date=event_date
        )
        Logger.base.info(f'💺 [LIST_SEATS] {event_name} on {event_date}: {len(seats)} seats')
        return seats
