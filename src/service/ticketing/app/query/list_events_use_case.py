from datetime import date
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.event_dto import EventSearchFilter, EventSummary
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.domain.ticketing_error import InvalidEventStatusError


class ListEventsUseCase:
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
    async def list_events(
        self,
        *,
        venue: Optional[str] = None,
        status: Optional[str] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> List[EventSummary]:
        """Browse events with seat counts; every filter is optional and they combine with AND"""
        try:
            event_status = EventStatus(status) if status else None
        except ValueError:
            raise InvalidEventStatusError() from None

        search = EventSearchFilter(
            venue=venue or None, status=event_status, date_from=date_from, date_to=date_to
        )
        Logger.base.info(f'📋 [LIST_EVENTS] Searching events: {search}')

        events = await self.event_query_repo.list_events(search=search)

        Logger.base.info(f'✅ [LIST_EVENTS] Found {len(events)} events')
        return events
