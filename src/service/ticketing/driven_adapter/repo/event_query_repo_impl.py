"""
Event Query Repository Implementation - CQRS Read Side
"""

from datetime import date
from typing import List

from sqlalchemy import and_, case, distinct, func, select

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.dto.event_dto import EventSearchFilter, EventSummary
from src.service.ticketing.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.ticketing.domain.entity.event_seat_entity import EventSeatEntity
from src.service.ticketing.domain.entity.venue_entity import VenueEntity
from src.service.ticketing.domain.enum.availability_status import AvailabilityStatus
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.model.event_seat_model import EventSeatModel
from src.service.ticketing.driven_adapter.model.venue_model import VenueModel
from src.service.ticketing.driven_adapter.repo.model_mapper import (
    model_to_event,
    model_to_event_seat,
)
from src.service.ticketing.driven_adapter.repo.query_repo_base import QueryRepoBase


class EventQueryRepoImpl(QueryRepoBase, IEventQueryRepo):
    @Logger.io
    async def list_events(self, *, search: EventSearchFilter) -> List[EventSummary]:
        available_seats = func.sum(
            case(
                (EventSeatModel.availability_status == AvailabilityStatus.AVAILABLE.value, 1),
                else_=0,
            )
        )
        stmt = (
            select(
                EventModel,
                VenueModel.capacity,
                func.count(distinct(EventSeatModel.section)),
                func.count(EventSeatModel.seat_number),
                func.coalesce(available_seats, 0),
            )
            .join(
                VenueModel,
                and_(
                    EventModel.venue_name == VenueModel.name,
                    EventModel.venue_address == VenueModel.address,
                ),
            )
            .outerjoin(
                EventSeatModel,
                and_(
                    EventSeatModel.event_name == EventModel.name,
                    EventSeatModel.event_date == EventModel.event_date,
                    EventSeatModel.venue_name == EventModel.venue_name,
                    EventSeatModel.venue_address == EventModel.venue_address,
                ),
            )
        )

        if search.venue:
            stmt = stmt.where(VenueModel.name.icontains(search.venue, autoescape=True))
        if search.status:
            stmt = stmt.where(EventModel.status == search.status.value)
        if search.date_from:
            stmt = stmt.where(EventModel.event_date >= search.date_from)
        if search.date_to:
            stmt = stmt.where(EventModel.event_date <= search.date_to)

        stmt = stmt.group_by(
            EventModel.name,
            EventModel.event_date,
            EventModel.venue_name,
            EventModel.venue_address,
            EventModel.status,
            VenueModel.capacity,
        ).order_by(EventModel.event_date, EventModel.name)

        async with self._get_session() as session:
            result = await session.execute(stmt)
            return [
                EventSummary(
                    event=model_to_event(event_model),
                    venue_capacity=capacity,
                    section_count=section_count,
                    total_seats=total_seats,
                    available_seats=int(available),
                )
                for event_model, capacity, section_count, total_seats, available in result.all()
            ]

    @Logger.io
    async def list_venues(self) -> List[VenueEntity]:
        async with self._get_session() as session:
            result = await session.execute(select(VenueModel).order_by(VenueModel.name))
            return [
                VenueEntity(name=model.name, address=model.address, capacity=model.capacity)
                for model in result.scalars().all()
            ]

    @Logger.io
    async def list_event_seats(self, *, event_name: str, event_date: date) -> List[EventSeatEntity]:
        async with self._get_session() as session:
            result = await session.execute(
                select(EventSeatModel)
                .where(
                    EventSeatModel.event_name == event_name,
                    EventSeatModel.event_date == event_date,
                )
                .order_by(
                    EventSeatModel.section, EventSeatModel.seat_row, EventSeatModel.seat_number
                )
            )
            return [model_to_event_seat(model) for model in result.scalars().all()]
