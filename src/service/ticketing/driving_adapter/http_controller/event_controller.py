from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.platform.logging.loguru_io import Logger
from src.service.ticketing.app.command.update_event_status_use_case import (
    UpdateEventStatusUseCase,
)
from src.service.ticketing.app.query.list_event_seats_use_case import ListEventSeatsUseCase
from src.service.ticketing.app.query.list_events_use_case import ListEventsUseCase
from src.service.ticketing.app.query.list_venues_use_case import ListVenuesUseCase
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.value_object.event_key import EventKey
from src.service.ticketing.driving_adapter.schema.event_schema import (
    EventListResponse,
    EventSnapshot,
    EventStatusUpdateRequest,
    EventStatusUpdateResponse,
    EventSummaryResponse,
    SeatListResponse,
    SeatResponse,
    VenueListResponse,
    VenueResponse,
)


router = APIRouter()


def _snapshot(event: EventEntity) -> EventSnapshot:
    return EventSnapshot(
        event_name=event.name,
        event_date=event.date,
        venue_name=event.venue_name,
        venue_address=event.venue_address,
        status=event.status.value,
    )


@router.get('/events', status_code=status.HTTP_200_OK)
@Logger.io
async def list_events(
    venue: Optional[str] = None,
    status: Optional[str] = None,
    date_from: Optional[date] = Query(default=None, alias='dateFrom'),
    date_to: Optional[date] = Query(default=None, alias='dateTo'),
    use_case: ListEventsUseCase = Depends(ListEventsUseCase.depends),
) -> EventListResponse:
    summaries = await use_case.list_events(
        venue=venue, status=status, date_from=date_from, date_to=date_to
    )
    return EventListResponse(
        events=[
            EventSummaryResponse(
                event_name=summary.event.name,
                event_date=summary.event.date,
                status=summary.event.status.value,
                venue_name=summary.event.venue_name,
                venue_address=summary.event.venue_address,
                capacity=summary.venue_capacity,
                sections=summary.section_count,
                total_seats=summary.total_seats,
                available_seats=summary.available_seats,
            )
            for summary in summaries
        ]
    )


@router.put('/events/status', status_code=status.HTTP_200_OK)
@Logger.io
async def update_event_status(
    request: EventStatusUpdateRequest,
    use_case: UpdateEventStatusUseCase = Depends(UpdateEventStatusUseCase.depends),
) -> EventStatusUpdateResponse:
    change = await use_case.update_status(
        event=EventKey(
            name=request.event_name,
            date=request.event_date,
            venue_name=request.venue_name,
            venue_address=request.venue_address,
        ),
        new_status=request.new_status,
    )
    return EventStatusUpdateResponse(
        message=change.message,
        before=_snapshot(change.before),
        after=_snapshot(change.after),
    )


@router.get('/venues', status_code=status.HTTP_200_OK)
@Logger.io
async def list_venues(
    use_case: ListVenuesUseCase = Depends(ListVenuesUseCase.depends),
) -> VenueListResponse:
    venues = await use_case.list_venues()
    return VenueListResponse(
        venues=[
            VenueResponse(name=venue.name, address=venue.address, capacity=venue.capacity)
            for venue in venues
        ]
    )


@router.get('/seats/{event_name}/{event_date}', status_code=status.HTTP_200_OK)
@Logger.io
async def list_event_seats(
    event_name: str,
    event_date: date,
    use_case: ListEventSeatsUseCase = Depends(ListEventSeatsUseCase.depends),
) -> SeatListResponse:
    seats = await use_case.list_seats(event_name=event_name, event_date=event_date)
    return SeatListResponse(
        seats=[
            SeatResponse(
                section=seat.position.section,
                row=seat.position.row,
                number=seat.position.number,
                price=float(seat.price),
                availability_status=seat.availability_status.value,
            )
            for seat in seats
        ]
    )
