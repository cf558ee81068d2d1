from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class EventSummaryResponse(BaseModel):
    event_name: str
    event_date: date
    status: str
    venue_name: str
    venue_address: str
    capacity: int
    sections: int
    total_seats: int
    available_seats: int


class EventListResponse(BaseModel):
    success: bool = True
    events: List[EventSummaryResponse]


class VenueResponse(BaseModel):
    name: str
    address: str
    capacity: int


class VenueListResponse(BaseModel):
    success: bool = True
    venues: List[VenueResponse]


class SeatResponse(BaseModel):
    section: str
    row: str
    number: str
    price: float
    availability_status: str


class SeatListResponse(BaseModel):
    success: bool = True
    seats: List[SeatResponse]


class EventStatusUpdateRequest(BaseModel):
    event_name: str = Field(..., min_length=1)
    event_date: date
    venue_name: str = Field(..., min_length=1)
    venue_address: str = Field(..., min_length=1)
    new_status: str

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'event_name': 'Concert',
                'event_date': '2024-06-01',
                'venue_name': 'Arena',
                'venue_address': '1 Main St',
                'new_status': 'CANCELLED',
            }
        }
    )


class EventSnapshot(BaseModel):
    event_name: str
    event_date: date
    venue_name: str
    venue_address: str
    status: str


class EventStatusUpdateResponse(BaseModel):
    success: bool = True
    message: str
    before: EventSnapshot
    after: EventSnapshot
