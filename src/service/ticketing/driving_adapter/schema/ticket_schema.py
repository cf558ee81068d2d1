from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CheckInRequest(BaseModel):
    qr_code: str = Field(..., min_length=1, max_length=64)
    gate: str = Field(..., min_length=1, max_length=20)

    model_config = ConfigDict(
        json_schema_extra={'example': {'qr_code': 'QR1717171717171AB12CD34E', 'gate': 'G1'}}
    )


class TicketDetailResponse(BaseModel):
    qr_code: str
    status: str
    issue_date: datetime
    order_id: int
    event_name: str
    event_date: date
    venue_name: str
    venue_address: str
    section: str
    row: str
    number: str
    seat: str
    checkin_time: Optional[datetime] = None
    gate: Optional[str] = None


class CheckInResponse(BaseModel):
    success: bool = True
    message: str = 'Check-in successful'
    ticket: TicketDetailResponse


class TicketResponse(BaseModel):
    success: bool = True
    ticket: TicketDetailResponse
