from datetime import date
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator, validate_email


class SeatSelection(BaseModel):
    # Seat rows/numbers are labels; accept 1 as well as '1'
    model_config = ConfigDict(coerce_numbers_to_str=True)

    section: str = Field(..., min_length=1, max_length=20)
    row: str = Field(..., min_length=1, max_length=10)
    number: str = Field(..., min_length=1, max_length=10)


class PurchaseRequest(BaseModel):
    customer_email: str
    event_name: str = Field(..., min_length=1)
    event_date: date
    venue_name: str = Field(..., min_length=1)
    venue_address: str = Field(..., min_length=1)
    payment_method: str = Field(..., min_length=1, max_length=50)
    seats: List[SeatSelection] = Field(..., min_length=1)

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'customer_email': 'a@b.com',
                'event_name': 'Concert',
                'event_date': '2024-06-01',
                'venue_name': 'Arena',
                'venue_address': '1 Main St',
                'payment_method': 'CREDIT_CARD',
                'seats': [{'section': 'A', 'row': '1', 'number': '5'}],
            }
        }
    )

    @field_validator('customer_email')
    @classmethod
    def check_email_format(cls, value: str) -> str:
        # Format check only; the stored email is matched as given
        validate_email(value)
        return value


class PurchasedTicketResponse(BaseModel):
    qr_code: str
    section: str
    row: str
    number: str
    price: float
    order_id: int


class PurchaseResponse(BaseModel):
    success: bool = True
    message: str = 'Tickets purchased successfully'
    tickets: List[PurchasedTicketResponse]
