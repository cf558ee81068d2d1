from datetime import date, datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class PurchaseHistoryItemResponse(BaseModel):
    qr_code: str
    order_id: int
    payment_method: str
    purchase_date: datetime
    total_price: float
    event_name: str
    event_date: date
    event_status: str
    venue_name: str
    seat_location: str
    checkin_status: str


class PurchaseHistoryResponse(BaseModel):
    success: bool = True
    email: str
    customer_name: str
    loyalty_tier: str
    total_tickets: int
    total_spent: float
    history: List[PurchaseHistoryItemResponse]


class LoyaltyUpdateRequest(BaseModel):
    min_purchases: int = Field(..., ge=0)
    target_tier: str

    model_config = ConfigDict(
        json_schema_extra={'example': {'min_purchases': 3, 'target_tier': 'Silver'}}
    )


class LoyaltyUpgradeResponse(BaseModel):
    email: str
    name: str
    old_tier: str
    new_tier: str
    purchase_count: int


class LoyaltyUpdateResponse(BaseModel):
    success: bool = True
    message: str
    updated: List[LoyaltyUpgradeResponse]
