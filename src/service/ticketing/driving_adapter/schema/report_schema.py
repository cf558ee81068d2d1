from datetime import date
from typing import List, Optional

from pydantic import BaseModel


class SalesReportRowResponse(BaseModel):
    event_name: str
    event_date: date
    status: str
    venue_name: str
    capacity: int
    tickets_sold: int
    unique_customers: int
    total_revenue: float
    avg_ticket_price: Optional[float] = None
    min_price: Optional[float] = None
    max_price: Optional[float] = None
    checked_in_count: int
    checkin_rate: Optional[float] = None


class SalesReportResponse(BaseModel):
    success: bool = True
    reports: List[SalesReportRowResponse]
