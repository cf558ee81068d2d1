from datetime import date
from decimal import Decimal

import attrs

from src.service.ticketing.domain.enum.event_status import EventStatus


@attrs.define(frozen=True)
class EventSalesReport:
    event_name: str
    event_date: date
    event_status: EventStatus
    venue_name: str
    venue_capacity: int
    tickets_sold: int
    unique_customers: int
    total_revenue: Decimal
    avg_ticket_price: Decimal | None
    min_ticket_price: Decimal | None
    max_ticket_price: Decimal | None
    checked_in_count: int

    @property
    def checkin_rate(self) -> float | None:
        """Percentage of sold tickets checked in, 2 dp; None when nothing sold"""
        if not self.tickets_sold:
            return None
        return round(self.checked_in_count * 100 / self.tickets_sold, 2)
