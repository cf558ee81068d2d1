from datetime import date, datetime
from decimal import Decimal

import attrs

from src.service.ticketing.domain.entity.customer_entity import CustomerEntity
from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.domain.enum.loyalty_tier import LoyaltyTier
from src.service.ticketing.domain.value_object.seat_position import SeatPosition


@attrs.define(frozen=True)
class PurchaseHistoryItem:
    qr_code: str
    order_id: int
    order_date: datetime
    payment_method: str
    price: Decimal
    event_name: str
    event_date: date
    event_status: EventStatus
    venue_name: str
    position: SeatPosition
    checked_in: bool

    @property
    def checkin_status(self) -> str:
        return 'Checked In' if self.checked_in else 'Not Checked In'


@attrs.define(frozen=True)
class PurchaseHistory:
    customer: CustomerEntity
    items: list[PurchaseHistoryItem]

    @property
    def ticket_count(self) -> int:
        return len(self.items)

    @property
    def total_spent(self) -> Decimal:
        return sum((item.price for item in self.items), Decimal('0.00'))


@attrs.define(frozen=True)
class LoyaltyCandidate:
    customer: CustomerEntity
    ticket_count: int


@attrs.define(frozen=True)
class LoyaltyUpgrade:
    email: str
    full_name: str
    old_tier: LoyaltyTier
    new_tier: LoyaltyTier
    ticket_count: int
