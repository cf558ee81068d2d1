from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock

from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.service.ticketing.domain.entity.customer_entity import CustomerEntity
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.event_seat_entity import EventSeatEntity
from src.service.ticketing.domain.value_object.event_key import EventKey
from src.service.ticketing.domain.value_object.seat_position import SeatPosition


FIXED_NOW = datetime(2025, 11, 1, 12, 0, tzinfo=timezone.utc)

EVENT_KEY = EventKey(
    name='Rock Concert',
    date=date(2025, 12, 1),
    venue_name='Madison Square Garden',
    venue_address='4 Pennsylvania Plaza, New York, NY',
)


class FakeUnitOfWork(AbstractUnitOfWork):
    """Unit of work over AsyncMock repositories that records commit / rollback calls"""

    def __init__(self) -> None:
        self.customer_command_repo = AsyncMock()
        self.event_command_repo = AsyncMock()
        self.event_seat_command_repo = AsyncMock()
        self.order_command_repo = AsyncMock()
        self.ticket_command_repo = AsyncMock()
        self.check_in_command_repo = AsyncMock()
        self.commit_count = 0
        self.rollback_count = 0

    async def _commit(self) -> None:
        self.commit_count += 1

    async def rollback(self) -> None:
        self.rollback_count += 1


def make_customer(email: str = 'john.doe@example.com', **kwargs) -> CustomerEntity:
    return CustomerEntity(email=email, first_name='John', last_name='Doe', **kwargs)


def make_event(**kwargs) -> EventEntity:
    return EventEntity(
        name=EVENT_KEY.name,
        date=EVENT_KEY.date,
        venue_name=EVENT_KEY.venue_name,
        venue_address=EVENT_KEY.venue_address,
        **kwargs,
    )


def make_seat(position: SeatPosition, price: str = '50.00') -> EventSeatEntity:
    return EventSeatEntity(event=EVENT_KEY, position=position, price=Decimal(price))
