"""
Row <-> entity mapping shared by the SQLAlchemy repositories.

Seat coordinates live in `seat_row` / `seat_number` columns; the event date
lives in `event_date` everywhere.
"""

from typing import Any

from src.service.ticketing.domain.entity.customer_entity import CustomerEntity
from src.service.ticketing.domain.entity.event_entity import EventEntity
from src.service.ticketing.domain.entity.event_seat_entity import EventSeatEntity
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity
from src.service.ticketing.domain.enum.availability_status import AvailabilityStatus
from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.domain.enum.loyalty_tier import LoyaltyTier
from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.value_object.event_key import EventKey
from src.service.ticketing.domain.value_object.seat_position import SeatPosition
from src.service.ticketing.driven_adapter.model.customer_model import CustomerModel
from src.service.ticketing.driven_adapter.model.event_model import EventModel
from src.service.ticketing.driven_adapter.model.event_seat_model import EventSeatModel
from src.service.ticketing.driven_adapter.model.ticket_model import TicketModel


def event_key_clause(model: Any, key: EventKey) -> tuple[Any, ...]:
    """WHERE clause on the four event-identity columns of `model` (event, seat or ticket)"""
    name_column = model.name if model is EventModel else model.event_name
    return (
        name_column == key.name,
        model.event_date == key.date,
        model.venue_name == key.venue_name,
        model.venue_address == key.venue_address,
    )


def seat_key_clause(model: Any, key: EventKey, position: SeatPosition) -> tuple[Any, ...]:
    return (
        *event_key_clause(model, key),
        model.section == position.section,
        model.seat_row == position.row,
        model.seat_number == position.number,
    )


def model_to_customer(model: CustomerModel) -> CustomerEntity:
    return CustomerEntity(
        email=model.email,
        first_name=model.first_name,
        last_name=model.last_name,
        loyalty_tier=LoyaltyTier(model.loyalty_tier),
    )


def model_to_event(model: EventModel) -> EventEntity:
    return EventEntity(
        name=model.name,
        date=model.event_date,
        venue_name=model.venue_name,
        venue_address=model.venue_address,
        status=EventStatus(model.status),
    )


def model_to_event_seat(model: EventSeatModel) -> EventSeatEntity:
    return EventSeatEntity(
        event=EventKey(
            name=model.event_name,
            date=model.event_date,
            venue_name=model.venue_name,
            venue_address=model.venue_address,
        ),
        position=SeatPosition(section=model.section, row=model.seat_row, number=model.seat_number),
        price=model.price,
        availability_status=AvailabilityStatus(model.availability_status),
    )


def model_to_ticket(model: TicketModel) -> TicketEntity:
    return TicketEntity(
        qr_code=model.qr_code,
        order_id=model.order_id,
        event=EventKey(
            name=model.event_name,
            date=model.event_date,
            venue_name=model.venue_name,
            venue_address=model.venue_address,
        ),
        position=SeatPosition(section=model.section, row=model.seat_row, number=model.seat_number),
        issue_date=model.issue_date,
        status=TicketStatus(model.status),
    )
