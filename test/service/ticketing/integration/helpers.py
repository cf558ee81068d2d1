from typing import Any

import httpx
from sqlalchemy import func, select

from src.platform.database.orm_db_setting import get_session_maker
from src.service.ticketing.driven_adapter.model import EventSeatModel, OrderModel, TicketModel
from test.constants import (
    CREDIT_CARD,
    JAZZ_EVENT_DATE,
    JAZZ_EVENT_NAME,
    JAZZ_VENUE_ADDRESS,
    JAZZ_VENUE_NAME,
    JOHN_EMAIL,
    MSG_VENUE_ADDRESS,
    MSG_VENUE_NAME,
    ROCK_EVENT_DATE,
    ROCK_EVENT_NAME,
)


def rock_event() -> dict[str, Any]:
    return {
        'event_name': ROCK_EVENT_NAME,
        'event_date': ROCK_EVENT_DATE.isoformat(),
        'venue_name': MSG_VENUE_NAME,
        'venue_address': MSG_VENUE_ADDRESS,
    }


def jazz_event() -> dict[str, Any]:
    return {
        'event_name': JAZZ_EVENT_NAME,
        'event_date': JAZZ_EVENT_DATE.isoformat(),
        'venue_name': JAZZ_VENUE_NAME,
        'venue_address': JAZZ_VENUE_ADDRESS,
    }


def purchase_payload(
    *seats: tuple[str, str, str],
    email: str = JOHN_EMAIL,
    event: dict[str, Any] | None = None,
    payment_method: str = CREDIT_CARD,
) -> dict[str, Any]:
    return {
        'customer_email': email,
        **(event or rock_event()),
        'payment_method': payment_method,
        'seats': [
            {'section': section, 'row': row, 'number': number} for section, row, number in seats
        ],
    }


async def purchase(
    client: httpx.AsyncClient, *seats: tuple[str, str, str], **kwargs: Any
) -> httpx.Response:
    return await client.post('/api/purchase', json=purchase_payload(*seats, **kwargs))


async def buy_one(client: httpx.AsyncClient, seat: tuple[str, str, str], **kwargs: Any) -> str:
    """Purchase a single seat and return its QR code"""
    response = await purchase(client, seat, **kwargs)
    assert response.status_code == 200, response.text
    return response.json()['tickets'][0]['qr_code']


async def seat_status(section: str, row: str, number: str) -> str:
    async with get_session_maker()() as session:
        result = await session.execute(
            select(EventSeatModel.availability_status).where(
                EventSeatModel.event_name == ROCK_EVENT_NAME,
                EventSeatModel.event_date == ROCK_EVENT_DATE,
                EventSeatModel.section == section,
                EventSeatModel.seat_row == row,
                EventSeatModel.seat_number == number,
            )
        )
        return result.scalar_one()


async def count_orders() -> int:
    async with get_session_maker()() as session:
        return (await session.execute(select(func.count()).select_from(OrderModel))).scalar_one()


async def count_tickets() -> int:
    async with get_session_maker()() as session:
        return (await session.execute(select(func.count()).select_from(TicketModel))).scalar_one()
