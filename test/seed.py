"""Rows inserted straight through the ORM so tests start from a known catalog"""

from src.platform.database.orm_db_setting import get_session_maker
from src.service.ticketing.driven_adapter.model import (
    CustomerModel,
    EventModel,
    EventSeatModel,
    VenueModel,
)
from test.constants import (
    BOB_EMAIL,
    JANE_EMAIL,
    JAZZ_CAPACITY,
    JAZZ_EVENT_DATE,
    JAZZ_EVENT_NAME,
    JAZZ_PRICE,
    JAZZ_VENUE_ADDRESS,
    JAZZ_VENUE_NAME,
    JOHN_EMAIL,
    MSG_CAPACITY,
    MSG_VENUE_ADDRESS,
    MSG_VENUE_NAME,
    ROCK_EVENT_DATE,
    ROCK_EVENT_NAME,
    SECTION_A_PRICE,
    SECTION_B_PRICE,
)


def _rock_seats() -> list[EventSeatModel]:
    seats = [
        EventSeatModel(
            event_name=ROCK_EVENT_NAME,
            event_date=ROCK_EVENT_DATE,
            venue_name=MSG_VENUE_NAME,
            venue_address=MSG_VENUE_ADDRESS,
            section='A',
            seat_row='1',
            seat_number=str(number),
            price=SECTION_A_PRICE,
            availability_status='AVAILABLE',
        )
        for number in range(1, 11)
    ]
    seats += [
        EventSeatModel(
            event_name=ROCK_EVENT_NAME,
            event_date=ROCK_EVENT_DATE,
            venue_name=MSG_VENUE_NAME,
            venue_address=MSG_VENUE_ADDRESS,
            section='B',
            seat_row='2',
            seat_number=str(number),
            price=SECTION_B_PRICE,
            availability_status='AVAILABLE',
        )
        for number in range(1, 6)
    ]
    return seats


def _jazz_seats() -> list[EventSeatModel]:
    return [
        EventSeatModel(
            event_name=JAZZ_EVENT_NAME,
            event_date=JAZZ_EVENT_DATE,
            venue_name=JAZZ_VENUE_NAME,
            venue_address=JAZZ_VENUE_ADDRESS,
            section='Main',
            seat_row='AA',
            seat_number=str(number),
            price=JAZZ_PRICE,
            availability_status='AVAILABLE',
        )
        for number in range(1, 4)
    ]


async def seed_catalog() -> None:
    async with get_session_maker()() as session:
        # Parents flushed first: no ORM relationships order the inserts
        session.add_all(
            [
                VenueModel(name=MSG_VENUE_NAME, address=MSG_VENUE_ADDRESS, capacity=MSG_CAPACITY),
                VenueModel(
                    name=JAZZ_VENUE_NAME, address=JAZZ_VENUE_ADDRESS, capacity=JAZZ_CAPACITY
                ),
            ]
        )
        await session.flush()

        session.add_all(
            [
                EventModel(
                    name=ROCK_EVENT_NAME,
                    event_date=ROCK_EVENT_DATE,
                    venue_name=MSG_VENUE_NAME,
                    venue_address=MSG_VENUE_ADDRESS,
                    status='SCHEDULED',
                ),
                EventModel(
                    name=JAZZ_EVENT_NAME,
                    event_date=JAZZ_EVENT_DATE,
                    venue_name=JAZZ_VENUE_NAME,
                    venue_address=JAZZ_VENUE_ADDRESS,
                    status='SCHEDULED',
                ),
            ]
        )
        await session.flush()

        session.add_all(_rock_seats() + _jazz_seats())
        await session.commit()


async def seed_customers() -> None:
    async with get_session_maker()() as session:
        session.add_all(
            [
                CustomerModel(
                    email=JOHN_EMAIL, first_name='John', last_name='Doe', loyalty_tier='Bronze'
                ),
                CustomerModel(
                    email=JANE_EMAIL, first_name='Jane', last_name='Smith', loyalty_tier='Silver'
                ),
                CustomerModel(
                    email=BOB_EMAIL, first_name='Bob', last_name='Wilson', loyalty_tier='Gold'
                ),
            ]
        )
        await session.commit()
