#!/usr/bin/env python3
"""
Database Seed Script
Populate sample data into the database

Features:
1. Create Tables - create any missing table from the ORM metadata
2. Create Venue + Event - one venue and one scheduled event
3. Create Seats - seat grid built from the SEATS environment variable
4. Create Customers - three customers, one per loyalty tier

Notes:
- Run against an empty database; rerunning fails on the primary keys
- Set DATABASE_URL (e.g. sqlite+aiosqlite:///./ticketing.db) to seed a local file
"""

import asyncio
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
import os
import sys

from sqlalchemy import func, select

from src.platform.database.orm_db_setting import (
    create_db_and_tables,
    dispose_engines,
    get_session_maker,
)
from src.service.ticketing.domain.enum.loyalty_tier import LoyaltyTier
from src.service.ticketing.driven_adapter.model import (
    CustomerModel,
    EventModel,
    EventSeatModel,
    VenueModel,
)


VENUE_NAME = 'Madison Square Garden'
VENUE_ADDRESS = '4 Pennsylvania Plaza, New York, NY'
VENUE_CAPACITY = 20000

EVENT_NAME = 'Rock Concert'
EVENT_DATE = date(2025, 12, 1)


@dataclass
class SectionConfig:
    """Seat section seed configuration"""

    name: str
    price: Decimal


@dataclass
class CustomerConfig:
    """Customer seed configuration"""

    email: str
    first_name: str
    last_name: str
    tier: LoyaltyTier


SECTIONS = [
    SectionConfig(name='A', price=Decimal('150.00')),
    SectionConfig(name='B', price=Decimal('100.00')),
    SectionConfig(name='C', price=Decimal('50.00')),
]

TEST_CUSTOMERS = [
    CustomerConfig('john.doe@example.com', 'John', 'Doe', LoyaltyTier.BRONZE),
    CustomerConfig('jane.smith@example.com', 'Jane', 'Smith', LoyaltyTier.SILVER),
    CustomerConfig('bob.wilson@example.com', 'Bob', 'Wilson', LoyaltyTier.GOLD),
]

# SEATS -> (rows, seats per row) per section
SEATING_CONFIGS = {
    '30': (2, 5),
    '300': (10, 10),
    '3000': (20, 50),
}


def _load_seating_config() -> tuple[int, int]:
    """
    Pick the seat grid from the SEATS environment variable.

    Returns:
        tuple: (rows, seats per row)
    """
    seats = os.getenv('SEATS', '30')
    if seats not in SEATING_CONFIGS:
        print(f'⚠️  Seats config {seats} not found, using 30')
        seats = '30'

    rows, cols = SEATING_CONFIGS[seats]
    print(f'📊 Using seating config: {seats} ({rows * cols * len(SECTIONS):,} seats)')
    return rows, cols


def _build_seats(rows: int, cols: int) -> list[EventSeatModel]:
    return [
        EventSeatModel(
            event_name=EVENT_NAME,
            event_date=EVENT_DATE,
            venue_name=VENUE_NAME,
            venue_address=VENUE_ADDRESS,
            section=section.name,
            seat_row=str(row),
            seat_number=str(number),
            price=section.price,
            availability_status='AVAILABLE',
        )
        for section in SECTIONS
        for row in range(1, rows + 1)
        for number in range(1, cols + 1)
    ]


async def _seed_data() -> None:
    """Seed venue, event, seats and customers in a single transaction"""
    rows, cols = _load_seating_config()

    async with get_session_maker()() as session:
        try:
            print('🏟️  Creating venue and event...')
            session.add(VenueModel(name=VENUE_NAME, address=VENUE_ADDRESS, capacity=VENUE_CAPACITY))
            await session.flush()
            session.add(
                EventModel(
                    name=EVENT_NAME,
                    event_date=EVENT_DATE,
                    venue_name=VENUE_NAME,
                    venue_address=VENUE_ADDRESS,
                    status='SCHEDULED',
                )
            )
            await session.flush()

            seats = _build_seats(rows, cols)
            session.add_all(seats)
            print(f'   ✅ Created event: {EVENT_NAME} on {EVENT_DATE} with {len(seats)} seats')

            print(f'👥 Creating {len(TEST_CUSTOMERS)} customers...')
            session.add_all(
                [
                    CustomerModel(
                        email=config.email,
                        first_name=config.first_name,
                        last_name=config.last_name,
                        loyalty_tier=config.tier.value,
                    )
                    for config in TEST_CUSTOMERS
                ]
            )

            await session.commit()
            print('✅ All data committed successfully!')

        except Exception as e:
            await session.rollback()
            print(f'❌ Rolling back: {e}')
            raise


async def verify_data() -> None:
    """Verify seeded data"""
    print('🔍 Verifying seeded data...')

    async with get_session_maker()() as session:
        for model in (VenueModel, EventModel, EventSeatModel, CustomerModel):
            result = await session.execute(select(func.count()).select_from(model))
            print(f'   {model.__tablename__} count: {result.scalar_one()}')

    print('   ✅ Data verification completed!')


async def main() -> None:
    print('🌱 Starting data seeding...')
    print('=' * 50)

    try:
        await create_db_and_tables()
        await _seed_data()
        await verify_data()

        print()
        print('=' * 50)
        print('🌱 Data seeding completed!')
        print('📋 Customers:')
        for customer in TEST_CUSTOMERS:
            print(f'   {customer.tier.value}: {customer.email}')

    except Exception as e:
        print(f'❌ Seeding failed: {e}')
        sys.exit(1)

    finally:
        await dispose_engines()


if __name__ == '__main__':
    asyncio.run(main())
