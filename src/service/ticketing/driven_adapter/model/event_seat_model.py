from datetime import date
from decimal import Decimal

from sqlalchemy import Date, ForeignKeyConstraint, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class EventSeatModel(Base):
    __tablename__ = 'event_seat'

    event_name: Mapped[str] = mapped_column(String(255), primary_key=True)
    event_date: Mapped[date] = mapped_column(Date, primary_key=True)
    venue_name: Mapped[str] = mapped_column(String(255), primary_key=True)
    venue_address: Mapped[str] = mapped_column(String(255), primary_key=True)
    section: Mapped[str] = mapped_column(String(20), primary_key=True)
    seat_row: Mapped[str] = mapped_column(String(10), primary_key=True)
    seat_number: Mapped[str] = mapped_column(String(10), primary_key=True)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    availability_status: Mapped[str] = mapped_column(
        String(20), default='AVAILABLE', nullable=False
    )

    __table_args__ = (
        ForeignKeyConstraint(
            ['event_name', 'event_date', 'venue_name', 'venue_address'],
            ['event.name', 'event.event_date', 'event.venue_name', 'event.venue_address'],
            name='fk_event_seat_event',
        ),
    )
