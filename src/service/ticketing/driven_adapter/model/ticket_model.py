from datetime import date, datetime

from sqlalchemy import (
    Date,
    DateTime,
    ForeignKey,
    ForeignKeyConstraint,
    Integer,
    String,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class TicketModel(Base):
    __tablename__ = 'ticket'

    qr_code: Mapped[str] = mapped_column(String(64), primary_key=True)
    issue_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    status: Mapped[str] = mapped_column(String(20), default='ISSUED', nullable=False)
    order_id: Mapped[int] = mapped_column(
        Integer, ForeignKey('order.order_id'), nullable=False, index=True
    )
    event_name: Mapped[str] = mapped_column(String(255), nullable=False)
    event_date: Mapped[date] = mapped_column(Date, nullable=False)
    venue_name: Mapped[str] = mapped_column(String(255), nullable=False)
    venue_address: Mapped[str] = mapped_column(String(255), nullable=False)
    section: Mapped[str] = mapped_column(String(20), nullable=False)
    seat_row: Mapped[str] = mapped_column(String(10), nullable=False)
    seat_number: Mapped[str] = mapped_column(String(10), nullable=False)

    __table_args__ = (
        ForeignKeyConstraint(
            [
                'event_name',
                'event_date',
                'venue_name',
                'venue_address',
                'section',
                'seat_row',
                'seat_number',
            ],
            [
                'event_seat.event_name',
                'event_seat.event_date',
                'event_seat.venue_name',
                'event_seat.venue_address',
                'event_seat.section',
                'event_seat.seat_row',
                'event_seat.seat_number',
            ],
            name='fk_ticket_event_seat',
        ),
        # A seat has at most one ticket
        UniqueConstraint(
            'event_name',
            'event_date',
            'venue_name',
            'venue_address',
            'section',
            'seat_row',
            'seat_number',
            name='uq_ticket_seat',
        ),
    )
