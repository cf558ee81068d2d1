from datetime import date

from sqlalchemy import Date, ForeignKeyConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class EventModel(Base):
    __tablename__ = 'event'

    name: Mapped[str] = mapped_column(String(255), primary_key=True)
    event_date: Mapped[date] = mapped_column(Date, primary_key=True)
    venue_name: Mapped[str] = mapped_column(String(255), primary_key=True)
    venue_address: Mapped[str] = mapped_column(String(255), primary_key=True)
    status: Mapped[str] = mapped_column(String(20), default='SCHEDULED', nullable=False)

    __table_args__ = (
        ForeignKeyConstraint(
            ['venue_name', 'venue_address'],
            ['venue.name', 'venue.address'],
            name='fk_event_venue',
        ),
    )
