from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from src.platform.database.orm_db_setting import Base


class CheckInModel(Base):
    __tablename__ = 'check_in'

    # One row per ticket: the primary key is the ticket's QR code
    qr_code: Mapped[str] = mapped_column(
        String(64), ForeignKey('ticket.qr_code'), primary_key=True
    )
    checkin_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    gate: Mapped[str] = mapped_column(String(20), nullable=False)
