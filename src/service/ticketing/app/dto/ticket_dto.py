from datetime import datetime

import attrs

from src.service.ticketing.domain.entity.check_in_entity import CheckInEntity
from src.service.ticketing.domain.entity.ticket_entity import TicketEntity


@attrs.define(frozen=True)
class TicketDetail:
    ticket: TicketEntity
    checkin_time: datetime | None = None
    gate: str | None = None

    @property
    def checked_in(self) -> bool:
        return self.checkin_time is not None


@attrs.define(frozen=True)
class CheckInResult:
    ticket: TicketEntity
    check_in: CheckInEntity
