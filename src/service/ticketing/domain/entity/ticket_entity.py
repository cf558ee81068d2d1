from datetime import datetime

import attrs

from src.service.ticketing.domain.enum.ticket_status import TicketStatus
from src.service.ticketing.domain.value_object.event_key import EventKey
from src.service.ticketing.domain.value_object.seat_position import SeatPosition


@attrs.define
class TicketEntity:
    qr_code: str
    order_id: int
    event: EventKey
    position: SeatPosition
    issue_date: datetime
    status: TicketStatus = TicketStatus.ISSUED
