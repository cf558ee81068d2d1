from decimal import Decimal

import attrs

from src.service.ticketing.domain.enum.availability_status import AvailabilityStatus
from src.service.ticketing.domain.value_object.event_key import EventKey
from src.service.ticketing.domain.value_object.seat_position import SeatPosition


@attrs.define
class EventSeatEntity:
    event: EventKey
    position: SeatPosition
    price: Decimal
    availability_status: AvailabilityStatus = AvailabilityStatus.AVAILABLE

    @property
    def is_available(self) -> bool:
        return self.availability_status == AvailabilityStatus.AVAILABLE
