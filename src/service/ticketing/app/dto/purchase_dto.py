from decimal import Decimal

import attrs

from src.service.ticketing.domain.value_object.seat_position import SeatPosition


@attrs.define(frozen=True)
class PurchasedTicket:
    """One issued ticket, in request seat order"""

    qr_code: str
    position: SeatPosition
    price: Decimal
    order_id: int
