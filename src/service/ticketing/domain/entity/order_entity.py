from datetime import datetime
from decimal import Decimal
from typing import Optional

import attrs

from src.service.ticketing.domain.enum.order_status import OrderStatus


@attrs.define
class OrderEntity:
    customer_email: str
    order_date: datetime
    subtotal: Decimal
    payment_method: str
    discount_amount: Decimal = Decimal('0.00')
    status: OrderStatus = OrderStatus.PAID
    order_id: Optional[int] = None  # Assigned by the store on insert

    @classmethod
    def for_seat(
        cls, *, customer_email: str, price: Decimal, payment_method: str, order_date: datetime
    ) -> 'OrderEntity':
        """One order per purchased seat: subtotal is the seat price, no discount"""
        return cls(
            customer_email=customer_email,
            order_date=order_date,
            subtotal=price,
            payment_method=payment_method,
        )
