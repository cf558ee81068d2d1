from enum import Enum


class OrderStatus(Enum):
    PAID = 'PAID'  # No payment gateway: orders are recorded as paid on purchase
