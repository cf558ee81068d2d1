"""Ticketing Domain Value Objects"""

from src.service.ticketing.domain.value_object.event_key import EventKey
from src.service.ticketing.domain.value_object.seat_position import SeatPosition

__all__ = ['EventKey', 'SeatPosition']
