"""Ticketing Domain Enums"""

from src.service.ticketing.domain.enum.availability_status import AvailabilityStatus
from src.service.ticketing.domain.enum.event_status import EventStatus
from src.service.ticketing.domain.enum.loyalty_tier import LoyaltyTier
from src.service.ticketing.domain.enum.order_status import OrderStatus
from src.service.ticketing.domain.enum.ticket_status import TicketStatus

__all__ = ['AvailabilityStatus', 'EventStatus', 'LoyaltyTier', 'OrderStatus', 'TicketStatus']
