"""Application layer DTOs"""

from src.service.ticketing.app.dto.customer_dto import (
    LoyaltyCandidate,
    LoyaltyUpgrade,
    PurchaseHistory,
    PurchaseHistoryItem,
)
from src.service.ticketing.app.dto.event_dto import EventSearchFilter, EventStatusChange, EventSummary
from src.service.ticketing.app.dto.purchase_dto import PurchasedTicket
from src.service.ticketing.app.dto.report_dto import EventSalesReport
from src.service.ticketing.app.dto.ticket_dto import CheckInResult, TicketDetail

__all__ = [
    'CheckInResult',
    'EventSalesReport',
    'EventSearchFilter',
    'EventStatusChange',
    'EventSummary',
    'LoyaltyCandidate',
    'LoyaltyUpgrade',
    'PurchaseHistory',
    'PurchaseHistoryItem',
    'PurchasedTicket',
    'TicketDetail',
]
