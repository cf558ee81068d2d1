from enum import Enum


class TicketStatus(Enum):
    ISSUED = 'ISSUED'
