from enum import Enum


class EventStatus(Enum):
    SCHEDULED = 'SCHEDULED'
    CANCELLED = 'CANCELLED'
    COMPLETED = 'COMPLETED'
