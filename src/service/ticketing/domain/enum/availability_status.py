from enum import Enum


class AvailabilityStatus(Enum):
    """Seat availability for one event; a seat only ever moves AVAILABLE -> SOLD"""

    AVAILABLE = 'AVAILABLE'
    SOLD = 'SOLD'
