"""
Ticketing domain errors

Each error carries its HTTP status through the platform CustomBaseError
hierarchy, so controllers never translate them by hand.
"""

from datetime import datetime
from typing import Any

from src.platform.exception.exceptions import ConflictError, DomainError, NotFoundError
from src.service.ticketing.domain.value_object.seat_position import SeatPosition


class CustomerNotFoundError(NotFoundError):
    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__('Customer not found')


class EventNotFoundError(NotFoundError):
    def __init__(self) -> None:
        super().__init__('Event not found')


class TicketNotFoundError(NotFoundError):
    def __init__(self, qr_code: str, message: str = 'Ticket not found') -> None:
        self.qr_code = qr_code
        super().__init__(message)


class SeatUnavailableError(ConflictError):
    """Seat missing, already SOLD, or lost to a concurrent purchase"""

    def __init__(self, position: SeatPosition) -> None:
        self.position = position
        super().__init__(f'Seat {position.label} is not available')


class AlreadyCheckedInError(ConflictError):
    def __init__(self, qr_code: str, checkin_time: datetime) -> None:
        self.qr_code = qr_code
        self.checkin_time = checkin_time
        super().__init__('Ticket already checked in')

    @property
    def response_extra(self) -> dict[str, Any]:
        return {'checkin_time': self.checkin_time.isoformat()}


class DuplicateQRCodeError(Exception):
    """Generated QR code collided with an existing ticket; regenerate and retry"""

    def __init__(self, qr_code: str) -> None:
        self.qr_code = qr_code
        super().__init__(f'QR code {qr_code} already exists')


class InvalidTierError(DomainError):
    def __init__(self) -> None:
        super().__init__('Invalid tier')


class InvalidEventStatusError(DomainError):
    def __init__(self) -> None:
        super().__init__('Invalid status')
