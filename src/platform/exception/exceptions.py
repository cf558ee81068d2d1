class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class StorageFailureError(CustomBaseError):
    """Connectivity or transaction failure in the relational store.

    The client sees a generic message; the driver error is chained as __cause__.
    """

    def __init__(self, message: str = 'Ticket purchase failed, please retry') -> None:
        super().__init__(message, 503)
