"""
Purchase errors.

Every failure of a purchase attempt reaches the caller as an InvalidPurchaseError
carrying the originating message. Collaborator failures use subclasses so callers
can tell a declined payment from a failed reservation when they need to.
"""

from src.platform.exception.exceptions import DomainError


class InvalidPurchaseError(DomainError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class PaymentFailedError(InvalidPurchaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 402)


class SeatReservationFailedError(InvalidPurchaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)
