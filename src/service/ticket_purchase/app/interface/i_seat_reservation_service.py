"""
Seat Reservation Service Interface

Port to the external seat booking system.
"""

from abc import ABC, abstractmethod
from collections.abc import Awaitable


class ISeatReservationService(ABC):
    """Seat booking system that holds seats for a paid purchase"""

    @abstractmethod
    def reserve_seats(self, seat_count: int) -> Awaitable[None] | None:
        """
        Reserve seat_count seats.

        Implementations may reserve synchronously (return None) or
        asynchronously (return an awaitable).

        Raises:
            Exception: Any exception means the reservation failed
        """
        ...
