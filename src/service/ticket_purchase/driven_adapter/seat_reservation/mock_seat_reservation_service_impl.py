"""
Mock Seat Reservation Service

In-process stand-in for the seat booking system. Reserves synchronously and
keeps a running total of reserved seats.
"""

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.app.interface import ISeatReservationService


class MockSeatReservationServiceImpl(ISeatReservationService):
    def __init__(self) -> None:
        self.reservations: list[int] = []

    @property
    def total_reserved(self) -> int:
        return sum(self.reservations)

    @Logger.io
    def reserve_seats(self, seat_count: int) -> None:
        if seat_count < 0:
            raise DomainError('Seat count cannot be negative')

        self.reservations.append(seat_count)
        Logger.base.info(f'🪑 [MOCK-RESERVATION] Reserved {seat_count} seats')
