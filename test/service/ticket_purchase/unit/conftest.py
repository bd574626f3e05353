"""
Conftest for pure unit tests - collaborators are mocked.
"""

from unittest.mock import AsyncMock

import pytest

from src.service.ticket_purchase.app.command.ticket_purchase_use_case import (
    TicketPurchaseUseCase,
)


@pytest.fixture
def mock_ticket_payment_service() -> AsyncMock:
    service = AsyncMock()
    service.pay = AsyncMock(return_value=None)
    return service


@pytest.fixture
def mock_seat_reservation_service() -> AsyncMock:
    service = AsyncMock()
    service.reserve_seats = AsyncMock(return_value=None)
    return service


@pytest.fixture
def use_case(
    mock_ticket_payment_service: AsyncMock,
    mock_seat_reservation_service: AsyncMock,
) -> TicketPurchaseUseCase:
    return TicketPurchaseUseCase(
        ticket_payment_service=mock_ticket_payment_service,
        seat_reservation_service=mock_seat_reservation_service,
    )
