"""
Ticket Purchase Use Case

Flow:
1. Validate account + ticket type requests (Fail Fast, no side effects)
2. Calculate total price
3. Payment gateway charges the account
4. Seat reservation system reserves one seat per Adult / Child ticket
"""

from collections.abc import Sequence
from inspect import isawaitable
from typing import Any

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.app.dto import PurchaseRequest, PurchaseResult
from src.service.ticket_purchase.app.interface import (
    ISeatReservationService,
    ITicketPaymentService,
)
from src.service.ticket_purchase.domain import ticket_purchase_domain
from src.service.ticket_purchase.domain.enum import TicketType
from src.service.ticket_purchase.domain.purchase_error import (
    PaymentFailedError,
    SeatReservationFailedError,
)
from src.service.ticket_purchase.domain.ticket_purchase_domain import MAX_TICKETS_PER_PURCHASE
from src.service.ticket_purchase.domain.value_object import TicketTypeRequest


def _failure_message(e: Exception) -> str:
    return str(e) or type(e).__name__


class TicketPurchaseUseCase:
    """
    Purchase tickets for a single venue.

    Payment must succeed before seats are reserved. A reservation failure after
    a successful payment is reported but not compensated; refunds belong to the
    payment gateway / operator.

    Dependencies:
    - ticket_payment_service: Payment gateway port
    - seat_reservation_service: Seat booking port
    """

    def __init__(
        self,
        *,
        ticket_payment_service: ITicketPaymentService,
        seat_reservation_service: ISeatReservationService,
        max_tickets: int = MAX_TICKETS_PER_PURCHASE,
    ) -> None:
        self.ticket_payment_service = ticket_payment_service
        self.seat_reservation_service = seat_reservation_service
        self.max_tickets = max_tickets
        self.tracer = trace.get_tracer(__name__)

    def validate_purchase(self, ticket_type_requests: Sequence[TicketTypeRequest]) -> None:
        ticket_purchase_domain.validate_ticket_type_requests(
            ticket_type_requests, max_tickets=self.max_tickets
        )

    def calculate_total_tickets(self, ticket_type_requests: Sequence[TicketTypeRequest]) -> int:
        return ticket_purchase_domain.calculate_total_tickets(ticket_type_requests)

    def calculate_total_price(self, ticket_type_requests: Sequence[TicketTypeRequest]) -> int:
        return ticket_purchase_domain.calculate_total_price(ticket_type_requests)

    def calculate_seats_required(self, ticket_type_requests: Sequence[TicketTypeRequest]) -> int:
        return ticket_purchase_domain.calculate_seats_required(ticket_type_requests)

    def get_ticket_price(self, ticket_type: TicketType | str) -> int:
        return ticket_purchase_domain.get_ticket_price(ticket_type)

    async def reserve_seats(self, ticket_type_requests: Sequence[TicketTypeRequest]) -> int:
        """
        Reserve seats for the Adult / Child tickets of the request.

        Returns:
            Number of seats reserved

        Raises:
            SeatReservationFailedError: If the seat reservation system fails
        """
        seat_count = self.calculate_seats_required(ticket_type_requests)
        try:
            result = self.seat_reservation_service.reserve_seats(seat_count)
            if isawaitable(result):
                await result
        except Exception as e:
            raise SeatReservationFailedError(_failure_message(e)) from e
        return seat_count

    @Logger.io
    async def purchase(
        self, account_id: Any, ticket_type_requests: Sequence[TicketTypeRequest]
    ) -> PurchaseResult:
        """
        Purchase tickets - validate, pay, then reserve seats.

        Args:
            account_id: Opaque account identifier (presence checked only)
            ticket_type_requests: Ordered ticket type requests

        Returns:
            PurchaseResult with the charged price and reserved seat count

        Raises:
            InvalidPurchaseError: On any validation failure (before any collaborator call)
            PaymentFailedError: If the payment gateway fails (no seats reserved)
            SeatReservationFailedError: If reservation fails after payment succeeded
        """
        with self.tracer.start_as_current_span(
            'use_case.purchase_tickets',
            attributes={'account.id': str(account_id)},
        ) as span:
            # Step 1: Fail Fast - nothing is charged or reserved for an invalid request
            ticket_purchase_domain.validate_account_id(account_id)
            self.validate_purchase(ticket_type_requests)

            # Step 2: Price
            total_tickets = self.calculate_total_tickets(ticket_type_requests)
            total_price = self.calculate_total_price(ticket_type_requests)
            span.set_attribute('purchase.total_tickets', total_tickets)
            span.set_attribute('purchase.total_price', total_price)

            # Step 3: Payment gates reservation
            try:
                await self.ticket_payment_service.pay(account_id, total_price)
            except Exception as e:
                raise PaymentFailedError(_failure_message(e)) from e
            Logger.base.info(f'💳 [PURCHASE] Charged {total_price} to account {account_id}')

            # Step 4: Reserve seats (no refund on failure)
            try:
                seats_reserved = await self.reserve_seats(ticket_type_requests)
            except SeatReservationFailedError as e:
                Logger.base.warning(
                    f'🪑 [PURCHASE] Seat reservation failed after payment for account '
                    f'{account_id}: {e}'
                )
                raise
            span.set_attribute('purchase.seats_reserved', seats_reserved)
            Logger.base.info(
                f'✅ [PURCHASE] {total_tickets} tickets, {seats_reserved} seats '
                f'for account {account_id}'
            )

            return PurchaseResult(
                account_id=account_id,
                total_tickets=total_tickets,
                total_price=total_price,
                seats_reserved=seats_reserved,
            )

    async def purchase_tickets(self, request: PurchaseRequest) -> PurchaseResult:
        return await self.purchase(request.account_id, request.ticket_type_requests)
