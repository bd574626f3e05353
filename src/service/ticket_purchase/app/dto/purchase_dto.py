"""Purchase DTOs for the ticket purchase use case."""

from typing import Any

import attrs

from src.service.ticket_purchase.domain.value_object import TicketTypeRequest


@attrs.define(frozen=True)
class PurchaseRequest:
    """Account plus the ordered ticket type requests of one purchase"""

    account_id: Any
    ticket_type_requests: tuple[TicketTypeRequest, ...] = attrs.field(converter=tuple)


@attrs.define(frozen=True)
class PurchaseResult:
    """Outcome of a completed purchase (payment taken, seats reserved)"""

    account_id: Any
    total_tickets: int
    total_price: int
    seats_reserved: int
