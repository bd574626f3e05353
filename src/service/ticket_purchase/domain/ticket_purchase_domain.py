"""
Ticket Purchase Domain
Pure purchase rules - pricing, seat counting and request validation.
No collaborator (payment gateway / seat reservation) is touched here.
"""

from collections.abc import Mapping, Sequence
from types import MappingProxyType
from typing import Any, Final

from src.service.ticket_purchase.domain.enum import TicketType
from src.service.ticket_purchase.domain.purchase_error import InvalidPurchaseError
from src.service.ticket_purchase.domain.value_object import TicketTypeRequest
from src.service.ticket_purchase.domain.value_object.ticket_type_request import to_ticket_type


MAX_TICKETS_PER_PURCHASE: Final = 20

TICKET_PRICES: Final[Mapping[TicketType, int]] = MappingProxyType(
    {
        TicketType.ADULT: 20,
        TicketType.CHILD: 10,
        TicketType.INFANT: 0,
    }
)

# Infants sit on an adult's lap
SEAT_OCCUPYING_TYPES: Final = frozenset({TicketType.ADULT, TicketType.CHILD})

ACCOMPANIED_TYPES: Final = frozenset({TicketType.CHILD, TicketType.INFANT})


def max_tickets_message(max_tickets: int) -> str:
    return f'Maximum of {max_tickets} tickets can be purchased at a time.'


NO_TICKETS_MESSAGE: Final = 'No tickets selected.'
ADULT_REQUIRED_MESSAGE: Final = (
    'Child and Infant tickets cannot be purchased without purchasing an Adult ticket.'
)


def calculate_total_tickets(ticket_type_requests: Sequence[TicketTypeRequest]) -> int:
    return sum(request.no_of_tickets for request in ticket_type_requests)


def get_ticket_price(ticket_type: TicketType | str) -> int:
    """
    Look up the unit price of a ticket category.

    Raises:
        InvalidPurchaseError: If the category is not in the price table
    """
    return TICKET_PRICES[to_ticket_type(ticket_type)]


def calculate_total_price(ticket_type_requests: Sequence[TicketTypeRequest]) -> int:
    return sum(
        request.no_of_tickets * get_ticket_price(request.ticket_type)
        for request in ticket_type_requests
    )


def calculate_seats_required(ticket_type_requests: Sequence[TicketTypeRequest]) -> int:
    return sum(
        request.no_of_tickets
        for request in ticket_type_requests
        if request.ticket_type in SEAT_OCCUPYING_TYPES
    )


def validate_account_id(account_id: Any) -> None:
    if account_id is None or (isinstance(account_id, str) and not account_id.strip()):
        raise InvalidPurchaseError('Account ID is required.')


def validate_ticket_type_requests(
    ticket_type_requests: Sequence[TicketTypeRequest],
    *,
    max_tickets: int = MAX_TICKETS_PER_PURCHASE,
) -> None:
    """
    Apply the purchase rules in order; the first broken rule wins:
    1. Total tickets must not exceed max_tickets
    2. At least one ticket must be selected
    3. Child / Infant tickets need an Adult ticket in the same purchase

    Raises:
        InvalidPurchaseError: With the message of the first broken rule
    """
    total_tickets = calculate_total_tickets(ticket_type_requests)

    if total_tickets > max_tickets:
        raise InvalidPurchaseError(max_tickets_message(max_tickets))

    if total_tickets < 1:
        raise InvalidPurchaseError(NO_TICKETS_MESSAGE)

    has_adult = any(request.ticket_type == TicketType.ADULT for request in ticket_type_requests)
    has_accompanied = any(
        request.ticket_type in ACCOMPANIED_TYPES and request.no_of_tickets > 0
        for request in ticket_type_requests
    )
    if has_accompanied and not has_adult:
        raise InvalidPurchaseError(ADULT_REQUIRED_MESSAGE)
