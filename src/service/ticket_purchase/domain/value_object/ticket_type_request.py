"""Ticket type request value object."""

from typing import Any

import attrs

from src.service.ticket_purchase.domain.enum import TicketType
from src.service.ticket_purchase.domain.purchase_error import InvalidPurchaseError


def to_ticket_type(value: Any) -> TicketType:
    """Coerce a category name into a TicketType, rejecting anything outside the fixed set."""
    if isinstance(value, TicketType):
        return value
    try:
        return TicketType(value)
    except ValueError:
        raise InvalidPurchaseError(f'Invalid ticket type: {value}') from None


def _validate_no_of_tickets(instance: Any, attribute: attrs.Attribute, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidPurchaseError('Number of tickets must be a positive integer.')


@attrs.define(frozen=True)
class TicketTypeRequest:
    """
    Request for a number of tickets of one category (Value Object).

    Immutable once created; ticket_type accepts a TicketType or its name.
    """

    ticket_type: TicketType = attrs.field(converter=to_ticket_type)
    no_of_tickets: int = attrs.field(validator=_validate_no_of_tickets)
