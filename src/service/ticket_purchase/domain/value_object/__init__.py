"""Ticket Purchase Value Objects"""

from src.service.ticket_purchase.domain.value_object.ticket_type_request import (
    TicketTypeRequest,
)

__all__ = ['TicketTypeRequest']
