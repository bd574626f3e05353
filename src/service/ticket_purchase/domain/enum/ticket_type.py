"""Ticket Type Enum"""

from enum import StrEnum


class TicketType(StrEnum):
    """Ticket category sold at the venue"""

    ADULT = 'ADULT'
    CHILD = 'CHILD'
    INFANT = 'INFANT'
