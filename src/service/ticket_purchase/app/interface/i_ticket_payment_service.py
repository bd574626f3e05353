"""
Ticket Payment Service Interface

Port to the external payment gateway.
"""

from abc import ABC, abstractmethod
from typing import Any


class ITicketPaymentService(ABC):
    """Payment gateway that charges an account for a purchase"""

    @abstractmethod
    async def pay(self, account_id: Any, amount: int) -> None:
        """
        Charge the account.

        Args:
            account_id: Opaque account identifier
            amount: Total price of the purchase

        Raises:
            Exception: Any exception means the payment failed; its message is
                reported to the buyer
        """
        ...
