"""
Mock Ticket Payment Service

In-process stand-in for the payment gateway. Records every successful charge
and declines accounts listed in DECLINED_PAYMENT_ACCOUNTS.
"""

from collections.abc import Iterable
import random
import string
from typing import Any

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.app.interface import ITicketPaymentService


@attrs.define(frozen=True)
class PaymentRecord:
    payment_id: str
    account_id: Any
    amount: int


class MockTicketPaymentServiceImpl(ITicketPaymentService):
    def __init__(self, *, declined_accounts: Iterable[Any] = ()) -> None:
        self.declined_accounts = frozenset(str(account) for account in declined_accounts)
        self.payments: list[PaymentRecord] = []

    @Logger.io
    async def pay(self, account_id: Any, amount: int) -> None:
        if amount < 0:
            raise DomainError('Payment amount cannot be negative')

        if str(account_id) in self.declined_accounts:
            raise DomainError('Payment failed', 402)

        payment_id = (
            f'PAY_MOCK_{"".join(random.choices(string.ascii_uppercase + string.digits, k=8))}'
        )
        self.payments.append(
            PaymentRecord(payment_id=payment_id, account_id=account_id, amount=amount)
        )
        Logger.base.info(f'💳 [MOCK-PAYMENT] {payment_id}: charged {amount} to account {account_id}')
