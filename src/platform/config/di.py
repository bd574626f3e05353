"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.logging.loguru_io_config import configure_logging
from src.service.ticket_purchase.app.command.ticket_purchase_use_case import (
    TicketPurchaseUseCase,
)
from src.service.ticket_purchase.driven_adapter.payment.mock_ticket_payment_service_impl import (
    MockTicketPaymentServiceImpl,
)
from src.service.ticket_purchase.driven_adapter.seat_reservation.mock_seat_reservation_service_impl import (
    MockSeatReservationServiceImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # External collaborators (in-process mocks; override with real gateways)
    ticket_payment_service = providers.Singleton(
        MockTicketPaymentServiceImpl,
        declined_accounts=config_service.provided.DECLINED_PAYMENT_ACCOUNTS,
    )
    seat_reservation_service = providers.Singleton(MockSeatReservationServiceImpl)

    # Use cases
    ticket_purchase_use_case = providers.Factory(
        TicketPurchaseUseCase,
        ticket_payment_service=ticket_payment_service,
        seat_reservation_service=seat_reservation_service,
        max_tickets=config_service.provided.MAX_TICKETS_PER_PURCHASE,
    )


container = Container()


def setup() -> None:
    configure_logging(container.config_service())


def cleanup() -> None:
    container.reset_singletons()
