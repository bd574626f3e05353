"""
Test Configuration and Fixtures

This module provides:
- Environment setup before application modules read settings at import time
- Ticket type request builders shared by unit tests
- Application setup() / cleanup() around the session
- A DI container reset between tests
- Loguru capture for asserting on log output
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# settings are created when their module is imported
# =============================================================================
import os


def _early_setup_test_environment() -> None:
    os.environ['DEBUG'] = 'true'  # exercise IO logging of args / return values
    os.environ['DEPLOY_ENV'] = 'test'
    os.environ.pop('LOG_DIR', None)
    os.environ.pop('DECLINED_PAYMENT_ACCOUNTS', None)
    os.environ.pop('MAX_TICKETS_PER_PURCHASE', None)


_early_setup_test_environment()

from collections.abc import Callable, Generator  # noqa: E402

import pytest  # noqa: E402

from src.platform.config.di import container as di_container  # noqa: E402
from src.platform.config.di import Container, cleanup, setup  # noqa: E402
from src.platform.logging.loguru_io import Logger  # noqa: E402
from src.service.ticket_purchase.domain.enum import TicketType  # noqa: E402
from src.service.ticket_purchase.domain.value_object import TicketTypeRequest  # noqa: E402


@pytest.fixture
def adult() -> Callable[[int], TicketTypeRequest]:
    return lambda count: TicketTypeRequest(ticket_type=TicketType.ADULT, no_of_tickets=count)


@pytest.fixture
def child() -> Callable[[int], TicketTypeRequest]:
    return lambda count: TicketTypeRequest(ticket_type=TicketType.CHILD, no_of_tickets=count)


@pytest.fixture
def infant() -> Callable[[int], TicketTypeRequest]:
    return lambda count: TicketTypeRequest(ticket_type=TicketType.INFANT, no_of_tickets=count)


@pytest.fixture(scope='session', autouse=True)
def application() -> Generator[None, None, None]:
    """Application startup / shutdown hooks around the whole session"""
    setup()
    yield
    cleanup()


@pytest.fixture
def container() -> Generator[Container, None, None]:
    """Application container with fresh singletons for every test"""
    cleanup()
    yield di_container
    cleanup()
    di_container.reset_override()


@pytest.fixture
def captured_logs() -> Generator[list[str], None, None]:
    """Formatted records of every loguru message emitted during the test"""
    messages: list[str] = []
    handler_id = Logger.base.add(messages.append, level='DEBUG', format='{level} | {message}')
    yield messages
    Logger.base.remove(handler_id)
