"""Load .env.tests and route sc2link logging through stdlib so caplog sees it."""

from pathlib import Path

import pytest
import structlog
from dotenv import load_dotenv

from sc2link.logging import configure_structlog
from sc2link.settings import ClientSettings
from sc2link.tests.mocks import MockConnection

load_dotenv(Path(__file__).resolve().parent.parent / ".env.tests")

configure_structlog()


@pytest.fixture(autouse=True)
def _clear_log_context():
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()


@pytest.fixture
def settings() -> ClientSettings:
    """Settings read from .env.tests."""
    return ClientSettings()


@pytest.fixture
def conn() -> MockConnection:
    return MockConnection(connection_id="test-conn")
