"""
Test Configuration and Fixtures

This module provides:
- A per-worker SQLite database (aiosqlite), recreated for every integration test
- DI container wiring for the use cases
- An async HTTP client bound to a test app instance
- Seed fixtures for venues, events, seats and customers

Architecture:
- Unit tests (`@pytest.mark.unit`): pure, mocked collaborators, no database
- Integration tests: real schema on SQLite, cleaned before each test
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read at import time, so DATABASE_URL and TEST_LOG_DIR must be
# in place before any application module is loaded
# =============================================================================
import os
from pathlib import Path
import tempfile


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    test_db = Path(tempfile.gettempdir()) / f'event_ticketing_test_{worker_id}.db'
    os.environ['DATABASE_URL'] = f'sqlite+aiosqlite:///{test_db}'

    # Create test log directory
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


# Call immediately to set env vars before any imports
_early_setup_test_environment()

from collections.abc import AsyncGenerator, Generator  # noqa: E402

import httpx  # noqa: E402
import pytest  # noqa: E402

from src.platform.app_factory import create_app  # noqa: E402
from src.platform.config.di import container  # noqa: E402
from src.platform.config.wire_modules import WIRE_MODULES  # noqa: E402
from src.platform.database.orm_db_setting import (  # noqa: E402
    create_db_and_tables,
    dispose_engines,
    drop_db_and_tables,
)
from test.seed import seed_catalog, seed_customers  # noqa: E402


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        markers = [m.name for m in item.iter_markers()]
        if 'unit' not in markers and 'clean_database' not in item.fixturenames:
            item.fixturenames.insert(0, 'clean_database')


# =============================================================================
# Infrastructure Fixtures
# =============================================================================


@pytest.fixture(scope='session', autouse=True)
def wire_container() -> Generator[None, None, None]:
    container.wire(modules=WIRE_MODULES)
    yield
    container.unwire()


@pytest.fixture
async def clean_database() -> AsyncGenerator[None, None]:
    """Recreate every table; engines are bound to this test's event loop"""
    await drop_db_and_tables()
    await create_db_and_tables()
    yield
    await dispose_engines()


@pytest.fixture
async def client(clean_database: None) -> AsyncGenerator[httpx.AsyncClient, None]:
    app = create_app(title_suffix=' (Test)')
    # Unhandled errors must surface as 500 responses, not test crashes
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url='http://test') as ac:
        yield ac


# =============================================================================
# Seed Data Fixtures
# =============================================================================


@pytest.fixture
async def seeded(clean_database: None) -> None:
    """Two venues, two events with seats, three customers"""
    await seed_catalog()
    await seed_customers()
