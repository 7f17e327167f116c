"""Test harness for unit, integration and E2E tests.

Integration tests assume PostgreSQL is already running and migrated.
Settings are loaded from environment variables (configure via .env or export).
"""

from collections.abc import Iterator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

from quotevote.interface.api.app import create_app
from quotevote.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Settings loaded from environment automatically

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_create_quote(unit_env):
            service = await unit_env.get(QuoteService)
            quote = await service.create_quote("Stay hungry")
            assert quote.author == "Unknown"
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment


def create_client_fixture(unmock: set[Component] | None = None):
    """Factory for creating FastAPI TestClient fixtures.

    Each test gets a fresh app over a fresh container, so in-memory state
    never leaks between tests.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields TestClient
    """

    @pytest.fixture
    def _client() -> Iterator[TestClient]:
        app = create_app(build_test_container(unmock=unmock or set()))
        with TestClient(app) as client:
            yield client

    return _client
