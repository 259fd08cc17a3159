"""Pytest configuration and shared fixtures for all tests.

This module provides:
- Test configuration and markers
- Order repository mocks and in-memory fakes
- Sample addresses and integration events
"""

import os
from typing import Any, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from _pytest.config import Config

from application.events.integration import CustomerAddressUpdatedIntegrationEventV1
from application.settings import app_settings
from integration.models import AddressDto
from tests.fixtures.factories import AddressDtoFactory, CustomerAddressUpdatedEventFactory, OrderFactory
from tests.fixtures.in_memory_order_repository import InMemoryOrderRepository

# ============================================================================
# PYTEST CONFIGURATION
# ============================================================================


def pytest_configure(config: Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no external dependencies)")
    config.addinivalue_line("markers", "integration: Integration tests (may use external services)")
    config.addinivalue_line("markers", "asyncio: Async tests")
    config.addinivalue_line("markers", "domain: Domain model tests")
    config.addinivalue_line("markers", "repository: Repository layer tests")
    config.addinivalue_line("markers", "command: Command handler tests")
    config.addinivalue_line("markers", "query: Query handler tests")
    config.addinivalue_line("markers", "event: Integration event handling tests")
    config.addinivalue_line("markers", "api: API controller tests")


# ============================================================================
# REPOSITORY FIXTURES
# ============================================================================


@pytest.fixture
def mock_repository() -> MagicMock:
    """Provide a mock OrderRepository for testing command/query handlers.

    Mocks both the base Repository[Order, str] methods and the
    order-specific queries.
    """
    mock: MagicMock = MagicMock()
    # Base Repository methods
    mock.get_async = AsyncMock(return_value=None)
    mock.add_async = AsyncMock(side_effect=lambda entity: entity)
    mock.update_async = AsyncMock(side_effect=lambda entity: entity)
    mock.remove_async = AsyncMock(return_value=True)
    mock.contains_async = AsyncMock(return_value=False)
    # OrderRepository methods
    mock.get_all_async = AsyncMock(return_value=[])
    mock.get_by_customer_async = AsyncMock(return_value=[])
    mock.update_address_async = AsyncMock(return_value=True)
    return mock


@pytest.fixture
def order_repository() -> InMemoryOrderRepository:
    """Provide an in-memory store holding two orders of c1 and one of c2."""
    return InMemoryOrderRepository(
        [
            OrderFactory.create(order_id="o1", customer_id="c1"),
            OrderFactory.create(order_id="o2", customer_id="c1"),
            OrderFactory.create(order_id="o3", customer_id="c2"),
        ]
    )


# ============================================================================
# EVENT FIXTURES
# ============================================================================


@pytest.fixture
def new_address() -> AddressDto:
    return AddressDtoFactory.create(street="1 Main St", city="Springfield")


@pytest.fixture
def address_updated_event(new_address: AddressDto) -> CustomerAddressUpdatedIntegrationEventV1:
    """A well-formed CustomerAddressUpdated event for customer c1."""
    return CustomerAddressUpdatedEventFactory.create(customer_id="c1", shipping_address=new_address)


# ============================================================================
# TEST SETTINGS FIXTURES
# ============================================================================


@pytest.fixture
def test_settings() -> Any:
    """Provide test-specific application settings."""
    return app_settings


# ============================================================================
# CLEANUP FIXTURES
# ============================================================================


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables after each test."""
    original_env: dict[str, str] = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
