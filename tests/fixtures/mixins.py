"""Test mixins for reusable test patterns.

Provides base classes with common testing utilities for assertions,
async operations, and test patterns.
"""

import asyncio
from typing import Any, Awaitable, TypeVar
from unittest.mock import AsyncMock

from domain.entities import Order
from domain.models import Address

T = TypeVar("T")


# ============================================================================
# ASYNC TEST MIXINS
# ============================================================================


class AsyncTestMixin:
    """Mixin providing utilities for async tests."""

    @staticmethod
    async def await_with_timeout(coro: Awaitable[T], timeout: float = 5.0, error_msg: str | None = None) -> T:
        """Await a coroutine with timeout."""
        try:
            result: T = await asyncio.wait_for(coro, timeout=timeout)
            return result
        except asyncio.TimeoutError as e:
            msg: str = error_msg or f"Operation timed out after {timeout}s"
            raise AssertionError(msg) from e


# ============================================================================
# ASSERTION MIXINS
# ============================================================================


class AssertionMixin:
    """Mixin providing custom assertion helpers."""

    @staticmethod
    def assert_ships_to(order: Order, street: str, city: str) -> None:
        """Assert an order's shipping address has the given street and city."""
        address: Address = order.shipping_address
        assert address.street == street, f"Expected street '{street}', got '{address.street}'"
        assert address.city == city, f"Expected city '{city}', got '{address.city}'"

    @staticmethod
    def assert_dict_contains(actual: dict[str, Any], expected: dict[str, Any]) -> None:
        """Assert actual dict contains all key-value pairs from expected dict."""
        for key, value in expected.items():
            assert key in actual, f"Key '{key}' not found in actual dict"
            assert actual[key] == value, f"Value for key '{key}' doesn't match: {actual[key]} != {value}"

    @staticmethod
    def assert_list_length(actual: list[Any], expected_length: int) -> None:
        """Assert list has expected length with helpful error message."""
        actual_length: int = len(actual)
        assert actual_length == expected_length, f"Expected list length {expected_length}, got {actual_length}"


# ============================================================================
# MOCK HELPER MIXINS
# ============================================================================


class MockHelperMixin:
    """Mixin providing utilities for working with mocks."""

    @staticmethod
    def create_async_mock(return_value: Any = None) -> AsyncMock:
        """Create an AsyncMock with optional return value."""
        mock: AsyncMock = AsyncMock()
        mock.return_value = return_value
        return mock


# ============================================================================
# COMBINED TEST BASE
# ============================================================================


class BaseTestCase(
    AsyncTestMixin,
    AssertionMixin,
    MockHelperMixin,
):
    """Combined base test class with all mixins.

    Use this as a base class for test classes that need multiple utilities.
    """

    pass
