"""Test mixins for reusable test patterns.

Provides base classes with common testing utilities for Result assertions,
binding comparisons and async operations.
"""

import asyncio
from typing import Any, Awaitable, Iterable, TypeVar

from cqrs_base import HandlerBinding, Result

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
    def assert_success(result: Result[Any]) -> None:
        """Assert a result is a success with no error information."""
        assert result.is_success, f"Expected a success, got {result!r}"
        assert result.error_code == ""
        assert result.error_message == ""
        assert len(result.errors) == 0

    @staticmethod
    def assert_failure(result: Result[Any], error_code: str) -> None:
        """Assert a result is a failure tagged with the specified code."""
        assert not result.is_success, f"Expected a failure, got {result!r}"
        assert result.error_code == error_code
        assert result.error_message
        assert result.value is None
        assert not result.has_value

    @staticmethod
    def binding_signatures(bindings: Iterable[HandlerBinding]) -> list[tuple[Any, type]]:
        """Reduce bindings to comparable (service type, handler type) pairs."""
        return [(binding.service_type, binding.handler_type) for binding in bindings]


class BaseTestCase(AsyncTestMixin, AssertionMixin):
    """Base test case combining all mixins."""
