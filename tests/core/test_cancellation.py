"""Cancellation token tests."""

import asyncio

import pytest

from cqrs_base import CancellationToken, CancellationTokenSource
from tests.fixtures.mixins import BaseTestCase


@pytest.mark.unit
class TestCancellationToken(BaseTestCase):
    """Test cancellation signalling."""

    def test_none_token_is_never_cancelled(self) -> None:
        token: CancellationToken = CancellationToken.none()

        assert not token.can_be_cancelled
        assert not token.is_cancellation_requested
        token.throw_if_cancellation_requested()

    def test_cancel_is_observed_by_token(self, cancellation_source: CancellationTokenSource) -> None:
        token: CancellationToken = cancellation_source.token
        assert token.can_be_cancelled
        assert not token.is_cancellation_requested

        cancellation_source.cancel("client disconnected")

        assert token.is_cancellation_requested
        with pytest.raises(asyncio.CancelledError):
            token.throw_if_cancellation_requested()

    def test_cancel_keeps_first_reason(self, cancellation_source: CancellationTokenSource) -> None:
        cancellation_source.cancel("first")
        cancellation_source.cancel("second")

        assert cancellation_source.reason == "first"

    @pytest.mark.asyncio
    async def test_wait_async_resumes_on_cancel(self, cancellation_source: CancellationTokenSource) -> None:
        """Test that a waiting task resumes once cancellation is requested."""
        waiter: asyncio.Task[None] = asyncio.ensure_future(cancellation_source.token.wait_async())
        await asyncio.sleep(0)
        assert not waiter.done()

        cancellation_source.cancel()

        await self.await_with_timeout(waiter, timeout=1.0)
        assert waiter.done()
