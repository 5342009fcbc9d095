"""Cooperative cancellation signal passed to every handler invocation."""

import asyncio
from typing import Optional


class CancellationToken:
    """Observes whether cancellation of the current request has been requested.

    Handlers check the token at suspension points and let the resulting
    ``asyncio.CancelledError`` propagate rather than turning it into a Result.
    """

    def __init__(self, source: Optional["CancellationTokenSource"] = None):
        self._source = source

    @staticmethod
    def none() -> "CancellationToken":
        """Gets a token that is never cancelled."""
        return CancellationToken()

    @property
    def can_be_cancelled(self) -> bool:
        return self._source is not None

    @property
    def is_cancellation_requested(self) -> bool:
        return self._source is not None and self._source.is_cancellation_requested

    def throw_if_cancellation_requested(self) -> None:
        """Raises ``asyncio.CancelledError`` if cancellation has been requested."""
        if self.is_cancellation_requested:
            raise asyncio.CancelledError(self._source.reason if self._source else None)

    async def wait_async(self) -> None:
        """Suspends until cancellation is requested. Never returns for a token without a source."""
        if self._source is None:
            await asyncio.Event().wait()
            return
        await self._source._event.wait()


class CancellationTokenSource:
    """Owns and signals a CancellationToken."""

    def __init__(self) -> None:
        self._event = asyncio.Event()
        self.reason: Optional[str] = None
        self.token = CancellationToken(self)

    @property
    def is_cancellation_requested(self) -> bool:
        return self._event.is_set()

    def cancel(self, reason: Optional[str] = None) -> None:
        """Requests cancellation. Subsequent calls are ignored."""
        if self._event.is_set():
            return
        self.reason = reason
        self._event.set()
