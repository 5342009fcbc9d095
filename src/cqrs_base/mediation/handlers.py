"""Handler contracts, one per message shape.

A handler processes a single message type and returns a ``Result``::

    class CreateUserCommandHandler(CommandWithResultHandler[CreateUserCommand, UUID]):

        async def handle_async(self, request, cancellation_token=None):
            return self.ok(uuid4())

Handlers are resolved per request by the host container and must not keep
state across invocations.
"""

from abc import ABC, abstractmethod
from typing import Any, Generic, Optional, TypeVar

from cqrs_base.core.cancellation import CancellationToken
from cqrs_base.core.result import _UNSET, ErrorCodes, ErrorDetails, Result

from .messages import Command, CommandWithResult, Query

TCommand = TypeVar("TCommand", bound=Command)
TValueCommand = TypeVar("TValueCommand", bound=CommandWithResult)
TQuery = TypeVar("TQuery", bound=Query)
TResult = TypeVar("TResult")


class RequestHandler(ABC):
    """Represents the base class of all handlers, exposing Result factory helpers."""

    @abstractmethod
    async def handle_async(self, request: Any, cancellation_token: Optional[CancellationToken] = None) -> Result[Any]:
        """Processes the specified request."""
        raise NotImplementedError()

    def ok(self, value: Any = _UNSET) -> Result[Any]:
        """Creates a successful result, carrying ``value`` when one is supplied."""
        return Result.success(value)

    def failure(self, error_message: str, *, error_code: str = ErrorCodes.FAILURE) -> Result[Any]:
        return Result.failure(error_message, error_code=error_code)

    def not_found(self, entity_type: type, key: Any) -> Result[Any]:
        """Creates a 'NotFound' result describing the missing entity."""
        return Result.not_found(f"Failed to find a {entity_type.__name__} with the specified key '{key}'")

    def bad_request(self, errors: ErrorDetails) -> Result[Any]:
        return Result.bad_request(errors)


class CommandHandler(RequestHandler, Generic[TCommand]):
    """Handles a command that produces no value."""

    @abstractmethod
    async def handle_async(self, request: TCommand, cancellation_token: Optional[CancellationToken] = None) -> Result[None]:
        raise NotImplementedError()


class CommandWithResultHandler(RequestHandler, Generic[TValueCommand, TResult]):
    """Handles a command that produces a value of type TResult."""

    @abstractmethod
    async def handle_async(self, request: TValueCommand, cancellation_token: Optional[CancellationToken] = None) -> Result[TResult]:
        raise NotImplementedError()


class QueryHandler(RequestHandler, Generic[TQuery, TResult]):
    """Handles a query producing a value of type TResult.

    Query handlers must not mutate observable state. This is a convention, not
    something enforced at runtime.
    """

    @abstractmethod
    async def handle_async(self, request: TQuery, cancellation_token: Optional[CancellationToken] = None) -> Result[TResult]:
        raise NotImplementedError()
