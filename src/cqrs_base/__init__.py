"""Command/Query separation contracts: results, messages, handlers and handler discovery."""

from .core import (
    AmbiguousHandlerError,
    ArgumentNullError,
    CancellationToken,
    CancellationTokenSource,
    CqrsError,
    ErrorCodes,
    HandlerContractError,
    Result,
)
from .discovery import (
    CqrsHandlers,
    DuplicateHandlerPolicy,
    HandlerBinding,
    add_cqrs_handlers,
    discover_handlers,
    find_ambiguous_bindings,
    register_handlers,
)
from .mediation import Command, CommandHandler, CommandWithResult, CommandWithResultHandler, Query, QueryHandler, Request, RequestHandler

__version__ = "1.0.0"

__all__ = [
    "Result",
    "ErrorCodes",
    "CancellationToken",
    "CancellationTokenSource",
    "CqrsError",
    "ArgumentNullError",
    "HandlerContractError",
    "AmbiguousHandlerError",
    "Request",
    "Command",
    "CommandWithResult",
    "Query",
    "RequestHandler",
    "CommandHandler",
    "CommandWithResultHandler",
    "QueryHandler",
    "HandlerBinding",
    "discover_handlers",
    "find_ambiguous_bindings",
    "register_handlers",
    "add_cqrs_handlers",
    "CqrsHandlers",
    "DuplicateHandlerPolicy",
]
