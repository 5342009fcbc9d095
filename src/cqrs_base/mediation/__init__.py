"""Message and handler contracts."""

from .handlers import CommandHandler, CommandWithResultHandler, QueryHandler, RequestHandler
from .messages import Command, CommandWithResult, Query, Request, declared_result_type

__all__ = [
    # Messages
    "Request",
    "Command",
    "CommandWithResult",
    "Query",
    "declared_result_type",
    # Handlers
    "RequestHandler",
    "CommandHandler",
    "CommandWithResultHandler",
    "QueryHandler",
]
