"""Exceptions raised for programmer errors.

Expected domain failures never raise: they are returned as a ``Result``.
"""

from typing import Any, get_origin


class CqrsError(Exception):
    """Base class for all errors raised by cqrs_base."""


class ArgumentNullError(CqrsError, ValueError):
    """Raised when a required argument is None or empty."""

    def __init__(self, argument_name: str, message: str | None = None):
        self.argument_name = argument_name
        super().__init__(message or f"Argument '{argument_name}' cannot be null")


class HandlerContractError(CqrsError, TypeError):
    """Raised when a handler class declares a shape its message type contradicts."""

    def __init__(self, handler_type: type, message: str):
        self.handler_type = handler_type
        super().__init__(f"{handler_type.__qualname__}: {message}")


class AmbiguousHandlerError(CqrsError):
    """Raised when more than one concrete handler is bound to the same capability."""

    def __init__(self, ambiguities: dict[Any, list[type]]):
        self.ambiguities = ambiguities
        lines = [f"{_describe(service_type)} -> {', '.join(h.__qualname__ for h in handlers)}" for service_type, handlers in ambiguities.items()]
        super().__init__("Multiple handlers are bound to the same request: " + "; ".join(lines))


def _describe(service_type: Any) -> str:
    if get_origin(service_type) is None and isinstance(service_type, type):
        return service_type.__qualname__
    return repr(service_type)
