"""Handler discovery and registration."""

from .capabilities import COMMAND_HANDLER, COMMAND_WITH_RESULT_HANDLER, DEFAULT_CAPABILITIES, QUERY_HANDLER, HandlerCapability
from .registration import CqrsHandlers, DuplicateHandlerPolicy, HandlerRegistry, ServiceCollectionRegistry, add_cqrs_handlers, register_handlers
from .scanner import SCOPED, HandlerBinding, bind_handler, discover_handlers, find_ambiguous_bindings

__all__ = [
    "HandlerCapability",
    "COMMAND_HANDLER",
    "COMMAND_WITH_RESULT_HANDLER",
    "QUERY_HANDLER",
    "DEFAULT_CAPABILITIES",
    "HandlerBinding",
    "SCOPED",
    "discover_handlers",
    "bind_handler",
    "find_ambiguous_bindings",
    "HandlerRegistry",
    "ServiceCollectionRegistry",
    "DuplicateHandlerPolicy",
    "register_handlers",
    "add_cqrs_handlers",
    "CqrsHandlers",
]
