"""Descriptors of the handler shapes recognized during discovery."""

from dataclasses import dataclass
from typing import Any, Optional

from cqrs_base.mediation.handlers import CommandHandler, CommandWithResultHandler, QueryHandler
from cqrs_base.mediation.messages import Command, CommandWithResult, Query


@dataclass(frozen=True)
class HandlerCapability:
    """Describes one handler shape: the generic contract a handler class derives from,
    the message contract its first type argument must satisfy and whether it produces a value."""

    name: str
    """Gets the capability's display name."""

    handler_contract: type
    """Gets the generic handler base, e.g. ``QueryHandler``."""

    message_contract: type
    """Gets the message base the handled type must derive from."""

    has_result: bool
    """Indicates whether handlers of this shape produce a value."""

    def matches(self, origin: Any) -> bool:
        return origin is self.handler_contract

    def bind(self, message_type: type, result_type: Optional[Any] = None) -> Any:
        """Gets the handler contract parameterized with the specified types, e.g. ``QueryHandler[GetUser, UserDto]``."""
        if self.has_result:
            return self.handler_contract[message_type, result_type]
        return self.handler_contract[message_type]

    def __str__(self) -> str:
        return self.name


COMMAND_HANDLER = HandlerCapability("command", CommandHandler, Command, has_result=False)
COMMAND_WITH_RESULT_HANDLER = HandlerCapability("command-with-result", CommandWithResultHandler, CommandWithResult, has_result=True)
QUERY_HANDLER = HandlerCapability("query", QueryHandler, Query, has_result=True)

DEFAULT_CAPABILITIES: tuple[HandlerCapability, ...] = (COMMAND_HANDLER, COMMAND_WITH_RESULT_HANDLER, QUERY_HANDLER)
