"""Marker contracts for the messages exchanged with handlers.

Messages are plain data holders, typically declared as dataclasses::

    @dataclass(frozen=True)
    class CreateUserCommand(CommandWithResult[UUID]):
        name: str
"""

from typing import Any, Generic, Optional, TypeVar

from cqrs_base.core.generics import resolve_type_arguments

TResult = TypeVar("TResult")


class Request:
    """Represents the base class of all messages dispatched to a handler."""


class Command(Request):
    """Represents an intent to change state that produces no value."""


class CommandWithResult(Request, Generic[TResult]):
    """Represents an intent to change state that produces a value of type TResult."""


class Query(Request, Generic[TResult]):
    """Represents a read-only request for a value of type TResult."""


def declared_result_type(message_type: type) -> Optional[Any]:
    """Gets the result type a message class binds, or None if it declares none.

    Type variables left unbound by the message class are reported as None.
    """
    for contract in (CommandWithResult, Query):
        arguments = resolve_type_arguments(message_type, contract)
        if arguments is not None:
            return None if arguments.unbound else arguments.values[0]
    return None
