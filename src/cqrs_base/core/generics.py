"""Introspection helpers resolving the type arguments a class binds on its generic bases."""

from dataclasses import dataclass
from typing import Any, Generic, Iterator, Optional, Protocol, TypeVar, get_args, get_origin


@dataclass(frozen=True)
class BoundGeneric:
    """A generic base class together with the type arguments bound to it."""

    origin: type
    values: tuple[Any, ...]

    @property
    def unbound(self) -> bool:
        """Indicates whether any argument is still a type variable."""
        return any(_has_type_variables(value) for value in self.values)


def iter_parameterized_bases(cls: type) -> Iterator[BoundGeneric]:
    """Yields every parameterized generic base found in the hierarchy of ``cls``.

    Type variables are substituted along the way, so given::

        class BaseHandler(CommandHandler[T]): ...
        class CreateUserHandler(BaseHandler[CreateUser]): ...

    the hierarchy of ``CreateUserHandler`` yields ``BaseHandler[CreateUser]``
    and then ``CommandHandler[CreateUser]``. Each distinct binding is yielded once.
    """
    seen: list[BoundGeneric] = []
    yield from _walk(cls, {}, seen)


def resolve_type_arguments(cls: type, contract: type) -> Optional[BoundGeneric]:
    """Gets the first binding of ``contract`` in the hierarchy of ``cls``, if any."""
    for bound in iter_parameterized_bases(cls):
        if bound.origin is contract:
            return bound
    return None


def _walk(cls: type, substitutions: dict[Any, Any], seen: list[BoundGeneric]) -> Iterator[BoundGeneric]:
    # __orig_bases__ is looked up on the class itself, getattr would return the parent's
    for base in cls.__dict__.get("__orig_bases__", cls.__bases__):
        origin = get_origin(base)
        if origin is None:
            if isinstance(base, type) and base is not object:
                yield from _walk(base, {}, seen)
            continue
        if origin is Generic or origin is Protocol:
            continue
        bound = BoundGeneric(origin, tuple(_substitute(argument, substitutions) for argument in get_args(base)))
        if bound not in seen:
            seen.append(bound)
            yield bound
        parameters = getattr(origin, "__parameters__", ())
        yield from _walk(origin, dict(zip(parameters, bound.values)), seen)


def _substitute(argument: Any, substitutions: dict[Any, Any]) -> Any:
    if isinstance(argument, TypeVar):
        return substitutions.get(argument, argument)
    parameters = getattr(argument, "__parameters__", ())
    if parameters and get_origin(argument) is not None:
        return argument[tuple(substitutions.get(parameter, parameter) for parameter in parameters)]
    return argument


def _has_type_variables(value: Any) -> bool:
    if isinstance(value, TypeVar):
        return True
    return bool(getattr(value, "__parameters__", ())) and get_origin(value) is not None
