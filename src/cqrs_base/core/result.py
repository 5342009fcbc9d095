"""Result algebra returned by every handler invocation.

A ``Result`` is either a success (optionally carrying a value) or a failure
tagged with a short machine-readable ``error_code``. Expected failures are
returned as data, never raised across a handler boundary.

Examples:
    >>> Result.success(42).value
    42
    >>> Result.not_found("User 7 does not exist").error_code
    'NotFound'
    >>> Result.bad_request({"name": ["Name is required."]}).errors["name"]
    ('Name is required.',)
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Callable, Generic, Mapping, Optional, Sequence, TypeVar, Union

from .errors import ArgumentNullError

TResult = TypeVar("TResult")
TOther = TypeVar("TOther")

ErrorDetails = Mapping[str, Union[Sequence[str], str]]


class ErrorCodes:
    """Well-known error codes. Any other non-empty string is a valid custom code."""

    FAILURE = "Failure"
    NOT_FOUND = "NotFound"
    VALIDATION_ERROR = "ValidationError"


VALIDATION_ERROR_MESSAGE = "One or more validation errors occurred."

_UNSET: Any = object()
_NO_ERRORS: Mapping[str, tuple[str, ...]] = MappingProxyType({})


def _freeze_errors(errors: Optional[ErrorDetails]) -> Mapping[str, tuple[str, ...]]:
    if not errors:
        return _NO_ERRORS
    frozen: dict[str, tuple[str, ...]] = {}
    for name, messages in errors.items():
        # a bare string is a single message, not a sequence of characters
        frozen[str(name)] = (messages,) if isinstance(messages, str) else tuple(messages)
    return MappingProxyType(frozen)


@dataclass(frozen=True)
class Result(Generic[TResult]):
    """Represents the outcome of one handler invocation.

    Instances are built through the named constructors below and are immutable
    afterwards. Direct construction is validated against the same invariants.
    """

    is_success: bool
    """Indicates whether the operation succeeded."""

    value: Optional[TResult] = None
    """The value carried by a successful result, None otherwise."""

    error_code: str = ""
    """Short machine-readable tag, empty on success."""

    error_message: str = ""
    """Human-readable summary, empty on success."""

    errors: Mapping[str, tuple[str, ...]] = field(default_factory=lambda: _NO_ERRORS)
    """Per-field error messages, keyed by field name."""

    has_value: bool = False
    """Indicates whether the result carries a value."""

    def __post_init__(self) -> None:
        object.__setattr__(self, "errors", _freeze_errors(self.errors))
        if self.is_success:
            if self.error_code or self.error_message or self.errors:
                raise ValueError("A successful result cannot carry error details")
            if self.has_value and self.value is None:
                raise ArgumentNullError("value", "A successful result cannot carry a None value")
            if self.value is not None and not self.has_value:
                raise ValueError("A successful result carrying a value must set has_value")
            return
        if self.has_value or self.value is not None:
            raise ValueError("A failed result cannot carry a value")
        if not self.error_code:
            raise ArgumentNullError("error_code")
        if not self.error_message:
            raise ArgumentNullError("error_message")

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @classmethod
    def success(cls, value: Any = _UNSET) -> "Result[TResult]":
        """Creates a successful result, optionally carrying a value.

        Raises:
            ArgumentNullError: the value-carrying form was given None
        """
        if value is _UNSET:
            return cls(is_success=True)
        if value is None:
            raise ArgumentNullError("value", "A successful result cannot carry a None value")
        return cls(is_success=True, value=value, has_value=True)

    @classmethod
    def from_value(cls, value: TResult) -> "Result[TResult]":
        """Wraps a bare value into a successful result."""
        if value is None:
            raise ArgumentNullError("value", "A successful result cannot carry a None value")
        return cls(is_success=True, value=value, has_value=True)

    @classmethod
    def failure(cls, error_message: str, *, error_code: str = ErrorCodes.FAILURE) -> "Result[TResult]":
        """Creates a failed result, tagged 'Failure' unless a custom code is supplied."""
        return cls._fail(error_code, error_message)

    @classmethod
    def not_found(cls, error_message: str, errors: Optional[ErrorDetails] = None) -> "Result[TResult]":
        """Creates a failed result tagged 'NotFound', with optional per-field detail."""
        return cls._fail(ErrorCodes.NOT_FOUND, error_message, errors)

    @classmethod
    def bad_request(cls, errors: ErrorDetails) -> "Result[TResult]":
        """Creates a validation failure carrying the supplied per-field errors."""
        if errors is None:
            raise ArgumentNullError("errors")
        return cls._fail(ErrorCodes.VALIDATION_ERROR, VALIDATION_ERROR_MESSAGE, errors)

    @classmethod
    def from_failure(cls, other: "Result[Any]") -> "Result[TResult]":
        """Re-types a failed result, keeping its code, message and errors.

        Raises:
            ValueError: ``other`` is a success, which has no failure to carry over
        """
        if other.is_success:
            raise ValueError("Only a failed result can be re-typed")
        return cls(is_success=False, error_code=other.error_code, error_message=other.error_message, errors=other.errors)

    @classmethod
    def _fail(cls, error_code: str, error_message: str, errors: Optional[ErrorDetails] = None) -> "Result[TResult]":
        return cls(is_success=False, error_code=error_code, error_message=error_message, errors=errors or _NO_ERRORS)

    def map(self, mapper: Callable[[TResult], TOther]) -> "Result[TOther]":
        """Applies ``mapper`` to the carried value of a success, passes failures through unchanged."""
        if self.is_failure:
            return Result.from_failure(self)
        if not self.has_value:
            return Result.success()
        return Result.success(mapper(self.value))

    def __repr__(self) -> str:
        if self.is_success:
            return f"Result(success, value={self.value!r})" if self.has_value else "Result(success)"
        details = f", errors={dict(self.errors)!r}" if self.errors else ""
        return f"Result(failure, code={self.error_code!r}, message={self.error_message!r}{details})"
