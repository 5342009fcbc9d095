"""Core value types: the Result algebra, cancellation and errors."""

from .cancellation import CancellationToken, CancellationTokenSource
from .errors import AmbiguousHandlerError, ArgumentNullError, CqrsError, HandlerContractError
from .result import VALIDATION_ERROR_MESSAGE, ErrorCodes, ErrorDetails, Result

__all__ = [
    "Result",
    "ErrorCodes",
    "ErrorDetails",
    "VALIDATION_ERROR_MESSAGE",
    "CancellationToken",
    "CancellationTokenSource",
    "CqrsError",
    "ArgumentNullError",
    "HandlerContractError",
    "AmbiguousHandlerError",
]
