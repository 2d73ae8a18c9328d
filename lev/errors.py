"""Error taxonomy for lev.

Every failure that reaches the operator is one of the `LevError` subclasses
below. The CLI entry point is the only place that catches them; everything
else lets them propagate unchanged.
"""

from __future__ import annotations

from lev.enums import ErrorKind


class LevError(Exception):
    """Base class for all classified failures.

    Attributes:
        kind: Taxonomy bucket (see ErrorKind).
        detail: Human readable detail, usually the platform-provided message.
        code: Platform error code when the failure came from AWS.
    """

    kind: ErrorKind = ErrorKind.UNKNOWN
    exit_code: int = 1

    def __init__(self, detail: str, *, code: str | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.code = code

    def __str__(self) -> str:
        if self.code and self.code not in self.detail:
            return f"{self.code}: {self.detail}"
        return self.detail


class InvalidArgumentsError(LevError):
    """Raised when the command line is missing a required argument."""

    kind = ErrorKind.INVALID_ARGUMENTS
    exit_code = 2


class FunctionNotFoundError(LevError):
    """Raised when the target function does not exist."""

    kind = ErrorKind.NOT_FOUND
    exit_code = 3


class UnauthorizedError(LevError):
    """Raised when credentials are missing, invalid or lack permission."""

    kind = ErrorKind.UNAUTHORIZED
    exit_code = 4


class ValidationFailedError(LevError):
    """Raised when the platform rejects the submitted configuration."""

    kind = ErrorKind.VALIDATION_FAILED
    exit_code = 5


class TransientError(LevError):
    """Raised for network or service failures that may succeed on retry."""

    kind = ErrorKind.TRANSIENT
    exit_code = 6


class UnknownPlatformError(LevError):
    """Raised for failures that could not be classified."""

    kind = ErrorKind.UNKNOWN
    exit_code = 1


ERROR_TYPES: dict[ErrorKind, type[LevError]] = {
    cls.kind: cls
    for cls in (
        InvalidArgumentsError,
        FunctionNotFoundError,
        UnauthorizedError,
        ValidationFailedError,
        TransientError,
        UnknownPlatformError,
    )
}


def error_for_kind(kind: ErrorKind, detail: str, *, code: str | None = None) -> LevError:
    """Build the exception instance matching an ErrorKind."""
    return ERROR_TYPES[kind](detail, code=code)
