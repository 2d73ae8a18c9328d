"""StrEnum definitions for type-safe constants."""

from enum import StrEnum


class CommandType(StrEnum):
    """Subcommands accepted by the CLI."""

    GET = "get"
    SET = "set"
    UNSET = "unset"


class ErrorKind(StrEnum):
    """Error taxonomy surfaced to the operator."""

    INVALID_ARGUMENTS = "invalid_arguments"
    NOT_FOUND = "not_found"
    UNAUTHORIZED = "unauthorized"
    VALIDATION_FAILED = "validation_failed"
    TRANSIENT = "transient"
    UNKNOWN = "unknown"


class OutputFormat(StrEnum):
    """How a resulting environment map is printed."""

    ENV = "env"
    JSON = "json"
