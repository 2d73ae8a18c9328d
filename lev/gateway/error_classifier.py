"""Classify botocore failures into the lev error taxonomy.

Classification uses stable error codes (for service errors) and exception
classes (for client-side errors), never the human readable message. Codes
that are not listed map to ErrorKind.UNKNOWN.
"""

from __future__ import annotations

from typing import Any

from botocore.exceptions import (
    BotoCoreError,
    ClientError,
    ConnectionClosedError,
    ConnectTimeoutError,
    EndpointConnectionError,
    NoCredentialsError,
    ParamValidationError,
    PartialCredentialsError,
    ProfileNotFound,
    ReadTimeoutError,
    SSOTokenLoadError,
    TokenRetrievalError,
    UnauthorizedSSOTokenError,
)

from lev.enums import ErrorKind
from lev.errors import LevError, error_for_kind

NOT_FOUND_CODES = frozenset(
    {
        "ResourceNotFoundException",
        "ResourceNotFound",
    }
)

UNAUTHORIZED_CODES = frozenset(
    {
        "AccessDeniedException",
        "AccessDenied",
        "UnrecognizedClientException",
        "InvalidClientTokenId",
        "InvalidSignatureException",
        "SignatureDoesNotMatch",
        "ExpiredToken",
        "ExpiredTokenException",
        "KMSAccessDeniedException",
    }
)

VALIDATION_CODES = frozenset(
    {
        "InvalidParameterValueException",
        "ValidationException",
        "InvalidRequestContentException",
        "RequestTooLargeException",
        # RevisionId no longer matches: someone else updated the function.
        "PreconditionFailedException",
        "CodeVerificationFailedException",
        "InvalidCodeSignatureException",
        "KMSDisabledException",
        "KMSInvalidStateException",
        "KMSNotFoundException",
    }
)

TRANSIENT_CODES = frozenset(
    {
        "TooManyRequestsException",
        "ThrottlingException",
        "Throttling",
        "ServiceException",
        "ServiceUnavailableException",
        "InternalFailure",
        # Raised while a previous update of the function is still in progress.
        "ResourceConflictException",
        "RequestTimeout",
        "RequestTimeoutException",
    }
)

_CODE_KINDS: dict[str, ErrorKind] = {
    **{code: ErrorKind.NOT_FOUND for code in NOT_FOUND_CODES},
    **{code: ErrorKind.UNAUTHORIZED for code in UNAUTHORIZED_CODES},
    **{code: ErrorKind.VALIDATION_FAILED for code in VALIDATION_CODES},
    **{code: ErrorKind.TRANSIENT for code in TRANSIENT_CODES},
}

_UNAUTHORIZED_EXCEPTIONS: tuple[type[BotoCoreError], ...] = (
    NoCredentialsError,
    ParamValidationError,
    PartialCredentialsError,
    ProfileNotFound,
    TokenRetrievalError,
    SSOTokenLoadError,
    UnauthorizedSSOTokenError,
)

_TRANSIENT_EXCEPTIONS: tuple[type[BotoCoreError], ...] = (
    EndpointConnectionError,
    ConnectTimeoutError,
    ReadTimeoutError,
    ConnectionClosedError,
)

# Raised by botocore before sending, when a request parameter is malformed.
_VALIDATION_EXCEPTIONS: tuple[type[BotoCoreError], ...] = (ParamValidationError,)


def kind_for_code(code: str | None) -> ErrorKind:
    """Map a platform error code to an ErrorKind."""
    if not code:
        return ErrorKind.UNKNOWN
    return _CODE_KINDS.get(code, ErrorKind.UNKNOWN)


def _client_error_details(err: ClientError) -> tuple[str, str]:
    response: dict[str, Any] = err.response or {}
    error = response.get("Error") or {}
    code = str(error.get("Code") or "")
    message = str(error.get("Message") or "") or str(err)
    return code, message


def classify_exception(exc: BaseException) -> LevError:
    """Translate a botocore exception into a LevError.

    LevErrors pass through unchanged. The caller is expected to chain the
    original exception (`raise classify_exception(e) from e`).
    """
    if isinstance(exc, LevError):
        return exc

    if isinstance(exc, ClientError):
        code, message = _client_error_details(exc)
        return error_for_kind(kind_for_code(code), message, code=code or None)

    if isinstance(exc, _UNAUTHORIZED_EXCEPTIONS):
        return error_for_kind(ErrorKind.UNAUTHORIZED, str(exc), code=type(exc).__name__)

    if isinstance(exc, _TRANSIENT_EXCEPTIONS):
        return error_for_kind(ErrorKind.TRANSIENT, str(exc), code=type(exc).__name__)

    if isinstance(exc, _VALIDATION_EXCEPTIONS):
        return error_for_kind(ErrorKind.VALIDATION_FAILED, str(exc), code=type(exc).__name__)

    return error_for_kind(ErrorKind.UNKNOWN, str(exc) or repr(exc), code=type(exc).__name__)


def classify_environment_error(code: str | None, message: str | None) -> LevError:
    """Classify the `Environment.Error` block Lambda returns on decrypt failure."""
    kind = kind_for_code(code)
    detail = message or "Lambda could not read the function's environment variables"
    return error_for_kind(kind, detail, code=code or None)
