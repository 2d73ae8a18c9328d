"""Logging helpers."""

from .redaction import describe_keys, redact_env, redact_text

__all__ = ["describe_keys", "redact_env", "redact_text"]
