"""Redaction helpers to keep environment values out of logs.

Design goals:
- Safe by default: variable values are never logged in clear text.
- Keys stay visible so an operator can follow what changed.
- Bounded: long strings are truncated to keep logs readable.

NOTE: This is *not* a DLP system. Function names and error messages from the
platform are logged as-is, only scrubbed for the most common token formats.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

_REPLACEMENT = "[REDACTED]"
_TRUNC_SUFFIX = "…(truncated)"

# Common token formats / sensitive patterns.
_SENSITIVE_VALUE_RES: list[re.Pattern[str]] = [
    # AWS access key id
    re.compile(r"\b(?:AKIA|ASIA)[A-Z0-9]{16}\b"),
    # Bearer tokens
    re.compile(r"\bBearer\s+[A-Za-z0-9._\-]+\b", flags=re.IGNORECASE),
    # Generic 'key=value' patterns
    re.compile(r"\b(?:password|passwd|pwd)\s*[:=]\s*\S+", flags=re.IGNORECASE),
    re.compile(r"\b(?:api[_-]?key|apikey)\s*[:=]\s*\S+", flags=re.IGNORECASE),
    re.compile(r"\b(?:token)\s*[:=]\s*\S+", flags=re.IGNORECASE),
    re.compile(r"\b(?:secret|private[_-]?key)\s*[:=]\s*\S+", flags=re.IGNORECASE),
]


def redact_text(text: str, *, max_chars: int = 2000) -> str:
    """Redact sensitive substrings in a text blob and truncate."""
    if text is None:
        return text

    out = text
    for rx in _SENSITIVE_VALUE_RES:
        out = rx.sub(_REPLACEMENT, out)

    if max_chars and len(out) > max_chars:
        out = out[:max_chars] + _TRUNC_SUFFIX

    return out


def redact_env(env: Mapping[str, str]) -> dict[str, str]:
    """Return `env` with every value replaced by a redaction marker.

    Empty values are shown as "" since their emptiness is not a secret and
    is useful when debugging a `set KEY=`.
    """
    return {key: ("" if value == "" else _REPLACEMENT) for key, value in env.items()}


def describe_keys(keys: Iterable[str], *, max_keys: int = 20) -> str:
    """Render a bounded, sorted, comma separated list of keys for log lines."""
    ordered = sorted(set(keys))
    if len(ordered) > max_keys:
        return ", ".join(ordered[:max_keys]) + f", …(+{len(ordered) - max_keys})"
    return ", ".join(ordered)
