"""Render environment maps for stdout."""

from __future__ import annotations

import json
from collections.abc import Mapping

from lev.enums import OutputFormat


def format_env(env: Mapping[str, str], output_format: OutputFormat = OutputFormat.ENV) -> str:
    """Render `env` as `KEY=value` lines or as a JSON object, sorted by key.

    An empty map renders as "" in env format and "{}" in JSON.
    """
    if output_format is OutputFormat.JSON:
        return json.dumps(dict(env), indent=2, sort_keys=True, ensure_ascii=False)
    return "\n".join(f"{key}={env[key]}" for key in sorted(env))
