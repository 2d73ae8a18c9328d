"""Configuration with optional YAML file, env variable and CLI flag support.

Load order (later overrides earlier):
1. Field defaults
2. lev.yml - optional YAML file (working directory, or --config PATH)
3. Environment variables - LEV_ prefix (e.g. LEV_AWS_PROFILE), plus .env
4. CLI flags
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from lev.enums import OutputFormat
from lev.errors import InvalidArgumentsError

logger = logging.getLogger(__name__)

ENV_PREFIX = "LEV_"
DEFAULT_CONFIG_FILE = "lev.yml"


def _load_yaml_file(path: Path) -> dict[str, Any]:
    """Load a YAML mapping from `path`.

    Raises:
        InvalidArgumentsError: If the file cannot be read or is not a mapping.
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise InvalidArgumentsError(f"cannot read config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise InvalidArgumentsError(f"config file {path} must contain a mapping")
    return data


class LevConfig(BaseSettings):
    """Runtime configuration for lev.

    Prefix: LEV_ (e.g., LEV_AWS_REGION)
    """

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # AWS settings; None defers to boto3's own resolution (AWS_PROFILE, AWS_REGION, ...)
    aws_region: str | None = Field(default=None)
    aws_profile: str | None = Field(default=None)
    endpoint_url: str | None = Field(
        default=None,
        description="Custom Lambda endpoint, e.g. http://localhost:4566 for LocalStack",
    )

    # Behaviour
    use_revision_id: bool = Field(
        default=True,
        description="Send RevisionId with updates so concurrent changes are rejected",
    )

    # Output / logging
    output_format: OutputFormat = Field(default=OutputFormat.ENV)
    log_level: str = Field(default="WARNING")

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = (value or "").strip().upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"unknown log level: {value}")
        return level

    @classmethod
    def from_file(
        cls,
        config_path: str | os.PathLike[str] | None = None,
        **overrides: Any,
    ) -> LevConfig:
        """Load config from YAML + env vars + explicit overrides.

        Args:
            config_path: Explicit YAML file. Must exist when given. When None,
                `lev.yml` in the working directory is used if present.
            **overrides: Values from CLI flags; None values are ignored.

        Returns:
            Configured LevConfig instance.
        """
        config_data: dict[str, Any] = {}

        if config_path is not None:
            path = Path(config_path).expanduser()
            if not path.is_file():
                raise InvalidArgumentsError(f"config file not found: {path}")
            config_data = _load_yaml_file(path)
        else:
            default_path = Path.cwd() / DEFAULT_CONFIG_FILE
            if default_path.is_file():
                config_data = _load_yaml_file(default_path)

        if config_data:
            logger.debug("Loaded config keys from file: %s", sorted(config_data))

        # Remove keys from config_data if the corresponding env var is set
        # so env vars override the file
        for key in list(config_data):
            if f"{ENV_PREFIX}{str(key).upper()}" in os.environ:
                del config_data[key]

        config_data.update({k: v for k, v in overrides.items() if v is not None})

        # Env variables fill whatever is left (handled by pydantic-settings)
        return cls(**config_data)
