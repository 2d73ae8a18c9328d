"""Business logic services package."""

from .command_resolver import CommandResolver, parse_assignment
from .env_service import EnvService, apply, compute_env, current_env

__all__ = [
    "CommandResolver",
    "EnvService",
    "apply",
    "compute_env",
    "current_env",
    "parse_assignment",
]
