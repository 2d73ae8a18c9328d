"""Read-modify-write engine for a function's environment variables.

Lambda only exposes the environment as part of the whole function
configuration, so every change is:

1. fetch the current configuration
2. compute the new map locally
3. write the complete map back

The new configuration is always derived from the fetched snapshot, never
built from scratch, so no unrelated variable or setting is dropped.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING

from lev.gateway.error_classifier import classify_environment_error
from lev.models.domain import EnvMap, FunctionConfiguration
from lev.models.operations import Get, Operation, Set, Unset
from lev.observability.redaction import describe_keys, redact_env

if TYPE_CHECKING:
    from lev.gateway.lambda_gateway import PlatformGateway

logger = logging.getLogger(__name__)


def current_env(configuration: FunctionConfiguration) -> EnvMap:
    """Extract the environment map from a fetched configuration.

    An absent map is an empty map. A map Lambda could not decrypt is an
    error: treating it as empty and writing it back would wipe the real
    variables.
    """
    error = configuration.environment_error
    if error is not None:
        raise classify_environment_error(error.error_code, error.message)
    return configuration.env_map()


def compute_env(operation: Operation, current: Mapping[str, str]) -> EnvMap:
    """Return the map that results from applying `operation` to `current`.

    Pure function; `current` is not modified.
    """
    env = dict(current)

    if isinstance(operation, Set):
        for key, value in operation.variables:
            env[key] = value
    elif isinstance(operation, Unset):
        for key in operation.keys:
            env.pop(key, None)

    return env


def apply(operation: Operation, gateway: PlatformGateway) -> EnvMap:
    """Apply `operation` to the function it names and return the resulting map.

    Performs exactly one fetch and, for Set/Unset, exactly one update. Errors
    from the gateway propagate unchanged.

    Returns:
        For Get, the fetched map. For Set/Unset, the map reported back by the
        update call, which is what Lambda actually stored.
    """
    function = operation.function
    fetched = gateway.fetch(function)
    env = current_env(fetched)
    logger.info("Fetched %d variable(s) for function=%s", len(env), function)

    if isinstance(operation, Get):
        return env

    desired = compute_env(operation, env)
    added = desired.keys() - env.keys()
    removed = env.keys() - desired.keys()
    changed = {k for k in desired.keys() & env.keys() if desired[k] != env[k]}
    logger.info(
        "Updating function=%s: added=[%s] removed=[%s] changed=[%s]",
        function,
        describe_keys(added),
        describe_keys(removed),
        describe_keys(changed),
    )
    logger.debug("Desired environment for function=%s: %s", function, redact_env(desired))

    updated = gateway.update(function, fetched.with_env_map(desired))
    result = current_env(updated)
    logger.info("Updated function=%s, %d variable(s) stored", function, len(result))
    return result


class EnvService:
    """Binds the read-modify-write engine to a gateway."""

    def __init__(self, gateway: PlatformGateway) -> None:
        self.gateway = gateway

    def apply(self, operation: Operation) -> EnvMap:
        return apply(operation, self.gateway)
