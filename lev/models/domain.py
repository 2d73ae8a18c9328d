"""Pydantic domain models for Lambda function configuration.

`FunctionConfiguration` is an immutable snapshot of what
`get_function_configuration` returned. The environment map is the only
field lev ever changes; `with_env_map` is the single way to derive a new
snapshot from a fetched one.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lev.models.base import LambdaModel

EnvMap = dict[str, str]


class EnvironmentErrorInfo(LambdaModel):
    """Error Lambda reports when it cannot decrypt a function's variables."""

    error_code: str | None = None
    message: str | None = None


class Environment(LambdaModel):
    """The `Environment` block of a function configuration.

    Lambda omits `Variables` (or the whole block) for functions that never
    had variables set.
    """

    variables: dict[str, str] | None = None
    error: EnvironmentErrorInfo | None = None


class FunctionConfiguration(LambdaModel):
    """Function configuration as returned by the Lambda API.

    Only the fields lev reads are declared; everything else the API returned
    (memory size, timeout, layers, ...) rides along as model extras.
    """

    function_name: str | None = None
    function_arn: str | None = None
    revision_id: str | None = None
    environment: Environment | None = None

    @classmethod
    def from_response(cls, response: Mapping[str, Any]) -> FunctionConfiguration:
        """Build a snapshot from a raw boto3 response, dropping ResponseMetadata."""
        payload = {k: v for k, v in response.items() if k != "ResponseMetadata"}
        return cls.model_validate(payload)

    @property
    def environment_error(self) -> EnvironmentErrorInfo | None:
        if self.environment is None:
            return None
        return self.environment.error

    def env_map(self) -> EnvMap:
        """Return the environment map, treating an absent one as empty."""
        if self.environment is None or self.environment.variables is None:
            return {}
        return dict(self.environment.variables)

    def with_env_map(self, env: Mapping[str, str]) -> FunctionConfiguration:
        """Return a copy of this snapshot whose environment map is `env`.

        Every other field, declared or extra, is carried over unchanged.
        """
        environment = self.environment or Environment()
        environment = environment.model_copy(update={"variables": dict(env), "error": None})
        return self.model_copy(update={"environment": environment})
