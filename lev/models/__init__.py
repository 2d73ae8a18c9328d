"""Pydantic payload models and operation types."""

from .base import LambdaModel
from .domain import EnvMap, Environment, EnvironmentErrorInfo, FunctionConfiguration
from .operations import Get, Operation, Set, Unset

__all__ = [
    "EnvMap",
    "Environment",
    "EnvironmentErrorInfo",
    "FunctionConfiguration",
    "Get",
    "LambdaModel",
    "Operation",
    "Set",
    "Unset",
]
