"""Typed operations produced by the command resolver.

Each operation names the target function and is immutable once built.
"""

from __future__ import annotations

from dataclasses import dataclass

from lev.enums import CommandType


@dataclass(frozen=True)
class Get:
    """Read the function's environment map without writing."""

    function: str

    @property
    def command_type(self) -> CommandType:
        return CommandType.GET


@dataclass(frozen=True)
class Set:
    """Insert or overwrite one or more variables.

    Attributes:
        function: Target function name or ARN.
        variables: Ordered (key, value) pairs; a later pair for the same key wins.
    """

    function: str
    variables: tuple[tuple[str, str], ...]

    @classmethod
    def single(cls, function: str, key: str, value: str) -> Set:
        return cls(function, ((key, value),))

    @property
    def command_type(self) -> CommandType:
        return CommandType.SET

    @property
    def key(self) -> str:
        return self.variables[0][0]

    @property
    def value(self) -> str:
        return self.variables[0][1]


@dataclass(frozen=True)
class Unset:
    """Remove one or more variables; absent keys are ignored."""

    function: str
    keys: tuple[str, ...]

    @classmethod
    def single(cls, function: str, key: str) -> Unset:
        return cls(function, (key,))

    @property
    def command_type(self) -> CommandType:
        return CommandType.UNSET

    @property
    def key(self) -> str:
        return self.keys[0]


Operation = Get | Set | Unset
