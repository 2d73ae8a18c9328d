"""Command resolver for CLI input.

Turns a subcommand, a function name and positional arguments into a typed
operation. No network access happens here.
"""

from __future__ import annotations

from collections.abc import Sequence

from lev.enums import CommandType
from lev.errors import InvalidArgumentsError
from lev.models.operations import Get, Operation, Set, Unset


def parse_assignment(token: str) -> tuple[str, str]:
    """Split a `KEY=value` token on the first `=`.

    The value may be empty and may itself contain `=`.

    Raises:
        InvalidArgumentsError: If there is no `=` or the key is empty.
    """
    key, sep, value = token.partition("=")
    if not sep:
        raise InvalidArgumentsError(f"invalid KEY=value: no `=` found in `{token}`")
    if not key:
        raise InvalidArgumentsError(f"invalid KEY=value: empty key in `{token}`")
    return key, value


class CommandResolver:
    """Resolves CLI input into Get/Set/Unset operations.

    Supports the following commands:
    - get: show the function's variables
    - set KEY=value [KEY=value ...]: insert or overwrite variables
    - set KEY VALUE: insert or overwrite a single variable
    - unset KEY [KEY ...]: remove variables (absent keys are fine)
    """

    HELP_TEXT = """Available commands:
- get -f FUNCTION: Show the function's environment variables
- set -f FUNCTION KEY=value [KEY=value ...]: Set one or more variables
- set -f FUNCTION KEY VALUE: Set a single variable
- unset -f FUNCTION KEY [KEY ...]: Remove one or more variables"""

    def resolve(
        self,
        subcommand: str,
        function: str | None,
        args: Sequence[str] = (),
    ) -> Operation:
        """Resolve user input into an operation.

        Args:
            subcommand: One of get, set, unset (case-insensitive).
            function: Target function name or ARN.
            args: Remaining positional arguments.

        Returns:
            The operation to apply.

        Raises:
            InvalidArgumentsError: If the subcommand is unknown or a required
                argument is missing or empty.
        """
        try:
            command = CommandType((subcommand or "").strip().lower())
        except ValueError:
            raise InvalidArgumentsError(f"unknown command: {subcommand!r}") from None

        function = (function or "").strip()
        if not function:
            raise InvalidArgumentsError("a function name is required")

        args = list(args)

        if command is CommandType.GET:
            if args:
                raise InvalidArgumentsError(f"get takes no arguments, got: {' '.join(args)}")
            return Get(function)

        if command is CommandType.SET:
            return Set(function, self._resolve_assignments(args))

        if not args:
            raise InvalidArgumentsError("unset requires at least one key")
        if any(not key for key in args):
            raise InvalidArgumentsError("keys must not be empty")
        return Unset(function, tuple(args))

    def _resolve_assignments(self, args: list[str]) -> tuple[tuple[str, str], ...]:
        if not args:
            raise InvalidArgumentsError("set requires at least one KEY=value")

        # Two-token form: `set KEY VALUE`
        if len(args) == 2 and "=" not in args[0]:
            key, value = args
            if not key:
                raise InvalidArgumentsError("keys must not be empty")
            return ((key, value),)

        return tuple(parse_assignment(token) for token in args)

    def get_help_text(self) -> str:
        return self.HELP_TEXT
