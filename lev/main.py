"""Command line entry point.

Wires configuration, logging, the Lambda gateway and the env service
together, prints the resulting environment map and maps errors to exit codes.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Callable, Sequence
from typing import Any

from pydantic import ValidationError

from lev import __version__
from lev.config import LevConfig
from lev.enums import CommandType, OutputFormat
from lev.errors import InvalidArgumentsError, LevError
from lev.formatting import format_env
from lev.gateway.lambda_gateway import LambdaGateway, create_lambda_client
from lev.observability.redaction import redact_text
from lev.services.command_resolver import CommandResolver
from lev.services.env_service import EnvService

logger = logging.getLogger(__name__)

EXIT_INTERRUPTED = 130

# Noisy third-party loggers held at WARNING unless -vv
_QUIET_LOGGERS = ("botocore", "boto3", "urllib3")


def setup_logging(level: str | int) -> None:
    """Configure root logging on stderr; stdout is reserved for the env map."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    quiet_level = logging.DEBUG if logging.getLogger().level <= logging.DEBUG else logging.WARNING
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(quiet_level)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lev",
        description="AWS Lambda env manager",
        epilog=CommandResolver().get_help_text(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--region", dest="aws_region", help="AWS region")
    parser.add_argument("--profile", dest="aws_profile", help="AWS named profile")
    parser.add_argument("--endpoint-url", help="Custom Lambda endpoint (e.g. LocalStack)")
    parser.add_argument(
        "--output",
        dest="output_format",
        choices=[f.value for f in OutputFormat],
        help="Output format (default: env)",
    )
    parser.add_argument("--config", dest="config_path", help="Path to a YAML config file")
    parser.add_argument(
        "--no-revision-check",
        dest="use_revision_id",
        action="store_false",
        default=None,
        help="Do not send RevisionId with updates (skips lost-update detection)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v info, -vv debug)",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    def add_command(name: CommandType, help_text: str, args_help: str | None) -> None:
        sub = subparsers.add_parser(name.value, help=help_text, description=help_text)
        sub.add_argument("-f", "--function", help="Function name or ARN")
        if args_help:
            sub.add_argument("args", nargs="*", metavar=args_help)

    add_command(CommandType.GET, "Gets a function's current env", None)
    add_command(CommandType.SET, "Sets a function's env vars", "KEY=value")
    add_command(CommandType.UNSET, "Unsets a function's env vars", "KEY")

    return parser


def _log_level(config: LevConfig, verbose: int) -> str:
    if verbose >= 2:
        return "DEBUG"
    if verbose == 1:
        return "INFO"
    return config.log_level


def _report_error(error: LevError) -> None:
    print(f"lev: {error.kind.value}: {redact_text(str(error))}", file=sys.stderr)


def run(
    args: argparse.Namespace,
    *,
    client_factory: Callable[[LevConfig], Any] | None = None,
) -> int:
    """Execute a parsed command line and return the process exit code."""
    client_factory = client_factory or create_lambda_client
    try:
        config = LevConfig.from_file(
            args.config_path,
            aws_region=args.aws_region,
            aws_profile=args.aws_profile,
            endpoint_url=args.endpoint_url,
            output_format=args.output_format,
            use_revision_id=args.use_revision_id,
        )
    except ValidationError as e:
        _report_error(InvalidArgumentsError(f"invalid configuration: {e}"))
        return InvalidArgumentsError.exit_code
    except LevError as e:
        _report_error(e)
        return e.exit_code

    setup_logging(_log_level(config, args.verbose))

    try:
        operation = CommandResolver().resolve(
            args.command, args.function, getattr(args, "args", [])
        )
        gateway = LambdaGateway(client_factory(config), use_revision_id=config.use_revision_id)
        env = EnvService(gateway).apply(operation)
    except LevError as e:
        logger.debug("Command failed", exc_info=True)
        _report_error(e)
        return e.exit_code

    output = format_env(env, config.output_format)
    if output:
        print(output)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the `lev` command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return run(args)
    except KeyboardInterrupt:
        print("lev: interrupted", file=sys.stderr)
        return EXIT_INTERRUPTED
    except Exception as e:
        logger.exception("Unexpected error: %s", e)
        print(f"lev: unknown: {redact_text(str(e))}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
