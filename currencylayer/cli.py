"""
Command-line entrypoint for the currencylayer client.
Usage: currencylayer [-v] {live,historical,convert,timeframe,change,key} ...
"""

import argparse
import logging
import sys
from typing import TextIO

from pydantic import ValidationError

from currencylayer import __version__
from currencylayer.api_clients.currencylayer import CurrencyLayerClient
from currencylayer.commands import COMMANDS, BaseCommand
from currencylayer.key_store import KeyStore
from currencylayer.settings import get_settings

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_NO_API_KEY = 1
EXIT_USAGE = 2


def setup_logging(log_level: str) -> None:
    """
    Set up logging on stderr so that command output on stdout stays clean.
    """
    numeric_level = logging.getLevelNamesMapping().get(
        log_level.upper(), logging.WARNING
    )

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,  # Override any existing configuration
    )


def build_parser(commands: dict[str, BaseCommand]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="currencylayer",
        description=(
            "A command-line tool for fetching and converting live currency data."
        ),
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug output to stderr."
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    subparsers = parser.add_subparsers(dest="command", metavar="command")
    subparsers.required = True
    for name, command in commands.items():
        subparser = subparsers.add_parser(
            name, help=command.help, description=command.help
        )
        command.add_arguments(subparser)
    return parser


def resolve_api_key(key_store: KeyStore, stdout: TextIO) -> str | None:
    """
    Find the API key: environment first, then the key store, then ask the user.

    A key entered interactively is persisted for later invocations.
    """
    settings = get_settings()
    if settings.api_key:
        return settings.api_key

    api_key = key_store.get_api_key()
    if api_key:
        return api_key

    print("No API key found. Please set one now:", file=stdout)
    try:
        api_key = input().strip()
    except EOFError:
        api_key = ""

    if not api_key:
        return None

    try:
        key_store.set_api_key(api_key)
    except OSError as e:
        print(
            f"Could not save API key to {key_store.path}: {e.strerror or e}",
            file=stdout,
        )
        return None

    print("API key has been set successfully.", file=stdout)
    return api_key


def describe_validation_error(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        problems.append(f"{location}: {item['msg']}" if location else item["msg"])
    return "; ".join(problems)


def main(argv: list[str] | None = None, stdout: TextIO | None = None) -> int:
    stdout = stdout or sys.stdout
    commands = {
        name: command_class(stdout=stdout) for name, command_class in COMMANDS.items()
    }

    parser = build_parser(commands)
    options = parser.parse_args(argv)

    settings = get_settings()
    setup_logging("DEBUG" if options.verbose else settings.log_level)

    command = commands[options.command]
    logger.debug(f"Running {command.name}")

    try:
        if not command.requires_api_key:
            command.run(options, None)
            return EXIT_SUCCESS

        api_key = resolve_api_key(KeyStore(), stdout)
        if api_key is None:
            print("Failed to set API key.", file=stdout)
            return EXIT_NO_API_KEY

        with CurrencyLayerClient(api_key=api_key) as client:
            command.run(options, client)
    except ValidationError as e:
        print(
            f"Error: invalid arguments: {describe_validation_error(e)}",
            file=sys.stderr,
        )
        return EXIT_USAGE
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_USAGE
    except OSError as e:
        print(f"Error: could not save API key: {e.strerror or e}", file=sys.stderr)
        return EXIT_NO_API_KEY

    return EXIT_SUCCESS


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        sys.exit(130)
