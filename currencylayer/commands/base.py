import argparse
import logging
import sys
from collections.abc import Iterable
from typing import TextIO

from currencylayer.api_clients import APIClientError
from currencylayer.api_clients.currencylayer import CurrencyLayerClient

logger = logging.getLogger(__name__)


class BaseCommand:
    """
    A subcommand of the currencylayer CLI.

    Subclasses set ``name`` and ``help``, declare their arguments in
    ``add_arguments`` and do their work in ``handle``.
    """

    name: str = ""
    help: str = ""
    requires_api_key: bool = True

    def __init__(self, stdout: TextIO | None = None):
        self.stdout = stdout or sys.stdout

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        pass

    def write(self, lines: str | Iterable[str]) -> None:
        if isinstance(lines, str):
            lines = [lines]
        for line in lines:
            print(line, file=self.stdout)

    def handle(self, options: argparse.Namespace, client: CurrencyLayerClient | None):
        raise NotImplementedError

    def run(
        self, options: argparse.Namespace, client: CurrencyLayerClient | None
    ) -> None:
        """Run the command, reporting API failures as an error line."""
        try:
            self.handle(options, client)
        except APIClientError as e:
            logger.debug(f"{self.name} failed with {type(e).__name__}")
            self.write(f"Error: {e.message}")


def add_rate_filter_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-s",
        "--source",
        help="Source currency other than the default USD. "
        "Supported on the Basic Plan and higher.",
    )
    parser.add_argument(
        "-c",
        "--currencies",
        help="Comma-separated list of currency codes to limit the response to.",
    )
