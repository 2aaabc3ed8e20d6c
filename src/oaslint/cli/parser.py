"""CLI argument parser for oaslint."""

import argparse
from argparse import Namespace
from collections.abc import Sequence

from oaslint.constants import (
    DEFAULT_MAX_PROBLEMS,
    DEFAULT_OUTPUT_FORMAT,
    OUTPUT_FORMATS,
)


class CLIParser:
    """Command-line argument parser for oaslint."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments without the program name; sys.argv when None

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self.create_parser()
        return parser.parse_args(argv)

    def create_parser(self) -> argparse.ArgumentParser:
        """Create the main parser with global options and subcommands."""
        parser = argparse.ArgumentParser(
            prog="oaslint",
            description="Structural linter for OpenAPI description documents",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  %(prog)s lint openapi.yaml
  %(prog)s lint swagger.json --format json
  %(prog)s lint openapi.yaml --config ./oaslint.conf --max-problems 20
            """,
        )
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show version information and exit",
        )
        self._add_subcommands(parser)
        return parser

    def _add_subcommands(self, parser: argparse.ArgumentParser) -> None:
        subparsers = parser.add_subparsers(
            dest="command", help="Available commands"
        )
        self._add_lint_command(subparsers)

    def _add_lint_command(self, subparsers) -> None:
        lint_parser = subparsers.add_parser(
            "lint",
            help="Lint OpenAPI description documents",
        )
        lint_parser.add_argument(
            "files",
            nargs="+",
            help="JSON or YAML documents to lint",
        )
        lint_parser.add_argument(
            "--config",
            help="Path to an oaslint.conf file "
            "(default: ./oaslint.conf when present)",
        )
        lint_parser.add_argument(
            "--format",
            choices=OUTPUT_FORMATS,
            default=DEFAULT_OUTPUT_FORMAT,
            help="Output format (default: %(default)s)",
        )
        lint_parser.add_argument(
            "--max-problems",
            type=int,
            default=DEFAULT_MAX_PROBLEMS,
            help="Show at most this many problems (default: %(default)s)",
        )
        lint_parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Show debug logging on the console",
        )
