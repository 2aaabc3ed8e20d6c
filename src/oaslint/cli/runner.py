"""CLI runner for oaslint.

Routes parsed arguments to the command handlers and turns their outcome
into a process exit code.
"""

from argparse import Namespace
from collections.abc import Callable, Sequence
from pathlib import Path

from oaslint import __version__
from oaslint.config import LintConfig, load_config
from oaslint.constants import CONFIG_FILE_NAME, SEVERITY_ERROR
from oaslint.exceptions import ConfigurationError, DocumentError
from oaslint.format import format_problems
from oaslint.lint import lint_document, load_document
from oaslint.logger import get_logger, update_logger_levels
from oaslint.walk import Problem

from .parser import CLIParser

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_PROBLEMS = 1
EXIT_USAGE = 2


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(self) -> None:
        """Initialize CLI runner and its command handlers."""
        self.parser = CLIParser()
        self.command_handlers: dict[str, Callable[[Namespace], int]] = {
            "lint": self._lint,
        }

    def run(self, argv: Sequence[str] | None = None) -> int:
        """Parse arguments and run the selected command.

        Returns:
            Process exit code

        """
        args = self.parser.parse_args(argv)

        if args.version:
            print(__version__)
            return EXIT_OK

        handler = self.command_handlers.get(args.command or "")
        if handler is None:
            self.parser.create_parser().print_help()
            return EXIT_USAGE

        return handler(args)

    @staticmethod
    def _config_path(args: Namespace) -> Path | None:
        if args.config:
            return Path(args.config)
        default = Path.cwd() / CONFIG_FILE_NAME
        return default if default.is_file() else None

    def _load_config(self, args: Namespace) -> LintConfig:
        config = load_config(self._config_path(args))
        update_logger_levels(config.console_log_level, config.log_level)
        if args.verbose:
            update_logger_levels("DEBUG")
        return config

    def _lint(self, args: Namespace) -> int:
        try:
            config = self._load_config(args)
        except ConfigurationError as e:
            logger.error("%s", e)  # noqa: TRY400
            return EXIT_USAGE

        exit_code = EXIT_OK
        linted = 0
        problems: list[Problem] = []
        for file_name in args.files:
            try:
                document = load_document(Path(file_name))
                problems.extend(lint_document(document, config))
                linted += 1
            except DocumentError as e:
                logger.error("%s", e)  # noqa: TRY400
                exit_code = EXIT_PROBLEMS
            except ConfigurationError as e:
                logger.error("%s", e)  # noqa: TRY400
                return EXIT_USAGE

        if not linted:
            return exit_code

        shown = problems[: max(args.max_problems, 0)]
        print(format_problems(shown, args.format))
        if len(shown) < len(problems):
            logger.warning(
                "%d more problems not shown (use --max-problems)",
                len(problems) - len(shown),
            )

        if any(problem.severity == SEVERITY_ERROR for problem in problems):
            exit_code = EXIT_PROBLEMS
        return exit_code
