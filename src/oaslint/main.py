"""Main CLI entry point for oaslint."""

import sys

from oaslint.cli import CLIRunner
from oaslint.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI application and exit with its status code."""
    try:
        sys.exit(CLIRunner().run())
    except KeyboardInterrupt:
        logger.info("Cancelled by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
