"""Command-line interface for oaslint."""

from oaslint.cli.parser import CLIParser
from oaslint.cli.runner import CLIRunner

__all__ = ["CLIParser", "CLIRunner"]
