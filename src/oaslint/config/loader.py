"""INI configuration loading for oaslint.

Example ``oaslint.conf``::

    [lint]
    extends = recommended
    console_log_level = WARNING

    [rules]
    info-license = off
    operation-summary = {"severity": "warn"}

    [oas2.rules]
    operation-operationId = error

Values are a bare severity or a JSON object whose non-``severity`` keys
are passed to the rule as options.
"""

import configparser
from pathlib import Path
from typing import Any

import orjson

from oaslint.config.config import LintConfig
from oaslint.config.schemas import validate_lint_config
from oaslint.constants import (
    CHECK_KINDS,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    KEY_CONSOLE_LOG_LEVEL,
    KEY_LOG_LEVEL,
    SECTION_LINT,
    VERSION_SECTION_SEPARATOR,
)
from oaslint.exceptions import ConfigurationError
from oaslint.logger import get_logger

logger = get_logger(__name__)


def _parse_value(value: str, where: str) -> Any:
    """Parse one INI value: JSON object or bare word."""
    value = value.strip()
    if not value.startswith("{"):
        return value
    try:
        return orjson.loads(value)
    except orjson.JSONDecodeError as e:
        msg = f"Invalid JSON object: {e}"
        raise ConfigurationError(msg, target=where) from e


class ConfigLoader:
    """Reads ``oaslint.conf`` files into ``LintConfig`` objects."""

    @staticmethod
    def _create_parser() -> configparser.ConfigParser:
        parser = configparser.ConfigParser(
            inline_comment_prefixes=("#", ";"),
            interpolation=None,
        )
        # Rule ids are case sensitive (operation-operationId)
        parser.optionxform = str  # type: ignore[assignment,method-assign]
        return parser

    def read(self, path: Path) -> dict[str, dict[str, Any]]:
        """Read and validate a config file into plain sections.

        Raises:
            ConfigurationError: If the file can't be read or is invalid

        """
        parser = self._create_parser()
        try:
            with path.open(encoding="utf-8") as f:
                parser.read_file(f)
        except OSError as e:
            msg = f"Can't read config file: {e}"
            raise ConfigurationError(msg, target=str(path)) from e
        except configparser.Error as e:
            msg = f"Malformed config file: {e}"
            raise ConfigurationError(msg, target=str(path)) from e

        data: dict[str, dict[str, Any]] = {}
        for section in parser.sections():
            data[section] = {
                key: _parse_value(value, f"{section}.{key}")
                for key, value in parser.items(section)
            }

        validate_lint_config(data, source=str(path))
        return data

    @staticmethod
    def from_sections(sections: dict[str, dict[str, Any]]) -> LintConfig:
        """Build a LintConfig from validated sections."""
        lint = sections.get(SECTION_LINT, {})

        versions: dict[str, dict[str, dict[str, Any]]] = {}
        for name, values in sections.items():
            version, sep, kind = name.partition(VERSION_SECTION_SEPARATOR)
            if sep and kind in CHECK_KINDS:
                versions.setdefault(version, {})[kind] = values

        return LintConfig(
            rules=sections.get("rules"),
            preprocessors=sections.get("preprocessors"),
            decorators=sections.get("decorators"),
            versions=versions,
            extends_recommended=lint.get("extends", "recommended")
            == "recommended",
            log_level=lint.get(KEY_LOG_LEVEL, DEFAULT_LOG_LEVEL),
            console_log_level=lint.get(
                KEY_CONSOLE_LOG_LEVEL, DEFAULT_CONSOLE_LOG_LEVEL
            ),
        )

    def load(self, path: Path) -> LintConfig:
        """Load a config file.

        Args:
            path: Path to an INI config file

        Returns:
            Parsed configuration

        Raises:
            ConfigurationError: If the file is unreadable or invalid

        """
        config = self.from_sections(self.read(path))
        logger.debug("Loaded config from %s", path)
        return config


def load_config(path: Path | None = None) -> LintConfig:
    """Load ``path``, or return the default (recommended) configuration."""
    if path is None:
        return LintConfig()
    return ConfigLoader().load(path)
