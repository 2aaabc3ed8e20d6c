"""Centralized constants module for oaslint.

This module serves as the single source of truth for all shared constants
across the oaslint codebase. Constants are organized by logical categories
and use typing.Final annotations to ensure immutability.

Usage:
    from oaslint.constants import EXTENSION_PREFIX
"""

from typing import Final, Literal

# =============================================================================
# Document Constants
# =============================================================================

# Properties starting with this prefix are vendor extensions and never
# reported as unexpected
EXTENSION_PREFIX: Final[str] = "x-"

# Member name that turns an object into a reference pointer
REF_KEY: Final[str] = "$ref"

# Pointer of the document root
ROOT_POINTER: Final[str] = "#/"

# Source name used when linting an in-memory document
INLINE_SOURCE_NAME: Final[str] = "<input>"

# Extensions accepted by the document loader
JSON_EXTENSIONS: Final[tuple[str, ...]] = (".json",)
YAML_EXTENSIONS: Final[tuple[str, ...]] = (".yaml", ".yml")

# =============================================================================
# Rule Severity Constants
# =============================================================================

Severity = Literal["off", "warn", "error"]
CheckKind = Literal["rules", "preprocessors", "decorators"]

SEVERITY_OFF: Final[str] = "off"
SEVERITY_WARN: Final[str] = "warn"
SEVERITY_ERROR: Final[str] = "error"
SEVERITIES: Final[tuple[str, ...]] = (
    SEVERITY_OFF,
    SEVERITY_WARN,
    SEVERITY_ERROR,
)

CHECK_KINDS: Final[tuple[str, ...]] = ("rules", "preprocessors", "decorators")

# Severity used for an object setting that omits "severity"
DEFAULT_OBJECT_SEVERITY: Final[str] = SEVERITY_ERROR

# Built-in rule ids
RULE_STRUCT: Final[str] = "struct"
RULE_NO_UNRESOLVED_REFS: Final[str] = "no-unresolved-refs"

# Settings applied when a config extends the recommended preset
RECOMMENDED_RULES: Final[dict[str, str]] = {
    RULE_STRUCT: SEVERITY_ERROR,
    RULE_NO_UNRESOLVED_REFS: SEVERITY_ERROR,
    "info-contact": SEVERITY_WARN,
    "info-license": SEVERITY_WARN,
    "operation-operationId": SEVERITY_WARN,
    "operation-summary": SEVERITY_ERROR,
    "tag-description": SEVERITY_WARN,
    "no-empty-servers": SEVERITY_ERROR,
}

# =============================================================================
# Suggestion Constants
# =============================================================================

# difflib ratio a candidate must reach to be suggested
SUGGEST_CUTOFF: Final[float] = 0.6

# Upper bound on suggestions attached to one problem
SUGGEST_MAX_RESULTS: Final[int] = 5

# =============================================================================
# Configuration Constants
# =============================================================================

CONFIG_FILE_NAME: Final[str] = "oaslint.conf"

SECTION_LINT: Final[str] = "lint"

KEY_LOG_LEVEL: Final[str] = "log_level"
KEY_CONSOLE_LOG_LEVEL: Final[str] = "console_log_level"

# Separator between version and namespace in section names (oas3_0.rules)
VERSION_SECTION_SEPARATOR: Final[str] = "."

DEFAULT_LOG_LEVEL: Final[str] = "INFO"
DEFAULT_CONSOLE_LOG_LEVEL: Final[str] = "WARNING"

# =============================================================================
# Output Constants
# =============================================================================

OUTPUT_FORMATS: Final[tuple[str, ...]] = ("stylish", "json")
DEFAULT_OUTPUT_FORMAT: Final[str] = "stylish"
DEFAULT_MAX_PROBLEMS: Final[int] = 100

# =============================================================================
# Logging Constants
# =============================================================================

# Maximum size for rotated log files (bytes)
LOG_ROTATION_THRESHOLD_BYTES: Final[int] = 1024 * 1024  # 1 MB

# Number of backup files to keep for rotated logs
LOG_BACKUP_COUNT: Final[int] = 3

LOG_FILE_NAME: Final[str] = "oaslint.log"

# Environment overrides for the logger
ENV_LOG_LEVEL: Final[str] = "OASLINT_LOG_LEVEL"
ENV_LOG_DIR: Final[str] = "OASLINT_LOG_DIR"

# Console and file format strings used by the logger
LOG_CONSOLE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
LOG_CONSOLE_DATE_FORMAT: Final[str] = "%H:%M:%S"
LOG_FILE_FORMAT: Final[str] = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "%(funcName)s:%(lineno)d - %(message)s"
)
LOG_FILE_DATE_FORMAT: Final[str] = "%Y-%m-%d %H:%M:%S"

# Color mapping for console output levels
LOG_COLORS: Final[dict[str, str]] = {
    "DEBUG": "\033[36m",  # Cyan
    "INFO": "\033[32m",  # Green
    "WARNING": "\033[33m",  # Yellow
    "ERROR": "\033[31m",  # Red
    "CRITICAL": "\033[35m",  # Magenta
    "RESET": "\033[0m",
}
