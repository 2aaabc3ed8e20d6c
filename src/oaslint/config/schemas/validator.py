"""JSON Schema validation for oaslint configuration files."""

from pathlib import Path
from typing import Any

import orjson
from jsonschema import Draft7Validator, ValidationError
from jsonschema.exceptions import best_match

from oaslint.exceptions import ConfigurationError
from oaslint.logger import get_logger

logger = get_logger(__name__)

SCHEMA_DIR = Path(__file__).parent
LINT_CONFIG_SCHEMA_PATH = SCHEMA_DIR / "lint_config.schema.json"


class ConfigValidator:
    """Validates parsed configuration against the bundled JSON schema."""

    def __init__(self) -> None:
        """Initialize validator with the loaded schema."""
        self._lint_config_validator = Draft7Validator(
            self._load_schema(LINT_CONFIG_SCHEMA_PATH)
        )

    @staticmethod
    def _load_schema(schema_path: Path) -> dict[str, Any]:
        """Load JSON schema from file.

        Raises:
            FileNotFoundError: If schema file doesn't exist
            ValueError: If schema JSON is invalid

        """
        if not schema_path.exists():
            msg = f"Schema file not found: {schema_path}"
            raise FileNotFoundError(msg)

        try:
            with schema_path.open("rb") as f:
                return orjson.loads(f.read())  # type: ignore[no-any-return]
        except orjson.JSONDecodeError as e:
            msg = f"Invalid JSON in schema file {schema_path}: {e}"
            raise ValueError(msg) from e

    @staticmethod
    def _format_validation_error(error: ValidationError) -> str:
        """Format validation error into a user-friendly message.

        Args:
            error: Validation error from jsonschema

        Returns:
            Formatted error message with the section/key path

        """
        path = (
            ".".join(str(p) for p in error.absolute_path)
            if error.absolute_path
            else "root"
        )

        message = error.message
        if error.validator == "additionalProperties":
            message = f"Unknown section or key. {error.message}"
        elif error.validator in ("enum", "oneOf"):
            message = f"Invalid value {error.instance!r}"

        return f"{message} (at '{path}')"

    def validate_lint_config(
        self, data: dict[str, Any], source: str | None = None
    ) -> None:
        """Validate a parsed configuration mapping.

        Args:
            data: Section name -> key -> parsed value
            source: Optional file name for better error messages

        Raises:
            ConfigurationError: If validation fails

        """
        errors = list(self._lint_config_validator.iter_errors(data))
        if errors:
            raise ConfigurationError(
                self._format_validation_error(best_match(errors)),
                target=source,
            )

        logger.debug("Config validation passed: %s", source or "<inline>")


_validator: ConfigValidator | None = None


def get_validator() -> ConfigValidator:
    """Get or create the shared validator instance."""
    global _validator  # noqa: PLW0603
    if _validator is None:
        _validator = ConfigValidator()
    return _validator


def validate_lint_config(
    data: dict[str, Any], source: str | None = None
) -> None:
    """Validate a parsed configuration mapping (convenience function)."""
    get_validator().validate_lint_config(data, source)
