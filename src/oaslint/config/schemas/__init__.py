"""JSON Schema validation of parsed oaslint configuration files.

Usage:
    from oaslint.config.schemas import validate_lint_config

    validate_lint_config(data, source="oaslint.conf")  # ConfigurationError
"""

from oaslint.config.schemas.validator import (
    ConfigValidator,
    validate_lint_config,
)

__all__ = [
    "ConfigValidator",
    "validate_lint_config",
]
