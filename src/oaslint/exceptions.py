"""Exception classes for oaslint operations.

Document violations are never raised; they are collected as problems.
The exceptions below abort a run instead.
"""


class OaslintError(Exception):
    """Base exception for oaslint operations."""

    error_prefix: str = "Lint failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional name of the rule, type or file that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class ConfigurationError(OaslintError):
    """Raised when rule settings or options are invalid."""

    error_prefix = "Invalid configuration"


class SchemaDefinitionError(OaslintError):
    """Raised when a type definition has the wrong shape."""

    error_prefix = "Invalid type definition"


class ResolveError(OaslintError):
    """Raised (or carried) when a reference pointer cannot be resolved."""

    error_prefix = "Can't resolve $ref"


class DocumentError(OaslintError):
    """Raised when a document cannot be loaded or is not supported."""

    error_prefix = "Invalid document"
