"""Lint entry points: load a document, activate checks, walk it."""

import datetime
from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path
from typing import Any

import orjson
import yaml

from oaslint.config import LintConfig, init_rules
from oaslint.config.rules import RuleSet
from oaslint.constants import (
    INLINE_SOURCE_NAME,
    JSON_EXTENSIONS,
    YAML_EXTENSIONS,
)
from oaslint.exceptions import DocumentError
from oaslint.logger import get_logger
from oaslint.ref_utils import Source
from oaslint.resolve import Document, Resolver
from oaslint.rules import (
    BUILTIN_DECORATORS,
    BUILTIN_PREPROCESSORS,
    BUILTIN_RULES,
)
from oaslint.types import (
    NamedType,
    OasVersion,
    detect_oas_version,
    normalize_types,
)
from oaslint.types.oas2 import Oas2Types
from oaslint.types.oas3 import Oas3Types
from oaslint.walk import Problem, walk_document

logger = get_logger(__name__)

TYPES_BY_VERSION = {
    OasVersion.VERSION2: Oas2Types,
    OasVersion.VERSION3_0: Oas3Types,
}


@lru_cache(maxsize=None)
def get_types(version: OasVersion) -> dict[str, NamedType]:
    """Normalized types for ``version`` (built once per process)."""
    return normalize_types(TYPES_BY_VERSION[version])


def _plain(value: Any, active: frozenset[int] = frozenset()) -> Any:
    """Make YAML output look like JSON: string keys, ISO date strings.

    ``active`` holds the ids of the containers on the current path. Aliases
    may share a node between siblings, but a node may not contain itself.

    Raises:
        DocumentError: If an alias makes a container contain itself

    """
    if isinstance(value, (dict, list)):
        if id(value) in active:
            msg = "Recursive YAML aliases are not supported"
            raise DocumentError(msg)
        active = active | {id(value)}
        if isinstance(value, dict):
            return {str(k): _plain(v, active) for k, v in value.items()}
        return [_plain(item, active) for item in value]
    if isinstance(value, datetime.date):
        return value.isoformat()
    return value


def parse_document(
    body: str, source_name: str = INLINE_SOURCE_NAME, *, is_json: bool = False
) -> Document:
    """Parse document text.

    Raises:
        DocumentError: If the text is not valid JSON/YAML

    """
    try:
        if is_json:
            parsed = orjson.loads(body)
        else:
            parsed = _plain(yaml.safe_load(body))
    except (orjson.JSONDecodeError, yaml.YAMLError) as e:
        msg = f"Failed to parse document: {e}"
        raise DocumentError(msg, target=source_name) from e
    except DocumentError as e:
        raise DocumentError(e.message, target=source_name) from e
    return Document(Source(source_name, body), parsed)


def load_document(path: Path) -> Document:
    """Load a JSON or YAML description document from disk.

    The format is picked by extension: JSON_EXTENSIONS or YAML_EXTENSIONS.

    Raises:
        DocumentError: If the extension is unknown or the file can't be
            read or parsed

    """
    suffix = path.suffix.lower()
    if suffix not in (*JSON_EXTENSIONS, *YAML_EXTENSIONS):
        msg = (
            f"Unsupported file extension '{path.suffix}', expected one of: "
            f"{', '.join((*JSON_EXTENSIONS, *YAML_EXTENSIONS))}"
        )
        raise DocumentError(msg, target=str(path))

    try:
        body = path.read_text(encoding="utf-8")
    except OSError as e:
        msg = f"Can't read file: {e}"
        raise DocumentError(msg, target=str(path)) from e

    return parse_document(
        body,
        str(path),
        is_json=suffix in JSON_EXTENSIONS,
    )


def lint_document(
    document: Document,
    config: LintConfig | None = None,
    *,
    extra_rules: Sequence[RuleSet] = (),
) -> list[Problem]:
    """Lint a parsed document.

    Checks run in activation order: preprocessors, rules, then decorators.

    Args:
        document: Parsed document
        config: Rule settings (recommended preset when None)
        extra_rules: Additional rule collections, activated after the
            built-in rules and before decorators

    Returns:
        Problems in traversal order

    Raises:
        DocumentError: If the document's version is unsupported
        ConfigurationError: If a rule rejects its options

    """
    config = config or LintConfig()
    version = detect_oas_version(document.parsed)
    types = get_types(version)

    checks = [
        *init_rules(
            [BUILTIN_PREPROCESSORS[version]], config, "preprocessors", version
        ),
        *init_rules(
            [BUILTIN_RULES[version], *extra_rules], config, "rules", version
        ),
        *init_rules(
            [BUILTIN_DECORATORS[version]], config, "decorators", version
        ),
    ]

    logger.info(
        "Linting %s (%s)", document.source.absolute_ref, version.value
    )
    return walk_document(document, types["Root"], checks, Resolver(document))
