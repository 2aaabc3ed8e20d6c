"""Shared helpers for rules: runtime kinds, type matching, suggestions."""

import datetime
import difflib
from collections.abc import Iterable, Sequence
from typing import Any

from oaslint.constants import SUGGEST_CUTOFF, SUGGEST_MAX_RESULTS


def oas_type_of(value: Any) -> str:
    """Runtime kind of a parsed value.

    Returns one of "object", "array", "string", "number", "boolean",
    "null".
    """
    if isinstance(value, dict):
        return "object"
    if isinstance(value, list):
        return "array"
    if value is None:
        return "null"
    # bool before number: True is an int in Python
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, (str, datetime.date)):
        return "string"
    return type(value).__name__


def matches_json_schema_type(value: Any, schema_type: str | Sequence[str]) -> bool:
    """Whether ``value`` matches a primitive type name (or any of several)."""
    if not isinstance(schema_type, str):
        return any(matches_json_schema_type(value, t) for t in schema_type)

    if schema_type == "integer":
        if isinstance(value, bool):
            return False
        return isinstance(value, int) or (
            isinstance(value, float) and value.is_integer()
        )
    return oas_type_of(value) == schema_type


def format_type(schema_type: str | Sequence[str]) -> str:
    if isinstance(schema_type, str):
        return schema_type
    return ", ".join(schema_type)


def in_enum(value: Any, options: Iterable[Any]) -> bool:
    """Membership test that keeps booleans apart from numbers."""
    return any(
        option == value
        and isinstance(option, bool) == isinstance(value, bool)
        for option in options
    )


def get_suggest(given: Any, variants: Iterable[Any]) -> list[str]:
    """Closest spellings of ``given`` among ``variants``, best first.

    Matching is case-insensitive (``"GET"`` suggests ``"get"``); candidates
    must reach a difflib ratio of SUGGEST_CUTOFF. Non-string input gives no
    suggestions.
    """
    if not isinstance(given, str):
        return []

    candidates = [str(variant) for variant in variants]
    if not candidates:
        return []

    by_folded: dict[str, str] = {}
    for candidate in candidates:
        by_folded.setdefault(candidate.casefold(), candidate)

    matches = difflib.get_close_matches(
        given.casefold(),
        list(by_folded),
        n=SUGGEST_MAX_RESULTS,
        cutoff=SUGGEST_CUTOFF,
    )
    return [by_folded[match] for match in matches]
