"""Tests for rule helper functions."""

import datetime

import pytest

from oaslint.rules.utils import (
    format_type,
    get_suggest,
    in_enum,
    matches_json_schema_type,
    oas_type_of,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ({}, "object"),
        ([], "array"),
        (None, "null"),
        (True, "boolean"),
        (0, "number"),
        (1.5, "number"),
        ("x", "string"),
        (datetime.date(2024, 1, 2), "string"),
    ],
)
def test_oas_type_of(value, expected):
    assert oas_type_of(value) == expected


class TestMatchesJsonSchemaType:
    def test_single_type(self):
        assert matches_json_schema_type("a", "string")
        assert not matches_json_schema_type(1, "string")

    def test_any_of_several(self):
        assert matches_json_schema_type(1, ["string", "number"])
        assert not matches_json_schema_type(None, ["string", "number"])

    def test_integer(self):
        assert matches_json_schema_type(2, "integer")
        assert matches_json_schema_type(2.0, "integer")
        assert not matches_json_schema_type(2.5, "integer")
        assert not matches_json_schema_type(False, "integer")

    def test_boolean_is_not_number(self):
        assert not matches_json_schema_type(True, "number")


def test_format_type():
    assert format_type("string") == "string"
    assert format_type(["string", "boolean"]) == "string, boolean"


def test_in_enum_separates_booleans_and_numbers():
    assert in_enum(1, [1, 2])
    assert not in_enum(True, [1, 2])
    assert not in_enum(1, [True])
    assert in_enum(False, [False])


class TestGetSuggest:
    def test_case_insensitive_match_keeps_original_spelling(self):
        assert get_suggest("GET", ["get", "post"]) == ["get"]

    def test_typo(self):
        assert get_suggest("titel", ["title", "version", "contact"]) == ["title"]

    def test_no_close_match(self):
        assert get_suggest("zzz", ["title", "version"]) == []

    def test_non_string_input(self):
        assert get_suggest(42, ["get"]) == []

    def test_empty_variants(self):
        assert get_suggest("get", []) == []
