"""Tests for the struct rule."""

import pytest

from oaslint.exceptions import ConfigurationError, SchemaDefinitionError
from oaslint.rules.common.struct import struct_rule
from oaslint.types import NamedType, normalize_types

INFO_TYPES = {
    "Info": {
        "properties": {
            "title": {"type": "string"},
            "version": {"type": "string"},
            "contact": "Contact",
        },
        "required": ["title", "version"],
    },
    "Contact": {"properties": {"name": {"type": "string"}}},
}


@pytest.fixture
def visit():
    return struct_rule({})["any"]


@pytest.fixture
def types():
    return normalize_types(INFO_TYPES)


def messages(problems):
    return [problem.message for problem in problems]


class TestShape:
    def test_array_type_with_object_node(self, run_visitor, visit):
        types = normalize_types(
            {
                "ServerList": {"properties": {}, "items": "Server"},
                "Server": {"properties": {"url": {"type": "string"}}},
            }
        )

        problems = run_visitor(
            visit, {"unexpected": 1}, types["ServerList"]
        )

        assert messages(problems) == [
            "Expected type 'ServerList (array)' but got 'object'"
        ]
        assert problems[0].location.pointer == "#/node"
        assert problems[0].location.report_on_key is False

    def test_array_type_with_array_node(self, run_visitor, visit):
        types = normalize_types(
            {
                "TagList": {"properties": {}, "items": "Tag"},
                "Tag": {"properties": {}},
            }
        )

        assert run_visitor(visit, [1, "x"], types["TagList"]) == []

    def test_object_type_with_scalar_node(self, run_visitor, visit, types):
        problems = run_visitor(visit, "just a string", types["Info"])

        assert messages(problems) == [
            "Expected type 'Info (object)' but got 'string'"
        ]

    def test_object_type_with_array_node_skips_property_checks(
        self, run_visitor, visit, types
    ):
        problems = run_visitor(visit, [], types["Info"])

        assert messages(problems) == [
            "Expected type 'Info (object)' but got 'array'"
        ]


class TestRequired:
    def test_missing_required_fields(self, run_visitor, visit, types):
        problems = run_visitor(visit, {}, types["Info"])

        assert messages(problems) == [
            "The field 'title' must be present on this level.",
            "The field 'version' must be present on this level.",
        ]
        for problem in problems:
            assert problem.location.pointer == "#/node"
            assert problem.location.report_on_key is True

    def test_present_fields_are_not_reported(self, run_visitor, visit, types):
        problems = run_visitor(
            visit, {"title": "Pets", "version": "1.0"}, types["Info"]
        )

        assert problems == []

    def test_required_function_sees_node_and_key(self, run_visitor, visit):
        calls = []

        def required(node, key):
            calls.append((node, key))
            return ["schema"] if "content" not in node else ["content"]

        types = normalize_types(
            {
                "Parameter": {
                    "properties": {
                        "schema": {"type": "object"},
                        "content": {"type": "object"},
                    },
                    "required": required,
                }
            }
        )

        problems = run_visitor(visit, {}, types["Parameter"], key=3)
        assert messages(problems) == [
            "The field 'schema' must be present on this level."
        ]
        assert calls == [({}, 3)]

        node = {"content": {}}
        assert run_visitor(visit, node, types["Parameter"], key=0) == []


class TestUnknownProperties:
    def test_unknown_property_with_suggestion(self, run_visitor, visit, types):
        problems = run_visitor(
            visit, {"title": "Pets", "version": "1", "titel": "x"}, types["Info"]
        )

        assert len(problems) == 1
        problem = problems[0]
        assert problem.message == "Property `titel` is not expected here"
        assert problem.suggest == ["title"]
        assert problem.location.pointer == "#/node/titel"
        assert problem.location.report_on_key is True

    def test_unknown_property_without_close_match(
        self, run_visitor, visit, types
    ):
        problems = run_visitor(
            visit, {"title": "a", "version": "1", "zzz": 1}, types["Info"]
        )

        assert messages(problems) == ["Property `zzz` is not expected here"]
        assert problems[0].suggest == []

    def test_extension_properties_are_allowed(self, run_visitor, visit, types):
        node = {"title": "a", "version": "1", "x-logo": {"url": "a.png"}}

        assert run_visitor(visit, node, types["Info"]) == []

    def test_additional_properties_accept_any_name(self, run_visitor, visit):
        types = normalize_types(
            {"Headers": {"properties": {}, "additional_properties": None}}
        )

        assert run_visitor(visit, {"X-Rate": 1, "Y": [1]}, types["Headers"]) == []

    def test_additional_properties_function_receives_value_and_name(
        self, run_visitor, visit
    ):
        seen = []

        def by_name(value, name):
            seen.append((value, name))
            return {"type": "string"} if name.startswith("s") else None

        types = normalize_types(
            {"Map": {"properties": {}, "additional_properties": by_name}}
        )

        problems = run_visitor(visit, {"s1": 1, "n1": 1}, types["Map"])

        assert messages(problems) == ["Expected type 'string' but got 'number'"]
        assert seen == [(1, "s1"), (1, "n1")]


class TestPropertyValues:
    def test_named_type_properties_are_skipped(self, run_visitor, visit, types):
        node = {"title": "a", "version": "1", "contact": "not an object"}

        assert run_visitor(visit, node, types["Info"]) == []

    def test_unchecked_property_accepts_anything(self, run_visitor, visit):
        types = normalize_types(
            {"Root": {"properties": {"openapi": None}}}
        )

        assert run_visitor(visit, {"openapi": [1, {}]}, types["Root"]) == []

    def test_type_mismatch(self, run_visitor, visit, types):
        problems = run_visitor(
            visit, {"title": 1, "version": "1"}, types["Info"]
        )

        assert messages(problems) == ["Expected type 'string' but got 'number'"]
        assert problems[0].location.pointer == "#/node/title"
        assert problems[0].location.report_on_key is False

    def test_type_list_is_joined_in_message(self, run_visitor, visit):
        types = normalize_types(
            {"Item": {"properties": {"value": {"type": ["string", "number"]}}}}
        )

        assert run_visitor(visit, {"value": 2}, types["Item"]) == []
        problems = run_visitor(visit, {"value": True}, types["Item"])
        assert messages(problems) == [
            "Expected type 'string, number' but got 'boolean'"
        ]

    def test_integer_type(self, run_visitor, visit):
        types = normalize_types(
            {"Schema": {"properties": {"minimum": {"type": "integer"}}}}
        )

        assert run_visitor(visit, {"minimum": 3}, types["Schema"]) == []
        assert run_visitor(visit, {"minimum": 3.0}, types["Schema"]) == []
        assert messages(run_visitor(visit, {"minimum": 3.5}, types["Schema"])) == [
            "Expected type 'integer' but got 'number'"
        ]
        assert messages(run_visitor(visit, {"minimum": True}, types["Schema"])) == [
            "Expected type 'integer' but got 'boolean'"
        ]

    def test_array_items_are_checked_individually(self, run_visitor, visit):
        types = normalize_types(
            {
                "Operation": {
                    "properties": {
                        "tags": {"type": "array", "items": {"type": "string"}}
                    }
                }
            }
        )

        problems = run_visitor(
            visit, {"tags": ["pets", 1, True]}, types["Operation"]
        )

        assert messages(problems) == [
            "Expected type 'string' but got 'number'",
            "Expected type 'string' but got 'boolean'",
        ]
        assert [p.location.pointer for p in problems] == [
            "#/node/tags/1",
            "#/node/tags/2",
        ]

    def test_non_array_value_for_array_type(self, run_visitor, visit):
        types = normalize_types(
            {
                "Operation": {
                    "properties": {
                        "tags": {"type": "array", "items": {"type": "string"}}
                    }
                }
            }
        )

        problems = run_visitor(visit, {"tags": "pets"}, types["Operation"])

        assert messages(problems) == ["Expected type 'array' but got 'string'"]


class TestEnum:
    @pytest.fixture
    def operation(self):
        return normalize_types(
            {
                "Op": {
                    "properties": {
                        "method": {"type": "string", "enum": ["get", "post"]}
                    }
                }
            }
        )["Op"]

    def test_value_outside_enum(self, run_visitor, visit, operation):
        problems = run_visitor(visit, {"method": "GET"}, operation)

        assert messages(problems) == [
            "'method' can be one of following only: \"get\", \"post\""
        ]
        assert problems[0].suggest == ["get"]
        assert problems[0].location.pointer == "#/node/method"

    def test_value_inside_enum(self, run_visitor, visit, operation):
        assert run_visitor(visit, {"method": "post"}, operation) == []

    def test_enum_takes_precedence_over_type(self, run_visitor, visit, operation):
        problems = run_visitor(visit, {"method": 5}, operation)

        assert messages(problems) == [
            "'method' can be one of following only: \"get\", \"post\""
        ]
        assert problems[0].suggest == []

    def test_boolean_is_not_a_number(self, run_visitor, visit):
        types = normalize_types(
            {"Flag": {"properties": {"level": {"enum": [0, 1]}}}}
        )

        assert run_visitor(visit, {"level": 1}, types["Flag"]) == []
        assert len(run_visitor(visit, {"level": True}, types["Flag"])) == 1


class TestReferenceable:
    @pytest.fixture
    def tag(self):
        return normalize_types(
            {
                "Tag": {
                    "properties": {
                        "name": {"type": "string"},
                        "kind": {"enum": ["a", "b"], "referenceable": True},
                        "description": {
                            "type": "string",
                            "referenceable": True,
                        },
                        "summary": {"type": "string"},
                    }
                }
            }
        )["Tag"]

    def test_resolved_value_is_checked(self, run_visitor, visit, tag):
        node = {"kind": {"$ref": "#/defs/kind"}}
        document = {"node": node, "defs": {"kind": "b"}}

        assert run_visitor(visit, node, tag, document=document) == []

    def test_resolved_value_outside_enum(self, run_visitor, visit, tag):
        node = {"kind": {"$ref": "#/defs/kind"}}
        document = {"node": node, "defs": {"kind": "c"}}

        problems = run_visitor(visit, node, tag, document=document)

        assert messages(problems) == [
            "'kind' can be one of following only: \"a\", \"b\""
        ]
        assert problems[0].location.pointer == "#/node/kind"

    def test_referenceable_type_check_uses_target(self, run_visitor, visit, tag):
        node = {"description": {"$ref": "#/defs/text"}}
        document = {"node": node, "defs": {"text": 42}}

        problems = run_visitor(visit, node, tag, document=document)

        assert messages(problems) == ["Expected type 'string' but got 'number'"]

    def test_unresolved_referenceable_is_checked_as_null(
        self, run_visitor, visit, tag
    ):
        node = {"description": {"$ref": "#/defs/missing"}}
        document = {"node": node, "defs": {}}

        problems = run_visitor(visit, node, tag, document=document)

        assert messages(problems) == ["Expected type 'string' but got 'null'"]

    def test_non_referenceable_ref_is_checked_as_is(
        self, run_visitor, visit, tag
    ):
        node = {"summary": {"$ref": "#/defs/text"}}
        document = {"node": node, "defs": {"text": "hello"}}

        problems = run_visitor(visit, node, tag, document=document)

        assert messages(problems) == ["Expected type 'string' but got 'object'"]


class TestConstruction:
    def test_options_are_rejected(self):
        with pytest.raises(ConfigurationError, match="struct"):
            struct_rule({"strict": True})

    def test_only_any_visitor(self):
        assert set(struct_rule({})) == {"any"}

    def test_malformed_function_entry(self, run_visitor, visit):
        node_type = NamedType(
            name="Broken", properties={"value": lambda value, key: 42}
        )

        with pytest.raises(SchemaDefinitionError):
            run_visitor(visit, {"value": 1}, node_type)


class TestInfoExample:
    @pytest.fixture
    def info(self):
        return normalize_types(
            {
                "Info": {
                    "properties": {"title": {"type": "string"}},
                    "required": ["title"],
                }
            }
        )["Info"]

    @pytest.mark.parametrize(
        ("node", "expected"),
        [
            ({}, ["The field 'title' must be present on this level."]),
            ({"title": 1}, ["Expected type 'string' but got 'number'"]),
            ({"title": "ok"}, []),
        ],
    )
    def test_info(self, run_visitor, visit, info, node, expected):
        assert messages(run_visitor(visit, node, info)) == expected
