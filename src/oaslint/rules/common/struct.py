"""Structural validation of a node against its bound type.

The check runs once per visited node. Properties bound to a NamedType are
skipped here because the walker visits them with that type; only scalar
schemas are checked inline.
"""

from typing import Any

from oaslint.constants import EXTENSION_PREFIX, RULE_STRUCT
from oaslint.exceptions import ConfigurationError
from oaslint.ref_utils import is_ref
from oaslint.rules.utils import (
    format_type,
    get_suggest,
    in_enum,
    matches_json_schema_type,
    oas_type_of,
)
from oaslint.types import UNDEFINED, NamedType
from oaslint.walk import UserContext


def struct_rule(options: dict[str, Any]) -> dict:
    """Build the ``struct`` visitor.

    Raises:
        ConfigurationError: If any option is given; the rule takes none

    """
    if options:
        msg = f"Rule takes no options, got: {', '.join(sorted(options))}"
        raise ConfigurationError(msg, target=RULE_STRUCT)

    def any_node(node: Any, ctx: UserContext) -> None:
        node_type = ctx.type
        node_kind = oas_type_of(node)

        if node_type.is_array:
            if node_kind != "array":
                ctx.report(
                    f"Expected type '{node_type.name} (array)' "
                    f"but got '{node_kind}'"
                )
            return
        if node_kind != "object":
            ctx.report(
                f"Expected type '{node_type.name} (object)' "
                f"but got '{node_kind}'"
            )
            return

        for prop_name in node_type.required_fields(node, ctx.key):
            if prop_name not in node:
                ctx.report(
                    f"The field '{prop_name}' must be present on this level.",
                    location=ctx.location.key(),
                )

        for prop_name, prop_value in node.items():
            _check_property(node_type, prop_name, prop_value, ctx)

    return {"any": any_node}


def _check_property(
    node_type: NamedType, prop_name: str, prop_value: Any, ctx: UserContext
) -> None:
    prop_location = ctx.location.child([prop_name])
    prop_schema = node_type.property_type(prop_name, prop_value)

    if isinstance(prop_schema, NamedType):
        return

    if prop_schema is UNDEFINED:
        if str(prop_name).startswith(EXTENSION_PREFIX):
            return
        ctx.report(
            f"Property `{prop_name}` is not expected here",
            location=prop_location.key(),
            suggest=get_suggest(prop_name, node_type.properties),
        )
        return

    if prop_schema is None:
        return

    if prop_schema.referenceable and is_ref(prop_value):
        prop_value = ctx.resolve(prop_value).node

    if prop_schema.enum is not None:
        if not in_enum(prop_value, prop_schema.enum):
            allowed = ", ".join(f'"{option}"' for option in prop_schema.enum)
            ctx.report(
                f"'{prop_name}' can be one of following only: {allowed}",
                location=prop_location,
                suggest=get_suggest(prop_value, prop_schema.enum),
            )
    elif prop_schema.type and not matches_json_schema_type(
        prop_value, prop_schema.type
    ):
        ctx.report(
            f"Expected type '{format_type(prop_schema.type)}' "
            f"but got '{oas_type_of(prop_value)}'",
            location=prop_location,
        )
    elif (
        oas_type_of(prop_value) == "array"
        and prop_schema.items is not None
        and prop_schema.items.type
    ):
        items_type = prop_schema.items.type
        for index, item in enumerate(prop_value):
            if not matches_json_schema_type(item, items_type):
                ctx.report(
                    f"Expected type '{format_type(items_type)}' "
                    f"but got '{oas_type_of(item)}'",
                    location=prop_location.child([index]),
                )
