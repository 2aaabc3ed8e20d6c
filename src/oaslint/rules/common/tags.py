"""Checks on Tag objects."""

from typing import Any

from oaslint.walk import UserContext


def tag_description(_options: dict[str, Any]) -> dict:
    def visit_tag(node: Any, ctx: UserContext) -> None:
        if isinstance(node, dict) and not node.get("description"):
            ctx.report(
                "Tag object should contain `description` field.",
                location=ctx.location.key(),
            )

    return {"Tag": visit_tag}
