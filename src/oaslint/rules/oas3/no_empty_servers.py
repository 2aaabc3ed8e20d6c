"""Require a non-empty ``servers`` list on the root object."""

from typing import Any

from oaslint.walk import UserContext


def no_empty_servers(_options: dict[str, Any]) -> dict:
    def visit_root(node: Any, ctx: UserContext) -> None:
        if not isinstance(node, dict):
            return
        if "servers" not in node:
            ctx.report(
                "Servers must be present.",
                location=ctx.location.child(["openapi"]).key(),
            )
            return
        servers = node["servers"]
        if isinstance(servers, list) and not servers:
            ctx.report(
                "Servers must be a non-empty array.",
                location=ctx.location.child(["servers"]).key(),
            )

    return {"Root": visit_root}
