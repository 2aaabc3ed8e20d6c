"""Checks on the Info object."""

from typing import Any

from oaslint.walk import UserContext


def info_contact(_options: dict[str, Any]) -> dict:
    def visit_info(node: Any, ctx: UserContext) -> None:
        if isinstance(node, dict) and not node.get("contact"):
            ctx.report(
                "Info object should contain `contact` field.",
                location=ctx.location.key(),
            )

    return {"Info": visit_info}


def info_license(_options: dict[str, Any]) -> dict:
    def visit_info(node: Any, ctx: UserContext) -> None:
        if isinstance(node, dict) and not node.get("license"):
            ctx.report(
                "Info object should contain `license` field.",
                location=ctx.location.key(),
            )

    return {"Info": visit_info}
