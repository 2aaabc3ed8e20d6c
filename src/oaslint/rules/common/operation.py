"""Checks on Operation objects."""

from typing import Any

from oaslint.walk import UserContext


def operation_operation_id(_options: dict[str, Any]) -> dict:
    def visit_operation(node: Any, ctx: UserContext) -> None:
        if isinstance(node, dict) and not node.get("operationId"):
            ctx.report(
                "Operation object should contain `operationId` field.",
                location=ctx.location.key(),
            )

    return {"Operation": visit_operation}


def operation_summary(_options: dict[str, Any]) -> dict:
    def visit_operation(node: Any, ctx: UserContext) -> None:
        if isinstance(node, dict) and not node.get("summary"):
            ctx.report(
                "Operation object should contain `summary` field.",
                location=ctx.location.key(),
            )

    return {"Operation": visit_operation}
