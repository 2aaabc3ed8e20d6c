"""Report reference pointers that do not lead to a node."""

from typing import Any

from oaslint.constants import REF_KEY
from oaslint.resolve import ResolvedRef
from oaslint.walk import UserContext


def no_unresolved_refs(_options: dict[str, Any]) -> dict:
    """Build the ``no-unresolved-refs`` visitor."""

    def ref(node: Any, ctx: UserContext, resolved: ResolvedRef) -> None:
        if resolved.resolved:
            return
        reason = resolved.error.message if resolved.error else "unknown"
        ctx.report(
            f"Can't resolve $ref: {reason}",
            location=ctx.location.child([REF_KEY]),
        )

    return {"ref": ref}
