"""Document traversal driver.

Walks a parsed document together with its bound ``NamedType`` and calls
the visitors of every active check once per node. Visitors are dicts
produced by rule constructors:

    {
        "any": fn(node, ctx),            # every visited node
        "Info": fn(node, ctx),           # nodes bound to the Info type
        "ref": fn(node, ctx, resolved),  # every $ref encountered
    }

Named types are descended into here; scalar schemas never are. Each
(type, position) pair is visited at most once, which keeps cyclic
documents finite.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from oaslint.constants import ROOT_POINTER
from oaslint.logger import get_logger
from oaslint.ref_utils import Location, is_ref
from oaslint.types import NamedType

if TYPE_CHECKING:
    from oaslint.config.rules import ActiveCheck
    from oaslint.resolve import Document, ResolvedRef, Resolver

logger = get_logger(__name__)


@dataclass
class Problem:
    """A document violation, stamped with its rule and severity."""

    message: str
    rule_id: str
    severity: str
    location: Location
    suggest: list[str] = field(default_factory=list)


@dataclass
class UserContext:
    """What a visitor receives alongside the node."""

    report: Callable[..., None]
    location: Location
    type: NamedType
    key: str | int | None
    parent: Any
    resolve: Callable[[Any], ResolvedRef]


class _Walker:
    def __init__(
        self,
        document: Document,
        checks: Sequence[ActiveCheck],
        resolver: Resolver,
    ) -> None:
        self.document = document
        self.checks = checks
        self.resolver = resolver
        self.problems: list[Problem] = []
        self._visited: set[tuple[str, str]] = set()

    def _reporter(
        self, check: ActiveCheck, current: Location
    ) -> Callable[..., None]:
        def report(
            message: str,
            location: Location | None = None,
            suggest: Sequence[str] | None = None,
        ) -> None:
            self.problems.append(
                Problem(
                    message=message,
                    rule_id=check.rule_id,
                    severity=check.severity,
                    location=location or current,
                    suggest=list(suggest or []),
                )
            )

        return report

    def _context(
        self,
        check: ActiveCheck,
        location: Location,
        node_type: NamedType,
        key: str | int | None,
        parent: Any,
    ) -> UserContext:
        return UserContext(
            report=self._reporter(check, location),
            location=location,
            type=node_type,
            key=key,
            parent=parent,
            resolve=self.resolver.resolve,
        )

    def walk(
        self,
        node: Any,
        node_type: NamedType,
        location: Location,
        parent: Any,
        key: str | int | None,
    ) -> None:
        if is_ref(node):
            resolved = self.resolver.resolve(node)
            for check in self.checks:
                visit_ref = check.visitor.get("ref")
                if visit_ref is not None:
                    ctx = self._context(check, location, node_type, key, parent)
                    visit_ref(node, ctx, resolved)
            if not resolved.resolved:
                return
            node, location = resolved.node, resolved.location

        marker = (node_type.name, location.absolute_pointer)
        if marker in self._visited:
            return
        self._visited.add(marker)

        for check in self.checks:
            for visitor_key in ("any", node_type.name):
                visit = check.visitor.get(visitor_key)
                if visit is not None:
                    ctx = self._context(check, location, node_type, key, parent)
                    visit(node, ctx)

        if node_type.is_array:
            if isinstance(node, list) and isinstance(node_type.items, NamedType):
                for index, item in enumerate(node):
                    self.walk(
                        item,
                        node_type.items,
                        location.child([index]),
                        node,
                        index,
                    )
            return

        if not isinstance(node, dict):
            return

        for name, value in node.items():
            target = value
            if is_ref(value):
                resolved = self.resolver.resolve(value)
                if resolved.resolved:
                    target = resolved.node
            prop_type = node_type.property_type(name, target)
            if isinstance(prop_type, NamedType):
                self.walk(value, prop_type, location.child([name]), node, name)


def walk_document(
    document: Document,
    root_type: NamedType,
    checks: Sequence[ActiveCheck],
    resolver: Resolver,
) -> list[Problem]:
    """Visit every node of ``document`` with the active checks.

    Args:
        document: Parsed document
        root_type: Type bound to the document root
        checks: Active checks, in execution order
        resolver: Reference resolver for the document

    Returns:
        Problems in traversal order

    """
    walker = _Walker(document, checks, resolver)
    root = Location(document.source, ROOT_POINTER)
    walker.walk(document.parsed, root_type, root, None, None)
    logger.debug(
        "Walked %s with %d checks: %d problems",
        document.source.absolute_ref,
        len(checks),
        len(walker.problems),
    )
    return walker.problems
