"""Local reference resolution.

All documents are parsed before traversal starts, so resolving is a plain
lookup inside an already-materialized tree. Cross-file references are not
followed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from oaslint.constants import REF_KEY
from oaslint.exceptions import ResolveError
from oaslint.logger import get_logger
from oaslint.ref_utils import (
    Location,
    Source,
    is_ref,
    parse_ref,
    pointer_from_segments,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class Document:
    """A parsed description document and where it came from."""

    source: Source
    parsed: Any


@dataclass(frozen=True)
class ResolvedRef:
    """Outcome of resolving one reference pointer."""

    node: Any
    location: Location | None
    resolved: bool
    error: ResolveError | None = None


class Resolver:
    """Resolves ``{"$ref": "#/..."}`` pointers inside one document."""

    def __init__(self, document: Document) -> None:
        self.document = document
        self._cache: dict[str, ResolvedRef] = {}

    def resolve(self, ref: Any) -> ResolvedRef:
        """Resolve ``ref`` to its final target, following chained refs.

        Never raises for document problems: a missing target, an external
        file or a pointer cycle is returned as an unresolved result with
        ``error`` set.

        Args:
            ref: A node with the reference pointer shape

        Returns:
            ResolvedRef with the target node and its location

        """
        if not is_ref(ref):
            msg = f"Not a reference pointer: {ref!r}"
            return ResolvedRef(None, None, False, ResolveError(msg))

        pointer = ref[REF_KEY]
        cached = self._cache.get(pointer)
        if cached is not None:
            return cached

        result = self._follow(pointer)
        if not result.resolved:
            logger.debug("Unresolved $ref %s: %s", pointer, result.error)
        self._cache[pointer] = result
        return result

    def _follow(self, pointer: str) -> ResolvedRef:
        seen: list[str] = []
        while True:
            if pointer in seen:
                chain = " -> ".join([*seen, pointer])
                msg = f"Self-referencing circular pointer: {chain}"
                return ResolvedRef(None, None, False, ResolveError(msg, pointer))
            seen.append(pointer)

            uri, segments = parse_ref(pointer)
            if uri:
                msg = "External references are not supported"
                return ResolvedRef(None, None, False, ResolveError(msg, pointer))

            try:
                node = self._lookup(segments)
            except ResolveError as e:
                return ResolvedRef(None, None, False, e)

            if not is_ref(node):
                location = Location(
                    self.document.source, pointer_from_segments(segments)
                )
                return ResolvedRef(node, location, True)
            pointer = node[REF_KEY]

    def _lookup(self, segments: list[str]) -> Any:
        node = self.document.parsed
        for depth, segment in enumerate(segments):
            if isinstance(node, dict) and segment in node:
                node = node[segment]
            elif (
                isinstance(node, list)
                and segment.isdigit()
                and int(segment) < len(node)
            ):
                node = node[int(segment)]
            else:
                where = pointer_from_segments(segments[: depth + 1])
                msg = f"Pointer target does not exist at {where}"
                raise ResolveError(msg, pointer_from_segments(segments))
        return node
