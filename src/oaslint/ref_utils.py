"""Reference pointer and document location helpers."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, replace
from typing import Any
from urllib.parse import unquote

from oaslint.constants import REF_KEY, ROOT_POINTER


@dataclass(frozen=True)
class Source:
    """A loaded description document."""

    absolute_ref: str
    body: str | None = None


@dataclass(frozen=True)
class Location:
    """Position inside a source, as a JSON pointer.

    ``report_on_key`` narrows the position to the property name rather
    than its value.
    """

    source: Source
    pointer: str = ROOT_POINTER
    report_on_key: bool = False

    def child(self, components: Iterable[str | int]) -> Location:
        """Location of a descendant reached by ``components``."""
        return Location(self.source, join_pointer(self.pointer, components))

    def key(self) -> Location:
        """Same location, reported on the key."""
        return replace(self, report_on_key=True)

    @property
    def absolute_pointer(self) -> str:
        return self.source.absolute_ref + self.pointer


def is_ref(node: Any) -> bool:
    """Whether ``node`` has the reference pointer shape ``{"$ref": str}``."""
    return isinstance(node, Mapping) and isinstance(node.get(REF_KEY), str)


def escape_pointer(segment: str | int) -> str:
    return str(segment).replace("~", "~0").replace("/", "~1")


def unescape_pointer(segment: str) -> str:
    return unquote(segment).replace("~1", "/").replace("~0", "~")


def join_pointer(base: str, components: Iterable[str | int]) -> str:
    """Append escaped ``components`` to pointer ``base``."""
    escaped = [escape_pointer(segment) for segment in components]
    if not escaped:
        return base
    prefix = base[:-1] if base == ROOT_POINTER else base
    return prefix + "".join("/" + segment for segment in escaped)


def parse_ref(ref: str) -> tuple[str, list[str]]:
    """Split a ``$ref`` into its file part and unescaped pointer segments.

    >>> parse_ref("#/components/schemas/Pet")
    ('', ['components', 'schemas', 'Pet'])
    """
    uri, _, fragment = ref.partition("#")
    segments = [
        unescape_pointer(segment)
        for segment in fragment.split("/")
        if segment != ""
    ]
    return uri, segments


def pointer_from_segments(segments: Iterable[str | int]) -> str:
    return join_pointer(ROOT_POINTER, segments)
