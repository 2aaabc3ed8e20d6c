"""Type schema model for OpenAPI description documents.

A document position is described by either a ``NamedType`` (visited on its
own by the walker) or a ``ScalarSchema`` (a leaf checked inline by the
``struct`` rule). Raw per-version definitions are plain dicts and are turned
into linked ``NamedType`` objects by ``normalize_types``:

    >>> types = normalize_types({
    ...     "Root": {"properties": {"info": "Info"}, "required": ["info"]},
    ...     "Info": {"properties": {"title": {"type": "string"}}},
    ... })
    >>> types["Root"].properties["info"] is types["Info"]
    True

Property entries in a raw definition may be a type name, a scalar schema
dict, ``None`` (declared but not checked) or a function
``(value, key) -> entry`` evaluated against the node being checked.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Final

from oaslint.exceptions import DocumentError, SchemaDefinitionError


class _Undefined:
    """Marker for "no entry", distinct from the ``None`` sentinel."""

    _instance: "_Undefined | None" = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = _Undefined()

_SCALAR_KEYS: Final[frozenset[str]] = frozenset(
    {"type", "enum", "items", "referenceable"}
)
_NAMED_KEYS: Final[frozenset[str]] = frozenset(
    {"properties", "additional_properties", "required", "items"}
)


class OasVersion(Enum):
    """Supported description format versions."""

    VERSION2 = "oas2"
    VERSION3_0 = "oas3_0"


@dataclass(frozen=True)
class ScalarSchema:
    """Leaf schema checked inline, never visited on its own."""

    type: str | list[str] | None = None
    enum: list[Any] | None = None
    items: "ScalarSchema | None" = None
    referenceable: bool = False


@dataclass(eq=False)
class NamedType:
    """Schema node with a stable name, revisited per document position.

    Attributes:
        name: Type name, e.g. "Info"
        properties: Property name -> entry (NamedType, ScalarSchema,
            None or a function of the property value and name)
        additional_properties: Entry for names missing from properties;
            UNDEFINED when unknown names are not allowed
        required: Required property names, or a function of
            (node, key) returning them
        items: Item type; when set the type is array-shaped

    """

    name: str
    properties: dict[str, Any] = field(default_factory=dict, repr=False)
    additional_properties: Any = field(default=UNDEFINED, repr=False)
    required: list[str] | Callable[[Any, Any], list[str]] = field(
        default_factory=list, repr=False
    )
    items: Any = field(default=None, repr=False)

    @property
    def is_array(self) -> bool:
        """Whether nodes of this type are arrays."""
        return self.items is not None

    def required_fields(self, node: Any, key: Any) -> list[str]:
        """Resolve the required property names for ``node``."""
        if callable(self.required):
            return list(self.required(node, key) or [])
        return list(self.required or [])

    def property_type(self, name: str, value: Any) -> Any:
        """Effective entry for property ``name`` holding ``value``.

        Falls back to ``additional_properties`` when ``name`` has no
        explicit entry and evaluates function entries.

        Returns:
            NamedType, ScalarSchema, None or UNDEFINED

        Raises:
            SchemaDefinitionError: If the entry has an unknown shape

        """
        entry = self.properties.get(name, UNDEFINED)
        if entry is UNDEFINED:
            entry = self.additional_properties
        if callable(entry):
            entry = entry(value, name)
        if entry is None or entry is UNDEFINED:
            return entry
        if not isinstance(entry, (NamedType, ScalarSchema)):
            msg = f"Property entry has unsupported shape {type(entry)!r}"
            raise SchemaDefinitionError(msg, target=f"{self.name}.{name}")
        return entry


def list_of(type_name: str) -> dict[str, Any]:
    """Raw definition of an array whose items are ``type_name``."""
    return {"properties": {}, "items": type_name}


def map_of(type_name: str) -> dict[str, Any]:
    """Raw definition of a map whose values are ``type_name``."""
    return {"properties": {}, "additional_properties": type_name}


def _normalize_scalar(raw: Mapping[str, Any], where: str) -> ScalarSchema:
    unknown = set(raw) - _SCALAR_KEYS
    if unknown:
        msg = f"Unknown scalar schema keys: {', '.join(sorted(unknown))}"
        raise SchemaDefinitionError(msg, target=where)

    items = raw.get("items")
    if items is not None:
        if not isinstance(items, Mapping):
            msg = "Scalar 'items' must be a scalar schema"
            raise SchemaDefinitionError(msg, target=where)
        items = _normalize_scalar(items, f"{where}.items")

    enum = raw.get("enum")
    return ScalarSchema(
        type=raw.get("type"),
        enum=list(enum) if enum is not None else None,
        items=items,
        referenceable=bool(raw.get("referenceable", False)),
    )


def _normalize_entry(
    entry: Any, named: Mapping[str, NamedType], where: str
) -> Any:
    if entry is None or entry is UNDEFINED:
        return entry
    if isinstance(entry, (NamedType, ScalarSchema)):
        return entry
    if isinstance(entry, str):
        try:
            return named[entry]
        except KeyError:
            msg = f"Unknown type name '{entry}'"
            raise SchemaDefinitionError(msg, target=where) from None
    if isinstance(entry, Mapping):
        return _normalize_scalar(entry, where)
    if callable(entry):

        def resolve(value: Any, key: Any) -> Any:
            return _normalize_entry(entry(value, key), named, where)

        return resolve

    msg = f"Unsupported entry {entry!r}"
    raise SchemaDefinitionError(msg, target=where)


def normalize_types(
    definitions: Mapping[str, Mapping[str, Any]],
) -> dict[str, NamedType]:
    """Link raw type definitions into ``NamedType`` objects.

    All types are created before any name is linked, so cycles in the type
    graph (a Schema whose properties are Schemas) become shared references
    rather than recursion.

    Args:
        definitions: Type name -> raw definition

    Returns:
        Type name -> NamedType

    Raises:
        SchemaDefinitionError: On unknown keys or unknown type names

    """
    named = {name: NamedType(name=name) for name in definitions}

    for name, definition in definitions.items():
        unknown = set(definition) - _NAMED_KEYS
        if unknown:
            msg = f"Unknown type definition keys: {', '.join(sorted(unknown))}"
            raise SchemaDefinitionError(msg, target=name)

        target = named[name]
        target.properties = {
            prop: _normalize_entry(entry, named, f"{name}.{prop}")
            for prop, entry in definition.get("properties", {}).items()
        }
        if "additional_properties" in definition:
            target.additional_properties = _normalize_entry(
                definition["additional_properties"],
                named,
                f"{name}.additional_properties",
            )

        required = definition.get("required", [])
        if not callable(required) and not isinstance(required, (list, tuple)):
            msg = "'required' must be a list or a function"
            raise SchemaDefinitionError(msg, target=name)
        target.required = required if callable(required) else list(required)

        if definition.get("items") is not None:
            target.items = _normalize_entry(
                definition["items"], named, f"{name}.items"
            )

    return named


def detect_oas_version(root: Any) -> OasVersion:
    """Detect the description format version of a parsed document.

    Raises:
        DocumentError: If the document declares no supported version

    """
    if not isinstance(root, Mapping):
        msg = "Document root must be an object"
        raise DocumentError(msg)

    openapi = root.get("openapi")
    swagger = root.get("swagger")
    if openapi is None and swagger is None:
        msg = "This doesn't look like an OpenAPI document"
        raise DocumentError(msg)

    if isinstance(openapi, str) and openapi.startswith("3.0"):
        return OasVersion.VERSION3_0
    if openapi is None and str(swagger).startswith("2"):
        return OasVersion.VERSION2

    msg = f"Unsupported OpenAPI version: {openapi or swagger}"
    raise DocumentError(msg)
