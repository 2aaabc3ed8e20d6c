"""Swagger 2.0 type definitions.

Raw definitions consumed by ``oaslint.types.normalize_types``.
"""

import re
from typing import Any

from oaslint.types import UNDEFINED, list_of, map_of

_RESPONSE_CODE = re.compile(r"^[1-5][0-9][0-9]$")

_STRING = {"type": "string"}
_BOOLEAN = {"type": "boolean"}
_NUMBER = {"type": "number"}
_INTEGER = {"type": "integer"}
_OBJECT = {"type": "object"}
_STRING_LIST = {"type": "array", "items": {"type": "string"}}
_DESCRIPTION = {"type": "string", "referenceable": True}
_COLLECTION_FORMAT = {"enum": ["csv", "ssv", "tsv", "pipes", "multi"]}

_HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch")

# Validation keywords shared by non-body parameters, items and headers
_SIMPLE_VALIDATIONS = {
    "format": _STRING,
    "default": None,
    "maximum": _NUMBER,
    "exclusiveMaximum": _BOOLEAN,
    "minimum": _NUMBER,
    "exclusiveMinimum": _BOOLEAN,
    "maxLength": _INTEGER,
    "minLength": _INTEGER,
    "pattern": _STRING,
    "maxItems": _INTEGER,
    "minItems": _INTEGER,
    "uniqueItems": _BOOLEAN,
    "enum": {"type": "array"},
    "multipleOf": _NUMBER,
}


def _path_item_for(_value: Any, key: str) -> Any:
    return "PathItem" if str(key).startswith("/") else UNDEFINED


def _response_for(_value: Any, key: str) -> Any:
    return "Response" if _RESPONSE_CODE.match(str(key)) else UNDEFINED


def _parameter_required(node: Any, _key: Any) -> list[str]:
    if not isinstance(node, dict) or "in" not in node:
        return ["name", "in"]
    if node["in"] == "body":
        return ["name", "in", "schema"]
    if node.get("type") == "array":
        return ["name", "in", "type", "items"]
    if node["in"] == "path":
        return ["name", "in", "type", "required"]
    return ["name", "in", "type"]


def _items_required(node: Any, _key: Any) -> list[str]:
    if isinstance(node, dict) and node.get("type") == "array":
        return ["type", "items"]
    return ["type"]


def _security_scheme_required(node: Any, _key: Any) -> list[str]:
    if not isinstance(node, dict):
        return ["type"]
    scheme_type = node.get("type")
    if scheme_type == "apiKey":
        return ["type", "name", "in"]
    if scheme_type == "oauth2":
        flow = node.get("flow")
        if flow == "implicit":
            return ["type", "flow", "authorizationUrl", "scopes"]
        if flow == "accessCode":
            return ["type", "flow", "authorizationUrl", "tokenUrl", "scopes"]
        if flow in ("password", "application"):
            return ["type", "flow", "tokenUrl", "scopes"]
        return ["type", "flow", "scopes"]
    return ["type"]


def _schema_items(value: Any, _key: Any) -> str:
    return "SchemaList" if isinstance(value, list) else "Schema"


def _schema_additional_properties(value: Any, _key: Any) -> Any:
    return _BOOLEAN if isinstance(value, bool) else "Schema"


Root = {
    "properties": {
        "swagger": None,
        "info": "Info",
        "host": _STRING,
        "basePath": _STRING,
        "schemes": _STRING_LIST,
        "consumes": _STRING_LIST,
        "produces": _STRING_LIST,
        "paths": "PathMap",
        "definitions": "NamedSchemas",
        "parameters": "NamedParameters",
        "responses": "NamedResponses",
        "securityDefinitions": "NamedSecuritySchemes",
        "security": "SecurityRequirementList",
        "tags": "TagList",
        "externalDocs": "ExternalDocs",
    },
    "required": ["swagger", "paths", "info"],
}

Info = {
    "properties": {
        "title": _STRING,
        "description": _DESCRIPTION,
        "termsOfService": _STRING,
        "contact": "Contact",
        "license": "License",
        "version": _STRING,
    },
    "required": ["title", "version"],
}

Contact = {
    "properties": {
        "name": _STRING,
        "url": _STRING,
        "email": _STRING,
    },
}

License = {
    "properties": {
        "name": _STRING,
        "url": _STRING,
    },
    "required": ["name"],
}

PathMap = {
    "properties": {},
    "additional_properties": _path_item_for,
}

PathItem = {
    "properties": {
        "$ref": None,
        "parameters": "ParameterList",
        **dict.fromkeys(_HTTP_METHODS, "Operation"),
    },
}

Operation = {
    "properties": {
        "tags": _STRING_LIST,
        "summary": _STRING,
        "description": _DESCRIPTION,
        "externalDocs": "ExternalDocs",
        "operationId": _STRING,
        "consumes": _STRING_LIST,
        "produces": _STRING_LIST,
        "parameters": "ParameterList",
        "responses": "ResponsesMap",
        "schemes": _STRING_LIST,
        "deprecated": _BOOLEAN,
        "security": "SecurityRequirementList",
        "x-codeSamples": "XCodeSampleList",
    },
    "required": ["responses"],
}

XCodeSample = {
    "properties": {
        "lang": _STRING,
        "label": _STRING,
        "source": _STRING,
    },
    "required": ["lang", "source"],
}

Parameter = {
    "properties": {
        "name": _STRING,
        "in": {"enum": ["query", "header", "path", "formData", "body"]},
        "description": _STRING,
        "required": _BOOLEAN,
        "schema": "Schema",
        "type": {
            "enum": ["string", "number", "integer", "boolean", "array", "file"]
        },
        "allowEmptyValue": _BOOLEAN,
        "items": "ParameterItems",
        "collectionFormat": _COLLECTION_FORMAT,
        **_SIMPLE_VALIDATIONS,
    },
    "required": _parameter_required,
}

ParameterItems = {
    "properties": {
        "type": {"enum": ["string", "number", "integer", "boolean", "array"]},
        "items": "ParameterItems",
        "collectionFormat": _COLLECTION_FORMAT,
        **_SIMPLE_VALIDATIONS,
    },
    "required": _items_required,
}

ResponsesMap = {
    "properties": {"default": "Response"},
    "additional_properties": _response_for,
}

Response = {
    "properties": {
        "description": _STRING,
        "schema": "Schema",
        "headers": "HeadersMap",
        "examples": "Examples",
    },
    "required": ["description"],
}

Examples = {
    "properties": {},
    "additional_properties": None,
}

Header = {
    "properties": {
        "description": _STRING,
        "type": {"enum": ["string", "number", "integer", "boolean", "array"]},
        "items": "ParameterItems",
        "collectionFormat": _COLLECTION_FORMAT,
        **_SIMPLE_VALIDATIONS,
    },
    "required": _items_required,
}

Tag = {
    "properties": {
        "name": _STRING,
        "description": _DESCRIPTION,
        "externalDocs": "ExternalDocs",
    },
    "required": ["name"],
}

ExternalDocs = {
    "properties": {
        "description": _STRING,
        "url": _STRING,
    },
    "required": ["url"],
}

Schema = {
    "properties": {
        "format": _STRING,
        "title": _STRING,
        "description": _STRING,
        "default": None,
        "multipleOf": _NUMBER,
        "maximum": _NUMBER,
        "minimum": _NUMBER,
        "exclusiveMaximum": _BOOLEAN,
        "exclusiveMinimum": _BOOLEAN,
        "maxLength": _INTEGER,
        "minLength": _INTEGER,
        "pattern": _STRING,
        "maxItems": _INTEGER,
        "minItems": _INTEGER,
        "uniqueItems": _BOOLEAN,
        "maxProperties": _INTEGER,
        "minProperties": _INTEGER,
        "required": _STRING_LIST,
        "enum": {"type": "array"},
        "type": {
            "enum": [
                "object",
                "array",
                "string",
                "number",
                "integer",
                "boolean",
                "null",
            ]
        },
        "items": _schema_items,
        "allOf": "SchemaList",
        "properties": "SchemaProperties",
        "additionalProperties": _schema_additional_properties,
        "discriminator": _STRING,
        "readOnly": _BOOLEAN,
        "xml": "Xml",
        "externalDocs": "ExternalDocs",
        "example": None,
        "x-tags": _STRING_LIST,
    },
}

SchemaProperties = {
    "properties": {},
    "additional_properties": "Schema",
}

Xml = {
    "properties": {
        "name": _STRING,
        "namespace": _STRING,
        "prefix": _STRING,
        "attribute": _BOOLEAN,
        "wrapped": _BOOLEAN,
    },
}

SecurityScheme = {
    "properties": {
        "type": {"enum": ["basic", "apiKey", "oauth2"]},
        "description": _STRING,
        "name": _STRING,
        "in": {"enum": ["query", "header"]},
        "flow": {"enum": ["implicit", "password", "application", "accessCode"]},
        "authorizationUrl": _STRING,
        "tokenUrl": _STRING,
        "scopes": _OBJECT,
    },
    "required": _security_scheme_required,
}

SecurityRequirement = {
    "properties": {},
    "additional_properties": _STRING_LIST,
}

Oas2Types: dict[str, dict[str, Any]] = {
    "Root": Root,
    "Tag": Tag,
    "TagList": list_of("Tag"),
    "ExternalDocs": ExternalDocs,
    "SecurityRequirement": SecurityRequirement,
    "SecurityRequirementList": list_of("SecurityRequirement"),
    "Info": Info,
    "Contact": Contact,
    "License": License,
    "PathMap": PathMap,
    "PathItem": PathItem,
    "Parameter": Parameter,
    "ParameterItems": ParameterItems,
    "ParameterList": list_of("Parameter"),
    "Operation": Operation,
    "XCodeSample": XCodeSample,
    "XCodeSampleList": list_of("XCodeSample"),
    "Examples": Examples,
    "Header": Header,
    "HeadersMap": map_of("Header"),
    "ResponsesMap": ResponsesMap,
    "Response": Response,
    "Schema": Schema,
    "SchemaList": list_of("Schema"),
    "SchemaProperties": SchemaProperties,
    "Xml": Xml,
    "NamedSchemas": map_of("Schema"),
    "NamedResponses": map_of("Response"),
    "NamedParameters": map_of("Parameter"),
    "NamedSecuritySchemes": map_of("SecurityScheme"),
    "SecurityScheme": SecurityScheme,
}
