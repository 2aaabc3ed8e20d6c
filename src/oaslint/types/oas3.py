"""OpenAPI 3.0 type definitions.

Raw definitions consumed by ``oaslint.types.normalize_types``.
"""

import re
from typing import Any

from oaslint.types import UNDEFINED, list_of, map_of

_RESPONSE_CODE = re.compile(r"^([1-5][0-9][0-9]|[1-5]XX)$")

_STRING = {"type": "string"}
_BOOLEAN = {"type": "boolean"}
_NUMBER = {"type": "number"}
_INTEGER = {"type": "integer"}
_OBJECT = {"type": "object"}
_STRING_LIST = {"type": "array", "items": {"type": "string"}}
_DESCRIPTION = {"type": "string", "referenceable": True}

_HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch",
                 "trace")


def _path_item_for(_value: Any, key: str) -> Any:
    return "PathItem" if str(key).startswith("/") else UNDEFINED


def _response_for(_value: Any, key: str) -> Any:
    return "Response" if _RESPONSE_CODE.match(str(key)) else UNDEFINED


def _parameter_required(node: Any, _key: Any) -> list[str]:
    if isinstance(node, dict) and "content" in node:
        return ["name", "in", "content"]
    return ["name", "in", "schema"]


def _security_scheme_required(node: Any, _key: Any) -> list[str]:
    scheme_type = node.get("type") if isinstance(node, dict) else None
    if scheme_type == "apiKey":
        return ["type", "name", "in"]
    if scheme_type == "http":
        return ["type", "scheme"]
    if scheme_type == "oauth2":
        return ["type", "flows"]
    if scheme_type == "openIdConnect":
        return ["type", "openIdConnectUrl"]
    return ["type"]


def _schema_items(value: Any, _key: Any) -> str:
    return "SchemaList" if isinstance(value, list) else "Schema"


def _schema_additional_properties(value: Any, _key: Any) -> Any:
    return _BOOLEAN if isinstance(value, bool) else "Schema"


Root = {
    "properties": {
        "openapi": None,
        "info": "Info",
        "servers": "ServerList",
        "security": "SecurityRequirementList",
        "tags": "TagList",
        "externalDocs": "ExternalDocs",
        "paths": "PathMap",
        "components": "Components",
    },
    "required": ["openapi", "paths", "info"],
}

Info = {
    "properties": {
        "title": _STRING,
        "version": _STRING,
        "description": _DESCRIPTION,
        "termsOfService": _STRING,
        "contact": "Contact",
        "license": "License",
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

Server = {
    "properties": {
        "url": _STRING,
        "description": _STRING,
        "variables": "ServerVariableMap",
    },
    "required": ["url"],
}

ServerVariable = {
    "properties": {
        "enum": _STRING_LIST,
        "default": None,
        "description": None,
    },
    "required": ["default"],
}

SecurityRequirement = {
    "properties": {},
    "additional_properties": _STRING_LIST,
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

PathMap = {
    "properties": {},
    "additional_properties": _path_item_for,
}

PathItem = {
    "properties": {
        "$ref": None,
        "servers": "ServerList",
        "parameters": "ParameterList",
        "summary": _STRING,
        "description": _STRING,
        **dict.fromkeys(_HTTP_METHODS, "Operation"),
    },
}

Parameter = {
    "properties": {
        "name": _STRING,
        "in": {"enum": ["query", "header", "path", "cookie"]},
        "description": _STRING,
        "required": _BOOLEAN,
        "deprecated": _BOOLEAN,
        "allowEmptyValue": _BOOLEAN,
        "style": {
            "enum": [
                "form",
                "simple",
                "label",
                "matrix",
                "spaceDelimited",
                "pipeDelimited",
                "deepObject",
            ]
        },
        "explode": _BOOLEAN,
        "allowReserved": _BOOLEAN,
        "schema": "Schema",
        "example": None,
        "examples": "ExamplesMap",
        "content": "MediaTypeMap",
    },
    "required": _parameter_required,
}

Callback = {
    "properties": {},
    "additional_properties": "PathItem",
}

Operation = {
    "properties": {
        "tags": _STRING_LIST,
        "summary": _STRING,
        "description": _DESCRIPTION,
        "externalDocs": "ExternalDocs",
        "operationId": _STRING,
        "parameters": "ParameterList",
        "security": "SecurityRequirementList",
        "servers": "ServerList",
        "requestBody": "RequestBody",
        "responses": "ResponsesMap",
        "deprecated": _BOOLEAN,
        "callbacks": "CallbacksMap",
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

RequestBody = {
    "properties": {
        "description": _STRING,
        "required": _BOOLEAN,
        "content": "MediaTypeMap",
    },
    "required": ["content"],
}

MediaType = {
    "properties": {
        "schema": "Schema",
        "example": None,
        "examples": "ExamplesMap",
        "encoding": "EncodingMap",
    },
}

Example = {
    "properties": {
        "value": None,
        "summary": _STRING,
        "description": _STRING,
        "externalValue": _STRING,
    },
}

Encoding = {
    "properties": {
        "contentType": _STRING,
        "headers": "HeadersMap",
        "style": {
            "enum": [
                "form",
                "simple",
                "label",
                "matrix",
                "spaceDelimited",
                "pipeDelimited",
                "deepObject",
            ]
        },
        "explode": _BOOLEAN,
        "allowReserved": _BOOLEAN,
    },
}

Header = {
    "properties": {
        "description": _STRING,
        "required": _BOOLEAN,
        "deprecated": _BOOLEAN,
        "allowEmptyValue": _BOOLEAN,
        "style": {"enum": ["simple"]},
        "explode": _BOOLEAN,
        "allowReserved": _BOOLEAN,
        "schema": "Schema",
        "example": None,
        "examples": "ExamplesMap",
        "content": "MediaTypeMap",
    },
}

ResponsesMap = {
    "properties": {"default": "Response"},
    "additional_properties": _response_for,
}

Response = {
    "properties": {
        "description": _STRING,
        "headers": "HeadersMap",
        "content": "MediaTypeMap",
        "links": "LinksMap",
    },
    "required": ["description"],
}

Link = {
    "properties": {
        "operationRef": _STRING,
        "operationId": _STRING,
        "parameters": None,
        "requestBody": None,
        "description": _STRING,
        "server": "Server",
    },
}

Schema = {
    "properties": {
        "externalDocs": "ExternalDocs",
        "discriminator": "Discriminator",
        "title": _STRING,
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
        "allOf": "SchemaList",
        "anyOf": "SchemaList",
        "oneOf": "SchemaList",
        "not": "Schema",
        "properties": "SchemaProperties",
        "items": _schema_items,
        "additionalProperties": _schema_additional_properties,
        "description": _STRING,
        "format": _STRING,
        "default": None,
        "nullable": _BOOLEAN,
        "readOnly": _BOOLEAN,
        "writeOnly": _BOOLEAN,
        "xml": "Xml",
        "example": None,
        "deprecated": _BOOLEAN,
        "x-tags": _STRING_LIST,
    },
}

SchemaProperties = {
    "properties": {},
    "additional_properties": "Schema",
}

Discriminator = {
    "properties": {
        "propertyName": _STRING,
        "mapping": _OBJECT,
    },
    "required": ["propertyName"],
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

Components = {
    "properties": {
        "parameters": "NamedParameters",
        "schemas": "NamedSchemas",
        "responses": "NamedResponses",
        "examples": "NamedExamples",
        "requestBodies": "NamedRequestBodies",
        "headers": "NamedHeaders",
        "securitySchemes": "NamedSecuritySchemes",
        "links": "NamedLinks",
        "callbacks": "NamedCallbacks",
    },
}

SecurityScheme = {
    "properties": {
        "type": {"enum": ["apiKey", "http", "oauth2", "openIdConnect"]},
        "description": _STRING,
        "name": _STRING,
        "in": {"enum": ["query", "header", "cookie"]},
        "scheme": _STRING,
        "bearerFormat": _STRING,
        "flows": "OAuth2Flows",
        "openIdConnectUrl": _STRING,
    },
    "required": _security_scheme_required,
}

OAuth2Flows = {
    "properties": {
        "implicit": "ImplicitFlow",
        "password": "PasswordFlow",
        "clientCredentials": "ClientCredentials",
        "authorizationCode": "AuthorizationCode",
    },
}

ImplicitFlow = {
    "properties": {
        "refreshUrl": _STRING,
        "scopes": _OBJECT,
        "authorizationUrl": _STRING,
    },
    "required": ["authorizationUrl", "scopes"],
}

PasswordFlow = {
    "properties": {
        "refreshUrl": _STRING,
        "scopes": _OBJECT,
        "tokenUrl": _STRING,
    },
    "required": ["tokenUrl", "scopes"],
}

ClientCredentials = {
    "properties": {
        "refreshUrl": _STRING,
        "scopes": _OBJECT,
        "tokenUrl": _STRING,
    },
    "required": ["tokenUrl", "scopes"],
}

AuthorizationCode = {
    "properties": {
        "refreshUrl": _STRING,
        "authorizationUrl": _STRING,
        "scopes": _OBJECT,
        "tokenUrl": _STRING,
    },
    "required": ["authorizationUrl", "tokenUrl", "scopes"],
}

Oas3Types: dict[str, dict[str, Any]] = {
    "Root": Root,
    "Tag": Tag,
    "TagList": list_of("Tag"),
    "ExternalDocs": ExternalDocs,
    "Server": Server,
    "ServerList": list_of("Server"),
    "ServerVariable": ServerVariable,
    "ServerVariableMap": map_of("ServerVariable"),
    "SecurityRequirement": SecurityRequirement,
    "SecurityRequirementList": list_of("SecurityRequirement"),
    "Info": Info,
    "Contact": Contact,
    "License": License,
    "PathMap": PathMap,
    "PathItem": PathItem,
    "Parameter": Parameter,
    "ParameterList": list_of("Parameter"),
    "Callback": Callback,
    "CallbacksMap": map_of("Callback"),
    "Operation": Operation,
    "XCodeSample": XCodeSample,
    "XCodeSampleList": list_of("XCodeSample"),
    "RequestBody": RequestBody,
    "MediaType": MediaType,
    "MediaTypeMap": map_of("MediaType"),
    "Example": Example,
    "ExamplesMap": map_of("Example"),
    "Encoding": Encoding,
    "EncodingMap": map_of("Encoding"),
    "Header": Header,
    "HeadersMap": map_of("Header"),
    "ResponsesMap": ResponsesMap,
    "Response": Response,
    "Link": Link,
    "LinksMap": map_of("Link"),
    "Schema": Schema,
    "SchemaList": list_of("Schema"),
    "SchemaProperties": SchemaProperties,
    "Discriminator": Discriminator,
    "Xml": Xml,
    "Components": Components,
    "NamedSchemas": map_of("Schema"),
    "NamedResponses": map_of("Response"),
    "NamedParameters": map_of("Parameter"),
    "NamedExamples": map_of("Example"),
    "NamedRequestBodies": map_of("RequestBody"),
    "NamedHeaders": map_of("Header"),
    "NamedSecuritySchemes": map_of("SecurityScheme"),
    "NamedLinks": map_of("Link"),
    "NamedCallbacks": map_of("Callback"),
    "SecurityScheme": SecurityScheme,
    "OAuth2Flows": OAuth2Flows,
    "ImplicitFlow": ImplicitFlow,
    "PasswordFlow": PasswordFlow,
    "ClientCredentials": ClientCredentials,
    "AuthorizationCode": AuthorizationCode,
}
