"""OpenAPI 3.0 rule, preprocessor and decorator collections."""

from oaslint.rules.common.info import info_contact, info_license
from oaslint.rules.common.no_unresolved_refs import no_unresolved_refs
from oaslint.rules.common.operation import (
    operation_operation_id,
    operation_summary,
)
from oaslint.rules.common.struct import struct_rule
from oaslint.rules.common.tags import tag_description
from oaslint.rules.oas3.no_empty_servers import no_empty_servers

rules = {
    "struct": struct_rule,
    "no-unresolved-refs": no_unresolved_refs,
    "info-contact": info_contact,
    "info-license": info_license,
    "operation-operationId": operation_operation_id,
    "operation-summary": operation_summary,
    "tag-description": tag_description,
    "no-empty-servers": no_empty_servers,
}

preprocessors: dict = {}

decorators: dict = {}
