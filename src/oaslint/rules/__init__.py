"""Built-in rule collections, keyed by description format version.

A collection maps a rule id to a constructor ``(options) -> visitor``.
"""

from oaslint.rules import oas2, oas3
from oaslint.types import OasVersion

BUILTIN_RULES = {
    OasVersion.VERSION2: oas2.rules,
    OasVersion.VERSION3_0: oas3.rules,
}

BUILTIN_PREPROCESSORS = {
    OasVersion.VERSION2: oas2.preprocessors,
    OasVersion.VERSION3_0: oas3.preprocessors,
}

BUILTIN_DECORATORS = {
    OasVersion.VERSION2: oas2.decorators,
    OasVersion.VERSION3_0: oas3.decorators,
}
