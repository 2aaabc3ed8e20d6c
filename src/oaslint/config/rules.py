"""Rule activation: from rule collections and settings to active checks."""

from collections import Counter
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from oaslint.config.config import RuleSettings
from oaslint.constants import SEVERITY_OFF, CheckKind
from oaslint.exceptions import ConfigurationError
from oaslint.logger import get_logger
from oaslint.types import OasVersion

logger = get_logger(__name__)

RuleConstructor = Callable[[dict[str, Any]], dict[str, Callable[..., None]]]
RuleSet = Mapping[str, RuleConstructor]


class SettingsProvider(Protocol):
    """What the activation engine needs from a configuration object."""

    def get_rule_settings(
        self, rule_id: str, version: OasVersion
    ) -> RuleSettings: ...

    def get_preprocessor_settings(
        self, rule_id: str, version: OasVersion
    ) -> RuleSettings: ...

    def get_decorator_settings(
        self, rule_id: str, version: OasVersion
    ) -> RuleSettings: ...


@dataclass(frozen=True)
class ActiveCheck:
    """A rule at its configured severity, bound to its built visitor."""

    rule_id: str
    severity: str
    visitor: dict[str, Callable[..., None]]


_ACCESSORS: dict[str, str] = {
    "rules": "get_rule_settings",
    "preprocessors": "get_preprocessor_settings",
    "decorators": "get_decorator_settings",
}


def init_rules(
    rule_sets: Sequence[RuleSet],
    config: SettingsProvider,
    kind: CheckKind,
    version: OasVersion,
) -> list[ActiveCheck]:
    """Build the ordered list of active checks.

    Collections are flattened in order (collection order, then key order).
    Entries whose severity is ``off`` are dropped. Rule ids present in more
    than one collection are activated once per occurrence.

    Args:
        rule_sets: Rule id -> constructor collections
        config: Settings source, queried in the ``kind`` namespace
        kind: "rules", "preprocessors" or "decorators"
        version: Description format version the settings apply to

    Returns:
        Active checks in deterministic order

    Raises:
        ConfigurationError: If ``kind`` is unknown or a constructor
            rejects its options

    """
    accessor = _ACCESSORS.get(kind)
    if accessor is None:
        msg = f"Unknown check kind '{kind}'"
        raise ConfigurationError(msg)
    get_settings = getattr(config, accessor)

    counts = Counter(rule_id for rule_set in rule_sets for rule_id in rule_set)
    for rule_id, count in counts.items():
        if count > 1:
            logger.warning(
                "%s '%s' is defined %d times and will run once per definition",
                kind,
                rule_id,
                count,
            )

    active: list[ActiveCheck] = []
    for rule_set in rule_sets:
        for rule_id, build in rule_set.items():
            settings = get_settings(rule_id, version)
            if settings.severity == SEVERITY_OFF:
                logger.debug("Skipping %s '%s': off", kind, rule_id)
                continue

            active.append(
                ActiveCheck(
                    rule_id=rule_id,
                    severity=settings.severity,
                    visitor=build(settings.options),
                )
            )

    logger.debug(
        "Activated %d %s for %s", len(active), kind, version.value
    )
    return active
