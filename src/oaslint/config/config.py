"""Lint configuration: severities and options per rule id.

Settings are kept per namespace (rules, preprocessors, decorators) and per
description format version. Lookups resolve in this order:

1. the version-specific section (``[oas3_0.rules]``)
2. the generic section (``[rules]``)
3. the recommended preset, unless ``extends_recommended`` is False
4. ``off``
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from oaslint.constants import (
    CHECK_KINDS,
    DEFAULT_CONSOLE_LOG_LEVEL,
    DEFAULT_LOG_LEVEL,
    DEFAULT_OBJECT_SEVERITY,
    RECOMMENDED_RULES,
    SEVERITIES,
    SEVERITY_OFF,
)
from oaslint.exceptions import ConfigurationError
from oaslint.types import OasVersion

# Raw setting: a bare severity or {"severity": ..., **options}
RawSetting = str | Mapping[str, Any]


@dataclass(frozen=True)
class RuleSettings:
    """Severity and constructor options for one rule id."""

    severity: str
    options: dict[str, Any] = field(default_factory=dict)


def _check_setting(kind: str, rule_id: str, setting: Any) -> None:
    if isinstance(setting, str):
        severity = setting
    elif isinstance(setting, Mapping):
        severity = setting.get("severity", DEFAULT_OBJECT_SEVERITY)
    else:
        msg = f"Setting must be a severity or an object, got {setting!r}"
        raise ConfigurationError(msg, target=f"{kind}.{rule_id}")

    if severity not in SEVERITIES:
        msg = (
            f"Unknown severity '{severity}', "
            f"expected one of: {', '.join(SEVERITIES)}"
        )
        raise ConfigurationError(msg, target=f"{kind}.{rule_id}")


def _to_settings(setting: RawSetting) -> RuleSettings:
    if isinstance(setting, str):
        return RuleSettings(severity=setting)
    options = {k: v for k, v in setting.items() if k != "severity"}
    return RuleSettings(
        severity=setting.get("severity", DEFAULT_OBJECT_SEVERITY),
        options=options,
    )


class LintConfig:
    """Rule settings for one lint run.

    Passed explicitly to the activation engine; nothing here is process
    wide, so runs with different configs never interfere.
    """

    def __init__(
        self,
        rules: Mapping[str, RawSetting] | None = None,
        preprocessors: Mapping[str, RawSetting] | None = None,
        decorators: Mapping[str, RawSetting] | None = None,
        *,
        versions: Mapping[str, Mapping[str, Mapping[str, RawSetting]]]
        | None = None,
        extends_recommended: bool = True,
        log_level: str = DEFAULT_LOG_LEVEL,
        console_log_level: str = DEFAULT_CONSOLE_LOG_LEVEL,
    ) -> None:
        """Initialize configuration.

        Args:
            rules: Generic rule settings
            preprocessors: Generic preprocessor settings
            decorators: Generic decorator settings
            versions: Version value ("oas2", "oas3_0") -> namespace ->
                settings overriding the generic ones
            extends_recommended: Start from the recommended preset
            log_level: File log level
            console_log_level: Console log level

        Raises:
            ConfigurationError: On unknown versions, namespaces or
                severities

        """
        self.extends_recommended = extends_recommended
        self.log_level = log_level
        self.console_log_level = console_log_level

        generic: dict[str, dict[str, RawSetting]] = {
            "rules": dict(RECOMMENDED_RULES) if extends_recommended else {},
            "preprocessors": {},
            "decorators": {},
        }
        for kind, values in (
            ("rules", rules),
            ("preprocessors", preprocessors),
            ("decorators", decorators),
        ):
            generic[kind].update(values or {})

        known_versions = {version.value: version for version in OasVersion}
        overrides = versions or {}
        for version_name, namespaces in overrides.items():
            if version_name not in known_versions:
                msg = (
                    f"Unknown version '{version_name}', "
                    f"expected one of: {', '.join(known_versions)}"
                )
                raise ConfigurationError(msg)
            for kind in namespaces:
                if kind not in CHECK_KINDS:
                    msg = f"Unknown settings namespace '{kind}'"
                    raise ConfigurationError(msg, target=version_name)

        self._settings: dict[str, dict[OasVersion, dict[str, RawSetting]]] = {}
        for kind in CHECK_KINDS:
            self._settings[kind] = {}
            for version_name, version in known_versions.items():
                merged = dict(generic[kind])
                merged.update(overrides.get(version_name, {}).get(kind, {}))
                for rule_id, setting in merged.items():
                    _check_setting(kind, rule_id, setting)
                self._settings[kind][version] = merged

    def _get(self, kind: str, rule_id: str, version: OasVersion) -> RuleSettings:
        setting = self._settings[kind][version].get(rule_id, SEVERITY_OFF)
        return _to_settings(setting)

    def get_rule_settings(
        self, rule_id: str, version: OasVersion
    ) -> RuleSettings:
        return self._get("rules", rule_id, version)

    def get_preprocessor_settings(
        self, rule_id: str, version: OasVersion
    ) -> RuleSettings:
        return self._get("preprocessors", rule_id, version)

    def get_decorator_settings(
        self, rule_id: str, version: OasVersion
    ) -> RuleSettings:
        return self._get("decorators", rule_id, version)
