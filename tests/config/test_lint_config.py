"""Tests for LintConfig settings lookup."""

import pytest

from oaslint.config import LintConfig, RuleSettings
from oaslint.exceptions import ConfigurationError
from oaslint.types import OasVersion

V2 = OasVersion.VERSION2
V3 = OasVersion.VERSION3_0


class TestRuleSettings:
    def test_recommended_preset_by_default(self):
        config = LintConfig()

        assert config.get_rule_settings("struct", V3) == RuleSettings("error")
        assert config.get_rule_settings("info-license", V2).severity == "warn"

    def test_unknown_rule_is_off(self):
        config = LintConfig()

        assert config.get_rule_settings("no-such-rule", V3).severity == "off"

    def test_without_recommended_everything_is_off(self):
        config = LintConfig(extends_recommended=False)

        assert config.get_rule_settings("struct", V3).severity == "off"

    def test_generic_setting_overrides_preset(self):
        config = LintConfig(rules={"info-license": "off"})

        assert config.get_rule_settings("info-license", V3).severity == "off"
        assert config.get_rule_settings("info-contact", V3).severity == "warn"

    def test_object_setting_without_severity_is_error(self):
        config = LintConfig(rules={"my-rule": {"max": 3}})

        settings = config.get_rule_settings("my-rule", V3)
        assert settings.severity == "error"
        assert settings.options == {"max": 3}

    def test_object_setting_options_exclude_severity(self):
        config = LintConfig(rules={"my-rule": {"severity": "warn", "max": 3}})

        settings = config.get_rule_settings("my-rule", V3)
        assert settings == RuleSettings("warn", {"max": 3})

    def test_version_section_overrides_generic(self):
        config = LintConfig(
            rules={"operation-summary": "warn"},
            versions={"oas2": {"rules": {"operation-summary": "off"}}},
        )

        assert config.get_rule_settings("operation-summary", V2).severity == "off"
        assert config.get_rule_settings("operation-summary", V3).severity == "warn"


class TestNamespaces:
    def test_namespaces_are_independent(self):
        config = LintConfig(
            rules={"shared-id": "error"},
            preprocessors={"shared-id": "warn"},
        )

        assert config.get_rule_settings("shared-id", V3).severity == "error"
        assert config.get_preprocessor_settings("shared-id", V3).severity == "warn"
        assert config.get_decorator_settings("shared-id", V3).severity == "off"

    def test_preset_only_covers_rules(self):
        config = LintConfig()

        assert config.get_preprocessor_settings("struct", V3).severity == "off"


class TestValidation:
    def test_unknown_severity(self):
        with pytest.raises(ConfigurationError) as exc_info:
            LintConfig(rules={"struct": "fatal"})

        assert exc_info.value.target == "rules.struct"

    def test_unknown_severity_in_object(self):
        with pytest.raises(ConfigurationError):
            LintConfig(decorators={"x": {"severity": "loud"}})

    def test_setting_of_wrong_shape(self):
        with pytest.raises(ConfigurationError):
            LintConfig(rules={"struct": 1})

    def test_unknown_version(self):
        with pytest.raises(ConfigurationError, match="oas3_1"):
            LintConfig(versions={"oas3_1": {"rules": {}}})

    def test_unknown_namespace(self):
        with pytest.raises(ConfigurationError):
            LintConfig(versions={"oas2": {"plugins": {}}})
