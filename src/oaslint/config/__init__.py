"""Configuration management - rule settings, activation and loading.

This package provides:
- LintConfig / RuleSettings: per-rule severity and options (config.py)
- init_rules / ActiveCheck: rule activation engine (rules.py)
- ConfigLoader / load_config: INI file loading (loader.py)
"""

from oaslint.config.config import LintConfig, RuleSettings
from oaslint.config.loader import ConfigLoader, load_config
from oaslint.config.rules import ActiveCheck, SettingsProvider, init_rules

__all__ = [
    "ActiveCheck",
    "ConfigLoader",
    "LintConfig",
    "RuleSettings",
    "SettingsProvider",
    "init_rules",
    "load_config",
]
