"""Retention rule configuration.

This module loads and validates rule files (JSON or TOML) and writes
starter configurations.
"""

from logsweep.config.loader import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    JsonRuleLoader,
    RuleLoader,
    TomlRuleLoader,
    get_loader,
    load_rules,
    require_rules,
)
from logsweep.config.models import RuleEntry, RuleSet
from logsweep.config.starter import ConfigFormat, write_starter_config

__all__ = [
    "ConfigError",
    "ConfigFormat",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "JsonRuleLoader",
    "RuleEntry",
    "RuleLoader",
    "RuleSet",
    "TomlRuleLoader",
    "get_loader",
    "load_rules",
    "require_rules",
    "write_starter_config",
]
