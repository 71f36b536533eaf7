"""
Configuration for strvalid rule sets.
"""

from .rules_config import (
    RuleConfig,
    RulesConfig,
    format_config_error,
    load_rules_config,
)

__all__ = [
    "RuleConfig",
    "RulesConfig",
    "format_config_error",
    "load_rules_config",
]
