"""Configuration loading, schema, presets and defaults.

The resolver lives in :mod:`commitguard.config.resolver`; it is not imported
here because it depends on the rule registry.
"""

from commitguard.config.loader import ConfigError, load_config
from commitguard.config.schema import (
    CommitGuardConfig,
    ConfigurationError,
    DeclaredConfig,
    ResolvedConfig,
    RuleSpec,
    Severity,
    severity_from_level,
)

__all__ = [
    "CommitGuardConfig",
    "ConfigError",
    "ConfigurationError",
    "DeclaredConfig",
    "ResolvedConfig",
    "RuleSpec",
    "Severity",
    "load_config",
    "severity_from_level",
]
