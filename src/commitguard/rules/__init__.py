"""Rules — models, registry, plugins, built-in rules."""

from commitguard.rules.models import CustomRule, RuleDefinition, RuleResult
from commitguard.rules.registry import RuleRegistry, build_registry

__all__ = ["CustomRule", "RuleDefinition", "RuleRegistry", "RuleResult", "build_registry"]
