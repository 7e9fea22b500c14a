"""Rule registry — built-in, plugin and custom rules by name."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from commitguard.config.schema import SEVERITY_ORDER, ConfigurationError, Severity
from commitguard.message.models import CommitMessage
from commitguard.rules.models import RuleDefinition, RuleFn, RuleResult

logger = logging.getLogger(__name__)

CUSTOM_RULES_DIR = ".commitguard-rules"

_MESSAGE_FIELDS = ("header", "type", "scope", "subject", "body", "footer")


class RuleRegistry:
    """Central store for rule implementations, in registration order.

    Read-only once built; safe to share between lint runs.
    """

    def __init__(self) -> None:
        self._rules: Dict[str, RuleDefinition] = {}
        self._plugins: List[str] = []

    # ---- registration ----

    def register(
        self,
        name: str,
        fn: RuleFn,
        default_severity: Severity = "error",
        *,
        description: str = "",
        source: str = "custom",
    ) -> RuleDefinition:
        definition = RuleDefinition(
            name=name,
            fn=fn,
            default_severity=default_severity,
            description=description,
            source=source,
        )
        self.register_definition(definition)
        return definition

    def register_definition(self, definition: RuleDefinition) -> None:
        severity = definition.default_severity
        if not isinstance(severity, str) or severity not in SEVERITY_ORDER:
            raise ConfigurationError(
                f"Rule '{definition.name}' has unknown default severity "
                f"{definition.default_severity!r}"
            )
        self._rules[definition.name] = definition

    def register_many(self, definitions: list[RuleDefinition]) -> None:
        for d in definitions:
            self.register_definition(d)

    def copy(self) -> "RuleRegistry":
        clone = RuleRegistry()
        clone._rules = dict(self._rules)
        clone._plugins = list(self._plugins)
        return clone

    def use_plugin(self, name: str) -> None:
        """Register the rules contributed by plugin *name* (once)."""
        from commitguard.rules.plugins import get_plugin

        plugin = get_plugin(name)
        if plugin.name in self._plugins:
            return
        plugin.install(self)
        self._plugins.append(plugin.name)
        logger.debug("Plugin %s registered", plugin.name)

    # ---- queries ----

    @property
    def all_rules(self) -> List[RuleDefinition]:
        return list(self._rules.values())

    @property
    def names(self) -> List[str]:
        return list(self._rules)

    @property
    def plugins(self) -> List[str]:
        return list(self._plugins)

    def __contains__(self, name: object) -> bool:
        return name in self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def get(self, name: str) -> Optional[RuleDefinition]:
        return self._rules.get(name)

    def lookup(self, name: str) -> RuleDefinition:
        """Like :meth:`get` but raise ``KeyError`` for unknown names."""
        try:
            return self._rules[name]
        except KeyError:
            raise KeyError(f"Unknown rule: {name}") from None

    def custom_rules(self) -> List[RuleDefinition]:
        return [r for r in self._rules.values() if r.source == "custom"]

    # ---- custom rule loading ----

    def load_custom_rules(self, directory: Path) -> int:
        """Load YAML pattern rules from *directory*. Returns count loaded."""
        count = 0
        if not directory.is_dir():
            return 0
        for path in sorted(directory.iterdir()):
            if path.suffix in (".yaml", ".yml"):
                count += self._load_yaml_rules(path)
        logger.debug("Loaded %d custom rule(s) from %s", count, directory)
        return count

    def _load_yaml_rules(self, path: Path) -> int:
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as exc:
            raise ConfigurationError(f"Failed to read custom rules {path}: {exc}") from exc
        if data is None:
            return 0
        if not isinstance(data, list):
            data = [data]
        count = 0
        for entry in data:
            self.register_definition(pattern_rule_from_dict(entry, origin=str(path)))
            count += 1
        return count


def pattern_rule_from_dict(entry: Any, origin: str = "<custom>") -> RuleDefinition:
    """Build a regex rule over one message field from a custom rule entry."""
    if not isinstance(entry, dict):
        raise ConfigurationError(f"{origin}: custom rule must be a mapping, got {entry!r}")
    try:
        name = entry["name"]
        pattern = entry["pattern"]
    except KeyError as exc:
        raise ConfigurationError(f"{origin}: custom rule is missing {exc.args[0]!r}") from None
    if not isinstance(name, str) or not name:
        raise ConfigurationError(f"{origin}: custom rule name must be a string, got {name!r}")
    if not isinstance(pattern, str):
        raise ConfigurationError(
            f"{origin}: rule '{name}' pattern must be a string, got {pattern!r}"
        )

    field_name = entry.get("field", "scope")
    if field_name not in _MESSAGE_FIELDS:
        raise ConfigurationError(
            f"{origin}: rule '{name}' has unknown field {field_name!r}; "
            f"expected one of {', '.join(_MESSAGE_FIELDS)}"
        )
    severity = entry.get("severity", "error")
    if not isinstance(severity, str) or severity not in SEVERITY_ORDER:
        raise ConfigurationError(
            f"{origin}: rule '{name}' has unknown severity {severity!r}; "
            f"expected one of {', '.join(SEVERITY_ORDER)}"
        )
    try:
        compiled = re.compile(pattern)
    except re.error as exc:
        raise ConfigurationError(f"{origin}: rule '{name}' has invalid pattern: {exc}") from exc

    allow_empty = bool(entry.get("allow_empty", True))
    text = entry.get("message") or f"{field_name} must match {pattern}"

    def check(message: CommitMessage, options=None) -> RuleResult:
        value = getattr(message, field_name)
        if not value and allow_empty:
            return RuleResult.skip()
        return RuleResult(
            passed=compiled.search(value) is not None,
            message=text,
            negated_message=f"{field_name} must not match {pattern}",
        )

    return RuleDefinition(
        name=name,
        fn=check,
        default_severity=severity,
        description=entry.get("description", ""),
        source="custom",
    )


def build_registry(
    plugins: tuple[str, ...] | list[str] = (),
    custom_dir: Optional[Path] = None,
) -> RuleRegistry:
    """Create a registry with the built-in rules, *plugins* and custom rules."""
    from commitguard.rules.builtin import ALL_BUILTIN_RULES

    registry = RuleRegistry()
    registry.register_many(ALL_BUILTIN_RULES)

    for name in plugins:
        registry.use_plugin(name)

    if custom_dir is not None:
        registry.load_custom_rules(custom_dir)

    return registry
