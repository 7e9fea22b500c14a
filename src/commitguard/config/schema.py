"""Configuration schema — severities, rule specs, declared and resolved configs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Literal, Optional, Tuple

Severity = Literal["off", "warning", "error"]
Applicability = Literal["always", "never"]

SEVERITY_ORDER: dict[str, int] = {
    "off": 0,
    "warning": 1,
    "error": 2,
}

SEVERITY_BY_LEVEL: dict[int, Severity] = {0: "off", 1: "warning", 2: "error"}

APPLICABILITIES: Tuple[str, ...] = ("always", "never")

OUTPUT_FORMATS: Tuple[str, ...] = ("terminal", "json", "text")


class ConfigurationError(Exception):
    """Raised when a configuration cannot be resolved.

    Always raised before any rule is evaluated.
    """


def severity_from_level(level: Any) -> Severity:
    """Map an integer rank (0=off, 1=warning, 2=error) to a severity."""
    if isinstance(level, bool) or not isinstance(level, int):
        raise ConfigurationError(
            f"Severity level must be 0, 1 or 2, got {level!r}"
        )
    try:
        return SEVERITY_BY_LEVEL[level]
    except KeyError:
        raise ConfigurationError(
            f"Severity level must be 0, 1 or 2, got {level}"
        ) from None


@dataclass(frozen=True)
class RuleSpec:
    """One configured rule: how severe, which way round, with what options."""

    name: str
    severity: Severity
    applicability: Applicability = "always"
    options: Any = None
    # bound implementation; None only for specs built by hand in tests
    impl: Optional[Callable[..., Any]] = field(default=None, repr=False, compare=False)
    inline: bool = False  # implementation supplied in the config, not the registry

    @property
    def enabled(self) -> bool:
        return self.severity != "off"


@dataclass(frozen=True)
class ResolvedConfig:
    """Flat, validated rule configuration in declaration order."""

    rules: Tuple[RuleSpec, ...] = ()
    plugins: Tuple[str, ...] = ()

    def __iter__(self) -> Iterator[RuleSpec]:
        return iter(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __contains__(self, name: object) -> bool:
        return any(spec.name == name for spec in self.rules)

    def get(self, name: str) -> Optional[RuleSpec]:
        for spec in self.rules:
            if spec.name == name:
                return spec
        return None

    @property
    def names(self) -> List[str]:
        return [spec.name for spec in self.rules]

    @property
    def enabled_rules(self) -> List[RuleSpec]:
        return [spec for spec in self.rules if spec.enabled]


@dataclass
class DeclaredConfig:
    """Configuration as written by the user, before preset merging.

    ``rules`` maps a rule name to ``[level, applicability, options]`` (the
    trailing items optional) or to a :class:`~commitguard.rules.models.CustomRule`.
    """

    extends: List[str] = field(default_factory=list)
    plugins: List[str] = field(default_factory=list)
    rules: Dict[str, Any] = field(default_factory=dict)
    # directory that relative preset paths are resolved against
    base_dir: Optional[str] = None

    @classmethod
    def from_mapping(cls, data: Dict[str, Any], base_dir: Optional[str] = None) -> "DeclaredConfig":
        """Build from a plain mapping, checking the top-level shape."""
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )
        extends = data.get("extends", [])
        plugins = data.get("plugins", [])
        rules = data.get("rules", {})
        if isinstance(extends, str):
            extends = [extends]
        if not isinstance(extends, list) or not all(isinstance(e, str) for e in extends):
            raise ConfigurationError("'extends' must be a list of preset names")
        if not isinstance(plugins, list) or not all(isinstance(p, str) for p in plugins):
            raise ConfigurationError("'plugins' must be a list of plugin names")
        if not isinstance(rules, dict):
            raise ConfigurationError("'rules' must be a mapping of rule name to entry")
        return cls(
            extends=list(extends),
            plugins=list(plugins),
            rules=dict(rules),
            base_dir=base_dir,
        )


@dataclass
class OutputConfig:
    format: Literal["terminal", "json", "text"] = "terminal"
    show_summary: bool = True


@dataclass
class CommitGuardConfig:
    """Everything loaded from a config file: the rule declaration plus output."""

    declared: DeclaredConfig = field(
        default_factory=lambda: DeclaredConfig(extends=["conventional"])
    )
    output: OutputConfig = field(default_factory=OutputConfig)
    source: Optional[str] = None  # path of the file this came from
