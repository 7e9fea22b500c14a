"""Configuration resolver.

Turns a declared configuration (extends + plugins + rules) into one flat,
validated :class:`ResolvedConfig`:

1. presets are loaded recursively and merged in declaration order,
2. the local ``rules`` map is applied last,
3. every entry is checked for shape and every name against the registry.

Nothing is evaluated until the whole configuration has resolved, so a bad
entry never leaves a partially applied configuration behind.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from commitguard.config.presets import PresetSource
from commitguard.config.schema import (
    APPLICABILITIES,
    SEVERITY_ORDER,
    ConfigurationError,
    DeclaredConfig,
    ResolvedConfig,
    RuleSpec,
    severity_from_level,
)
from commitguard.rules.models import CustomRule
from commitguard.rules.plugins import get_plugin
from commitguard.rules.registry import RuleRegistry, build_registry

logger = logging.getLogger(__name__)


def _as_declared(declared: Union[DeclaredConfig, Mapping[str, Any]]) -> DeclaredConfig:
    if isinstance(declared, DeclaredConfig):
        return declared
    return DeclaredConfig.from_mapping(dict(declared))


def _collect_layers(
    config: DeclaredConfig,
    presets: PresetSource,
    chain: Tuple[str, ...],
) -> List[DeclaredConfig]:
    """Flatten the extends tree into merge order, *config* last."""
    layers: List[DeclaredConfig] = []
    for name in config.extends:
        key = presets.key(name, config.base_dir)
        if key in chain:
            cycle = " -> ".join([*chain, key])
            raise ConfigurationError(f"Cyclic extends: {cycle}")
        preset = presets.load(name, config.base_dir)
        layers.extend(_collect_layers(preset, presets, (*chain, key)))
    layers.append(config)
    return layers


def _layer_plugins(layers: Sequence[DeclaredConfig]) -> List[str]:
    plugins: List[str] = []
    for layer in layers:
        for name in layer.plugins:
            if name not in plugins:
                plugins.append(name)
    return plugins


def collect_plugins(
    declared: Union[DeclaredConfig, Mapping[str, Any]],
    presets: Union[PresetSource, Mapping[str, Any], None] = None,
) -> List[str]:
    """Plugin names enabled by *declared* or any preset it extends."""
    if not isinstance(presets, PresetSource):
        presets = PresetSource(presets)
    layers = _collect_layers(_as_declared(declared), presets, chain=())
    return _layer_plugins(layers)


def _freeze(value: Any) -> Any:
    """Make option values immutable (lists become tuples)."""
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _unpack_entry(name: str, entry: Any) -> Tuple[int, str, Any]:
    if isinstance(entry, (str, bytes)) or not isinstance(entry, Sequence):
        raise ConfigurationError(
            f"Rule '{name}' must be [level, applicability, options], got {entry!r}"
        )
    if not 1 <= len(entry) <= 3:
        raise ConfigurationError(
            f"Rule '{name}' must have 1 to 3 items "
            f"[level, applicability, options], got {len(entry)}"
        )
    level = entry[0]
    applicability = entry[1] if len(entry) > 1 else "always"
    options = entry[2] if len(entry) > 2 else None
    return level, applicability, options


def _check_applicability(name: str, applicability: Any) -> None:
    if applicability not in APPLICABILITIES:
        raise ConfigurationError(
            f"Rule '{name}' applicability must be 'always' or 'never', "
            f"got {applicability!r}"
        )


def _build_spec(name: str, entry: Any, registry: RuleRegistry) -> RuleSpec:
    if isinstance(entry, CustomRule):
        _check_applicability(name, entry.applicability)
        return RuleSpec(
            name=name,
            severity=_severity(name, entry.level),
            applicability=entry.applicability,
            options=_freeze(entry.options),
            impl=entry.fn,
            inline=True,
        )

    definition = registry.get(name)
    if definition is None:
        raise ConfigurationError(f"Unknown rule '{name}'")

    level, applicability, options = _unpack_entry(name, entry)
    severity = _severity(name, level)
    _check_applicability(name, applicability)
    # disabled rules are still checked for shape
    definition.validate_options(options)

    return RuleSpec(
        name=name,
        severity=severity,
        applicability=applicability,
        options=_freeze(options),
        impl=definition.fn,
    )


def _severity(name: str, level: Any):
    try:
        return severity_from_level(level)
    except ConfigurationError as exc:
        raise ConfigurationError(f"Rule '{name}': {exc}") from None


def _prepare_registry(
    registry: Optional[RuleRegistry],
    plugins: Sequence[str],
    custom_dir: Optional[Path],
) -> RuleRegistry:
    if registry is None:
        return build_registry(plugins, custom_dir)
    missing = [p for p in plugins if get_plugin(p).name not in registry.plugins]
    if not missing:
        return registry
    # leave the caller's registry untouched
    extended = registry.copy()
    for name in missing:
        extended.use_plugin(name)
    return extended


def resolve(
    declared: Union[DeclaredConfig, Mapping[str, Any]],
    registry: Optional[RuleRegistry] = None,
    presets: Union[PresetSource, Mapping[str, Any], None] = None,
    *,
    custom_dir: Optional[Path] = None,
) -> ResolvedConfig:
    """Merge presets and local rules into a validated :class:`ResolvedConfig`.

    Raises :class:`ConfigurationError` for unknown rules, plugins or presets,
    cyclic extends, and malformed rule entries.
    """
    config = _as_declared(declared)
    if not isinstance(presets, PresetSource):
        presets = PresetSource(presets)

    layers = _collect_layers(config, presets, chain=())
    registry = _prepare_registry(registry, _layer_plugins(layers), custom_dir)

    merged: Dict[str, Any] = {}
    for layer in layers:
        for name, entry in layer.rules.items():
            merged[name] = entry

    # custom rule files are active unless the configuration says otherwise
    for definition in registry.custom_rules():
        merged.setdefault(definition.name, [SEVERITY_ORDER[definition.default_severity]])

    specs = tuple(_build_spec(name, entry, registry) for name, entry in merged.items())

    logger.debug(
        "Resolved %d rule(s) (%d enabled) from %d layer(s)",
        len(specs),
        sum(1 for s in specs if s.enabled),
        len(layers),
    )
    return ResolvedConfig(rules=specs, plugins=tuple(registry.plugins))
