"""Load configuration from .commitguard.toml / .commitguard.yaml and env vars."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import yaml

from commitguard.config.schema import (
    OUTPUT_FORMATS,
    CommitGuardConfig,
    ConfigurationError,
    DeclaredConfig,
    OutputConfig,
)

logger = logging.getLogger(__name__)

CONFIG_FILENAMES = (".commitguard.toml", ".commitguard.yaml", ".commitguard.yml")


class ConfigError(ConfigurationError):
    """Raised when a config file is missing, unreadable or malformed."""


def find_config_file(root: Path, override: Optional[str] = None) -> Optional[Path]:
    """Locate the config file. *override* takes precedence."""
    if override:
        p = Path(override)
        if not p.is_file():
            raise ConfigError(f"Config file not found: {override}")
        return p
    for name in CONFIG_FILENAMES:
        candidate = root / name
        if candidate.is_file():
            return candidate
    return None


def _parse_toml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc


def _parse_yaml(path: Path) -> Dict[str, Any]:
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Failed to parse {path}: top level must be a mapping")
    return data


def read_config_file(path: Path) -> Dict[str, Any]:
    """Parse a TOML or YAML config file into a plain dict."""
    if path.suffix in (".yaml", ".yml"):
        return _parse_yaml(path)
    return _parse_toml(path)


def _build_output(data: Dict[str, Any]) -> OutputConfig:
    """Build OutputConfig from the [output] section, ignoring unknown keys."""
    import dataclasses

    section = data.get("output", {})
    if not isinstance(section, dict):
        raise ConfigError("[output] must be a table")
    valid_fields = {f.name for f in dataclasses.fields(OutputConfig)}
    cfg = OutputConfig(**{k: v for k, v in section.items() if k in valid_fields})
    if cfg.format not in OUTPUT_FORMATS:
        raise ConfigError(
            f"Unknown output format {cfg.format!r}; expected one of {', '.join(OUTPUT_FORMATS)}"
        )
    return cfg


def _merge_env_overrides(cfg: CommitGuardConfig) -> None:
    """Apply COMMITGUARD_* environment variable overrides."""
    if val := os.environ.get("COMMITGUARD_FORMAT"):
        if val in OUTPUT_FORMATS:
            cfg.output.format = val  # type: ignore[assignment]
        else:
            logger.warning("Ignoring COMMITGUARD_FORMAT=%s: unknown format", val)
    if val := os.environ.get("COMMITGUARD_DISABLE_RULES"):
        for name in (r.strip() for r in val.split(",")):
            if name:
                cfg.declared.rules[name] = [0]


def load_config(
    root: Path,
    config_override: Optional[str] = None,
) -> CommitGuardConfig:
    """Load and return a CommitGuardConfig.

    Rule names are not checked here; that happens when the declared
    configuration is resolved.
    """
    config_path = find_config_file(root, config_override)

    if config_path is None:
        logger.info("No config file found in %s, using the conventional preset", root)
        cfg = CommitGuardConfig()
    else:
        logger.info("Using config file %s", config_path)
        raw = read_config_file(config_path)
        try:
            declared = DeclaredConfig.from_mapping(raw, base_dir=str(config_path.parent))
        except ConfigurationError as exc:
            raise ConfigError(f"{config_path}: {exc}") from exc
        cfg = CommitGuardConfig(
            declared=declared,
            output=_build_output(raw),
            source=str(config_path),
        )

    _merge_env_overrides(cfg)
    return cfg
