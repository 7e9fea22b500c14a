"""Presets — reusable rule sets that configurations extend.

A preset is named either by a built-in name or by a path to a TOML/YAML
file, resolved relative to the file that extends it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from commitguard.config.schema import ConfigurationError, DeclaredConfig

CONVENTIONAL_TYPES = [
    "build",
    "chore",
    "ci",
    "docs",
    "feat",
    "fix",
    "perf",
    "refactor",
    "revert",
    "style",
    "test",
]

CONVENTIONAL: Dict[str, Any] = {
    "rules": {
        "body-leading-blank": [1, "always"],
        "body-max-line-length": [2, "always", 100],
        "footer-leading-blank": [1, "always"],
        "footer-max-line-length": [2, "always", 100],
        "header-max-length": [2, "always", 100],
        "subject-case": [
            2,
            "never",
            ["sentence-case", "start-case", "pascal-case", "upper-case"],
        ],
        "subject-empty": [2, "never"],
        "subject-full-stop": [2, "never", "."],
        "type-case": [2, "always", "lower-case"],
        "type-empty": [2, "never"],
        "type-enum": [2, "always", CONVENTIONAL_TYPES],
    },
}

BUILTIN_PRESETS: Dict[str, Dict[str, Any]] = {
    "conventional": CONVENTIONAL,
    "@commitlint/config-conventional": CONVENTIONAL,
}

_PRESET_SUFFIXES = (".toml", ".yaml", ".yml")


class PresetSource:
    """Looks presets up by name, falling back to config files on disk."""

    def __init__(self, presets: Optional[Mapping[str, Any]] = None) -> None:
        self._presets: Dict[str, Any] = dict(BUILTIN_PRESETS)
        if presets:
            self._presets.update(presets)

    @property
    def names(self) -> list[str]:
        return sorted(self._presets)

    def _path_for(self, name: str, base_dir: Optional[str]) -> Optional[Path]:
        if not name.endswith(_PRESET_SUFFIXES):
            return None
        path = Path(name)
        if not path.is_absolute():
            path = Path(base_dir or ".") / path
        return path.resolve()

    def key(self, name: str, base_dir: Optional[str] = None) -> str:
        """Identity of a preset, used to detect extends cycles."""
        if name in self._presets:
            return name
        path = self._path_for(name, base_dir)
        return str(path) if path is not None else name

    def load(self, name: str, base_dir: Optional[str] = None) -> DeclaredConfig:
        if name in self._presets:
            value = self._presets[name]
            if isinstance(value, DeclaredConfig):
                return value
            return DeclaredConfig.from_mapping(value, base_dir=base_dir)

        path = self._path_for(name, base_dir)
        if path is None or not path.is_file():
            raise ConfigurationError(
                f"Unknown preset '{name}'; built-in presets: {', '.join(self.names)}"
            )

        from commitguard.config.loader import read_config_file

        return DeclaredConfig.from_mapping(read_config_file(path), base_dir=str(path.parent))
