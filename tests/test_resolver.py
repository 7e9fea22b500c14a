"""Tests for preset merging and configuration resolution."""

from pathlib import Path

import pytest

from commitguard.config.presets import PresetSource
from commitguard.config.resolver import collect_plugins, resolve
from commitguard.config.schema import ConfigurationError, DeclaredConfig, severity_from_level
from commitguard.rules.models import CustomRule
from commitguard.rules.registry import RuleRegistry, build_registry


class TestSeverityLevels:
    def test_levels(self):
        assert severity_from_level(0) == "off"
        assert severity_from_level(1) == "warning"
        assert severity_from_level(2) == "error"

    @pytest.mark.parametrize("level", [3, -1, "2", True, None, 1.0])
    def test_bad_levels(self, level):
        with pytest.raises(ConfigurationError):
            severity_from_level(level)


class TestReferenceConfig:
    def test_resolves(self, reference_config):
        config = resolve(reference_config)
        assert config.get("scope-empty").applicability == "never"
        assert config.get("header-max-length").severity == "off"
        assert config.get("header-max-length").options == 80
        assert config.get("function-rules/scope-enum").severity == "error"
        assert config.plugins == ("function-rules",)

    def test_local_rules_override_preset(self, reference_config):
        config = resolve(reference_config)
        # preset says never [sentence, start, pascal, upper]; local says always all eight
        subject_case = config.get("subject-case")
        assert subject_case.applicability == "always"
        assert len(subject_case.options) == 8

    def test_preset_rules_kept(self, reference_config):
        config = resolve(reference_config)
        assert config.get("body-max-line-length").options == 100

    def test_options_frozen(self, reference_config):
        config = resolve(reference_config)
        assert isinstance(config.get("type-enum").options, tuple)


class TestUnknownNames:
    def test_unknown_rule_raises(self):
        with pytest.raises(ConfigurationError, match="not-a-real-rule"):
            resolve({"rules": {"not-a-real-rule": [2, "always"]}})

    def test_unknown_rule_runs_nothing(self):
        calls = []
        reg = RuleRegistry()
        reg.register("spy", lambda msg, opts: calls.append(msg) or True)
        with pytest.raises(ConfigurationError):
            resolve(
                {"rules": {"spy": [2, "always"], "not-a-real-rule": [2, "always"]}},
                registry=reg,
            )
        assert calls == []

    def test_plugin_rule_needs_plugin(self):
        with pytest.raises(ConfigurationError, match="function-rules/scope-enum"):
            resolve({"rules": {"function-rules/scope-enum": [2, "always", lambda m: [True]]}})

    def test_unknown_plugin(self):
        with pytest.raises(ConfigurationError, match="Unknown plugin"):
            resolve({"plugins": ["nope"]})

    def test_unknown_preset(self):
        with pytest.raises(ConfigurationError, match="Unknown preset"):
            resolve({"extends": ["does-not-exist"]})


class TestEntryShape:
    @pytest.mark.parametrize(
        "entry",
        [
            2,
            "error",
            [],
            [2, "always", None, "extra"],
            [2, "sometimes"],
            [5],
        ],
    )
    def test_malformed_entries(self, entry):
        with pytest.raises(ConfigurationError, match="type-empty"):
            resolve({"rules": {"type-empty": entry}})

    def test_disabled_rules_still_validated(self):
        with pytest.raises(ConfigurationError, match="header-max-length"):
            resolve({"rules": {"header-max-length": [0, "always", "eighty"]}})

    def test_disabled_without_options(self):
        config = resolve({"rules": {"scope-enum": [0]}})
        assert config.get("scope-enum").enabled is False

    def test_applicability_defaults_to_always(self):
        assert resolve({"rules": {"type-empty": [2]}}).get("type-empty").applicability == "always"

    @pytest.mark.parametrize(
        "name, options",
        [
            ("type-enum", "feat"),
            ("type-enum", [1, 2]),
            ("type-case", "title-case"),
            ("subject-full-stop", ".."),
            ("body-max-line-length", 0),
        ],
    )
    def test_bad_options(self, name, options):
        with pytest.raises(ConfigurationError, match=name):
            resolve({"rules": {name: [2, "always", options]}})

    def test_function_rule_needs_callable(self):
        with pytest.raises(ConfigurationError, match="expects a function"):
            resolve({
                "plugins": ["function-rules"],
                "rules": {"function-rules/scope-enum": [2, "always", "regex"]},
            })


class TestMerging:
    def test_extends_order_later_wins(self):
        presets = {
            "a": {"rules": {"type-empty": [1, "never"], "scope-empty": [2, "never"]}},
            "b": {"rules": {"type-empty": [2, "never"]}},
        }
        config = resolve({"extends": ["a", "b"]}, presets=presets)
        assert config.get("type-empty").severity == "error"
        assert config.names == ["type-empty", "scope-empty"]

    def test_nested_presets(self):
        presets = {
            "base": {"rules": {"type-empty": [2, "never"]}},
            "team": {"extends": ["base"], "rules": {"subject-empty": [2, "never"]}},
        }
        config = resolve({"extends": ["team"], "rules": {"type-empty": [1, "never"]}}, presets=presets)
        assert config.names == ["type-empty", "subject-empty"]
        assert config.get("type-empty").severity == "warning"

    def test_cycle_detected(self):
        presets = {
            "a": {"extends": ["b"]},
            "b": {"extends": ["a"]},
        }
        with pytest.raises(ConfigurationError, match="Cyclic extends: a -> b -> a"):
            resolve({"extends": ["a"]}, presets=presets)

    def test_self_cycle(self):
        with pytest.raises(ConfigurationError, match="Cyclic"):
            resolve({"extends": ["loop"]}, presets={"loop": {"extends": ["loop"]}})

    def test_diamond_is_not_a_cycle(self):
        presets = {
            "base": {"rules": {"type-empty": [2, "never"]}},
            "left": {"extends": ["base"]},
            "right": {"extends": ["base"]},
        }
        config = resolve({"extends": ["left", "right"]}, presets=presets)
        assert "type-empty" in config

    def test_preset_plugins_apply(self):
        presets = {"fn": {"plugins": ["function-rules"]}}
        config = resolve(
            {"extends": ["fn"], "rules": {"function-rules/type-enum": [2, "always", lambda m: True]}},
            presets=presets,
        )
        assert "function-rules/type-enum" in config

    def test_preset_file(self, tmp_path: Path):
        (tmp_path / "base.toml").write_text('[rules]\n"type-empty" = [2, "never"]\n')
        (tmp_path / "team.yaml").write_text(
            "extends: [base.toml]\nrules:\n  subject-empty: [2, never]\n"
        )
        declared = DeclaredConfig(extends=["team.yaml"], base_dir=str(tmp_path))
        config = resolve(declared)
        assert config.names == ["type-empty", "subject-empty"]

    def test_preset_file_cycle(self, tmp_path: Path):
        (tmp_path / "a.toml").write_text('extends = ["b.toml"]\n')
        (tmp_path / "b.toml").write_text('extends = ["a.toml"]\n')
        with pytest.raises(ConfigurationError, match="Cyclic"):
            resolve(DeclaredConfig(extends=["a.toml"], base_dir=str(tmp_path)))

    def test_collect_plugins_follows_extends(self):
        presets = {"fn": {"plugins": ["commitlint-plugin-function-rules"]}}
        declared = {"extends": ["fn"], "plugins": ["function-rules"]}
        assert collect_plugins(declared, presets=presets) == [
            "commitlint-plugin-function-rules",
            "function-rules",
        ]

    def test_builtin_preset_names(self):
        assert "conventional" in PresetSource().names


class TestInlineRules:
    def test_custom_rule_accepted_without_registration(self):
        rule = CustomRule(fn=lambda msg, opts: [True], level=1)
        config = resolve({"rules": {"team/ticket": rule}})
        spec = config.get("team/ticket")
        assert spec.inline is True
        assert spec.severity == "warning"

    def test_custom_rule_bad_level(self):
        with pytest.raises(ConfigurationError, match="team/ticket"):
            resolve({"rules": {"team/ticket": CustomRule(fn=lambda m, o: True, level=7)}})


class TestRegistryHandling:
    def test_callers_registry_untouched(self):
        reg = build_registry()
        resolve({"plugins": ["function-rules"]}, registry=reg)
        assert reg.plugins == []

    def test_custom_dir_rules_enabled_by_default(self, tmp_path: Path):
        rules_dir = tmp_path / ".commitguard-rules"
        rules_dir.mkdir()
        (rules_dir / "ticket.yaml").write_text(
            "- name: scope-ticket\n  pattern: '[A-Z]+-[0-9]+'\n  severity: warning\n"
        )
        config = resolve({}, custom_dir=rules_dir)
        assert config.get("scope-ticket").severity == "warning"

        disabled = resolve({"rules": {"scope-ticket": [0]}}, custom_dir=rules_dir)
        assert disabled.get("scope-ticket").enabled is False
