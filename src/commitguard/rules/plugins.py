"""Rule plugins.

A plugin contributes extra rule names to a registry. The bundled
``function-rules`` plugin exposes ``function-rules/<rule>`` for every
built-in rule; its option is a function ``fn(message) -> (bool, message)``
that replaces the built-in check, so project specific checks (such as
"scope must be a ticket id") need no new registry entry.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict

from commitguard.config.schema import ConfigurationError
from commitguard.message.models import CommitMessage
from commitguard.rules.models import RuleDefinition, RuleResult, check_callable

if TYPE_CHECKING:
    from commitguard.rules.registry import RuleRegistry

FUNCTION_RULES_PREFIX = "function-rules/"


@dataclass(frozen=True)
class Plugin:
    name: str
    install: Callable[["RuleRegistry"], None]
    description: str = ""


def call_function_rule(message: CommitMessage, options: Any) -> RuleResult:
    if options is None:
        return RuleResult.skip()
    return RuleResult.coerce(options(message))


def _install_function_rules(registry: "RuleRegistry") -> None:
    from commitguard.rules.builtin import ALL_BUILTIN_RULES

    for builtin in ALL_BUILTIN_RULES:
        registry.register_definition(
            RuleDefinition(
                name=FUNCTION_RULES_PREFIX + builtin.name,
                fn=call_function_rule,
                default_severity=builtin.default_severity,
                description=f"{builtin.name} checked by a user supplied function.",
                check_options=check_callable,
                source="plugin",
            )
        )


FUNCTION_RULES = Plugin(
    name="function-rules",
    install=_install_function_rules,
    description="Rules whose check is a function given as the rule option.",
)

PLUGINS: Dict[str, Plugin] = {
    "function-rules": FUNCTION_RULES,
    "commitlint-plugin-function-rules": FUNCTION_RULES,
}


def get_plugin(name: str) -> Plugin:
    try:
        return PLUGINS[name]
    except KeyError:
        raise ConfigurationError(
            f"Unknown plugin '{name}'; available: {', '.join(sorted(PLUGINS))}"
        ) from None
