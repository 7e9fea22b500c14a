"""Rule data model — results, definitions, and inline custom rules."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence

from commitguard.config.schema import Applicability, ConfigurationError, Severity
from commitguard.message.models import CommitMessage


@dataclass(frozen=True)
class RuleResult:
    """What a rule reports, before the engine applies severity.

    ``message`` explains a failure when the rule is applied ``always``;
    ``negated_message`` when it is applied ``never`` and the predicate held.
    """

    passed: bool
    message: str = ""
    negated_message: str = ""
    applies: bool = True  # False: nothing to judge, passes either way round

    @classmethod
    def skip(cls) -> "RuleResult":
        """Result for input the rule has nothing to say about (e.g. no scope)."""
        return cls(passed=True, applies=False)

    @classmethod
    def coerce(cls, value: Any) -> "RuleResult":
        """Normalise a rule's return value.

        Accepts a :class:`RuleResult`, a bare ``bool``, or a ``(bool,)`` /
        ``(bool, message)`` sequence as returned by function rules.
        """
        if isinstance(value, RuleResult):
            return value
        if isinstance(value, bool):
            return cls(passed=value)
        if isinstance(value, Sequence) and not isinstance(value, str) and value:
            passed = value[0]
            message = value[1] if len(value) > 1 else ""
            if isinstance(passed, bool) and isinstance(message, str):
                return cls(passed=passed, message=message)
        raise TypeError(
            f"rule returned {value!r}; expected a RuleResult, bool, or (bool, message)"
        )


RuleFn = Callable[[CommitMessage, Any], Any]
OptionsCheck = Callable[[str, Any], None]


def _no_check(name: str, options: Any) -> None:
    return None


@dataclass(frozen=True)
class RuleDefinition:
    """A registered rule implementation."""

    name: str
    fn: RuleFn
    default_severity: Severity = "error"
    description: str = ""
    check_options: OptionsCheck = _no_check
    source: str = "builtin"  # builtin | plugin | custom

    def validate_options(self, options: Any) -> None:
        """Raise ConfigurationError if *options* do not fit this rule."""
        if options is None:
            return
        self.check_options(self.name, options)


@dataclass(frozen=True)
class CustomRule:
    """A rule implementation supplied inline in a configuration.

    Used as a value in the ``rules`` map in place of ``[level, when, options]``.
    The function is called as ``fn(message, options)`` like any registered rule.
    """

    fn: RuleFn
    level: int = 2
    applicability: Applicability = "always"
    options: Any = None
    description: str = ""

    def __post_init__(self) -> None:
        if not callable(self.fn):
            raise ConfigurationError(f"CustomRule needs a callable, got {self.fn!r}")


# ---- option checks shared by the built-in rules ----


def check_string_list(name: str, options: Any) -> None:
    if isinstance(options, str) or not isinstance(options, Sequence):
        raise ConfigurationError(f"Rule '{name}' expects a list of strings, got {options!r}")
    if not all(isinstance(o, str) for o in options):
        raise ConfigurationError(f"Rule '{name}' expects a list of strings, got {options!r}")


def check_positive_int(name: str, options: Any) -> None:
    if isinstance(options, bool) or not isinstance(options, int) or options <= 0:
        raise ConfigurationError(
            f"Rule '{name}' expects a positive integer, got {options!r}"
        )


def check_char(name: str, options: Any) -> None:
    if not isinstance(options, str) or len(options) != 1:
        raise ConfigurationError(
            f"Rule '{name}' expects a single character, got {options!r}"
        )


def check_callable(name: str, options: Any) -> None:
    if not callable(options):
        raise ConfigurationError(f"Rule '{name}' expects a function, got {options!r}")


def check_cases(name: str, options: Any) -> None:
    from commitguard.rules.case import CASES

    values = [options] if isinstance(options, str) else options
    check_string_list(name, values)
    unknown = [v for v in values if v not in CASES]
    if unknown:
        raise ConfigurationError(
            f"Rule '{name}' got unknown case {unknown[0]!r}; "
            f"expected one of {', '.join(CASES)}"
        )


def normalise_cases(options: Any, default: Optional[Sequence[str]] = None) -> Sequence[str]:
    if options is None:
        return list(default or [])
    if isinstance(options, str):
        return [options]
    return list(options)
