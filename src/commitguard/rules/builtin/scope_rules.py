"""Rules over the commit scope.

A scope may list several values (``feat(api/ui): ...``); the enum and case
rules check each of them.
"""

from commitguard.message.models import CommitMessage
from commitguard.rules.case import matches_any_case
from commitguard.rules.models import (
    RuleDefinition,
    RuleResult,
    check_cases,
    check_string_list,
    normalise_cases,
)


def scope_empty(message: CommitMessage, options=None) -> RuleResult:
    return RuleResult(
        passed=not message.scope,
        message="scope must be empty",
        negated_message="scope may not be empty",
    )


def scope_enum(message: CommitMessage, options=None) -> RuleResult:
    # an empty list means any scope is fine
    if not message.scope or not options:
        return RuleResult.skip()
    allowed = ", ".join(options)
    return RuleResult(
        passed=all(s in options for s in message.scopes),
        message=f"scope '{message.scope}' must be one of [{allowed}]",
        negated_message=f"scope '{message.scope}' must not be one of [{allowed}]",
    )


def scope_case(message: CommitMessage, options=None) -> RuleResult:
    if not message.scope:
        return RuleResult.skip()
    cases = normalise_cases(options, default=["lower-case"])
    described = " or ".join(cases)
    return RuleResult(
        passed=all(matches_any_case(s, cases) for s in message.scopes),
        message=f"scope must be {described}",
        negated_message=f"scope must not be {described}",
    )


SCOPE_EMPTY = RuleDefinition(
    name="scope-empty",
    fn=scope_empty,
    description="Scope is empty.",
)

SCOPE_ENUM = RuleDefinition(
    name="scope-enum",
    fn=scope_enum,
    description="Every scope is one of the listed values.",
    check_options=check_string_list,
)

SCOPE_CASE = RuleDefinition(
    name="scope-case",
    fn=scope_case,
    description="Every scope follows one of the listed case conventions.",
    check_options=check_cases,
)

ALL_SCOPE_RULES = [SCOPE_EMPTY, SCOPE_ENUM, SCOPE_CASE]
