"""Built-in rules — aggregate all categories."""

from commitguard.rules.builtin.body_rules import ALL_BODY_RULES
from commitguard.rules.builtin.length_rules import ALL_LENGTH_RULES
from commitguard.rules.builtin.scope_rules import ALL_SCOPE_RULES
from commitguard.rules.builtin.subject_rules import ALL_SUBJECT_RULES
from commitguard.rules.builtin.type_rules import ALL_TYPE_RULES
from commitguard.rules.models import RuleDefinition

ALL_BUILTIN_RULES: list[RuleDefinition] = [
    *ALL_TYPE_RULES,
    *ALL_SCOPE_RULES,
    *ALL_SUBJECT_RULES,
    *ALL_BODY_RULES,
    *ALL_LENGTH_RULES,
]

__all__ = ["ALL_BUILTIN_RULES"]
