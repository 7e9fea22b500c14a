"""Outcome and report models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Literal, Tuple

from commitguard.config.schema import Severity

Status = Literal["pass", "warn", "fail"]


@dataclass(frozen=True)
class RuleOutcome:
    """Result of one enabled rule against one message."""

    rule_name: str
    severity: Severity
    passed: bool
    message: str = ""  # empty when passed

    @property
    def is_error(self) -> bool:
        return not self.passed and self.severity == "error"

    @property
    def is_warning(self) -> bool:
        return not self.passed and self.severity == "warning"


@dataclass(frozen=True)
class Report:
    """Complete result of a lint run, outcomes in evaluation order."""

    outcomes: Tuple[RuleOutcome, ...] = ()
    status: Status = "pass"
    summary: str = ""
    input: str = ""  # the message header, for display

    @property
    def errors(self) -> List[RuleOutcome]:
        return [o for o in self.outcomes if o.is_error]

    @property
    def warnings(self) -> List[RuleOutcome]:
        return [o for o in self.outcomes if o.is_warning]

    @property
    def valid(self) -> bool:
        """True unless an error-level rule failed."""
        return self.status != "fail"

    @property
    def failed(self) -> List[RuleOutcome]:
        return [o for o in self.outcomes if not o.passed]
