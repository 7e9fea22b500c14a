"""Blank-line rules for the body and footer."""

from commitguard.message.models import CommitMessage
from commitguard.rules.models import RuleDefinition, RuleResult


def body_leading_blank(message: CommitMessage, options=None) -> RuleResult:
    # an unparsed header leaves the whole input in the body
    if not message.body or not message.has_header:
        return RuleResult.skip()
    lines = message.lines
    return RuleResult(
        passed=len(lines) > 1 and not lines[1].strip(),
        message="body must have leading blank line",
        negated_message="body may not have leading blank line",
    )


def footer_leading_blank(message: CommitMessage, options=None) -> RuleResult:
    if not message.footer:
        return RuleResult.skip()
    lines = message.lines
    # footer is always the tail of the cleaned lines
    start = len(lines) - len(message.footer.split("\n"))
    return RuleResult(
        passed=start > 0 and not lines[start - 1].strip(),
        message="footer must have leading blank line",
        negated_message="footer may not have leading blank line",
    )


BODY_LEADING_BLANK = RuleDefinition(
    name="body-leading-blank",
    fn=body_leading_blank,
    default_severity="warning",
    description="Body is separated from the header by a blank line.",
)

FOOTER_LEADING_BLANK = RuleDefinition(
    name="footer-leading-blank",
    fn=footer_leading_blank,
    default_severity="warning",
    description="Footer is separated from the body by a blank line.",
)

ALL_BODY_RULES = [BODY_LEADING_BLANK, FOOTER_LEADING_BLANK]
