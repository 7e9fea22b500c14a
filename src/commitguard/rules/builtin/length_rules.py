"""Length limits for the header, body lines and footer lines."""

from commitguard.message.models import CommitMessage
from commitguard.rules.models import RuleDefinition, RuleResult, check_positive_int

DEFAULT_MAX_LENGTH = 100


def header_max_length(message: CommitMessage, options=None) -> RuleResult:
    limit = options if options is not None else DEFAULT_MAX_LENGTH
    length = len(message.header)
    return RuleResult(
        passed=length <= limit,
        message=(
            f"header must not be longer than {limit} characters, "
            f"current length is {length}"
        ),
        negated_message=f"header must be longer than {limit} characters",
    )


def _longest_line(text: str) -> int:
    return max((len(line) for line in text.split("\n")), default=0)


def body_max_line_length(message: CommitMessage, options=None) -> RuleResult:
    if not message.body or not message.has_header:
        return RuleResult.skip()
    limit = options if options is not None else DEFAULT_MAX_LENGTH
    return RuleResult(
        passed=_longest_line(message.body) <= limit,
        message=f"body's lines must not be longer than {limit} characters",
        negated_message=f"body's lines must be longer than {limit} characters",
    )


def footer_max_line_length(message: CommitMessage, options=None) -> RuleResult:
    if not message.footer:
        return RuleResult.skip()
    limit = options if options is not None else DEFAULT_MAX_LENGTH
    return RuleResult(
        passed=_longest_line(message.footer) <= limit,
        message=f"footer's lines must not be longer than {limit} characters",
        negated_message=f"footer's lines must be longer than {limit} characters",
    )


HEADER_MAX_LENGTH = RuleDefinition(
    name="header-max-length",
    fn=header_max_length,
    description="Header is at most N characters long.",
    check_options=check_positive_int,
)

BODY_MAX_LINE_LENGTH = RuleDefinition(
    name="body-max-line-length",
    fn=body_max_line_length,
    description="Every body line is at most N characters long.",
    check_options=check_positive_int,
)

FOOTER_MAX_LINE_LENGTH = RuleDefinition(
    name="footer-max-line-length",
    fn=footer_max_line_length,
    description="Every footer line is at most N characters long.",
    check_options=check_positive_int,
)

ALL_LENGTH_RULES = [HEADER_MAX_LENGTH, BODY_MAX_LINE_LENGTH, FOOTER_MAX_LINE_LENGTH]
