"""Shared test fixtures — sample messages and the reference configuration."""

from __future__ import annotations

import re
import textwrap

import pytest

from commitguard.config.presets import CONVENTIONAL_TYPES
from commitguard.rules.registry import RuleRegistry, build_registry

TICKET_RE = re.compile(r"[A-Za-z0-9]+-[0-9]+")


def ticket_scope(parsed):
    """Function rule from the reference config: scope must look like a ticket."""
    if not parsed.scope or TICKET_RE.search(parsed.scope):
        return [True]
    return [False, f"scope must match jira ticket regex {TICKET_RE.pattern}"]


@pytest.fixture
def reference_config() -> dict:
    """The reference configuration, including its function rule."""
    return {
        "extends": ["@commitlint/config-conventional"],
        "plugins": ["commitlint-plugin-function-rules"],
        "rules": {
            "body-leading-blank": [1, "always"],
            "footer-leading-blank": [1, "always"],
            "header-max-length": [0, "always", 80],
            "scope-case": [2, "always", ["upper-case", "lower-case"]],
            "scope-empty": [2, "never"],
            "scope-enum": [0],
            "function-rules/scope-enum": [2, "always", ticket_scope],
            "subject-empty": [2, "never"],
            "subject-full-stop": [2, "never", "."],
            "subject-case": [2, "always", [
                "lower-case",
                "upper-case",
                "camel-case",
                "kebab-case",
                "pascal-case",
                "sentence-case",
                "snake-case",
                "start-case",
            ]],
            "type-case": [2, "always", "lower-case"],
            "type-empty": [2, "never"],
            "type-enum": [2, "always", list(CONVENTIONAL_TYPES)],
        },
    }


@pytest.fixture
def eleven_rule_config() -> dict:
    """The eleven core rules: blank-line rules as warnings, the rest errors."""
    return {
        "rules": {
            "type-empty": [2, "never"],
            "type-enum": [2, "always", list(CONVENTIONAL_TYPES)],
            "type-case": [2, "always", "lower-case"],
            "scope-empty": [2, "never"],
            "scope-case": [2, "always", ["upper-case", "lower-case"]],
            "scope-enum": [2, "always", ["JIRA-123", "api", "ui"]],
            "subject-empty": [2, "never"],
            "subject-case": [2, "always", ["lower-case", "sentence-case"]],
            "subject-full-stop": [2, "never", "."],
            "body-leading-blank": [1, "always"],
            "footer-leading-blank": [1, "always"],
        },
    }


@pytest.fixture
def registry() -> RuleRegistry:
    return build_registry()


@pytest.fixture
def msg_clean() -> str:
    return textwrap.dedent("""\
        fix(JIRA-123): handle empty payloads

        The parser used to crash when the payload was empty.

        Reviewed-by: Alex
        Refs: #42
    """)


@pytest.fixture
def msg_no_body_blank() -> str:
    """Body follows the header without a blank line."""
    return textwrap.dedent("""\
        fix(JIRA-123): handle empty payloads
        The parser used to crash when the payload was empty.
    """)


@pytest.fixture
def msg_with_comments() -> str:
    return textwrap.dedent("""\
        feat(api): add pagination
        # Please enter the commit message for your changes.
        # Lines starting with '#' will be ignored.

        Cursor based, default page size 50.
    """)


@pytest.fixture
def msg_not_conventional() -> str:
    return "Updated some stuff\n\nand more stuff\n"
