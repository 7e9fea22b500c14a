"""Casing classifiers.

Each classifier is a pure predicate over a string. A single short word can
satisfy several conventions at once (``fix`` is lower, camel, kebab and
snake case); a mixed word such as ``fixBug`` satisfies exactly one.
"""

from __future__ import annotations

import re
from typing import Callable, Dict, Iterable

_CAMEL_RE = re.compile(r"^[a-z][a-z0-9]*(?:[A-Z][a-z0-9]+)*$")
_PASCAL_RE = re.compile(r"^[A-Z][a-z0-9]*(?:[A-Z][a-z0-9]+)*$")
_KEBAB_RE = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
_SNAKE_RE = re.compile(r"^[a-z0-9]+(?:_[a-z0-9]+)*$")


def is_lower_case(text: str) -> bool:
    return text == text.lower()


def is_upper_case(text: str) -> bool:
    return text == text.upper()


def is_camel_case(text: str) -> bool:
    return bool(_CAMEL_RE.match(text))


def is_pascal_case(text: str) -> bool:
    return bool(_PASCAL_RE.match(text))


def is_kebab_case(text: str) -> bool:
    return bool(_KEBAB_RE.match(text))


def is_snake_case(text: str) -> bool:
    return bool(_SNAKE_RE.match(text))


def is_sentence_case(text: str) -> bool:
    """First letter upper case, everything after it lower case."""
    head, tail = text[:1], text[1:]
    return head.isupper() and tail == tail.lower()


def is_start_case(text: str) -> bool:
    """Every space separated word starts with a capital letter or digit."""
    words = text.split()
    if not words:
        return False
    return all(w[0].isupper() or w[0].isdigit() for w in words)


CASES: Dict[str, Callable[[str], bool]] = {
    "lower-case": is_lower_case,
    "upper-case": is_upper_case,
    "camel-case": is_camel_case,
    "kebab-case": is_kebab_case,
    "pascal-case": is_pascal_case,
    "sentence-case": is_sentence_case,
    "snake-case": is_snake_case,
    "start-case": is_start_case,
}


def matches_case(text: str, case: str) -> bool:
    """Return True if *text* follows the named *case* convention."""
    try:
        return CASES[case](text)
    except KeyError:
        raise ValueError(f"Unknown case {case!r}") from None


def matches_any_case(text: str, cases: Iterable[str]) -> bool:
    return any(matches_case(text, c) for c in cases)


def classify(text: str) -> list[str]:
    """Names of every case convention *text* satisfies, in ``CASES`` order."""
    return [name for name, check in CASES.items() if check(text)]
