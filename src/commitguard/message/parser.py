"""Commit message parser.

Splits a raw message into header fields, body and footer. Parsing never
fails: a header that does not look like ``type(scope): subject`` leaves the
structured fields empty and keeps the whole input as the body, so that the
``*-empty`` rules can report what is missing.
"""

from __future__ import annotations

import re
from typing import List, Sequence, Tuple

from commitguard.message.models import CommitMessage

# --- Regex patterns ---

_HEADER_RE = re.compile(r"^(\w*)(?:\((.*)\))?(!)?: (.*)$")
_TRAILER_RE = re.compile(r"^(?:BREAKING[ -]CHANGE|[A-Za-z][\w-]*)(?:: | #)\S")
_CONTINUATION_RE = re.compile(r"^\s+\S")
_SCOPE_DELIMITER_RE = re.compile(r"\s*[/\\,]\s*")
_BREAKING_NOTE_RE = re.compile(r"^BREAKING[ -]CHANGE: ")

COMMENT_CHAR = "#"


def _clean_lines(raw: str) -> List[str]:
    """Normalise line endings, drop git comment lines and trailing blanks."""
    lines = [
        line.rstrip("\r")
        for line in raw.lstrip("\ufeff").split("\n")
        if not line.startswith(COMMENT_CHAR)
    ]
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def _is_blank(line: str) -> bool:
    return not line.strip()


def _trim_blank(lines: Sequence[str]) -> List[str]:
    start, end = 0, len(lines)
    while start < end and _is_blank(lines[start]):
        start += 1
    while end > start and _is_blank(lines[end - 1]):
        end -= 1
    return list(lines[start:end])


def _footer_start(rest: Sequence[str]) -> int:
    """Index in *rest* where the trailer block begins, ``len(rest)`` if none.

    The footer is the longest tail whose first line is a trailer and whose
    remaining non-blank lines are trailers or indented continuations.
    """
    start = len(rest)
    for i in range(len(rest) - 1, -1, -1):
        line = rest[i]
        if _TRAILER_RE.match(line):
            start = i
        elif _is_blank(line) or _CONTINUATION_RE.match(line):
            continue
        else:
            break
    return start


def split_scopes(scope: str) -> Tuple[str, ...]:
    """Split a multi-scope value on ``/``, ``\\`` and ``,``."""
    if not scope:
        return ()
    return tuple(s for s in _SCOPE_DELIMITER_RE.split(scope) if s)


def parse(raw: str) -> CommitMessage:
    """Parse *raw* into a :class:`CommitMessage`. Never raises."""
    lines = _clean_lines(raw)
    header = lines[0] if lines else ""
    m = _HEADER_RE.match(header)

    if m is None:
        return CommitMessage(raw=raw, header=header, body=raw, lines=tuple(lines))

    rest = lines[1:]
    split_at = _footer_start(rest)

    return CommitMessage(
        raw=raw,
        header=header,
        type=m.group(1),
        scope=m.group(2) or "",
        subject=m.group(4),
        body="\n".join(_trim_blank(rest[:split_at])),
        footer="\n".join(_trim_blank(rest[split_at:])),
        breaking=m.group(3) is not None or _has_breaking_note(rest[split_at:]),
        lines=tuple(lines),
    )


def _has_breaking_note(footer_lines: Sequence[str]) -> bool:
    return any(_BREAKING_NOTE_RE.match(line) for line in footer_lines)
