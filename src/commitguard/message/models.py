"""Data model for a parsed commit message."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class CommitMessage:
    """A commit message split into its conventional fields.

    Fields that could not be found are empty strings, never ``None``, so
    rules can test for absence uniformly.
    """

    raw: str
    header: str = ""
    type: str = ""
    scope: str = ""
    subject: str = ""
    body: str = ""
    footer: str = ""
    breaking: bool = False  # header carried a "!" marker
    # content lines after comment stripping, used by the blank-line rules
    lines: Tuple[str, ...] = field(default=(), repr=False, compare=False)

    @property
    def has_header(self) -> bool:
        """True if the header matched ``type(scope): subject``."""
        return bool(self.type or self.subject)

    @property
    def scopes(self) -> Tuple[str, ...]:
        """Individual scopes when several are given (``api/ui``, ``a,b``)."""
        from commitguard.message.parser import split_scopes

        return split_scopes(self.scope)
