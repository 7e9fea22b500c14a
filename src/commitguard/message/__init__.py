"""Commit message parsing — models and parser."""

from commitguard.message.models import CommitMessage
from commitguard.message.parser import parse, split_scopes

__all__ = ["CommitMessage", "parse", "split_scopes"]
