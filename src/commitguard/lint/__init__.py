"""Lint engine — evaluate a resolved configuration against a message."""

from commitguard.lint.engine import RuleExecutionError, evaluate, lint

__all__ = ["RuleExecutionError", "evaluate", "lint"]
