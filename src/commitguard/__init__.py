"""commitguard — lint commit messages against a configurable rule set.

Typical use::

    config = resolve({"extends": ["conventional"]})
    report = lint("feat(api): add pagination", config)
    report.status  # "pass" | "warn" | "fail"
"""

__version__ = "0.1.0"

from commitguard.config.resolver import resolve  # noqa: E402
from commitguard.config.schema import ConfigurationError  # noqa: E402
from commitguard.lint.engine import evaluate, lint  # noqa: E402
from commitguard.message.parser import parse  # noqa: E402
from commitguard.results.aggregator import aggregate  # noqa: E402
from commitguard.rules.models import CustomRule  # noqa: E402

__all__ = [
    "ConfigurationError",
    "CustomRule",
    "__version__",
    "aggregate",
    "evaluate",
    "lint",
    "parse",
    "resolve",
]
