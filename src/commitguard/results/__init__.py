"""Rule outcomes, reports, and aggregation."""

from commitguard.results.aggregator import aggregate, overall_status
from commitguard.results.models import Report, RuleOutcome, Status

__all__ = ["Report", "RuleOutcome", "Status", "aggregate", "overall_status"]
