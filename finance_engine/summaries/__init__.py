"""Summary aggregation package."""

from finance_engine.summaries.monthly import summarize_monthly

__all__ = ["summarize_monthly"]
