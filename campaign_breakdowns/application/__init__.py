"""Application layer package.

The report pipeline lives in ``report_service`` and is imported from there,
so the aggregation engine stays importable without the environment settings.
"""

from .aggregation import DIMENSIONS, aggregate, aggregate_all, gender_totals, order_weeks

__all__ = ["DIMENSIONS", "aggregate", "aggregate_all", "gender_totals", "order_weeks"]
