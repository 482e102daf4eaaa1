"""
Scalar sales metrics.

All functions are pure and total: empty input yields 0.
"""

from collections.abc import Sequence

from techtrends.records.model import SalesRecord


def total_sales(records: Sequence[SalesRecord]) -> float:
    """Sum of transaction totals."""
    return sum((r.total_amount for r in records), 0.0)


def total_transactions(records: Sequence[SalesRecord]) -> int:
    """Number of transactions."""
    return len(records)


def average_ticket(records: Sequence[SalesRecord]) -> float:
    """
    Average transaction total.

    Args:
        records: Valid sales records.

    Returns:
        Total sales divided by transaction count, 0.0 for no records.
    """
    count = total_transactions(records)
    if count == 0:
        return 0.0
    return total_sales(records) / count
