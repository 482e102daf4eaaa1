"""
Browsing views over cleaned records.

Filtering, ordering and pagination for the record table, plus the
dashboard month filter.
"""

from techtrends.browse.table import (
    ALL_CATEGORIES,
    Page,
    filter_by_month,
    filter_records,
    list_categories,
    paginate,
    sort_records,
)

__all__ = [
    "ALL_CATEGORIES",
    "Page",
    "filter_by_month",
    "filter_records",
    "list_categories",
    "paginate",
    "sort_records",
]
