"""
Record browsing helpers for the data table and dashboard filters.

Filter state (category, search term, page, month) belongs to the caller;
these functions only derive views from it.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from techtrends.normalization.temporal import month_number, parse_date
from techtrends.normalization.text import strip_accents
from techtrends.records.model import SalesRecord

ALL_CATEGORIES = "all"
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class Page:
    """
    One page of records.

    Attributes:
        records: Records on this page.
        number: 1-based page number (0 when there are no pages).
        total_pages: Number of pages.
        total_records: Records across all pages.
    """

    records: list[SalesRecord]
    number: int
    total_pages: int
    total_records: int

    @property
    def has_previous(self) -> bool:
        """Whether a page precedes this one."""
        return self.number > 1

    @property
    def has_next(self) -> bool:
        """Whether a page follows this one."""
        return self.number < self.total_pages


def list_categories(records: Sequence[SalesRecord]) -> list[str]:
    """Distinct categories, sorted."""
    return sorted({r.category for r in records})


def _fold(text: str) -> str:
    return strip_accents(text).casefold()


def filter_records(
    records: Sequence[SalesRecord],
    category: str | None = None,
    search: str | None = None,
) -> list[SalesRecord]:
    """
    Filter records by category and free-text search.

    Args:
        records: Records to filter.
        category: Exact category to keep; None or "all" keeps every one.
        search: Case- and accent-insensitive substring matched against
            product name, transaction id and country.

    Returns:
        Matching records in input order.
    """
    filtered = list(records)

    if category and category != ALL_CATEGORIES:
        filtered = [r for r in filtered if r.category == category]

    if search:
        needle = _fold(search)
        filtered = [
            r
            for r in filtered
            if needle in _fold(r.product_name)
            or needle in _fold(r.transaction_id)
            or needle in _fold(r.country)
        ]

    return filtered


def sort_records(records: Sequence[SalesRecord]) -> list[SalesRecord]:
    """
    Order records by category, then newest date first.

    Records whose date does not parse go last within their category.
    """
    newest_first = sorted(records, key=lambda r: parse_date(r.date) or "", reverse=True)
    return sorted(newest_first, key=lambda r: r.category)


def paginate(
    records: Sequence[SalesRecord],
    page: int = 1,
    page_size: int = DEFAULT_PAGE_SIZE,
) -> Page:
    """
    Slice records into a page.

    Args:
        records: Records to page through.
        page: Requested 1-based page; clamped to the available range.
        page_size: Records per page.

    Returns:
        The requested page.

    Raises:
        ValueError: If page_size is not positive.
    """
    if page_size < 1:
        msg = f"page_size must be positive, got: {page_size}"
        raise ValueError(msg)

    total_pages = math.ceil(len(records) / page_size)
    if total_pages == 0:
        return Page(records=[], number=0, total_pages=0, total_records=0)

    number = min(max(page, 1), total_pages)
    start = (number - 1) * page_size
    return Page(
        records=list(records[start : start + page_size]),
        number=number,
        total_pages=total_pages,
        total_records=len(records),
    )


def filter_by_month(
    records: Sequence[SalesRecord],
    month: int | None = None,
) -> list[SalesRecord]:
    """
    Keep records from one calendar month, across all years.

    Args:
        records: Records to filter.
        month: Month number 1-12; None keeps every record.

    Returns:
        Matching records in input order.

    Raises:
        ValueError: If month is outside 1-12.
    """
    if month is None:
        return list(records)
    if not 1 <= month <= 12:
        msg = f"month must be between 1 and 12, got: {month}"
        raise ValueError(msg)
    return [r for r in records if month_number(r.date) == month]
