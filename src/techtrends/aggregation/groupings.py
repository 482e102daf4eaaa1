"""
Grouped sales breakdowns.

Each breakdown makes one pass over the records into a dict of
accumulators keyed by the grouping value, then materializes and sorts
the entries. Sorts are stable, so ties keep first-seen order.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from techtrends.normalization.temporal import month_key
from techtrends.records.model import SalesRecord

DEFAULT_TOP_PRODUCTS = 5


@dataclass(frozen=True)
class ProductSales:
    """Revenue and units for one product name."""

    name: str
    total: float
    quantity: float


@dataclass(frozen=True)
class MonthlySales:
    """Revenue for one calendar month (YYYY-MM)."""

    month: str
    total: float


@dataclass(frozen=True)
class PaymentMethodShare:
    """Transaction count and share for one payment method."""

    method: str
    count: int
    percentage: float


@dataclass(frozen=True)
class CountrySales:
    """Revenue and transaction count for one country."""

    country: str
    total: float
    transactions: int


@dataclass
class _Accumulator:
    total: float = 0.0
    quantity: float = 0.0
    count: int = 0


def top_products(
    records: Sequence[SalesRecord],
    limit: int = DEFAULT_TOP_PRODUCTS,
) -> list[ProductSales]:
    """
    Best-selling products by revenue.

    Products are grouped by exact (case-sensitive) name.

    Args:
        records: Valid sales records.
        limit: Maximum number of products to return.

    Returns:
        Up to ``limit`` products, descending by total revenue.
    """
    if limit <= 0:
        return []

    by_name: dict[str, _Accumulator] = {}
    for record in records:
        acc = by_name.setdefault(record.product_name, _Accumulator())
        acc.total += record.total_amount
        acc.quantity += record.quantity

    products = [
        ProductSales(name=name, total=acc.total, quantity=acc.quantity)
        for name, acc in by_name.items()
    ]
    products.sort(key=lambda p: p.total, reverse=True)
    return products[:limit]


def sales_by_month(records: Sequence[SalesRecord]) -> list[MonthlySales]:
    """
    Revenue per calendar month.

    Records with an unparsable date are bucketed under their raw date
    text instead of being dropped.

    Args:
        records: Valid sales records.

    Returns:
        One entry per month key, ascending by key.
    """
    by_month: dict[str, _Accumulator] = {}
    for record in records:
        acc = by_month.setdefault(month_key(record.date), _Accumulator())
        acc.total += record.total_amount

    months = [MonthlySales(month=key, total=acc.total) for key, acc in by_month.items()]
    months.sort(key=lambda m: m.month)
    return months


def payment_method_distribution(
    records: Sequence[SalesRecord],
) -> list[PaymentMethodShare]:
    """
    Share of transactions per payment method.

    Args:
        records: Valid sales records.

    Returns:
        One entry per method, descending by count. Percentages are
        100 * count / len(records).
    """
    by_method: dict[str, _Accumulator] = {}
    for record in records:
        by_method.setdefault(record.payment_method, _Accumulator()).count += 1

    total = len(records)
    shares = [
        PaymentMethodShare(
            method=method,
            count=acc.count,
            percentage=acc.count / total * 100,
        )
        for method, acc in by_method.items()
    ]
    shares.sort(key=lambda s: s.count, reverse=True)
    return shares


def sales_by_country(records: Sequence[SalesRecord]) -> list[CountrySales]:
    """
    Revenue and transaction count per country.

    Args:
        records: Valid sales records.

    Returns:
        One entry per country, descending by total revenue.
    """
    by_country: dict[str, _Accumulator] = {}
    for record in records:
        acc = by_country.setdefault(record.country, _Accumulator())
        acc.total += record.total_amount
        acc.count += 1

    countries = [
        CountrySales(country=country, total=acc.total, transactions=acc.count)
        for country, acc in by_country.items()
    ]
    countries.sort(key=lambda c: c.total, reverse=True)
    return countries
