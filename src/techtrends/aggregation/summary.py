"""Dashboard summary bundling every aggregate for one record set."""

from collections.abc import Sequence
from dataclasses import dataclass

from techtrends.aggregation.groupings import (
    DEFAULT_TOP_PRODUCTS,
    CountrySales,
    MonthlySales,
    PaymentMethodShare,
    ProductSales,
    payment_method_distribution,
    sales_by_country,
    sales_by_month,
    top_products,
)
from techtrends.aggregation.metrics import (
    average_ticket,
    total_sales,
    total_transactions,
)
from techtrends.records.model import SalesRecord
from techtrends.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class DashboardSummary:
    """
    All aggregates shown on the sales dashboard.

    Attributes:
        total_sales: Sum of transaction totals.
        total_transactions: Number of transactions.
        average_ticket: Average transaction total.
        top_products: Best-selling products by revenue.
        sales_by_month: Revenue per calendar month.
        payment_methods: Transaction share per payment method.
        sales_by_country: Revenue per country.
    """

    total_sales: float
    total_transactions: int
    average_ticket: float
    top_products: list[ProductSales]
    sales_by_month: list[MonthlySales]
    payment_methods: list[PaymentMethodShare]
    sales_by_country: list[CountrySales]


def summarize(
    records: Sequence[SalesRecord],
    top_n: int = DEFAULT_TOP_PRODUCTS,
    monthly_records: Sequence[SalesRecord] | None = None,
) -> DashboardSummary:
    """
    Compute every dashboard aggregate.

    Args:
        records: Valid records, possibly narrowed by a month filter.
        top_n: Size of the top products ranking.
        monthly_records: Records for the monthly trend. The trend spans
            all months, so callers filtering by month pass the unfiltered
            records here. Defaults to ``records``.

    Returns:
        DashboardSummary over the given records.
    """
    if monthly_records is None:
        monthly_records = records

    summary = DashboardSummary(
        total_sales=total_sales(records),
        total_transactions=total_transactions(records),
        average_ticket=average_ticket(records),
        top_products=top_products(records, top_n),
        sales_by_month=sales_by_month(monthly_records),
        payment_methods=payment_method_distribution(records),
        sales_by_country=sales_by_country(records),
    )
    log.debug(
        "Computed dashboard summary",
        transactions=summary.total_transactions,
        products=len(summary.top_products),
        months=len(summary.sales_by_month),
    )
    return summary
