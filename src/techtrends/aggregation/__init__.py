"""
Sales aggregation module.

Pure functions computing totals, rankings and breakdowns over valid
sales records.
"""

from techtrends.aggregation.groupings import (
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
from techtrends.aggregation.summary import DashboardSummary, summarize

__all__ = [
    "CountrySales",
    "DashboardSummary",
    "MonthlySales",
    "PaymentMethodShare",
    "ProductSales",
    "average_ticket",
    "payment_method_distribution",
    "sales_by_country",
    "sales_by_month",
    "summarize",
    "top_products",
    "total_sales",
    "total_transactions",
]
