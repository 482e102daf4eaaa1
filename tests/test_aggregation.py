"""Tests for sales aggregation."""

from collections.abc import Callable

import pytest

from techtrends.aggregation import (
    CountrySales,
    MonthlySales,
    PaymentMethodShare,
    ProductSales,
    average_ticket,
    payment_method_distribution,
    sales_by_country,
    sales_by_month,
    summarize,
    top_products,
    total_sales,
    total_transactions,
)
from techtrends.records import SalesRecord

RecordFactory = Callable[..., SalesRecord]


class TestScalarMetrics:
    """Tests for totals and averages."""

    def test_total_sales(self, sample_records: list[SalesRecord]) -> None:
        """Test revenue is summed."""
        assert total_sales(sample_records) == pytest.approx(295.0)

    def test_total_transactions(self, sample_records: list[SalesRecord]) -> None:
        """Test the count equals the number of records."""
        assert total_transactions(sample_records) == len(sample_records)

    def test_average_ticket(self, sample_records: list[SalesRecord]) -> None:
        """Test average times count gives back the total."""
        avg = average_ticket(sample_records)
        assert avg == pytest.approx(59.0)
        assert avg * total_transactions(sample_records) == pytest.approx(
            total_sales(sample_records)
        )

    def test_empty_input(self) -> None:
        """Test empty input yields zeros without dividing by zero."""
        assert total_sales([]) == 0
        assert total_transactions([]) == 0
        assert average_ticket([]) == 0


class TestTopProducts:
    """Tests for top_products."""

    def test_groups_by_name(self, record_factory: RecordFactory) -> None:
        """Test records of the same product are merged."""
        records = [
            record_factory(product_name="Widget", quantity=2.0, total_amount=20.0),
            record_factory(product_name="Widget", quantity=3.0, total_amount=30.0),
        ]
        assert top_products(records) == [
            ProductSales(name="Widget", total=50.0, quantity=5.0)
        ]

    def test_sorted_descending(self, sample_records: list[SalesRecord]) -> None:
        """Test ranking by total revenue."""
        result = top_products(sample_records)
        assert [p.name for p in result] == ["Gadget", "Widget", "Gizmo"]
        assert [p.total for p in result] == [200.0, 50.0, 45.0]
        assert result[1].quantity == 5.0

    def test_limit(self, sample_records: list[SalesRecord]) -> None:
        """Test the result is truncated to the limit."""
        assert [p.name for p in top_products(sample_records, 2)] == ["Gadget", "Widget"]
        assert top_products(sample_records, 0) == []

    def test_fewer_products_than_limit(self, sample_records: list[SalesRecord]) -> None:
        """Test the result is bounded by distinct product names."""
        assert len(top_products(sample_records, 10)) == 3

    def test_names_are_case_sensitive(self, record_factory: RecordFactory) -> None:
        """Test grouping uses exact name equality."""
        records = [
            record_factory(product_name="widget"),
            record_factory(product_name="Widget"),
        ]
        assert len(top_products(records)) == 2

    def test_ties_keep_first_seen_order(self, record_factory: RecordFactory) -> None:
        """Test the sort is stable for equal totals."""
        records = [
            record_factory(product_name="B", total_amount=10.0),
            record_factory(product_name="A", total_amount=10.0),
            record_factory(product_name="C", total_amount=10.0),
        ]
        assert [p.name for p in top_products(records)] == ["B", "A", "C"]

    def test_empty(self) -> None:
        """Test empty input."""
        assert top_products([]) == []


class TestSalesByMonth:
    """Tests for sales_by_month."""

    def test_two_months(self, record_factory: RecordFactory) -> None:
        """Test one entry per month in ascending order."""
        records = [
            record_factory(date="2024-02-10", total_amount=5.0),
            record_factory(date="2024-01-03", total_amount=7.0),
            record_factory(date="2024-02-20", total_amount=1.0),
        ]
        assert sales_by_month(records) == [
            MonthlySales(month="2024-01", total=7.0),
            MonthlySales(month="2024-02", total=6.0),
        ]

    def test_years_are_distinct(self, record_factory: RecordFactory) -> None:
        """Test the same month of different years is split."""
        records = [
            record_factory(date="2024-01-10"),
            record_factory(date="2023-01-10"),
        ]
        assert [m.month for m in sales_by_month(records)] == ["2023-01", "2024-01"]

    def test_unparsable_date_does_not_crash(self, record_factory: RecordFactory) -> None:
        """Test a bad date gets its own bucket keyed by the raw text."""
        records = [
            record_factory(date="2024-01-10", total_amount=3.0),
            record_factory(date="sin fecha", total_amount=4.0),
        ]
        assert sales_by_month(records) == [
            MonthlySales(month="2024-01", total=3.0),
            MonthlySales(month="sin fecha", total=4.0),
        ]

    def test_empty(self) -> None:
        """Test empty input."""
        assert sales_by_month([]) == []


class TestPaymentMethodDistribution:
    """Tests for payment_method_distribution."""

    def test_counts_and_percentages(self, sample_records: list[SalesRecord]) -> None:
        """Test shares are relative to the record count."""
        result = payment_method_distribution(sample_records)
        assert result[0] == PaymentMethodShare(method="Card", count=3, percentage=60.0)
        assert {s.method for s in result[1:]} == {"Cash", "Transfer"}
        assert all(s.percentage == pytest.approx(20.0) for s in result[1:])

    def test_counts_sum_to_total(self, sample_records: list[SalesRecord]) -> None:
        """Test every record is counted exactly once."""
        result = payment_method_distribution(sample_records)
        assert sum(s.count for s in result) == len(sample_records)

    def test_sorted_by_count(self, record_factory: RecordFactory) -> None:
        """Test descending order with stable ties."""
        records = [
            record_factory(payment_method="Cash"),
            record_factory(payment_method="Card"),
            record_factory(payment_method="Card"),
            record_factory(payment_method="Transfer"),
        ]
        assert [s.method for s in payment_method_distribution(records)] == [
            "Card",
            "Cash",
            "Transfer",
        ]

    def test_empty(self) -> None:
        """Test empty input."""
        assert payment_method_distribution([]) == []


class TestSalesByCountry:
    """Tests for sales_by_country."""

    def test_breakdown(self, sample_records: list[SalesRecord]) -> None:
        """Test totals and transaction counts per country."""
        assert sales_by_country(sample_records) == [
            CountrySales(country="Chile", total=145.0, transactions=2),
            CountrySales(country="Peru", total=100.0, transactions=1),
            CountrySales(country="Mexico", total=50.0, transactions=2),
        ]

    def test_empty(self) -> None:
        """Test empty input."""
        assert sales_by_country([]) == []


class TestSummarize:
    """Tests for the dashboard summary."""

    def test_bundles_aggregates(self, sample_records: list[SalesRecord]) -> None:
        """Test every aggregate is computed over the records."""
        summary = summarize(sample_records, top_n=2)
        assert summary.total_sales == pytest.approx(295.0)
        assert summary.total_transactions == 5
        assert summary.average_ticket == pytest.approx(59.0)
        assert len(summary.top_products) == 2
        assert [m.month for m in summary.sales_by_month] == ["2024-01", "2024-02", "2024-03"]
        assert summary.payment_methods[0].method == "Card"
        assert summary.sales_by_country[0].country == "Chile"

    def test_monthly_records_override(self, sample_records: list[SalesRecord]) -> None:
        """Test the monthly trend can span a wider record set."""
        summary = summarize(sample_records[:1], monthly_records=sample_records)
        assert summary.total_transactions == 1
        assert len(summary.sales_by_month) == 3

    def test_empty(self) -> None:
        """Test an empty summary."""
        summary = summarize([])
        assert summary.total_sales == 0
        assert summary.average_ticket == 0
        assert summary.top_products == []
