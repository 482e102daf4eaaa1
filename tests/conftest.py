"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest

from techtrends.records import SOURCE_COLUMNS, SalesRecord


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def header_row() -> list[str]:
    """Header row of the sales spreadsheet."""
    return list(SOURCE_COLUMNS)


@pytest.fixture
def sample_rows() -> list[list[str]]:
    """Raw data rows: four valid, two invalid."""
    return [
        ["T1", "2024-01-15", "P1", "Laptop Pro", "Laptops", "1", "1200.00", "1200.00", "México", "Tarjeta"],
        ["T2", "2024-01-20", "P2", "Mouse", "Accesorios", "3", "$25", "$75", "Perú", "Efectivo"],
        ["T3", "2024-02-03", "P1", "Laptop Pro", "Laptops", "2", "1150", "2300", "Chile", "Tarjeta"],
        ["T4", "2024-02-28", "P3", "Monitor 27", "Monitores", "1", "300", "300", "México", "Transferencia"],
        ["T5", "fecha-mala", "P2", "Mouse", "Accesorios", "1", "25", "25", "Perú", "Efectivo"],
        ["T6", "2024-03-01", "P4", "Teclado", "Accesorios", "0", "40", "0", "Chile", ""],
    ]


@pytest.fixture
def sample_table(header_row: list[str], sample_rows: list[list[str]]) -> list[list[str]]:
    """Raw table with header."""
    return [header_row, *sample_rows]


def make_record(**overrides: object) -> SalesRecord:
    """Create a valid record, overriding selected fields."""
    values: dict[str, object] = {
        "transaction_id": "T1",
        "date": "2024-01-15",
        "product_id": "P1",
        "product_name": "Widget",
        "category": "Tools",
        "quantity": 1.0,
        "unit_price": 10.0,
        "total_amount": 10.0,
        "country": "Mexico",
        "payment_method": "Card",
    }
    values.update(overrides)
    return SalesRecord(**values)  # type: ignore[arg-type]


@pytest.fixture
def record_factory():
    """Factory for valid records with field overrides."""
    return make_record


@pytest.fixture
def sample_records() -> list[SalesRecord]:
    """Valid records across products, months, countries and methods."""
    return [
        make_record(transaction_id="T1", date="2024-01-05", product_name="Widget",
                    quantity=2.0, total_amount=20.0, country="Mexico", payment_method="Card"),
        make_record(transaction_id="T2", date="2024-01-18", product_name="Gadget",
                    quantity=1.0, total_amount=100.0, country="Peru", payment_method="Cash"),
        make_record(transaction_id="T3", date="2024-02-02", product_name="Widget",
                    quantity=3.0, total_amount=30.0, country="Mexico", payment_method="Card"),
        make_record(transaction_id="T4", date="2024-02-14", product_name="Gizmo",
                    quantity=5.0, total_amount=45.0, country="Chile", payment_method="Card"),
        make_record(transaction_id="T5", date="2024-03-30", product_name="Gadget",
                    quantity=1.0, total_amount=100.0, country="Chile", payment_method="Transfer"),
    ]
