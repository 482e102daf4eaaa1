"""Tests for the Pandera sales frame schema."""

from collections.abc import Callable

import pandas as pd
import pandera as pa
import pytest

from techtrends.etl import run_cleaning
from techtrends.records import FIELD_NAMES, SalesRecord
from techtrends.schemas import SalesRecordSchema, records_to_frame

RecordFactory = Callable[..., SalesRecord]


class TestRecordsToFrame:
    """Tests for records_to_frame."""

    def test_valid_records(self, sample_records: list[SalesRecord]) -> None:
        """Test valid records produce a validated frame."""
        df = records_to_frame(sample_records)
        assert list(df.columns) == list(FIELD_NAMES)
        assert len(df) == len(sample_records)
        assert df["total_amount"].sum() == pytest.approx(295.0)

    def test_empty(self) -> None:
        """Test no records gives an empty frame with all columns."""
        df = records_to_frame([])
        assert list(df.columns) == list(FIELD_NAMES)
        assert df.empty

    def test_cleaned_valid_records_fit_schema(self, sample_rows: list[list[str]]) -> None:
        """Test records that pass validation always satisfy the frame schema."""
        rows = [
            *sample_rows,
            ["T7", "March", "P5", "Cable", "Accesorios", "1", "5", "5", "Chile", "Efectivo"],
            ["T8", "March 15, 2024", "P5", "Cable", "Accesorios", "1", "5", "5", "Chile", "Efectivo"],
        ]
        result = run_cleaning(rows)
        df = records_to_frame(result.valid_records)
        assert df["transaction_id"].tolist() == ["T1", "T2", "T3", "T4", "T8"]
        assert df["date"].iloc[-1] == "2024-03-15"

    def test_invalid_record_fails(self, record_factory: RecordFactory) -> None:
        """Test a non-positive amount breaks the schema."""
        with pytest.raises(pa.errors.SchemaError):
            records_to_frame([record_factory(quantity=0.0)])

    def test_skip_validation(self, record_factory: RecordFactory) -> None:
        """Test invalid records can be tabulated without validation."""
        df = records_to_frame([record_factory(date="fecha-mala")], validate=False)
        assert df.loc[0, "date"] == "fecha-mala"


class TestSalesRecordSchema:
    """Tests for SalesRecordSchema."""

    def test_non_canonical_date_fails(self, sample_records: list[SalesRecord]) -> None:
        """Test dates must be YYYY-MM-DD."""
        df = records_to_frame(sample_records)
        df.loc[0, "date"] = "15/01/2024"
        with pytest.raises(pa.errors.SchemaError):
            SalesRecordSchema.validate(df)

    def test_extra_columns_rejected(self, sample_records: list[SalesRecord]) -> None:
        """Test the frame must contain exactly the record fields."""
        df = records_to_frame(sample_records)
        df["extra"] = 1
        with pytest.raises(pa.errors.SchemaError):
            SalesRecordSchema.validate(df)

    def test_numeric_strings_coerced(self, sample_records: list[SalesRecord]) -> None:
        """Test numeric columns are coerced to float."""
        df = records_to_frame(sample_records).astype({"quantity": str})
        validated = SalesRecordSchema.validate(df)
        assert pd.api.types.is_float_dtype(validated["quantity"])
