"""
Pandera schema for tabular views of cleaned sales records.

Presentation consumers (tables, charts) receive the valid records as a
DataFrame; this schema is the contract for that frame.
"""

from collections.abc import Sequence

import pandas as pd
import pandera.pandas as pa
from pandera.typing import Series

from techtrends.records.model import FIELD_NAMES, SalesRecord
from techtrends.utils.logging import get_logger

log = get_logger(__name__)


class SalesRecordSchema(pa.DataFrameModel):
    """
    Schema for valid sales records.

    One row per transaction, columns named after record fields.
    """

    transaction_id: Series[str] = pa.Field(
        str_length={"min_value": 1},
        description="Transaction identifier (duplicates allowed)",
    )
    date: Series[str] = pa.Field(
        str_matches=r"^\d{4}-\d{2}-\d{2}$",
        description="Canonical transaction date (YYYY-MM-DD)",
    )
    product_id: Series[str] = pa.Field(
        str_length={"min_value": 1},
        description="Product identifier",
    )
    product_name: Series[str] = pa.Field(
        str_length={"min_value": 1},
        description="Product display name",
    )
    category: Series[str] = pa.Field(
        description="Product category (may be empty)",
    )
    quantity: Series[float] = pa.Field(gt=0, description="Units sold")
    unit_price: Series[float] = pa.Field(gt=0, description="Price per unit")
    total_amount: Series[float] = pa.Field(gt=0, description="Transaction total")
    country: Series[str] = pa.Field(
        str_length={"min_value": 1},
        description="Country of sale",
    )
    payment_method: Series[str] = pa.Field(
        str_length={"min_value": 1},
        description="Payment method",
    )

    class Config:
        """Schema configuration."""

        name = "SalesRecordSchema"
        strict = True  # Exactly the record fields
        coerce = True


def records_to_frame(
    records: Sequence[SalesRecord],
    *,
    validate: bool = True,
) -> pd.DataFrame:
    """
    Convert records into a DataFrame with one column per field.

    Args:
        records: Records to convert, usually the valid subset of a run.
        validate: Whether to validate against SalesRecordSchema.

    Returns:
        DataFrame in field order.

    Raises:
        pandera.errors.SchemaError: If validation is requested and a
            record breaks the schema.
    """
    df = pd.DataFrame([r.to_dict() for r in records], columns=list(FIELD_NAMES))

    if validate:
        df = SalesRecordSchema.validate(df)
        log.debug("Sales frame validated", rows=len(df))

    return df
