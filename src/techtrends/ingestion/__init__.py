"""
Data ingestion for uploaded sales spreadsheets.

Turns .xlsx, .xls and .csv files into raw string tables.
"""

from techtrends.ingestion.spreadsheet import (
    IngestionError,
    read_raw_table,
    split_header,
    table_from_frame,
)

__all__ = ["IngestionError", "read_raw_table", "split_header", "table_from_frame"]
