"""
Sales record model and builder.

Maps positional spreadsheet rows onto the fixed 10-field record schema.
"""

from techtrends.records.builder import build_record, build_records
from techtrends.records.model import FIELD_NAMES, SOURCE_COLUMNS, SalesRecord

__all__ = [
    "FIELD_NAMES",
    "SOURCE_COLUMNS",
    "SalesRecord",
    "build_record",
    "build_records",
]
