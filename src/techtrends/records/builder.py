"""
Record builder.

Turns one raw row into one SalesRecord. Building never fails: short rows
are padded with defaults and bad values surface later as validation
violations.
"""

from collections.abc import Iterable, Sequence

from techtrends.normalization.numeric import parse_number
from techtrends.normalization.temporal import parse_date
from techtrends.normalization.text import strip_special_characters
from techtrends.records.model import FIELD_NAMES, NUMERIC_FIELDS, SalesRecord
from techtrends.utils.logging import get_logger

log = get_logger(__name__)

TEXT_DEFAULT = ""
NUMERIC_DEFAULT = "0"


def _cell(row: Sequence[str | None], index: int, default: str) -> str:
    """Return the cell at index, or default when missing."""
    if index >= len(row) or row[index] is None:
        return default
    return str(row[index])


def build_record(row: Sequence[str | None]) -> SalesRecord:
    """
    Build a SalesRecord from a positional row.

    Text fields are stripped of special characters, numeric fields are
    parsed fail-soft, and the date is canonicalized when possible (the
    trimmed raw text is kept otherwise). Cells beyond the tenth are
    ignored.

    Args:
        row: Raw cells in source column order.

    Returns:
        The built record.
    """
    values: dict[str, str | float] = {}
    for index, field in enumerate(FIELD_NAMES):
        if field in NUMERIC_FIELDS:
            values[field] = parse_number(_cell(row, index, NUMERIC_DEFAULT))
        elif field == "date":
            raw = _cell(row, index, TEXT_DEFAULT)
            values[field] = parse_date(raw) or raw.strip()
        else:
            values[field] = strip_special_characters(_cell(row, index, TEXT_DEFAULT))

    return SalesRecord(**values)  # type: ignore[arg-type]


def build_records(rows: Iterable[Sequence[str | None]]) -> list[SalesRecord]:
    """Build one record per row, preserving order."""
    records = [build_record(row) for row in rows]
    log.debug("Built records", count=len(records))
    return records
