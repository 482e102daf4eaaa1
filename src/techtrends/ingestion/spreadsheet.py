"""
Spreadsheet ingestion.

Reads an uploaded sales file into the raw two-dimensional string table
consumed by the cleaning pipeline. Any failure is reported as a single
user-facing IngestionError; no records are built from a file that could
not be read.
"""

from collections.abc import Sequence
from pathlib import Path

import pandas as pd

from techtrends.config.settings import IngestionConfig, SheetLayout
from techtrends.utils.logging import get_logger

log = get_logger(__name__)

EXCEL_SUFFIXES = frozenset({".xlsx", ".xls"})
SUPPORTED_SUFFIXES = EXCEL_SUFFIXES | {".csv"}

UNSUPPORTED_FORMAT_MESSAGE = (
    "Please select a valid Excel file (.xlsx or .xls) or CSV file"
)
EMPTY_FILE_MESSAGE = "The file does not contain valid data"
READ_ERROR_MESSAGE = "Error processing the file. Check that the format is correct."


class IngestionError(Exception):
    """A sales file could not be turned into a raw table."""


def _read_sheet(path: Path, separator: str) -> pd.DataFrame:
    """
    Read the first sheet (or the CSV) with every cell as text.

    Args:
        path: Spreadsheet path.
        separator: CSV field separator.

    Returns:
        DataFrame without header interpretation; blanks are empty strings.
    """
    suffix = path.suffix.lower()
    if suffix in EXCEL_SUFFIXES:
        df = pd.read_excel(path, sheet_name=0, header=None, dtype=str)
    else:
        try:
            df = pd.read_csv(
                path,
                header=None,
                dtype=str,
                keep_default_na=False,
                encoding="utf-8",
                on_bad_lines="warn",
                sep=separator,
                engine="python",
            )
        except UnicodeDecodeError:
            log.warning("UTF-8 decode failed, retrying with Latin-1", path=str(path))
            df = pd.read_csv(
                path,
                header=None,
                dtype=str,
                keep_default_na=False,
                encoding="latin-1",
                on_bad_lines="warn",
                sep=separator,
                engine="python",
            )
    return df.fillna("")


def _rows_from_single_column(
    df: pd.DataFrame,
    config: IngestionConfig,
) -> list[list[str]]:
    """Split the joined rows held in one column."""
    if config.source_column >= len(df.columns):
        return []

    rows: list[list[str]] = []
    for cell in df.iloc[:, config.source_column]:
        text = str(cell).strip()
        if not text:
            continue
        rows.append([item.strip() for item in text.split(config.separator)])
    return rows


def _rows_from_columns(df: pd.DataFrame) -> list[list[str]]:
    """Take every non-blank row cell by cell."""
    rows: list[list[str]] = []
    for values in df.itertuples(index=False, name=None):
        row = [str(value).strip() for value in values]
        if any(row):
            rows.append(row)
    return rows


def table_from_frame(
    df: pd.DataFrame,
    config: IngestionConfig | None = None,
) -> list[list[str]]:
    """
    Convert a header-less text DataFrame into raw rows.

    Args:
        df: Sheet contents, one spreadsheet row per DataFrame row.
        config: Ingestion configuration.

    Returns:
        Raw rows according to the configured layout.
    """
    config = config or IngestionConfig()
    df = df.fillna("")
    if config.layout == SheetLayout.SINGLE_COLUMN:
        return _rows_from_single_column(df, config)
    return _rows_from_columns(df)


def read_raw_table(
    path: Path,
    config: IngestionConfig | None = None,
) -> list[list[str]]:
    """
    Read a sales spreadsheet into raw rows.

    Args:
        path: Path to a .xlsx, .xls or .csv file.
        config: Ingestion configuration.

    Returns:
        Raw rows, header included if the file has one.

    Raises:
        IngestionError: If the format is unsupported, the file cannot be
            read, or it yields no rows.
    """
    config = config or IngestionConfig()

    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        log.warning("Unsupported file format", path=str(path), suffix=path.suffix)
        raise IngestionError(UNSUPPORTED_FORMAT_MESSAGE)

    log.info("Reading sales file", path=str(path), layout=config.layout.value)

    try:
        df = _read_sheet(path, config.separator)
    except pd.errors.EmptyDataError as e:
        raise IngestionError(EMPTY_FILE_MESSAGE) from e
    except Exception as e:
        log.error("Failed to read sales file", path=str(path), error=str(e))
        raise IngestionError(READ_ERROR_MESSAGE) from e

    if path.suffix.lower() in EXCEL_SUFFIXES:
        table = table_from_frame(df, config)
    else:
        # CSV rows are already split on the separator
        table = _rows_from_columns(df)

    if not table:
        log.warning("No rows found in sales file", path=str(path))
        raise IngestionError(EMPTY_FILE_MESSAGE)

    log.info("Read sales file", path=str(path), rows=len(table))
    return table


def split_header(
    table: Sequence[Sequence[str | None]],
) -> tuple[Sequence[str | None] | None, list[Sequence[str | None]]]:
    """
    Separate the header row from the data rows.

    Args:
        table: Raw rows with a leading header.

    Returns:
        Tuple of (header or None for an empty table, data rows).
    """
    if not table:
        return None, []
    return table[0], list(table[1:])
