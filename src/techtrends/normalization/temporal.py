"""
Date normalization for transaction dates.

Parsing follows one fixed rule set so results do not depend on the
machine's locale, timezone or clock:

- text without an explicit four-digit year, or with a relative keyword
  such as "now" or "today", is rejected before parsing;
- ISO 8601 is tried first, then month-first ``M/D/YYYY``, then
  ``pandas.to_datetime`` with ``dayfirst=False``, so an ambiguous
  "01/02/2024" is January 2nd;
- naive values are taken as UTC, aware values are converted to UTC
  before the calendar date is read;
- blank text, unparsable text and years outside 1000-9999 yield None.
"""

import re

import pandas as pd

MONTH_FIRST_FORMAT = "%m/%d/%Y"
EXPLICIT_YEAR = re.compile(r"(?<!\d)\d{4}(?!\d)")
RELATIVE_KEYWORDS = re.compile(r"\b(now|today|tomorrow|yesterday)\b", re.IGNORECASE)


def _coerce(text: str, **kwargs: object) -> pd.Timestamp | None:
    """Run pandas parsing, mapping failures and NaT to None."""
    try:
        ts = pd.to_datetime(text, errors="coerce", utc=True, **kwargs)
    except (ValueError, OverflowError, TypeError):
        return None
    if ts is None or pd.isna(ts):
        return None
    return ts


def _to_utc_timestamp(text: str) -> pd.Timestamp | None:
    """Parse text into a UTC timestamp, or None."""
    text = text.strip()
    if not EXPLICIT_YEAR.search(text) or RELATIVE_KEYWORDS.search(text):
        return None

    ts = _coerce(text, format="ISO8601")
    if ts is None:
        ts = _coerce(text, format=MONTH_FIRST_FORMAT)
    if ts is None:
        ts = _coerce(text, dayfirst=False)

    if ts is None or not 1000 <= ts.year <= 9999:
        return None
    return ts


def parse_date(text: str) -> str | None:
    """
    Parse a date cell into canonical YYYY-MM-DD form.

    Args:
        text: Raw date text.

    Returns:
        Canonical date string, or None if the text is not a date.
    """
    ts = _to_utc_timestamp(text)
    if ts is None:
        return None
    return f"{ts.year:04d}-{ts.month:02d}-{ts.day:02d}"


def month_key(date_text: str) -> str:
    """
    Calendar month bucket (YYYY-MM) for a record date.

    Unparsable dates get their own bucket keyed by the raw text.

    Args:
        date_text: Record date, canonical or raw.

    Returns:
        Month key.
    """
    ts = _to_utc_timestamp(date_text)
    if ts is None:
        return date_text
    return f"{ts.year:04d}-{ts.month:02d}"


def month_number(date_text: str) -> int | None:
    """Calendar month (1-12) of a record date, or None if unparsable."""
    ts = _to_utc_timestamp(date_text)
    if ts is None:
        return None
    return int(ts.month)
