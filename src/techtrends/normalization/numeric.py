"""Fail-soft numeric parsing for quantity and price cells."""

import re

NON_NUMERIC = re.compile(r"[^\d.\-]")
LEADING_FLOAT = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)")


def parse_number(text: str) -> float:
    """
    Parse a number out of a messy cell.

    Currency symbols, thousands separators and other noise are dropped
    before the longest leading float is read ("$1,250.50" -> 1250.5,
    "10-20" -> 10.0). Unparsable input yields 0.0, which validation
    rejects as a non-positive amount.

    Args:
        text: Raw cell text.

    Returns:
        Parsed value, or 0.0 when nothing numeric is found.
    """
    cleaned = NON_NUMERIC.sub("", text)
    match = LEADING_FLOAT.match(cleaned)
    if match is None:
        return 0.0
    return float(match.group(0))
