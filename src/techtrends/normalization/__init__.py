"""
Cell normalization layer.

Pure helpers that turn raw spreadsheet cells into clean text, numbers
and canonical dates.
"""

from techtrends.normalization.numeric import parse_number
from techtrends.normalization.temporal import month_key, month_number, parse_date
from techtrends.normalization.text import strip_accents, strip_special_characters

__all__ = [
    "month_key",
    "month_number",
    "parse_date",
    "parse_number",
    "strip_accents",
    "strip_special_characters",
]
