"""
Text normalization for free-form spreadsheet cells.

The allowed character set is fixed to the Spanish locale of the source
data: ASCII word characters plus the accented vowels and ñ.
"""

import re
import unicodedata

# Everything outside word chars, whitespace, "-", ".", "," and áéíóúñ
SPECIAL_CHARACTERS = re.compile(r"[^A-Za-z0-9_\s\-.,áéíóúÁÉÍÓÚñÑ]")
WHITESPACE_RUN = re.compile(r"\s+")

# Unicode block "Combining Diacritical Marks"
COMBINING_MARKS = re.compile(r"[\u0300-\u036f]")


def strip_accents(text: str) -> str:
    """
    Remove diacritics and surrounding whitespace.

    Decomposes to NFD and drops the combining marks, so "Perú" becomes
    "Peru" and "Señor" becomes "Senor".

    Args:
        text: Text to normalize.

    Returns:
        Text without accents, trimmed.
    """
    decomposed = unicodedata.normalize("NFD", text)
    return COMBINING_MARKS.sub("", decomposed).strip()


def strip_special_characters(text: str) -> str:
    """
    Remove unwanted symbols and collapse whitespace.

    Args:
        text: Raw cell text.

    Returns:
        Cleaned text with single spaces, trimmed.
    """
    cleaned = SPECIAL_CHARACTERS.sub("", text)
    return WHITESPACE_RUN.sub(" ", cleaned).strip()
