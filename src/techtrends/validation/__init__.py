"""Record validation module."""

from techtrends.validation.core import (
    RULES,
    ValidationRule,
    ValidationVerdict,
    validate_record,
    validate_records,
)
from techtrends.validation.reporter import CleaningReporter

__all__ = [
    "RULES",
    "CleaningReporter",
    "ValidationRule",
    "ValidationVerdict",
    "validate_record",
    "validate_records",
]
