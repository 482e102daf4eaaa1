"""
Core validation logic for cleaned sales records.

Checks each record against field-level business rules. Every rule is
evaluated, so a verdict lists all violations rather than the first one.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from techtrends.normalization.temporal import parse_date
from techtrends.records.model import SalesRecord
from techtrends.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class ValidationVerdict:
    """
    Validity judgment for one record.

    Attributes:
        is_valid: True when no rule is violated.
        errors: Human-readable violations, in rule order.
    """

    is_valid: bool
    errors: tuple[str, ...] = ()

    @classmethod
    def from_errors(cls, errors: Iterable[str]) -> "ValidationVerdict":
        """Create a verdict whose validity follows from the error list."""
        errors = tuple(errors)
        return cls(is_valid=not errors, errors=errors)


@dataclass(frozen=True)
class ValidationRule:
    """A named predicate that flags an invalid record."""

    field: str
    message: str
    is_violated: Callable[[SalesRecord], bool]


# Quantity x unit price is not reconciled with the total
RULES: tuple[ValidationRule, ...] = (
    ValidationRule(
        "transaction_id", "Invalid transaction id", lambda r: not r.transaction_id
    ),
    ValidationRule("date", "Invalid date", lambda r: parse_date(r.date) is None),
    ValidationRule("product_id", "Invalid product id", lambda r: not r.product_id),
    ValidationRule(
        "product_name", "Invalid product name", lambda r: not r.product_name
    ),
    ValidationRule(
        "quantity", "Quantity must be greater than 0", lambda r: r.quantity <= 0
    ),
    ValidationRule(
        "unit_price", "Unit price must be greater than 0", lambda r: r.unit_price <= 0
    ),
    ValidationRule(
        "total_amount",
        "Total amount must be greater than 0",
        lambda r: r.total_amount <= 0,
    ),
    ValidationRule("country", "Invalid country", lambda r: not r.country),
    ValidationRule(
        "payment_method", "Invalid payment method", lambda r: not r.payment_method
    ),
)


def validate_record(record: SalesRecord) -> ValidationVerdict:
    """
    Validate a single record against all rules.

    Args:
        record: Record to check.

    Returns:
        Verdict listing every violated rule.
    """
    return ValidationVerdict.from_errors(
        rule.message for rule in RULES if rule.is_violated(record)
    )


def validate_records(records: Iterable[SalesRecord]) -> list[ValidationVerdict]:
    """
    Validate records, one verdict per record in the same order.

    Args:
        records: Records to check.

    Returns:
        List of verdicts aligned with the input.
    """
    verdicts = [validate_record(record) for record in records]
    log.debug(
        "Validated records",
        count=len(verdicts),
        invalid=sum(1 for v in verdicts if not v.is_valid),
    )
    return verdicts
