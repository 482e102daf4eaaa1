"""
Canonical sales record.

One record is one normalized transaction line. Records are immutable;
every later stage derives new values instead of editing them.
"""

from dataclasses import asdict, dataclass
from typing import Any

# Source spreadsheet columns, in positional order
SOURCE_COLUMNS: tuple[str, ...] = (
    "id_transaccion",
    "fecha",
    "id_producto",
    "nombre_producto",
    "categoria",
    "cantidad",
    "precio_unitario",
    "total_venta",
    "pais",
    "metodo_pago",
)

# Record attributes, aligned with SOURCE_COLUMNS
FIELD_NAMES: tuple[str, ...] = (
    "transaction_id",
    "date",
    "product_id",
    "product_name",
    "category",
    "quantity",
    "unit_price",
    "total_amount",
    "country",
    "payment_method",
)

NUMERIC_FIELDS: frozenset[str] = frozenset({"quantity", "unit_price", "total_amount"})


@dataclass(frozen=True)
class SalesRecord:
    """
    A cleaned sales transaction.

    Attributes:
        transaction_id: Transaction identifier (not necessarily unique).
        date: Canonical YYYY-MM-DD date, or the raw text if unparsable.
        product_id: Product identifier.
        product_name: Product display name.
        category: Product category.
        quantity: Units sold.
        unit_price: Price per unit.
        total_amount: Transaction total.
        country: Country of sale.
        payment_method: Payment method used.
    """

    transaction_id: str
    date: str
    product_id: str
    product_name: str
    category: str
    quantity: float
    unit_price: float
    total_amount: float
    country: str
    payment_method: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary keyed by field name."""
        return asdict(self)
