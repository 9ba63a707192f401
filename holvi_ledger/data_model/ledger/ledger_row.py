# holvi_ledger/data_model/ledger/ledger_row.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Any, Dict, Final, Optional, Tuple

# Display legend, in column order: (label, LedgerRow field).
LEDGER_COLUMNS: Final[Tuple[Tuple[str, str], ...]] = (
    ("Pvm", "date"),
    ("Selite", "description"),
    ("Maksaja/Saaja", "payee_or_payer"),
    ("Tosite nro.", "receipt_number"),
    ("Tili", "total"),
    ("Jäsenmaksut", "membership_fee"),
    ("Osallistumismaksut", "participation_fee"),
    ("Vuokrakulut", "rent_expense"),
    ("Muut", "other_expense"),
    ("Pankkikulut", "banking_fee"),
    ("Korkotuotot", "interest_revenue"),
    ("Vero", "tax"),
)

AMOUNT_FIELDS: Final[Tuple[str, ...]] = (
    "membership_fee",
    "participation_fee",
    "rent_expense",
    "other_expense",
    "banking_fee",
    "interest_revenue",
    "tax",
)


@dataclass(frozen=True)
class LedgerRow:
    """
    One classified transaction in accounting-ledger shape.

    ``receipt_number`` is 1-based and dense over accepted rows. At most one of
    the category amount fields is set; none is set for unclassified rows.
    """

    date: date
    description: str
    payee_or_payer: str
    receipt_number: int
    total: Decimal
    membership_fee: Optional[Decimal] = None
    participation_fee: Optional[Decimal] = None
    rent_expense: Optional[Decimal] = None
    other_expense: Optional[Decimal] = None
    banking_fee: Optional[Decimal] = None
    interest_revenue: Optional[Decimal] = None
    tax: Optional[Decimal] = None

    def __post_init__(self) -> None:
        populated = [name for name in AMOUNT_FIELDS if getattr(self, name) is not None]
        if len(populated) > 1:
            raise ValueError(
                f"LedgerRow allows at most one amount column, got: {populated}"
            )

    @property
    def amount_field(self) -> Optional[str]:
        """Name of the populated amount column, or ``None`` when unclassified."""
        for name in AMOUNT_FIELDS:
            if getattr(self, name) is not None:
                return name
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for _, name in LEDGER_COLUMNS}
