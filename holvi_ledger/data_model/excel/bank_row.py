from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Final

from ..enums import Category, PaymentClass, PaymentSubclass

# Columns A-I of the export: value date, entry date, class, subclass,
# category, payer, description, additional info, total.
RAW_ROW_WIDTH: Final = 9


@dataclass(frozen=True)
class BankRow:
    """One validated row of the bank export, before ledger routing."""

    value_date: date
    entry_date: date
    payment_class: PaymentClass
    payment_subclass: PaymentSubclass
    category: Category
    payer: str  # lower-cased
    description: str
    additional_info: str
    total_sum: Decimal
