# holvi_ledger/controllers/category_router.py
"""
Routing of validated bank rows into ledger columns.

The rules are evaluated in order and the first match wins. Order matters:
rule 4 catches every remaining Expense row, so the Lanparty rule only ever
sees Income rows.

    1. Palvelumaksut      → Pankkikulut, fixed description
    2. Jäsenmaksu         → Jäsenmaksut
    3. Myyntiartikkelit   → Muut, "Verkkokauppaosto: " prefix
    4. any Expense        → Muut
    5. Lanit              → Osallistumismaksut
    otherwise             → unclassified ("UNDEFINED", no amount column)
"""

from __future__ import annotations

from decimal import Decimal
from typing import Final

from holvi_ledger.data_model.enums import Category, PaymentClass
from holvi_ledger.data_model.excel import BankRow
from holvi_ledger.data_model.ledger import LedgerRow
from holvi_ledger.utilities import capitalize_all

SERVICE_FEE_DESCRIPTION: Final = "Holvi, palvelumaksu"
WEBSHOP_PREFIX: Final = "Verkkokauppaosto: "
UNDEFINED: Final = "UNDEFINED"


def _classified(
    row: BankRow, receipt_number: int, description: str, **amount: Decimal
) -> LedgerRow:
    return LedgerRow(
        date=row.value_date,
        receipt_number=receipt_number,
        total=row.total_sum,
        payee_or_payer=capitalize_all(row.payer.lower()),
        description=description,
        **amount,
    )


def transform_row(row: BankRow, receipt_number: int) -> LedgerRow:
    """
    Route one `BankRow` to its ledger shape.

    ``date``, ``receipt_number`` and ``total`` are carried over on every
    branch; the matching rule decides the amount column, payee and
    description. Pure function.
    """
    if row.category is Category.SERVICE_FEE:
        return _classified(
            row, receipt_number, SERVICE_FEE_DESCRIPTION, banking_fee=row.total_sum
        )

    if row.category is Category.MEMBERSHIP_FEE:
        return _classified(
            row, receipt_number, row.description, membership_fee=row.total_sum
        )

    if row.category is Category.MERCHANDISE:
        return _classified(
            row,
            receipt_number,
            f"{WEBSHOP_PREFIX}{row.description}",
            other_expense=row.total_sum,
        )

    if row.payment_class is PaymentClass.EXPENSE:
        return _classified(
            row, receipt_number, row.description, other_expense=row.total_sum
        )

    if row.category is Category.LANPARTY:
        return _classified(
            row, receipt_number, row.description, participation_fee=row.total_sum
        )

    return LedgerRow(
        date=row.value_date,
        receipt_number=receipt_number,
        total=row.total_sum,
        payee_or_payer=UNDEFINED,
        description=UNDEFINED,
    )
