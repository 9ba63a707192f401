# holvi_ledger/__init__.py
"""
Holvi bank export → accounting ledger.

Reads a Holvi xlsx export, validates and classifies each transaction row and
reshapes it into ledger rows with one amount column per category.
"""

from .controllers import IngestSession, read_excel_file
from .data_model import Category, LedgerRow, PaymentClass, PaymentSubclass
from .exceptions import (
    FormatError,
    InvalidEnumError,
    InvalidNumberError,
    LedgerValidationError,
)

__all__ = [
    "read_excel_file",
    "IngestSession",
    "LedgerRow",
    "Category",
    "PaymentClass",
    "PaymentSubclass",
    "LedgerValidationError",
    "FormatError",
    "InvalidEnumError",
    "InvalidNumberError",
]
