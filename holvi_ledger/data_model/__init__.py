# holvi_ledger/data_model/__init__.py
from .enums import (
    Category, PaymentClass, PaymentSubclass,
    is_category, is_payment_class, is_payment_subclass)
from .excel import RAW_ROW_WIDTH, BankRow
from .ledger import AMOUNT_FIELDS, LEDGER_COLUMNS, LedgerRow
__all__ = [
    "Category", "PaymentClass", "PaymentSubclass", "is_category",
    "is_payment_class", "is_payment_subclass", "BankRow", "RAW_ROW_WIDTH",
    "LedgerRow", "LEDGER_COLUMNS", "AMOUNT_FIELDS"]
