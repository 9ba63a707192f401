# holvi_ledger/data_model/excel/__init__.py
from .bank_row import RAW_ROW_WIDTH, BankRow

__all__ = ["BankRow", "RAW_ROW_WIDTH"]
