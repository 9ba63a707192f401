from .ledger_row import AMOUNT_FIELDS, LEDGER_COLUMNS, LedgerRow

__all__ = ["LedgerRow", "LEDGER_COLUMNS", "AMOUNT_FIELDS"]
