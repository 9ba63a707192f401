from .ledger_table import LEDGER_LABELS, ledger_to_dataframe

__all__ = ["LEDGER_LABELS", "ledger_to_dataframe"]
