# holvi_ledger/views/ledger_table.py
from __future__ import annotations

from typing import Iterable, List

import pandas as pd

from holvi_ledger.data_model.ledger import LEDGER_COLUMNS, LedgerRow

LEDGER_LABELS: List[str] = [label for label, _ in LEDGER_COLUMNS]


def ledger_to_dataframe(rows: Iterable[LedgerRow]) -> pd.DataFrame:
    """Project ledger rows into a display table with the Finnish column legend.

    One table row per ledger row, columns in legend order. Empty amount
    columns hold ``None``.
    """
    records = [
        [getattr(row, name) for _, name in LEDGER_COLUMNS] for row in rows
    ]
    return pd.DataFrame.from_records(records, columns=LEDGER_LABELS).astype(object)
