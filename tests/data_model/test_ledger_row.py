# tests/data_model/test_ledger_row.py
from dataclasses import FrozenInstanceError
from datetime import date
from decimal import Decimal

import pytest

from holvi_ledger.data_model.ledger import AMOUNT_FIELDS, LEDGER_COLUMNS, LedgerRow


def _row(**overrides):
    base = dict(
        date=date(2024, 1, 1),
        description="Q1 dues",
        payee_or_payer="Matti Meikäläinen",
        receipt_number=1,
        total=Decimal("20.00"),
    )
    base.update(overrides)
    return LedgerRow(**base)


def test_ledger_row_is_immutable():
    r = _row()
    with pytest.raises(FrozenInstanceError):
        setattr(r, "total", Decimal("1"))


def test_ledger_row_rejects_two_amount_columns():
    with pytest.raises(ValueError) as ei:
        _row(membership_fee=Decimal("1"), tax=Decimal("1"))
    assert "at most one" in str(ei.value)


def test_amount_field_reports_populated_column():
    assert _row().amount_field is None
    assert _row(membership_fee=Decimal("20.00")).amount_field == "membership_fee"


def test_legend_has_twelve_finnish_columns_in_order():
    labels = [label for label, _ in LEDGER_COLUMNS]
    assert labels == [
        "Pvm",
        "Selite",
        "Maksaja/Saaja",
        "Tosite nro.",
        "Tili",
        "Jäsenmaksut",
        "Osallistumismaksut",
        "Vuokrakulut",
        "Muut",
        "Pankkikulut",
        "Korkotuotot",
        "Vero",
    ]
    fields = [name for _, name in LEDGER_COLUMNS]
    assert fields[5:] == list(AMOUNT_FIELDS)


def test_to_dict_follows_legend_order():
    d = _row(banking_fee=Decimal("20.00")).to_dict()
    assert list(d) == [name for _, name in LEDGER_COLUMNS]
    assert d["banking_fee"] == Decimal("20.00")
    assert d["tax"] is None
