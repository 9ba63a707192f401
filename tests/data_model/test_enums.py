# tests/data_model/test_enums.py
import pytest

from holvi_ledger.data_model.enums import (
    Category,
    PaymentClass,
    PaymentSubclass,
    is_category,
    is_payment_class,
    is_payment_subclass,
)


def test_enum_values_match_bank_export_labels():
    assert PaymentClass.values() == ("expense", "income")
    assert PaymentSubclass.values() == ("outboundpayment", "order", "iban_payment")
    assert Category.values() == (
        "Palvelumaksut",
        "Jäsenmaksu",
        "Myyntiartikkelit",
        "Yleiset menot",
        "Lanit",
    )


@pytest.mark.parametrize(
    "check,value,expected",
    [
        (is_payment_class, "expense", True),
        (is_payment_class, "income", True),
        (is_payment_class, "Expense", False),
        (is_payment_class, None, False),
        (is_payment_subclass, "iban_payment", True),
        (is_payment_subclass, "iban payment", False),
        (is_category, "Lanit", True),
        (is_category, "lanit", False),
        (is_category, 5, False),
    ],
)
def test_membership_checks_are_exact(check, value, expected):
    assert check(value) is expected


def test_enum_lookup_by_value():
    assert PaymentClass("expense") is PaymentClass.EXPENSE
    assert Category("Myyntiartikkelit") is Category.MERCHANDISE
    with pytest.raises(ValueError):
        Category("Unknown")
