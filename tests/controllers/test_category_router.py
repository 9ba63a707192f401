# tests/controllers/test_category_router.py
from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from holvi_ledger.controllers.category_router import transform_row
from holvi_ledger.data_model.enums import Category, PaymentClass, PaymentSubclass
from holvi_ledger.data_model.excel import BankRow
from holvi_ledger.data_model.ledger import AMOUNT_FIELDS


def bank_row(**overrides) -> BankRow:
    base = dict(
        value_date=date(2024, 3, 5),
        entry_date=date(2024, 3, 6),
        payment_class=PaymentClass.EXPENSE,
        payment_subclass=PaymentSubclass.OUTBOUND_PAYMENT,
        category=Category.GENERAL_EXPENSE,
        payer="acme oy",
        description="widget",
        additional_info="",
        total_sum=Decimal("456.78"),
    )
    base.update(overrides)
    return BankRow(**base)


def _amounts(out):
    return {name: getattr(out, name) for name in AMOUNT_FIELDS if getattr(out, name) is not None}


def test_service_fee_goes_to_banking_fee_with_fixed_description():
    out = transform_row(bank_row(category=Category.SERVICE_FEE), 1)
    assert out.payee_or_payer == "Acme Oy"
    assert out.description == "Holvi, palvelumaksu"
    assert _amounts(out) == {"banking_fee": Decimal("456.78")}


def test_membership_fee_keeps_description():
    out = transform_row(
        bank_row(
            category=Category.MEMBERSHIP_FEE,
            payment_class=PaymentClass.INCOME,
            description="Q1 dues",
        ),
        2,
    )
    assert out.description == "Q1 dues"
    assert _amounts(out) == {"membership_fee": Decimal("456.78")}


def test_merchandise_is_prefixed_webshop_purchase():
    out = transform_row(bank_row(category=Category.MERCHANDISE), 1)
    assert out.description == "Verkkokauppaosto: widget"
    assert _amounts(out) == {"other_expense": Decimal("456.78")}


def test_general_expense_goes_to_other_expense():
    out = transform_row(bank_row(category=Category.GENERAL_EXPENSE), 1)
    assert out.description == "widget"
    assert out.payee_or_payer == "Acme Oy"
    assert _amounts(out) == {"other_expense": Decimal("456.78")}


def test_expense_rule_wins_over_lanparty():
    """An Expense row tagged Lanit is caught by the expense rule first."""
    out = transform_row(
        bank_row(category=Category.LANPARTY, payment_class=PaymentClass.EXPENSE), 1
    )
    assert _amounts(out) == {"other_expense": Decimal("456.78")}


def test_lanparty_income_goes_to_participation_fee():
    out = transform_row(
        bank_row(category=Category.LANPARTY, payment_class=PaymentClass.INCOME), 1
    )
    assert out.description == "widget"
    assert _amounts(out) == {"participation_fee": Decimal("456.78")}


@pytest.mark.parametrize(
    "category",
    [Category.SERVICE_FEE, Category.MEMBERSHIP_FEE, Category.MERCHANDISE],
)
def test_category_rules_apply_regardless_of_class(category):
    exp = transform_row(bank_row(category=category, payment_class=PaymentClass.EXPENSE), 1)
    inc = transform_row(bank_row(category=category, payment_class=PaymentClass.INCOME), 1)
    assert exp == inc


def test_income_general_expense_falls_back_to_undefined():
    out = transform_row(
        bank_row(category=Category.GENERAL_EXPENSE, payment_class=PaymentClass.INCOME),
        7,
    )
    assert out.payee_or_payer == "UNDEFINED"
    assert out.description == "UNDEFINED"
    assert _amounts(out) == {}
    assert out.amount_field is None


@pytest.mark.parametrize("category", list(Category))
@pytest.mark.parametrize("payment_class", list(PaymentClass))
def test_static_fields_are_carried_on_every_branch(category, payment_class):
    out = transform_row(bank_row(category=category, payment_class=payment_class), 42)
    assert out.date == date(2024, 3, 5)
    assert out.receipt_number == 42
    assert out.total == Decimal("456.78")
