# holvi_ledger/controllers/row_mapper.py
"""
Validation of raw bank export rows.

`map_row` turns one positional row of untyped cells (columns A-I) into a
`BankRow`. The checks run in a fixed order and stop at the first failure:

1. Both date cells must be text, otherwise the row is skipped (``None``).
2. Both dates must read as ``DD.MM.YYYY`` (FormatError).
3. Payment class, subclass and category must belong to their closed sets
   (InvalidEnumError).
4. The total must be a finite number (InvalidNumberError).

Note the asymmetry: a blank or numeric date cell skips the row, a date cell
holding malformed text aborts the import.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Sequence, Tuple

from holvi_ledger.data_model.enums import (
    Category,
    PaymentClass,
    PaymentSubclass,
    is_category,
    is_payment_class,
    is_payment_subclass,
)
from holvi_ledger.data_model.excel import RAW_ROW_WIDTH, BankRow
from holvi_ledger.exceptions import InvalidEnumError, LedgerValidationError
from holvi_ledger.utilities import is_string, parse_date_str, to_amount


def _pad(row: Sequence[Any]) -> Tuple[Any, ...]:
    cells = tuple(row[:RAW_ROW_WIDTH])
    return cells + (None,) * (RAW_ROW_WIDTH - len(cells))


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def _check_enum(
    field: str,
    value: Any,
    is_member: Callable[[Any], bool],
    allowed: Tuple[str, ...],
) -> None:
    if not is_member(value):
        raise InvalidEnumError(field, value, allowed)


def map_row(row: Sequence[Any], position: int = 0) -> Optional[BankRow]:
    """
    Validate one data row and build a `BankRow`.

    Parameters
    ----------
    row : Sequence[Any]
        Raw cells in export order. Short rows are padded with ``None``;
        cells past column I are ignored.
    position : int
        0-based index of the row within the data region, attached to any
        raised error as ``position``.

    Returns
    -------
    Optional[BankRow]
        ``None`` when the row must be skipped (a non-text date cell).

    Raises
    ------
    FormatError, InvalidEnumError, InvalidNumberError
    """
    (
        value_date,
        entry_date,
        payment_class,
        payment_subclass,
        category,
        payer,
        description,
        additional_info,
        total_sum,
    ) = _pad(row)

    if not is_string(value_date) or not is_string(entry_date):
        return None

    try:
        parsed_value_date = parse_date_str(value_date)
        parsed_entry_date = parse_date_str(entry_date)

        _check_enum(
            "paymentClass", payment_class, is_payment_class, PaymentClass.values()
        )
        _check_enum(
            "paymentSubclass",
            payment_subclass,
            is_payment_subclass,
            PaymentSubclass.values(),
        )
        _check_enum("category", category, is_category, Category.values())

        amount = to_amount(total_sum)
    except LedgerValidationError as e:
        e.at_position(position)
        raise

    return BankRow(
        value_date=parsed_value_date,
        entry_date=parsed_entry_date,
        payment_class=PaymentClass(payment_class),
        payment_subclass=PaymentSubclass(payment_subclass),
        category=Category(category),
        payer=_text(payer).lower(),
        description=_text(description),
        additional_info=_text(additional_info),
        total_sum=amount,
    )
