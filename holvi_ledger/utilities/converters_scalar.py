# holvi_ledger/utilities/converters_scalar.py
from __future__ import annotations

import re
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Any, Final

from holvi_ledger.exceptions import FormatError, InvalidNumberError

DATE_PATTERN: Final = re.compile(r"^(\d{1,2})\.(\d{1,2})\.(\d{4})$")
DATE_PATTERN_LABEL: Final = "DD.MM.YYYY"

# Longest leading decimal number, the way a lenient float parse reads it.
_NUMBER_PREFIX: Final = re.compile(
    r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
)


def parse_date_str(value: str) -> date:
    """
    Parse a ``D.M.YYYY`` string (1-2 digit day and month) into a ``date``.

    No timezone handling is done; the result is a plain calendar date.

    Raises
    ------
    FormatError
        If ``value`` does not match the pattern or names an impossible day.
    """
    match = DATE_PATTERN.match(value)
    if not match:
        raise FormatError(value, DATE_PATTERN_LABEL)

    day, month, year = (int(g) for g in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise FormatError(value, DATE_PATTERN_LABEL) from e


def to_amount(value: Any) -> Decimal:
    """
    Coerce a raw ``totalSum`` cell into a finite ``Decimal``.

    Accepts:
      • int/float/Decimal → converted as-is (floats via ``str`` to avoid
        binary artifacts)
      • str → the leading number is parsed, trailing text is ignored
        ("12.50 EUR" → Decimal("12.50"))
      • None (an empty cell) → 0, bool → 0 or 1
      • anything else → generic ``Decimal(value)`` coercion

    Raises
    ------
    InvalidNumberError
        If no number can be read or the result is NaN or infinite.
    """
    if value is None:
        amount = Decimal(0)
    elif isinstance(value, bool):
        amount = Decimal(int(value))
    elif isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        match = _NUMBER_PREFIX.match(value.strip())
        if not match:
            raise InvalidNumberError(value)
        amount = Decimal(match.group(0))
    else:
        try:
            amount = Decimal(value)
        except (InvalidOperation, TypeError, ValueError) as e:
            raise InvalidNumberError(value) from e

    if not amount.is_finite():
        raise InvalidNumberError(value)
    return amount
