"""
Errors raised while turning a bank export into ledger rows.

Every fatal validation error derives from :class:`LedgerValidationError`
(a ``ValueError``), so callers can catch the whole family or one kind:

• :class:`FormatError`        – a date cell is text but not ``DD.MM.YYYY``
• :class:`InvalidEnumError`   – a classification cell is outside its closed set
• :class:`InvalidNumberError` – the total cannot be read as a finite number

Errors from the spreadsheet decoder itself are not wrapped.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Tuple


class LedgerValidationError(ValueError):
    """Base class for row validation failures that abort an import."""

    position: Optional[int] = None

    def at_position(self, position: int) -> "LedgerValidationError":
        """Record the 0-based data-region index of the offending row."""
        self.position = position
        return self


class FormatError(LedgerValidationError):
    def __init__(self, value: str, expected: str) -> None:
        self.value = value
        self.expected = expected
        super().__init__(
            f"Invalid date string: '{value}'. Expected format is {expected}"
        )


class InvalidEnumError(LedgerValidationError):
    def __init__(self, field: str, value: Any, expected: Iterable[str]) -> None:
        self.field = field
        self.value = value
        self.expected: Tuple[str, ...] = tuple(expected)
        super().__init__(
            f"Invalid {field}: {value}. Expected one of: {', '.join(self.expected)}"
        )


class InvalidNumberError(LedgerValidationError, TypeError):
    def __init__(self, value: Any) -> None:
        self.value = value
        super().__init__(f"Invalid totalSum: {value}")


__all__ = [
    "LedgerValidationError",
    "FormatError",
    "InvalidEnumError",
    "InvalidNumberError",
]
