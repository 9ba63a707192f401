"""
Bank export (xlsx) → ledger rows.

This module owns the whole import of one file:
• Decode the first worksheet into positional rows with openpyxl, rendering
  date cells as ``dd.mm.yyyy`` text so date handling stays with `map_row`.
• Drop the fixed header/metadata block (the first six rows).
• Validate, number and route every remaining row, in order.

A fatal validation error aborts the import; no partial result is returned.
"""

# holvi_ledger/controllers/excel_reader.py
from __future__ import annotations

import logging
import logging.config
from datetime import date
from os import PathLike
from typing import IO, Any, Callable, Final, Iterable, List, Sequence, Union

import openpyxl

from holvi_ledger.controllers.category_router import transform_row
from holvi_ledger.controllers.row_mapper import map_row
from holvi_ledger.data_model.ledger import LedgerRow
from holvi_ledger.exceptions import LedgerValidationError
from holvi_ledger.utilities import LOGGING

logging.config.dictConfig(LOGGING)
log = logging.getLogger(__name__)

HEADER_ROW_COUNT: Final = 6
EXCEL_DATE_FORMAT: Final = "dd.mm.yyyy"
_STRFTIME_FORMATS: Final = {"dd.mm.yyyy": "%d.%m.%Y"}

Source = Union[str, PathLike, IO[bytes]]
RawRows = Sequence[Sequence[Any]]


def _format_cell(value: Any, strftime_format: str) -> Any:
    # datetime is a date subclass
    if isinstance(value, date):
        return value.strftime(strftime_format)
    return value


def decode_rows(
    source: Source, date_format: str = EXCEL_DATE_FORMAT
) -> List[tuple]:
    """Read the first worksheet of an xlsx file into rows of raw cell values.

    Every row from the first one is returned, blank rows included, so row
    positions match the sheet. Date cells come back as text in ``date_format``
    (only ``dd.mm.yyyy`` is supported), empty cells as ``None``. openpyxl
    errors are not caught.
    """
    if date_format not in _STRFTIME_FORMATS:
        raise ValueError(
            f"Unsupported date format: {date_format!r}. "
            f"Expected one of: {', '.join(_STRFTIME_FORMATS)}"
        )
    strftime_format = _STRFTIME_FORMATS[date_format]
    workbook = openpyxl.load_workbook(source, data_only=True)
    try:
        sheet = workbook.worksheets[0]
        return [
            tuple(_format_cell(value, strftime_format) for value in row)
            for row in sheet.iter_rows(min_row=1, values_only=True)
        ]
    finally:
        workbook.close()


def rows_to_ledger(rows: Iterable[Sequence[Any]]) -> List[LedgerRow]:
    """Validate and route the data region rows, numbering accepted rows 1..N.

    Skipped rows do not consume a receipt number.
    """
    result: List[LedgerRow] = []
    for position, row in enumerate(rows):
        try:
            record = map_row(row, position)
        except LedgerValidationError as e:
            log.warning("Aborting import at data row %d: %s", position, e)
            raise
        if record is None:
            log.debug(
                "Skipping data row %d: non-text date cells (%s, %s)",
                position,
                type(row[0]).__name__ if len(row) > 0 else "missing",
                type(row[1]).__name__ if len(row) > 1 else "missing",
            )
            continue
        result.append(transform_row(record, len(result) + 1))
    return result


def read_excel_file(
    source: Source,
    *,
    decoder: Callable[[Source], RawRows] = decode_rows,
) -> List[LedgerRow]:
    """Read a bank export and return its ledger rows.

    Parameters
    ----------
    source : str | PathLike | binary file object
        The xlsx export.
    decoder : Callable
        Turns ``source`` into raw rows; defaults to `decode_rows`.

    Returns
    -------
    List[LedgerRow]
        One row per accepted data row, in sheet order.

    Raises
    ------
    FormatError, InvalidEnumError, InvalidNumberError
        On the first invalid data row.
    Exception
        Whatever the decoder raises for an unreadable file, unchanged.
    """
    log.info("Reading bank export: %s", getattr(source, "name", source))
    rows = decoder(source)
    ledger = rows_to_ledger(rows[HEADER_ROW_COUNT:])
    log.info(
        "Read %d ledger rows from %d data rows",
        len(ledger),
        max(len(rows) - HEADER_ROW_COUNT, 0),
    )
    return ledger
