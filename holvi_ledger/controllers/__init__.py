# holvi_ledger/controllers/__init__.py
from .category_router import transform_row
from .excel_reader import decode_rows, read_excel_file, rows_to_ledger
from .ingest_session import IngestSession
from .row_mapper import map_row

__all__ = [
    "map_row",
    "transform_row",
    "decode_rows",
    "rows_to_ledger",
    "read_excel_file",
    "IngestSession",
]
