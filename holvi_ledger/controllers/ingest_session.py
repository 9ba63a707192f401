# holvi_ledger/controllers/ingest_session.py
from __future__ import annotations

import logging
import logging.config
import threading
from concurrent.futures import Executor, Future
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional

from holvi_ledger.controllers import excel_reader
from holvi_ledger.data_model.ledger import LedgerRow
from holvi_ledger.utilities import LOGGING

logging.config.dictConfig(LOGGING)
log = logging.getLogger(__name__)


@dataclass
class IngestSession:
    """
    Holds the result of the most recent bank export import for a viewer.

    Every import attempt gets a token from `begin`. Results are published
    through `accept` / `reject`, which drop anything that does not carry the
    latest token, so a slow import of an older file can never overwrite the
    result of a newer one.
    """

    reader: Callable[[Any], List[LedgerRow]] = excel_reader.read_excel_file
    source: Optional[Any] = None
    rows: List[LedgerRow] = field(default_factory=list)
    error: Optional[BaseException] = None
    latest_token: int = 0
    _lock: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False, compare=False
    )

    def begin(self, source: Any) -> int:
        with self._lock:
            self.latest_token += 1
            self.source = source
            self.rows = []
            self.error = None
            return self.latest_token

    def is_current(self, token: int) -> bool:
        return token == self.latest_token

    def accept(self, token: int, rows: List[LedgerRow]) -> bool:
        with self._lock:
            if not self.is_current(token):
                log.debug(
                    "Dropping stale result of attempt %d (latest is %d)",
                    token,
                    self.latest_token,
                )
                return False
            self.rows = list(rows)
            self.error = None
            return True

    def reject(self, token: int, error: BaseException) -> bool:
        with self._lock:
            if not self.is_current(token):
                log.debug(
                    "Dropping stale error of attempt %d (latest is %d): %s",
                    token,
                    self.latest_token,
                    error,
                )
                return False
            self.rows = []
            self.error = error
            return True

    def load(self, source: Any) -> List[LedgerRow]:
        """Import ``source`` synchronously and publish the outcome."""
        token = self.begin(source)
        try:
            rows = self.reader(source)
        except Exception as e:
            self.reject(token, e)
            raise
        self.accept(token, rows)
        return rows

    def submit(self, source: Any, executor: Executor) -> Future:
        """
        Import ``source`` on ``executor``.

        The returned future resolves to the ledger rows (or raises the import
        error); the session itself only keeps the outcome if no newer attempt
        was started meanwhile.
        """
        token = self.begin(source)

        def _run() -> List[LedgerRow]:
            try:
                rows = self.reader(source)
            except Exception as e:
                self.reject(token, e)
                raise
            self.accept(token, rows)
            return rows

        return executor.submit(_run)
