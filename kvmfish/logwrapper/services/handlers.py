from __future__ import annotations

import logging
from collections import deque
from typing import Deque, List, Tuple

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"


class InMemoryLogHandler(logging.Handler):
    """Keeps the last ``maxlen`` records for ``GET /logs/``.

    Stores (levelno, formatted line) so the endpoint can filter by level
    after the fact.
    """

    def __init__(self, maxlen: int = 1000, level: int = logging.NOTSET) -> None:
        super().__init__(level=level)
        self.buffer: Deque[Tuple[int, str]] = deque(maxlen=maxlen)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
        except Exception:
            self.handleError(record)
            return
        self.buffer.append((record.levelno, line))

    def tail(self, n: int = 100, min_level: int = logging.NOTSET) -> List[str]:
        if n <= 0:
            return []
        lines = [line for levelno, line in list(self.buffer) if levelno >= min_level]
        return lines[-n:]
