from __future__ import annotations
import logging
import re
import threading
import time
from typing import Dict

from ...errors import CapabilityAbsent, LineIOError, MalformedValue

logger = logging.getLogger("hardware.gpio")

_INT_RE = re.compile(rb"[+-]?[0-9]+\Z")


class GPIOLineDriver:
    """Read and pulse single sysfs GPIO lines.

    A line reference is the path of its ``value`` file. An empty reference
    means the line is not wired on this board and raises ``CapabilityAbsent``
    instead of reading as 0.

    With ``serialize_pulses`` on, pulses on the same line wait for each other
    so two requests can not interleave their press/release writes. Pulses on
    different lines still overlap.
    """

    def __init__(self, serialize_pulses: bool = True) -> None:
        self.serialize_pulses = serialize_pulses
        self._locks: Dict[str, threading.Lock] = {}
        self._locks_guard = threading.Lock()

    def _line_lock(self, ref: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._locks.get(ref)
            if lock is None:
                lock = self._locks[ref] = threading.Lock()
            return lock

    def read_line(self, ref: str) -> int:
        if not ref:
            raise CapabilityAbsent()
        try:
            with open(ref, "rb") as f:
                raw = f.read().strip()
        except OSError as exc:
            raise LineIOError(ref, "read") from exc
        # ASCII decimal only: no "1_0", no non-ASCII digits
        if not _INT_RE.match(raw):
            raise MalformedValue(ref, raw.decode("utf-8", errors="replace"))
        return int(raw)

    def write_line(self, ref: str, value: int) -> None:
        if not ref:
            raise CapabilityAbsent()
        try:
            with open(ref, "w", encoding="utf-8") as f:
                f.write(str(value))
        except OSError as exc:
            raise LineIOError(ref, "write") from exc

    def pulse_line(self, ref: str, hold_ms: int) -> None:
        """Press (1), hold for ``hold_ms`` milliseconds, release (0).

        A failed write aborts the pulse and leaves the line as the last
        successful write set it.
        """
        if not ref:
            raise CapabilityAbsent()
        if not self.serialize_pulses:
            self._pulse(ref, hold_ms)
            return
        with self._line_lock(ref):
            self._pulse(ref, hold_ms)

    def _pulse(self, ref: str, hold_ms: int) -> None:
        logger.debug("pulse %s hold=%dms", ref, hold_ms)
        self.write_line(ref, 1)
        if hold_ms > 0:
            time.sleep(hold_ms / 1000.0)
        self.write_line(ref, 0)
