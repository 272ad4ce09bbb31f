"""Thread-safe LRU cache with per-entry TTL and an optional write-ahead log."""

from __future__ import annotations

import logging
import sys
import threading
import time
from collections import OrderedDict
from dataclasses import dataclass
from typing import IO, Optional

logger = logging.getLogger(__name__)


class WalWriteError(OSError):
    """Raised when an entry cannot be appended to the write-ahead log."""


@dataclass
class _Entry:
    value: str
    timestamp: float


def _split_fields(line: str) -> list[str]:
    """Split a WAL line on commas, dropping one trailing empty field."""
    parts = line.split(",")
    if parts and parts[-1] == "":
        parts.pop()
    return parts


class LRUCache:
    """Least-recently-used cache whose entries expire after ``ttl_seconds``.

    Mutations are appended to an attached write-ahead log stream before they
    are applied, so a cache can be rebuilt later with :meth:`load_from_wal`.
    """

    def __init__(self, capacity: int, ttl_seconds: int) -> None:
        if capacity <= 0:
            logger.warning("Invalid cache capacity %s. Setting to 1.", capacity)
            capacity = 1
        self.capacity = capacity
        self.ttl_seconds = ttl_seconds
        # Least recently used first, most recently used last.
        self._entries: OrderedDict[str, _Entry] = OrderedDict()
        self._lock = threading.Lock()
        self._wal: Optional[IO[str]] = None

    def set_wal_stream(self, stream: Optional[IO[str]]) -> None:
        """Attach a text stream that receives log entries, or detach with None."""
        with self._lock:
            self._wal = stream

    # -- internals (lock held) ------------------------------------------------

    def _is_expired(self, entry: _Entry) -> bool:
        if self.ttl_seconds <= 0:
            return False
        return int(time.monotonic() - entry.timestamp) > self.ttl_seconds

    def _write_log(self, line: str) -> None:
        if self._wal is None:
            return
        try:
            self._wal.write(line + "\n")
            self._wal.flush()
        except (OSError, ValueError) as exc:
            raise WalWriteError(f"failed to write to WAL: {exc}") from exc

    def _put(self, key: str, value: str, *, log: bool) -> None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None and self._is_expired(entry):
                del self._entries[key]
                entry = None

            if log:
                self._write_log(f"PUT,{key},{value}")

            now = time.monotonic()
            if entry is not None:
                entry.value = value
                entry.timestamp = now
                self._entries.move_to_end(key)
            else:
                if len(self._entries) >= self.capacity:
                    self._entries.popitem(last=False)
                self._entries[key] = _Entry(value, now)

    def _remove(self, key: str, *, log: bool) -> None:
        with self._lock:
            if key not in self._entries:
                return
            if log:
                self._write_log(f"DEL,{key}")
            del self._entries[key]

    def _render(self) -> str:
        body = "".join(f"({key}: {value}) " for key, value in self.items())
        return f"Cache State (Head -> Tail): [ {body}]"

    # -- public API -----------------------------------------------------------

    def get(self, key: str) -> Optional[str]:
        """Return the value for ``key``, or None if absent or expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if self._is_expired(entry):
                del self._entries[key]
                return None
            self._entries.move_to_end(key)
            entry.timestamp = time.monotonic()
            return entry.value

    def put(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``; raises WalWriteError if logging fails."""
        self._put(key, value, log=True)

    def remove(self, key: str) -> None:
        """Delete ``key`` if present; raises WalWriteError if logging fails."""
        self._remove(key, log=True)

    def load_from_wal(self, wal_filename: str) -> tuple[int, int]:
        """Replay a WAL file into this cache without logging.

        Returns the number of PUT and DEL entries applied. A missing file
        is treated as an empty log; other I/O errors propagate.
        """
        try:
            with open(wal_filename, encoding="utf-8", newline="") as wal_file:
                data = wal_file.read()
        except FileNotFoundError:
            logger.info("WAL file '%s' not found. Starting with empty cache.", wal_filename)
            return 0, 0

        logger.info("Loading cache state from WAL file: %s", wal_filename)
        applied_puts = applied_dels = 0
        for line_num, line in enumerate(data.split("\n"), start=1):
            if not line:
                continue
            parts = _split_fields(line)
            match parts:
                case ["PUT", key, value]:
                    self._put(key, value, log=False)
                    applied_puts += 1
                case ["DEL", key]:
                    self._remove(key, log=False)
                    applied_dels += 1
                case _:
                    logger.warning(
                        "Skipping unrecognized or malformed WAL entry at line %d: %s",
                        line_num,
                        line,
                    )
        logger.info(
            "WAL recovery complete. Applied %d PUTs and %d DELs.",
            applied_puts,
            applied_dels,
        )
        return applied_puts, applied_dels

    def items(self) -> list[tuple[str, str]]:
        """Return (key, value) pairs from most to least recently used."""
        with self._lock:
            return [(key, entry.value) for key, entry in reversed(self._entries.items())]

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __str__(self) -> str:
        return self._render()

    def print(self) -> None:
        """Write the cache state, head to tail, as one line on standard output."""
        out = sys.stdout
        out.write(self._render())
        out.write("\n")
        out.flush()