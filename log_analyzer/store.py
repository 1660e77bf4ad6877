"""Thread-safe in-memory log store with pipe-delimited file persistence."""

import logging
import os
import re
import threading
from collections import Counter
from datetime import datetime

from log_analyzer.entry import (
    FIELD_SEPARATOR,
    TIMESTAMP_FORMAT,
    LogEntry,
    format_line,
    parse_line,
)

logger = logging.getLogger(__name__)

_LINE_BREAKS = re.compile(r"[\r\n]+")

# str.lower() also folds non-ASCII letters; level matching is ASCII-only.
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def _normalize(value: str) -> str:
    """Collapse line breaks to a space and trim, so the field fits on one line."""
    return _LINE_BREAKS.sub(" ", value).strip()


def _ascii_casefold(value: str) -> str:
    return value.translate(_ASCII_LOWER)


class LogStore:
    """Ordered, append-only collection of LogEntry objects."""

    def __init__(self, time_func=None):
        self._entries: list[LogEntry] = []
        self._lock = threading.Lock()
        self._time_func = time_func or datetime.now

    def __len__(self) -> int:
        return self.count_total()

    def load(self, path: str) -> int:
        """Append every parseable line of `path` to the store.

        A missing file is not an error. Existing entries are kept, so loading
        the same file twice doubles its entries. Lines that are not valid
        UTF-8 or do not split into three fields are skipped. Returns the
        number appended. Raises OSError if the file exists but cannot be read.
        """
        if not os.path.exists(path):
            logger.info("No log file at %s, starting empty", path)
            return 0

        loaded = []
        skipped = 0
        with open(path, "rb") as f:
            for raw in f:
                try:
                    line = raw.decode("utf-8")
                except UnicodeDecodeError:
                    skipped += 1
                    continue
                entry = parse_line(line)
                if entry is None:
                    skipped += 1
                    continue
                loaded.append(entry)

        with self._lock:
            self._entries.extend(loaded)

        if skipped:
            logger.debug("Skipped %d malformed line(s) in %s", skipped, path)
        logger.info("Loaded %d entries from %s", len(loaded), path)
        return len(loaded)

    def save(self, path: str) -> int:
        """Overwrite `path` with one line per entry. Returns the number written.

        Characters UTF-8 cannot encode (lone surrogates) are written as
        backslash escapes.
        """
        snapshot = self.entries()
        with open(path, "w", encoding="utf-8", errors="backslashreplace") as f:
            for entry in snapshot:
                f.write(format_line(entry) + "\n")
        logger.info("Saved %d entries to %s", len(snapshot), path)
        return len(snapshot)

    def add(self, level: str, message: str) -> LogEntry:
        """Append a new entry stamped with the current local time."""
        entry = LogEntry(
            timestamp=self._time_func().strftime(TIMESTAMP_FORMAT),
            level=_normalize(level.replace(FIELD_SEPARATOR, " ")),
            message=_normalize(message),
        )
        with self._lock:
            self._entries.append(entry)
        return entry

    def entries(self) -> list[LogEntry]:
        """Return a copy of all entries in insertion order."""
        with self._lock:
            return list(self._entries)

    def filter_by_level(self, level: str) -> list[LogEntry]:
        """Entries whose level matches, ignoring ASCII case."""
        wanted = _ascii_casefold(level)
        return [e for e in self.entries() if _ascii_casefold(e.level) == wanted]

    def search(self, query: str) -> list[LogEntry]:
        """Entries whose message contains `query` (case-insensitive)."""
        needle = query.lower()
        return [e for e in self.entries() if needle in e.message.lower()]

    def statistics(self) -> dict[str, int]:
        """Count entries per exact level string. Key order is unspecified."""
        return dict(Counter(e.level for e in self.entries()))

    def count_total(self) -> int:
        with self._lock:
            return len(self._entries)

    def recent(self, count: int) -> list[LogEntry]:
        """Return the last `count` entries, oldest first."""
        if count <= 0:
            return []
        return self.entries()[-count:]

    def clear(self):
        with self._lock:
            self._entries.clear()
