"""Log entry codec — frozen dataclass + pipe-delimited line format."""

from dataclasses import dataclass

FIELD_SEPARATOR = "|"

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LogEntry:
    timestamp: str
    level: str
    message: str


def parse_line(line: str) -> LogEntry | None:
    """Parse a `timestamp|level|message` line. Returns None for unparseable lines.

    Only the first two separators split fields; the message keeps the rest.
    """
    stripped = line.rstrip("\r\n")
    parts = stripped.split(FIELD_SEPARATOR, 2)
    if len(parts) != 3:
        return None

    timestamp, level, message = (part.strip() for part in parts)
    return LogEntry(timestamp=timestamp, level=level, message=message)


def format_line(entry: LogEntry) -> str:
    """Serialize an entry without a trailing newline."""
    return FIELD_SEPARATOR.join((entry.timestamp, entry.level, entry.message))
