"""Display formatters — plain and colorized (ANSI) entries, statistics."""

from typing import Callable

from log_analyzer.entry import LogEntry

# ANSI color codes
COLORS = {
    "DEBUG": "\033[36m",   # cyan
    "INFO": "\033[32m",    # green
    "WARN": "\033[33m",    # yellow
    "WARNING": "\033[33m", # yellow
    "ERROR": "\033[31m",   # red
}
RESET = "\033[0m"


def format_entry(entry: LogEntry) -> str:
    """Return `[timestamp] LEVEL - message`."""
    return f"[{entry.timestamp}] {entry.level} - {entry.message}"


def format_color(entry: LogEntry) -> str:
    """Return the entry with an ANSI-colored level."""
    color = COLORS.get(entry.level.upper(), "")
    if not color:
        return format_entry(entry)
    return f"[{entry.timestamp}] {color}{entry.level}{RESET} - {entry.message}"


def get_formatter(color: bool = False) -> Callable[[LogEntry], str]:
    return format_color if color else format_entry


def format_stats(total: int, level_counts: dict[str, int]) -> str:
    """Human-readable stats, levels sorted by name."""
    lines = [f"Total entries: {total}"]
    for level, count in sorted(level_counts.items()):
        lines.append(f"{level}: {count}")
    return "\n".join(lines)
