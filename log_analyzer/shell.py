"""Numbered-menu interactive shell driving a LogStore."""

import logging
import re
import sys

from log_analyzer.config import Config
from log_analyzer.formatter import format_stats, get_formatter
from log_analyzer.store import LogStore

logger = logging.getLogger(__name__)

MENU = """
=== Log Analyzer ===
1. Add log entry
2. View all logs
3. Filter by level
4. Search logs
5. View statistics
6. View recent logs
7. Clear logs
8. Save and exit"""

EXIT_CHOICE = "8"


COUNT_PATTERN = re.compile(r"\+?[0-9]+")


def parse_count(raw: str, default: int) -> int:
    """Parse a non-negative ASCII integer, falling back to `default`."""
    stripped = raw.strip()
    if not COUNT_PATTERN.fullmatch(stripped):
        return default
    return int(stripped)


class LogShell:
    def __init__(self, store: LogStore, config: Config, input_func=input, output=None):
        self._store = store
        self._config = config
        self._input = input_func
        self._out = output or sys.stdout
        self._format = get_formatter(color=config.color)
        self._handlers = {
            "1": self._add,
            "2": self._view_all,
            "3": self._filter,
            "4": self._search,
            "5": self._statistics,
            "6": self._recent,
            "7": self._clear,
        }

    def _print(self, text: str = ""):
        print(text, file=self._out)

    def _prompt(self, text: str) -> str:
        return self._input(text).strip()

    def _print_entries(self, heading: str, entries):
        self._print(f"\n{heading}")
        for entry in entries:
            self._print(self._format(entry))

    def _add(self):
        level = self._prompt("Level (INFO/WARNING/ERROR): ").upper()
        message = self._prompt("Message: ")
        self._store.add(level, message)
        self._print("Log entry added")

    def _view_all(self):
        self._print_entries("All logs:", self._store.entries())

    def _filter(self):
        level = self._prompt("Level: ")
        self._print_entries("Filtered logs:", self._store.filter_by_level(level))

    def _search(self):
        query = self._prompt("Search query: ")
        self._print_entries("Search results:", self._store.search(query))

    def _statistics(self):
        self._print("\nStatistics:")
        self._print(format_stats(self._store.count_total(), self._store.statistics()))

    def _recent(self):
        count = parse_count(self._prompt("Number of recent logs: "), self._config.recent_default)
        self._print_entries("Recent logs:", self._store.recent(count))

    def _clear(self):
        self._store.clear()
        self._print("Logs cleared")

    def save(self) -> bool:
        """Persist the store. Errors are reported, never raised."""
        try:
            self._store.save(self._config.log_file)
        except (OSError, UnicodeError) as e:
            logger.error("Failed to save %s: %s", self._config.log_file, e)
            self._print(f"Error saving: {e}")
            return False
        self._print("Logs saved")
        return True

    def run(self) -> bool:
        """Loop until the user exits; saves exactly once on the way out."""
        while True:
            self._print(MENU)
            try:
                choice = self._prompt("\nEnter choice: ")
            except (EOFError, KeyboardInterrupt):
                self._print()
                choice = EXIT_CHOICE

            if choice == EXIT_CHOICE:
                return self.save()

            handler = self._handlers.get(choice)
            if handler is None:
                self._print("Invalid choice")
                continue
            try:
                handler()
            except (EOFError, KeyboardInterrupt):
                self._print()
                return self.save()
