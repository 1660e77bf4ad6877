from datetime import datetime

import pytest

from log_analyzer.config import Config
from log_analyzer.store import LogStore

FIXED_NOW = datetime(2025, 5, 15, 14, 30, 0)


@pytest.fixture
def store():
    """Empty store with a frozen clock."""
    return LogStore(time_func=lambda: FIXED_NOW)


@pytest.fixture
def populated_store(store):
    store.add("INFO", "started")
    store.add("ERROR", "failed to connect")
    store.add("INFO", "retrying")
    return store


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "logs.txt"
    path.write_text(
        "2025-05-15 14:00:00|INFO|Server started\n"
        "2025-05-15 14:00:01|WARNING|Disk usage at 85%\n"
        "2025-05-15 14:00:02|ERROR|Database connection failed\n"
        "2025-05-15 14:00:03|INFO|Request GET /health|200\n",
        encoding="utf-8",
    )
    return str(path)


@pytest.fixture
def config(tmp_path):
    return Config(log_file=str(tmp_path / "logs.txt"))
