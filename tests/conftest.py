import re
import threading
from datetime import datetime, timedelta

import pytest
from gspread.exceptions import WorksheetNotFound

from database.base import InMemoryDocumentStore, RemoteUnavailable
from services.data_service import SyncedKeyValueCache


class FakeClock:
    """Управляемые часы для сервисов"""

    def __init__(self, now: datetime):
        self.current = now

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs):
        self.current += timedelta(**kwargs)


class CountingStore(InMemoryDocumentStore):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.load_calls = 0
        self.write_calls = []

    def load(self):
        self.load_calls += 1
        return super().load()

    def merge_write(self, key, serialized_value):
        self.write_calls.append((key, serialized_value))
        super().merge_write(key, serialized_value)


class UnavailableStore(InMemoryDocumentStore):
    """Хранилище, в котором не работает ничего"""

    def __init__(self, error=None):
        super().__init__()
        self.error = error or RemoteUnavailable("network down", operation="load")

    def load(self):
        raise self.error

    def merge_write(self, key, serialized_value):
        raise RemoteUnavailable("quota exceeded", operation="merge_write", key=key)


class GatedStore(InMemoryDocumentStore):
    """Первая запись блокируется, пока тест не откроет шлюз"""

    def __init__(self):
        super().__init__()
        self.entered = threading.Event()
        self.release = threading.Event()
        self._first = True
        self._gate_lock = threading.Lock()

    def merge_write(self, key, serialized_value):
        with self._gate_lock:
            first, self._first = self._first, False
        if first:
            self.entered.set()
            assert self.release.wait(5)
        super().merge_write(key, serialized_value)


# ===== FAKE GSPREAD =====

class FakeCell:
    def __init__(self, row, col, value):
        self.row = row
        self.col = col
        self.value = value


class FakeWorksheet:
    def __init__(self, title, rows=None):
        self.title = title
        self.rows = [list(r) for r in (rows or [])]
        self.append_calls = 0
        self.update_calls = 0

    def get_all_values(self):
        return [list(r) for r in self.rows]

    def find(self, query, in_column=None):
        for index, row in enumerate(self.rows, start=1):
            col = in_column or 1
            if len(row) >= col and row[col - 1] == query:
                return FakeCell(index, col, query)
        return None

    def update(self, range_name=None, values=None, raw=True):
        row = int(re.match(r"A(\d+):B\d+", range_name).group(1))
        self.rows[row - 1] = list(values[0])
        self.update_calls += 1

    def append_row(self, values, value_input_option=None):
        self.rows.append(list(values))
        self.append_calls += 1


class FakeSpreadsheet:
    def __init__(self, worksheets=None):
        self.worksheets = {ws.title: ws for ws in (worksheets or [])}

    def worksheet(self, title):
        if title not in self.worksheets:
            raise WorksheetNotFound(title)
        return self.worksheets[title]

    def add_worksheet(self, title, rows, cols):
        ws = FakeWorksheet(title)
        self.worksheets[title] = ws
        return ws


class FakeSheetsClient:
    def __init__(self, spreadsheet=None, error=None):
        self.spreadsheet = spreadsheet or FakeSpreadsheet()
        self.error = error

    def open_by_key(self, key):
        if self.error:
            raise self.error
        return self.spreadsheet


# ===== FIXTURES =====

@pytest.fixture
def clock():
    return FakeClock(datetime(2024, 1, 5, 9, 30))


@pytest.fixture
def memory_store():
    return CountingStore()


@pytest.fixture
def cache(memory_store):
    cache = SyncedKeyValueCache(memory_store, max_workers=2, flush_timeout=5)
    cache.initialize()
    yield cache
    cache.close()


@pytest.fixture
def app_config(monkeypatch, tmp_path):
    monkeypatch.setenv("STORAGE_BACKEND", "memory")
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
    monkeypatch.setenv("LOG_TO_FILE", "false")
    for name in ("ENVIRONMENT", "TIMEZONE", "GOOGLE_SHEET_ID", "DOCUMENT_ID",
                 "MAX_WORKERS", "WRITE_FLUSH_TIMEOUT", "PORT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    from config import AppConfig
    return AppConfig()
