import json

import pytest
from gspread.exceptions import SpreadsheetNotFound

from config import StorageBackend
from database import create_document_store, InMemoryDocumentStore, JsonFileDocumentStore
from database.base import RemoteUnavailable
from database.sheets import SheetsDocumentStore

from conftest import FakeSheetsClient, FakeSpreadsheet, FakeWorksheet


# ===== JSON FILE =====

def test_json_store_missing_file_is_empty(tmp_path):
    store = JsonFileDocumentStore(tmp_path / "userData.json")
    assert store.load() == {}


def test_json_store_merge_write_keeps_other_fields(tmp_path):
    path = tmp_path / "nested" / "userData.json"
    store = JsonFileDocumentStore(path)
    store.merge_write("writingTarget", "1000")
    store.merge_write("activeSection", '"goals"')
    store.merge_write("writingTarget", "1200")

    assert store.load() == {"writingTarget": "1200", "activeSection": '"goals"'}
    assert json.loads(path.read_text(encoding="utf-8"))["activeSection"] == '"goals"'
    assert [p.name for p in path.parent.iterdir()] == ["userData.json"]


def test_json_store_corrupt_file_is_unavailable(tmp_path):
    path = tmp_path / "userData.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(RemoteUnavailable):
        JsonFileDocumentStore(path).load()


def test_json_store_non_object_document_is_unavailable(tmp_path):
    path = tmp_path / "userData.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(RemoteUnavailable):
        JsonFileDocumentStore(path).load()


def test_json_store_hand_edited_values_become_text(tmp_path):
    path = tmp_path / "userData.json"
    path.write_text(json.dumps({"writingTarget": 900}), encoding="utf-8")
    assert JsonFileDocumentStore(path).load() == {"writingTarget": "900"}


# ===== GOOGLE SHEETS =====

def test_sheets_missing_worksheet_is_empty_document():
    store = SheetsDocumentStore("sheet-id", client=FakeSheetsClient())
    assert store.load() == {}


def test_sheets_load_reads_key_value_rows():
    ws = FakeWorksheet("userData", rows=[
        ["writingTarget", "1000"],
        ["", "ignored"],
        ["activeSection", '"fitness"'],
        ["writingTarget", "1500"],
        ["empty"],
    ])
    store = SheetsDocumentStore("sheet-id", client=FakeSheetsClient(FakeSpreadsheet([ws])))
    assert store.load() == {"writingTarget": "1500", "activeSection": '"fitness"', "empty": ""}


def test_sheets_merge_write_creates_worksheet_and_upserts():
    spreadsheet = FakeSpreadsheet()
    store = SheetsDocumentStore("sheet-id", document_id="momentum", client=FakeSheetsClient(spreadsheet))

    store.merge_write("dailyGoals", "[]")
    store.merge_write("activeSection", '"goals"')
    store.merge_write("dailyGoals", '[{"id": "a", "text": "Run"}]')

    ws = spreadsheet.worksheets["momentum"]
    assert ws.rows == [
        ["dailyGoals", '[{"id": "a", "text": "Run"}]'],
        ["activeSection", '"goals"'],
    ]
    assert ws.append_calls == 2
    assert ws.update_calls == 1


@pytest.mark.parametrize("error", [SpreadsheetNotFound("gone"), RuntimeError("connection reset")])
def test_sheets_errors_become_remote_unavailable(error):
    store = SheetsDocumentStore("sheet-id", client=FakeSheetsClient(error=error))
    with pytest.raises(RemoteUnavailable) as load_error:
        store.load()
    assert load_error.value.operation == "load"

    with pytest.raises(RemoteUnavailable) as write_error:
        store.merge_write("activeSection", '"goals"')
    assert write_error.value.key == "activeSection"


def test_sheets_auth_failure_is_unavailable(tmp_path):
    store = SheetsDocumentStore("sheet-id", credentials_file=str(tmp_path / "missing.json"))
    with pytest.raises(RemoteUnavailable):
        store.load()


# ===== FACTORY =====

def test_factory_builds_configured_backend(app_config):
    assert isinstance(create_document_store(app_config), InMemoryDocumentStore)

    app_config.storage.backend = StorageBackend.JSON
    store = create_document_store(app_config)
    assert isinstance(store, JsonFileDocumentStore)
    assert store.path == app_config.data_dir / "userData.json"

    app_config.storage.backend = StorageBackend.SHEETS
    app_config.storage.google_sheet_id = "sheet-id"
    store = create_document_store(app_config)
    assert isinstance(store, SheetsDocumentStore)
    assert store.document_id == "userData"
