import json

from main import build_check_report
from models import keys
from services import ServiceManager

from conftest import CountingStore, UnavailableStore


def test_check_report_lists_missing_and_unknown_fields(app_config, clock):
    store = CountingStore(fields={
        keys.WRITING_TARGET: "750",
        keys.DAILY_GOALS: json.dumps([{"id": "a1", "text": "Read"}]),
        "legacyTheme": '"dark"',
    })
    with ServiceManager(app_config, document_store=store, clock=clock) as manager:
        manager.initialize_services()
        report = build_check_report(manager, app_config)

    assert report["health"]["status"] == "healthy"
    assert report["keys"] == sorted([keys.WRITING_TARGET, keys.DAILY_GOALS, "legacyTheme"])
    assert report["unknown_keys"] == ["legacyTheme"]
    assert keys.WRITING_TARGET not in report["missing_keys"]
    assert keys.FITNESS_WORKOUTS in report["missing_keys"]
    assert report["config"]["storage"]["backend"] == "memory"


def test_check_report_on_unavailable_document(app_config, clock):
    with ServiceManager(app_config, document_store=UnavailableStore(), clock=clock) as manager:
        manager.initialize_services()
        report = build_check_report(manager, app_config)

    assert report["health"]["status"] == "warning"
    assert report["keys"] == []
    assert report["missing_keys"] == list(keys.ALL_KEYS)
