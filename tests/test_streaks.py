import pytest

from core.streaks import StreakState, StreakTracker, update_streak
from database.base import InMemoryDocumentStore
from services.data_service import SyncedKeyValueCache


def test_continuation_increments():
    state = StreakState(count=3, last_date="2024-01-04")
    assert update_streak(state, True, "2024-01-05") == StreakState(4, "2024-01-05")


def test_gap_resets_to_one():
    state = StreakState(count=5, last_date="2024-01-01")
    assert update_streak(state, True, "2024-01-05") == StreakState(1, "2024-01-05")


def test_first_increment_from_empty():
    assert update_streak(StreakState(0, None), True, "2024-01-05") == StreakState(1, "2024-01-05")


def test_zero_count_with_stale_date_starts_fresh():
    assert update_streak(StreakState(0, "2023-06-01"), True, "2024-01-05") == StreakState(1, "2024-01-05")


@pytest.mark.parametrize("state", [
    StreakState(),
    StreakState(7, "2024-01-04"),
    StreakState(2, "2023-12-01"),
])
def test_same_day_is_idempotent(state):
    once = update_streak(state, True, "2024-01-05")
    assert update_streak(once, True, "2024-01-05") == once


@pytest.mark.parametrize("state", [
    StreakState(),
    StreakState(7, "2024-01-04"),
    StreakState(2, "2023-12-01"),
])
def test_no_completion_no_change(state):
    assert update_streak(state, False, "2024-01-05") is state


def test_continuation_across_month_and_year_boundaries():
    assert update_streak(StreakState(9, "2023-12-31"), True, "2024-01-01").count == 10
    assert update_streak(StreakState(2, "2024-02-29"), True, "2024-03-01").count == 3


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        StreakState(count=-1)


def test_wire_format():
    state = StreakState(4, "2024-01-05")
    assert state.to_dict() == {"count": 4, "lastDate": "2024-01-05"}
    assert StreakState.from_dict({"count": 4, "lastDate": "2024-01-05"}) == state


@pytest.mark.parametrize("data", [
    None,
    "garbage",
    {"count": -3, "lastDate": "2024-01-05"},
    {"count": "4"},
    {"count": True},
])
def test_from_dict_tolerates_corrupt_data(data):
    assert StreakState.from_dict(data).count == 0


def test_from_dict_drops_invalid_date():
    assert StreakState.from_dict({"count": 2, "lastDate": "yesterday"}) == StreakState(2, None)


def test_trackers_keep_independent_state():
    store = InMemoryDocumentStore()
    with SyncedKeyValueCache(store) as cache:
        cache.initialize()
        goals = StreakTracker(cache, "achievementStreak")
        fitness = StreakTracker(cache, "fitnessStreak")

        goals.record(True, "2024-01-04")
        goals.record(True, "2024-01-05")
        fitness.record(True, "2024-01-05")

        assert goals.current() == StreakState(2, "2024-01-05")
        assert fitness.current() == StreakState(1, "2024-01-05")
        cache.flush()

    assert store.snapshot()["achievementStreak"] == '{"count": 2, "lastDate": "2024-01-05"}'


def test_tracker_does_not_write_when_unchanged():
    store = InMemoryDocumentStore()
    with SyncedKeyValueCache(store) as cache:
        cache.initialize()
        tracker = StreakTracker(cache, "fitnessStreak")
        tracker.record(False, "2024-01-05")
        cache.flush()
        assert "fitnessStreak" not in cache
    assert store.snapshot() == {}
