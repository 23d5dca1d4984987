"""
Shared fixtures: a throwaway storage file and a couple of ready-made stores.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from hit_core.builder import build_workout, new_entry_rows
from hit_core.models import default_store
from hit_core.storage import KeyValueStore

from factories import make_set, make_workout


@pytest.fixture(autouse=True)
def isolated_store_env(monkeypatch, tmp_path):
    """Never touch a real storage file from a test."""
    monkeypatch.setenv("HIT_STORE", str(tmp_path / "env_store.json"))


@pytest.fixture
def kv(tmp_path):
    return KeyValueStore(tmp_path / "hit_storage.json")


@pytest.fixture
def squat_store():
    """Two squat sessions, stored newest first to prove the series sorts by date."""
    store = default_store()
    store["workouts"] = [
        make_workout("2", "2024-02-01", [make_set("Squat", 110.0, reps="8")]),
        make_workout("1", "2024-01-01", [make_set("Squat", 100.0, reps="10")]),
    ]
    return store


@pytest.fixture
def day1_rows():
    rows = new_entry_rows("day1")
    rows[0].update(weight="100", reps="8", done=True, noteText="slow negatives")
    return rows


@pytest.fixture
def day1_workout(day1_rows):
    return build_workout("day1", "2024-03-01", "kg", day1_rows)
