"""Unit tests for history listing, deletion and progress aggregation."""
import pandas as pd
import pytest
from hit_core.history import (
    add_workout, list_workouts, delete_workout, find_workout, series_for_exercise, best_weight, series_frame,
    exercise_summary,
)
from hit_core.models import default_store
from factories import make_set, make_workout


class TestListAndDelete:

    def test_most_recent_first(self):
        store = default_store()
        store["workouts"] = [make_workout("a", "2024-01-01", []), make_workout("b", "2024-06-01", [])]
        assert [w["date"] for w in list_workouts(store)] == ["2024-06-01", "2024-01-01"]

    def test_list_does_not_reorder_store(self):
        store = default_store()
        store["workouts"] = [make_workout("a", "2024-01-01", []), make_workout("b", "2024-06-01", [])]
        list_workouts(store)
        assert [w["id"] for w in store["workouts"]] == ["a", "b"]

    def test_add_appends_and_returns_new_store(self, squat_store):
        new = make_workout("3", "2023-12-01", [])
        result = add_workout(squat_store, new)
        assert [w["id"] for w in result["workouts"]] == ["2", "1", "3"]
        assert len(squat_store["workouts"]) == 2

    def test_delete(self, squat_store):
        result = delete_workout(squat_store, "1")
        assert [w["id"] for w in result["workouts"]] == ["2"]
        assert len(squat_store["workouts"]) == 2

    def test_delete_unknown_id_is_noop(self, squat_store):
        result = delete_workout(squat_store, "does-not-exist")
        assert result["workouts"] == squat_store["workouts"]

    def test_delete_keeps_settings(self, squat_store):
        squat_store["settings"]["unit"] = "lbs"
        assert delete_workout(squat_store, "1")["settings"] == {"unit": "lbs"}

    def test_find_workout(self, squat_store):
        assert find_workout(squat_store, "2")["date"] == "2024-02-01"
        assert find_workout(squat_store, "nope") is None


class TestSeries:

    def test_kg_series_is_chronological(self, squat_store):
        series = series_for_exercise(squat_store, "Squat", "kg")
        assert series == [{"date": "2024-01-01", "weight": 100.0}, {"date": "2024-02-01", "weight": 110.0}]
        assert best_weight(series) == 110

    def test_lbs_series(self, squat_store):
        series = series_for_exercise(squat_store, "Squat", "lbs")
        assert [p["weight"] for p in series] == [220.46, 242.51]
        assert best_weight(series) == 242.51

    def test_sets_without_weight_are_skipped(self):
        store = default_store()
        store["workouts"] = [
            make_workout("1", "2024-01-01", [make_set("Squat")]),
            make_workout("2", "2024-01-08", [make_set("Squat", 90.0)]),
        ]
        assert series_for_exercise(store, "Squat", "kg") == [{"date": "2024-01-08", "weight": 90.0}]

    def test_only_first_match_per_workout(self):
        store = default_store()
        store["workouts"] = [
            make_workout("1", "2024-01-01", [
                make_set("Hanging Leg Raises"),
                make_set("Hanging Leg Raises", 10.0),
                make_set("Hanging Leg Raises", 20.0),
            ]),
        ]
        assert series_for_exercise(store, "Hanging Leg Raises", "kg") == [{"date": "2024-01-01", "weight": 10.0}]

    def test_zero_weight_counts(self):
        store = default_store()
        store["workouts"] = [make_workout("1", "2024-01-01", [make_set("Ab Coaster", 0.0)])]
        assert series_for_exercise(store, "Ab Coaster", "kg") == [{"date": "2024-01-01", "weight": 0.0}]

    def test_unknown_exercise(self, squat_store):
        assert series_for_exercise(squat_store, "Bench Press", "kg") == []

    def test_best_weight_empty(self):
        assert best_weight([]) is None


class TestFrames:

    def test_series_frame(self, squat_store):
        df = series_frame(series_for_exercise(squat_store, "Squat", "kg"))
        assert list(df.columns) == ["date", "weight"]
        assert pd.api.types.is_datetime64_any_dtype(df["date"])
        assert df["weight"].tolist() == [100.0, 110.0]

    def test_empty_series_frame(self):
        df = series_frame([])
        assert df.empty
        assert list(df.columns) == ["date", "weight"]

    def test_exercise_summary(self, squat_store):
        squat_store["workouts"].append(
            make_workout("3", "2024-03-01", [make_set("Squat", 105.0), make_set("Leg Press (machine)", 200.0)])
        )
        summary = exercise_summary(squat_store, "kg").set_index("exercise")
        assert summary.loc["Squat", "sessions"] == 3
        assert summary.loc["Squat", "first"] == 100.0
        assert summary.loc["Squat", "latest"] == 105.0
        assert summary.loc["Squat", "best"] == 110.0
        assert summary.loc["Leg Press (machine)", "sessions"] == 1

    def test_exercise_summary_empty(self):
        summary = exercise_summary(default_store(), "kg")
        assert summary.empty
        assert list(summary.columns) == ["exercise", "sessions", "first", "latest", "best"]
