"""Tests for the shell-facing use cases: every change is saved and handed back."""
import pytest
from hit_core.settings import InvalidBackupError, export_backup
from hit_core.storage import load, save
from hit_core.usecases import (
    save_new_workout, remove_workout, change_unit, switch_unit, restore_backup, wipe_all,
    get_history_for_ui, get_progress_for_ui, get_overview_for_ui, get_choices_for_ui,
)
from factories import make_set, make_workout


class TestMutations:

    def test_save_new_workout_persists(self, kv, squat_store, day1_workout):
        result = save_new_workout(kv, squat_store, day1_workout)
        assert result["workouts"][-1]["id"] == day1_workout["id"]
        assert load(kv) == result
        assert len(squat_store["workouts"]) == 2

    def test_remove_workout_persists(self, kv, squat_store):
        result = remove_workout(kv, squat_store, "2")
        assert [w["id"] for w in load(kv)["workouts"]] == ["1"]
        assert result == load(kv)

    def test_remove_unknown_id(self, kv, squat_store):
        result = remove_workout(kv, squat_store, "missing")
        assert result["workouts"] == squat_store["workouts"]

    def test_change_and_switch_unit(self, kv, squat_store):
        result = change_unit(kv, squat_store, "lbs")
        assert load(kv)["settings"]["unit"] == "lbs"
        result = switch_unit(kv, result)
        assert load(kv)["settings"]["unit"] == "kg"
        assert result["settings"]["unit"] == "kg"

    def test_restore_backup(self, kv, squat_store):
        result = restore_backup(kv, export_backup(squat_store))
        assert result == squat_store
        assert load(kv) == squat_store

    def test_invalid_backup_leaves_everything(self, kv, squat_store):
        save(squat_store, kv)
        current = squat_store
        with pytest.raises(InvalidBackupError):
            current = restore_backup(kv, "definitely not json")
        assert current is squat_store
        assert load(kv) == squat_store

    def test_views_survive_backup_without_sets(self, kv):
        raw = '{"workouts": [{"id": "1", "date": "2024-01-01", "dayName": "Dag 1", "sets": null}]}'
        store = restore_backup(kv, raw)
        assert get_history_for_ui(store)["workouts"][0]["sets"] == []
        assert get_progress_for_ui(store, "Squat")["series"] == []
        assert get_overview_for_ui(load(kv)).empty

    def test_wipe_all_keeps_unit(self, kv, squat_store):
        squat_store["settings"]["unit"] = "lbs"
        result = wipe_all(kv, squat_store)
        assert result == {"workouts": [], "settings": {"unit": "lbs"}}
        assert load(kv) == result


class TestViews:

    def test_history_for_ui(self, squat_store):
        ctx = get_history_for_ui(squat_store)
        assert ctx["unit"] == "kg"
        assert [w["id"] for w in ctx["workouts"]] == ["2", "1"]
        assert ctx["workouts"][0]["date"] == "01-02-2024"
        assert ctx["workouts"][0]["sets"][0]["result"] == "110 kg × 8"

    def test_history_in_lbs(self, squat_store):
        squat_store["settings"]["unit"] = "lbs"
        ctx = get_history_for_ui(squat_store)
        assert ctx["workouts"][1]["sets"][0]["result"] == "220.46 lbs × 10"

    def test_history_without_weight(self):
        store = {"workouts": [make_workout("1", "2024-01-01", [make_set("Squat")])], "settings": {"unit": "kg"}}
        assert get_history_for_ui(store)["workouts"][0]["sets"][0]["result"] == "—"

    def test_progress_for_ui(self, squat_store):
        ctx = get_progress_for_ui(squat_store, "Squat")
        assert ctx["best"] == 110
        assert ctx["best_label"] == "110 kg"
        assert len(ctx["series"]) == 2

    def test_progress_without_exercise(self, squat_store):
        ctx = get_progress_for_ui(squat_store, None)
        assert ctx["series"] == []
        assert ctx["best"] is None
        assert ctx["best_label"] is None

    def test_overview(self, squat_store):
        overview = get_overview_for_ui(squat_store)
        assert overview["exercise"].tolist() == ["Squat"]

    def test_choices(self):
        choices = get_choices_for_ui()
        assert len(choices["days"]) == 4
        assert "Squat" in choices["exercises"]
