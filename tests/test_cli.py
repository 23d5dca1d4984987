"""CLI prompt and menu tests driven by scripted input()."""
import pytest
from hit_cli.cli_settings import import_menu, clear_menu
from hit_cli.cli_utils import MenuItem, prompt_menu
from hit_cli.cli_workouts import new_workout_menu, history_menu
from hit_cli.prompts import input_date, input_weight, input_reps, prompt_yes_no, get_valid_input
from hit_core.settings import write_backup
from hit_core.storage import load, save


@pytest.fixture
def feed_input(monkeypatch):
    """Replace input() with a queue of answers."""
    def _feed(*answers):
        it = iter(answers)
        monkeypatch.setattr("builtins.input", lambda *_: next(it))
    return _feed


class TestPrompts:

    def test_yes_no_default(self, feed_input):
        feed_input("")
        assert prompt_yes_no("Sure?", default=False) is False

    def test_yes_no_retries(self, feed_input, capsys):
        feed_input("maybe", "YES")
        assert prompt_yes_no("Sure?") is True
        assert "Invalid input" in capsys.readouterr().out

    def test_input_date_default(self, feed_input):
        feed_input("")
        assert input_date("Date", default="2024-06-01") == "2024-06-01"

    def test_input_date_rejects_bad_format(self, feed_input):
        feed_input("01-06-2024", "2024-06-01")
        assert input_date("Date", default="2024-01-01") == "2024-06-01"

    def test_input_weight(self, feed_input):
        feed_input("-5", "abc", "82,5")
        assert input_weight("Weight: ") == "82,5"

    def test_input_weight_skip(self, feed_input):
        feed_input("")
        assert input_weight("Weight: ") == ""

    def test_input_reps(self, feed_input):
        feed_input("eight", "8")
        assert input_reps("Reps: ") == "8"

    def test_get_valid_input_gives_up(self, feed_input):
        feed_input("x", "y", "z")
        assert get_valid_input("Number: ", cast_func=int) is None


class TestMenus:

    def test_prompt_menu_adds_back_and_quit(self, feed_input, capsys):
        feed_input("x", "q")
        assert prompt_menu("Main", [MenuItem("1", "One")]) == "q"
        out = capsys.readouterr().out
        assert "[b] Back" in out
        assert "Invalid choice" in out

    def test_prompt_menu_is_case_insensitive(self, feed_input):
        feed_input("B")
        assert prompt_menu("Main", [MenuItem("1", "One")]) == "b"

    def test_new_workout_saved(self, feed_input, kv):
        store = load(kv)
        feed_input(
            "4", "2024-05-01",
            "y", "100", "8", "easy pace",
            "n", "", "", "",
            "y",
        )
        store = new_workout_menu(kv, store)
        assert len(store["workouts"]) == 1
        workout = load(kv)["workouts"][0]
        assert workout["dayKey"] == "day4"
        assert workout["date"] == "2024-05-01"
        assert workout["sets"][0]["weightKg"] == 100.0
        assert workout["sets"][0]["noteText"] == "easy pace"
        assert workout["sets"][1]["weightKg"] is None

    def test_new_workout_not_saved(self, feed_input, kv):
        store = load(kv)
        feed_input("4", "", "n", "", "", "", "n", "", "", "", "n")
        assert new_workout_menu(kv, store)["workouts"] == []
        assert load(kv)["workouts"] == []

    def test_history_delete(self, feed_input, kv, squat_store):
        save(squat_store, kv)
        feed_input("3", "2", "y", "b")
        store = history_menu(kv, squat_store)
        assert [w["id"] for w in store["workouts"]] == ["1"]
        assert [w["id"] for w in load(kv)["workouts"]] == ["1"]


class TestSettingsMenus:

    def test_import_invalid_file_changes_nothing(self, feed_input, kv, squat_store, tmp_path, capsys):
        save(squat_store, kv)
        bad = tmp_path / "bad.json"
        bad.write_text("not json", encoding="utf-8")
        feed_input(str(bad), "y")
        assert import_menu(kv, squat_store) is squat_store
        assert load(kv) == squat_store
        assert "Invalid backup file" in capsys.readouterr().out

    def test_import_valid_file(self, feed_input, kv, squat_store, tmp_path):
        path = write_backup(squat_store, tmp_path, today="2024-06-01")
        feed_input(str(path), "y")
        store = import_menu(kv, {"workouts": [], "settings": {"unit": "lbs"}})
        assert store == squat_store
        assert load(kv) == squat_store

    def test_import_skips_non_json_file(self, feed_input, kv, squat_store, tmp_path, capsys):
        notes = tmp_path / "notes.txt"
        notes.write_text("{}", encoding="utf-8")
        feed_input(str(notes))
        assert import_menu(kv, squat_store) is squat_store
        assert "not a .json backup file" in capsys.readouterr().out
        assert load(kv)["workouts"] == []

    def test_clear_needs_yes(self, feed_input, kv, squat_store):
        feed_input("y")
        assert clear_menu(kv, squat_store) is squat_store
        feed_input("yes")
        assert clear_menu(kv, squat_store)["workouts"] == []
        assert load(kv)["workouts"] == []
