"""Unit tests for the exercise plan catalog."""
import pytest
from hit_core.catalog import EXERCISE_PLAN, DAY_KEYS, UnknownDayError, get_day_plan, day_options, all_exercise_names


class TestCatalog:

    def test_four_days_in_order(self):
        assert DAY_KEYS == ("day1", "day2", "day3", "day4")

    @pytest.mark.parametrize("day_key, count", [("day1", 7), ("day2", 7), ("day3", 8), ("day4", 2)])
    def test_exercise_counts(self, day_key, count):
        assert len(get_day_plan(day_key)["exercises"]) == count

    def test_day1_starts_with_squat(self):
        first = get_day_plan("day1")["exercises"][0]
        assert dict(first) == {"name": "Squat", "note": "1 werkset 6–10"}

    def test_unknown_day_raises(self):
        with pytest.raises(UnknownDayError):
            get_day_plan("day9")

    def test_unknown_day_is_a_key_error(self):
        with pytest.raises(KeyError):
            get_day_plan("")

    def test_plan_is_read_only(self):
        with pytest.raises(TypeError):
            EXERCISE_PLAN["day5"] = {"name": "x", "exercises": ()}

    def test_day_plans_are_read_only(self):
        with pytest.raises(TypeError):
            EXERCISE_PLAN["day1"]["name"] = "Leg day"
        with pytest.raises(TypeError):
            get_day_plan("day1")["exercises"][0]["note"] = "2 sets"

    def test_day_options(self):
        options = day_options()
        assert [key for key, _ in options] == list(DAY_KEYS)
        assert options[1] == ("day2", "Dag 2 – Upper Body")

    def test_all_exercise_names_sorted_and_unique(self):
        names = all_exercise_names()
        assert names == sorted(names)
        assert len(names) == len(set(names))
        # Hanging Leg Raises and Steady State Cardio appear on two days each
        assert names.count("Hanging Leg Raises") == 1
        assert len(names) == 24 - 2
