from types import MappingProxyType
from typing import TypedDict


class ExercisePlanEntry(TypedDict):
    name: str
    note: str


class DayPlan(TypedDict):
    name: str
    exercises: tuple[ExercisePlanEntry, ...]


class UnknownDayError(KeyError):
    """ Raised when a day identifier is not part of the exercise plan """


def _day(name: str, *exercises: tuple[str, str]) -> DayPlan:
    entries = tuple(MappingProxyType({"name": n, "note": note}) for n, note in exercises)
    return MappingProxyType({"name": name, "exercises": entries})


# Mentzer style programme. Saved records carry their own copy of name/note.
_PLAN = {
    "day1": _day(
        "Dag 1 – Legs + Calves + Abs",
        ("Squat", "1 werkset 6–10"),
        ("Leg Press (machine)", "1 werkset 8–12 + 1–2 dropsets"),
        ("Romanian Deadlift", "1 werkset 6–10"),
        ("Leg Curl (machine)", "1 werkset 8–12 + dropset"),
        ("Standing Calf Raise (machine)", "1 werkset 10–15 + 2 dropsets"),
        ("Hanging Leg Raises", "1 set tot falen (10–20)"),
        ("Ab Wheel Rollout", "1 set 8–12"),
    ),
    "day2": _day(
        "Dag 2 – Upper Body",
        ("Bench Press", "1 werkset 6–10"),
        ("Pull-Up / Lat Pulldown", "1 werkset 6–10"),
        ("Incline Chest Press (machine)", "1 werkset 8–12 + dropset"),
        ("Seated Row (machine)", "1 werkset 8–12 + dropset"),
        ("Machine Chest Fly", "1 werkset 8–12 + dropset"),
        ("Barbell Curl", "1 werkset 6–10"),
        ("Rope Pushdown (cable)", "1 werkset 8–12 + dropset"),
    ),
    "day3": _day(
        "Dag 3 – Shoulders + Calves + Cardio",
        ("Overhead Press", "1 werkset 6–10"),
        ("Lateral Raise (dumbbell/machine)", "1 werkset 10–12 + dropset"),
        ("Rear Delt Fly (machine)", "1 werkset 10–12 + dropset"),
        ("Upright Row", "1 werkset 6–10"),
        ("Seated Calf Raise (machine)", "1 werkset 12–15 + dropset"),
        ("Ab Coaster", "3 sets tot falen"),
        ("Hanging Leg Raises", "2 sets tot falen"),
        ("Steady State Cardio", "30–40 min zone 2"),
    ),
    "day4": _day(
        "Dag 4 – Cardio / Active Recovery",
        ("Steady State Cardio", "45–60 min zone 2"),
        ("Core stabiliteit (side planks, pallof press)", "optioneel"),
    ),
}

EXERCISE_PLAN = MappingProxyType(_PLAN)
DAY_KEYS = tuple(EXERCISE_PLAN.keys())


def get_day_plan(day_key: str) -> DayPlan:
    """ Returns the plan for a day or raises UnknownDayError """
    try:
        return EXERCISE_PLAN[day_key]
    except KeyError:
        raise UnknownDayError(day_key) from None


def day_options() -> list[tuple[str, str]]:
    """ (key, label) pairs in day order, for pickers """
    return [(key, EXERCISE_PLAN[key]["name"]) for key in DAY_KEYS]


def all_exercise_names() -> list[str]:
    """ Every exercise name over all days, de-duplicated and sorted """
    names = {ex["name"] for plan in EXERCISE_PLAN.values() for ex in plan["exercises"]}
    return sorted(names)
