from typing import TypedDict, Literal

Unit = Literal["kg", "lbs"]


class SetEntry(TypedDict):
    name: str
    note: str
    done: bool
    reps: str
    noteText: str
    enteredWeight: str
    weightKg: float | None     # always kilograms, None when nothing was typed


class Workout(TypedDict):
    id: str
    createdAt: str
    date: str                  # YYYY-MM-DD, no time zone
    dayKey: str
    dayName: str
    unitAtEntry: Unit
    sets: list[SetEntry]


class Settings(TypedDict, total=False):
    unit: Unit


class Store(TypedDict):
    workouts: list[Workout]
    settings: Settings


class EntryRow(TypedDict):
    """ One editable form row before the workout is built """
    name: str
    note: str
    weight: str
    reps: str
    done: bool
    noteText: str


class SeriesPoint(TypedDict):
    date: str
    weight: float


def default_store(unit: Unit = "kg") -> Store:
    """ A fresh empty store, never shared between callers """
    return {"workouts": [], "settings": {"unit": unit}}


def _coerce_workout(workout: dict) -> Workout:
    sets = workout.get("sets")
    sets = [s for s in sets if isinstance(s, dict)] if isinstance(sets, list) else []
    return {**workout, "sets": sets}


def coerce_store(data: dict) -> Store:
    """ Fill in what an older or hand-edited store is missing. Unknown top-level keys are kept. """
    out = dict(data)
    workouts = out.get("workouts")
    workouts = workouts if isinstance(workouts, list) else []
    out["workouts"] = [_coerce_workout(w) for w in workouts if isinstance(w, dict)]
    settings = out.get("settings")
    settings = dict(settings) if isinstance(settings, dict) else {}
    if settings.get("unit") not in ("kg", "lbs"):
        settings["unit"] = "kg"
    out["settings"] = settings
    return out
