import logging
import pandas as pd
from hit_core.date_utilities import date_sort_key
from hit_core.models import Store, Workout, SeriesPoint
from hit_core.units import display_weight

logger = logging.getLogger(__name__)

SERIES_COLUMNS = ["date", "weight"]
SUMMARY_COLUMNS = ["exercise", "sessions", "first", "latest", "best"]


def add_workout(store: Store, workout: Workout) -> Store:
    """ New store with the workout appended in insertion order """
    return {**store, "workouts": [*store["workouts"], workout]}


def list_workouts(store: Store) -> list[Workout]:
    """ Most recent date first. Workouts sharing a date have no guaranteed order. """
    return sorted(store["workouts"], key=lambda w: date_sort_key(w.get("date")), reverse=True)


def find_workout(store: Store, workout_id: str) -> Workout | None:
    for w in store["workouts"]:
        if w.get("id") == workout_id:
            return w
    return None


def delete_workout(store: Store, workout_id: str) -> Store:
    """ New store without the workout, unknown ids are a no-op """
    kept = [w for w in store["workouts"] if w.get("id") != workout_id]
    if len(kept) == len(store["workouts"]):
        logger.debug("No workout with id %s, nothing deleted", workout_id)
    return {**store, "workouts": kept}


def series_for_exercise(store: Store, exercise_name: str, unit: str) -> list[SeriesPoint]:
    """
    Weight over time for one exercise, oldest first.
    Only the first set entry with that name and a weight counts per workout,
    so a day that lists an exercise twice contributes a single point.
    """
    points: list[SeriesPoint] = []
    for w in store["workouts"]:
        match = next(
            (s for s in (w.get("sets") or []) if s.get("name") == exercise_name and s.get("weightKg") is not None),
            None,
        )
        if match:
            points.append({"date": w.get("date"), "weight": display_weight(unit, match["weightKg"])})
    return sorted(points, key=lambda p: date_sort_key(p["date"]))


def best_weight(series: list[SeriesPoint]) -> float | None:
    """ Heaviest weight in the series, None when there is nothing to compare """
    if not series:
        return None
    return max(p["weight"] for p in series)


def series_frame(series: list[SeriesPoint]) -> pd.DataFrame:
    """ Series as a DataFrame with a datetime 'date' column, for tables and charts """
    df = pd.DataFrame(series, columns=SERIES_COLUMNS)
    df["date"] = pd.to_datetime(df["date"], format="%Y-%m-%d", errors="coerce")
    df["weight"] = pd.to_numeric(df["weight"], errors="coerce")
    return df


def exercise_summary(store: Store, unit: str) -> pd.DataFrame:
    """ One row per exercise that has a recorded weight: sessions, first, latest and best weight """
    names = sorted({s.get("name") for w in store["workouts"] for s in (w.get("sets") or []) if s.get("name")})

    frames = []
    for name in names:
        df = series_frame(series_for_exercise(store, name, unit))
        if df.empty:
            continue
        df["exercise"] = name
        frames.append(df)

    if not frames:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    long_df = pd.concat(frames, ignore_index=True)
    agg = (long_df.groupby("exercise", sort=True)
                  .agg(sessions=("weight", "count"),
                       first=("weight", "first"),
                       latest=("weight", "last"),
                       best=("weight", "max"))
                  .reset_index())
    return agg[SUMMARY_COLUMNS]
