import logging
from hit_core.catalog import all_exercise_names, day_options
from hit_core.formatting import history_entry, fmt_number
from hit_core.history import add_workout, delete_workout, list_workouts, series_for_exercise, best_weight, \
    exercise_summary
from hit_core.models import Store, Workout
from hit_core.settings import set_unit, toggle_unit, import_backup, clear_all, get_unit
from hit_core.storage import KeyValueStore, save

logger = logging.getLogger(__name__)

# Every mutation below follows the same pattern: build the next store, persist it whole, hand it back.
# The caller replaces its own reference; nothing is changed in place.


def save_new_workout(kv: KeyValueStore, store: Store, workout: Workout) -> Store:
    nxt = add_workout(store, workout)
    save(nxt, kv)
    logger.info(f"✅ Saved {workout['dayName']} on {workout['date']} (id {workout['id']})")
    return nxt


def remove_workout(kv: KeyValueStore, store: Store, workout_id: str) -> Store:
    nxt = delete_workout(store, workout_id)
    save(nxt, kv)
    return nxt


def change_unit(kv: KeyValueStore, store: Store, unit: str) -> Store:
    nxt = set_unit(store, unit)
    save(nxt, kv)
    return nxt


def switch_unit(kv: KeyValueStore, store: Store) -> Store:
    nxt = toggle_unit(store)
    save(nxt, kv)
    return nxt


def restore_backup(kv: KeyValueStore, raw_text: str) -> Store:
    """ Raises InvalidBackupError before anything is written """
    nxt = import_backup(raw_text)
    save(nxt, kv)
    logger.info(f"♻️ Restored backup with {len(nxt['workouts'])} workouts")
    return nxt


def wipe_all(kv: KeyValueStore, store: Store) -> Store:
    nxt = clear_all(store)
    save(nxt, kv)
    logger.info("🧹 All workouts cleared")
    return nxt


def get_history_for_ui(store: Store) -> dict:
    """ Workouts newest first, each with display-ready set lines in the active unit """
    unit = get_unit(store)
    return {"unit": unit, "workouts": [history_entry(w, unit) for w in list_workouts(store)]}


def get_progress_for_ui(store: Store, exercise: str | None) -> dict:
    """ Chart series plus best weight for one exercise, empty when no exercise is picked """
    unit = get_unit(store)
    series = series_for_exercise(store, exercise, unit) if exercise else []
    best = best_weight(series)
    return {
        "unit": unit,
        "exercise": exercise,
        "series": series,
        "best": best,
        "best_label": f"{fmt_number(best)} {unit}" if best is not None else None,
    }


def get_overview_for_ui(store: Store):
    """ Per-exercise summary table in the active unit """
    return exercise_summary(store, get_unit(store))


def get_choices_for_ui() -> dict:
    return {"days": day_options(), "exercises": all_exercise_names()}
