import logging
from datetime import datetime
from hit_core.catalog import get_day_plan
from hit_core.date_utilities import now_utc, utc_iso_ms
from hit_core.models import EntryRow, SetEntry, Workout, Unit
from hit_core.units import to_canonical, normalize_unit

logger = logging.getLogger(__name__)

_last_id_ms = 0


def new_workout_id(now: datetime) -> str:
    """ Millisecond timestamp id, bumped when two workouts land in the same millisecond """
    global _last_id_ms
    ms = int(now.timestamp() * 1000)
    if ms <= _last_id_ms:
        ms = _last_id_ms + 1
    _last_id_ms = ms
    return str(ms)


def new_entry_rows(day_key: str) -> list[EntryRow]:
    """ Blank form rows for every exercise of the day, in plan order """
    plan = get_day_plan(day_key)
    return [
        {"name": ex["name"], "note": ex["note"], "weight": "", "reps": "", "done": False, "noteText": ""}
        for ex in plan["exercises"]
    ]


def _entered_weight(row: dict) -> str:
    raw = row.get("weight", "")
    if raw is None:
        return ""
    return raw if isinstance(raw, str) else str(raw)


def build_set_entry(ex: dict, row: dict, unit: Unit) -> SetEntry:
    """ name/note come from the plan, the rest is what the user typed. A decimal comma counts as a point. """
    weight = _entered_weight(row)
    return {
        "name": ex["name"],
        "note": ex["note"],
        "done": bool(row.get("done", False)),
        "reps": row.get("reps", ""),
        "noteText": row.get("noteText", ""),
        "enteredWeight": weight,
        "weightKg": to_canonical(unit, weight.replace(",", ".")) if weight else None,
    }


def build_workout(day_key: str, date: str, unit: Unit, rows: list[EntryRow], now: datetime | None = None) -> Workout:
    """
    Assemble a workout record from the entry form.
    - One set entry per exercise of the day plan, in plan order
    - Rows missing at the end count as blank, extra rows are ignored
    - weightKg is normalized to kilograms here, once
    Nothing is persisted; that's the caller's job.
    """
    plan = get_day_plan(day_key)
    unit = normalize_unit(unit)
    now = now or now_utc()

    sets = []
    for idx, ex in enumerate(plan["exercises"]):
        row = rows[idx] if idx < len(rows) else {}
        sets.append(build_set_entry(ex, row, unit))

    if len(rows) != len(plan["exercises"]):
        logger.debug("Form for %s had %d rows, plan has %d", day_key, len(rows), len(plan["exercises"]))

    return {
        "id": new_workout_id(now),
        "createdAt": utc_iso_ms(now),
        "date": date,
        "dayKey": day_key,
        "dayName": plan["name"],
        "unitAtEntry": unit,
        "sets": sets,
    }
