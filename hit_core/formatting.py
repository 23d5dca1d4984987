import math
from datetime import datetime
from hit_core.models import SetEntry, Workout
from hit_core.units import display_weight

NO_WEIGHT = "—"


def format_date_eu(iso_date) -> str:
    """ YYYY-MM-DD -> DD-MM-YYYY, anything unparseable comes back as given """
    try:
        dt = datetime.strptime(str(iso_date)[:10], "%Y-%m-%d")
    except ValueError:
        return "" if iso_date is None else str(iso_date)
    return dt.strftime("%d-%m-%Y")


def fmt_number(value: float) -> str:
    """ 100.0 -> '100', 45.36 -> '45.36' (no trailing .0) """
    if value is None or not math.isfinite(value):
        return ""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_weight(weight_kg, unit: str) -> str:
    """ '<weight> <unit>' in the display unit or a dash when nothing was recorded """
    if weight_kg is None:
        return NO_WEIGHT
    return f"{fmt_number(display_weight(unit, weight_kg))} {unit}"


def format_set_line(entry: SetEntry, unit: str) -> str:
    """ '100 kg × 8', reps left off when empty """
    line = format_weight(entry.get("weightKg"), unit)
    reps = entry.get("reps")
    if reps:
        line += f" × {reps}"
    return line


def done_marker(entry: SetEntry) -> str:
    return "✔" if entry.get("done") else "·"


def history_entry(workout: Workout, unit: str) -> dict:
    """ Display-ready copy of a workout: EU date, done marker and result line per set """
    return {
        "id": workout.get("id"),
        "date": format_date_eu(workout.get("date")),
        "day_name": workout.get("dayName"),
        "sets": [
            {
                "name": s.get("name"),
                "note": s.get("note"),
                "done": bool(s.get("done")),
                "marker": done_marker(s),
                "result": format_set_line(s, unit),
                "note_text": s.get("noteText") or "",
            }
            for s in (workout.get("sets") or [])
        ],
    }


def format_history_rows(entries: list[dict]) -> tuple[list[str], list[list]]:
    """ One row per set of each history_entry, workout columns only on its first row """
    headers = ["ID", "Date", "Day", "", "Exercise", "Result", "Note"]

    rows = []
    for e in entries:
        if not e["sets"]:
            rows.append([e["id"], e["date"], e["day_name"], "", "", "", ""])
            continue
        for i, s in enumerate(e["sets"]):
            first = i == 0
            rows.append([
                e["id"] if first else "",
                e["date"] if first else "",
                e["day_name"] if first else "",
                s["marker"],
                s["name"],
                s["result"],
                s["note_text"],
            ])
    return headers, rows


def format_workout_overview(workouts: list[Workout]) -> tuple[list[str], list[list]]:
    """ Compact one-line-per-workout table """
    headers = ["ID", "Date", "Day", "Done", "Weights logged"]
    rows = []
    for w in workouts:
        sets = w.get("sets") or []
        done = sum(1 for s in sets if s.get("done"))
        weighed = sum(1 for s in sets if s.get("weightKg") is not None)
        rows.append([w.get("id"), format_date_eu(w.get("date")), w.get("dayName"), f"{done}/{len(sets)}", weighed])
    return headers, rows
