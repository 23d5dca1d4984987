from hit_cli.cli_utils import prompt_menu, numbered_items, print_list_table
from hit_cli.prompts import input_date, input_weight, input_reps, input_text, prompt_yes_no, get_valid_input
from hit_core.builder import new_entry_rows, build_workout
from hit_core.formatting import format_date_eu, format_history_rows, format_workout_overview, history_entry
from hit_core.history import list_workouts, find_workout
from hit_core.models import Store
from hit_core.settings import get_unit
from hit_core.storage import KeyValueStore
from hit_core.usecases import save_new_workout, remove_workout, get_history_for_ui, get_choices_for_ui


def pick_day() -> str | None:
    """ Day picker, returns a day key or None on back """
    options = get_choices_for_ui()["days"]
    choice = prompt_menu("New workout – choose your day", numbered_items(label for _, label in options),
                         allow_quit=False)
    if choice == "b":
        return None
    return options[int(choice) - 1][0]


def fill_rows(day_key: str, unit: str) -> list[dict]:
    """ Walks through every exercise of the day and asks for done / weight / reps / note """
    rows = new_entry_rows(day_key)
    print(f"\nEnter weight in {unit.upper()} and tick what you did. Leave fields empty to skip.")
    for idx, row in enumerate(rows, start=1):
        print(f"\n[{idx}/{len(rows)}] {row['name']}  ({row['note']})")
        row["done"] = prompt_yes_no("  Done?", default=False)
        row["weight"] = input_weight(f"  Weight ({unit}): ")
        row["reps"] = input_reps("  Reps: ")
        row["noteText"] = input_text("  Note (tempo, form, RIR, dropsets...): ")
    return rows


def new_workout_menu(kv: KeyValueStore, store: Store) -> Store:
    """ Day picker -> date -> rows -> confirm -> save """
    day_key = pick_day()
    if day_key is None:
        return store

    unit = get_unit(store)
    date = input_date("📅 Date (YYYY-MM-DD)")
    rows = fill_rows(day_key, unit)

    workout = build_workout(day_key, date, unit, rows)
    print(f"\n{workout['dayName']} — {format_date_eu(workout['date'])}")
    headers, table = format_history_rows([history_entry(workout, unit)])
    print_list_table([r[3:] for r in table], headers[3:])

    if not prompt_yes_no("💾 Save this workout?"):
        print("❌ Not saved.")
        return store
    return save_new_workout(kv, store, workout)


def history_menu(kv: KeyValueStore, store: Store) -> Store:
    """ Newest first overview, details per workout, delete by id """
    while True:
        workouts = list_workouts(store)
        if not workouts:
            print("\nNo workouts saved yet. Choose 'New workout' from the main menu to start.")
            return store

        unit = get_unit(store)
        print(f"\n📖 My workouts ({unit})")
        headers, rows = format_workout_overview(workouts)
        print_list_table(rows, headers)

        choice = prompt_menu("History", numbered_items(["Show details", "Show all details", "Delete a workout"]),
                             allow_quit=False)
        if choice == "b":
            return store

        if choice == "2":
            headers, rows = format_history_rows(get_history_for_ui(store)["workouts"])
            print_list_table(rows, headers)
            continue

        if (workout_id := get_valid_input("Workout ID: ", cast_func=str)) is None:
            continue
        workout = find_workout(store, workout_id)
        if workout is None:
            print(f"\nWorkout with ID {workout_id} does not exist.\n")
            continue

        if choice == "1":
            headers, rows = format_history_rows([history_entry(workout, unit)])
            print_list_table(rows, headers)
        elif choice == "3":
            if prompt_yes_no(f"🗑️ Delete {workout.get('dayName')} on {format_date_eu(workout.get('date'))}?",
                             default=False):
                store = remove_workout(kv, store, workout_id)
                print("✅ Deleted.")
