from pathlib import Path
from hit_core.date_utilities import is_iso_date, today_iso


def input_date(prompt: str, default: str | None = None) -> str:
    """ Asks for a YYYY-MM-DD date, empty input takes the default (today unless given) """
    default = default or today_iso()
    while True:
        raw = input(f"{prompt} [{default}]: ").strip()
        if not raw:
            return default
        if is_iso_date(raw):
            return raw
        print("⚠️ Invalid date format. Please use YYYY-MM-DD (e.g., 2025-09-24).")


def input_text(prompt: str, default: str = "") -> str:
    """ Free text, no validation """
    raw = input(prompt).strip()
    return raw or default


def input_weight(prompt: str) -> str:
    """ Optional number. Returns the raw string as typed or '' when skipped. """
    while True:
        raw = input(prompt).strip()
        if not raw:
            return ""
        try:
            if float(raw.replace(",", ".")) < 0:
                print("⚠️ Weight can't be negative.")
                continue
            return raw
        except ValueError:
            print("⚠️ Not a number, try again (or leave empty to skip).")


def input_reps(prompt: str) -> str:
    """ Optional whole number of reps, kept as string """
    while True:
        raw = input(prompt).strip()
        if not raw or raw.isdigit():
            return raw
        print("⚠️ Reps must be a whole number (or leave empty to skip).")


def input_path(prompt: str, expect: str = "file") -> Path | None:
    """ Asks for a path, empty input cancels """
    while True:
        raw = input(prompt).strip()
        if not raw:
            return None
        p = Path(raw).expanduser()
        if expect == "file" and p.is_file():
            return p
        if expect == "dir":
            return p  # created on write
        print("⚠️ Not a valid file, try again (or leave empty to cancel).")


def prompt_yes_no(prompt_msg, default=True):
    """ Prompt the user for a yes/no input. Returns True for yes, False for no. """
    # Default determines what happens on empty input.
    while True:
        user_input = input(f"{prompt_msg} [{'Y/n' if default else 'y/N'}]: ").strip().lower()
        if not user_input:
            return default
        if user_input in ["y", "yes"]:
            return True
        if user_input in ["n", "no"]:
            return False
        print("⚠️ Invalid input. Please enter Y or N.")


def get_valid_input(prompt, cast_func=int, retries=3):
    """ Ask the user for input. Returns the cast value if valid, or None if retries are exhausted. """
    for attempt in range(1, retries + 1):
        try:
            return cast_func(input(prompt).strip())
        except (TypeError, ValueError):
            if attempt < retries:
                print("⚠️ Invalid input. Try again.")
            else:
                print("⚠️ Invalid input. Exiting to main menu...")
                return None
