from hit_cli.cli_utils import MenuItem, prompt_menu
from hit_cli.prompts import input_path, prompt_yes_no
from hit_core.config import EXPORTS_DIR
from hit_core.models import Store
from hit_core.settings import get_unit, write_backup, looks_like_backup, InvalidBackupError
from hit_core.storage import KeyValueStore
from hit_core.usecases import change_unit, restore_backup, wipe_all


def export_menu(store: Store) -> None:
    """ Writes hit_joost_backup_<date>.json into a folder of the user's choice """
    out_dir = input_path(f"📁 Folder for the backup [{EXPORTS_DIR}]: ", expect="dir") or EXPORTS_DIR
    try:
        path = write_backup(store, out_dir)
    except OSError as e:
        print(f"❌ Could not write backup: {e}")
        return
    print(f"✅ Backup saved: {path}")


def import_menu(kv: KeyValueStore, store: Store) -> Store:
    """ Replaces everything with the backup. An invalid file changes nothing. """
    path = input_path("📄 Backup file to import: ", expect="file")
    if path is None:
        return store
    if not looks_like_backup(path):
        print(f"❌ {path.name} is not a .json backup file.")
        return store
    if not prompt_yes_no("♻️ This replaces all current data. Continue?", default=False):
        print("❌ Aborted.")
        return store
    try:
        raw = path.read_text(encoding="utf-8")
        store = restore_backup(kv, raw)
    except (OSError, UnicodeDecodeError, InvalidBackupError) as e:
        print(f"❌ Invalid backup file ({e})")
        return store
    print(f"✅ Imported {len(store['workouts'])} workouts.")
    return store


def clear_menu(kv: KeyValueStore, store: Store) -> Store:
    """ Prompts and wipes all workouts, the unit stays """
    confirm = input("⚠️  This will delete ALL workouts. Type 'yes' to continue: ")
    if confirm.strip().lower() != "yes":
        print("❌ Aborted.")
        return store
    store = wipe_all(kv, store)
    print("✅ All data cleared.\n")
    return store


def settings_menu(kv: KeyValueStore, store: Store) -> Store:
    """ Units, backup, data """
    while True:
        unit = get_unit(store)
        items1 = [
            MenuItem("1", f"Use KG{'  (current)' if unit == 'kg' else ''}"),
            MenuItem("2", f"Use LBS{'  (current)' if unit == 'lbs' else ''}"),
            MenuItem("3", "Export backup"),
            MenuItem("4", "Import backup"),
            MenuItem("5", "Clear all data"),
        ]
        choice1 = prompt_menu("Settings", items1, allow_quit=False)

        if choice1 == "1":
            store = change_unit(kv, store, "kg")
        elif choice1 == "2":
            store = change_unit(kv, store, "lbs")
        elif choice1 == "3":
            export_menu(store)
        elif choice1 == "4":
            store = import_menu(kv, store)
        elif choice1 == "5":
            store = clear_menu(kv, store)
        elif choice1 == "b":
            return store
