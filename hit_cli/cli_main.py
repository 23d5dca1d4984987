import logging
import sys
from hit_core.config import APP_TITLE
from hit_core.settings import get_unit
from hit_core.storage import KeyValueStore, load
from hit_core.usecases import switch_unit
from hit_core.version import get_git_version


VERSION = get_git_version()


def _configure_matplotlib_backend():
    """ Auto-select a safe Matplotlib backend (GUI if available, else headless), unless user overrides. """
    import os, matplotlib
    if os.environ.get("MPLBACKEND"):
        return  # respect user override
    try:
        if sys.platform.startswith("linux") and os.environ.get("DISPLAY"):
            matplotlib.use("TkAgg")  # GUI
        else:
            matplotlib.use("Agg")    # headless fallback (saves files)
    except (ImportError, ValueError) as e:
        print("[plot] Backend selection error:", e)


def configure_logging():
    """ Set logging level based on --debug """
    debug = ("--debug" in sys.argv) or ("-d" in sys.argv)
    if debug:
        print("🔧 Debug mode enabled")
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )


def launcher_menu(kv: KeyValueStore, store):
    """ The app's starting menu """
    from hit_cli.cli_settings import settings_menu
    from hit_cli.cli_workouts import new_workout_menu, history_menu
    from hit_cli.visualizations import progress_menu

    while True:
        unit = get_unit(store)
        print(f"\n🏁 What would you like to do?  (unit: {unit.upper()})")
        print("[1] New workout")
        print("[2] My workouts")
        print("[3] Progress")
        print("[4] Settings")
        print("[u] Switch KG/LBS")
        print("[q] Quit")
        choice = input("> ").strip().lower()

        if choice == "1":
            store = new_workout_menu(kv, store)

        elif choice == "2":
            store = history_menu(kv, store)

        elif choice == "3":
            progress_menu(store)

        elif choice == "4":
            store = settings_menu(kv, store)

        elif choice == "u":
            store = switch_unit(kv, store)
            print(f"⚖️ Unit is now {get_unit(store).upper()}")

        elif choice in {"q", "x"}:
            break
        else:
            print("❓ Not a choice. Try again.")
    return store


def main():

    configure_logging()
    _configure_matplotlib_backend()
    print(f"\n🏋️ {APP_TITLE} v{VERSION}")
    print("Your training log CLI\n")

    kv = KeyValueStore()                        # Resolve the storage file (env var, project, home)
    logging.debug("Using storage file %s", kv.path)
    store = load(kv)                            # Read once, the menus hand back the new store after every change

    try:
        launcher_menu(kv, store)
    except (KeyboardInterrupt, EOFError):
        print("\n👋 Bye.")


if __name__ == "__main__":
    main()
