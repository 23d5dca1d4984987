from textual.app import App
from hit_cli.cli_utils import MenuItem
from hit_core.config import APP_TITLE
from hit_core.models import Store, Workout
from hit_core.settings import get_unit
from hit_core.storage import KeyValueStore, load, save
from hit_core.usecases import save_new_workout, remove_workout, change_unit, switch_unit, wipe_all
from hit_tui.screens.day_picker import DayPicker
from hit_tui.screens.history import HistoryScreen
from hit_tui.screens.menu_base import MenuBase
from hit_tui.screens.progress import ProgressScreen
from hit_tui.screens.settings_screen import SettingsScreen
from hit_tui.screens.workout_form import WorkoutForm


class HitTui(App):
    """ The main application. Owns the store; screens read self.app.store and ask the app to change it. """

    TITLE = APP_TITLE

    BINDINGS = [
        ("u", "toggle_unit", "KG/LBS"),
    ]

    def __init__(self, kv: KeyValueStore | None = None):
        super().__init__()
        self.kv = kv or KeyValueStore()
        self.store: Store = load(self.kv)

    def on_mount(self):
        self._update_subtitle()

    def on_ready(self) -> None:
        self.action_open_main_menu()

    def _update_subtitle(self) -> None:
        self.sub_title = f"Unit: {get_unit(self.store).upper()}"

    def _refresh_screen(self) -> None:
        self._update_subtitle()
        refresh = getattr(self.screen, "refresh_data", None)
        if refresh:
            refresh()

    # ---- Store changes (always a whole new store, saved right away) ---- #
    def add_workout(self, workout: Workout) -> None:
        self.store = save_new_workout(self.kv, self.store, workout)

    def delete_workout(self, workout_id: str) -> None:
        self.store = remove_workout(self.kv, self.store, workout_id)

    def set_unit(self, unit: str) -> None:
        self.store = change_unit(self.kv, self.store, unit)
        self._refresh_screen()

    def replace_store(self, store: Store) -> None:
        save(store, self.kv)
        self.store = store
        self._update_subtitle()

    def clear_all(self) -> None:
        self.store = wipe_all(self.kv, self.store)
        self._refresh_screen()

    # ---- Actions ---- #
    def action_open_main_menu(self):
        items = [
            MenuItem("n", "New workout", "new_workout"),
            MenuItem("w", "My workouts", "view_history"),
            MenuItem("p", "Progress", "view_progress"),
            MenuItem("s", "Settings", "open_settings"),
            MenuItem("q", "Quit", "quit"),
        ]
        self.push_screen(MenuBase("Main Menu", items))

    def action_toggle_unit(self) -> None:
        self.store = switch_unit(self.kv, self.store)
        self._refresh_screen()

    def action_new_workout(self):
        self.push_screen(DayPicker(), callback=self._handle_day_picked)

    def _handle_day_picked(self, day_key: str | None) -> None:
        if day_key:
            self.push_screen(WorkoutForm(day_key, get_unit(self.store)), callback=self._handle_workout_form)

    def _handle_workout_form(self, workout: Workout | None) -> None:
        if workout:
            self.add_workout(workout)
            self.notify(f"Saved {workout['dayName']}")

    def action_view_history(self):
        self.push_screen(HistoryScreen())

    def action_view_progress(self):
        self.push_screen(ProgressScreen())

    def action_open_settings(self):
        self.push_screen(SettingsScreen())

    def action_quit(self):
        self.exit()


def main():
    app = HitTui()
    app.run()


if __name__ == "__main__":
    main()
