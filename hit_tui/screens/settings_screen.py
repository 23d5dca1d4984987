from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import Screen
from textual.widgets import Header, Footer, Label, Button, Input, RadioSet, RadioButton

from hit_core.config import EXPORTS_DIR
from hit_core.settings import get_unit, write_backup, read_backup, looks_like_backup, InvalidBackupError
from hit_tui.screens.confirm_dialog import ConfirmDialog


class SettingsScreen(Screen):
    """ Units, backup export / import, clear all """

    CSS_PATH = "../CSS/settings.tcss"

    def compose(self) -> ComposeResult:
        unit = get_unit(self.app.store)
        yield Header()
        with Container(classes="card"):
            yield Label("Units", classes="card_title")
            with RadioSet(id="unit"):
                yield RadioButton("KG", value=(unit == "kg"), id="kg")
                yield RadioButton("LBS", value=(unit == "lbs"), id="lbs")

        with Container(classes="card"):
            yield Label("Backup", classes="card_title")
            with Horizontal(classes="row"):
                yield Input(value=str(EXPORTS_DIR), placeholder="Export folder...", id="export_dir")
                yield Button("Export", id="export")
            with Horizontal(classes="row"):
                yield Input(placeholder="Backup file to import...", id="import_file")
                yield Button("Import", id="import")

        with Container(classes="card"):
            yield Label("Data", classes="card_title")
            yield Button("Clear all", id="clear", variant="error")

        yield Label("", id="log")
        yield Button("Back", id="back")
        yield Footer()

    BINDINGS = [
        ("escape", "back", "Back to menu"),
    ]

    def refresh_data(self) -> None:
        unit = get_unit(self.app.store)
        button = self.query_one(f"#{unit}", RadioButton)
        if not button.value:
            button.value = True

    def _log(self, msg: str) -> None:
        self.query_one("#log", Label).update(msg)

    def on_radio_set_changed(self, event: RadioSet.Changed) -> None:
        if event.radio_set.id == "unit" and event.pressed.id != get_unit(self.app.store):
            self.app.set_unit(event.pressed.id)

    @on(Button.Pressed, "#export")
    def _on_export_pressed(self, event: Button.Pressed) -> None:
        out_dir = self.query_one("#export_dir", Input).value.strip() or EXPORTS_DIR
        try:
            path = write_backup(self.app.store, out_dir)
        except OSError as e:
            self._log(f"!! Could not write backup: {e}")
            return
        self._log(f"Backup saved: {path}")

    @on(Button.Pressed, "#import")
    def _on_import_pressed(self, event: Button.Pressed) -> None:
        raw_path = self.query_one("#import_file", Input).value.strip()
        if not raw_path:
            self._log("!! Enter the path of a backup file first.")
            return
        if not looks_like_backup(raw_path):
            self._log("!! Choose a .json backup file.")
            return
        try:
            store = read_backup(raw_path)
        except InvalidBackupError:
            self._log("!! Invalid backup file")
            return
        self.app.replace_store(store)
        self.refresh_data()
        self._log(f"Imported {len(store['workouts'])} workouts.")

    @on(Button.Pressed, "#clear")
    def _on_clear_pressed(self, event: Button.Pressed) -> None:
        def _handle(confirmed: bool) -> None:
            if confirmed:
                self.app.clear_all()
                self._log("All data cleared.")

        dialog = ConfirmDialog("Delete every workout?", detail="Your unit setting is kept. This can't be undone.")
        self.app.push_screen(dialog, callback=_handle)

    def action_back(self) -> None:
        self.app.pop_screen()

    @on(Button.Pressed, "#back")
    async def _on_back_pressed(self, event: Button.Pressed) -> None:
        await self.run_action("back")
