from textual import on
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Header, DataTable, Button, Footer, Label

from hit_core.formatting import format_date_eu, format_history_rows
from hit_core.history import find_workout
from hit_core.usecases import get_history_for_ui
from hit_tui.screens.confirm_dialog import ConfirmDialog


class HistoryScreen(Screen):
    """ Saved workouts, newest first, one table row per exercise """

    CSS_PATH = "../CSS/history.tcss"

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="table_wrapper"):
            yield DataTable(id="history")
        with Container(id="button_wrapper"):
            yield Label("", id="log")
            yield Button(label="Delete", id="delete", variant="error")
            yield Button(label="Back", id="back")
        yield Footer()

    BINDINGS = [
        ("escape", "back", "Back to main menu"),
        ("d", "delete", "Delete workout"),
    ]

    def on_mount(self) -> None:
        self.refresh_data()

    def refresh_data(self) -> None:
        history = get_history_for_ui(self.app.store)
        unit = history["unit"]
        workouts = history["workouts"]
        headers, rows = format_history_rows(workouts)

        table = self.query_one("#history", DataTable)
        if len(table.columns) == 0:
            table.add_columns(*headers)
        table.clear(columns=False)

        # The row key carries the workout id, also on the continuation rows of a workout
        current_id = None
        for i, row in enumerate(rows):
            current_id = row[0] or current_id
            table.add_row(*row, key=f"{current_id}:{i}")

        log = self.query_one("#log", Label)
        if not workouts:
            log.update("No workouts saved yet. Press 'n' on the main menu to start.")
        else:
            log.update(f"{len(workouts)} workouts — weights in {unit.upper()}")

        if rows:
            table.cursor_type = "row"
            table.focus()

    def _selected_workout_id(self) -> str | None:
        table = self.query_one("#history", DataTable)
        if table.row_count == 0:
            return None
        row_key = table.coordinate_to_cell_key(table.cursor_coordinate).row_key
        return str(row_key.value).rsplit(":", 1)[0]

    def action_delete(self) -> None:
        workout_id = self._selected_workout_id()
        if workout_id is None:
            return
        workout = find_workout(self.app.store, workout_id)
        if workout is None:
            return
        question = f"Delete {workout.get('dayName')} on {format_date_eu(workout.get('date'))}?"

        def _handle(confirmed: bool) -> None:
            if confirmed:
                self.app.delete_workout(workout_id)
                self.refresh_data()

        self.app.push_screen(ConfirmDialog(question), callback=_handle)

    def action_back(self) -> None:
        self.app.pop_screen()

    @on(Button.Pressed, "#delete")
    async def _on_delete_pressed(self, event: Button.Pressed) -> None:
        await self.run_action("delete")

    @on(Button.Pressed, "#back")
    async def _on_back_pressed(self, event: Button.Pressed) -> None:
        await self.run_action("back")
