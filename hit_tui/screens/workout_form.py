from textual import on
from textual.app import ComposeResult
from textual.containers import Container, Horizontal, VerticalScroll
from textual.screen import Screen
from textual.widgets import Header, Footer, Label, Input, Checkbox, Button

from hit_core.builder import new_entry_rows, build_workout
from hit_core.catalog import get_day_plan
from hit_core.date_utilities import today_iso, is_iso_date
from hit_core.formatting import format_date_eu


class WorkoutForm(Screen):
    """ One row per exercise of the day. Dismisses with the built workout, or None on cancel. """

    CSS_PATH = "../CSS/workout_form.tcss"

    def __init__(self, day_key: str, unit: str) -> None:
        super().__init__()
        self.day_key = day_key
        self.unit = unit
        self.plan = get_day_plan(day_key)
        self.rows = new_entry_rows(day_key)

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="form_header"):
            yield Label(self.plan["name"], id="day_name")
            yield Label(self._date_hint(today_iso()), id="date_hint")
            yield Input(value=today_iso(), placeholder="YYYY-MM-DD", max_length=10, id="date")

        with VerticalScroll(id="rows"):
            for idx, row in enumerate(self.rows):
                with Container(classes="exercise"):
                    with Horizontal(classes="exercise_top"):
                        yield Checkbox("Done", value=False, id=f"done-{idx}")
                        yield Label(f"{row['name']}\n[dim]{row['note']}[/dim]", classes="exercise_name")
                        yield Input(placeholder=f"weight ({self.unit})", type="number", id=f"weight-{idx}",
                                    classes="weight")
                        yield Input(placeholder="reps", type="integer", id=f"reps-{idx}", classes="reps")
                    yield Input(placeholder="Note (tempo, form, RIR, dropset details, etc.)", id=f"note-{idx}",
                                classes="note")

        with Container(id="button_wrapper"):
            yield Label("", id="log")
            yield Button("Cancel", id="cancel")
            yield Button("Save", id="save", variant="primary")
        yield Footer()

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
        ("ctrl+s", "save", "Save"),
    ]

    def _date_hint(self, raw: str) -> str:
        return f"Date (EU): {format_date_eu(raw)} — enter weight ({self.unit.upper()}) and tick what you did."

    @on(Input.Changed, "#date")
    def _on_date_changed(self, event: Input.Changed) -> None:
        if is_iso_date(event.value):
            self.query_one("#date_hint", Label).update(self._date_hint(event.value.strip()))

    def _collect_rows(self) -> list[dict]:
        """ Copy the widget values into the entry rows """
        rows = []
        for idx, row in enumerate(self.rows):
            rows.append({
                **row,
                "done": self.query_one(f"#done-{idx}", Checkbox).value,
                "weight": self.query_one(f"#weight-{idx}", Input).value.strip(),
                "reps": self.query_one(f"#reps-{idx}", Input).value.strip(),
                "noteText": self.query_one(f"#note-{idx}", Input).value,
            })
        return rows

    def action_save(self) -> None:
        date = self.query_one("#date", Input).value.strip()
        if not is_iso_date(date):
            self.query_one("#log", Label).update("!! Invalid date format. Please use YYYY-MM-DD (e.g., 2025-09-24).")
            return
        workout = build_workout(self.day_key, date, self.unit, self._collect_rows())
        self.dismiss(workout)

    def action_cancel(self) -> None:
        self.dismiss(None)

    @on(Button.Pressed, "#save")
    async def _on_save_pressed(self, event: Button.Pressed) -> None:
        await self.run_action("save")

    @on(Button.Pressed, "#cancel")
    async def _on_cancel_pressed(self, event: Button.Pressed) -> None:
        await self.run_action("cancel")
