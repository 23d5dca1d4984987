from textual import on
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Header, DataTable, Label, Button, Footer, Select
from textual_plotext import PlotextPlot

from hit_core.formatting import format_date_eu
from hit_core.usecases import get_progress_for_ui, get_choices_for_ui


class ProgressScreen(Screen):
    """ Weight over time for one exercise """

    CSS_PATH = "../CSS/progress.tcss"

    def __init__(self) -> None:
        super().__init__()
        self.exercise: str | None = None

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="filters"):
            names = get_choices_for_ui()["exercises"]
            yield Select([(name, name) for name in names], prompt="Choose exercise…", id="exercise")
            yield Label("", id="best")
        with Container(id="plot_panel"):
            yield PlotextPlot(id="plot")
            yield DataTable(id="points")
        yield Label("Select an exercise to see your weights over time.", id="log")
        yield Button("Back", id="back")
        yield Footer()

    BINDINGS = [
        ("escape", "back", "Back to menu"),
    ]

    def on_mount(self) -> None:
        table = self.query_one("#points", DataTable)
        table.add_columns("Date", "Weight")
        self.refresh_data()

    def on_select_changed(self, event: Select.Changed) -> None:
        # the blank prompt option carries a sentinel, not a str
        self.exercise = event.value if isinstance(event.value, str) else None
        self.refresh_data()

    def refresh_data(self) -> None:
        progress = get_progress_for_ui(self.app.store, self.exercise)
        unit = progress["unit"]
        series = progress["series"]

        self.query_one("#best", Label).update(f"Best: {progress['best_label']}" if progress["best_label"] else "")

        table = self.query_one("#points", DataTable)
        table.clear(columns=False)
        for p in series:
            table.add_row(format_date_eu(p["date"]), f"{p['weight']} {unit}")

        log = self.query_one("#log", Label)
        if not self.exercise:
            log.update("Select an exercise to see your weights over time.")
        elif not series:
            log.update(f"No weights recorded for {self.exercise} yet.")
        else:
            log.update(f"{len(series)} sessions")

        self._refresh_plot(series, unit)

    def _refresh_plot(self, series: list[dict], unit: str) -> None:
        plot_widget = self.query_one(PlotextPlot)
        plt = plot_widget.plt
        plt.clear_figure()
        if series:
            xs = list(range(len(series)))
            ys = [p["weight"] for p in series]
            plt.plot(xs, ys, marker="braille", color="red")
            plt.xticks(xs, [format_date_eu(p["date"]) for p in series])
            # Give upper border headroom
            plt.ylim(0, max(ys) * 1.1 or 1)
            plt.ylabel(unit)
        plt.title(self.exercise or "Progress")
        plot_widget.refresh()

    def action_back(self) -> None:
        self.app.pop_screen()

    @on(Button.Pressed, "#back")
    async def _on_back_pressed(self, event: Button.Pressed) -> None:
        await self.run_action("back")
