from textual import on
from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Header, Button, Label, Footer, RadioSet, RadioButton
from hit_core.usecases import get_choices_for_ui


class DayPicker(Screen):
    """ Choose the training day, dismisses with the day key or None """

    CSS_PATH = "../CSS/dialog.tcss"

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="dialog"):
            yield Label("New workout – choose your day to start:", id="question")

            with RadioSet(id="day-radio"):
                for i, (key, label) in enumerate(get_choices_for_ui()["days"]):
                    yield RadioButton(label, value=(i == 0), id=key)

            with Container(id="buttons"):
                yield Button("(S)tart", id="start", variant="primary")
                yield Button("(B)ack", id="back")
        yield Footer()

    BINDINGS = [
        ("s", "start", "Start"),
        ("b", "back", "Back"),
        ("escape", "back", "Back"),
    ]

    def action_start(self) -> None:
        radioset = self.query_one("#day-radio", RadioSet)
        pressed = radioset.pressed_button
        if pressed is None:
            return
        self.dismiss(pressed.id)

    def action_back(self) -> None:
        self.dismiss(None)

    @on(Button.Pressed, "#start")
    async def _on_start_pressed(self, event: Button.Pressed) -> None:
        await self.run_action("start")

    @on(Button.Pressed, "#back")
    async def _on_back_pressed(self, event: Button.Pressed) -> None:
        await self.run_action("back")
