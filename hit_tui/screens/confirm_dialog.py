from textual.app import ComposeResult
from textual.containers import Container
from textual.screen import Screen
from textual.widgets import Footer, Button, Header, Label


class ConfirmDialog(Screen):
    """ Asks before a workout or the whole log is deleted. Dismisses with True on delete. """

    CSS_PATH = "../CSS/confirm_dialog.tcss"

    def __init__(self, question: str, detail: str = "This can't be undone.",
                 delete_label: str = "(D)elete", keep_label: str = "(K)eep"):
        super().__init__()
        self.question = question
        self.detail = detail
        self.delete_label = delete_label
        self.keep_label = keep_label

    def compose(self) -> ComposeResult:
        yield Header()
        with Container(id="dialog"):
            yield Label(self.question, id="question")
            if self.detail:
                yield Label(self.detail, id="detail")
            with Container(id="buttons"):
                yield Button(self.keep_label, id="keep", variant="primary")
                yield Button(self.delete_label, id="delete", variant="error")
        yield Footer()

    BINDINGS = [
        ("d", "delete", "Delete"),
        ("k", "keep", "Keep"),
        ("escape", "keep", "Keep"),
    ]

    def action_delete(self) -> None:
        self.dismiss(True)

    def action_keep(self) -> None:
        self.dismiss(False)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        self.dismiss(event.button.id == "delete")
