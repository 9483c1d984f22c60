"""
Modal asking how many rows of the current page to select.
"""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label


class SelectNModal(ModalScreen[int | None]):
    """Dismisses with the requested count, or None when cancelled."""

    DEFAULT_CSS = """
    SelectNModal {
        align: center middle;
    }

    #select-n-container {
        width: 44;
        height: auto;
        border: thick $primary;
        background: $surface;
        padding: 1 2;
    }

    #select-n-buttons {
        height: auto;
        margin-top: 1;
    }
    """

    BINDINGS = [
        ("escape", "cancel", "Cancel"),
    ]

    def __init__(
        self,
        page_length: int,
        *,
        id: str | None = None,
        name: str | None = None,
        classes: str | None = None,
    ):
        """
        Initialize the modal.

        Args:
            page_length: Number of rows on the visible page (upper bound)
        """
        super().__init__(id=id, name=name, classes=classes)
        self.page_length = page_length

    def compose(self) -> ComposeResult:
        with Container(id="select-n-container"):
            yield Label(f"Select first N rows on this page (1-{self.page_length})", id="select-n-title")
            yield Input(value="1", type="integer", id="select-n-input")

            with Horizontal(id="select-n-buttons"):
                yield Button("Cancel", variant="default", id="cancel-button")
                yield Button("Apply", variant="primary", id="apply-button")

    def on_mount(self) -> None:
        self.query_one("#select-n-input", Input).focus()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "apply-button":
            self._apply()
        elif event.button.id == "cancel-button":
            self.dismiss(None)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        self._apply()

    def action_cancel(self) -> None:
        self.dismiss(None)

    def _apply(self) -> None:
        raw = self.query_one("#select-n-input", Input).value.strip()
        try:
            count = int(raw)
        except ValueError:
            self.notify("Enter a whole number", severity="warning", timeout=3)
            return
        if count < 1:
            self.notify("Enter at least 1", severity="warning", timeout=3)
            return
        self.dismiss(min(count, self.page_length))
