"""Modal dialogs for the Textual viewer."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container, Horizontal
from textual.screen import ModalScreen
from textual.widgets import Button, Static


class NotFoundScreen(ModalScreen[None]):
    """Show the paths that were tried for a name that did not resolve."""

    def __init__(self, include_name: str, candidates: list[str]) -> None:
        super().__init__()
        self._include_name = include_name
        self._candidates = candidates

    def compose(self) -> ComposeResult:
        tried = "\n".join(self._candidates) or "(no candidates)"
        yield Container(
            Static(f"No file for {self._include_name}", classes="modal-title"),
            Static(tried, classes="modal-body"),
            Horizontal(
                Button("Close", id="not-found-close"),
                classes="modal-actions",
            ),
            classes="modal-dialog modal-dialog--confirm",
        )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        self.dismiss(None)
