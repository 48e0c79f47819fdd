"""Textual viewer that plays the host editor for find-file-at-point."""

from __future__ import annotations

import os
from typing import Any, Sequence

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container
from textual.widgets import Footer, Static, TextArea
from textual.widgets.text_area import Selection

from adapters.locator import FileLocator
from core.chain import (
    DirectiveRecognizer,
    RecognizerChain,
    install_directive_matcher,
    uninstall_directive_matcher,
)
from core.directives import DirectiveRule

from .constants import INCLUDE_GREEN, MISS_RED
from .modals import NotFoundScreen
from .state import LookupState


class IncludeViewerApp(App):
    """Read-only buffer with a find-file-at-point command."""

    CSS = """
    Screen {
        background: #0f1a21;
        color: #e8eef5;
    }

    #header {
        height: 3;
        padding: 0 2;
        border-bottom: solid #2a3a46;
    }

    #buffer {
        height: 1fr;
    }

    #status {
        height: 1;
        padding: 0 2;
        color: #c6d2dd;
    }

    NotFoundScreen {
        align: center middle;
    }

    .modal-dialog {
        width: 70;
        height: auto;
        padding: 1 2;
        border: thick #2a3a46;
        background: #15232c;
    }

    .modal-dialog--confirm {
        max-height: 24;
    }

    .modal-title {
        text-style: bold;
    }

    .modal-body {
        margin: 1 0;
        color: #c6d2dd;
    }

    .modal-actions {
        height: auto;
        align: right middle;
    }
    """

    BINDINGS = [
        Binding("f", "find_at_point", "Find file", priority=True),
        Binding("t", "toggle_directives", "Toggle includes", priority=True),
        Binding("q", "quit", "Quit", priority=True),
    ]

    def __init__(
        self,
        path: str,
        text: str,
        chain: RecognizerChain,
        locator: FileLocator,
        rules: Sequence[DirectiveRule] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self._path = path
        self._text = text
        self._chain = chain
        self._locator = locator
        self._rules = rules
        self.lookup_state = LookupState(
            directives_enabled=any(isinstance(r, DirectiveRecognizer) for r in chain.installed),
        )

    def compose(self) -> ComposeResult:
        with Container(id="header"):
            yield Static(self._title_text(), id="title")
        yield TextArea(self._text, read_only=True, show_line_numbers=True, id="buffer")
        yield Static("", id="status")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_status()

    def action_find_at_point(self) -> None:
        area = self.query_one("#buffer", TextArea)
        row, column = area.cursor_location
        # The document splits lines itself (form feeds included).
        line = area.document.get_line(row)
        result = self._chain.recognize(line, column)

        self.lookup_state.result = result
        self.lookup_state.row = row
        self.lookup_state.located = None
        if result is not None:
            # Select exactly the reported span so the highlight matches last_match.
            area.selection = Selection((row, result.start), (row, result.end))
            self.lookup_state.located = self._locator.locate(result.text, self._path)
            if self.lookup_state.located is None:
                self.push_screen(
                    NotFoundScreen(result.text, self._locator.candidates(result.text, self._path))
                )
        self._refresh_status()

    def action_toggle_directives(self) -> None:
        if self.lookup_state.directives_enabled:
            uninstall_directive_matcher(self._chain)
        else:
            install_directive_matcher(self._chain, self._rules)
        self.lookup_state.directives_enabled = not self.lookup_state.directives_enabled
        self._refresh_status()

    def _refresh_status(self) -> None:
        status = self.query_one("#status", Static)
        mode = "includes: on" if self.lookup_state.directives_enabled else "includes: off"
        result = self.lookup_state.result
        if self.lookup_state.row is None:
            status.update(Text(f"{mode} | press f on a line"))
            return
        if result is None:
            status.update(Text.assemble((mode, "bold"), " | ", ("no match", MISS_RED)))
            return
        located = self.lookup_state.located or "not found"
        status.update(
            Text.assemble(
                (mode, "bold"),
                " | ",
                (result.rule, INCLUDE_GREEN),
                f" {result.text} [{result.start}:{result.end}] -> {located}",
            )
        )

    def _title_text(self) -> Text:
        return Text.assemble(
            ("FIND", INCLUDE_GREEN),
            ("INCLUDE > ", "bold"),
            os.path.basename(self._path),
        )
