from __future__ import annotations

import asyncio
from pathlib import Path

from textual.widgets import TextArea

from adapters.filename_recognizer import FilenameRecognizer
from adapters.locator import FileLocator
from core.chain import RecognizerChain, install_directive_matcher
from core.config import LocatorConfig
from frontend.app import IncludeViewerApp
from frontend.state import LookupState


def _viewer(tmp_path: Path, text: str) -> IncludeViewerApp:
    chain = RecognizerChain(FilenameRecognizer())
    install_directive_matcher(chain)
    return IncludeViewerApp(
        path=str(tmp_path / "main.c"),
        text=text,
        chain=chain,
        locator=FileLocator(LocatorConfig()),
    )


def _press_on_line(
    app: IncludeViewerApp, prefix: str, column: int, keys: list[str]
) -> tuple[LookupState, str]:
    async def scenario() -> tuple[LookupState, str]:
        async with app.run_test() as pilot:
            area = app.query_one("#buffer", TextArea)
            document = area.document
            row = next(
                index for index in range(document.line_count) if document.get_line(index).startswith(prefix)
            )
            area.cursor_location = (row, column)
            for key in keys:
                await pilot.press(key)
            await pilot.pause()
            return app.lookup_state, area.selected_text

    return asyncio.run(scenario())


def test_find_at_point_after_form_feed(tmp_path: Path) -> None:
    header = tmp_path / "stdio.h"
    header.write_text("", encoding="utf-8")
    app = _viewer(tmp_path, "int a;\x0c\n#include <stdio.h>\n")

    state, selected = _press_on_line(app, "#include", 3, ["f"])

    assert state.result is not None
    assert state.result.text == "stdio.h"
    assert state.located == str(header)
    assert selected == "stdio.h"


def test_toggle_falls_back_to_filename_lookup(tmp_path: Path) -> None:
    (tmp_path / "stdio.h").write_text("", encoding="utf-8")
    app = _viewer(tmp_path, "#include <stdio.h>\n")

    state, _ = _press_on_line(app, "#include", 3, ["t", "f"])

    assert not state.directives_enabled
    assert state.result is not None
    assert state.result.rule == "filename"
    assert state.result.text == "#include"
