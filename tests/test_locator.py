from __future__ import annotations

from pathlib import Path

from adapters.locator import FileLocator
from adapters.variables import BuildVariableExpander
from core.config import LocatorConfig


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("", encoding="utf-8")
    return path


def test_prefers_including_file_directory(tmp_path: Path) -> None:
    main = _touch(tmp_path / "src" / "main.c")
    local = _touch(tmp_path / "src" / "foo.h")
    _touch(tmp_path / "inc" / "foo.h")
    locator = FileLocator(LocatorConfig(search_paths=(str(tmp_path / "inc"),)))

    assert locator.locate("foo.h", str(main)) == str(local)


def test_falls_back_to_search_paths(tmp_path: Path) -> None:
    main = _touch(tmp_path / "src" / "main.c")
    header = _touch(tmp_path / "inc" / "sys" / "bar.h")
    locator = FileLocator(LocatorConfig(search_paths=(str(tmp_path / "inc"),)))

    assert locator.locate("sys/bar.h", str(main)) == str(header)


def test_tries_suffixes_for_names_without_extension(tmp_path: Path) -> None:
    main = _touch(tmp_path / "Makefile")
    rules = _touch(tmp_path / "rules.mk")
    locator = FileLocator(LocatorConfig(suffixes=(".mk",)))

    assert locator.locate("rules", str(main)) == str(rules)
    assert locator.locate("rules.txt", str(main)) is None


def test_expands_variables_before_lookup(tmp_path: Path) -> None:
    header = _touch(tmp_path / "inc" / "bar.h")
    expander = BuildVariableExpander({"INC": str(tmp_path / "inc")}, use_environ=False)
    locator = FileLocator(LocatorConfig(), expander)

    assert locator.locate("$(INC)/bar.h") == str(header)


def test_candidates_are_ordered_and_unique(tmp_path: Path) -> None:
    main = tmp_path / "src" / "main.c"
    locator = FileLocator(
        LocatorConfig(search_paths=(str(tmp_path / "src"), str(tmp_path / "inc")), suffixes=(".h",))
    )

    assert locator.candidates("foo", str(main)) == [
        str(tmp_path / "src" / "foo"),
        str(tmp_path / "src" / "foo.h"),
        str(tmp_path / "inc" / "foo"),
        str(tmp_path / "inc" / "foo.h"),
    ]


def test_missing_file_returns_none(tmp_path: Path) -> None:
    locator = FileLocator(LocatorConfig())
    assert locator.locate("nothing.h", str(tmp_path / "main.c")) is None
