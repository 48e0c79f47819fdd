"""Application entry point for findinclude."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from art import tprint

import settings
from adapters.filename_recognizer import FilenameRecognizer
from adapters.locator import FileLocator
from adapters.variables import BuildVariableExpander
from core.chain import RecognizerChain, install_directive_matcher
from core.directives import build_rules, match_directive
from core.lines import cursor_at, iter_lines

NAME = "FINDINCLUDE"
FONT = "tarty-1"

LOGGER = logging.getLogger(__name__)


def _print_banner() -> None:
    tprint(NAME, FONT, space=1)


def _configure_logging() -> None:
    config = settings.LOGGING or {}
    if not config.get("enabled", False):
        return

    level_name = str(config.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)

    fmt = "%(asctime)s %(levelname)s %(name)s: %(message)s"
    datefmt = "%Y-%m-%d %H:%M:%S"
    formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

    handlers: list[logging.Handler] = []

    if config.get("console", True):
        # stdout carries command output, so logs go to stderr.
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_cfg = config.get("file", {})
    if file_cfg.get("enabled", False):
        path = file_cfg.get("path", "logs/findinclude.log")
        if not os.path.isabs(path):
            path = os.path.join(settings.PROJECT_ROOT, path)
        directory = os.path.dirname(path)
        if directory:
            os.makedirs(directory, exist_ok=True)

        max_bytes = int(file_cfg.get("max_bytes", 5 * 1024 * 1024))
        backup_count = int(file_cfg.get("backup_count", 5))
        file_handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if not handlers:
        return

    logging.basicConfig(level=level, handlers=handlers)


def _build_chain(use_directives: bool) -> RecognizerChain:
    chain = RecognizerChain(FilenameRecognizer())
    if use_directives:
        install_directive_matcher(chain, build_rules(settings.DIRECTIVE_FORMS))
    return chain


def _build_locator() -> FileLocator:
    config = settings.LOCATOR_CONFIG
    return FileLocator(config, BuildVariableExpander(config.variables))


def _read_text(path: str) -> str:
    # newline="" keeps \r and \r\n so offsets match the file on disk.
    with open(path, "r", encoding="utf-8", errors="replace", newline="") as handle:
        return handle.read()


def _match(args: argparse.Namespace) -> int:
    chain = _build_chain(not args.no_directives)
    cursor = cursor_at(_read_text(args.file), args.line - 1, args.column - 1)
    result = chain.recognize(cursor.line, cursor.column)
    if result is None:
        print("no match")
        return 1
    print(f"{result.rule}\t{result.text}\t{result.start}\t{result.end}")
    return 0


def _scan(args: argparse.Namespace) -> int:
    rules = [] if args.no_directives else build_rules(settings.DIRECTIVE_FORMS)
    found = 0
    for cursor in iter_lines(_read_text(args.file)):
        result = match_directive(cursor.line, 0, rules)
        if result is None:
            continue
        found += 1
        print(f"{cursor.row + 1}:{result.start}-{result.end}\t{result.rule}\t{result.text}")
    LOGGER.info("Scanned %s: %s directive(s)", args.file, found)
    return 0


def _open(args: argparse.Namespace) -> int:
    chain = _build_chain(not args.no_directives)
    cursor = cursor_at(_read_text(args.file), args.line - 1, args.column - 1)
    result = chain.recognize(cursor.line, cursor.column)
    if result is None:
        print("no match")
        return 1
    path = _build_locator().locate(result.text, args.file)
    if path is None:
        print(f"not found: {result.text}")
        return 1
    print(path)
    return 0


def _view(args: argparse.Namespace) -> int:
    _print_banner()
    from frontend.app import IncludeViewerApp

    IncludeViewerApp(
        path=args.file,
        text=_read_text(args.file),
        chain=_build_chain(not args.no_directives),
        locator=_build_locator(),
        rules=build_rules(settings.DIRECTIVE_FORMS),
    ).run()
    return 0


def _add_position_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", help="File to read")
    parser.add_argument("line", type=int, help="1-based line number")
    parser.add_argument("column", type=int, help="1-based column")


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="findinclude")
    parser.add_argument(
        "--no-directives",
        action="store_true",
        help="Skip include directives and use plain filename-at-point lookup",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    match_parser = subparsers.add_parser("match", help="Show the name recognized at a position")
    _add_position_args(match_parser)
    match_parser.set_defaults(handler=_match)

    open_parser = subparsers.add_parser("open", help="Resolve the name at a position to a file")
    _add_position_args(open_parser)
    open_parser.set_defaults(handler=_open)

    scan_parser = subparsers.add_parser("scan", help="List every include directive in a file")
    scan_parser.add_argument("file", help="File to read")
    scan_parser.set_defaults(handler=_scan)

    view_parser = subparsers.add_parser("view", help="Browse a file and follow includes")
    view_parser.add_argument("file", help="File to read")
    view_parser.set_defaults(handler=_view)

    args = parser.parse_args(argv)
    _configure_logging()
    if settings.CONFIG_ERROR:
        print(f"findinclude: {settings.CONFIG_ERROR}", file=sys.stderr)
        return 2
    try:
        return args.handler(args)
    except (OSError, ValueError) as exc:
        LOGGER.debug("Command %s failed", args.command, exc_info=True)
        print(f"findinclude: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
