"""Poster CLI: load the generated plan, apply edits, print.

Usage:
    weekwise-plan
    weekwise-plan --set monday.duration=75分钟 --done monday --output poster.html
    weekwise-plan --text
"""

from __future__ import annotations

import argparse
import logging
import webbrowser
from pathlib import Path

from weekwise.board.handoff import HandoffBuffer
from weekwise.board.plan_board import PlanBoard, load_board
from weekwise.board.poster import render_poster_html, render_poster_text
from weekwise.config import settings
from weekwise.utils.constants import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES, resolve_day


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render the weekly plan poster.")
    parser.add_argument("--handoff", default=settings.handoff_path, help="Hand-off file written by weekwise-chat")
    parser.add_argument("--language", choices=SUPPORTED_LANGUAGES, default=DEFAULT_LANGUAGE)
    parser.add_argument("--title", help="Replace the poster title")
    parser.add_argument(
        "--set",
        dest="edits",
        action="append",
        default=[],
        metavar="DAY.FIELD=VALUE",
        help="Edit one cell, e.g. monday.notes='Go light'. Repeatable.",
    )
    parser.add_argument("--done", action="append", default=[], metavar="DAY", help="Tick a day as completed")
    parser.add_argument("--output", default="weekwise-poster.html", help="HTML poster path")
    parser.add_argument("--text", action="store_true", help="Print a plain-text poster instead of HTML")
    parser.add_argument("--open", action="store_true", help="Open the HTML poster in a browser to print it")
    return parser


def _slot(day: str) -> str:
    return resolve_day(day) or day.strip().lower()


def apply_edit(board: PlanBoard, assignment: str) -> None:
    """Apply one ``day.field=value`` edit through the board's edit cycle."""
    target, sep, value = assignment.partition("=")
    day, dot, field_name = target.partition(".")
    if not sep or not dot:
        raise ValueError(f"Expected DAY.FIELD=VALUE, got {assignment!r}")
    board.begin_edit(_slot(day), field_name.strip().lower())
    board.set_draft(value)
    board.commit_edit()


def main(argv=None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    board = load_board(HandoffBuffer(args.handoff), args.language)
    if args.title:
        board.begin_title_edit()
        board.set_draft(args.title)
        board.commit_edit()
    try:
        for assignment in args.edits:
            apply_edit(board, assignment)
        for day in args.done:
            board.toggle_complete(_slot(day))
    except (KeyError, ValueError) as exc:
        parser.error(exc.args[0] if exc.args else str(exc))

    if args.text:
        print(render_poster_text(board))
        return 0

    output = Path(args.output)
    output.write_text(render_poster_html(board), encoding="utf-8")
    print(f"Poster written to {output}")
    if args.open:
        webbrowser.open(output.resolve().as_uri())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
