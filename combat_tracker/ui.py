"""Terminal front end: drawing the tracker with curses and reading keys."""

from __future__ import annotations

import argparse
import curses
import logging
import os

from .help import HELP_BLURB, Style, help_lines
from .tracker import ModeKind, Tracker, instructions

_KEY_PAIR = 1
_BLURB_HEIGHT = 8
_ESC = "\x1b"

_SPECIAL_KEYS = {
    curses.KEY_BACKSPACE: "Backspace",
    curses.KEY_ENTER: "Enter",
    curses.KEY_DC: "Delete",
    curses.KEY_LEFT: "Left",
    curses.KEY_RIGHT: "Right",
    curses.KEY_UP: "Up",
    curses.KEY_DOWN: "Down",
    curses.KEY_HOME: "Home",
    curses.KEY_END: "End",
}

_CONTROL_CHARS = {
    "\x1b": "Esc",
    "\n": "Enter",
    "\r": "Enter",
    "\t": "Tab",
    "\x7f": "Backspace",
    "\x08": "Backspace",
}


def key_from_curses(code: int | str, alt: bool = False) -> str | None:
    """Name a key read from curses, or return None for keys the tracker ignores.

    ``alt`` marks a key that arrived after an escape prefix. Key handling
    matches on the key alone, so the modifier does not change the name.
    """
    if isinstance(code, int):
        if code in _SPECIAL_KEYS:
            return _SPECIAL_KEYS[code]
        if not 0 <= code < 256:
            return None
        code = chr(code)
    if not isinstance(code, str) or len(code) != 1:
        return None
    if code in _CONTROL_CHARS:
        return _CONTROL_CHARS[code]
    return code if code.isprintable() else None


def table_rows(tracker: Tracker) -> list[tuple[tuple[str, str, str], bool]]:
    """Each creature's table cells and whether its row is selected."""
    return [
        (creature.columns(), index == tracker.selected)
        for index, creature in enumerate(tracker.creatures)
    ]


def _put(screen, y: int, x: int, text: str, attr: int = curses.A_NORMAL, limit: int | None = None) -> int:
    height, width = screen.getmaxyx()
    end = width if limit is None else min(width, limit)
    if not 0 <= y < height or x < 0 or x >= end:
        return x
    text = text[: end - x]
    if text:
        try:
            screen.addstr(y, x, text, attr)
        except curses.error:
            # Writing the bottom-right cell leaves the cursor off screen.
            pass
    return x + len(text)


def _centered(screen, y: int, left: int, width: int, segments: list[tuple[str, int]]) -> None:
    total = sum(len(text) for text, _ in segments)
    x = left + max(0, (width - total) // 2)
    for text, attr in segments:
        x = _put(screen, y, x, text, attr, limit=left + width)


def _box(screen, top: int, height: int, width: int, title, bottom=None) -> None:
    if height < 2 or width < 2:
        return
    inner = width - 2
    _put(screen, top, 0, "┌" + "─" * inner + "┐")
    for y in range(top + 1, top + height - 1):
        _put(screen, y, 0, "│")
        _put(screen, y, width - 1, "│")
    _put(screen, top + height - 1, 0, "└" + "─" * inner + "┘")
    _centered(screen, top, 1, inner, title)
    if bottom:
        _centered(screen, top + height - 1, 1, inner, bottom)


def _key_attr() -> int:
    try:
        if curses.has_colors():
            return curses.color_pair(_KEY_PAIR) | curses.A_BOLD
    except curses.error:
        pass
    return curses.A_BOLD


def _style_attr(style: Style, key_attr: int) -> int:
    if style is Style.KEY:
        return key_attr
    if style is Style.HEADING:
        return curses.A_BOLD
    return curses.A_NORMAL


def _render_help(screen, width: int, key_attr: int) -> None:
    for y, line in enumerate(HELP_BLURB.splitlines()[:_BLURB_HEIGHT]):
        _put(screen, y, 0, line)
    border = _BLURB_HEIGHT + 1
    _put(screen, border, 0, "─" * width)
    _centered(screen, border, 0, width, [(" Hotkeys ", curses.A_BOLD)])
    for y, line in enumerate(help_lines(), start=border + 1):
        x = 0
        for text, style in line:
            x = _put(screen, y, x, text, _style_attr(style, key_attr))


def _column_spans(inner: int) -> list[tuple[int, int]]:
    spacing = 1
    rest = max(0, inner - 3 - 10 - 3 * spacing)
    name_width = rest // 3
    initiative_x = 1
    name_x = initiative_x + 3 + spacing
    health_x = name_x + name_width + spacing
    return [(initiative_x, 3), (name_x, name_width), (health_x, 10)]


def _render_notes(screen, top: int, height: int, width: int, tracker: Tracker) -> None:
    rows = height - 2
    columns = width - 2
    if rows <= 0 or columns <= 0:
        return
    editor = tracker.notes
    row, col = editor.cursor
    offset = max(0, row - rows + 1)
    for y, line in enumerate(editor.lines[offset : offset + rows], start=top + 1):
        _put(screen, y, 1, line, limit=width - 1)
    cursor_line = editor.lines[row]
    under = cursor_line[col] if col < len(cursor_line) else " "
    _put(screen, top + 1 + row - offset, 1 + col, under, curses.A_REVERSE, limit=width - 1)


def _render_normal(screen, height: int, width: int, tracker: Tracker, key_attr: int) -> None:
    table_height = len(tracker.creatures) + 2
    _box(screen, 0, table_height, width, [(" Creatures ", curses.A_BOLD)])
    spans = _column_spans(width - 2)
    for row, (cells, selected) in enumerate(table_rows(tracker), start=1):
        attr = curses.A_REVERSE if selected else curses.A_NORMAL
        for (x, span), text in zip(spans, cells):
            if span > 0:
                _put(screen, row, x, text.ljust(span)[:span], attr, limit=width - 1)

    notes_top = table_height + 1
    notes_height = height - notes_top
    banner = [
        (text, key_attr if highlighted else curses.A_NORMAL)
        for text, highlighted in instructions(tracker.mode)
    ]
    _box(screen, notes_top, notes_height, width, [(" Notes ", curses.A_BOLD)], banner)
    _render_notes(screen, notes_top, notes_height, width, tracker)


def render(screen, tracker: Tracker) -> None:
    """Draw the whole tracker onto a curses window."""
    screen.erase()
    height, width = screen.getmaxyx()
    key_attr = _key_attr()
    if tracker.mode.kind is ModeKind.HELP:
        _render_help(screen, width, key_attr)
    else:
        _render_normal(screen, height, width, tracker, key_attr)
    screen.refresh()


def _setup_terminal() -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    try:
        curses.start_color()
    except curses.error:
        return
    background = curses.COLOR_BLACK
    try:
        curses.use_default_colors()
        background = -1
    except curses.error:
        pass
    try:
        curses.init_pair(_KEY_PAIR, curses.COLOR_BLUE, background)
    except curses.error:
        pass


def _read_key(screen) -> str | None:
    code = screen.get_wch()
    alt = False
    if code in (_ESC, 27):
        screen.nodelay(True)
        try:
            follow = screen.get_wch()
        except curses.error:
            follow = None
        finally:
            screen.nodelay(False)
        if follow is not None:
            code, alt = follow, True
    return key_from_curses(code, alt)


def run(screen, tracker: Tracker | None = None) -> Tracker:
    """Draw and handle keys until the tracker stops running."""
    tracker = Tracker() if tracker is None else tracker
    _setup_terminal()
    while tracker.running:
        render(screen, tracker)
        key = _read_key(screen)
        if key is not None:
            tracker.handle_key(key)
    return tracker


def main(argv: list[str] | None = None) -> int:
    """Start the tracker in the terminal, logging key presses to a file."""
    parser = argparse.ArgumentParser(
        prog="combat-tracker", description="A keyboard-driven combat tracker."
    )
    parser.add_argument("--log-file", default="info.log", help="where to write the log")
    args = parser.parse_args(argv)

    handler = logging.FileHandler(args.log_file, mode="w")
    handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(message)s"))
    package_logger = logging.getLogger("combat_tracker")
    package_logger.setLevel(logging.INFO)
    package_logger.addHandler(handler)
    os.environ.setdefault("ESCDELAY", "25")
    try:
        curses.wrapper(run, Tracker())
    finally:
        package_logger.removeHandler(handler)
        handler.close()
    return 0