"""Curses adapter: paints Frames and turns raw curses input into events.

The translate_* helpers are plain functions of curses values so they can
be exercised without an initialized screen.
"""
from __future__ import annotations
import curses
import logging
from typing import Dict, Optional, Tuple, Union
import events
import theme
from events import KeyEvent, MouseEvent, ResizeEvent
from render import Frame, clip

logger = logging.getLogger(__name__)

BUTTON5_PRESSED = getattr(curses, "BUTTON5_PRESSED", 0)
MOUSE_MASK = (
    curses.BUTTON1_PRESSED
    | curses.BUTTON1_RELEASED
    | curses.BUTTON4_PRESSED
    | BUTTON5_PRESSED
)

_CHAR_KEYS: Dict[str, str] = {
    "\n": events.ENTER,
    "\r": events.ENTER,
    "\x1b": events.ESCAPE,
    "\x7f": events.BACKSPACE,
    "\x08": events.BACKSPACE,
}
_SPECIAL_KEYS: Dict[int, str] = {
    curses.KEY_ENTER: events.ENTER,
    curses.KEY_BACKSPACE: events.BACKSPACE,
    curses.KEY_LEFT: events.LEFT,
    curses.KEY_RIGHT: events.RIGHT,
    curses.KEY_UP: events.UP,
    curses.KEY_DOWN: events.DOWN,
}

InputEvent = Union[KeyEvent, MouseEvent, ResizeEvent]


def translate_key(raw: Union[str, int]) -> Optional[Union[KeyEvent, ResizeEvent]]:
    """Map a get_wch() result to an event; None for keys the app ignores."""
    if isinstance(raw, str):
        code = _CHAR_KEYS.get(raw)
        if code is not None:
            return KeyEvent(code)
        if raw.isprintable():
            return events.char(raw)
        return None
    if raw == curses.KEY_RESIZE:
        return ResizeEvent()
    code = _SPECIAL_KEYS.get(raw)
    return KeyEvent(code) if code is not None else None


def translate_mouse(bstate: int, row: int, col: int) -> Optional[MouseEvent]:
    if bstate & (curses.BUTTON1_PRESSED | curses.BUTTON1_CLICKED):
        return MouseEvent(events.PRESS, row, col)
    if bstate & curses.BUTTON1_RELEASED:
        return MouseEvent(events.RELEASE, row, col)
    if bstate & curses.BUTTON4_PRESSED:
        return MouseEvent(events.WHEEL_UP, row, col)
    if bstate & BUTTON5_PRESSED:
        return MouseEvent(events.WHEEL_DOWN, row, col)
    return None


class CursesScreen:
    def __init__(self, stdscr, styles: Dict[str, int]):
        self.stdscr = stdscr
        self.styles = styles

    @classmethod
    def setup(cls, stdscr, use_color: bool) -> "CursesScreen":
        """Configure keypad, mouse reporting and colors on a fresh screen."""
        if hasattr(curses, "set_escdelay"):
            curses.set_escdelay(25)
        stdscr.keypad(True)
        curses.mousemask(MOUSE_MASK)
        curses.mouseinterval(0)
        return cls(stdscr, theme.init_styles(use_color))

    def close(self) -> None:
        curses.mousemask(0)

    def size(self) -> Tuple[int, int]:
        rows, cols = self.stdscr.getmaxyx()
        return rows, cols

    def paint(self, frame: Frame) -> None:
        self.stdscr.erase()
        rows, cols = self.size()
        for op in frame.ops:
            self._put(op.row, op.col, op.text, theme.style(self.styles, op.style), rows, cols)
        if frame.cursor is None:
            self._cursor_visible(0)
        else:
            self._cursor_visible(1)
            self.stdscr.move(*frame.cursor)
        self.stdscr.refresh()

    def _put(self, row: int, col: int, text: str, attr: int, rows: int, cols: int) -> None:
        limit = cols - col
        # the bottom-right cell cannot be written without scrolling
        if row == rows - 1:
            limit -= 1
        if row >= rows or limit <= 0:
            return
        try:
            self.stdscr.addstr(row, col, clip(text, limit), attr)
        except curses.error:
            logger.debug("addstr failed at row=%d col=%d", row, col)

    def _cursor_visible(self, visibility: int) -> None:
        try:
            curses.curs_set(visibility)
        except curses.error:
            logger.debug("terminal cannot change cursor visibility")

    def read_event(self) -> Optional[InputEvent]:
        """Block for the next input; None when it maps to nothing."""
        try:
            raw = self.stdscr.get_wch()
        except curses.error:
            return None
        if raw == curses.KEY_MOUSE:
            try:
                _, col, row, _, bstate = curses.getmouse()
            except curses.error:
                return None
            return translate_mouse(bstate, row, col)
        return translate_key(raw)
