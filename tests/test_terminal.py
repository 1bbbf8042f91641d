# tests/test_terminal.py

from __future__ import annotations

import curses

import pytest

import events
from events import KeyEvent, MouseEvent, ResizeEvent
from render import DrawOp, Frame
from terminal import CursesScreen, translate_key, translate_mouse


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("\x1b", KeyEvent(events.ESCAPE)),
        ("\n", KeyEvent(events.ENTER)),
        ("\r", KeyEvent(events.ENTER)),
        ("\x7f", KeyEvent(events.BACKSPACE)),
        (curses.KEY_BACKSPACE, KeyEvent(events.BACKSPACE)),
        (curses.KEY_ENTER, KeyEvent(events.ENTER)),
        (curses.KEY_LEFT, KeyEvent(events.LEFT)),
        (curses.KEY_RIGHT, KeyEvent(events.RIGHT)),
        ("a", KeyEvent(events.CHAR, "a")),
        ("é", KeyEvent(events.CHAR, "é")),
        ("日", KeyEvent(events.CHAR, "日")),
        (curses.KEY_RESIZE, ResizeEvent()),
        ("\x01", None),
        (curses.KEY_F1, None),
    ],
)
def test_translate_key(raw, expected) -> None:
    assert translate_key(raw) == expected


def test_translate_mouse_press_and_release() -> None:
    assert translate_mouse(curses.BUTTON1_PRESSED, 5, 3) == MouseEvent(events.PRESS, 5, 3)
    assert translate_mouse(curses.BUTTON1_RELEASED, 5, 3) == MouseEvent(events.RELEASE, 5, 3)
    assert translate_mouse(curses.BUTTON4_PRESSED, 0, 0) == MouseEvent(events.WHEEL_UP, 0, 0)
    assert translate_mouse(curses.BUTTON3_PRESSED, 0, 0) is None


class FakeWindow:
    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self.writes: list = []
        self.cursor = None

    def getmaxyx(self) -> tuple:
        return self.rows, self.cols

    def erase(self) -> None:
        self.writes.clear()

    def addstr(self, row: int, col: int, text: str, attr: int) -> None:
        self.writes.append((row, col, text))

    def move(self, row: int, col: int) -> None:
        self.cursor = (row, col)

    def refresh(self) -> None:
        pass


def test_paint_clips_to_the_window() -> None:
    window = FakeWindow(rows=3, cols=10)
    screen = CursesScreen(window, {"normal": curses.A_NORMAL})
    frame = Frame(
        ops=[
            DrawOp(0, 0, "x" * 20),
            DrawOp(2, 4, "y" * 20),
            DrawOp(5, 0, "off screen"),
        ],
        cursor=(1, 2),
    )
    screen.paint(frame)
    assert window.writes == [(0, 0, "x" * 10), (2, 4, "y" * 5)]
    assert window.cursor == (1, 2)
