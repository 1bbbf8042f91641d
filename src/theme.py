"""Curses style attributes for the renderer's style names.

Decisions:
- Style names in render.py are plain strings ("normal", "header",
  "active", "done", "dim"); this module turns them into curses attributes.
- Color is used only when the terminal has it and it is enabled in the
  settings (NO_COLOR already turns the setting off).
- Without color, styles fall back to bold/dim/reverse attributes.
"""
from __future__ import annotations
import curses
from typing import Dict

PAIR_HEADER = 1
PAIR_ACTIVE = 2
PAIR_DONE = 3


def _mono_styles() -> Dict[str, int]:
    return {
        "normal": curses.A_NORMAL,
        "header": curses.A_REVERSE | curses.A_BOLD,
        "active": curses.A_BOLD,
        "done": curses.A_DIM,
        "dim": curses.A_DIM,
    }


def init_styles(use_color: bool) -> Dict[str, int]:
    """Set up color pairs (needs an initialized screen) and return style attrs."""
    if not use_color or not curses.has_colors():
        return _mono_styles()
    curses.start_color()
    try:
        curses.use_default_colors()
        background = -1
    except curses.error:
        background = curses.COLOR_BLACK
    curses.init_pair(PAIR_HEADER, curses.COLOR_BLUE, background)
    curses.init_pair(PAIR_ACTIVE, curses.COLOR_YELLOW, background)
    curses.init_pair(PAIR_DONE, curses.COLOR_GREEN, background)
    return {
        "normal": curses.A_BOLD,
        "header": curses.color_pair(PAIR_HEADER) | curses.A_BOLD,
        "active": curses.color_pair(PAIR_ACTIVE) | curses.A_BOLD,
        "done": curses.color_pair(PAIR_DONE),
        "dim": curses.A_DIM,
    }


def style(styles: Dict[str, int], name: str) -> int:
    return styles.get(name, curses.A_NORMAL)
