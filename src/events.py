"""Backend-neutral input events produced by the terminal and consumed by the router."""
from dataclasses import dataclass

# key codes
CHAR = "char"
ENTER = "enter"
ESCAPE = "escape"
BACKSPACE = "backspace"
LEFT = "left"
RIGHT = "right"
UP = "up"
DOWN = "down"

# mouse kinds
PRESS = "press"
RELEASE = "release"
WHEEL_UP = "wheel-up"
WHEEL_DOWN = "wheel-down"


@dataclass(frozen=True)
class KeyEvent:
    code: str
    char: str = ""


@dataclass(frozen=True)
class MouseEvent:
    kind: str
    row: int
    col: int


@dataclass(frozen=True)
class ResizeEvent:
    pass


def char(ch: str) -> KeyEvent:
    return KeyEvent(CHAR, ch)
