"""Fixed screen geometry shared by the renderer and the mouse router.

Rows: 0 header, 1-3 input box, then one 3-row box per task from row 4.
Columns inside a task box: border at 0, padding at 1, checkbox glyph at
2-5, text from 7 (48 cells wide), delete glyph at 55-57, border at 59.
"""
from dataclasses import dataclass
from typing import Optional

LAYOUT_WIDTH = 60
HEADER_ROW = 0
INPUT_TOP = 1
BOX_HEIGHT = 3
FIRST_TASK_ROW = INPUT_TOP + BOX_HEIGHT

CONTENT_COL = 2
INNER_WIDTH = LAYOUT_WIDTH - 2
CONTENT_WIDTH = LAYOUT_WIDTH - CONTENT_COL - 1

CHECKBOX_DONE = "[./] "
CHECKBOX_PENDING = "[  ] "
DELETE_GLYPH = "[x] "
TEXT_COL = CONTENT_COL + len(CHECKBOX_DONE)
TEXT_WIDTH = 48
DELETE_COL = TEXT_COL + TEXT_WIDTH

CHECKBOX_COLS = range(CONTENT_COL, CONTENT_COL + 4)
TEXT_COLS = range(CONTENT_COL + 4, DELETE_COL)
DELETE_COLS = range(DELETE_COL, DELETE_COL + 3)

# hit targets
INPUT = "input"
CHECKBOX = "checkbox"
TEXT = "text"
DELETE = "delete"
NOWHERE = "nowhere"


@dataclass(frozen=True)
class Hit:
    target: str
    index: Optional[int] = None


def visible_slots(rows: int) -> int:
    """Number of whole task boxes that fit in a terminal of ``rows`` rows."""
    return max(0, (rows - FIRST_TASK_ROW) // BOX_HEIGHT)


def slot_top(slot: int) -> int:
    return FIRST_TASK_ROW + slot * BOX_HEIGHT


def hit_test(row: int, col: int, count: int, scroll: int, rows: int) -> Hit:
    """Map a click position to what it lands on."""
    if row < FIRST_TASK_ROW:
        return Hit(INPUT)
    slot = (row - FIRST_TASK_ROW) // BOX_HEIGHT
    index = scroll + slot
    if slot >= visible_slots(rows) or index >= count:
        return Hit(NOWHERE)
    if col in CHECKBOX_COLS:
        return Hit(CHECKBOX, index)
    if col in DELETE_COLS:
        return Hit(DELETE, index)
    if col in TEXT_COLS:
        return Hit(TEXT, index)
    return Hit(NOWHERE)
