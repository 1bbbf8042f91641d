"""Rendering: todo list state -> draw instructions.

render() is pure; it never touches curses. The terminal adapter paints the
returned Frame. Widths are measured in terminal cells so wide (East Asian)
characters take two cells and combining marks take none.
"""
import unicodedata
from dataclasses import dataclass, field
from typing import List, Optional, Tuple
import layout
from models import Mode, Task
from todolist import TodoList

TITLE = " Todolist "
INPUT_TITLE = " Add Todo "
ELLIPSIS = "…"

MODE_HINTS = {
    Mode.NORMAL: "click the box to add, esc quits",
    Mode.EDITING: "enter adds, esc stops typing",
    Mode.UPDATING: "enter or esc finishes the edit",
}


@dataclass(frozen=True)
class DrawOp:
    row: int
    col: int
    text: str
    style: str = "normal"


@dataclass
class Frame:
    ops: List[DrawOp] = field(default_factory=list)
    cursor: Optional[Tuple[int, int]] = None

    def text_at(self, row: int) -> str:
        """Concatenated text of all ops on ``row`` (for inspection)."""
        return "".join(op.text for op in sorted(self.ops, key=lambda o: o.col) if op.row == row)


# -------------------- cell widths --------------------
def char_width(ch: str) -> int:
    if not ch or ch < " " or unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in ("F", "W"):
        return 2
    return 1


def text_width(text: str) -> int:
    return sum(map(char_width, text))


def clip(text: str, width: int) -> str:
    """Longest prefix of ``text`` that fits in ``width`` cells."""
    used = 0
    for i, ch in enumerate(text):
        used += char_width(ch)
        if used > width:
            return text[:i]
    return text


def fit(text: str, width: int) -> str:
    """Pad or truncate (with an ellipsis) to exactly ``width`` cells."""
    if text_width(text) > width:
        text = clip(text, width - 1) + ELLIPSIS
    return text + " " * (width - text_width(text))


def tail(text: str, width: int) -> str:
    """Longest suffix of ``text`` that fits in ``width`` cells."""
    used = 0
    for i in range(len(text) - 1, -1, -1):
        used += char_width(text[i])
        if used > width:
            return text[i + 1:]
    return text


def _printable(text: str) -> str:
    return "".join(" " if unicodedata.category(ch) == "Cc" else ch for ch in text)


# -------------------- boxes --------------------
def _box(top: int, body: str, style: str, title: str = "") -> List[DrawOp]:
    rule = title.center(layout.INNER_WIDTH, "─") if title else "─" * layout.INNER_WIDTH
    return [
        DrawOp(top, 0, "┌" + rule + "┐", style),
        DrawOp(top + 1, 0, "│ " + body + "│", style),
        DrawOp(top + 2, 0, "└" + "─" * layout.INNER_WIDTH + "┘", style),
    ]


def _header(todos: TodoList) -> DrawOp:
    done = sum(1 for t in todos.tasks if t.done)
    left = TITLE + MODE_HINTS[todos.mode]
    right = f"{done}/{todos.count} done "
    gap = max(1, layout.LAYOUT_WIDTH - text_width(left) - text_width(right))
    return DrawOp(layout.HEADER_ROW, 0, left + " " * gap + right, "header")


def _input_box(todos: TodoList) -> Tuple[List[DrawOp], Optional[Tuple[int, int]]]:
    width = layout.CONTENT_WIDTH
    before = tail(_printable(todos.input[:todos.cursor]), width - 1)
    start = todos.cursor - len(before)
    shown = fit(clip(_printable(todos.input[start:]), width), width)
    style = "active" if todos.mode == Mode.EDITING else "normal"
    cursor = None
    if todos.mode == Mode.EDITING:
        cursor = (layout.INPUT_TOP + 1, layout.CONTENT_COL + text_width(before))
    return _box(layout.INPUT_TOP, shown, style, INPUT_TITLE), cursor


def _task_box(task: Task, slot: int) -> Tuple[List[DrawOp], Optional[Tuple[int, int]]]:
    top = layout.slot_top(slot)
    text = _printable(task.text)
    glyph = layout.CHECKBOX_DONE if task.done else layout.CHECKBOX_PENDING
    cursor = None
    if task.editing:
        shown = tail(text, layout.TEXT_WIDTH - 1)
        cursor = (top + 1, layout.TEXT_COL + text_width(shown))
        body = glyph + fit(shown, layout.TEXT_WIDTH) + layout.DELETE_GLYPH
        style = "active"
    else:
        body = glyph + fit(text, layout.TEXT_WIDTH) + layout.DELETE_GLYPH
        style = "done" if task.done else "normal"
    return _box(top, body, style), cursor


def render(todos: TodoList, rows: int, cols: int = layout.LAYOUT_WIDTH) -> Frame:
    """Lay out the whole screen for a terminal of ``rows`` x ``cols``.

    Only whole task boxes are drawn, starting at the scroll offset. Ops
    beyond ``rows`` are dropped; horizontal clipping is left to the painter.
    """
    frame = Frame()
    frame.ops.append(_header(todos))

    ops, cursor = _input_box(todos)
    frame.ops.extend(ops)
    frame.cursor = cursor

    visible = layout.visible_slots(rows)
    shown = todos.tasks[todos.scroll:todos.scroll + visible]
    for slot, task in enumerate(shown):
        ops, cursor = _task_box(task, slot)
        frame.ops.extend(ops)
        if cursor is not None and todos.mode == Mode.UPDATING:
            frame.cursor = cursor

    hidden = todos.count - todos.scroll - len(shown)
    if hidden > 0:
        frame.ops.append(DrawOp(layout.slot_top(len(shown)), layout.CONTENT_COL, f"↓ {hidden} more", "dim"))

    frame.ops = [op for op in frame.ops if op.row < rows and op.col < cols]
    if frame.cursor is not None and (frame.cursor[0] >= rows or frame.cursor[1] >= cols):
        frame.cursor = None
    return frame
