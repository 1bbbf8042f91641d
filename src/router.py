"""Input routing: one event in, one model operation out.

Decisions:
- Enter in EDITING adds the task and stays in EDITING so several tasks
  can be typed in a row; Escape leaves.
- Only the left-button press edge acts; the release of the same click is
  ignored so a click never fires twice.
- The store is written after every event that changed the task list.
"""
import logging
from typing import Union
import events
import layout
from events import KeyEvent, MouseEvent, ResizeEvent
from models import Mode
from storage import TaskStore
from todolist import TodoList

logger = logging.getLogger(__name__)

Event = Union[KeyEvent, MouseEvent, ResizeEvent]


class Router:
    def __init__(self, todos: TodoList, store: TaskStore):
        self.todos: TodoList = todos
        self.store: TaskStore = store

    def handle(self, event: Event, rows: int) -> bool:
        """Route one event. Returns False when the run loop should stop."""
        changed = False
        if isinstance(event, KeyEvent):
            if self.todos.mode == Mode.NORMAL and event.code == events.ESCAPE:
                return False
            changed = self._handle_key(event, rows)
        elif isinstance(event, MouseEvent):
            changed = self._handle_mouse(event, rows)
        if changed:
            self.store.save(self.todos.snapshot())
        return True

    # -------------------- keyboard --------------------
    def _handle_key(self, event: KeyEvent, rows: int) -> bool:
        mode = self.todos.mode
        if mode == Mode.EDITING:
            return self._key_editing(event, rows)
        if mode == Mode.UPDATING:
            return self._key_updating(event)
        return False

    def _key_editing(self, event: KeyEvent, rows: int) -> bool:
        todos = self.todos
        code = event.code
        if code == events.CHAR:
            todos.insert_char(event.char)
        elif code == events.BACKSPACE:
            todos.delete_char_before_cursor()
        elif code == events.LEFT:
            todos.move_cursor(-1)
        elif code == events.RIGHT:
            todos.move_cursor(1)
        elif code == events.ENTER:
            task = todos.add_task()
            todos.ensure_visible(task.id, layout.visible_slots(rows))
            return True
        elif code == events.ESCAPE:
            todos.mode = Mode.NORMAL
            logger.debug("mode -> %s", todos.mode.value)
        return False

    def _key_updating(self, event: KeyEvent) -> bool:
        todos = self.todos
        code = event.code
        if code == events.CHAR:
            return todos.apply_edit_char(event.char)
        if code == events.BACKSPACE:
            return todos.apply_edit_backspace()
        if code in (events.ENTER, events.ESCAPE):
            todos.end_edit()
            logger.debug("mode -> %s", todos.mode.value)
        return False

    # -------------------- mouse --------------------
    def _handle_mouse(self, event: MouseEvent, rows: int) -> bool:
        todos = self.todos
        visible = layout.visible_slots(rows)
        if event.kind == events.WHEEL_UP:
            todos.scroll_by(-1, visible)
            return False
        if event.kind == events.WHEEL_DOWN:
            todos.scroll_by(1, visible)
            return False
        if event.kind != events.PRESS:
            return False

        hit = layout.hit_test(event.row, event.col, todos.count, todos.scroll, rows)
        logger.debug("click row=%d col=%d -> %s %s", event.row, event.col, hit.target, hit.index)
        if hit.target == layout.TEXT:
            todos.begin_edit(hit.index)
            return False
        todos.end_edit()
        if hit.target == layout.INPUT:
            todos.mode = Mode.EDITING
            return False
        if hit.target == layout.CHECKBOX:
            todos.toggle_done(hit.index)
            return True
        if hit.target == layout.DELETE:
            todos.delete_task(hit.index)
            todos.scroll_by(0, visible)
            return True
        return False
