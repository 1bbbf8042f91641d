"""Todo list model: ordered tasks, the new-task input buffer, and mode.

Ids are positional: after a delete every later task is renumbered so that
``task.id`` always equals its index. At most one task carries the
``editing`` flag; begin_edit clears every other flag before setting one.
"""
import logging
from typing import Iterable, List, Optional
import regex
from errors import OutOfRange
from models import Mode, Task

logger = logging.getLogger(__name__)


class TodoList:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self.tasks: List[Task] = []
        self.input: str = ""
        self.cursor: int = 0
        self.mode: Mode = Mode.NORMAL
        self.scroll: int = 0
        if tasks:
            for task in tasks:
                self.tasks.append(Task(id=task.id, text=task.text, done=task.done))
        self.renumber_sequential()

    @property
    def count(self) -> int:
        return len(self.tasks)

    # -------------------- id management --------------------
    def renumber_sequential(self) -> bool:
        """Renumber tasks from 0 in list order. Returns True if any id changed."""
        changed = False
        for position, task in enumerate(self.tasks):
            if task.id != position:
                task.id = position
                changed = True
        return changed

    def _check_index(self, index: int) -> Task:
        if index < 0 or index >= len(self.tasks):
            raise OutOfRange(index, len(self.tasks))
        return self.tasks[index]

    # -------------------- task operations --------------------
    def add_task(self) -> Task:
        task = Task(id=len(self.tasks), text=self.input)
        self.tasks.append(task)
        self.input = ""
        self.cursor = 0
        logger.debug("added task %d", task.id)
        return task

    def delete_task(self, index: int) -> Task:
        task = self._check_index(index)
        del self.tasks[index]
        self.renumber_sequential()
        logger.debug("deleted task %d", index)
        return task

    def toggle_done(self, index: int) -> bool:
        task = self._check_index(index)
        task.done = not task.done
        return task.done

    # -------------------- in-place editing --------------------
    def begin_edit(self, index: int) -> None:
        target = self._check_index(index)
        for task in self.tasks:
            task.editing = False
        target.editing = True
        self.mode = Mode.UPDATING

    def end_edit(self) -> None:
        for task in self.tasks:
            task.editing = False
        self.mode = Mode.NORMAL

    def editing_index(self) -> Optional[int]:
        for position, task in enumerate(self.tasks):
            if task.editing:
                return position
        return None

    def _editing_task(self) -> Optional[Task]:
        index = self.editing_index()
        return None if index is None else self.tasks[index]

    def apply_edit_char(self, ch: str) -> bool:
        task = self._editing_task()
        if task is None:
            return False
        task.text += ch
        return True

    def apply_edit_backspace(self) -> bool:
        """Drop the last user-perceived character of the edited task's text.

        Works on extended grapheme clusters, so combining marks, variation
        selectors and ZWJ emoji sequences go together with their base.
        """
        task = self._editing_task()
        if task is None or not task.text:
            return False
        task.text = "".join(regex.findall(r"\X", task.text)[:-1])
        return True

    # -------------------- input buffer --------------------
    def insert_char(self, ch: str) -> None:
        self.input = self.input[:self.cursor] + ch + self.input[self.cursor:]
        self.move_cursor(1)

    def delete_char_before_cursor(self) -> None:
        if self.cursor == 0:
            return
        self.input = self.input[:self.cursor - 1] + self.input[self.cursor:]
        self.move_cursor(-1)

    def move_cursor(self, delta: int) -> None:
        self.cursor = max(0, min(self.cursor + delta, len(self.input)))

    # -------------------- scrolling --------------------
    def _clamp_scroll(self, visible: int) -> None:
        top = max(0, len(self.tasks) - max(visible, 0))
        self.scroll = max(0, min(self.scroll, top))

    def scroll_by(self, delta: int, visible: int) -> None:
        self.scroll += delta
        self._clamp_scroll(visible)

    def ensure_visible(self, index: int, visible: int) -> None:
        if visible <= 0:
            self.scroll = 0
            return
        if index < self.scroll:
            self.scroll = index
        elif index >= self.scroll + visible:
            self.scroll = index - visible + 1
        self._clamp_scroll(visible)

    # -------------------- queries --------------------
    def snapshot(self) -> List[Task]:
        """Detached copies of the tasks, without edit flags."""
        return [Task(id=t.id, text=t.text, done=t.done) for t in self.tasks]
