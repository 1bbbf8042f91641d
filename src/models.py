"""Data models for the terminal todo list.

Exposes the Task dataclass and the interaction Mode. The per-task edit
flag lives on the Task itself and is never persisted; only id, text and
done are written to the store.
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping


class Mode(str, Enum):
    """Which class of input the router currently interprets."""
    NORMAL = "normal"
    EDITING = "editing"
    UPDATING = "updating"


@dataclass
class Task:
    """A single todo entry.

    Fields:
        id: Position of the task in the list (renumbered after deletes).
        text: Free text; may be empty.
        done: Completion flag.
        editing: True while this task receives in-place character edits.
    """
    id: int
    text: str = ""
    done: bool = False
    editing: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "text": self.text, "done": self.done}

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Task":
        """Build a Task from its stored form.

        Raises ValueError when a field is missing or has the wrong type.
        bool is rejected for id since it is an int subclass.
        """
        tid = raw.get("id")
        text = raw.get("text")
        done = raw.get("done")
        if not isinstance(tid, int) or isinstance(tid, bool):
            raise ValueError(f"bad task id: {tid!r}")
        if not isinstance(text, str):
            raise ValueError(f"bad task text: {text!r}")
        if not isinstance(done, bool):
            raise ValueError(f"bad task done flag: {done!r}")
        return cls(id=tid, text=text, done=done)

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(id={self.id}, text={self.text!r}, done={self.done})"
