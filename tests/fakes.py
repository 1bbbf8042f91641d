# tests/fakes.py

from __future__ import annotations

from typing import Dict, List, Optional

from errors import StoreUnavailable
from render import Frame


class MemoryKeyValueStore:
    """In-memory stand-in for the file store; records every write."""

    def __init__(self, values: Optional[Dict[str, str]] = None) -> None:
        self.values: Dict[str, str] = dict(values or {})
        self.writes: List[tuple] = []

    def get(self, key: str) -> Optional[str]:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value
        self.writes.append((key, value))


class FakeScreen:
    """Feeds scripted events to the run loop and keeps every painted frame."""

    def __init__(self, events: list, rows: int = 40, cols: int = 60) -> None:
        self.events = list(events)
        self.rows = rows
        self.cols = cols
        self.frames: List[Frame] = []
        self.closed = False

    def size(self) -> tuple:
        return self.rows, self.cols

    def paint(self, frame: Frame) -> None:
        self.frames.append(frame)

    def read_event(self):
        if not self.events:
            raise AssertionError("run loop asked for more events than scripted")
        return self.events.pop(0)

    def close(self) -> None:
        self.closed = True


def add(todos, text: str) -> None:
    """Type ``text`` into the input buffer and submit it."""
    for ch in text:
        todos.insert_char(ch)
    todos.add_task()


class FailingKeyValueStore(MemoryKeyValueStore):
    """Accepts the first ``ok_writes`` writes, then fails every later one."""

    def __init__(self, values: Optional[Dict[str, str]] = None, ok_writes: int = 0) -> None:
        super().__init__(values)
        self.ok_writes = ok_writes

    def set(self, key: str, value: str) -> None:
        if len(self.writes) >= self.ok_writes:
            raise StoreUnavailable("Cannot write store: disk full")
        super().set(key, value)
