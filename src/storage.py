"""Persistence for the todo list.

The store is a small key-value file: one JSON object mapping value names
to strings, written with temp-file-then-rename so a crash mid-write never
leaves a half written file. The task list lives under a single value
("todos" by default) as a JSON-encoded array of {id, text, done}.
"""
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Dict, List, Optional, Sequence
from errors import CorruptData, StoreUnavailable
from models import Task

logger = logging.getLogger(__name__)

DEFAULT_KEY = "todos"
EMPTY_TASKS = "[]"


class FileKeyValueStore:
    """Named string values kept in one JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self._values: Dict[str, str] = {}

    def open(self) -> "FileKeyValueStore":
        """Create the directory and file if needed, then read current values."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            if not self.path.exists():
                self._write({})
            raw = self.path.read_bytes()
        except OSError as exc:
            raise StoreUnavailable(f"Cannot open store {self.path}: {exc}") from exc
        try:
            data = json.loads(raw.decode("utf-8")) if raw.strip() else {}
        except (ValueError, RecursionError) as exc:
            raise CorruptData(f"Store {self.path} is not valid UTF-8 JSON: {exc}") from exc
        if not isinstance(data, dict) or not all(isinstance(v, str) for v in data.values()):
            raise CorruptData(f"Store {self.path} must hold an object of string values.")
        self._values = data
        logger.info("Opened store %s (%d values)", self.path, len(data))
        return self

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        values = dict(self._values)
        values[key] = value
        try:
            self._write(values)
        except OSError as exc:
            raise StoreUnavailable(f"Cannot write store {self.path}: {exc}") from exc
        self._values = values

    def _write(self, values: Dict[str, str]) -> None:
        fd, tmp_name = tempfile.mkstemp(prefix=".store-", suffix=".tmp", dir=str(self.path.parent))
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(values, f, indent=4, ensure_ascii=False)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise


class TaskStore:
    """Loads and saves the task list through a key-value store."""

    def __init__(self, kv, key: str = DEFAULT_KEY):
        self.kv = kv
        self.key = key

    def load(self) -> List[Task]:
        """Return the stored tasks, seeding an empty list if none exist.

        Ids are reset to list positions; a mismatch is logged as a warning.
        """
        raw = self.kv.get(self.key)
        if raw is None:
            logger.info("No stored value %r; seeding empty list", self.key)
            self.kv.set(self.key, EMPTY_TASKS)
            return []
        tasks = decode_tasks(raw)
        for position, task in enumerate(tasks):
            if task.id != position:
                logger.warning("Stored ids are not sequential; renumbering %d tasks", len(tasks))
                for new_id, t in enumerate(tasks):
                    t.id = new_id
                break
        logger.info("Loaded %d tasks", len(tasks))
        return tasks

    def save(self, tasks: Sequence[Task]) -> None:
        self.kv.set(self.key, encode_tasks(tasks))
        logger.debug("Saved %d tasks", len(tasks))


def encode_tasks(tasks: Sequence[Task]) -> str:
    return json.dumps([t.to_dict() for t in tasks], separators=(",", ":"), ensure_ascii=False)


def decode_tasks(raw: str) -> List[Task]:
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise CorruptData(f"Stored tasks are not valid JSON: {exc}") from exc
    if not isinstance(data, list):
        raise CorruptData("Stored tasks must be a JSON array.")
    tasks: List[Task] = []
    for entry in data:
        if not isinstance(entry, dict):
            raise CorruptData(f"Stored task is not an object: {entry!r}")
        try:
            tasks.append(Task.from_dict(entry))
        except ValueError as exc:
            raise CorruptData(str(exc)) from exc
    return tasks
