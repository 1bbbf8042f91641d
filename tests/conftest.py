# tests/conftest.py

from __future__ import annotations

import pytest

from router import Router
from storage import TaskStore
from todolist import TodoList

from .fakes import MemoryKeyValueStore


@pytest.fixture()
def kv() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture()
def store(kv: MemoryKeyValueStore) -> TaskStore:
    return TaskStore(kv)


@pytest.fixture()
def todos() -> TodoList:
    return TodoList()


@pytest.fixture()
def router(todos: TodoList, store: TaskStore) -> Router:
    return Router(todos, store)
