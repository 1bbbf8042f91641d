"""Error types for the todo list.

Mutations on a missing index raise OutOfRange. Store problems are split
into StoreUnavailable (cannot open or write the store) and CorruptData
(stored value does not decode to tasks); both are fatal at startup.
"""


class TodoError(Exception):
    """Base class for every error raised by the todo list."""


class OutOfRange(TodoError, IndexError):
    def __init__(self, index: int, count: int):
        super().__init__(f"Task index {index} out of range (count={count}).")
        self.index = index
        self.count = count


class StoreError(TodoError):
    """Raised when the persistent store cannot be used."""


class StoreUnavailable(StoreError):
    pass


class CorruptData(StoreError):
    pass
