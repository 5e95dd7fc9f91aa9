"""Errors raised by the TaskStore.

Both are recoverable: a failed call leaves the store unchanged, and the
presentation layer is expected to show ``str(error)`` to the user.
"""


class TaskManagerError(Exception):
    """Base class for task store errors."""

    pass


class CapacityExceededError(TaskManagerError):
    """Raised when adding a task to a full store."""

    def __init__(self, capacity: int) -> None:
        super().__init__("Task limit reached.")
        self.capacity = capacity


class InvalidIndexError(TaskManagerError, IndexError):
    """Raised when an index falls outside the live range ``[0, count)``."""

    def __init__(self, index: int, count: int) -> None:
        super().__init__("Invalid task index.")
        self.index = index
        self.count = count
