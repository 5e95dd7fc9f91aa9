"""Task management for the to-do list.

Provides a bounded, priority-ordered task store. The presentation layer
talks to it only through add/remove/complete and read-only snapshots.

Example:
    >>> store = TaskStore(capacity=100)
    >>> view = store.add_task("Pay bills", priority=1)
    >>> store.mark_task_completed(0).completed
    True
"""

from todo_list.tasks.errors import CapacityExceededError, InvalidIndexError, TaskManagerError
from todo_list.tasks.models import Task, TaskView
from todo_list.tasks.ordering import OrderingPolicy
from todo_list.tasks.store import TaskStore, create_store

__all__ = [
    "Task",
    "TaskView",
    "TaskStore",
    "OrderingPolicy",
    "create_store",
    "TaskManagerError",
    "CapacityExceededError",
    "InvalidIndexError",
]
