"""Bounded, ordered in-memory task store.

The store owns its Task records exclusively. Callers get TaskView
snapshots back, never the records themselves, so the only way to change
a task is through the store's own operations.

All reads and mutations go through a single lock: the store is mutated
by the UI's event handlers and read by a background refresher thread.
"""

import threading
from typing import TYPE_CHECKING

from todo_list.constants import DEFAULT_CAPACITY
from todo_list.logging import Loggers
from todo_list.tasks.errors import CapacityExceededError, InvalidIndexError
from todo_list.tasks.models import Task, TaskView
from todo_list.tasks.ordering import OrderingPolicy, place, stable_sort

if TYPE_CHECKING:
    from todo_list.config import TodoSettings

logger = Loggers.store()


class TaskStore:
    """Capacity-bounded task list with a configurable ordering policy.

    Example:
        >>> store = TaskStore()
        >>> _ = store.add_task("Wash dishes", 3)
        >>> _ = store.add_task("Pay bills", 1)
        >>> [str(t) for t in store.get_tasks()]
        ['Pay bills (Priority: 1)', 'Wash dishes (Priority: 3)']
        >>> str(store.mark_task_completed(0))
        'Pay bills (Priority: 1) (Completed)'
        >>> store.count
        2
    """

    def __init__(
        self,
        capacity: int = DEFAULT_CAPACITY,
        policy: OrderingPolicy = OrderingPolicy.INSERTION_SORT,
    ) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._policy = OrderingPolicy(policy)
        self._items: list[Task] = []
        self._lock = threading.RLock()

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def policy(self) -> OrderingPolicy:
        return self._policy

    @property
    def count(self) -> int:
        """Number of live entries."""
        with self._lock:
            return len(self._items)

    def __len__(self) -> int:
        return self.count

    def is_full(self) -> bool:
        with self._lock:
            return len(self._items) >= self._capacity

    def is_empty(self) -> bool:
        with self._lock:
            return not self._items

    def add_task(self, name: str, priority: int | None = None) -> TaskView:
        """Create a task and place it according to the ordering policy.

        Args:
            name: Task label.
            priority: Optional priority; lower values sort first.

        Returns:
            Snapshot of the new task.

        Raises:
            CapacityExceededError: If the store already holds ``capacity`` tasks.
        """
        with self._lock:
            if len(self._items) >= self._capacity:
                logger.warning("task_add_rejected", reason="capacity", capacity=self._capacity)
                raise CapacityExceededError(self._capacity)

            task = Task(name, priority)
            index = place(self._items, task, self._policy)
            logger.debug(
                "task_added",
                index=index,
                priority=priority,
                count=len(self._items),
            )
            return task.to_view()

    def remove_task(self, index: int) -> TaskView:
        """Remove the task at ``index``, closing the gap.

        Returns:
            Snapshot of the removed task.

        Raises:
            InvalidIndexError: If ``index`` is outside ``[0, count)``.
        """
        with self._lock:
            self._check_index(index)
            task = self._items.pop(index)
            if self._policy.sorts_after_mutation:
                stable_sort(self._items)
            logger.debug("task_removed", index=index, count=len(self._items))
            return task.to_view()

    def mark_task_completed(self, index: int) -> TaskView:
        """Mark the task at ``index`` completed. Idempotent.

        Raises:
            InvalidIndexError: If ``index`` is outside ``[0, count)``.
        """
        with self._lock:
            self._check_index(index)
            task = self._items[index]
            task.mark_completed()
            if self._policy.sorts_after_mutation:
                stable_sort(self._items)
            logger.debug("task_completed", index=index)
            return task.to_view()

    def get_tasks(self) -> tuple[TaskView, ...]:
        """Snapshot of the live range, in order."""
        with self._lock:
            return tuple(task.to_view() for task in self._items)

    def _check_index(self, index: int) -> None:
        # bool is an int subclass but never a meaningful index
        if isinstance(index, bool) or not 0 <= index < len(self._items):
            logger.warning("invalid_task_index", index=index, count=len(self._items))
            raise InvalidIndexError(index, len(self._items))


def create_store(settings: "TodoSettings | None" = None) -> TaskStore:
    """Create a TaskStore configured from settings.

    Args:
        settings: Settings to read capacity and ordering policy from.
            Defaults to the current settings.
    """
    if settings is None:
        from todo_list.config import get_settings

        settings = get_settings()
    return TaskStore(capacity=settings.capacity, policy=settings.ordering_policy)
