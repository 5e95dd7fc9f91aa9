"""Ordering policies for the live range of a TaskStore.

Three policies are supported:

- INSERTION_SORT: each new task is slotted in behind every task whose
  priority is less than or equal to its own, so the list stays in
  ascending priority order and equal priorities keep insertion order.
- APPEND_THEN_SORT: the task is appended and the whole list is stable
  sorted after every mutation. Observably identical to INSERTION_SORT.
- UNORDERED: the task is appended; priority is informational only.

Tasks without a priority sort after every prioritized task.
"""

from enum import Enum

from todo_list.tasks.models import Task


class OrderingPolicy(str, Enum):
    """How the store keeps its tasks ordered."""

    INSERTION_SORT = "insertion_sort"
    APPEND_THEN_SORT = "append_then_sort"
    UNORDERED = "unordered"

    @property
    def sorts_after_mutation(self) -> bool:
        """Whether the live range is re-sorted after every mutation."""
        return self is OrderingPolicy.APPEND_THEN_SORT


def priority_key(task: Task) -> tuple[bool, int]:
    """Sort key: ascending priority, unprioritized tasks last."""
    if task.priority is None:
        return (True, 0)
    return (False, task.priority)


def insertion_index(tasks: list[Task], task: Task) -> int:
    """Find where ``task`` goes in an already sorted list.

    Scans backward from the end while the preceding entry sorts strictly
    after the new task; ties stop the scan, which keeps the placement stable.
    """
    key = priority_key(task)
    i = len(tasks)
    while i > 0 and priority_key(tasks[i - 1]) > key:
        i -= 1
    return i


def stable_sort(tasks: list[Task]) -> None:
    """Sort ``tasks`` in place by priority. ``list.sort`` is stable."""
    tasks.sort(key=priority_key)


def place(tasks: list[Task], task: Task, policy: OrderingPolicy) -> int:
    """Insert ``task`` into ``tasks`` according to ``policy``.

    Returns:
        The index the task ended up at.
    """
    if policy is OrderingPolicy.INSERTION_SORT:
        index = insertion_index(tasks, task)
        tasks.insert(index, task)
        return index

    tasks.append(task)
    if policy.sorts_after_mutation:
        stable_sort(tasks)
        return next(i for i, t in enumerate(tasks) if t is task)
    return len(tasks) - 1
