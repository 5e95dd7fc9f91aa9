"""Task records held by the TaskStore."""

from dataclasses import dataclass

from todo_list.constants import COMPLETED_SUFFIX, PRIORITY_TEMPLATE


def render_task(name: str, priority: int | None, completed: bool) -> str:
    """Render a task the way the list view displays it.

    Examples:
        >>> render_task("Call mom", 2, True)
        'Call mom (Priority: 2) (Completed)'
        >>> render_task("Buy milk", None, False)
        'Buy milk'
    """
    text = name
    if priority is not None:
        text += PRIORITY_TEMPLATE.format(priority=priority)
    if completed:
        text += COMPLETED_SUFFIX
    return text


@dataclass(frozen=True)
class TaskView:
    """Read-only snapshot of a task, handed out to the presentation layer."""

    name: str
    priority: int | None = None
    completed: bool = False

    def render(self) -> str:
        return render_task(self.name, self.priority, self.completed)

    def __str__(self) -> str:
        return self.render()


class Task:
    """A named, completable unit of work with an optional priority.

    Name and priority are fixed at construction; only the completion
    flag changes afterwards, and only from False to True.
    """

    __slots__ = ("_name", "_priority", "_completed")

    def __init__(self, name: str, priority: int | None = None) -> None:
        self._name = name
        self._priority = priority
        self._completed = False

    @property
    def name(self) -> str:
        return self._name

    @property
    def priority(self) -> int | None:
        return self._priority

    @property
    def completed(self) -> bool:
        return self._completed

    def mark_completed(self) -> None:
        """Mark the task as completed. Calling it again has no effect."""
        self._completed = True

    def to_view(self) -> TaskView:
        return TaskView(name=self._name, priority=self._priority, completed=self._completed)

    def render(self) -> str:
        return render_task(self._name, self._priority, self._completed)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return (
            f"Task(name={self._name!r}, priority={self._priority!r}, "
            f"completed={self._completed!r})"
        )
