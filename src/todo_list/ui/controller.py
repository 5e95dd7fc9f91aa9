"""Toolkit-independent presentation logic for the to-do list window.

The controller is what a window's button handlers call. It validates raw
user input, forwards it to the TaskStore, turns store errors into
messages, and pushes the re-rendered list to the view.

Widgets are not its concern: the view hands in three callbacks.

- on_info(message): show an informational alert (bad input)
- on_error(message): show an error alert (store refused the operation)
- on_refresh(lines): replace the list view's items

Example:
    controller = TodoListController(
        store,
        on_info=lambda msg: print("info:", msg),
        on_error=lambda msg: print("error:", msg),
        on_refresh=list_view.set_items,
    )
    controller.add_task("Pay bills", "1")
    controller.complete_task(list_view.selected_index)
"""

from typing import TYPE_CHECKING, Callable

from todo_list.logging import Loggers
from todo_list.tasks.errors import TaskManagerError

if TYPE_CHECKING:
    from todo_list.config import TodoSettings
    from todo_list.tasks.store import TaskStore

logger = Loggers.ui()

MessageCallback = Callable[[str], None]
RefreshCallback = Callable[[list[str]], None]

# No selection in the list view
NO_SELECTION = -1


def _ignore(_: object) -> None:
    pass


class TodoListController:
    """Mediates between a list view and a TaskStore.

    Every public operation returns True on success and False on failure;
    failures are reported through the callbacks, never raised.
    """

    def __init__(
        self,
        store: "TaskStore",
        settings: "TodoSettings | None" = None,
        on_info: MessageCallback | None = None,
        on_error: MessageCallback | None = None,
        on_refresh: RefreshCallback | None = None,
    ) -> None:
        if settings is None:
            from todo_list.config import get_settings

            settings = get_settings()
        self._store = store
        self._settings = settings
        self._on_info = on_info or _ignore
        self._on_error = on_error or _ignore
        self._on_refresh = on_refresh or _ignore

    @property
    def store(self) -> "TaskStore":
        return self._store

    def add_task(self, name_text: str, priority_text: str = "") -> bool:
        """Validate input from the entry fields and add a task.

        Args:
            name_text: Raw text of the task name field.
            priority_text: Raw text of the priority field.
        """
        name = name_text.strip()
        if not name:
            return self._info("Please enter a task name.")

        priority_text = priority_text.strip()
        priority: int | None = None
        if not priority_text:
            if self._settings.require_priority:
                return self._info("Please enter a priority.")
        else:
            try:
                priority = int(priority_text)
            except ValueError:
                return self._info("Priority must be a number.")
            if priority not in self._settings.priority_range:
                return self._info(
                    f"Priority must be between {self._settings.priority_min} "
                    f"and {self._settings.priority_max}."
                )

        try:
            self._store.add_task(name, priority)
        except TaskManagerError as e:
            return self._error(e)

        self.refresh()
        return True

    def remove_task(self, selected_index: int | None) -> bool:
        """Remove the task selected in the list view."""
        if selected_index is None or selected_index == NO_SELECTION:
            return self._info("Please select a task to remove.")

        try:
            self._store.remove_task(selected_index)
        except TaskManagerError as e:
            return self._error(e)

        self.refresh()
        return True

    def complete_task(self, selected_index: int | None) -> bool:
        """Mark the task selected in the list view as completed."""
        if selected_index is None or selected_index == NO_SELECTION:
            return self._info("Please select a task to mark as completed.")

        try:
            self._store.mark_task_completed(selected_index)
        except TaskManagerError as e:
            return self._error(e)

        self.refresh()
        return True

    def render(self) -> list[str]:
        """Render the live range as list view lines."""
        return [task.render() for task in self._store.get_tasks()]

    def refresh(self) -> list[str]:
        """Re-render the list and push it to the view."""
        lines = self.render()
        self._on_refresh(lines)
        return lines

    def _info(self, message: str) -> bool:
        logger.info("input_rejected", message=message)
        self._on_info(message)
        return False

    def _error(self, error: TaskManagerError) -> bool:
        logger.warning("operation_failed", error=str(error), error_type=type(error).__name__)
        self._on_error(str(error))
        return False
