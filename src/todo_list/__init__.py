"""todo-list - the task list manager behind a desktop to-do application.

This package provides:

- A bounded, priority-ordered task store with typed errors
- Configurable ordering policies (insertion sort, append then sort, unordered)
- Toolkit-independent presentation logic (input validation, messages, rendering)
- A cancellable periodic list refresher
- Layered settings (env vars, JSON config files, .env) and structured logging

Window and widget code is left to the front end; it talks to this package
through TodoListApp or directly through TaskStore.
"""

from todo_list.config import (
    SettingsContext,
    SettingsValidationError,
    TodoSettings,
    get_context_settings,
    get_settings,
    reload_settings,
    set_context_settings,
    set_settings,
    validate_settings,
)
from todo_list.tasks import (
    CapacityExceededError,
    InvalidIndexError,
    OrderingPolicy,
    Task,
    TaskManagerError,
    TaskStore,
    TaskView,
    create_store,
)
from todo_list.ui import TaskListRefresher, TodoListApp, TodoListController

__all__ = [
    # Tasks
    "Task",
    "TaskView",
    "TaskStore",
    "OrderingPolicy",
    "create_store",
    # Errors
    "TaskManagerError",
    "CapacityExceededError",
    "InvalidIndexError",
    # Presentation
    "TodoListApp",
    "TodoListController",
    "TaskListRefresher",
    # Settings
    "TodoSettings",
    "SettingsContext",
    "SettingsValidationError",
    "get_settings",
    "set_settings",
    "set_context_settings",
    "get_context_settings",
    "validate_settings",
    "reload_settings",
]

__version__ = "0.1.0"
