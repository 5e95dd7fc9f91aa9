"""Presentation layer for the to-do list.

Toolkit-independent: the controller validates input and routes messages
through callbacks, the refresher re-renders the list periodically, and
the app wires both to a store built from settings.
"""

from todo_list.ui.app import TodoListApp
from todo_list.ui.controller import TodoListController
from todo_list.ui.refresher import TaskListRefresher

__all__ = [
    "TodoListApp",
    "TodoListController",
    "TaskListRefresher",
]
