"""Shared test fixtures and utilities for todo-list tests.

Provides:
- MockContext for isolating tests from global settings and TODO_* env vars
- Store fixtures for each ordering policy
- A controller fixture with recording callbacks
"""

import os
from typing import Generator
from unittest.mock import MagicMock

import pytest

from todo_list.config import (
    TodoSettings,
    reload_settings,
    set_context_settings,
    set_settings,
)
from todo_list.tasks import OrderingPolicy, TaskStore
from todo_list.ui import TodoListController


class MockContext:
    """Context manager for isolating tests from global state.

    Handles:
    - Clearing TODO_* environment variables
    - Installing test settings as the global settings
    - Resetting the global settings singleton afterwards

    Usage:
        with MockContext(capacity=3) as ctx:
            settings = ctx.settings
    """

    def __init__(self, **settings_kwargs):
        """Initialize mock context.

        Args:
            **settings_kwargs: Settings overrides
        """
        self._settings_kwargs = settings_kwargs
        self._settings: TodoSettings | None = None
        self._original_env: dict[str, str] = {}

    def __enter__(self) -> "MockContext":
        """Enter the mock context."""
        for var in [v for v in os.environ if v.startswith("TODO_")]:
            self._original_env[var] = os.environ.pop(var)

        self._settings = TodoSettings(**self._settings_kwargs)
        set_settings(self._settings)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit the mock context and clean up."""
        set_context_settings(None)
        os.environ.update(self._original_env)
        reload_settings()

    @property
    def settings(self) -> TodoSettings:
        """Get the test settings instance."""
        if self._settings is None:
            raise RuntimeError("MockContext not entered")
        return self._settings


@pytest.fixture
def mock_context() -> Generator[MockContext, None, None]:
    """Fixture providing an isolated test context."""
    with MockContext() as ctx:
        yield ctx


@pytest.fixture
def settings(mock_context: MockContext) -> TodoSettings:
    """Fixture providing default test settings."""
    return mock_context.settings


@pytest.fixture
def store() -> TaskStore:
    """Fixture providing an empty store with the default policy."""
    return TaskStore()


@pytest.fixture(params=[OrderingPolicy.INSERTION_SORT, OrderingPolicy.APPEND_THEN_SORT])
def sorted_store(request) -> TaskStore:
    """Fixture providing an empty store for each sorting policy."""
    return TaskStore(policy=request.param)


@pytest.fixture
def unordered_store() -> TaskStore:
    """Fixture providing an empty store that keeps insertion order."""
    return TaskStore(policy=OrderingPolicy.UNORDERED)


@pytest.fixture
def callbacks() -> MagicMock:
    """Fixture providing mock on_info/on_error/on_refresh callbacks."""
    return MagicMock()


@pytest.fixture
def controller(store: TaskStore, settings: TodoSettings, callbacks: MagicMock) -> TodoListController:
    """Fixture providing a controller wired to mock callbacks."""
    return TodoListController(
        store,
        settings=settings,
        on_info=callbacks.on_info,
        on_error=callbacks.on_error,
        on_refresh=callbacks.on_refresh,
    )
