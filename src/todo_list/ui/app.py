"""Application wiring for a to-do list window.

TodoListApp builds the pieces a window needs from settings (store,
controller, refresher) and owns their lifecycle. A toolkit front end
creates one per window, passes its alert and list-view callbacks in,
calls start() once the window is shown, and stop() when it closes.
"""

from todo_list.config import TodoSettings, get_settings, validate_settings
from todo_list.logging import Loggers, bind_context, configure_logging, unbind_context
from todo_list.tasks.store import TaskStore, create_store
from todo_list.ui.controller import MessageCallback, RefreshCallback, TodoListController
from todo_list.ui.refresher import TaskListRefresher

logger = Loggers.ui()


class TodoListApp:
    """One to-do list session: a store, its controller, and the refresher."""

    def __init__(
        self,
        settings: TodoSettings | None = None,
        on_info: MessageCallback | None = None,
        on_error: MessageCallback | None = None,
        on_refresh: RefreshCallback | None = None,
        store: TaskStore | None = None,
    ) -> None:
        """Initialize the application.

        Args:
            settings: Optional settings override
            on_info: Shows informational alerts
            on_error: Shows error alerts
            on_refresh: Replaces the list view's items
            store: Optional pre-built store (defaults to one built from settings)

        Raises:
            SettingsValidationError: If the settings are inconsistent
        """
        self._settings = settings or get_settings()
        validate_settings(self._settings)
        configure_logging(self._settings)

        logger.info(
            "app_starting",
            app_name=self._settings.app_name,
            capacity=self._settings.capacity,
            ordering_policy=self._settings.ordering_policy.value,
        )

        self.store = store if store is not None else create_store(self._settings)
        self.controller = TodoListController(
            self.store,
            settings=self._settings,
            on_info=on_info,
            on_error=on_error,
            on_refresh=on_refresh,
        )
        self.refresher = TaskListRefresher(
            self.controller.refresh,
            interval=self._settings.refresh_interval,
        )

    @property
    def settings(self) -> TodoSettings:
        return self._settings

    def start(self) -> None:
        """Render the initial list and start the periodic refresh.

        Binds the app name to the logging context of the calling thread
        until stop().
        """
        bind_context(app_name=self._settings.app_name)
        self.controller.refresh()
        self.refresher.start()

    def stop(self) -> None:
        """Stop the periodic refresh."""
        self.refresher.stop()
        logger.info("app_ending", task_count=self.store.count)
        unbind_context("app_name")

    def __enter__(self) -> "TodoListApp":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
