"""Periodic background refresh of the task list.

Runs a callback (normally TodoListController.refresh) every few seconds
on a daemon thread until stopped. The wait is an Event wait, so stop()
wakes the thread immediately instead of sleeping out the interval.

The callback only reads the store, and the store takes its own lock, so
the refresher needs no locking of its own. If the view toolkit requires
updates on its UI thread, pass a callback that marshals onto it.
"""

import threading
from typing import Callable

from todo_list.logging import Loggers

logger = Loggers.ui()


class TaskListRefresher:
    """Cancellable periodic refresher.

    Example:
        >>> refresher = TaskListRefresher(controller.refresh, interval=5.0)
        >>> refresher.start()
        >>> ...
        >>> refresher.stop()

    Or bound to a ``with`` block:

        >>> with TaskListRefresher(controller.refresh, interval=2.0):
        ...     app.run()
    """

    def __init__(
        self,
        callback: Callable[[], object],
        interval: float,
        name: str = "task-list-refresher",
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        self._callback = callback
        self._interval = interval
        self._name = name
        self._stop_event: threading.Event | None = None
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def is_running(self) -> bool:
        thread = self._thread
        return thread is not None and thread.is_alive()

    def start(self) -> None:
        """Start refreshing. Does nothing if already running."""
        with self._lock:
            if self.is_running:
                return
            # One event per run: a thread left over from a timed-out stop()
            # keeps its own set event across a restart.
            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._run,
                args=(self._stop_event,),
                name=self._name,
                daemon=True,
            )
            self._thread.start()
        logger.info("refresher_started", interval=self._interval)

    def stop(self, timeout: float | None = 1.0) -> None:
        """Stop refreshing and wait for the thread to exit.

        Safe to call when not running, and from inside the callback. If the
        callback is still busy after ``timeout``, the thread finishes that
        call and then exits on its own.
        """
        with self._lock:
            thread = self._thread
            if thread is None or self._stop_event is None:
                return
            self._stop_event.set()
            self._thread = None
            self._stop_event = None
            if thread is threading.current_thread():
                logger.info("refresher_stopped", from_callback=True)
                return
            thread.join(timeout=timeout)
        if thread.is_alive():
            logger.warning("refresher_stop_timed_out", timeout=timeout)
        else:
            logger.info("refresher_stopped")

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self._interval):
            try:
                self._callback()
            except Exception:
                logger.exception("refresh_failed")

    def __enter__(self) -> "TaskListRefresher":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()
