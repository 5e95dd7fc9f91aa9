"""Tests for TaskListRefresher."""

import threading
import time
from unittest.mock import patch

import pytest

from todo_list.ui import TaskListRefresher


class CallCounter:
    """Callback that counts calls and signals once a target is reached."""

    def __init__(self, target: int = 3, fail_first: int = 0) -> None:
        self.calls = 0
        self.target = target
        self.fail_first = fail_first
        self.reached = threading.Event()

    def __call__(self) -> None:
        self.calls += 1
        if self.calls >= self.target:
            self.reached.set()
        if self.calls <= self.fail_first:
            raise RuntimeError("render failed")


class TestTaskListRefresher:
    """Tests for the periodic refresher."""

    def test_rejects_non_positive_interval(self):
        with pytest.raises(ValueError, match="interval"):
            TaskListRefresher(lambda: None, interval=0)

    def test_calls_callback_periodically(self):
        counter = CallCounter(target=3)
        refresher = TaskListRefresher(counter, interval=0.01)

        refresher.start()
        try:
            assert counter.reached.wait(timeout=2.0)
        finally:
            refresher.stop()

        assert counter.calls >= 3

    def test_first_call_waits_one_interval(self):
        counter = CallCounter(target=1)
        with TaskListRefresher(counter, interval=10.0):
            time.sleep(0.05)
        assert counter.calls == 0

    def test_stop_is_prompt(self):
        refresher = TaskListRefresher(lambda: None, interval=30.0)
        refresher.start()
        assert refresher.is_running

        started = time.monotonic()
        refresher.stop()

        assert time.monotonic() - started < 1.0
        assert not refresher.is_running

    def test_start_twice_is_noop(self):
        refresher = TaskListRefresher(lambda: None, interval=30.0)
        refresher.start()
        first = refresher._thread
        refresher.start()
        try:
            assert refresher._thread is first
        finally:
            refresher.stop()

    def test_stop_when_not_running(self):
        refresher = TaskListRefresher(lambda: None, interval=1.0)
        refresher.stop()
        assert not refresher.is_running

    def test_restart_after_stop(self):
        counter = CallCounter(target=1)
        refresher = TaskListRefresher(counter, interval=0.01)
        refresher.start()
        refresher.stop()

        refresher.start()
        try:
            assert counter.reached.wait(timeout=2.0)
        finally:
            refresher.stop()

    def test_survives_callback_errors(self):
        counter = CallCounter(target=4, fail_first=2)
        with TaskListRefresher(counter, interval=0.01) as refresher:
            assert counter.reached.wait(timeout=2.0)
            assert refresher.is_running

    def test_context_manager_stops(self):
        with TaskListRefresher(lambda: None, interval=30.0) as refresher:
            assert refresher.is_running
        assert not refresher.is_running

    def test_refreshes_controller(self, controller, callbacks):
        controller.add_task("Pay bills", "1")
        seen = threading.Event()
        callbacks.on_refresh.side_effect = lambda lines: seen.set()
        callbacks.on_refresh.reset_mock()

        with TaskListRefresher(controller.refresh, interval=0.01):
            assert seen.wait(timeout=2.0)

        callbacks.on_refresh.assert_called_with(["Pay bills (Priority: 1)"])

    def test_restart_after_timed_out_stop_runs_one_thread(self):
        callers: list[tuple[float, int]] = []
        release_first = threading.Event()
        first_entered = threading.Event()

        def callback() -> None:
            callers.append((time.monotonic(), threading.get_ident()))
            if not first_entered.is_set():
                first_entered.set()
                release_first.wait(timeout=2.0)

        refresher = TaskListRefresher(callback, interval=0.01)
        refresher.start()
        assert first_entered.wait(timeout=2.0)
        old_thread = refresher._thread

        refresher.stop(timeout=0.01)
        assert old_thread.is_alive()

        restarted_at = time.monotonic()
        refresher.start()
        try:
            release_first.set()
            time.sleep(0.2)
        finally:
            refresher.stop()

        old_thread.join(timeout=2.0)
        assert not old_thread.is_alive()
        after_restart = {ident for at, ident in callers if at > restarted_at}
        assert len(after_restart) == 1
        assert old_thread.ident not in after_restart
    def test_stop_from_callback(self):
        stopped = threading.Event()
        threads: list[threading.Thread] = []
        holder: list[TaskListRefresher] = []

        def callback() -> None:
            threads.append(threading.current_thread())
            holder[0].stop()
            stopped.set()

        refresher = TaskListRefresher(callback, interval=0.01)
        holder.append(refresher)
        with patch("todo_list.ui.refresher.logger") as logger:
            refresher.start()
            assert stopped.wait(timeout=2.0)
            threads[0].join(timeout=2.0)

        assert not threads[0].is_alive()
        assert not refresher.is_running
        assert len(threads) == 1
        logger.warning.assert_not_called()
        logger.info.assert_any_call("refresher_stopped", from_callback=True)
