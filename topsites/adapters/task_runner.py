"""
Task Runner Adapters.

Thread pool runner for general background work, plus an inline
runner for development and testing.

Key behaviors:
- Tasks run on a pool thread, never on the submitting thread
- Exceptions escaping a task are logged, never re-raised
- Pending futures are tracked so tests can await or cancel them
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from concurrent import futures
from concurrent.futures import Future, ThreadPoolExecutor

from topsites.core.ports.tasks import TaskRunnerClosedError

logger = logging.getLogger(__name__)


def _run_logged(name: str, fn: Callable[[], None]) -> None:
    try:
        fn()
    except Exception:
        logger.exception("Background task %s failed", name)


class ThreadPoolTaskRunner:
    """
    Thread pool task runner.

    Implements TaskRunnerPort. The executor is created on first
    submit, so constructing a runner starts no threads.
    """

    def __init__(
        self,
        max_workers: int = 2,
        thread_name_prefix: str = "top-sites",
    ) -> None:
        """
        Initialize runner.

        Args:
            max_workers: Pool size
            thread_name_prefix: Prefix for worker thread names
        """
        self._max_workers = max_workers
        self._thread_name_prefix = thread_name_prefix
        self._executor: ThreadPoolExecutor | None = None
        self._pending: set[Future[None]] = set()
        self._lock = threading.Lock()
        self._closed = False

    def submit(self, name: str, fn: Callable[[], None]) -> Future[None]:
        """Schedule a task on the pool."""
        with self._lock:
            if self._closed:
                raise TaskRunnerClosedError(name)
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers,
                    thread_name_prefix=self._thread_name_prefix,
                )
                logger.info(
                    "Task runner started (max workers: %d)", self._max_workers
                )
            try:
                future = self._executor.submit(_run_logged, name, fn)
            except RuntimeError as e:
                # Executor refused work (shut down, or interpreter exiting)
                raise TaskRunnerClosedError(name) from e
            self._pending.add(future)

        future.add_done_callback(self._discard)
        return future

    def wait_idle(self, timeout: float | None = None) -> bool:
        """Wait for all tracked tasks to finish."""
        with self._lock:
            pending = set(self._pending)
        if not pending:
            return True
        _, not_done = futures.wait(pending, timeout=timeout)
        return not not_done

    def cancel_pending(self) -> int:
        """Cancel tracked tasks that have not started."""
        with self._lock:
            pending = list(self._pending)
        return sum(1 for future in pending if future.cancel())

    def shutdown(self, wait: bool = True) -> None:
        """Shut the pool down."""
        with self._lock:
            if self._closed:
                return
            self._closed = True
            executor = self._executor
            self._executor = None

        if executor is not None:
            executor.shutdown(wait=wait, cancel_futures=not wait)
            logger.info("Task runner stopped")

    @property
    def pending_count(self) -> int:
        with self._lock:
            return len(self._pending)

    def _discard(self, future: Future[None]) -> None:
        with self._lock:
            self._pending.discard(future)


class InlineTaskRunner:
    """
    Inline task runner for tests.

    Runs each task immediately on the submitting thread, so
    effects are visible as soon as submit() returns.
    """

    def __init__(self) -> None:
        self.submitted: list[str] = []
        self._closed = False

    def submit(self, name: str, fn: Callable[[], None]) -> Future[None]:
        if self._closed:
            raise TaskRunnerClosedError(name)
        self.submitted.append(name)
        future: Future[None] = Future()
        future.set_running_or_notify_cancel()
        _run_logged(name, fn)
        future.set_result(None)
        return future

    def wait_idle(self, timeout: float | None = None) -> bool:
        return True

    def cancel_pending(self) -> int:
        return 0

    def shutdown(self, wait: bool = True) -> None:
        self._closed = True


# Factory functions


def create_task_runner(
    max_workers: int = 2,
    thread_name_prefix: str = "top-sites",
) -> ThreadPoolTaskRunner:
    """
    Create a thread pool task runner.

    Args:
        max_workers: Pool size
        thread_name_prefix: Prefix for worker thread names

    Returns:
        Configured ThreadPoolTaskRunner
    """
    return ThreadPoolTaskRunner(
        max_workers=max_workers,
        thread_name_prefix=thread_name_prefix,
    )
