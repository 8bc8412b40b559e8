"""
Background Task Runner Interface.

Protocol-based interface for fire-and-forget background work.
Operations hand off side effects (fact emission) that must not
block or fail the caller.

Implementation strategies:
1. Thread pool (default, general-purpose background work)
2. Inline runner (tests, predictable ordering)

Key requirements:
- submit() never raises for failures inside the task
- The returned Future is an internal handle; callers of
  use cases never have to manage it
- wait_idle() / cancel_pending() let tests settle work deterministically
"""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Future
from typing import Protocol


class TaskRunnerPort(Protocol):
    """
    Task runner interface.

    Executes zero-argument callables away from the caller's thread.
    """

    def submit(self, name: str, fn: Callable[[], None]) -> Future[None]:
        """
        Schedule a task.

        Args:
            name: Short label used in logs
            fn: The work to run

        Returns:
            Future tracking the task
        """
        ...

    def wait_idle(self, timeout: float | None = None) -> bool:
        """
        Block until every submitted task has finished.

        Returns:
            True if all tasks finished within the timeout
        """
        ...

    def cancel_pending(self) -> int:
        """
        Cancel tasks that have not started yet.

        Returns:
            Number of tasks cancelled
        """
        ...

    def shutdown(self, wait: bool = True) -> None:
        """Stop accepting tasks and release workers."""
        ...


# Error types


class TaskRunnerError(Exception):
    """Base exception for task runner errors."""

    pass


class TaskRunnerClosedError(TaskRunnerError):
    """Task submitted after the runner was shut down."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Task runner is shut down, cannot run: {name}")
