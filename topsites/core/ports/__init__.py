# top-sites — Ports (Protocol Interfaces)
# Abstract interfaces for adapters; no implementations here

from topsites.core.ports.tasks import (
    TaskRunnerClosedError,
    TaskRunnerError,
    TaskRunnerPort,
)

__all__ = [
    # Background tasks
    "TaskRunnerClosedError",
    "TaskRunnerError",
    "TaskRunnerPort",
]
