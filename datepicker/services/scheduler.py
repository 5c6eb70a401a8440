"""
Deferred work that must run after the current event has been processed.
"""

from typing import Callable, List, Protocol
import logging

logger = logging.getLogger(__name__)


class TaskSchedulerProtocol(Protocol):
    """Host hook for running a callback once the current turn completes."""

    def defer(self, task: Callable[[], None]) -> None:
        """Queue ``task`` to run after the current processing turn."""


class DeferredTaskQueue:
    """
    FIFO queue flushed by the host once layout has settled.

    Tasks queued while flushing run on the next flush, not the current one.
    """

    def __init__(self):
        self._pending: List[Callable[[], None]] = []

    def defer(self, task: Callable[[], None]) -> None:
        self._pending.append(task)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def run_pending(self) -> int:
        """
        Run every queued task.

        A failing task is logged and skipped so the remaining tasks still run.

        Returns:
            Number of tasks executed
        """
        tasks, self._pending = self._pending, []
        for task in tasks:
            try:
                task()
            except Exception as exc:
                logger.warning("Deferred task %r failed: %s", task, exc)
        return len(tasks)
