"""
Service layer - View state orchestration and host-facing capabilities.
"""

from .events import Connection, EventEmitter
from .host import HostSurfaceProtocol
from .scheduler import DeferredTaskQueue, TaskSchedulerProtocol
from .value_accessor import DatepickerChange, ValueAccessor
from .view_state import ViewStateController

__all__ = [
    "Connection",
    "DatepickerChange",
    "DeferredTaskQueue",
    "EventEmitter",
    "HostSurfaceProtocol",
    "TaskSchedulerProtocol",
    "ValueAccessor",
    "ViewStateController",
]
