"""
Minimal observer hub for the picker's output events.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional
import logging

logger = logging.getLogger(__name__)

EVENT_OPEN = "open"
EVENT_CLOSE = "close"
EVENT_CHANGE = "change"


@dataclass
class Connection:
    """Handle returned by :meth:`EventEmitter.connect`."""
    event: str
    callback_id: int
    emitter: Optional["EventEmitter"] = None

    def disconnect(self) -> None:
        if self.emitter is not None:
            self.emitter._remove(self.event, self.callback_id)
            self.emitter = None


class EventEmitter:
    """
    Routes named events to registered handlers in registration order.

    Handler errors propagate to the caller of :meth:`emit`.
    """

    def __init__(self):
        self._handlers: Dict[str, Dict[int, Callable[..., Any]]] = {}
        self._next_id = 0

    def connect(self, event: str, handler: Callable[..., Any]) -> Connection:
        callback_id = self._next_id
        self._next_id += 1
        self._handlers.setdefault(event, {})[callback_id] = handler
        return Connection(event=event, callback_id=callback_id, emitter=self)

    def emit(self, event: str, *args: Any) -> None:
        handlers = list(self._handlers.get(event, {}).values())
        logger.debug("Emitting %s to %d handler(s)", event, len(handlers))
        for handler in handlers:
            handler(*args)

    def is_connected(self, event: str) -> bool:
        return bool(self._handlers.get(event))

    def _remove(self, event: str, callback_id: int) -> None:
        self._handlers.get(event, {}).pop(callback_id, None)
