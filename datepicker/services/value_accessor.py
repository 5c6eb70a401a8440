"""
Form-control capability connecting the picker to a host form model.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

from pendulum import DateTime


@dataclass(frozen=True)
class DatepickerChange:
    """Payload of the public ``change`` event."""
    source: Any
    value: Optional[DateTime]


def _noop_change(value: Optional[DateTime]) -> None:
    return None


def _noop_touched() -> None:
    return None


class ValueAccessor:
    """
    Holds the callbacks a form model registers with the picker.

    ``write`` is how the form pushes a value in; it never triggers the
    change callback. The picker calls :meth:`notify_change` on user commits.
    """

    def __init__(self):
        self._on_change: Callable[[Optional[DateTime]], None] = _noop_change
        self._on_touched: Callable[[], None] = _noop_touched
        self.value: Optional[DateTime] = None
        self.disabled = False

    def write(self, value: Optional[DateTime]) -> None:
        """Set the value from the form model without emitting a change."""
        if self.value != value:
            self.value = value

    def on_change(self, callback: Callable[[Optional[DateTime]], None]) -> None:
        self._on_change = callback

    def on_touched(self, callback: Callable[[], None]) -> None:
        self._on_touched = callback

    def set_disabled(self, disabled: bool) -> None:
        self.disabled = bool(disabled)

    def notify_change(self, value: Optional[DateTime]) -> None:
        self.value = value
        self._on_change(value)

    def notify_touched(self) -> None:
        self._on_touched()
