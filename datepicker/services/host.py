"""
Protocol for the host surface the picker is attached to.
"""

from typing import Any, Optional, Protocol


class HostSurfaceProtocol(Protocol):
    """
    What the engine needs from the host UI.

    The trigger element supplies its width and takes focus back on close.
    Year-list lookups may return ``None`` while the list is not laid out yet.
    """

    def get_trigger_width(self) -> float:
        """Bounding width of the trigger element."""

    def focus(self) -> None:
        """Return keyboard focus to the trigger element."""

    def find_year_element(self, year: int) -> Optional[Any]:
        """Rendered entry for ``year`` in the year list, if present."""

    def scroll_into_view(self, element: Any) -> None:
        """Scroll the year list so ``element`` is visible."""
