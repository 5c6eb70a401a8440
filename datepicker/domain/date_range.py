"""
Bounds checks for dates and month navigation.
"""

from pendulum import DateTime

from .models import Bounds


def month_distance(start: DateTime, end: DateTime) -> int:
    """
    Whole calendar months from ``start``'s month to ``end``'s month.

    Day and time are ignored, so 2024-01-31 -> 2024-02-01 is one month.
    """
    return (end.year - start.year) * 12 + (end.month - start.month)


class DateRangeValidator:
    """
    Pure predicate over a :class:`Bounds` pair.

    Month checks gate navigation affordances only. A month whose days are
    all out of range can still be shown; its cells are just disabled.
    """

    def __init__(self, bounds: Bounds | None = None):
        self.bounds = bounds or Bounds()

    def is_disabled(self, date: DateTime) -> bool:
        """True when ``date`` lies before ``min`` or after ``max``."""
        lower = self.bounds.min
        upper = self.bounds.max
        return (lower is not None and date < lower) or (upper is not None and date > upper)

    def is_month_before_allowed(self, view_date: DateTime) -> bool:
        """Whether navigating to the month before ``view_date`` is offered."""
        if self.bounds.min is None:
            return True
        return month_distance(view_date, self.bounds.min) < 0

    def is_month_after_allowed(self, view_date: DateTime) -> bool:
        """Whether navigating to the month after ``view_date`` is offered."""
        if self.bounds.max is None:
            return True
        return month_distance(view_date, self.bounds.max) > 0
