"""
Selectable year range for the year list view.
"""

from typing import List

from pendulum import DateTime

from .models import Bounds

DEFAULT_FIRST_YEAR = 1900
DEFAULT_YEARS_AHEAD = 100


class YearListProvider:
    """Years from ``min.year`` (or 1900) to ``max.year`` (or today + 100), inclusive."""

    def years(self, bounds: Bounds | None, today: DateTime) -> List[int]:
        bounds = bounds or Bounds()
        first = bounds.min.year if bounds.min is not None else DEFAULT_FIRST_YEAR
        last = bounds.max.year if bounds.max is not None else today.year + DEFAULT_YEARS_AHEAD
        return list(range(first, last + 1))
