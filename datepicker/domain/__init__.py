"""
Domain layer - Pure calendar and clock logic without host dependencies.
"""

from .calendar_grid import CalendarGridBuilder
from .clock_geometry import ClockGeometryEngine
from .date_range import DateRangeValidator
from .models import (
    Bounds,
    ClockFace,
    ClockMode,
    ClockRing,
    DayCell,
    Granularity,
    HandPosition,
    MonthRelation,
    ViewMode,
)
from .year_list import YearListProvider

__all__ = [
    "Bounds",
    "CalendarGridBuilder",
    "ClockFace",
    "ClockGeometryEngine",
    "ClockMode",
    "ClockRing",
    "DateRangeValidator",
    "DayCell",
    "Granularity",
    "HandPosition",
    "MonthRelation",
    "ViewMode",
    "YearListProvider",
]
