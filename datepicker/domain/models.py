"""
Domain models for calendar navigation and clock dial geometry.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from pendulum import DateTime


class ViewMode(str, Enum):
    """The sub-view currently rendered by the picker panel."""
    YEAR_LIST = "year_list"
    CALENDAR = "calendar"
    HOUR_CLOCK = "hour_clock"
    MINUTE_CLOCK = "minute_clock"


class Granularity(str, Enum):
    """Which parts of a DateValue the picker lets the user choose."""
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"

    @property
    def has_date(self) -> bool:
        return self in (Granularity.DATE, Granularity.DATETIME)

    @property
    def has_time(self) -> bool:
        return self in (Granularity.TIME, Granularity.DATETIME)

    def view_modes(self) -> Tuple[ViewMode, ...]:
        """Return the views reachable under this granularity, in order."""
        modes: List[ViewMode] = []
        if self.has_date:
            modes.extend([ViewMode.YEAR_LIST, ViewMode.CALENDAR])
        if self.has_time:
            modes.extend([ViewMode.HOUR_CLOCK, ViewMode.MINUTE_CLOCK])
        return tuple(modes)

    def default_view(self) -> ViewMode:
        """View shown when the panel opens."""
        return ViewMode.CALENDAR if self.has_date else ViewMode.HOUR_CLOCK


class MonthRelation(str, Enum):
    """Position of a day cell's month relative to the visible month."""
    PREVIOUS = "previous"
    CURRENT = "current"
    NEXT = "next"


class ClockMode(str, Enum):
    HOUR = "hour"
    MINUTE = "minute"


class ClockRing(str, Enum):
    INNER = "inner"
    OUTER = "outer"


@dataclass(frozen=True)
class Bounds:
    """
    Optional lower and upper limits for navigation and selection.

    Both ends are inclusive. ``min <= max`` is expected but not checked.
    """
    min: DateTime | None = None
    max: DateTime | None = None


@dataclass(frozen=True)
class DayCell:
    """One entry of a month grid."""
    date: DateTime
    month_relation: MonthRelation
    is_today: bool = False
    is_disabled: bool = False

    @property
    def day(self) -> int:
        return self.date.day


@dataclass(frozen=True)
class HandPosition:
    """Offset of the clock hand tip from the dial center (y grows downward)."""
    x: float
    y: float


@dataclass(frozen=True)
class ClockTick:
    """A labelled value on the dial and where to draw it."""
    value: int
    ring: ClockRing
    position: HandPosition


@dataclass(frozen=True)
class ClockFace:
    """
    Fixed dial geometry.

    Hours 1-12 sit on the inner ring, 0 and 13-23 on the outer ring.
    Minutes always use the outer ring.
    """
    dial_radius: float = 120.0
    outer_radius: float = 99.0
    inner_radius: float = 66.0
    tick_radius: float = 17.0

    def __post_init__(self):
        if not 0 < self.inner_radius < self.outer_radius <= self.dial_radius:
            raise ValueError(
                f"Clock radii must satisfy 0 < inner ({self.inner_radius}) "
                f"< outer ({self.outer_radius}) <= dial ({self.dial_radius})"
            )
        if self.tick_radius <= 0:
            raise ValueError(f"tick_radius must be positive, got {self.tick_radius}")

    @property
    def ring_threshold(self) -> float:
        """Radius separating the inner ring from the outer ring."""
        return (self.inner_radius + self.outer_radius) / 2

    def radius_for(self, ring: ClockRing) -> float:
        return self.inner_radius if ring is ClockRing.INNER else self.outer_radius
