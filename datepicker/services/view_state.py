"""
Top-level state machine for the picker panel.

The controller owns the committed value, the date under navigation and the
active sub-view. Host events (clicks, keys, pointer positions on the dial)
come in through its public methods; rendering data (grid cells, years, hand
position) goes out through read-only properties and the ``open``/``close``/
``change`` events.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Tuple

import pendulum
from pendulum import DateTime

from ..domain.calendar_grid import CalendarGridBuilder
from ..domain.clock_geometry import ClockGeometryEngine
from ..domain.date_range import DateRangeValidator
from ..domain.exceptions import InvalidClockValueError
from ..domain.models import (
    Bounds,
    ClockMode,
    DayCell,
    Granularity,
    HandPosition,
    MonthRelation,
    ViewMode,
)
from ..domain.stepper import (
    increment_day,
    increment_hour,
    increment_minute,
    increment_month,
    increment_year,
    with_day,
    with_time,
    with_year,
)
from ..domain.year_list import YearListProvider
from .events import EVENT_CHANGE, EVENT_CLOSE, EVENT_OPEN, EventEmitter
from .host import HostSurfaceProtocol
from .scheduler import DeferredTaskQueue, TaskSchedulerProtocol
from .value_accessor import DatepickerChange, ValueAccessor

logger = logging.getLogger(__name__)

OPEN_KEYS = frozenset({"Enter", " ", "Space", "Spacebar"})
ESCAPE_KEY = "Escape"


class ViewStateController:
    """
    Routes user actions between the year list, calendar and clock views.

    The views form the ordered sequence YearList, Calendar, HourClock,
    MinuteClock, truncated by granularity: date-only pickers never show a
    clock, time-only pickers never show the calendar or year list.
    Actions aimed at a view outside the granularity are ignored.
    """

    def __init__(
        self,
        granularity: Granularity = Granularity.DATE,
        bounds: Bounds | None = None,
        *,
        host: Optional[HostSurfaceProtocol] = None,
        accessor: Optional[ValueAccessor] = None,
        scheduler: Optional[TaskSchedulerProtocol] = None,
        clock: Optional[Callable[[], DateTime]] = None,
        geometry: Optional[ClockGeometryEngine] = None,
        grid_builder: Optional[CalendarGridBuilder] = None,
        year_provider: Optional[YearListProvider] = None,
        timezone: str = "UTC",
        required: bool = False,
        placeholder: str = "",
    ) -> None:
        self.granularity = granularity
        self.host = host
        self.accessor = accessor or ValueAccessor()
        self.scheduler = scheduler or DeferredTaskQueue()
        self.geometry = geometry or ClockGeometryEngine()
        self.events = EventEmitter()
        self.required = required
        self.placeholder = placeholder

        self._clock = clock or (lambda: pendulum.now(timezone))
        self._grid_builder = grid_builder or CalendarGridBuilder()
        self._year_provider = year_provider or YearListProvider()
        self._bounds = bounds or Bounds()

        self._panel_open = False
        self._view_mode = granularity.default_view()
        self._view_date: DateTime = self._clock()
        self._calendar: Tuple[DayCell, ...] = ()
        self._rebuild_calendar()

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------
    @property
    def value(self) -> Optional[DateTime]:
        """The committed DateValue, ``None`` when nothing is selected."""
        return self.accessor.value

    @property
    def view_mode(self) -> ViewMode:
        return self._view_mode

    @property
    def view_date(self) -> DateTime:
        return self._view_date

    @property
    def panel_open(self) -> bool:
        return self._panel_open

    @property
    def disabled(self) -> bool:
        return self.accessor.disabled

    @property
    def calendar(self) -> Tuple[DayCell, ...]:
        """Cells of the visible month, rebuilt on every month change."""
        return self._calendar

    @property
    def years(self):
        return self._year_provider.years(self._bounds, self._clock())

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    @bounds.setter
    def bounds(self, bounds: Bounds | None) -> None:
        self._bounds = bounds or Bounds()
        self._rebuild_calendar()

    @property
    def can_go_previous_month(self) -> bool:
        return DateRangeValidator(self._bounds).is_month_before_allowed(self._view_date)

    @property
    def can_go_next_month(self) -> bool:
        return DateRangeValidator(self._bounds).is_month_after_allowed(self._view_date)

    @property
    def hand_position(self) -> Optional[HandPosition]:
        """Clock hand for the active clock view, ``None`` elsewhere or while closed."""
        mode = self._clock_mode()
        if mode is None or not self._panel_open:
            return None
        return self.geometry.hand_position(self._view_date, mode)

    @property
    def tab_index(self) -> int:
        return -1 if self.disabled else 0

    @property
    def trigger_width(self) -> float:
        if self.host is None:
            return 0
        return self.host.get_trigger_width()

    @property
    def placeholder_state(self) -> str:
        if self._panel_open or self.value is not None:
            return "floating"
        return ""

    # ------------------------------------------------------------------
    # Form-control capability
    # ------------------------------------------------------------------
    def write_value(self, value: Optional[DateTime]) -> None:
        self.accessor.write(value)

    def register_on_change(self, callback: Callable[[Optional[DateTime]], None]) -> None:
        self.accessor.on_change(callback)

    def register_on_touched(self, callback: Callable[[], None]) -> None:
        self.accessor.on_touched(callback)

    def set_disabled_state(self, disabled: bool) -> None:
        self.accessor.set_disabled(disabled)

    def on_blur(self) -> None:
        """Count a blur as a touch only while closed; opening blurs into the panel."""
        if not self._panel_open:
            self.accessor.notify_touched()

    # ------------------------------------------------------------------
    # Panel lifecycle
    # ------------------------------------------------------------------
    def open(self) -> None:
        if self.disabled or self._panel_open:
            logger.debug("Ignoring open (disabled=%s, open=%s)", self.disabled, self._panel_open)
            return

        self._view_date = self.value if self.value is not None else self._clock()
        self._view_mode = self.granularity.default_view()
        self._rebuild_calendar()
        self._panel_open = True
        logger.debug("Panel opened in %s at %s", self._view_mode.value, self._view_date)
        self.events.emit(EVENT_OPEN)

    def close(self) -> None:
        if not self._panel_open:
            return

        self._panel_open = False
        self._view_mode = self.granularity.default_view()
        if self.host is not None:
            self.host.focus()
        logger.debug("Panel closed")
        self.events.emit(EVENT_CLOSE)

    def toggle(self) -> None:
        if self._panel_open:
            self.close()
        else:
            self.open()

    # ------------------------------------------------------------------
    # View switching
    # ------------------------------------------------------------------
    def show_years(self) -> None:
        if not self._set_mode(ViewMode.YEAR_LIST):
            return
        self.scheduler.defer(self._scroll_to_selected_year)

    def show_calendar(self) -> None:
        if self._set_mode(ViewMode.CALENDAR):
            self._rebuild_calendar()

    def show_hours(self) -> None:
        self._set_mode(ViewMode.HOUR_CLOCK)

    def show_minutes(self) -> None:
        self._set_mode(ViewMode.MINUTE_CLOCK)

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------
    def select_year(self, year: int) -> None:
        if not self.granularity.has_date:
            self._log_rejected("select_year")
            return
        self._view_date = with_year(self._view_date, year)
        self._rebuild_calendar()
        self._view_mode = ViewMode.CALENDAR

    def select_day(self, cell: DayCell) -> None:
        """
        Handle a click on a grid cell.

        Cells from the neighbouring months move the view one month back or
        forward onto the clicked day before the selection proceeds.
        """
        if not self.granularity.has_date:
            self._log_rejected("select_day")
            return
        if cell.is_disabled:
            logger.debug("Ignoring click on disabled date %s", cell.date.to_date_string())
            return

        target = self._view_date
        if cell.month_relation is MonthRelation.PREVIOUS:
            target = increment_month(target, -1)
        elif cell.month_relation is MonthRelation.NEXT:
            target = increment_month(target, 1)
        self._set_view_date(self._clamp_to_bounds(with_day(target, cell.day)))

        if self.granularity.has_time:
            self._view_mode = ViewMode.HOUR_CLOCK
        else:
            self._commit(self._view_date)

    def select_hour(self, hour: int) -> None:
        if not self.granularity.has_time:
            self._log_rejected("select_hour")
            return
        if not 0 <= hour <= 23:
            raise InvalidClockValueError(f"Hour must be between 0 and 23, got {hour}")
        self._set_view_date(with_time(self._view_date, hour=hour))
        self._view_mode = ViewMode.MINUTE_CLOCK

    def select_minute(self, minute: int) -> None:
        if not self.granularity.has_time:
            self._log_rejected("select_minute")
            return
        if not 0 <= minute <= 59:
            raise InvalidClockValueError(f"Minute must be between 0 and 59, got {minute}")
        self._set_view_date(with_time(self._view_date, minute=minute))
        self._commit(self._view_date)

    def select_clock_point(self, x: float, y: float) -> None:
        """Select the hour or minute under a pointer offset from the dial center."""
        mode = self._clock_mode()
        if mode is None:
            self._log_rejected("select_clock_point")
            return
        value, _ring = self.geometry.point_to_time(x, y, mode)
        if mode is ClockMode.HOUR:
            self.select_hour(value)
        else:
            self.select_minute(value)

    def confirm(self) -> None:
        """The explicit "OK" action, advancing from whichever view is active."""
        mode = self._view_mode
        if mode is ViewMode.YEAR_LIST:
            self._rebuild_calendar()
            self._view_mode = ViewMode.CALENDAR
        elif mode is ViewMode.CALENDAR:
            self.select_day(self._cell_for_view_date())
        elif mode is ViewMode.HOUR_CLOCK:
            self._view_mode = ViewMode.MINUTE_CLOCK
        else:
            self._commit(self._view_date)

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------
    def previous_month(self) -> None:
        if self.can_go_previous_month:
            self._set_view_date(increment_month(self._view_date, -1))

    def next_month(self) -> None:
        if self.can_go_next_month:
            self._set_view_date(increment_month(self._view_date, 1))

    def handle_keydown(self, key: str) -> bool:
        """
        Route a key press.

        Returns:
            True when the key was consumed
        """
        if not self._panel_open:
            if key in OPEN_KEYS:
                self.open()
                return True
            return False

        if key == ESCAPE_KEY:
            self.close()
            return True
        if key in OPEN_KEYS:
            self.confirm()
            return True

        action = self._key_actions().get(self._view_mode, {}).get(key)
        if action is None:
            return False
        action()
        return True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------
    def _key_actions(self) -> Dict[ViewMode, Dict[str, Callable[[], None]]]:
        def move(step: Callable[[DateTime, int], DateTime], delta: int) -> Callable[[], None]:
            return lambda: self._set_view_date(step(self._view_date, delta))

        return {
            ViewMode.CALENDAR: {
                "ArrowLeft": move(increment_day, -1),
                "ArrowRight": move(increment_day, 1),
                "ArrowUp": move(increment_day, -7),
                "ArrowDown": move(increment_day, 7),
                "PageUp": move(increment_month, -1),
                "PageDown": move(increment_month, 1),
                "Home": lambda: self._set_view_date(with_day(self._view_date, 1)),
                "End": lambda: self._set_view_date(
                    with_day(self._view_date, self._view_date.days_in_month)
                ),
            },
            ViewMode.YEAR_LIST: {
                "ArrowUp": lambda: self._step_year(-1),
                "ArrowDown": lambda: self._step_year(1),
            },
            ViewMode.HOUR_CLOCK: {
                "ArrowUp": move(increment_hour, 1),
                "ArrowRight": move(increment_hour, 1),
                "ArrowDown": move(increment_hour, -1),
                "ArrowLeft": move(increment_hour, -1),
            },
            ViewMode.MINUTE_CLOCK: {
                "ArrowUp": move(increment_minute, 1),
                "ArrowRight": move(increment_minute, 1),
                "ArrowDown": move(increment_minute, -1),
                "ArrowLeft": move(increment_minute, -1),
            },
        }

    def _step_year(self, delta: int) -> None:
        target = increment_year(self._view_date, delta)
        if target.year not in self.years:
            return
        self._set_view_date(target)
        self.scheduler.defer(self._scroll_to_selected_year)

    def _set_mode(self, mode: ViewMode) -> bool:
        if mode not in self.granularity.view_modes():
            self._log_rejected(f"switch to {mode.value}")
            return False
        logger.debug("View mode %s -> %s", self._view_mode.value, mode.value)
        self._view_mode = mode
        return True

    def _set_view_date(self, date: DateTime) -> None:
        previous = self._view_date
        self._view_date = date
        if (previous.year, previous.month) != (date.year, date.month):
            self._rebuild_calendar()

    def _rebuild_calendar(self) -> None:
        self._calendar = tuple(
            self._grid_builder.build(self._view_date, self._bounds, self._clock())
        )

    def _cell_for_view_date(self) -> DayCell:
        for cell in self._calendar:
            if cell.month_relation is MonthRelation.CURRENT and cell.day == self._view_date.day:
                return cell
        day = self._view_date.start_of("day")
        return DayCell(
            date=day,
            month_relation=MonthRelation.CURRENT,
            is_disabled=DateRangeValidator(self._bounds).is_disabled(day),
        )

    def _clock_mode(self) -> Optional[ClockMode]:
        if self._view_mode is ViewMode.HOUR_CLOCK:
            return ClockMode.HOUR
        if self._view_mode is ViewMode.MINUTE_CLOCK:
            return ClockMode.MINUTE
        return None

    def _clamp_to_bounds(self, date: DateTime) -> DateTime:
        """Pull a date on an enabled boundary day back inside [min, max]."""
        lower = self._bounds.min
        upper = self._bounds.max
        if lower is not None and date < lower:
            return lower
        if upper is not None and date > upper:
            return upper
        return date

    def _commit(self, value: DateTime) -> None:
        logger.debug("Committing %s", value)
        self.accessor.notify_change(value)
        self.events.emit(EVENT_CHANGE, DatepickerChange(source=self, value=value))
        self.close()

    def _scroll_to_selected_year(self) -> None:
        if self.host is None:
            return
        element = self.host.find_year_element(self._view_date.year)
        if element is None:
            logger.debug("Year %s not laid out yet, skipping scroll", self._view_date.year)
            return
        self.host.scroll_into_view(element)

    def _log_rejected(self, action: str) -> None:
        logger.debug("Ignoring %s for %s granularity", action, self.granularity.value)
