"""
Month grid construction for the calendar view.

Pure domain logic - the builder only needs the visible month, the bounds
and today's date.
"""

from typing import List

from pendulum import DateTime

from .date_range import DateRangeValidator
from .models import Bounds, DayCell, MonthRelation
from .stepper import increment_day


def weekday_index(date: DateTime) -> int:
    """Weekday counted from Sunday = 0 to Saturday = 6."""
    return date.isoweekday() % 7


class CalendarGridBuilder:
    """
    Builds the day cells of the month containing ``view_date``.

    Algorithm:
    1. Find the first day of the month and its weekday (Sunday = 0)
    2. Emit that many leading cells from the previous month
    3. Emit one cell per day of the current month
    4. Optionally pad with next-month cells up to a full week

    Trailing padding is off by default, so the last row may be short.
    """

    def __init__(self, pad_trailing: bool = False):
        self.pad_trailing = pad_trailing

    def build(
        self,
        view_date: DateTime,
        bounds: Bounds | None,
        today: DateTime,
    ) -> List[DayCell]:
        """
        Build the grid for ``view_date``'s month.

        Args:
            view_date: Any instant inside the month to show
            bounds: Selectable range; cells outside it are disabled
            today: Reference date for the ``is_today`` flag

        Returns:
            Ordered cells, Sunday-first, previous-month cells leading
        """
        validator = DateRangeValidator(bounds)
        first_day = view_date.start_of("month")
        today_date = today.date()

        cells: List[DayCell] = []

        leading = weekday_index(first_day)
        for offset in range(leading, 0, -1):
            cells.append(
                self._make_cell(
                    increment_day(first_day, -offset),
                    MonthRelation.PREVIOUS,
                    validator,
                    today_date,
                )
            )

        for day in range(first_day.days_in_month):
            cells.append(
                self._make_cell(
                    increment_day(first_day, day),
                    MonthRelation.CURRENT,
                    validator,
                    today_date,
                )
            )

        if self.pad_trailing:
            next_month = first_day.add(months=1)
            trailing = (7 - len(cells) % 7) % 7
            for day in range(trailing):
                cells.append(
                    self._make_cell(
                        increment_day(next_month, day),
                        MonthRelation.NEXT,
                        validator,
                        today_date,
                    )
                )

        return cells

    @staticmethod
    def _make_cell(date, relation, validator, today_date) -> DayCell:
        return DayCell(
            date=date,
            month_relation=relation,
            is_today=date.date() == today_date,
            is_disabled=validator.is_disabled(date),
        )

    @staticmethod
    def weeks(cells: List[DayCell]) -> List[List[DayCell]]:
        """Split a grid into rows of seven; the last row may be shorter."""
        return [cells[i:i + 7] for i in range(0, len(cells), 7)]
