"""
Date arithmetic used while navigating the picker.

All functions return new ``DateTime`` instances; inputs are never modified.
"""

from pendulum import DateTime


def increment_month(date: DateTime, delta: int) -> DateTime:
    """
    Move ``delta`` months, keeping day and time of day.

    When the target month is shorter the day clamps to its last day,
    e.g. Jan 31 + 1 month -> Feb 28 (Feb 29 in leap years).
    """
    return date.add(months=delta)


def increment_year(date: DateTime, delta: int) -> DateTime:
    """Move ``delta`` years with the same clamping as :func:`increment_month`."""
    return date.add(years=delta)


def increment_day(date: DateTime, delta: int) -> DateTime:
    return date.add(days=delta)


def increment_hour(date: DateTime, delta: int) -> DateTime:
    return date.add(hours=delta)


def increment_minute(date: DateTime, delta: int) -> DateTime:
    return date.add(minutes=delta)


def with_year(date: DateTime, year: int) -> DateTime:
    """Jump to ``year``, clamping Feb 29 to Feb 28 in common years."""
    return increment_year(date, year - date.year)


def with_day(date: DateTime, day: int) -> DateTime:
    """Set the day of month, clamped to the month's length."""
    return date.set(day=max(1, min(day, date.days_in_month)))


def with_time(date: DateTime, hour: int | None = None, minute: int | None = None) -> DateTime:
    """Replace hour and/or minute; seconds are dropped."""
    return date.set(
        hour=date.hour if hour is None else hour,
        minute=date.minute if minute is None else minute,
        second=0,
        microsecond=0,
    )
