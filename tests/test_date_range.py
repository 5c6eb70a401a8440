"""
Tests for bounds checks.
"""

import pendulum

from datepicker.domain.date_range import DateRangeValidator, month_distance
from datepicker.domain.models import Bounds


def _bounds(min_date=None, max_date=None) -> Bounds:
    return Bounds(
        min=pendulum.parse(min_date) if min_date else None,
        max=pendulum.parse(max_date) if max_date else None,
    )


class TestIsDisabled:
    """Tests for DateRangeValidator.is_disabled."""

    def test_no_bounds_never_disabled(self):
        """Without bounds every date is selectable."""
        validator = DateRangeValidator()

        assert not validator.is_disabled(pendulum.datetime(1, 1, 1))
        assert not validator.is_disabled(pendulum.datetime(9999, 12, 31))

    def test_before_min_is_disabled(self):
        """Dates earlier than min are disabled, min itself is not."""
        validator = DateRangeValidator(_bounds(min_date="2024-03-10"))

        assert validator.is_disabled(pendulum.parse("2024-03-09"))
        assert not validator.is_disabled(pendulum.parse("2024-03-10"))
        assert not validator.is_disabled(pendulum.parse("2024-03-11"))

    def test_after_max_is_disabled(self):
        """Dates later than max are disabled, max itself is not."""
        validator = DateRangeValidator(_bounds(max_date="2024-03-20"))

        assert validator.is_disabled(pendulum.parse("2024-03-21"))
        assert not validator.is_disabled(pendulum.parse("2024-03-20"))

    def test_matches_definition_across_range(self):
        """is_disabled equals (d < min) or (d > max) for every day of a year."""
        bounds = _bounds("2024-02-10", "2024-11-05")
        validator = DateRangeValidator(bounds)
        day = pendulum.parse("2024-01-01")

        while day.year == 2024:
            expected = day < bounds.min or day > bounds.max
            assert validator.is_disabled(day) == expected
            day = day.add(days=1)

    def test_time_of_day_matters(self):
        """A later time on the max day is past max."""
        validator = DateRangeValidator(_bounds(max_date="2024-03-20 12:00"))

        assert validator.is_disabled(pendulum.parse("2024-03-20 12:01"))
        assert not validator.is_disabled(pendulum.parse("2024-03-20 11:59"))


class TestMonthNavigation:
    """Tests for month navigation gating."""

    def test_month_distance_ignores_day(self):
        """Distance counts calendar months only."""
        assert month_distance(pendulum.parse("2024-01-31"), pendulum.parse("2024-02-01")) == 1
        assert month_distance(pendulum.parse("2024-03-15"), pendulum.parse("2023-12-01")) == -3
        assert month_distance(pendulum.parse("2024-03-01"), pendulum.parse("2024-03-31")) == 0

    def test_previous_month_blocked_in_min_month(self):
        """Going back is not offered while showing the month of min."""
        validator = DateRangeValidator(_bounds(min_date="2024-03-10"))

        assert not validator.is_month_before_allowed(pendulum.parse("2024-03-25"))
        assert validator.is_month_before_allowed(pendulum.parse("2024-04-01"))

    def test_next_month_blocked_in_max_month(self):
        """Going forward is not offered while showing the month of max."""
        validator = DateRangeValidator(_bounds(max_date="2024-03-10"))

        assert not validator.is_month_after_allowed(pendulum.parse("2024-03-01"))
        assert validator.is_month_after_allowed(pendulum.parse("2024-02-29"))

    def test_unbounded_navigation_always_allowed(self):
        """Missing bounds allow navigation in both directions."""
        validator = DateRangeValidator()
        date = pendulum.parse("2024-03-15")

        assert validator.is_month_before_allowed(date)
        assert validator.is_month_after_allowed(date)
