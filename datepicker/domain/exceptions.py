"""
Domain-specific exception hierarchy for the datepicker engine.
"""


class DatepickerError(Exception):
    """Base class for all datepicker errors."""


class InvalidClockValueError(DatepickerError, ValueError):
    """Raised when an hour or minute lies outside the dial's range."""


class ConfigurationError(DatepickerError, ValueError):
    """Raised when configured dates or options cannot be interpreted."""
