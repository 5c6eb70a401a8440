"""
Mapping between dial offsets and hour/minute values.

Coordinates are offsets from the dial center in screen orientation:
x grows to the right, y grows downward, and 12 o'clock points up
(negative y). Angles are measured clockwise from 12 o'clock.
"""

import math
from typing import List, Tuple

from pendulum import DateTime

from .exceptions import InvalidClockValueError
from .models import ClockFace, ClockMode, ClockRing, ClockTick, HandPosition

FULL_TURN = 2 * math.pi
HOUR_UNIT = math.pi / 6     # 30 degrees per hour
MINUTE_UNIT = math.pi / 30  # 6 degrees per minute


def normalize_angle(angle: float) -> float:
    """Fold an angle into [0, 2*pi)."""
    angle = angle % FULL_TURN
    # Tiny negative inputs can round up to exactly 2*pi
    if angle >= FULL_TURN:
        return 0.0
    return angle


class ClockGeometryEngine:
    """
    Converts between pointer positions on the dial and discrete times.

    Hour mode uses two rings: the inner ring shows 1-12, the outer ring
    0 and 13-23. Minute mode uses the outer ring only. The two public
    functions are inverses for every valid value.
    """

    def __init__(self, face: ClockFace | None = None):
        self.face = face or ClockFace()

    @staticmethod
    def unit_for(mode: ClockMode) -> float:
        return HOUR_UNIT if mode is ClockMode.HOUR else MINUTE_UNIT

    def point_to_time(self, x: float, y: float, mode: ClockMode) -> Tuple[int, ClockRing]:
        """
        Resolve a dial offset to a value and the ring it falls on.

        Args:
            x: Horizontal offset from the dial center
            y: Vertical offset from the dial center (downward positive)
            mode: Whether the dial currently shows hours or minutes

        Returns:
            (value, ring) with hours in 0-23 and minutes in 0-59
        """
        radius = math.hypot(x, y)
        # atan2(x, -y) measures clockwise from 12 o'clock; + 0.0 drops the sign of -0.0
        angle = normalize_angle(math.atan2(x, -y + 0.0))
        step = int(round(angle / self.unit_for(mode)))

        if mode is ClockMode.MINUTE:
            return step % 60, ClockRing.OUTER

        raw = step % 12
        if radius < self.face.ring_threshold:
            return (raw or 12), ClockRing.INNER
        return (raw + 12 if raw else 0), ClockRing.OUTER

    def time_to_point(self, value: int, mode: ClockMode) -> Tuple[float, float]:
        """
        Position of the hand tip for ``value``.

        Raises:
            InvalidClockValueError: If the value is not a valid hour/minute
        """
        ring = self.ring_for(value, mode)
        radius = self.face.radius_for(ring)
        angle = value * self.unit_for(mode)
        return math.sin(angle) * radius, -math.cos(angle) * radius

    def ring_for(self, value: int, mode: ClockMode) -> ClockRing:
        if mode is ClockMode.MINUTE:
            if not 0 <= value <= 59:
                raise InvalidClockValueError(f"Minute must be between 0 and 59, got {value}")
            return ClockRing.OUTER

        if not 0 <= value <= 23:
            raise InvalidClockValueError(f"Hour must be between 0 and 23, got {value}")
        return ClockRing.INNER if 1 <= value <= 12 else ClockRing.OUTER

    def hand_position(self, date: DateTime, mode: ClockMode) -> HandPosition:
        """Hand tip for the hour or minute of ``date``."""
        value = date.hour if mode is ClockMode.HOUR else date.minute
        x, y = self.time_to_point(value, mode)
        return HandPosition(x=x, y=y)

    def hour_ticks(self) -> List[ClockTick]:
        """All 24 hour labels, inner ring first."""
        hours = list(range(1, 13)) + [0] + list(range(13, 24))
        return [self._tick(hour, ClockMode.HOUR) for hour in hours]

    def minute_ticks(self) -> List[ClockTick]:
        """Labels every five minutes."""
        return [self._tick(minute, ClockMode.MINUTE) for minute in range(0, 60, 5)]

    def _tick(self, value: int, mode: ClockMode) -> ClockTick:
        x, y = self.time_to_point(value, mode)
        return ClockTick(
            value=value,
            ring=self.ring_for(value, mode),
            position=HandPosition(x=x, y=y),
        )
