"""Millisecond time arithmetic for subtitle timelines."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

MILLIS_PER_SECOND = 1000


def to_millis(seconds: float) -> int:
    """
    Convert seconds to integer milliseconds, truncating toward zero.

    The decimal text of ``seconds`` is truncated rather than the binary float
    product, so ``5.3`` becomes 5300 and not 5299. Callers must pass a finite
    number: infinity raises ``OverflowError`` and NaN raises ``ValueError``.
    A window meant to cover a whole track should use an extent longer than
    the track rather than ``math.inf``.
    """
    return int(Decimal(repr(seconds)) * MILLIS_PER_SECOND)


def _format_millis(millis: int) -> str:
    sign = "-" if millis < 0 else ""
    whole, frac = divmod(abs(millis), MILLIS_PER_SECOND)
    return f"{sign}{whole}.{frac:03d}s"


@dataclass(frozen=True, order=True)
class TimeOffset:
    """Signed duration used to shift time points."""

    millis: int

    @classmethod
    def from_components(cls, seconds: int = 0, millis: int = 0) -> "TimeOffset":
        return cls(seconds * MILLIS_PER_SECOND + millis)

    @classmethod
    def from_seconds(cls, value: float) -> "TimeOffset":
        return cls(to_millis(value))

    @property
    def seconds(self) -> float:
        return self.millis / MILLIS_PER_SECOND

    def is_negative(self) -> bool:
        return self.millis < 0

    def __str__(self) -> str:
        return _format_millis(self.millis)


@dataclass(frozen=True, order=True)
class TimePoint:
    """
    An instant on a track timeline.

    Points may be negative while a cue is being shifted; anything that
    leaves the trimmer has been clamped to ``ZERO`` or later.
    """

    millis: int

    @classmethod
    def from_components(cls, seconds: int = 0, millis: int = 0) -> "TimePoint":
        return cls(seconds * MILLIS_PER_SECOND + millis)

    @classmethod
    def from_seconds(cls, value: float) -> "TimePoint":
        return cls(to_millis(value))

    @property
    def seconds(self) -> float:
        return self.millis / MILLIS_PER_SECOND

    def is_negative(self) -> bool:
        return self.millis < 0

    def clamp(self, low: "TimePoint", high: "TimePoint") -> "TimePoint":
        if self < low:
            return low
        if self > high:
            return high
        return self

    def __sub__(self, other):
        if isinstance(other, TimeOffset):
            return TimePoint(self.millis - other.millis)
        if isinstance(other, TimePoint):
            return TimeOffset(self.millis - other.millis)
        return NotImplemented

    def __str__(self) -> str:
        return _format_millis(self.millis)


ZERO = TimePoint(0)


@dataclass(frozen=True)
class TimeSpan:
    """A cue's on-screen interval; ``start <= end`` for well-formed cues."""

    start: TimePoint
    end: TimePoint

    def __sub__(self, offset: TimeOffset) -> "TimeSpan":
        if isinstance(offset, TimeOffset):
            return TimeSpan(self.start - offset, self.end - offset)
        return NotImplemented
