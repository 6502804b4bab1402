from __future__ import annotations

import math

import pytest

from subclip.timecode import ZERO, TimeOffset, TimePoint, TimeSpan, to_millis


@pytest.mark.parametrize(
    ("seconds", "millis"),
    [
        (0, 0),
        (5, 5000),
        (5.3, 5300),
        (1.0019, 1001),
        (-1.5, -1500),
        (-0.0004, 0),
        (3599.999, 3599999),
    ],
)
def test_to_millis_truncates_toward_zero(seconds: float, millis: int) -> None:
    assert to_millis(seconds) == millis


@pytest.mark.parametrize("seconds", [math.inf, -math.inf, math.nan])
def test_to_millis_rejects_non_finite(seconds: float) -> None:
    with pytest.raises((OverflowError, ValueError)):
        to_millis(seconds)


def test_from_components_combines_seconds_and_millis() -> None:
    assert TimePoint.from_components(2, 250) == TimePoint(2250)
    assert TimeOffset.from_components(-1, -500) == TimeOffset(-1500)


def test_subtracting_offset_can_go_negative() -> None:
    shifted = TimePoint.from_seconds(2.0) - TimeOffset.from_seconds(5.0)
    assert shifted == TimePoint(-3000)
    assert shifted.is_negative()
    assert not ZERO.is_negative()


def test_subtracting_points_gives_offset() -> None:
    delta = TimePoint(9000) - TimePoint(6000)
    assert isinstance(delta, TimeOffset)
    assert delta.millis == 3000


def test_negative_offset_shifts_later() -> None:
    assert TimePoint(1000) - TimeOffset.from_seconds(-2) == TimePoint(3000)


def test_points_are_ordered() -> None:
    assert TimePoint(1) < TimePoint(2)
    assert max(TimePoint(5), TimePoint(3)) == TimePoint(5)
    assert sorted([TimePoint(3), ZERO, TimePoint(-1)]) == [TimePoint(-1), ZERO, TimePoint(3)]


def test_clamp_bounds_point() -> None:
    high = TimePoint(5000)
    assert TimePoint(-20).clamp(ZERO, high) == ZERO
    assert TimePoint(7000).clamp(ZERO, high) == high
    assert TimePoint(2500).clamp(ZERO, high) == TimePoint(2500)


def test_span_shift_moves_both_ends() -> None:
    span = TimeSpan(TimePoint(6000), TimePoint(9000)) - TimeOffset(5000)
    assert span == TimeSpan(TimePoint(1000), TimePoint(4000))


def test_str_formats_seconds() -> None:
    assert str(TimePoint(5300)) == "5.300s"
    assert str(TimeOffset(-1500)) == "-1.500s"
    assert TimePoint(2500).seconds == 2.5
