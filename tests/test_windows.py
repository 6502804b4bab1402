from __future__ import annotations

import pytest

from subclip.errors import InvalidWindowError
from subclip.timecode import TimeOffset, TimePoint
from subclip.windows import Block, Window, parse_block, validate_blocks, validate_window


def _blocks(*pairs: tuple[float, float]) -> list[Block]:
    return [Block.from_seconds(start, end) for start, end in pairs]


def test_validate_blocks_rejects_non_increasing() -> None:
    with pytest.raises(InvalidWindowError) as excinfo:
        validate_blocks(_blocks((5, 10), (3, 8)))

    assert excinfo.value.index == 2
    assert "overlaps" in str(excinfo.value)
    assert "block 2" in str(excinfo.value)


def test_validate_blocks_accepts_touching() -> None:
    windows = validate_blocks(_blocks((5, 10), (10, 15)))
    assert len(windows) == 2


def test_validate_blocks_rejects_zero_length() -> None:
    with pytest.raises(InvalidWindowError) as excinfo:
        validate_blocks(_blocks((5, 5)))

    assert excinfo.value.index == 1
    assert "start must be before end" in str(excinfo.value)


def test_validate_blocks_rejects_inverted() -> None:
    with pytest.raises(InvalidWindowError):
        validate_blocks(_blocks((0, 2), (9, 6)))


def test_validate_blocks_stops_at_first_failure() -> None:
    with pytest.raises(InvalidWindowError) as excinfo:
        validate_blocks(_blocks((0, 2), (1, 3), (4, 4)))

    assert excinfo.value.index == 2


def test_validate_blocks_rejects_empty() -> None:
    with pytest.raises(InvalidWindowError):
        validate_blocks([])


def test_validate_blocks_uses_true_duration_as_extent() -> None:
    windows = validate_blocks(_blocks((0, 2), (6, 9)))

    assert windows[0] == Window(TimeOffset(0), TimePoint(2000))
    assert windows[1] == Window(TimeOffset(6000), TimePoint(3000))


def test_validate_window_rejects_non_positive_duration() -> None:
    with pytest.raises(InvalidWindowError):
        validate_window(Window.from_seconds(5, 0))
    with pytest.raises(InvalidWindowError):
        validate_window(Window.from_seconds(5, -1))

    window = Window.from_seconds(-2, 0.5)
    assert validate_window(window) is window


def test_invalid_window_error_is_value_error() -> None:
    assert issubclass(InvalidWindowError, ValueError)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("5-10", (5000, 10000)),
        ("0.5-2.25", (500, 2250)),
        (" 3 - 4 ", (3000, 4000)),
        ("-2-3", (-2000, 3000)),
        (".5-1", (500, 1000)),
    ],
)
def test_parse_block(text: str, expected: tuple[int, int]) -> None:
    block = parse_block(text)
    assert (block.start.millis, block.end.millis) == expected


@pytest.mark.parametrize("text", ["", "5", "5-", "a-b", "5-10-15", "5:10"])
def test_parse_block_rejects_malformed(text: str) -> None:
    with pytest.raises(ValueError):
        parse_block(text)
