"""Window requests and their validation."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, Tuple

from subclip.errors import InvalidWindowError
from subclip.timecode import ZERO, TimeOffset, TimePoint

_NUMBER = r"\d+(?:\.\d*)?|\.\d+"
BLOCK_PATTERN = re.compile(rf"^\s*([+-]?(?:{_NUMBER}))\s*-\s*({_NUMBER})\s*$")


@dataclass(frozen=True)
class Window:
    """Keep ``extent`` worth of material beginning at ``start``, re-based to zero."""

    start: TimeOffset
    extent: TimePoint

    @classmethod
    def from_seconds(cls, start: float, duration: float) -> "Window":
        return cls(TimeOffset.from_seconds(start), TimePoint.from_seconds(duration))

    def __str__(self) -> str:
        return f"start={self.start} extent={self.extent}"


@dataclass(frozen=True)
class Block:
    """A ``(start, end)`` range in the original track's coordinates."""

    start: TimePoint
    end: TimePoint

    @classmethod
    def from_seconds(cls, start: float, end: float) -> "Block":
        return cls(TimePoint.from_seconds(start), TimePoint.from_seconds(end))

    def to_window(self) -> Window:
        return Window(self.start - ZERO, TimePoint((self.end - self.start).millis))

    def __str__(self) -> str:
        return f"{self.start}-{self.end}"


WindowSet = Tuple[Window, ...]


def parse_block(text: str) -> Block:
    """Parse ``"<start>-<end>"`` (seconds, fractions allowed) into a ``Block``."""
    match = BLOCK_PATTERN.match(text)
    if not match:
        raise ValueError(f"expected '<start>-<end>' in seconds, got {text!r}")
    start_raw, end_raw = match.groups()
    return Block.from_seconds(float(start_raw), float(end_raw))


def validate_window(window: Window) -> Window:
    if window.extent <= ZERO:
        raise InvalidWindowError(f"duration must be positive, got {window.extent}")
    return window


def validate_blocks(blocks: Iterable[Block]) -> WindowSet:
    """
    Check that blocks are non-empty, increasing and disjoint.

    Touching blocks (``next.start == previous.end``) are accepted. Validation
    stops at the first offending block.
    """
    windows = []
    previous_end: TimePoint | None = None
    for index, block in enumerate(blocks, start=1):
        if not block.start < block.end:
            raise InvalidWindowError(
                "start must be before end", index=index, block=str(block)
            )
        if previous_end is not None and block.start < previous_end:
            raise InvalidWindowError(
                f"overlaps or precedes the previous block ending at {previous_end}",
                index=index,
                block=str(block),
            )
        windows.append(block.to_window())
        previous_end = block.end

    if not windows:
        raise InvalidWindowError("at least one block is required")
    return tuple(windows)
