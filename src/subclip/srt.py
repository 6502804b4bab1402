"""SubRip (.srt) reading and writing."""

from __future__ import annotations

import re
from typing import List

from subclip import config
from subclip.errors import FormatError
from subclip.subtitle_types import Cue, Track
from subclip.timecode import MILLIS_PER_SECOND, TimePoint, TimeSpan

_STAMP = r"(\d+):(\d{1,2}):(\d{1,2})[,.](\d{1,3})"
TIMING_PATTERN = re.compile(rf"^\s*{_STAMP}\s*-->\s*{_STAMP}")
BLOCK_SEPARATOR = re.compile(r"\n[ \t]*\n")


def _stamp_to_point(hours: str, minutes: str, seconds: str, fraction: str) -> TimePoint:
    millis = int(fraction.ljust(3, "0"))
    total = (int(hours) * 3600 + int(minutes) * 60 + int(seconds)) * MILLIS_PER_SECOND
    return TimePoint(total + millis)


def _parse_block(block: str, number: int) -> Cue:
    lines = block.split("\n")
    if not TIMING_PATTERN.match(lines[0]):
        index_line = lines.pop(0).strip()
        if not index_line.isdigit():
            raise FormatError(f"expected a cue index, got {index_line!r}", block=number)
    if not lines:
        raise FormatError("missing timing line", block=number)

    match = TIMING_PATTERN.match(lines[0])
    if not match:
        raise FormatError(f"invalid timing line {lines[0]!r}", block=number)
    groups = match.groups()
    span = TimeSpan(_stamp_to_point(*groups[:4]), _stamp_to_point(*groups[4:]))

    text_lines = [line.rstrip() for line in lines[1:]]
    text = "\n".join(text_lines) if text_lines else None
    return Cue(span, text)


def parse(raw: bytes) -> Track:
    """
    Parse SRT bytes into a track.

    Cue indices are read but not trusted; cues keep file order.
    """
    try:
        decoded = raw.decode(config.INPUT_ENCODING)
    except UnicodeDecodeError as exc:
        raise FormatError(f"input is not valid UTF-8: {exc}") from exc

    normalized = decoded.replace("\r\n", "\n").replace("\r", "\n").strip()
    if not normalized:
        return []

    return [
        _parse_block(block.strip("\n"), number)
        for number, block in enumerate(BLOCK_SEPARATOR.split(normalized), start=1)
    ]


def format_timestamp(point: TimePoint) -> str:
    if point.is_negative():
        raise FormatError(f"cannot write negative timestamp {point}")
    total_seconds, millis = divmod(point.millis, MILLIS_PER_SECOND)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours:02d}:{minutes:02d}:{seconds:02d},{millis:03d}"


def serialize(track: Track) -> bytes:
    lines: List[str] = []
    for idx, cue in enumerate(track, start=1):
        lines.append(str(idx))
        lines.append(f"{format_timestamp(cue.start)} --> {format_timestamp(cue.end)}")

        # A blank line inside the text would end the cue early
        safe_text = re.sub(r"\n\s*\n", "\n", (cue.text or "").strip("\n"))
        if safe_text:
            lines.append(safe_text)
        lines.append("")  # blank line separator
    return "\n".join(lines).encode(config.OUTPUT_ENCODING)
