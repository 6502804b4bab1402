"""Shared types for subtitle tracks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from subclip.timecode import TimePoint, TimeSpan


@dataclass(frozen=True)
class Cue:
    span: TimeSpan
    text: Optional[str] = None

    @classmethod
    def from_seconds(cls, start: float, end: float, text: Optional[str] = None) -> "Cue":
        return cls(TimeSpan(TimePoint.from_seconds(start), TimePoint.from_seconds(end)), text)

    @property
    def start(self) -> TimePoint:
        return self.span.start

    @property
    def end(self) -> TimePoint:
        return self.span.end


# Cues in the order the codec produced them; not assumed sorted or disjoint.
Track = List[Cue]
