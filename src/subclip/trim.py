"""Cut windows out of a subtitle track."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from subclip.subtitle_types import Cue, Track
from subclip.timecode import ZERO, TimeSpan
from subclip.windows import Block, Window, validate_blocks, validate_window

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Single:
    window: Window


@dataclass(frozen=True)
class Multiple:
    blocks: Tuple[Block, ...]


WindowRequest = Union[Single, Multiple]


def trim_cues(cues: Iterable[Cue], window: Window) -> List[Cue]:
    """
    Shift cues by ``window.start`` and keep what falls inside ``window.extent``.

    Both window edges are exclusive: a cue ending exactly at the window start
    and a cue starting exactly at the window end are dropped. A zero-length
    cue sitting exactly on the window start is kept. Straddling cues
    are clamped to ``[0, extent]``. Input order is kept and input cues are
    never modified.
    """
    kept: List[Cue] = []
    for cue in cues:
        shifted = cue.span - window.start
        start, end = shifted.start, shifted.end
        ends_before = end.is_negative() or (end == ZERO and start.is_negative())
        if ends_before or start >= window.extent:
            continue
        start = start.clamp(ZERO, window.extent)
        end = end.clamp(ZERO, window.extent)
        kept.append(Cue(TimeSpan(start, end), cue.text or ""))
    return kept


def extract(track: Track, request: WindowRequest) -> Track:
    """
    Build a new track from one window or from a list of blocks.

    Blocks are validated before any trimming. Each block is re-based to its
    own zero and the per-block results are concatenated in block order.
    """
    if isinstance(request, Single):
        window = validate_window(request.window)
        result = trim_cues(track, window)
        logger.debug("window trimmed", extra={"data": {"window": str(window), "kept": len(result)}})
        return result

    if isinstance(request, Multiple):
        windows = validate_blocks(request.blocks)
        combined: Track = []
        for block, window in zip(request.blocks, windows):
            kept = trim_cues(track, window)
            logger.debug("block trimmed", extra={"data": {"block": str(block), "kept": len(kept)}})
            combined.extend(kept)
        return combined

    raise TypeError(f"unsupported window request: {request!r}")
