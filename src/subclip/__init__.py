"""
Cut time windows out of subtitle tracks.

The core (``timecode``, ``windows``, ``trim``) is pure and synchronous; the
``srt`` codec and the typer ``cli`` wrap it for files and pipes.
"""
from __future__ import annotations

__version__ = "0.3.0"
