"""Error types raised by the subclip core and codec."""

from __future__ import annotations


class SubclipError(Exception):
    """Base error for subclip."""


class InvalidWindowError(SubclipError, ValueError):
    """Raised when a requested window or block list is not well-formed."""

    def __init__(self, message: str, *, index: int | None = None, block: str | None = None):
        self.index = index
        self.block = block
        if index is not None and block is not None:
            message = f"block {index} ({block}): {message}"
        super().__init__(message)


class FormatError(SubclipError):
    """Raised when subtitle data cannot be parsed or serialized."""

    def __init__(self, message: str, *, block: int | None = None):
        self.block = block
        if block is not None:
            message = f"subtitle block {block}: {message}"
        super().__init__(message)
