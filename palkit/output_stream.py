"""Byte output stream with text and decimal number formatting."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

__all__ = ["EndOfLine", "OutputStream"]


class EndOfLine(Enum):
    """Marker that writes a carriage return and a line feed."""

    ENDL = 0


class OutputStream:
    """Formats values and hands the resulting bytes to ``write`` one by one.

    Strings are written character by character, ``bytes`` are written raw,
    integers in decimal, and :attr:`EndOfLine.ENDL` as ``\\r\\n``. Supports
    chaining with ``<<``.
    """

    def __init__(self, write: Callable[[int], object]) -> None:
        self._write = write

    def print(self, value: object) -> None:
        """Write one value."""
        if isinstance(value, EndOfLine):
            data = b"\r\n"
        elif isinstance(value, str):
            data = value.encode("latin-1")
        elif isinstance(value, (bytes, bytearray)):
            data = bytes(value)
        elif isinstance(value, int) and not isinstance(value, bool):
            data = str(value).encode("ascii")
        else:
            raise TypeError(f"cannot print value of type {type(value).__name__}")
        for byte in data:
            self._write(byte)

    def __lshift__(self, value: object) -> OutputStream:
        self.print(value)
        return self