"""Small fixed-size map from note numbers to byte values."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["NoteMapEntry", "NoteMap"]

_EMPTY = 0xFF


@dataclass
class NoteMapEntry:
    """One slot of a :class:`NoteMap`; 0xff marks an unused note."""

    note: int = _EMPTY
    value: int = _EMPTY


class NoteMap:
    """Fixed number of note/value slots; the first slot is reused when full."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"note map size must be positive, got {size}")
        self._entries = [NoteMapEntry() for _ in range(size)]

    def put(self, note: int, value: int) -> None:
        """Set the value for ``note``, reusing its slot if it has one."""
        entry = self.find(note) or self.find(_EMPTY) or self._entries[0]
        entry.note = note
        entry.value = value

    def find(self, note: int) -> NoteMapEntry | None:
        """Return the slot holding ``note``, or ``None``."""
        return next((e for e in self._entries if e.note == note), None)