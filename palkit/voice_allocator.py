"""Polyphonic voice allocation with least-recently-used voice stealing."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["MAX_POLYPHONY", "VoiceEntry", "VoiceAllocator"]

MAX_POLYPHONY = 20


@dataclass(frozen=True)
class VoiceEntry:
    """State of one voice: the note it last played and whether it sounds."""

    note: int = 0
    active: bool = False


class VoiceAllocator:
    """Assigns incoming notes to a fixed number of voices.

    A note already held by a voice retriggers that voice. Otherwise the
    least recently touched inactive voice is used, and when every voice is
    active the least recently touched one is stolen.
    """

    def __init__(self, size: int = 0) -> None:
        self._pool = [VoiceEntry() for _ in range(MAX_POLYPHONY)]
        self._lru: list[int] = []
        self._size = 0
        self.size = size
        self.clear()

    @property
    def size(self) -> int:
        """Number of voices in use."""
        return self._size

    @size.setter
    def size(self, size: int) -> None:
        if not 0 <= size <= MAX_POLYPHONY:
            raise ValueError(
                f"polyphony must be between 0 and {MAX_POLYPHONY}, got {size}"
            )
        self._size = size

    @property
    def voices(self) -> tuple[VoiceEntry, ...]:
        """State of the voices in use."""
        return tuple(self._pool[: self._size])

    def clear(self) -> None:
        """Silence every voice and reset the usage order."""
        self._pool = [VoiceEntry() for _ in range(MAX_POLYPHONY)]
        self._lru = list(reversed(range(MAX_POLYPHONY)))

    def note_on(self, note: int) -> int | None:
        """Pick a voice for ``note``; ``None`` if there are no voices."""
        if self._size == 0:
            return None

        voice = next(
            (i for i, entry in enumerate(self.voices) if entry.note == note),
            None,
        )
        if voice is None:
            idle = [
                v for v in self._lru if v < self._size and not self._pool[v].active
            ]
            if idle:
                voice = idle[-1]
        if voice is None:
            voice = [v for v in self._lru if v < self._size][-1]

        self._pool[voice] = VoiceEntry(note, True)
        self._touch(voice)
        return voice

    def note_off(self, note: int) -> int | None:
        """Release the voice playing ``note``; ``None`` if no voice has it."""
        voice = None
        for i, entry in enumerate(self.voices):
            if entry.note == note:
                voice = i
        if voice is not None:
            self._pool[voice] = VoiceEntry(self._pool[voice].note, False)
            self._touch(voice)
        return voice

    def _touch(self, voice: int) -> None:
        self._lru = [voice] + [v for v in self._lru if v != voice]