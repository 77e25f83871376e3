"""Queue of user-interface events (pots, encoders, switches)."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum

from palkit.op import u8_shift_left4, u8_shift_right4
from palkit.ring_buffer import BufferEmptyError, RingBuffer

__all__ = ["ControlType", "Event", "EventQueue"]


class ControlType(IntEnum):
    """Kind of control that produced an event."""

    POT = 0
    ENCODER = 1
    ENCODER_CLICK = 2
    SWITCH = 3


@dataclass(frozen=True)
class Event:
    """A single control event."""

    control_type: int
    control_id: int
    value: int


def _default_clock() -> int:
    return int(time.monotonic() * 1000)


class EventQueue:
    """Buffer of packed control events plus an idle-time tracker.

    Each event is packed in 16 bits: the control type in the high nibble and
    the control id in the low nibble of the first byte, the value in the
    second. ``clock`` returns the current time in milliseconds.
    """

    def __init__(
        self, size: int = 32, clock: Callable[[], int] | None = None
    ) -> None:
        self._events = RingBuffer(size)
        self._clock = clock if clock is not None else _default_clock
        self._last_event_time = 0

    def flush(self) -> None:
        """Drop every pending event."""
        self._events.flush()

    def add_event(self, control_type: int, control_id: int, value: int) -> None:
        """Queue an event, overwriting without checking for room."""
        low = u8_shift_left4(control_type) | (control_id & 0x0F)
        self._events.overwrite(low | ((value & 0xFF) << 8))

    def available(self) -> int:
        """Number of events waiting."""
        return self._events.readable()

    def _elapsed_ms(self) -> int:
        return ((self._clock() - self._last_event_time) & 0xFFFFFFFF) & 0xFFFF

    def idle_time(self) -> int:
        """Time since the last touch, in units of 256 ms."""
        return self._elapsed_ms() >> 8

    def idle_time_ms(self) -> int:
        """Time since the last touch in milliseconds, wrapped to 16 bits."""
        return self._elapsed_ms()

    def touch(self) -> None:
        """Record activity at the current time."""
        self._last_event_time = self._clock()

    def pull_event(self) -> Event:
        """Remove and return the oldest event."""
        if not self._events.readable():
            raise BufferEmptyError("no event pending")
        packed = self._events.immediate_read()
        low = packed & 0xFF
        kind = u8_shift_right4(low)
        try:
            kind = ControlType(kind)
        except ValueError:
            pass
        return Event(kind, low & 0x0F, (packed >> 8) & 0xFF)