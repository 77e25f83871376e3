"""Fixed-capacity circular FIFO buffer.

The capacity is a power of two below 256. One slot is always kept free to
tell a full buffer from an empty one, so a buffer of size ``n`` holds at
most ``n - 1`` values.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    "BufferFullError",
    "BufferEmptyError",
    "RingBuffer",
    "data_type_bits_for_size",
]

_MAX_SIZE = 128
_BYTE_BITS = 8
_WORD_BITS = 16
_MAX_DATA_SIZE = 255


class BufferFullError(Exception):
    """Raised when writing to a buffer that has no free slot."""


class BufferEmptyError(Exception):
    """Raised when reading from a buffer that holds nothing."""


class RingBuffer:
    """Circular FIFO with separate read and write positions."""

    def __init__(self, size: int) -> None:
        if size < 1 or size > _MAX_SIZE or size & (size - 1):
            raise ValueError(
                f"buffer size must be a power of two from 1 to {_MAX_SIZE}, "
                f"got {size}"
            )
        self._size = size
        self._mask = size - 1
        self._buffer: list[Any] = [0] * size
        self._read_ptr = 0
        self._write_ptr = 0

    def capacity(self) -> int:
        """Number of slots, one of which always stays free."""
        return self._size

    def writable(self) -> int:
        """Number of values that can be written before the buffer is full."""
        return (self._read_ptr - self._write_ptr - 1) & self._mask

    def readable(self) -> int:
        """Number of values waiting to be read."""
        return (self._write_ptr - self._read_ptr) & self._mask

    def write(self, value: Any) -> None:
        """Append a value, raising :class:`BufferFullError` if full."""
        if not self.writable():
            raise BufferFullError("ring buffer is full")
        self.overwrite(value)

    def non_blocking_write(self, value: Any) -> bool:
        """Append a value if there is room; report whether it was written."""
        if self.writable():
            self.overwrite(value)
            return True
        return False

    def overwrite(self, value: Any) -> None:
        """Store a value at the write position without checking for room."""
        self._buffer[self._write_ptr] = value
        self._write_ptr = (self._write_ptr + 1) & self._mask

    def overwrite2(self, first: Any, second: Any) -> None:
        """Store two values without checking for room."""
        self._buffer[self._write_ptr] = first
        self._buffer[(self._write_ptr + 1) & self._mask] = second
        self._write_ptr = (self._write_ptr + 2) & self._mask

    def read(self) -> Any:
        """Remove and return the oldest value, raising if empty."""
        if not self.readable():
            raise BufferEmptyError("ring buffer is empty")
        return self.immediate_read()

    def non_blocking_read(self) -> Any | None:
        """Remove and return the oldest value, or ``None`` if empty."""
        if self.readable():
            return self.immediate_read()
        return None

    def immediate_read(self) -> Any:
        """Return the slot at the read position and advance, unchecked."""
        result = self._buffer[self._read_ptr]
        self._read_ptr = (self._read_ptr + 1) & self._mask
        return result

    def flush(self) -> None:
        """Discard every pending value."""
        self._write_ptr = self._read_ptr

    def __len__(self) -> int:
        return self.readable()


def data_type_bits_for_size(size: int) -> int:
    """Width in bits of the register type used for ``size``-bit data.

    Sizes from 1 to 8 bits fit a byte; every other size, zero included,
    uses a 16-bit word. ``size`` must be in the range 0 to 255.
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"data size must be an integer, got {size!r}")
    if not 0 <= size <= _MAX_DATA_SIZE:
        raise ValueError(
            f"data size must be from 0 to {_MAX_DATA_SIZE}, got {size}"
        )
    if 1 <= size <= _BYTE_BITS:
        return _BYTE_BITS
    return _WORD_BITS