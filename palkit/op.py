"""Fixed-point arithmetic helpers on 8-, 16- and 24-bit integers.

Every function coerces its arguments to the integer width named in its
prefix (``u8`` is unsigned 8 bits, ``s16`` signed 16 bits, and so on) and
returns a result in the width the operation produces, wrapping the way a
fixed-width machine register does.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

__all__ = [
    "Uint24",
    "clip",
    "s16_clip_u14",
    "u8_add_clip",
    "s16_shift_right8",
    "u24_add_c",
    "u24_add",
    "u24_sub",
    "u24_shift_right",
    "u24_shift_left",
    "s16_clip_u8",
    "s16_clip_s8",
    "u8_mix",
    "u8_mix_gains",
    "s8_mix",
    "u8_mix_u16",
    "u8u4_mix_u8",
    "u8u4_mix_u12",
    "u8_shift_left4",
    "u8_swap4",
    "u8_shift_right4",
    "u16_shift_right4",
    "u8u8_mul_shift8",
    "s8u8_mul_shift8",
    "s8u8_mul",
    "s8s8_mul",
    "u8u8_mul",
    "s8s8_mul_shift8",
    "u14_shift_right6",
    "u15_shift_right7",
    "s16u16_mul_shift16",
    "u16u16_mul_shift16",
    "s16u8_mul_shift8",
    "u16u8_mul_shift8",
    "s16s8_mul_shift8",
    "interpolate_sample",
]


def _u8(value: int) -> int:
    return value & 0xFF


def _s8(value: int) -> int:
    value &= 0xFF
    return value - 0x100 if value & 0x80 else value


def _u16(value: int) -> int:
    return value & 0xFFFF


def _s16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


_U24_MASK = 0xFFFFFF


@dataclass(frozen=True)
class Uint24:
    """A 24-bit unsigned fixed-point value: 16 integral and 8 fractional bits.

    ``carry`` is only set by :func:`u24_add_c`, to the bit that overflowed.
    """

    integral: int = 0
    fractional: int = 0
    carry: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "integral", _u16(self.integral))
        object.__setattr__(self, "fractional", _u8(self.fractional))
        object.__setattr__(self, "carry", 1 if self.carry else 0)

    @classmethod
    def from_value(cls, value: int) -> Uint24:
        """Build from a raw 24-bit integer (wrapping anything wider)."""
        value &= _U24_MASK
        return cls(value >> 8, value & 0xFF)

    @property
    def value(self) -> int:
        """The raw 24-bit integer, without the carry."""
        return (self.integral << 8) | self.fractional

    def __int__(self) -> int:
        return self.value


def clip(value: int, minimum: int, maximum: int) -> int:
    """Clamp ``value`` to the closed range ``[minimum, maximum]``."""
    if value < minimum:
        return minimum
    if value > maximum:
        return maximum
    return value


def s16_clip_u14(value: int) -> int:
    """Clamp a signed 16-bit value to the unsigned 14-bit range."""
    msb = _u16(value) >> 8
    if msb & 0x80:
        return 0
    if msb & 0x40:
        return 16383
    return _s16(value)


def u8_add_clip(value: int, increment: int, maximum: int) -> int:
    """Add with 8-bit wrap-around, then cap the sum at ``maximum``."""
    total = _u8(_u8(value) + _u8(increment))
    return min(total, _u8(maximum))


def s16_shift_right8(value: int) -> int:
    """High byte of a 16-bit value; meaningful only for positive inputs."""
    return _u16(value) >> 8


def u24_add_c(a: Uint24, b: Uint24) -> Uint24:
    """24-bit addition that reports the overflow bit in ``carry``."""
    total = a.value + b.value
    result = Uint24.from_value(total)
    return Uint24(result.integral, result.fractional, total > _U24_MASK)


def u24_add(a: Uint24, b: Uint24) -> Uint24:
    """24-bit addition, wrapping on overflow."""
    return Uint24.from_value(a.value + b.value)


def u24_sub(a: Uint24, b: Uint24) -> Uint24:
    """24-bit subtraction, wrapping on underflow."""
    return Uint24.from_value(a.value - b.value)


def u24_shift_right(a: Uint24) -> Uint24:
    """Logical shift right by one bit."""
    return Uint24.from_value(a.value >> 1)


def u24_shift_left(a: Uint24) -> Uint24:
    """Shift left by one bit, dropping the top bit."""
    return Uint24.from_value(a.value << 1)


def s16_clip_u8(value: int) -> int:
    """Clamp a signed 16-bit value to 0..255."""
    return clip(_s16(value), 0, 255)


def s16_clip_s8(value: int) -> int:
    """Clamp a signed 16-bit value to -128..127."""
    return clip(_s16(value), -128, 127)


def u8_mix(a: int, b: int, balance: int) -> int:
    """Crossfade two bytes: ``balance`` 0 favours ``a``, 255 favours ``b``."""
    return u8_mix_u16(a, b, balance) >> 8


def u8_mix_gains(a: int, b: int, gain_a: int, gain_b: int) -> int:
    """Weighted sum of two bytes with independent 8-bit gains."""
    total = _u8(a) * _u8(gain_a) + _u8(b) * _u8(gain_b)
    return _u8(_u16(total) >> 8)


def s8_mix(a: int, b: int, gain_a: int, gain_b: int) -> int:
    """Weighted sum of two signed bytes with unsigned 8-bit gains."""
    total = _s8(a) * _u8(gain_a) + _s8(b) * _u8(gain_b)
    return _s8(_u16(total) >> 8)


def u8_mix_u16(a: int, b: int, balance: int) -> int:
    """Crossfade two bytes, keeping the full 16-bit result."""
    balance = _u8(balance)
    return _u8(a) * (255 - balance) + _u8(b) * balance


def u8u4_mix_u8(a: int, b: int, balance: int) -> int:
    """Crossfade two bytes with a 4-bit balance (0..15)."""
    return _u8(u8u4_mix_u12(a, b, balance) >> 4)


def u8u4_mix_u12(a: int, b: int, balance: int) -> int:
    """Crossfade two bytes with a 4-bit balance, keeping 12 bits."""
    balance = _u8(balance)
    return _u16(_u8(a) * _u8(15 - balance) + _u8(b) * balance)


def u8_shift_left4(a: int) -> int:
    """Shift a byte left by four bits."""
    return _u8(_u8(a) << 4)


def u8_swap4(a: int) -> int:
    """Swap the two nibbles of a byte."""
    a = _u8(a)
    return _u8((a << 4) | (a >> 4))


def u8_shift_right4(a: int) -> int:
    """Shift a byte right by four bits."""
    return _u8(a) >> 4


def u16_shift_right4(a: int) -> int:
    """Shift a 16-bit value right by four bits."""
    return _u16(a) >> 4


def u8u8_mul_shift8(a: int, b: int) -> int:
    """High byte of the product of two unsigned bytes."""
    return u8u8_mul(a, b) >> 8


def s8u8_mul_shift8(a: int, b: int) -> int:
    """High byte of a signed-by-unsigned byte product."""
    return _s8(s8u8_mul(a, b) >> 8)


def s8u8_mul(a: int, b: int) -> int:
    """Product of a signed and an unsigned byte."""
    return _s8(a) * _u8(b)


def s8s8_mul(a: int, b: int) -> int:
    """Product of two signed bytes."""
    return _s16(_s8(a) * _s8(b))


def u8u8_mul(a: int, b: int) -> int:
    """Product of two unsigned bytes."""
    return _u8(a) * _u8(b)


def s8s8_mul_shift8(a: int, b: int) -> int:
    """High byte of the product of two signed bytes."""
    return _s8(s8s8_mul(a, b) >> 8)


def u14_shift_right6(value: int) -> int:
    """Reduce a 14-bit value to 8 bits."""
    return _u8(_u16(value) >> 6)


def u15_shift_right7(value: int) -> int:
    """Reduce a 15-bit value to 8 bits."""
    return _u8(_u16(value) >> 7)


def s16u16_mul_shift16(a: int, b: int) -> int:
    """High 16 bits of a signed-by-unsigned 16-bit product."""
    return _s16((_s16(a) * _u16(b)) >> 16)


def u16u16_mul_shift16(a: int, b: int) -> int:
    """High 16 bits of the product of two unsigned 16-bit values."""
    return _u16((_u16(a) * _u16(b)) >> 16)


def s16u8_mul_shift8(a: int, b: int) -> int:
    """Scale a signed 16-bit value by an unsigned byte over 256."""
    return _s16((_s16(a) * _u8(b)) >> 8)


def u16u8_mul_shift8(a: int, b: int) -> int:
    """Scale an unsigned 16-bit value by an unsigned byte over 256."""
    return _u16((_u16(a) * _u8(b)) >> 8)


def s16s8_mul_shift8(a: int, b: int) -> int:
    """Scale a signed 16-bit value by a signed byte over 256."""
    return _s16((_s16(a) * _s8(b)) >> 8)


def interpolate_sample(table: Sequence[int], phase: int) -> int:
    """Linearly interpolate a byte table at a 8.8 fixed-point ``phase``.

    The high byte of ``phase`` selects the sample, the low byte blends it
    with the next one. The table must hold the sample after the last index
    reached; otherwise :class:`IndexError` is raised.
    """
    phase = _u16(phase)
    index = phase >> 8
    return u8_mix(table[index], table[index + 1], phase & 0xFF)