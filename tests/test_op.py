import pytest

from palkit.op import (
    Uint24,
    clip,
    interpolate_sample,
    s8_mix,
    s8s8_mul,
    s8s8_mul_shift8,
    s8u8_mul,
    s8u8_mul_shift8,
    s16_clip_s8,
    s16_clip_u8,
    s16_clip_u14,
    s16_shift_right8,
    s16s8_mul_shift8,
    s16u8_mul_shift8,
    s16u16_mul_shift16,
    u8_add_clip,
    u8_mix,
    u8_mix_gains,
    u8_mix_u16,
    u8_shift_left4,
    u8_shift_right4,
    u8_swap4,
    u8u4_mix_u8,
    u8u4_mix_u12,
    u8u8_mul,
    u8u8_mul_shift8,
    u14_shift_right6,
    u15_shift_right7,
    u16_shift_right4,
    u16u8_mul_shift8,
    u16u16_mul_shift16,
    u24_add,
    u24_add_c,
    u24_shift_left,
    u24_shift_right,
    u24_sub,
)

BYTES = [0, 1, 7, 64, 127, 128, 200, 255]
SIGNED_BYTES = [-128, -100, -1, 0, 1, 50, 127]
WORDS = [0, 1, 255, 256, 4095, 16383, 32767, 40000, 65535]


@pytest.mark.parametrize("value", [-50, 0, 5, 10, 99])
def test_clip_stays_in_range(value):
    result = clip(value, 0, 10)
    assert 0 <= result <= 10
    if 0 <= value <= 10:
        assert result == value


def test_s16_clip_u14_bounds():
    assert s16_clip_u14(-1) == 0
    assert s16_clip_u14(-32768) == 0
    assert s16_clip_u14(32767) == 16383
    assert s16_clip_u14(16383) == 16383
    assert s16_clip_u14(1234) == 1234


def test_u8_add_clip_caps_at_maximum():
    assert u8_add_clip(100, 50, 120) == 120
    assert u8_add_clip(10, 5, 120) == u8_add_clip(5, 10, 120)


def test_u8_add_clip_wraps_before_clipping():
    assert u8_add_clip(250, 10, 255) == 4


@pytest.mark.parametrize("value", WORDS[:7])
def test_s16_shift_right8_matches_high_byte(value):
    assert s16_shift_right8(value) == u16_shift_right4(value) >> 4


def test_uint24_round_trip():
    value = Uint24.from_value(0x123456)
    assert value.integral == 0x1234
    assert value.fractional == 0x56
    assert int(value) == 0x123456


@pytest.mark.parametrize("a", [0, 1, 0x00FFFF, 0x7FFFFF, 0xFFFFFF])
@pytest.mark.parametrize("b", [0, 1, 0x000100, 0x800000])
def test_u24_add_then_sub_round_trip(a, b):
    ua, ub = Uint24.from_value(a), Uint24.from_value(b)
    assert u24_sub(u24_add(ua, ub), ub) == ua


def test_u24_add_c_reports_overflow():
    top = Uint24.from_value(0xFFFFFF)
    one = Uint24.from_value(1)
    result = u24_add_c(top, one)
    assert result.value == 0
    assert result.carry == 1
    assert u24_add(top, one).carry == 0


def test_u24_add_c_no_overflow():
    a, b = Uint24.from_value(0x1000), Uint24.from_value(0x2000)
    result = u24_add_c(a, b)
    assert result.carry == 0
    assert result.value == u24_add(a, b).value


@pytest.mark.parametrize("value", [0, 1, 0x123456, 0x800000, 0xFFFFFF])
def test_u24_shifts(value):
    a = Uint24.from_value(value)
    assert u24_shift_right(u24_shift_left(a)).value == value & 0x7FFFFF
    assert u24_shift_left(u24_shift_right(a)).value == value & 0xFFFFFE


def test_s16_clip_u8():
    assert s16_clip_u8(-5) == 0
    assert s16_clip_u8(300) == 255
    assert s16_clip_u8(77) == 77


def test_s16_clip_s8():
    assert s16_clip_s8(-1000) == -128
    assert s16_clip_s8(1000) == 127
    assert s16_clip_s8(-77) == -77


@pytest.mark.parametrize("a", BYTES)
@pytest.mark.parametrize("b", BYTES)
@pytest.mark.parametrize("balance", [0, 1, 128, 255])
def test_u8_mix_consistency(a, b, balance):
    mixed = u8_mix(a, b, balance)
    assert mixed == u8_mix_u16(a, b, balance) >> 8
    assert mixed == u8_mix_gains(a, b, 255 - balance, balance)
    assert mixed <= max(a, b)


@pytest.mark.parametrize("a", BYTES)
def test_u8_mix_of_equal_values_never_exceeds(a):
    for balance in (0, 100, 255):
        assert a - 1 <= u8_mix(a, a, balance) <= a


@pytest.mark.parametrize("a", BYTES)
@pytest.mark.parametrize("b", BYTES)
@pytest.mark.parametrize("balance", [0, 5, 15])
def test_u8u4_mix(a, b, balance):
    wide = u8u4_mix_u12(a, b, balance)
    assert u8u4_mix_u8(a, b, balance) == wide >> 4
    assert u8u4_mix_u8(a, b, balance) <= max(a, b)


@pytest.mark.parametrize("a", SIGNED_BYTES)
@pytest.mark.parametrize("gain", [0, 1, 128, 255])
def test_s8_mix_single_gain_matches_mul_shift(a, gain):
    assert s8_mix(a, 99, gain, 0) == s8u8_mul_shift8(a, gain)
    assert s8_mix(99, a, 0, gain) == s8u8_mul_shift8(a, gain)


@pytest.mark.parametrize("a", BYTES)
def test_nibble_operations(a):
    assert u8_swap4(u8_swap4(a)) == a
    assert u8_shift_left4(u8_shift_right4(a)) == a & 0xF0
    assert u8_shift_right4(u8_swap4(a)) == a & 0x0F
    assert u8_shift_left4(a) | u8_shift_right4(a) == u8_swap4(a)


@pytest.mark.parametrize("a", BYTES)
@pytest.mark.parametrize("b", BYTES)
def test_unsigned_byte_products(a, b):
    assert u8u8_mul(a, b) == u8u8_mul(b, a)
    assert u8u8_mul_shift8(a, b) == u8u8_mul(a, b) >> 8
    assert u8u8_mul_shift8(a, b) <= min(a, b)


@pytest.mark.parametrize("a", BYTES)
def test_u8u8_mul_identity(a):
    assert u8u8_mul(a, 1) == a


@pytest.mark.parametrize("a", SIGNED_BYTES)
@pytest.mark.parametrize("b", BYTES)
def test_signed_unsigned_products(a, b):
    assert s8u8_mul_shift8(a, b) == s8u8_mul(a, b) >> 8
    assert -128 <= s8u8_mul_shift8(a, b) <= 127
    assert (s8u8_mul(a, b) < 0) == (a < 0 and b > 0)


@pytest.mark.parametrize("a", SIGNED_BYTES)
@pytest.mark.parametrize("b", SIGNED_BYTES)
def test_signed_products(a, b):
    assert s8s8_mul(a, b) == s8s8_mul(b, a)
    assert s8s8_mul_shift8(a, b) == s8s8_mul(a, b) >> 8
    assert -128 <= s8s8_mul_shift8(a, b) <= 127


def test_signed_byte_inputs_are_coerced():
    assert s8u8_mul(255, 1) == -1
    assert s8s8_mul(255, 255) == 1


@pytest.mark.parametrize("value", [0, 1, 63, 64, 1000, 16383])
def test_narrowing_shifts(value):
    assert u14_shift_right6(value) == u16_shift_right4(value) >> 2
    assert u15_shift_right7(value) == u14_shift_right6(value) >> 1


@pytest.mark.parametrize("a", WORDS)
def test_u16u16_mul_shift16(a):
    assert u16u16_mul_shift16(a, 0) == 0
    assert u16u16_mul_shift16(a, 0x8000) == a >> 1
    assert u16u16_mul_shift16(a, 0xFFFF) <= a


@pytest.mark.parametrize("a", WORDS)
def test_u16u8_mul_shift8(a):
    assert u16u8_mul_shift8(a, 0x80) == a >> 1
    assert u16u8_mul_shift8(a, 0xFF) <= a


def test_interpolate_sample_on_constant_table():
    table = bytes([200] * 4)
    for phase in (0, 0x0080, 0x01FF, 0x0200):
        assert 199 <= interpolate_sample(table, phase) <= 200


def test_interpolate_sample_matches_mix():
    table = bytes([0, 255, 10, 20])
    assert interpolate_sample(table, 0x0040) == u8_mix(0, 255, 0x40)
    assert interpolate_sample(table, 0x02C0) == u8_mix(10, 20, 0xC0)


def test_interpolate_sample_is_monotonic_on_ramp():
    table = bytes([0, 255])
    results = [interpolate_sample(table, phase) for phase in range(256)]
    assert results == sorted(results)
    assert results[0] == 0


def test_interpolate_sample_out_of_range():
    with pytest.raises(IndexError):
        interpolate_sample(bytes([1, 2]), 0x0100)