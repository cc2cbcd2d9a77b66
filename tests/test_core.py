"""Test the bit-wise integer square root algorithm"""
import math

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st

from intsqrt.core import NegativeNumberError, _steps, isqrt_bits


@pytest.mark.parametrize(
    'n, expected',
    [
        (0, 0),
        (1, 1),
        (2, 1),
        (3, 1),
        (4, 2),
        (8, 2),
        (9, 3),
        (63, 7),
        (64, 8),
        (80, 8),
        (81, 9),
        (254, 15),
        (255, 15),
    ],
)
def test_isqrt_bits_8(n, expected):
    assert isqrt_bits(n, 8) == expected


def test_isqrt_bits_exhaustive_16():
    """Compare all 16-bit values against math.isqrt"""
    for n in range(1 << 16):
        assert isqrt_bits(n, 16) == math.isqrt(n)


@pytest.mark.parametrize('bits', [2, 4, 8, 16, 32, 64, 128, 256])
def test_isqrt_bits_max(bits):
    """Test that the maximum value of each width has the expected root"""
    n = (1 << bits) - 1
    assert isqrt_bits(n, bits) == (1 << (bits // 2)) - 1
    assert isqrt_bits(n - 1, bits) == (1 << (bits // 2)) - 1


@pytest.mark.parametrize('bits', [1, 3, 7, 63, 127])
def test_isqrt_bits_odd_width(bits):
    for n in (0, 1, 1 << (bits - 1), (1 << bits) - 1):
        assert isqrt_bits(n, bits) == math.isqrt(n)


def test_isqrt_bits_independent_of_width():
    """The root of a value does not depend on the width it is stored in"""
    for n in (0, 1, 2, 99, 100, 101, 224, 225, 255):
        assert isqrt_bits(n, 8) == isqrt_bits(n, 64) == isqrt_bits(n, 128)


def test_isqrt_bits_large_squares():
    """Test perfect squares and their neighbors close to 2**64 and 2**128"""
    for bits in (64, 128):
        for k in (
            (1 << (bits // 2)) - 1,
            (1 << (bits // 2)) - 2,
            3037000499,
            10 ** (bits // 8),
        ):
            assert isqrt_bits(k * k, bits) == k
            assert isqrt_bits(k * k - 1, bits) == k - 1
            assert isqrt_bits(k * k + 1, bits) == k


def _peak(n, bits):
    """Largest intermediate value of the extraction of the root of `n`"""
    peak = 0
    for remainder, result, bit in _steps(n, bits):
        peak = max(peak, remainder, result + bit)
    return peak


@pytest.mark.parametrize('bits', [2, 4, 8, 16])
def test_steps_stay_in_width_exhaustive(bits):
    """No intermediate value of any `bits`-wide input exceeds `bits` bits"""
    for n in range(1 << bits):
        assert _peak(n, bits) < (1 << bits)


@pytest.mark.parametrize('bits', [32, 64, 128])
def test_steps_stay_in_width_max(bits):
    """The largest values of a width are the critical ones for overflow"""
    for n in ((1 << bits) - 1, (1 << bits) - 2, 1 << (bits - 1)):
        assert _peak(n, bits) < (1 << bits)
        *_, (remainder, result, bit) = _steps(n, bits)
        assert bit == 0
        assert result == math.isqrt(n)
        assert remainder == n - result * result


@pytest.mark.parametrize(
    'numpy_type', [np.uint8, np.uint16, np.uint32, np.uint64]
)
def test_steps_in_numpy_fixed_width(numpy_type):
    """Replay every step in numpy's fixed-width arithmetic, which raises on
    overflow"""
    bits = np.dtype(numpy_type).itemsize * 8
    n = (1 << bits) - 1
    with np.errstate(over='raise'):
        for remainder, result, bit in _steps(n, bits):
            candidate = numpy_type(result) + numpy_type(bit)
            assert int(candidate) == result + bit
            if numpy_type(remainder) >= candidate:
                assert int(numpy_type(remainder) - candidate) == (
                    remainder - result - bit
                )
    assert result == (1 << (bits // 2)) - 1


def test_isqrt_bits_numpy_scalar():
    """Values are accepted as long as they can be used as an index"""
    assert isqrt_bits(np.uint64(2**64 - 1), 64) == 2**32 - 1


def test_isqrt_bits_invalid_value():
    with pytest.raises(ValueError) as exc_info:
        isqrt_bits(256, 8)
    assert "256 does not fit into 8 unsigned bits" in str(exc_info.value)
    with pytest.raises(ValueError) as exc_info:
        isqrt_bits(-1, 8)
    assert "does not fit into 8 unsigned bits" in str(exc_info.value)
    with pytest.raises(TypeError):
        isqrt_bits(4.0, 8)


@pytest.mark.parametrize('bits', [0, -8])
def test_isqrt_bits_invalid_width(bits):
    with pytest.raises(ValueError) as exc_info:
        isqrt_bits(4, bits)
    assert "bits must be positive, not %d" % bits in str(exc_info.value)


@pytest.mark.parametrize(
    'bits, type_name',
    [(True, 'bool'), (8.0, 'float'), ('8', 'str'), (None, 'NoneType')],
)
def test_isqrt_bits_non_int_width(bits, type_name):
    """A width that is not an int is a TypeError, as for IntType"""
    with pytest.raises(TypeError) as exc_info:
        isqrt_bits(4, bits)
    assert "bits must be an int, not %s" % type_name in str(exc_info.value)


@pytest.mark.parametrize('n', [True, False])
def test_isqrt_bits_bool_value(n):
    with pytest.raises(TypeError) as exc_info:
        isqrt_bits(n, 8)
    assert "Expected an integer, not bool" in str(exc_info.value)


def test_negative_number_error():
    """NegativeNumberError can be caught as a ValueError"""
    assert issubclass(NegativeNumberError, ValueError)
    with pytest.raises(ValueError):
        raise NegativeNumberError("cannot calculate square root")


@given(st.integers(min_value=0, max_value=2**128 - 1))
def test_isqrt_bits_exact_128(n):
    r = isqrt_bits(n, 128)
    assert r * r <= n < (r + 1) * (r + 1)


@given(
    st.integers(min_value=0, max_value=2**64 - 1),
    st.integers(min_value=0, max_value=2**64 - 1),
)
def test_isqrt_bits_monotonic(a, b):
    a, b = sorted((a, b))
    assert isqrt_bits(a, 64) <= isqrt_bits(b, 64)
