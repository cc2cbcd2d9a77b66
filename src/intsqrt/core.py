"""Exact integer square root of fixed-width unsigned bit patterns

The routines in this module know nothing about signedness or about concrete
integer types; they operate on a non-negative value interpreted as an unsigned
bit pattern of a given width. The per-type entry points in :mod:`intsqrt.sqrt`
are thin wrappers around :func:`isqrt_bits`.
"""
import operator


class NegativeNumberError(ValueError):
    """Raised when the square root of a negative number is requested.

    Only the entry points for signed integer types raise this exception.
    """


def isqrt_bits(n, bits):
    """Integer square root of the `bits`-wide unsigned value `n`.

    The root is extracted digit by digit (binary "shift-and-subtract"), from
    the most significant pair of bits of `n` to the least significant one,
    without any floating point arithmetic. Every intermediate value stays below
    ``2**bits``, so the computation would not overflow a `bits`-wide unsigned
    register, even for ``n = 2**bits - 1``.

    Args:
        n (int): Value whose square root to take, ``0 <= n < 2**bits``
        bits (int): Width of the unsigned bit pattern holding `n`

    Returns:
        int: The largest `r` with ``r * r <= n``

    Raises:
        TypeError: if `bits` is not an int, or `n` is not an integer (bools
            are not integers here)
        ValueError: if `bits` is not positive, or if `n` does not fit into
            `bits` unsigned bits.

    Examples:
        >>> isqrt_bits(0, 8)
        0
        >>> isqrt_bits(8, 8)
        2
        >>> isqrt_bits(255, 8)
        15
        >>> isqrt_bits(2**64 - 1, 64) == 2**32 - 1
        True
        >>> isqrt_bits(256, 8)
        Traceback (most recent call last):
        ...
        ValueError: 256 does not fit into 8 unsigned bits
    """
    if isinstance(bits, bool) or not isinstance(bits, int):
        raise TypeError("bits must be an int, not %s" % type(bits).__name__)
    if bits < 1:
        raise ValueError("bits must be positive, not %d" % bits)
    if isinstance(n, bool):
        raise TypeError("Expected an integer, not bool")
    n = operator.index(n)
    if not 0 <= n < (1 << bits):
        raise ValueError("%d does not fit into %d unsigned bits" % (n, bits))
    for _, result, _ in _steps(n, bits):
        pass
    return result


def _steps(n, bits):
    """Run the shift-and-subtract extraction of the square root of `n`.

    Yields the state ``(remainder, result, bit)`` before every step, and the
    final state (with ``bit == 0``) last. The root is the final `result`.
    """
    remainder = n
    result = 0
    # highest power of four that fits into the width
    bit = 1 << ((bits - 1) & ~1)
    while bit > remainder:
        bit >>= 2
    while bit != 0:
        yield remainder, result, bit
        if remainder >= result + bit:
            remainder -= result + bit
            result = (result >> 1) + bit
        else:
            result >>= 1
        bit >>= 2
    yield remainder, result, bit
