"""Auxilliary routines for testing integer square roots, either of the
intsqrt package itself or of code that builds on it"""
import math


def is_integer_sqrt(n, r):
    """Check whether `r` is the integer square root of `n`, i.e. whether
    ``r*r <= n < (r+1)*(r+1)``.

    The check is done with Python's unbounded ints, so it is valid even if
    the squares do not fit into the type of `n`.

    >>> is_integer_sqrt(255, 15)
    True
    >>> is_integer_sqrt(256, 15)
    False
    """
    n, r = int(n), int(r)
    return r >= 0 and r * r <= n < (r + 1) * (r + 1)


def isqrt_newton(n):
    """Integer square root of n >= 0, by Newton iteration

    >>> isqrt_newton(1024**2)
    1024
    >>> isqrt_newton(10)
    3
    """
    if n < 0:
        raise ValueError("n must be >= 0, not %d" % n)
    x = n
    y = (x + 1) // 2
    while y < x:
        x = y
        y = (x + n // x) // 2
    return x


def isqrt_via_float(n):
    """Integer square root of n >= 0, from the floating point square root.

    Converting `n` to a float loses precision for n > 2**53, so the truncated
    float root can be off in either direction and must be corrected.

    This is a reference for cross-checking results in tests. It is not a
    faster alternative to :func:`intsqrt.core.isqrt_bits`.

    >>> int(math.sqrt(2**64 - 1)) == 2**32
    True
    >>> isqrt_via_float(2**64 - 1) == 2**32 - 1
    True
    """
    if n < 0:
        raise ValueError("n must be >= 0, not %d" % n)
    candidate = int(math.sqrt(n))
    while candidate * candidate > n:
        candidate -= 1
    while (candidate + 1) * (candidate + 1) <= n:
        candidate += 1
    return candidate


def max_sqrt(int_type):
    """Integer square root of the largest value of `int_type`

    For unsigned types the result has all of the lower half of the bits set;
    for signed types, it is obtained from :func:`isqrt_newton`.

    Args:
        int_type (intsqrt.inttypes.IntType): integer type

    >>> from intsqrt.inttypes import U8, I128
    >>> max_sqrt(U8)
    15
    >>> max_sqrt(I128)
    13043817825332782212
    """
    if int_type.signed:
        return isqrt_newton(int_type.max)
    else:
        return (1 << (int_type.bits // 2)) - 1


def sample_values(int_type):
    """Sorted list of non-negative values of `int_type` that are of interest
    for testing.

    This includes 0 to 4, all powers of two and their neighbors, small
    squares and the largest squares that fit into the type (with their
    neighbors), and the maximum value of the type.

    >>> from intsqrt.inttypes import U8
    >>> sample_values(U8)[:12]
    [0, 1, 2, 3, 4, 5, 7, 8, 9, 10, 15, 16]
    >>> sample_values(U8)[-3:]
    [226, 254, 255]
    """
    values = {0, 1, 2, 3, 4, int_type.max - 1, int_type.max}
    for k in range(1, int_type.bits):
        power = 1 << k
        values.update((power - 1, power, power + 1))
    root = max_sqrt(int_type)
    for k in (2, 3, 10, root // 2, root - 1, root):
        square = k * k
        values.update((square - 1, square, square + 1))
    return sorted(v for v in values if 0 <= v <= int_type.max)
