"""Integer square root for fixed-width integer types

There is one entry point per supported type: ``isqrt_u8``, ``isqrt_u16``,
``isqrt_u32``, ``isqrt_u64``, ``isqrt_u128``, ``isqrt_usize`` for the unsigned
types, and ``isqrt_i8``, ``isqrt_i16``, ``isqrt_i32``, ``isqrt_i64``,
``isqrt_i128``, ``isqrt_isize`` for the signed types. Only the latter raise
:exc:`~intsqrt.core.NegativeNumberError`. The :func:`integer_sqrt` routine
dispatches to the matching entry point based on the type of its argument.

A numpy integer scalar is returned as a scalar of the same numpy type; a
Python int is returned as a Python int.

>>> root = isqrt_u8(numpy.uint8(255))
>>> print(root, type(root).__name__)
15 uint8
>>> isqrt_i32(-4)  # doctest: +IGNORE_EXCEPTION_DETAIL
Traceback (most recent call last):
...
NegativeNumberError: cannot calculate square root of negative number
"""
import logging

import numpy as np

from .core import NegativeNumberError, isqrt_bits
from .inttypes import (
    I8,
    I16,
    I32,
    I64,
    I128,
    ISIZE,
    U8,
    U16,
    U32,
    U64,
    U128,
    USIZE,
    get_int_type,
    int_type_of,
)


def _as_int(value):
    """Convert the integer `value` to a Python int, rejecting non-integers"""
    if isinstance(value, (bool, np.bool_)) or not isinstance(
        value, (int, np.integer)
    ):
        raise TypeError(
            "Cannot take the integer square root of %s"
            % type(value).__name__
        )
    return int(value)


def _like(result, value):
    """Return `result` as an instance of the numpy scalar type of `value`"""
    if isinstance(value, np.integer):
        return type(value)(result)
    return result


def _make_isqrt(int_type):
    """Create the integer square root entry point for `int_type`"""
    bits = int_type.bits

    if int_type.signed:

        def isqrt(value):
            n = int_type.check(_as_int(value))
            if n < 0:
                raise NegativeNumberError(
                    "cannot calculate square root of negative number %d (%s)"
                    % (n, int_type.name)
                )
            return _like(isqrt_bits(n, bits), value)

    else:

        def isqrt(value):
            n = int_type.check(_as_int(value))
            return _like(isqrt_bits(n, bits), value)

    signedness = 'signed' if int_type.signed else 'unsigned'
    doc = [
        "Integer square root of a %d-bit %s integer ('%s')"
        % (bits, signedness, int_type.name),
        "",
        "    Raises:",
    ]
    if int_type.signed:
        doc.append("        NegativeNumberError: if `value` is negative")
    doc.append("        OverflowError: if `value` is out of bounds")
    doc.append("        TypeError: if `value` is not an integer")
    isqrt.__name__ = isqrt.__qualname__ = 'isqrt_%s' % int_type.name
    isqrt.__doc__ = "\n".join(doc)
    isqrt.int_type = int_type
    return isqrt


isqrt_u8 = _make_isqrt(U8)
isqrt_u16 = _make_isqrt(U16)
isqrt_u32 = _make_isqrt(U32)
isqrt_u64 = _make_isqrt(U64)
isqrt_u128 = _make_isqrt(U128)
isqrt_usize = _make_isqrt(USIZE)
isqrt_i8 = _make_isqrt(I8)
isqrt_i16 = _make_isqrt(I16)
isqrt_i32 = _make_isqrt(I32)
isqrt_i64 = _make_isqrt(I64)
isqrt_i128 = _make_isqrt(I128)
isqrt_isize = _make_isqrt(ISIZE)

_ISQRT = {
    isqrt.int_type: isqrt
    for isqrt in (
        isqrt_u8,
        isqrt_u16,
        isqrt_u32,
        isqrt_u64,
        isqrt_u128,
        isqrt_usize,
        isqrt_i8,
        isqrt_i16,
        isqrt_i32,
        isqrt_i64,
        isqrt_i128,
        isqrt_isize,
    )
}


def adapter_for(int_type):
    """Return the integer square root entry point for the given type.

    Args:
        int_type: Anything accepted by :func:`~intsqrt.inttypes.get_int_type`.
            An :class:`~intsqrt.inttypes.IntType` that is not registered (e.g.
            a 256-bit type) gets a newly created entry point.

    Examples:
        >>> adapter_for('u16')(65535)
        255
        >>> adapter_for(numpy.int8).__name__
        'isqrt_i8'
    """
    int_type = get_int_type(int_type)
    try:
        return _ISQRT[int_type]
    except KeyError:
        return _make_isqrt(int_type)


def integer_sqrt(value, int_type=None):
    """Integer square root of `value`, the largest `r` with ``r * r <= value``

    Args:
        value (int or numpy.integer): A non-negative integer (negative values
            are allowed for signed types, but raise an exception)
        int_type: The fixed-width type of `value`, as anything accepted by
            :func:`~intsqrt.inttypes.get_int_type`. If not given, the type is
            determined by :func:`~intsqrt.inttypes.int_type_of`: numpy scalars
            carry their own type, Python ints are taken as 'i128' or 'u128'.

    Returns:
        int or numpy.integer: The integer square root, of the same type as
        `value`

    Raises:
        NegativeNumberError: if `value` is negative (signed types only)
        OverflowError: if `value` is out of bounds for `int_type`
        TypeError: if `value` is not an integer

    Examples:
        >>> [integer_sqrt(n) for n in (0, 1, 4, 8, 9)]
        [0, 1, 2, 2, 3]
        >>> integer_sqrt(255, 'u8')
        15
        >>> integer_sqrt(numpy.int64(-1))  # doctest: +ELLIPSIS
        Traceback (most recent call last):
        ...
        intsqrt.core.NegativeNumberError: cannot ... number -1 (i64)
        >>> integer_sqrt(256, 'u8')
        Traceback (most recent call last):
        ...
        OverflowError: 256 is out of bounds for u8 [0, 255]
    """
    logger = logging.getLogger(__name__)
    if int_type is None:
        int_type = int_type_of(value)
    else:
        int_type = get_int_type(int_type)
    logger.debug("integer_sqrt(%r) as %s", value, int_type.name)
    return adapter_for(int_type)(value)


def integer_sqrt_checked(value, int_type=None):
    """Like :func:`integer_sqrt`, but return None for a negative `value`.

    Other errors (out of bounds values, non-integers) are still raised.

    Examples:
        >>> integer_sqrt_checked(63)
        7
        >>> print(integer_sqrt_checked(-4, 'i32'))
        None
    """
    try:
        return integer_sqrt(value, int_type=int_type)
    except NegativeNumberError:
        return None
