"""Fixed-width integer types

Python's own :class:`int` has no fixed width. The types described here give
each value a bit width and a signedness, either explicitly or through the
numpy scalar type the value carries.
"""
import logging
from collections import OrderedDict

import numpy as np


class IntType:
    """Description of a fixed-width integer type

    Args:
        name (str): Short name of the type, e.g. 'u8' or 'i128'
        bits (int): Width of the type, a positive even number
        signed (bool): Whether the type is two's-complement signed
        numpy_type (type or None): The corresponding numpy scalar type, if
            numpy has one

    Raises:
        TypeError: if `bits` is not an int, or `numpy_type` is not an integer
            type
        ValueError: if `bits` is not positive and even, or if `numpy_type`
            has a different width or signedness

    Examples:
        >>> u8 = IntType('u8', 8, signed=False, numpy_type=numpy.uint8)
        >>> u8.min, u8.max
        (0, 255)
        >>> i8 = IntType('i8', 8, signed=True)
        >>> i8.min, i8.max
        (-128, 127)
        >>> i8
        IntType('i8', 8, signed=True)
    """

    def __init__(self, name, bits, signed, numpy_type=None):
        if isinstance(bits, bool) or not isinstance(bits, int):
            raise TypeError(
                "bits must be an int, not %s" % type(bits).__name__
            )
        if bits < 2 or bits % 2 != 0:
            raise ValueError("bits must be positive and even, not %d" % bits)
        if numpy_type is not None:
            dtype = np.dtype(numpy_type)
            if not np.issubdtype(dtype, np.integer):
                raise TypeError("%s is not an integer type" % dtype)
            if dtype.itemsize * 8 != bits:
                raise ValueError(
                    "%s has %d bits, not %d"
                    % (dtype, dtype.itemsize * 8, bits)
                )
            if np.issubdtype(dtype, np.signedinteger) != bool(signed):
                raise ValueError("Signedness of %s does not match" % dtype)
            numpy_type = dtype.type
        self._name = name
        self._bits = bits
        self._signed = bool(signed)
        self._numpy_type = numpy_type

    @property
    def name(self):
        """Short name of the type"""
        return self._name

    @property
    def bits(self):
        """Width of the type in bits"""
        return self._bits

    @property
    def signed(self):
        """Whether the type can hold negative values"""
        return self._signed

    @property
    def numpy_type(self):
        """The numpy scalar type of the same width and signedness, or None"""
        return self._numpy_type

    @property
    def min(self):
        """Smallest value of the type"""
        if self._signed:
            return -(1 << (self._bits - 1))
        else:
            return 0

    @property
    def max(self):
        """Largest value of the type"""
        if self._signed:
            return (1 << (self._bits - 1)) - 1
        else:
            return (1 << self._bits) - 1

    def contains(self, value):
        """Check whether the integer `value` is a member of the type"""
        return self.min <= value <= self.max

    def check(self, value):
        """Return `value` if it is a member of the type.

        Raises:
            OverflowError: if `value` is out of bounds for the type
        """
        if not self.contains(value):
            raise OverflowError(
                "%d is out of bounds for %s [%d, %d]"
                % (value, self._name, self.min, self.max)
            )
        return value

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return NotImplemented
        return (self._name, self._bits, self._signed) == (
            other._name,
            other._bits,
            other._signed,
        )

    def __hash__(self):
        return hash((self._name, self._bits, self._signed))

    def __repr__(self):
        return "%s(%r, %d, signed=%r)" % (
            self.__class__.__name__,
            self._name,
            self._bits,
            self._signed,
        )


NATIVE_BITS = np.dtype(np.intp).itemsize * 8

U8 = IntType('u8', 8, signed=False, numpy_type=np.uint8)
U16 = IntType('u16', 16, signed=False, numpy_type=np.uint16)
U32 = IntType('u32', 32, signed=False, numpy_type=np.uint32)
U64 = IntType('u64', 64, signed=False, numpy_type=np.uint64)
U128 = IntType('u128', 128, signed=False)
USIZE = IntType('usize', NATIVE_BITS, signed=False, numpy_type=np.uintp)
I8 = IntType('i8', 8, signed=True, numpy_type=np.int8)
I16 = IntType('i16', 16, signed=True, numpy_type=np.int16)
I32 = IntType('i32', 32, signed=True, numpy_type=np.int32)
I64 = IntType('i64', 64, signed=True, numpy_type=np.int64)
I128 = IntType('i128', 128, signed=True)
ISIZE = IntType('isize', NATIVE_BITS, signed=True, numpy_type=np.intp)

INT_TYPES = OrderedDict(
    (int_type.name, int_type)
    for int_type in (
        U8,
        U16,
        U32,
        U64,
        U128,
        USIZE,
        I8,
        I16,
        I32,
        I64,
        I128,
        ISIZE,
    )
)


def _dtype_key(dtype):
    return (dtype.kind, dtype.itemsize)


def _numpy_lookup():
    """Map (kind, itemsize) of numpy dtypes to the registered types.

    The fixed-width types come first in `INT_TYPES`, so they take precedence
    over the native 'usize' and 'isize' types of the same width.
    """
    lookup = {}
    for int_type in INT_TYPES.values():
        if int_type.numpy_type is not None:
            key = _dtype_key(np.dtype(int_type.numpy_type))
            lookup.setdefault(key, int_type)
    return lookup


_NUMPY_LOOKUP = _numpy_lookup()


def get_int_type(type_like):
    """Resolve `type_like` to one of the registered :class:`IntType`s.

    Args:
        type_like: An :class:`IntType` (returned unchanged), the name of a
            registered type (e.g. 'u8', 'isize'), a numpy integer scalar type
            (e.g. ``numpy.uint8``), a numpy dtype, or anything else
            :class:`numpy.dtype` accepts (e.g. 'uint8').

    Note that registered names take precedence over numpy's type codes: 'u8'
    is the 8-bit unsigned type, not numpy's 8-byte 'u8'.

    Raises:
        ValueError: if `type_like` is a string that names no integer type
        TypeError: if `type_like` cannot be interpreted as an integer type

    Examples:
        >>> get_int_type('u8')
        IntType('u8', 8, signed=False)
        >>> get_int_type(numpy.int16)
        IntType('i16', 16, signed=True)
        >>> get_int_type('uint32')
        IntType('u32', 32, signed=False)
        >>> get_int_type('float64')
        Traceback (most recent call last):
        ...
        ValueError: Unknown integer type: 'float64'
    """
    if isinstance(type_like, IntType):
        return type_like
    if isinstance(type_like, str):
        try:
            return INT_TYPES[type_like]
        except KeyError:
            pass
        try:
            return _NUMPY_LOOKUP[_dtype_key(np.dtype(type_like))]
        except (TypeError, ValueError, KeyError):
            raise ValueError("Unknown integer type: %r" % type_like)
    if type_like is None:
        raise TypeError("None is not an integer type")
    try:
        return _NUMPY_LOOKUP[_dtype_key(np.dtype(type_like))]
    except (TypeError, ValueError, KeyError):
        raise TypeError(
            "Cannot interpret %r as an integer type" % (type_like,)
        )


def int_type_of(value):
    """Return the :class:`IntType` of the given integer `value`.

    For a numpy integer scalar, this is the type matching its dtype. A plain
    Python int is taken as 'i128' if it fits, and as 'u128' otherwise.

    Raises:
        TypeError: if `value` is not an integer (bools, floats, and numpy
            arrays are not integers)
        OverflowError: if a Python int does not fit into 128 bits

    Examples:
        >>> int_type_of(numpy.uint8(255))
        IntType('u8', 8, signed=False)
        >>> int_type_of(-5)
        IntType('i128', 128, signed=True)
        >>> int_type_of(2**128 - 1)
        IntType('u128', 128, signed=False)
    """
    if isinstance(value, np.integer):
        return _NUMPY_LOOKUP[_dtype_key(value.dtype)]
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(
            "Expected an integer, not %s" % type(value).__name__
        )
    for int_type in (I128, U128):
        if int_type.contains(value):
            logger = logging.getLogger(__name__)
            logger.debug("Taking Python int %d as %s", value, int_type.name)
            return int_type
    raise OverflowError("%d does not fit into 128 bits" % value)
