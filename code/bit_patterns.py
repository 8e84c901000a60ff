'''
An order-preserving bijection between signed 64-bit integers and the bit
patterns of IEEE-754 doubles.

Read as unsigned integers, the patterns with the sign bit clear are already
sorted by the IEEE-754 total order: +0, the positive finites, +inf, then
the positive NaNs by payload. The patterns with the sign bit set sort the
other way, since a larger magnitude is a more negative value. Flipping the
63 magnitude bits of a negative integer reverses that half, so ascending
int64 order becomes

    -NaN < -inf < negative finites < -0 < +0 < positive finites < +inf < +NaN

with -1 mapping to -0.0 and 0 to +0.0. The mapping is its own inverse on
the raw 64-bit pattern.
'''

import struct

from ordering import Ordering
from ordering import compare
from parameters import INT64_MAX
from parameters import INT64_MIN
from parameters import MAGNITUDE_MASK
from parameters import SIGN_MASK
from parameters import UINT64_MASK


def float_to_bits(value: float) -> int:
    '''The raw bit pattern of a double, as an unsigned int.'''
    return struct.unpack(b'!Q', struct.pack(b'!d', value))[0]


def bits_to_float(bits: int) -> float:
    '''Reinterpret an unsigned 64-bit pattern as a double.'''
    if not 0 <= bits <= UINT64_MASK:
        raise ValueError("not a 64-bit pattern: {}".format(bits))
    return struct.unpack(b'!d', struct.pack(b'!Q', bits))[0]


def to_float_bits(e: int) -> int:
    '''The float bit pattern at position e of the total order.'''
    if not INT64_MIN <= e <= INT64_MAX:
        raise ValueError("not a signed 64-bit integer: {}".format(e))
    if e >= 0:
        return e
    return (e ^ MAGNITUDE_MASK) & UINT64_MASK


def from_float_bits(bits: int) -> int:
    '''The position of a float bit pattern in the total order.'''
    if not 0 <= bits <= UINT64_MASK:
        raise ValueError("not a 64-bit pattern: {}".format(bits))
    if bits & SIGN_MASK:
        # two's complement reading, then undo the magnitude flip
        return (bits - (UINT64_MASK + 1)) ^ MAGNITUDE_MASK
    return bits


def int_to_float(e: int) -> float:
    return bits_to_float(to_float_bits(e))


def float_to_int(value: float) -> int:
    return from_float_bits(float_to_bits(value))


def total_order_compare(a: float, b: float) -> Ordering:
    '''Compare two doubles with the IEEE-754 totalOrder predicate.

    Unlike `<`, this orders -0.0 before +0.0 and orders every NaN by sign
    and payload, so it is EQUAL only for bit-identical values.
    '''
    return compare(float_to_int(a), float_to_int(b))
