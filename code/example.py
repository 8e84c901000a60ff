import math

from bit_patterns import bits_to_float
from bit_patterns import float_to_bits
from bit_patterns import total_order_compare
from guesser import guess
from ordering import Ordering
from ordering import compare
from parameters import INT64_MAX
from parameters import INT64_MIN
from parameters import SIGN_MASK
from parameters import UINT64_MASK


integer_targets = [
    0,
    1,
    INT64_MIN,
    INT64_MAX,
    INT64_MIN + 1,
    INT64_MAX - 1,
    INT64_MIN // 2,
    INT64_MAX // 2,
    INT64_MIN // 2 + 1,
    42,
    -1,
]

float_targets = [
    -0.0,
    1.0,
    -math.inf,
    math.nan,
    -math.nan,
    10.0 - math.pi,
    0.0,
    42.1,
    bits_to_float(UINT64_MASK),
    bits_to_float(0),
    bits_to_float(1),
    bits_to_float(SIGN_MASK),
    bits_to_float(SIGN_MASK - 1),
]

for x in integer_targets:
    print("Target: {}".format(x))
    guessed = guess(lambda e: compare(x, e), domain=int, callback=print)
    assert compare(x, guessed) == Ordering.EQUAL
    print("Guessed: {}".format(guessed))

for x in float_targets:
    print("Target: {!r} (0x{:016x})".format(x, float_to_bits(x)))
    guessed = guess(lambda e: total_order_compare(x, e), domain=float, callback=print)
    assert total_order_compare(x, guessed) == Ordering.EQUAL
    print("Guessed: {!r} (0x{:016x})".format(guessed, float_to_bits(guessed)))
