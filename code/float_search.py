'''
Bisection over every IEEE-754 double, reusing the integer search.

The integer search runs over positions in the total order (see
bit_patterns) and only the caller's oracle ever sees a float, so the search
never averages infinities or does NaN arithmetic. It needs at most 65
guesses, where halving the numeric interval takes about a thousand.
'''

from typing import Callable

from binary_search import search_integer
from bit_patterns import int_to_float
from ordering import Ordering


FloatOracle = Callable[[float], Ordering]


def search_float(oracle: FloatOracle, callback=None) -> float:
    '''Find the unique double for which the oracle reports EQUAL.

    The oracle must order candidates with the IEEE-754 total order, e.g.
    `lambda e: total_order_compare(target, e)`; with `<` and `==` the
    search cannot tell -0.0 from +0.0 or find a NaN.
    '''
    def int_oracle(e):
        return oracle(int_to_float(e))

    int_callback = None
    if callback:
        def int_callback(step):
            step['tested_float'] = int_to_float(step['tested_value'])
            callback(step)

    return int_to_float(search_integer(int_oracle, callback=int_callback))
