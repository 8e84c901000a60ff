from dataclasses import dataclass
from typing import Callable
from typing import Optional

from ordering import Ordering
from parameters import INT64_MAX
from parameters import INT64_MIN


Oracle = Callable[[int], Ordering]


class OracleContractError(ValueError):
    '''Raised when an oracle never reports EQUAL for any value in the bounds.

    This happens when the oracle is not monotonic with respect to a single
    hidden target, or when the target lies outside the searched bounds.
    '''

    def __init__(self, guesses, low, high):
        self.guesses = guesses
        super().__init__(
            "oracle did not report EQUAL for any value in [{}, {}] "
            "after {} guesses".format(low, high, guesses))


@dataclass
class BinarySearchResult:
    '''Class representing the output of a binary search.'''

    '''True if the target of the search has been found.'''
    found: bool = True

    '''If found=True, this field contains the output value of the search.

    Otherwise, the value is undefined, but set to None by default.
    '''
    value: Optional[int] = None

    '''The number of times the oracle was called.'''
    guesses: int = 0


def validate_bounds(param_min, param_max):
    if not INT64_MIN <= param_min <= param_max <= INT64_MAX:
        raise ValueError(
            "invalid bounds: [{}, {}] must be an interval within [{}, {}]".format(
                param_min, param_max, INT64_MIN, INT64_MAX))


def max_guesses(param_min, param_max):
    '''The most oracle calls a search over [param_min, param_max] can make.

    Each guess removes the midpoint and at least half of the rest, so an
    interval of n values is exhausted after n.bit_length() guesses. For the
    full 64-bit range that is 65: 64 halvings plus the final probe.
    '''
    return (param_max - param_min + 1).bit_length()


def binary_search(oracle, param_min=INT64_MIN, param_max=INT64_MAX, callback=None):
    '''
    Perform a binary search for a hidden integer.

    Args:
    - oracle: a callable int -> Ordering reporting how the hidden target
      compares to the tested value
    - param_min: the smallest legal value of the target
    - param_max: the largest legal value of the target
    - callback: an arbitrary callback executed at the start of each search loop

    Returns:
      An instance of BinarySearchResult. found=False means the bounds were
      exhausted without the oracle ever reporting EQUAL.
    '''
    validate_bounds(param_min, param_max)
    current_min = param_min
    current_max = param_max
    guesses = 0

    while current_min <= current_max:
        # floor of the average, without leaving the int64 range
        tested_value = current_min + (current_max - current_min) // 2
        if callback:
            callback(dict(
                current_min=current_min,
                current_max=current_max,
                tested_value=tested_value
            ))
        hint = Ordering.of(oracle(tested_value))
        guesses += 1
        if hint is Ordering.EQUAL:
            return BinarySearchResult(found=True, value=tested_value, guesses=guesses)
        elif hint is Ordering.GREATER:
            current_min = tested_value + 1
        else:
            current_max = tested_value - 1

    return BinarySearchResult(found=False, value=None, guesses=guesses)


def search_integer(oracle: Oracle,
                   low: int = INT64_MIN,
                   high: int = INT64_MAX,
                   callback=None) -> int:
    '''Find the unique int64 for which the oracle reports EQUAL.

    Raises OracleContractError if no such value exists in [low, high].
    '''
    result = binary_search(oracle, param_min=low, param_max=high, callback=callback)
    if not result.found:
        raise OracleContractError(result.guesses, low, high)
    return result.value
