'''
The three-way comparison result returned by search oracles.
'''

from enum import Enum


class Ordering(Enum):
    LESS = -1
    EQUAL = 0
    GREATER = 1

    @classmethod
    def of(cls, result):
        '''Normalize an oracle result to an Ordering.

        Accepts an Ordering member or any int whose sign gives the ordering,
        i.e. the value a cmp-style function would return.
        '''
        if isinstance(result, cls):
            return result
        if isinstance(result, bool) or not isinstance(result, int):
            raise TypeError(
                "oracle must return an Ordering or an int, got {!r}".format(result))
        return cls((result > 0) - (result < 0))


def compare(a, b) -> Ordering:
    '''Compare a to b with the natural ordering of the arguments.

    To search for a hidden target t, use `lambda e: compare(t, e)` as the
    oracle.
    '''
    if a < b:
        return Ordering.LESS
    if a > b:
        return Ordering.GREATER
    return Ordering.EQUAL
