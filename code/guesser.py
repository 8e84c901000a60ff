'''
A single entry point for guessing a hidden value in any supported domain.
'''

from binary_search import search_integer
from float_search import search_float


BISECTORS = {
    int: search_integer,
    float: search_float,
}


def guess(oracle, domain=int, callback=None):
    '''Find the hidden value of type `domain` that the oracle reports EQUAL for.

    Args:
     - oracle: a callable domain -> Ordering comparing the hidden target to
       the candidate
     - domain: the type of the hidden value, one of the keys of BISECTORS
     - callback: passed through to the bisector, called once per guess
    '''
    try:
        bisector = BISECTORS[domain]
    except KeyError:
        raise ValueError("cannot guess values of type {}; supported: {}".format(
            domain, ', '.join(t.__name__ for t in BISECTORS))) from None
    return bisector(oracle, callback=callback)
