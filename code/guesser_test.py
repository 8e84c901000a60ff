'''Tests for guess'''
import math
from assertpy import assert_that

from bit_patterns import float_to_bits
from bit_patterns import total_order_compare
from guesser import *
from ordering import compare
from parameters import INT64_MIN


def test_guess_integer_is_the_default():
    assert_that(guess(lambda e: compare(INT64_MIN, e))).is_equal_to(INT64_MIN)


def test_guess_float():
    x = -0.0
    guessed = guess(lambda e: total_order_compare(x, e), domain=float)
    assert_that(float_to_bits(guessed)).is_equal_to(float_to_bits(x))


def test_guess_passes_callback_through():
    steps = []
    guess(lambda e: compare(-1, e), domain=int, callback=steps.append)
    assert_that(steps).is_length(1)


def test_unsupported_domain():
    assert_that(guess).raises(ValueError).when_called_with(
        lambda e: compare(0, e), domain=str
    ).contains('int, float')


def test_registered_domains():
    assert_that(BISECTORS).contains_only(int, float)
