'''Tests for Ordering'''
from assertpy import assert_that

from ordering import Ordering
from ordering import compare


def test_of_accepts_members():
    for member in Ordering:
        assert_that(Ordering.of(member)).is_same_as(member)


def test_of_uses_the_sign_of_ints():
    assert_that(Ordering.of(-7)).is_equal_to(Ordering.LESS)
    assert_that(Ordering.of(0)).is_equal_to(Ordering.EQUAL)
    assert_that(Ordering.of(3)).is_equal_to(Ordering.GREATER)


def test_of_rejects_other_results():
    assert_that(Ordering.of).raises(TypeError).when_called_with(True)
    assert_that(Ordering.of).raises(TypeError).when_called_with(0.5)
    assert_that(Ordering.of).raises(TypeError).when_called_with(None)


def test_compare():
    assert_that(compare(1, 2)).is_equal_to(Ordering.LESS)
    assert_that(compare(2, 2)).is_equal_to(Ordering.EQUAL)
    assert_that(compare(3, 2)).is_equal_to(Ordering.GREATER)
