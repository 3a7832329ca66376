"""Tests for semedit.functions — editing arguments and results."""

import sys
import os
import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from semedit.core import identity
from semedit.functions import ret, arg, arg_at, kwarg, wrap
from semedit.containers import each, first
from semedit.exceptions import IndexOutOfRange


def double(x):
    return x * 2


def add1(x):
    return x + 1


def curried_sub(a):
    return lambda b: a - b


class TestRetArg:

    def test_ret_post_composes(self):
        assert ret(add1)(double)(5) == 11

    def test_arg_pre_composes(self):
        assert arg(add1)(double)(5) == 12

    def test_definition_untouched(self):
        edited = ret(add1)(double)
        assert double(5) == 10
        assert edited is not double

    def test_identity(self):
        assert ret(identity)(double)(7) == double(7)
        assert arg(identity)(double)(7) == double(7)

    def test_ret_then_each(self):
        def spread(n):
            return list(range(n))
        assert (ret >> each)(double)(spread)(3) == [0, 2, 4]

    def test_second_argument_of_curried(self):
        edited = (ret >> arg)(double)(curried_sub)
        assert edited(10)(3) == 10 - 6

    def test_result_of_curried(self):
        edited = (ret >> ret)(abs)(curried_sub)
        assert edited(1)(5) == 4

    def test_arg_keeps_extra_arguments(self):
        assert arg(str.upper)(lambda s, sep="": s + sep)("a", sep="!") == "A!"

    def test_arg_then_first(self):
        assert (arg >> first)(add1)(sum)([1, 2, 3]) == 7


class TestArgAt:

    def test_edits_positional(self):
        assert arg_at(1)(double)(lambda a, b, c: (a, b, c))(1, 2, 3) == (1, 4, 3)

    def test_too_few_arguments(self):
        edited = arg_at(2)(double)(lambda *a: a)
        with pytest.raises(IndexOutOfRange):
            edited(1, 2)

    def test_negative_rejected(self):
        with pytest.raises(IndexOutOfRange):
            arg_at(-1)


class TestKwarg:

    def test_present(self):
        f = kwarg("scale")(double)(lambda x, scale=1: x * scale)
        assert f(3, scale=2) == 12

    def test_absent_is_noop(self):
        f = kwarg("scale")(double)(lambda x, scale=1: x * scale)
        assert f(3) == 3


class TestWrap:

    def test_before_and_after(self):
        assert wrap(add1, str)(double)(4) == "10"

    def test_wrap_matches_ret_and_arg(self):
        by_hand = ret(str)(arg(add1)(double))
        assert wrap(add1, str)(double)(9) == by_hand(9)
