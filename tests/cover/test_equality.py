# This file is part of structhash.
#
# Most of this work is copyright (C) 2026 the structhash authors. Consult
# the git log if you need to determine who owns an individual contribution.
#
# This Source Code Form is subject to the terms of the Mozilla Public License,
# v. 2.0. If a copy of the MPL was not distributed with this file, You can
# obtain one at http://mozilla.org/MPL/2.0/.
#
# END HEADER

from decimal import Decimal
from fractions import Fraction

import pytest

import hypothesis.strategies as st
from hypothesis import given
from structhash.either import Left, Right
from structhash.errors import UnknownTypeError
from structhash.typekeys import TEXT, NUMBER, Primitive, SequenceOf
from structhash.equality import hash_equal, find_duplicates
from structhash.strategies import functions

CLUMPY = Primitive('Clumpy')


@given(st.text())
def test_hash_equal_is_reflexive(s):
    assert hash_equal(TEXT, s, s)


@given(st.lists(st.integers()), st.lists(st.integers()))
def test_hash_equal_is_symmetric(xs, ys):
    key = SequenceOf(NUMBER)
    assert hash_equal(key, xs, ys) == hash_equal(key, ys, xs)


def test_equal_values_are_hash_equal():
    assert hash_equal(NUMBER, 1, Decimal('1.0'))
    assert hash_equal('union<Text,Number>', Right(0.5), Right(Fraction(1, 2)))


def test_hash_equal_distinguishes_most_values():
    assert not hash_equal(TEXT, 'a', 'b')
    assert not hash_equal('union<Number,Number>', Left(1), Right(1))


def test_hash_equal_on_unknown_key_is_an_error():
    with pytest.raises(UnknownTypeError):
        hash_equal('Clumpy', 1, 1)


def test_hash_equal_uses_the_given_registry(registry):
    registry.register(CLUMPY, functions(CLUMPY, lambda n: n % 2))
    assert hash_equal(CLUMPY, 1, 3, registry=registry)
    assert not hash_equal(CLUMPY, 1, 2, registry=registry)


def test_find_duplicates_groups_equal_values():
    values = ['a', 'b', 'a', 'c', 'b', 'a']
    assert find_duplicates(TEXT, values) == [[0, 2, 5], [1, 4]]


def test_find_duplicates_with_no_duplicates():
    assert find_duplicates(TEXT, ['a', 'b', 'c']) == []
    assert find_duplicates(TEXT, []) == []


def test_find_duplicates_across_representations():
    values = [1, 2, 1.0, Decimal('2.00'), Fraction(3)]
    assert find_duplicates(NUMBER, values) == [[0, 2], [1, 3]]


def test_find_duplicates_confirms_with_equality(registry):
    # Every value collides, but only truly equal ones are duplicates.
    registry.register(CLUMPY, functions(CLUMPY, lambda n: 0))
    values = [1, 2, 1, 3, 2]
    assert find_duplicates(CLUMPY, values, registry=registry) == \
        [[0, 2], [1, 4]]


def test_find_duplicates_uses_strategy_equality(registry):
    registry.register(CLUMPY, functions(
        CLUMPY, len, eq=lambda a, b: a.lower() == b.lower()))
    values = ['Ab', 'ab', 'cd', 'AB']
    assert find_duplicates(CLUMPY, values, registry=registry) == [[0, 1, 3]]


@given(st.lists(st.integers(min_value=0, max_value=5)))
def test_find_duplicates_agrees_with_equality(xs):
    groups = find_duplicates(NUMBER, xs)
    seen = set()
    for group in groups:
        assert len(group) >= 2
        assert len({xs[i] for i in group}) == 1
        seen.update(group)
    for i, x in enumerate(xs):
        if xs.count(x) > 1:
            assert i in seen
