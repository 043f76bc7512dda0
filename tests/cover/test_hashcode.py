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

import pytest

import hypothesis.strategies as st
from hypothesis import given
from structhash.errors import InvalidArgument
from structhash.hashcode import ZERO, MAX_CODE, HashCode, mix, mix_all, \
    as_code

codes = st.integers(min_value=0, max_value=MAX_CODE)


def test_hash_codes_compare_by_value():
    assert HashCode(7) == HashCode(7)
    assert HashCode(7) != HashCode(8)
    assert hash(HashCode(7)) == hash(HashCode(7))
    assert len({HashCode(3), HashCode(3), HashCode(4)}) == 2


def test_hash_code_equals_plain_int():
    assert HashCode(12) == 12
    assert 12 == HashCode(12)
    assert HashCode(12) != 13


def test_hash_code_is_not_equal_to_a_bool():
    assert HashCode(1) != True  # noqa: E712


def test_hash_code_works_as_an_int():
    assert int(HashCode(5)) == 5
    assert [0, 1, 2][HashCode(2)] == 2
    assert HashCode(1) < HashCode(2)


def test_hash_codes_are_fully_ordered():
    assert HashCode(3) <= HashCode(4)
    assert HashCode(4) <= HashCode(4)
    assert HashCode(5) > HashCode(4)
    assert HashCode(3) > 2
    assert HashCode(3) >= 3
    assert 2 < HashCode(3)
    assert sorted([HashCode(9), HashCode(1), HashCode(5)]) == [1, 5, 9]


def test_hash_codes_compare_with_ints_out_of_range():
    assert HashCode(MAX_CODE) < 10 ** 6
    assert HashCode(0) > -1
    assert HashCode(0) != -1


@given(codes, codes)
def test_ordering_agrees_with_ints(a, b):
    assert (HashCode(a) < HashCode(b)) == (a < b)
    assert (HashCode(a) >= b) == (a >= b)


@pytest.mark.parametrize('other', ['1', 1.0, None, True])
def test_hash_codes_do_not_order_against_other_types(other):
    with pytest.raises(TypeError):
        HashCode(1) < other


def test_repr():
    assert repr(HashCode(124)) == 'HashCode(124)'


def test_hash_codes_are_immutable():
    code = HashCode(1)
    with pytest.raises(AttributeError):
        code.value = 2


@pytest.mark.parametrize('value', [-1, MAX_CODE + 1, 2 ** 64])
def test_rejects_out_of_range_codes(value):
    with pytest.raises(InvalidArgument):
        HashCode(value)


@pytest.mark.parametrize('value', [1.0, '1', None, True])
def test_rejects_non_integer_codes(value):
    with pytest.raises(InvalidArgument):
        HashCode(value)


def test_as_code_leaves_hash_codes_alone():
    code = HashCode(9)
    assert as_code(code) is code
    assert as_code(9) == code


@pytest.mark.parametrize(('h1', 'h2', 'expected'), [
    (0, 0, 0),
    (1, 1, 124),
    (1, 0, 73),
    (0, 1, 51),
    (65535, 0, 65463),
    (0, 65535, 65485),
    (65535, 65535, 65412),
])
def test_mix_pinned_values(h1, h2, expected):
    assert mix(h1, h2) == expected
    assert mix(HashCode(h1), HashCode(h2)) == HashCode(expected)


def test_mix_is_not_commutative():
    assert mix(1, 0) != mix(0, 1)


def test_mix_is_not_associative():
    assert mix(mix(1, 2), 3) != mix(1, mix(2, 3))


def test_mix_rejects_out_of_range_arguments():
    with pytest.raises(InvalidArgument):
        mix(MAX_CODE + 1, 0)
    with pytest.raises(InvalidArgument):
        mix(0, -1)


@given(codes, codes)
def test_mix_stays_in_range(h1, h2):
    result = mix(h1, h2)
    assert isinstance(result, HashCode)
    assert 0 <= result.value <= MAX_CODE


@given(codes, codes)
def test_mix_is_deterministic(h1, h2):
    assert mix(h1, h2) == mix(h1, h2)


def test_mix_all_of_nothing_is_the_seed():
    assert mix_all([]) == ZERO
    assert mix_all([], seed=5) == 5


@given(st.lists(codes))
def test_mix_all_folds_from_the_right(xs):
    expected = ZERO
    for x in reversed(xs):
        expected = mix(x, expected)
    assert mix_all(xs) == expected


def test_mix_all_puts_each_code_on_the_left():
    assert mix_all([1]) == mix(1, 0) == 73
    assert mix_all([0, 1]) == mix(0, mix(1, 0)) == 3723
