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

"""Strategies for container types, built from strategies for their
elements.

Each one obeys the hash law provided its element strategies do: equal
containers have equal elements in the same positions, so they fold equal
element codes in the same order.

"""

from structhash.either import Left, Right
from structhash.errors import InvalidArgument
from structhash.hashcode import ZERO, HashCode, mix
from structhash.typekeys import PairOf, UnionOf, OptionalOf, SequenceOf
from structhash.internal.validation import check_arity
from structhash.hashstrategy.strategies import HashStrategy

ABSENT = ZERO
PRESENT = HashCode(1)
TAG_LEFT = HashCode(2)
TAG_RIGHT = HashCode(3)


class SequenceStrategy(HashStrategy):
    """A strategy for sequences of one element type.

    The empty sequence hashes to 0, and ``head :: tail`` hashes to
    ``mix(hash(head), hash(tail))``: a right to left fold from seed 0 with
    each element's code as the left operand.

    """

    def __init__(self, element_strategy):
        HashStrategy.__init__(
            self, SequenceOf(element_strategy.type_key))
        self.element_strategy = element_strategy

    def do_hash(self, value):
        result = ZERO
        for element in reversed(self.__elements(value)):
            result = mix(self.element_strategy.apply(element), result)
        return result

    def do_equal(self, a, b):
        a = self.__elements(a)
        b = self.__elements(b)
        if len(a) != len(b):
            return False
        return all(
            self.element_strategy.equal(x, y) for x, y in zip(a, b))

    def __elements(self, value):
        try:
            return list(value)
        except TypeError:
            raise InvalidArgument(
                'Expected a sequence for %s but got %r (type=%s)' % (
                    self.type_key, value, type(value).__name__))

    def __repr__(self):
        return 'SequenceStrategy(%r)' % (self.element_strategy,)


class OptionalStrategy(HashStrategy):
    """``None`` is the absent value and hashes to 0. Anything else is a
    present value v, hashing to ``mix(1, hash(v))``.

    Because ``None`` always means absent, ``optional<optional<T>>`` has no
    way to write a present value whose inner value is absent: ``None`` at
    either level is the outer absent value. Use a union with a unit arm
    when that distinction matters.

    """

    def __init__(self, element_strategy):
        HashStrategy.__init__(
            self, OptionalOf(element_strategy.type_key))
        self.element_strategy = element_strategy

    def do_hash(self, value):
        if value is None:
            return ABSENT
        return mix(PRESENT, self.element_strategy.apply(value))

    def do_equal(self, a, b):
        if a is None or b is None:
            return a is None and b is None
        return self.element_strategy.equal(a, b)

    def __repr__(self):
        return 'OptionalStrategy(%r)' % (self.element_strategy,)


class PairStrategy(HashStrategy):
    """Hashes ``(a, b)`` as ``mix(hash(a), hash(b))``."""

    def __init__(self, left_strategy, right_strategy):
        HashStrategy.__init__(
            self, PairOf(left_strategy.type_key, right_strategy.type_key))
        self.element_strategies = (left_strategy, right_strategy)

    def do_hash(self, value):
        a, b = check_arity(value, 2, 'value')
        left, right = self.element_strategies
        return mix(left.apply(a), right.apply(b))

    def do_equal(self, a, b):
        return all(
            s.equal(x, y) for s, x, y in zip(
                self.element_strategies,
                check_arity(a, 2, 'a'), check_arity(b, 2, 'b')))

    def __repr__(self):
        return 'PairStrategy(%r, %r)' % self.element_strategies


class UnionStrategy(HashStrategy):
    """Hashes ``Left(a)`` as ``mix(2, hash(a))`` and ``Right(b)`` as
    ``mix(3, hash(b))``."""

    def __init__(self, left_strategy, right_strategy):
        HashStrategy.__init__(
            self, UnionOf(left_strategy.type_key, right_strategy.type_key))
        self.element_strategies = (left_strategy, right_strategy)

    def __arm(self, value):
        left, right = self.element_strategies
        if isinstance(value, Left):
            return TAG_LEFT, left
        if isinstance(value, Right):
            return TAG_RIGHT, right
        raise InvalidArgument(
            'Expected Left or Right for %s but got %r (type=%s)' % (
                self.type_key, value, type(value).__name__))

    def do_hash(self, value):
        tag, strategy = self.__arm(value)
        return mix(tag, strategy.apply(value.value))

    def do_equal(self, a, b):
        tag_a, strategy = self.__arm(a)
        tag_b, _ = self.__arm(b)
        return tag_a == tag_b and strategy.equal(a.value, b.value)

    def __repr__(self):
        return 'UnionStrategy(%r, %r)' % self.element_strategies
