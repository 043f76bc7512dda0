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

"""Bounded hash codes and the combinator used to mix them.

A :class:`HashCode` is nothing more than an integer in ``[0, 65535]``.
Codes are combined with :func:`mix`, which is deterministic but neither
commutative nor associative, so every caller that combines codes has to
fix (and document) the order in which it does so.

"""

import attr

from structhash.errors import InvalidArgument

MODULUS = 2 ** 16
MAX_CODE = MODULUS - 1

LEFT_MULTIPLIER = 73
RIGHT_MULTIPLIER = 51


def _check_code_value(instance, attribute, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(
            'Expected an int for %s but got %r (type=%s)' % (
                attribute.name, value, type(value).__name__))
    if not 0 <= value <= MAX_CODE:
        raise InvalidArgument(
            'Invalid hash code %r, must be in [0, %d]' % (value, MAX_CODE))


def _comparable(other):
    if isinstance(other, HashCode):
        return other.value
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    return NotImplemented


@attr.s(frozen=True, slots=True, eq=False, repr=False)
class HashCode(object):
    """An immutable hash code in the range ``[0, 65535]``.

    Two codes with the same number are indistinguishable, and a code
    compares and orders like the plain int with the same value.

    """

    value = attr.ib(validator=_check_code_value)

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def __eq__(self, other):
        other = _comparable(other)
        if other is NotImplemented:
            return other
        return self.value == other

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other):
        other = _comparable(other)
        if other is NotImplemented:
            return other
        return self.value < other

    def __le__(self, other):
        other = _comparable(other)
        if other is NotImplemented:
            return other
        return self.value <= other

    def __gt__(self, other):
        other = _comparable(other)
        if other is NotImplemented:
            return other
        return self.value > other

    def __ge__(self, other):
        other = _comparable(other)
        if other is NotImplemented:
            return other
        return self.value >= other

    def __hash__(self):
        return hash(self.value)

    def __repr__(self):
        return 'HashCode(%d)' % (self.value,)


ZERO = HashCode(0)


def as_code(value):
    """Return value as a HashCode, accepting plain ints in range."""
    if isinstance(value, HashCode):
        return value
    return HashCode(value)


def mix(h1, h2):
    """Combine two hash codes into one: ``(73 * h1 + 51 * h2) mod 65536``.

    The result depends on argument order: ``mix(a, b)`` is in general not
    ``mix(b, a)``.

    """
    h1 = as_code(h1).value
    h2 = as_code(h2).value
    return HashCode(
        (LEFT_MULTIPLIER * h1 + RIGHT_MULTIPLIER * h2) % MODULUS)


def mix_all(codes, seed=ZERO):
    """Fold codes right to left, each code being the left operand.

    ``mix_all([a, b, c])`` is ``mix(a, mix(b, mix(c, seed)))``, which is
    the order sequence hashing uses.

    """
    result = as_code(seed)
    for code in reversed(list(codes)):
        result = mix(code, result)
    return result
