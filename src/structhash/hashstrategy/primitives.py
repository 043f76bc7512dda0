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

"""Strategies for the leaf types: text, numbers and booleans."""

import math
import numbers
import operator
from decimal import Decimal
from fractions import Fraction

from structhash.errors import InvalidArgument
from structhash.hashcode import ZERO, HashCode, mix
from structhash.typekeys import TEXT, NUMBER, BOOLEAN
from structhash.hashstrategy.strategies import HashStrategy, \
    ContramappedHashStrategy


def code_units(text):
    """Return the UTF-16 code units of text.

    Characters outside the basic multilingual plane contribute both halves
    of their surrogate pair, so every unit fits in a hash code.

    """
    data = text.encode('utf-16-be', 'surrogatepass')
    return [(data[i] << 8) | data[i + 1] for i in range(0, len(data), 2)]


class TextStrategy(HashStrategy):
    """Hashes a string as ``mix(hash(rest), unit)`` for its first code unit
    and the rest of the string, with the empty string hashing to 0.

    The tail is the left operand and the current unit the right one. The
    fold runs from the end of the string so that long strings need no
    recursion.

    """

    def __init__(self):
        HashStrategy.__init__(self, TEXT)

    def do_hash(self, value):
        if not isinstance(value, str):
            raise InvalidArgument(
                'Expected str but got %r (type=%s)' % (
                    value, type(value).__name__))
        result = ZERO
        for unit in reversed(code_units(value)):
            result = mix(result, unit)
        return result


# Numbers with more decimal digits than this, counting both the integral
# part and the fraction, are rejected rather than hashed.
MAX_DIGITS = 100000

_MAX_BITS = MAX_DIGITS * 3322 // 1000
# Below this many bits str() is not subject to the interpreter's int to str
# digit limit.
_DIRECT_BITS = 13000


def _too_large(value):
    return InvalidArgument(
        'Cannot hash %s: numbers with more than about %d digits are not '
        'supported' % (type(value).__name__, MAX_DIGITS))


def integer_text(n):
    """Return the decimal digits of the int n, however many there are."""
    if n < 0:
        return '-' + integer_text(-n)
    if n.bit_length() < _DIRECT_BITS:
        return str(n)
    half = n.bit_length() * 3 // 20
    high, low = divmod(n, 10 ** half)
    return integer_text(high) + integer_text(low).zfill(half)


def _checked_integer_text(n, value):
    if n.bit_length() > _MAX_BITS:
        raise _too_large(value)
    return integer_text(n)


def _rational_text(exact, value):
    if exact.denominator == 1:
        return _checked_integer_text(exact.numerator, value)
    try:
        approximation = float(exact)
    except OverflowError:
        approximation = None
    if approximation is not None and Fraction(approximation) == exact:
        return repr(approximation)
    return '%s/%s' % (
        _checked_integer_text(exact.numerator, value),
        _checked_integer_text(exact.denominator, value))


def _decimal_text(value):
    if value.is_nan():
        return 'NaN'
    if value.is_infinite():
        return 'Infinity' if value > 0 else '-Infinity'
    sign, digits, exponent = value.as_tuple()
    digits = ''.join(map(str, digits)).lstrip('0')
    if not digits:
        return '0'
    significant = digits.rstrip('0')
    exponent += len(digits) - len(significant)
    if len(significant) + abs(exponent) > MAX_DIGITS:
        raise _too_large(value)
    if exponent >= 0:
        text = significant + '0' * exponent
        return '-' + text if sign else text
    return _rational_text(Fraction(value), value)


def canonical_decimal(value):
    """Return the text that numbers equal to value all share.

    Integral values render as plain digits, whatever their type and with
    negative zero as ``0``. Other values that a float represents exactly
    render as the float's shortest round-trip repr, and the remaining
    rationals as ``numerator/denominator``. Infinities render as
    ``Infinity`` and ``-Infinity`` and every NaN as ``NaN``.

    ``Decimal`` is not a ``numbers.Real`` but is accepted all the same.
    Values too long to write out in :data:`MAX_DIGITS` digits raise
    InvalidArgument.

    """
    if isinstance(value, complex) or not isinstance(
            value, (numbers.Real, Decimal)):
        raise InvalidArgument(
            'Expected a real number but got %r (type=%s)' % (
                value, type(value).__name__))
    if isinstance(value, Decimal):
        return _decimal_text(value)
    if isinstance(value, numbers.Integral):
        return _checked_integer_text(int(value), value)
    if isinstance(value, numbers.Rational):
        return _rational_text(
            Fraction(value.numerator, value.denominator), value)
    value = float(value)
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    return _rational_text(Fraction(value), value)


class NumberStrategy(ContramappedHashStrategy):
    """Hashes a number as the text of its canonical decimal form."""

    def __init__(self, text_strategy=None):
        ContramappedHashStrategy.__init__(
            self, text_strategy or TextStrategy(), canonical_decimal, NUMBER,
            eq=operator.eq,
        )

    def __repr__(self):
        return 'NumberStrategy()'


class BooleanStrategy(HashStrategy):
    """``False`` hashes to 0 and ``True`` to 1."""

    def __init__(self):
        HashStrategy.__init__(self, BOOLEAN)

    def do_hash(self, value):
        if not isinstance(value, bool):
            raise InvalidArgument(
                'Expected bool but got %r (type=%s)' % (
                    value, type(value).__name__))
        return HashCode(1) if value else ZERO
