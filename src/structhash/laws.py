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

"""Property-based checks that hash strategies obey their laws.

Every strategy promises that values it considers equal get equal codes,
that it gives the same code for the same value every time, and that codes
stay in range. The checks here use Hypothesis to generate values for a type
key, including pairs of equal values in different representations, and look
for counterexamples::

    >>> from structhash.laws import check_all_laws
    >>> check_all_laws('sequence-of<optional<Number>>')

Primitive keys need a source of values. The standard primitives have one;
use :func:`register_values` for your own.

"""

import copy
import math
from decimal import Decimal
from fractions import Fraction

import attr
import hypothesis
import hypothesis.strategies as st
from hypothesis import HealthCheck, given

from structhash.either import Left, Right
from structhash.errors import InvalidArgument, UnknownTypeError, \
    HashLawViolation
from structhash.hashcode import MAX_CODE, HashCode
from structhash.registry import StrategyRegistry
from structhash.typekeys import TEXT, NUMBER, BOOLEAN, PairOf, UnionOf, \
    OptionalOf, SequenceOf, as_type_key, is_primitive
from structhash._settings import settings as structhash_settings
from structhash.reporting import report, verbose_report


@attr.s(frozen=True)
class ValueSource(object):
    """Where the law checker gets values of a primitive type from.

    ``equivalents(v)`` returns values equal to v, possibly of other types
    or representations. Without it, equal pairs are a value and a deep copy
    of it.

    """

    values = attr.ib()
    equivalents = attr.ib(default=None)


_value_sources = {}


def register_values(key, values, equivalents=None):
    """Tell the law checker how to generate values for a primitive key.

    values is a Hypothesis search strategy. Registering a key again replaces
    its source.

    """
    key = as_type_key(key)
    if not is_primitive(key):
        raise UnknownTypeError(key)
    _value_sources[key] = ValueSource(values, equivalents)


def _value_source(key):
    try:
        return _value_sources[key]
    except KeyError:
        raise UnknownTypeError(key)


def values(key):
    """Return a Hypothesis search strategy generating values for key."""
    key = as_type_key(key)
    if is_primitive(key):
        return _value_source(key).values
    if isinstance(key, SequenceOf):
        return st.lists(values(key.element), max_size=10)
    if isinstance(key, OptionalOf):
        return st.none() | values(key.element)
    if isinstance(key, PairOf):
        return st.tuples(values(key.left), values(key.right))
    if isinstance(key, UnionOf):
        return st.builds(Left, values(key.left)) | \
            st.builds(Right, values(key.right))
    raise UnknownTypeError(key)


def _primitive_pairs(source):
    if source.equivalents is None:
        return source.values.map(lambda v: (v, copy.deepcopy(v)))

    def equal_to(v):
        candidates = source.equivalents(v)
        return st.tuples(st.sampled_from(candidates),
                         st.sampled_from(candidates))
    return source.values.flatmap(equal_to)


def _unzip(pairs, container):
    return (
        container(a for a, _ in pairs),
        container(b for _, b in pairs),
    )


def equal_pairs(key):
    """Return a Hypothesis search strategy generating pairs of equal values
    for key.

    The two halves of a pair are usually distinct objects and may be of
    different types, such as ``1`` and ``Decimal('1')``, or a list and a
    tuple with equal elements.

    """
    key = as_type_key(key)
    if is_primitive(key):
        return _primitive_pairs(_value_source(key))
    if isinstance(key, SequenceOf):
        return st.tuples(
            st.lists(equal_pairs(key.element), max_size=10),
            st.sampled_from([list, tuple]),
        ).map(lambda x: _unzip(*x))
    if isinstance(key, OptionalOf):
        return st.just((None, None)) | equal_pairs(key.element)
    if isinstance(key, PairOf):
        return st.tuples(
            equal_pairs(key.left), equal_pairs(key.right)
        ).map(lambda x: ((x[0][0], x[1][0]), (x[0][1], x[1][1])))
    if isinstance(key, UnionOf):
        return equal_pairs(key.left).map(
            lambda p: (Left(p[0]), Left(p[1]))
        ) | equal_pairs(key.right).map(
            lambda p: (Right(p[0]), Right(p[1])))
    raise UnknownTypeError(key)


def _run(check, search_strategy, settings, description):
    settings = settings or structhash_settings.default
    test = hypothesis.settings(
        max_examples=settings.max_examples,
        derandomize=settings.derandomize,
        database=None,
        deadline=None,
        suppress_health_check=[
            HealthCheck.too_slow, HealthCheck.filter_too_much],
    )(given(search_strategy)(check))
    verbose_report(lambda: 'Checking %s over %d examples' % (
        description, settings.max_examples), settings)
    try:
        test()
    except HashLawViolation as e:
        report(str(e), settings)
        raise


def _resolve(key, registry):
    return (registry or StrategyRegistry.default()).resolve(key)


def check_hash_law(key, registry=None, settings=None):
    """Check that values the strategy for key considers equal get equal
    codes, raising HashLawViolation with a minimal counterexample if not."""
    key = as_type_key(key)
    strategy = _resolve(key, registry)

    def hash_law(pair):
        a, b = pair
        if not strategy.equal(a, b):
            return
        code_a = strategy.apply(a)
        code_b = strategy.apply(b)
        if code_a != code_b:
            raise HashLawViolation(key, a, b, code_a, code_b)

    _run(hash_law, equal_pairs(key), settings, 'hash law for %s' % (key,))


def check_determinism(key, registry=None, settings=None):
    """Check that hashing a value twice, including through a freshly
    resolved strategy, gives the same code."""
    key = as_type_key(key)
    strategy = _resolve(key, registry)

    def deterministic(value):
        first = strategy.apply(value)
        second = strategy.apply(value)
        third = _resolve(key, registry).apply(value)
        if not first == second == third:
            raise HashLawViolation(key, value, value, first, second)

    _run(deterministic, values(key), settings, 'determinism for %s' % (key,))


def _is_code(code):
    if isinstance(code, HashCode):
        return True
    return isinstance(code, int) and not isinstance(code, bool) and \
        0 <= code <= MAX_CODE


def check_range(key, registry=None, settings=None):
    """Check that the strategy for key turns every value into a code in
    ``[0, 65535]``.

    Codes are taken from the strategy before :meth:`HashStrategy.apply`
    validates them, and a composite whose element strategy gives a bad code
    fails in the same way.

    """
    key = as_type_key(key)
    strategy = _resolve(key, registry)

    def in_range(value):
        try:
            code = strategy.do_hash(value)
        except InvalidArgument as e:
            raise HashLawViolation(
                key, value, value, None, None,
                'Range law violated for %s: hashing %r failed: %s' % (
                    key, value, e))
        if not _is_code(code):
            raise HashLawViolation(
                key, value, value, code, code,
                'Range law violated for %s: %r hashes to %r, which is not '
                'a code in [0, %d]' % (key, value, code, MAX_CODE))

    _run(in_range, values(key), settings, 'range for %s' % (key,))


def check_all_laws(key, registry=None, settings=None):
    check_hash_law(key, registry, settings)
    check_determinism(key, registry, settings)
    check_range(key, registry, settings)


def _text_equivalents(text):
    return [text, ''.join(list(text))]


def _number_equivalents(n):
    result = [n]
    if isinstance(n, Decimal) and n.is_infinite():
        return result + [float(n)]
    if isinstance(n, float) and math.isinf(n):
        return result + [Decimal(n)]
    exact = Fraction(n)
    result.append(exact)
    if exact.denominator == 1:
        result.append(exact.numerator)
    try:
        approximation = float(exact)
    except OverflowError:
        approximation = None
    if approximation is not None and Fraction(approximation) == exact:
        result.append(approximation)
        result.append(Decimal(approximation))
    return result


register_values(TEXT, st.text(), _text_equivalents)
register_values(
    NUMBER,
    st.one_of(
        st.integers(),
        st.floats(allow_nan=False),
        st.fractions(),
        st.decimals(
            allow_nan=False, allow_infinity=False,
            min_value=-10 ** 6, max_value=10 ** 6),
    ),
    _number_equivalents,
)
register_values(BOOLEAN, st.booleans())
