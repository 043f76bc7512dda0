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

import operator
import threading
from functools import wraps

from structhash.registry import StrategyRegistry
from structhash.typekeys import as_type_key
from structhash.typekeys import from_type as key_from_type
from structhash.internal.validation import check_callable, check_strategy
from structhash.hashstrategy.strategies import FunctionHashStrategy
from structhash.hashstrategy.primitives import TextStrategy, \
    NumberStrategy, BooleanStrategy
from structhash.hashstrategy.collections import PairStrategy, \
    UnionStrategy, OptionalStrategy, SequenceStrategy

__all__ = [
    'texts', 'numbers', 'booleans',
    'sequences', 'optionals', 'pairs', 'unions',
    'functions',
    'register', 'resolve', 'resolve_type', 'has_strategy_for',
]

STRATEGY_CACHE = {}
_cache_lock = threading.Lock()


def cacheable(fn):
    """Builders called twice with the same strategies return the same
    strategy object."""
    @wraps(fn)
    def cached_strategy(*args):
        cache_key = (fn,) + args
        try:
            return STRATEGY_CACHE[cache_key]
        except TypeError:
            return fn(*args)
        except KeyError:
            pass
        result = fn(*args)
        with _cache_lock:
            return STRATEGY_CACHE.setdefault(cache_key, result)
    cached_strategy.clear_cache = STRATEGY_CACHE.clear
    return cached_strategy


@cacheable
def texts():
    """Returns a strategy for ``str``, hashing each UTF-16 code unit in
    turn."""
    return TextStrategy()


@cacheable
def numbers():
    """Returns a strategy for real numbers of any type, hashing the text of
    their canonical decimal form.

    ``1``, ``1.0``, ``Fraction(1)`` and ``Decimal('1.00')`` all hash the
    same, as they must since they are all equal.

    """
    return NumberStrategy(texts())


@cacheable
def booleans():
    return BooleanStrategy()


@cacheable
def sequences(elements):
    """Returns a strategy for sequences whose elements are hashed with
    elements.

    The empty sequence hashes to 0 and ``[x] + rest`` to
    ``mix(elements(x), hash(rest))``.

    """
    check_strategy(elements, 'elements')
    return SequenceStrategy(elements)


@cacheable
def optionals(element):
    """Returns a strategy for values that are either None or hashed with
    element."""
    check_strategy(element, 'element')
    return OptionalStrategy(element)


@cacheable
def pairs(left, right):
    """Returns a strategy for two-element tuples ``(a, b)``, hashing a with
    left and b with right."""
    check_strategy(left, 'left')
    check_strategy(right, 'right')
    return PairStrategy(left, right)


@cacheable
def unions(left, right):
    """Returns a strategy for :class:`~structhash.either.Left` values hashed
    with left and :class:`~structhash.either.Right` values hashed with
    right."""
    check_strategy(left, 'left')
    check_strategy(right, 'right')
    return UnionStrategy(left, right)


def functions(type_key, hash_function, eq=operator.eq):
    """Returns a strategy for type_key that calls hash_function to get the
    code of each value.

    hash_function must return an int in ``[0, 65535]`` or a HashCode, and
    must give values that eq considers equal the same code.

    """
    check_callable(hash_function, 'hash_function')
    check_callable(eq, 'eq')
    return FunctionHashStrategy(as_type_key(type_key), hash_function, eq)


def register(key, strategy):
    """Register strategy for the primitive key on the default registry."""
    StrategyRegistry.default().register(key, strategy)


def resolve(key):
    """Look up the strategy for key on the default registry."""
    return StrategyRegistry.default().resolve(key)


def resolve_type(thing):
    """Look up the strategy for a Python type or ``typing`` annotation, such
    as ``List[Optional[int]]``."""
    return resolve(key_from_type(thing))


def has_strategy_for(key):
    return StrategyRegistry.default().has_strategy_for(key)
