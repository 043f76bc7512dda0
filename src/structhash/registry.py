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

import threading

from structhash.errors import UnknownTypeError, InvalidTypeKeyError, \
    DuplicateRegistrationError
from structhash.typekeys import TEXT, NUMBER, BOOLEAN, PairOf, UnionOf, \
    OptionalOf, SequenceOf, as_type_key, is_primitive
from structhash._settings import settings
from structhash.reporting import debug_report
from structhash.hashstrategy import HashStrategy
from structhash.internal.validation import check_callable
from structhash.hashstrategy.strategies import FunctionHashStrategy, \
    ContramappedHashStrategy
from structhash.hashstrategy.primitives import TextStrategy, \
    NumberStrategy, BooleanStrategy
from structhash.hashstrategy.collections import PairStrategy, \
    UnionStrategy, OptionalStrategy, SequenceStrategy


def _identity(value):
    return value


class StrategyRegistry(object):

    """Maps type keys to hash strategies.

    Primitive keys map to strategies registered with :meth:`register`, at
    most one per key. Composite keys are resolved by looking up a builder
    for the key's form and handing it the registry, so that it can resolve
    the element keys in turn. Element keys are strictly smaller than the
    key being resolved, so resolution always bottoms out at primitives.

    Also supports prototype based inheritance: a child registry sees every
    strategy and builder of its prototype, and can add primitives of its
    own without affecting the prototype.

    There is a single default() registry per subclass, holding the standard
    strategies for text, numbers and booleans and the builders for the four
    composite forms.

    """

    _default_lock = threading.Lock()

    @classmethod
    def default(cls):
        key = '_%s_default_registry' % (cls.__name__,)
        try:
            return cls.__dict__[key]
        except KeyError:
            pass
        with StrategyRegistry._default_lock:
            if key not in cls.__dict__:
                result = cls()
                install_standard_strategies(result)
                setattr(cls, key, result)
        return cls.__dict__[key]

    @classmethod
    def clear_default(cls):
        try:
            delattr(cls, '_%s_default_registry' % (cls.__name__,))
        except AttributeError:
            pass

    def __init__(self, prototype=None):
        self.primitive_strategies = {}
        self.builders = {}
        self.__prototype = prototype
        self.__composite_cache = {}
        self.__lock = threading.Lock()

    def prototype(self):
        return self.__prototype

    def new_child_registry(self):
        return self.__class__(prototype=self)

    def clear_cache(self):
        with self.__lock:
            self.__composite_cache = {}

    def register(self, key, strategy):
        """Register strategy as the one for the primitive key.

        strategy may be a HashStrategy or a function from values to hash
        codes. Raises DuplicateRegistrationError if this registry or one of
        its prototypes already has a strategy for key.

        """
        key = as_type_key(key)
        if not is_primitive(key):
            raise InvalidTypeKeyError(
                'Cannot register a strategy for %s: only primitive type keys '
                'can be registered, composite ones are built from their '
                'elements' % (key,))
        if not isinstance(strategy, HashStrategy):
            check_callable(strategy, 'strategy')
            strategy = FunctionHashStrategy(key, strategy)
        elif strategy.type_key != key:
            strategy = ContramappedHashStrategy(strategy, _identity, key)
        with self.__lock:
            if self.__find_primitive(key) is not None:
                raise DuplicateRegistrationError(key)
            self.primitive_strategies[key] = strategy
            self.__composite_cache = {}
        debug_report(lambda: 'Registered %r for %s' % (strategy, key))

    def define_builder(self, key_class, builder):
        """Use builder(registry, key) to build strategies for composite keys
        that are instances of key_class."""
        check_callable(builder, 'builder')
        with self.__lock:
            self.builders[key_class] = builder
            self.__composite_cache = {}

    def resolve(self, key):
        """Return the strategy for key, which may be a TypeKey or its
        textual form.

        Raises UnknownTypeError if key, or any primitive it is built from,
        has no registered strategy.

        """
        key = as_type_key(key)
        if is_primitive(key):
            result = self.__find_primitive(key)
            if result is None:
                raise UnknownTypeError(key)
            return result
        if not settings.default.cache_composites:
            return self.__build(key)
        try:
            return self.__composite_cache[key]
        except KeyError:
            pass
        result = self.__build(key)
        with self.__lock:
            return self.__composite_cache.setdefault(key, result)

    def has_strategy_for(self, key):
        try:
            self.resolve(key)
            return True
        except UnknownTypeError:
            return False

    def __build(self, key):
        builder = self.__find_builder(key)
        if builder is None:
            raise InvalidTypeKeyError(
                'No builder for type keys of type %s' % (type(key).__name__,))
        try:
            result = builder(self, key)
        except UnknownTypeError as e:
            if e.key == key:
                raise
            raise UnknownTypeError(key, e.missing)
        debug_report(lambda: 'Built %r for %s' % (result, key))
        return result

    def __find_primitive(self, key):
        registry = self
        while registry is not None:
            try:
                return registry.primitive_strategies[key]
            except KeyError:
                registry = registry.prototype()
        return None

    def __find_builder(self, key):
        registry = self
        while registry is not None:
            for cls in type(key).__mro__:
                try:
                    return registry.builders[cls]
                except KeyError:
                    pass
            registry = registry.prototype()
        return None


def strategy_for(key, registry=None):
    """Decorator registering a strategy, or a function from values to hash
    codes, for a primitive key on the default registry."""
    def accept_function(fn):
        (registry or StrategyRegistry.default()).register(key, fn)
        return fn
    return accept_function


def builder_for_instances(key_class, registry=None):
    """Decorator defining the builder for a composite form on the default
    registry."""
    def accept_function(fn):
        (registry or StrategyRegistry.default()).define_builder(key_class, fn)
        return fn
    return accept_function


def define_sequence_strategy(registry, key):
    return SequenceStrategy(registry.resolve(key.element))


def define_optional_strategy(registry, key):
    return OptionalStrategy(registry.resolve(key.element))


def define_pair_strategy(registry, key):
    return PairStrategy(
        registry.resolve(key.left), registry.resolve(key.right))


def define_union_strategy(registry, key):
    return UnionStrategy(
        registry.resolve(key.left), registry.resolve(key.right))


def install_standard_strategies(registry):
    text = TextStrategy()
    registry.register(TEXT, text)
    registry.register(NUMBER, NumberStrategy(text))
    registry.register(BOOLEAN, BooleanStrategy())
    registry.define_builder(SequenceOf, define_sequence_strategy)
    registry.define_builder(OptionalOf, define_optional_strategy)
    registry.define_builder(PairOf, define_pair_strategy)
    registry.define_builder(UnionOf, define_union_strategy)
