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

from structhash.hashcode import as_code
from structhash.typekeys import check_well_founded


def describe_function(f):
    name = getattr(f, '__name__', None)
    if name is None or name == '<lambda>':
        return repr(f)
    return name


class HashStrategy(object):
    """A HashStrategy knows how to turn values of one type into hash codes,
    and how to tell whether two values of that type are equal.

    The two go together: a strategy promises that whenever :meth:`equal`
    holds for two values, :meth:`apply` gives them the same code. Strategies
    hold no state that changes after construction, so they can be shared
    freely between threads.

    Subclasses implement :meth:`do_hash` and, where plain ``==`` is not the
    right notion of equality, :meth:`do_equal`.

    """

    def __init__(self, type_key):
        self.type_key = check_well_founded(type_key)

    def apply(self, value):
        """Return the :class:`~structhash.hashcode.HashCode` for value.

        This method is part of the public API.

        """
        return as_code(self.do_hash(value))

    __call__ = apply

    def equal(self, a, b):
        """Return True if a and b are equal values of this strategy's type.

        This method is part of the public API.

        """
        return bool(self.do_equal(a, b))

    def do_hash(self, value):
        raise NotImplementedError('%s.do_hash' % (type(self).__name__,))

    def do_equal(self, a, b):
        return a == b

    def contramap(self, unpack, type_key, eq=None):
        """Returns a new strategy for another type, which hashes a value by
        calling unpack() on it and hashing the result with this strategy.

        If eq is given it is the new type's equality; otherwise two values
        are equal when their unpacked forms are.

        This method is part of the public API.

        """
        return ContramappedHashStrategy(self, unpack, type_key, eq)

    def __repr__(self):
        return '%s()' % (type(self).__name__,)


class ContramappedHashStrategy(HashStrategy):
    """A strategy which is defined purely by conversion into the type of
    another strategy."""

    def __init__(self, strategy, unpack, type_key, eq=None):
        HashStrategy.__init__(self, type_key)
        self.mapped_strategy = strategy
        self.unpack = unpack
        self.eq = eq

    def do_hash(self, value):
        return self.mapped_strategy.apply(self.unpack(value))

    def do_equal(self, a, b):
        if self.eq is not None:
            return self.eq(a, b)
        return self.mapped_strategy.equal(self.unpack(a), self.unpack(b))

    def __repr__(self):
        if not hasattr(self, '_cached_repr'):
            self._cached_repr = '%r.contramap(%s, %s)' % (
                self.mapped_strategy, describe_function(self.unpack),
                self.type_key,
            )
        return self._cached_repr


class FunctionHashStrategy(HashStrategy):
    """Wraps a plain function from values to codes as a strategy."""

    def __init__(self, type_key, hash_function, eq=operator.eq):
        HashStrategy.__init__(self, type_key)
        self.hash_function = hash_function
        self.eq = eq

    def do_hash(self, value):
        return self.hash_function(value)

    def do_equal(self, a, b):
        return self.eq(a, b)

    def __repr__(self):
        return 'functions(%s, %s)' % (
            self.type_key, describe_function(self.hash_function))
