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

"""Comparing values by hash code.

Equal hash codes do not mean equal values: collisions are expected. These
helpers are only good as a cheap pre-filter ahead of the real equality.

"""

from collections import OrderedDict

from structhash.registry import StrategyRegistry


def _strategy(key, registry):
    return (registry or StrategyRegistry.default()).resolve(key)


def hash_equal(key, a, b, registry=None):
    """Return True if a and b, both values of the type named by key, have
    the same hash code.

    This is reflexive and symmetric, and true whenever ``a == b``, but it
    may also be true for unequal values.

    """
    strategy = _strategy(key, registry)
    return strategy.apply(a) == strategy.apply(b)


def find_duplicates(key, values, registry=None):
    """Find groups of equal values among values.

    Values are bucketed by hash code, and each candidate match is then
    confirmed with the strategy's equality, so a hash collision between
    unequal values never puts them in the same group. Returns a list of
    groups of indices into values, each with at least two members, in
    order of first occurrence.

    """
    strategy = _strategy(key, registry)
    values = list(values)
    buckets = OrderedDict()
    for i, value in enumerate(values):
        buckets.setdefault(strategy.apply(value), []).append(i)
    groups = []
    for indices in buckets.values():
        classes = []
        for i in indices:
            for members in classes:
                if strategy.equal(values[members[0]], values[i]):
                    members.append(i)
                    break
            else:
                classes.append([i])
        groups.extend(c for c in classes if len(c) > 1)
    groups.sort(key=lambda group: group[0])
    return groups
