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

from structhash.errors import InvalidArgument


def check_type(typ, arg, name=''):
    if name:
        name += '='
    if not isinstance(arg, typ):
        if isinstance(typ, type):
            typ_string = typ.__name__
        else:
            typ_string = 'one of %s' % (
                ', '.join(t.__name__ for t in typ))
        raise InvalidArgument('Expected %s but got %s%r (type=%s)'
                              % (typ_string, name, arg, type(arg).__name__))


def check_strategy(arg, name=''):
    from structhash.hashstrategy import HashStrategy
    check_type(HashStrategy, arg, name)


def check_callable(arg, name=''):
    if not callable(arg):
        raise InvalidArgument('Expected a callable for %s but got %r' % (
            name or 'argument', arg))


def check_arity(value, arity, name):
    """Check that value is a sequence of exactly arity items, returning them
    as a tuple."""
    try:
        items = tuple(value)
    except TypeError:
        raise InvalidArgument(
            'Expected %s to be a sequence of %d items but got %r (type=%s)' % (
                name, arity, value, type(value).__name__))
    if len(items) != arity:
        raise InvalidArgument(
            'Expected %s to have %d items but got %d: %r' % (
                name, arity, len(items), value))
    return items
