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

"""structhash is a library of deterministic, composable hash codes.

Values are hashed by strategies looked up by type key: a registry holds the
strategies for primitive types and builds strategies for sequences,
optional values, pairs and unions out of the strategies for their elements.
Every strategy obeys the hash law, that equal values hash equally, and
:mod:`structhash.laws` checks that it does.

"""

from structhash._settings import settings, Verbosity
from structhash.version import __version_info__, __version__
from structhash.either import Left, Right
from structhash.errors import InvalidArgument, UnknownTypeError, \
    HashLawViolation, StructHashException, InvalidTypeKeyError, \
    DuplicateRegistrationError
from structhash.hashcode import HashCode, mix, mix_all
from structhash.registry import StrategyRegistry, strategy_for, \
    builder_for_instances
from structhash.typekeys import TEXT, NUMBER, BOOLEAN, PairOf, TypeKey, \
    UnionOf, Primitive, OptionalOf, SequenceOf, from_type, parse_type_key, \
    register_type_key
from structhash.equality import hash_equal, find_duplicates
from structhash.strategies import resolve, register, resolve_type, \
    has_strategy_for
from structhash.hashstrategy import HashStrategy

__all__ = [
    'settings',
    'Verbosity',
    'HashCode',
    'mix',
    'mix_all',
    'TypeKey',
    'Primitive',
    'SequenceOf',
    'OptionalOf',
    'PairOf',
    'UnionOf',
    'TEXT',
    'NUMBER',
    'BOOLEAN',
    'parse_type_key',
    'from_type',
    'register_type_key',
    'Left',
    'Right',
    'HashStrategy',
    'StrategyRegistry',
    'strategy_for',
    'builder_for_instances',
    'register',
    'resolve',
    'resolve_type',
    'has_strategy_for',
    'hash_equal',
    'find_duplicates',
    'StructHashException',
    'DuplicateRegistrationError',
    'UnknownTypeError',
    'InvalidTypeKeyError',
    'InvalidArgument',
    'HashLawViolation',
    '__version__',
    '__version_info__',
]
