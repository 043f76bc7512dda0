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

"""Type keys: descriptors naming the type a hash strategy handles.

A key is either a :class:`Primitive` naming a leaf type, or one of the four
composite forms built from other keys. Keys are immutable, compare by
structure, and have a canonical textual form::

    >>> str(PairOf(TEXT, SequenceOf(BOOLEAN)))
    'pair<Text,sequence-of<Boolean>>'
    >>> parse_type_key('optional<Number>') == OptionalOf(NUMBER)
    True

"""

import re
import types
import typing
import decimal
import fractions
import collections.abc

import attr

from structhash.errors import UnknownTypeError, InvalidTypeKeyError


class TypeKey(object):
    """Base class for all type keys."""

    form = None

    def children(self):
        return ()

    def __str__(self):
        inner = ','.join(str(c) for c in self.children())
        return '%s<%s>' % (self.form, inner)


def _check_child(instance, attribute, value):
    if not isinstance(value, TypeKey):
        raise InvalidTypeKeyError(
            'Expected a TypeKey for %s.%s but got %r (type=%s)' % (
                type(instance).__name__, attribute.name, value,
                type(value).__name__))


PRIMITIVE_NAME = re.compile(r'\A[A-Za-z_][A-Za-z0-9_.]*\Z')


def _check_name(instance, attribute, value):
    if not isinstance(value, str) or not PRIMITIVE_NAME.match(value):
        raise InvalidTypeKeyError(
            'Invalid primitive type name %r' % (value,))


@attr.s(frozen=True, slots=True)
class Primitive(TypeKey):
    name = attr.ib(validator=_check_name)

    def __str__(self):
        return self.name


@attr.s(frozen=True, slots=True)
class SequenceOf(TypeKey):
    form = 'sequence-of'

    element = attr.ib(validator=_check_child)

    def children(self):
        return (self.element,)


@attr.s(frozen=True, slots=True)
class OptionalOf(TypeKey):
    form = 'optional'

    element = attr.ib(validator=_check_child)

    def children(self):
        return (self.element,)


@attr.s(frozen=True, slots=True)
class PairOf(TypeKey):
    form = 'pair'

    left = attr.ib(validator=_check_child)
    right = attr.ib(validator=_check_child)

    def children(self):
        return (self.left, self.right)


@attr.s(frozen=True, slots=True)
class UnionOf(TypeKey):
    form = 'union'

    left = attr.ib(validator=_check_child)
    right = attr.ib(validator=_check_child)

    def children(self):
        return (self.left, self.right)


TEXT = Primitive('Text')
NUMBER = Primitive('Number')
BOOLEAN = Primitive('Boolean')

COMPOSITE_FORMS = {
    cls.form: cls for cls in (SequenceOf, OptionalOf, PairOf, UnionOf)
}


def check_well_founded(key):
    """Check that key is a TypeKey that does not contain itself.

    Frozen keys cannot normally be made cyclic, but a key mutated behind
    attrs' back would send hashing and resolution into an infinite loop, so
    this walks the key by identity before anything hashes it.

    """
    if not isinstance(key, TypeKey):
        raise InvalidTypeKeyError(
            'Expected a TypeKey but got %r (type=%s)' % (
                key, type(key).__name__))
    on_path = set()

    def walk(k):
        if id(k) in on_path:
            raise InvalidTypeKeyError(
                'Type key of form %r refers to itself' % (k.form,))
        if not isinstance(k, TypeKey):
            raise InvalidTypeKeyError(
                'Expected a TypeKey but got %r (type=%s)' % (
                    k, type(k).__name__))
        on_path.add(id(k))
        for child in k.children():
            walk(child)
        on_path.discard(id(k))

    walk(key)
    return key


def is_primitive(key):
    return isinstance(key, Primitive)


TOKEN = re.compile(r'\s*(?:(?P<punct>[<>,])|(?P<word>[A-Za-z_][\w.-]*))')


def _tokenize(text):
    tokens = []
    position = 0
    text = text.rstrip()
    while position < len(text):
        match = TOKEN.match(text, position)
        if match is None:
            raise InvalidTypeKeyError(
                'Unexpected character %r at position %d in %r' % (
                    text[position], position, text))
        tokens.append(match.group('punct') or match.group('word'))
        position = match.end()
    return tokens


def parse_type_key(text):
    """Parse the canonical textual form of a type key.

    Raises :class:`~structhash.errors.InvalidTypeKeyError` if text is not a
    well formed key.

    """
    if not isinstance(text, str):
        raise InvalidTypeKeyError(
            'Expected a str but got %r (type=%s)' % (
                text, type(text).__name__))
    tokens = _tokenize(text)
    if not tokens:
        raise InvalidTypeKeyError('Cannot parse an empty type key')
    position = [0]

    def peek():
        if position[0] < len(tokens):
            return tokens[position[0]]
        return None

    def expect(token):
        actual = peek()
        if actual != token:
            raise InvalidTypeKeyError(
                'Expected %r but got %r in %r' % (token, actual, text))
        position[0] += 1

    def parse():
        word = peek()
        if word is None or word in '<>,':
            raise InvalidTypeKeyError(
                'Expected a type name but got %r in %r' % (word, text))
        position[0] += 1
        if peek() != '<':
            if word in COMPOSITE_FORMS:
                raise InvalidTypeKeyError(
                    '%s in %r requires type arguments' % (word, text))
            return Primitive(word)
        try:
            cls = COMPOSITE_FORMS[word]
        except KeyError:
            raise InvalidTypeKeyError(
                'Unknown composite form %r in %r' % (word, text))
        expect('<')
        args = [parse()]
        while peek() == ',':
            position[0] += 1
            args.append(parse())
        expect('>')
        arity = len(attr.fields(cls))
        if len(args) != arity:
            raise InvalidTypeKeyError(
                '%s takes %d type arguments but got %d in %r' % (
                    word, arity, len(args), text))
        return cls(*args)

    result = parse()
    if peek() is not None:
        raise InvalidTypeKeyError(
            'Unexpected trailing %r in %r' % (peek(), text))
    return result


def as_type_key(key):
    """Accept a TypeKey or its textual form, and return a TypeKey."""
    if isinstance(key, str):
        return parse_type_key(key)
    return check_well_founded(key)


_global_type_key_lookup = {
    str: TEXT,
    bool: BOOLEAN,
    int: NUMBER,
    float: NUMBER,
    fractions.Fraction: NUMBER,
    decimal.Decimal: NUMBER,
}


def register_type_key(custom_type, key):
    """Map a Python type to a type key for :func:`from_type`."""
    if not isinstance(custom_type, type):
        raise InvalidTypeKeyError(
            'custom_type=%r must be a type' % (custom_type,))
    _global_type_key_lookup[custom_type] = as_type_key(key)


_SEQUENCE_ORIGINS = (
    list, collections.abc.Sequence, collections.abc.MutableSequence,
)

_UNION_ORIGINS = (typing.Union, getattr(types, 'UnionType', typing.Union))


def from_type(thing):
    """Look up the type key for a Python type or ``typing`` annotation.

    Registered classes map directly; ``List[T]``, ``Sequence[T]`` and
    ``Tuple[T, ...]`` become sequences, ``Tuple[T, U]`` a pair,
    ``Optional[T]`` an optional, and a two-armed ``Union[T, U]`` a union.
    Anything else raises :class:`~structhash.errors.UnknownTypeError`.

    """
    try:
        return _global_type_key_lookup[thing]
    except (KeyError, TypeError):
        pass
    origin = typing.get_origin(thing)
    args = typing.get_args(thing)
    if origin in _SEQUENCE_ORIGINS and len(args) == 1:
        return SequenceOf(from_type(args[0]))
    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return SequenceOf(from_type(args[0]))
        if len(args) == 2:
            return PairOf(from_type(args[0]), from_type(args[1]))
    if origin in _UNION_ORIGINS:
        arms = [a for a in args if a is not type(None)]
        if len(arms) == 1 and len(args) == 2:
            return OptionalOf(from_type(arms[0]))
        if len(arms) == 2:
            union = UnionOf(from_type(arms[0]), from_type(arms[1]))
            if len(args) == 3:
                return OptionalOf(union)
            return union
    raise UnknownTypeError(thing)
