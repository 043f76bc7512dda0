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


class StructHashException(Exception):

    """Generic parent class for exceptions thrown by structhash."""
    pass


class DuplicateRegistrationError(StructHashException, KeyError):

    """A strategy was registered for a type key that already has one.

    At most one strategy may exist per key. The registry is left exactly
    as it was before the failed call.

    """

    def __init__(self, key):
        super(DuplicateRegistrationError, self).__init__(
            'A strategy for %s is already registered' % (key,))
        self.key = key

    def __str__(self):
        return self.args[0]


class UnknownTypeError(StructHashException, LookupError):

    """No strategy could be found for a type key, or for one of the element
    keys of a composite type key.

    This is recoverable: register a strategy for the missing key and
    resolve again.

    """

    def __init__(self, key, missing=None):
        self.key = key
        self.missing = key if missing is None else missing
        if self.missing == key:
            message = 'No strategy registered for %s' % (key,)
        else:
            message = 'Cannot resolve %s: no strategy registered for %s' % (
                key, self.missing)
        super(UnknownTypeError, self).__init__(message)


class InvalidTypeKeyError(StructHashException, TypeError):

    """A type key was malformed, self-referential, or of the wrong form for
    the operation it was passed to."""


class InvalidArgument(StructHashException, TypeError):

    """Used to indicate that the arguments to a structhash function were in
    some manner incorrect."""


class HashLawViolation(StructHashException, AssertionError):

    """A strategy broke one of its laws: two values it considers equal were
    given different codes, or a value was given something other than a
    code in range."""

    def __init__(self, key, a, b, code_a, code_b, message=None):
        if message is None:
            message = (
                'Hash law violated for %s: %r == %r but hashes are %d != %d'
                % (key, a, b, int(code_a), int(code_b)))
        super(HashLawViolation, self).__init__(message)
        self.key = key
        self.values = (a, b)
        self.codes = (code_a, code_b)
