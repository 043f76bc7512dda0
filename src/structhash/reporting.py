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

"""Diagnostic messages, shown or hidden by the verbosity setting.

Messages go to the current reporter, which prints them unless a caller has
swapped in another function with :func:`with_reporter`. A message may be a
callable returning the text, in which case it is only called when the
message is going to be shown.

Each function takes the settings object that governs the caller, such as
the one a law check was started with, and falls back to the default
settings.

"""

from structhash._settings import Verbosity
from structhash._settings import settings as structhash_settings
from structhash.internal.dynamicvariables import DynamicVariable

reporter = DynamicVariable(print)


def with_reporter(new_reporter):
    return reporter.with_value(new_reporter)


def verbosity_of(settings=None):
    return (settings or structhash_settings.default).verbosity


def emit(level, message, settings=None):
    """Send message to the current reporter if settings ask for at least
    level of verbosity."""
    if verbosity_of(settings) < level:
        return
    if callable(message):
        message = message()
    reporter.value(str(message))


def report(message, settings=None):
    emit(Verbosity.normal, message, settings)


def verbose_report(message, settings=None):
    emit(Verbosity.verbose, message, settings)


def debug_report(message, settings=None):
    emit(Verbosity.debug, message, settings)
