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

"""A module controlling settings for structhash.

Either an explicit settings object can be used or the default object on
this module can be modified by loading a profile.

"""

import os
import threading

import attr

from structhash.errors import InvalidArgument
from structhash.internal.dynamicvariables import DynamicVariable

__all__ = [
    'settings', 'Verbosity',
]


all_settings = {}


class settingsProperty(object):

    def __init__(self, name):
        self.name = name

    def __get__(self, obj, type=None):
        if obj is None:
            return self
        try:
            return obj.__dict__[self.name]
        except KeyError:
            raise AttributeError(self.name)

    def __set__(self, obj, value):
        obj.__dict__[self.name] = value

    def __delete__(self, obj):
        raise AttributeError('Cannot delete attribute %s' % (self.name,))

    @property
    def __doc__(self):
        setting = all_settings[self.name]
        return '%s\n\ndefault value: %r' % (
            setting.description, setting.default)


default_variable = DynamicVariable(None)


class settingsMeta(type):

    @property
    def default(self):
        v = default_variable.value
        if v is not None:
            return v
        if hasattr(settings, '_current_profile'):
            settings.load_profile(settings._current_profile)
            assert default_variable.value is not None
        return default_variable.value

    @default.setter
    def default(self, value):
        raise AttributeError('Cannot assign settings.default')

    def _assign_default_internal(self, value):
        default_variable.default = value


class settings(settingsMeta('settings', (object,), {})):
    """A settings object controls how hashing strategies are cached, how
    chatty structhash is, and how hard the law checker looks for
    counterexamples.

    Default values are picked up from the settings.default object and
    changes made there will be picked up in newly created settings.

    """

    _WHITELISTED_REAL_PROPERTIES = ['_construction_complete', 'storage']
    _profiles = {}

    def __getattr__(self, name):
        if name in all_settings:
            return all_settings[name].default
        raise AttributeError('settings has no attribute %s' % (name,))

    def __init__(self, parent=None, **kwargs):
        self._construction_complete = False
        defaults = parent or settings.default
        for name in kwargs:
            if name not in all_settings:
                raise InvalidArgument('Invalid argument %s' % (name,))
        for setting in all_settings.values():
            if setting.name in kwargs:
                value = setting.validator(kwargs[setting.name])
            elif defaults is not None:
                value = getattr(defaults, setting.name)
            else:
                value = setting.default
            setattr(self, setting.name, value)
        self.storage = threading.local()
        self._construction_complete = True

    def defaults_stack(self):
        try:
            return self.storage.defaults_stack
        except AttributeError:
            self.storage.defaults_stack = []
            return self.storage.defaults_stack

    @classmethod
    def define_setting(cls, name, description, default, validator):
        """Add a new setting.

        - name is the name of the property that will be used to access the
          setting. This must be a valid python identifier.
        - description will appear in the property's docstring
        - validator is called with any explicitly passed value and returns
          the value to store, raising InvalidArgument if it is unusable.

        """
        all_settings[name] = Setting(
            name, description.strip(), default, validator)
        setattr(settings, name, settingsProperty(name))

    def __setattr__(self, name, value):
        if name in settings._WHITELISTED_REAL_PROPERTIES:
            return object.__setattr__(self, name, value)
        elif name in all_settings:
            if self._construction_complete:
                raise AttributeError(
                    'settings objects are immutable and may not be assigned to'
                    ' after construction.'
                )
            return object.__setattr__(self, name, value)
        else:
            raise AttributeError('No such setting %s' % (name,))

    def __repr__(self):
        bits = []
        for name in all_settings:
            value = getattr(self, name)
            bits.append('%s=%r' % (name, value))
        bits.sort()
        return 'settings(%s)' % ', '.join(bits)

    def __enter__(self):
        default_context_manager = default_variable.with_value(self)
        self.defaults_stack().append(default_context_manager)
        default_context_manager.__enter__()
        return self

    def __exit__(self, *args, **kwargs):
        default_context_manager = self.defaults_stack().pop()
        return default_context_manager.__exit__(*args, **kwargs)

    @staticmethod
    def register_profile(name, profile):
        """Registers a collection of values to be used as a settings profile.

        ``profile`` must be a settings object.

        """
        if not isinstance(profile, settings):
            raise InvalidArgument(
                'Expected a settings object but got %r' % (profile,))
        settings._profiles[name] = profile

    @staticmethod
    def get_profile(name):
        """Return the profile with the given name, raising InvalidArgument if
        it does not exist."""
        try:
            return settings._profiles[name]
        except KeyError:
            raise InvalidArgument(
                "Profile '%s' has not been registered" % (name,))

    @staticmethod
    def load_profile(name):
        """Make the named profile the default settings.

        Any setting not defined in the profile will be the library defined
        default for that setting.

        """
        profile = settings.get_profile(name)
        settings._current_profile = name
        settings._assign_default_internal(profile)

    @staticmethod
    def load_profile_from_environment(variable='STRUCTHASH_PROFILE'):
        """Load the profile named by an environment variable, if it is
        set."""
        name = os.getenv(variable)
        if name:
            settings.load_profile(name)
        return settings.default


@attr.s()
class Setting(object):
    name = attr.ib()
    description = attr.ib()
    default = attr.ib()
    validator = attr.ib()


class Verbosity(object):

    def __repr__(self):
        return 'Verbosity.%s' % (self.name,)

    def __init__(self, name, level):
        self.name = name
        self.level = level

    def __eq__(self, other):
        return isinstance(other, Verbosity) and (
            self.level == other.level
        )

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return self.level

    def __lt__(self, other):
        return self.level < other.level

    def __le__(self, other):
        return self.level <= other.level

    def __gt__(self, other):
        return self.level > other.level

    def __ge__(self, other):
        return self.level >= other.level

    @classmethod
    def by_name(cls, key):
        result = getattr(cls, key, None)
        if isinstance(result, Verbosity):
            return result
        raise InvalidArgument('No such verbosity level %r' % (key,))


Verbosity.quiet = Verbosity('quiet', 0)
Verbosity.normal = Verbosity('normal', 1)
Verbosity.verbose = Verbosity('verbose', 2)
Verbosity.debug = Verbosity('debug', 3)
Verbosity.all = [
    Verbosity.quiet, Verbosity.normal, Verbosity.verbose, Verbosity.debug
]


def _validate_verbosity(value):
    if isinstance(value, str):
        return Verbosity.by_name(value)
    if value not in Verbosity.all:
        raise InvalidArgument(
            'Invalid verbosity, %r. Valid options: %r' % (
                value, Verbosity.all))
    return value


def _validate_bool(name):
    def accept(value):
        if not isinstance(value, bool):
            raise InvalidArgument(
                'Invalid %s, %r. Must be True or False' % (name, value))
        return value
    return accept


def _validate_max_examples(value):
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise InvalidArgument(
            'Invalid max_examples, %r. Must be a positive integer' % (value,))
    return value


ENVIRONMENT_VERBOSITY_OVERRIDE = os.getenv('STRUCTHASH_VERBOSITY_LEVEL')

if ENVIRONMENT_VERBOSITY_OVERRIDE:  # pragma: no cover
    DEFAULT_VERBOSITY = Verbosity.by_name(ENVIRONMENT_VERBOSITY_OVERRIDE)
else:
    DEFAULT_VERBOSITY = Verbosity.normal

settings.define_setting(
    'verbosity',
    default=DEFAULT_VERBOSITY,
    validator=_validate_verbosity,
    description='Control the verbosity level of structhash messages',
)

settings.define_setting(
    'cache_composites',
    default=True,
    validator=_validate_bool('cache_composites'),
    description="""
If True, a registry remembers the strategy it built for each composite type
key and hands the same object back on later resolutions.
"""
)

settings.define_setting(
    'max_examples',
    default=100,
    validator=_validate_max_examples,
    description="""
The number of value pairs the law checker tries before deciding that a
strategy obeys a law.
"""
)

settings.define_setting(
    'derandomize',
    default=False,
    validator=_validate_bool('derandomize'),
    description="""
If True, the law checker generates the same examples on every run.
"""
)

settings.register_profile('default', settings())
settings.load_profile('default')
assert settings.default is not None
