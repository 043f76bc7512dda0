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

import pytest

from structhash import settings, Verbosity
from structhash.errors import InvalidArgument


@pytest.fixture()
def restore_profile():
    previous = settings._current_profile
    yield
    settings.load_profile(previous)


def test_has_defaults():
    x = settings()
    assert x.cache_composites is True
    assert x.derandomize is False
    assert x.max_examples >= 1


def test_inherits_from_parent():
    parent = settings(max_examples=7)
    assert settings(parent).max_examples == 7
    assert settings(parent, max_examples=3).max_examples == 3


@pytest.mark.parametrize('kwargs', [
    {'max_examples': 0},
    {'max_examples': True},
    {'max_examples': 1.5},
    {'cache_composites': 1},
    {'derandomize': None},
    {'verbosity': 'loud'},
    {'verbosity': 2},
    {'no_such_setting': 1},
])
def test_rejects_invalid_arguments(kwargs):
    with pytest.raises(InvalidArgument):
        settings(**kwargs)


def test_verbosity_can_be_given_by_name():
    assert settings(verbosity='debug').verbosity == Verbosity.debug


def test_settings_are_immutable():
    x = settings()
    with pytest.raises(AttributeError):
        x.max_examples = 5
    with pytest.raises(AttributeError):
        x.no_such_setting = 5


def test_cannot_assign_default():
    with pytest.raises(AttributeError):
        settings.default = settings()


def test_context_manager_sets_the_default():
    before = settings.default
    with settings(max_examples=11) as s:
        assert settings.default is s
        with settings(max_examples=12):
            assert settings.default.max_examples == 12
        assert settings.default.max_examples == 11
    assert settings.default is before


def test_repr_lists_settings():
    r = repr(settings(max_examples=9))
    assert r.startswith('settings(')
    assert 'max_examples=9' in r
    assert 'verbosity=Verbosity.' in r


def test_settings_properties_are_documented():
    assert 'composite' in settings.cache_composites.__doc__


def test_can_load_a_profile(restore_profile):
    settings.register_profile('tiny', settings(max_examples=2))
    settings.load_profile('tiny')
    assert settings.default.max_examples == 2
    assert settings().max_examples == 2


def test_unknown_profile_is_an_error():
    with pytest.raises(InvalidArgument):
        settings.get_profile('nonexistent')


def test_profile_must_be_settings():
    with pytest.raises(InvalidArgument):
        settings.register_profile('bad', {'max_examples': 2})


def test_loads_profile_from_environment(monkeypatch, restore_profile):
    settings.register_profile('from-env', settings(derandomize=True))
    monkeypatch.setenv('STRUCTHASH_PROFILE', 'from-env')
    assert settings.load_profile_from_environment().derandomize


def test_environment_may_name_no_profile(monkeypatch):
    monkeypatch.delenv('STRUCTHASH_PROFILE', raising=False)
    assert settings.load_profile_from_environment() is settings.default


def test_verbosities_are_ordered():
    assert Verbosity.quiet < Verbosity.normal < Verbosity.verbose
    assert Verbosity.verbose < Verbosity.debug
    assert sorted(reversed(Verbosity.all)) == Verbosity.all


def test_verbosity_by_name():
    assert Verbosity.by_name('quiet') is Verbosity.quiet
    assert repr(Verbosity.by_name('verbose')) == 'Verbosity.verbose'
    with pytest.raises(InvalidArgument):
        Verbosity.by_name('all')
