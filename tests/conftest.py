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

from tests.common.setup import run
from structhash.registry import StrategyRegistry
from structhash.laws import _value_sources
from structhash.strategies import STRATEGY_CACHE

run()


@pytest.fixture(scope='function', autouse=True)
def fresh_default_registry():
    """Tests may register strategies on the default registry, so every test
    starts from a newly built one."""
    StrategyRegistry.clear_default()
    yield
    StrategyRegistry.clear_default()
    STRATEGY_CACHE.clear()


@pytest.fixture(scope='function', autouse=True)
def fresh_value_sources():
    """Value sources registered by a test are forgotten after it."""
    saved = dict(_value_sources)
    yield
    _value_sources.clear()
    _value_sources.update(saved)


@pytest.fixture()
def registry():
    return StrategyRegistry.default().new_child_registry()
