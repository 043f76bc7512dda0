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

"""Package defining HashStrategy, which is the core type that structhash
uses to turn values into hash codes."""

from structhash.hashstrategy.strategies import HashStrategy

__all__ = ['HashStrategy']
