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

"""The two arms of a disjoint union value.

``Left(1)`` and ``Right(1)`` are never equal, so union strategies can hash
them apart by arm before looking at the wrapped value.

"""

import attr


@attr.s(frozen=True, slots=True)
class Left(object):
    value = attr.ib()


@attr.s(frozen=True, slots=True)
class Right(object):
    value = attr.ib()
