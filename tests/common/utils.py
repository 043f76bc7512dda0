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

import contextlib

from structhash import settings, Verbosity
from structhash.reporting import with_reporter


@contextlib.contextmanager
def capture_reports(verbosity=Verbosity.debug):
    reports = []
    with settings(verbosity=verbosity):
        with with_reporter(reports.append):
            yield reports
