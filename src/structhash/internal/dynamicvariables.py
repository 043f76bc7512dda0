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

import threading
from contextlib import contextmanager


class DynamicVariable(object):
    """A value with a process-wide default that each thread can temporarily
    rebind with :meth:`with_value`."""

    def __init__(self, default):
        self.default = default
        self.__local = threading.local()

    def __stack(self):
        try:
            return self.__local.stack
        except AttributeError:
            self.__local.stack = []
            return self.__local.stack

    @property
    def value(self):
        stack = self.__stack()
        if stack:
            return stack[-1]
        return self.default

    @contextmanager
    def with_value(self, value):
        stack = self.__stack()
        stack.append(value)
        try:
            yield value
        finally:
            stack.pop()
