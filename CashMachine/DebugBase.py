#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# base class for logging in the cash machine components

# (C) 2026 CashMachine contributors

#  This program is free software: you can redistribute it and/or modify
#  it under the terms of the GNU General Public License as published by
#  the Free Software Foundation, either version 3 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU General Public License for more details.
#
#  The text of the license conditions can be read at
#  <http://www.gnu.org/licenses/>.

import logging


class DebugBase(object):
    """base class to supply logging code

    Messages go to the logger ``CashMachine.<ClassName>``. Subclasses may set
    ``debugName`` to add an instance name, e.g. ``CashMachine.Ledger.main``.
    """

    #: debug level -> logging level
    LOG_LEVELS = {-1: logging.ERROR, 0: logging.WARNING, 1: logging.INFO, 2: logging.DEBUG, 3: logging.DEBUG - 1}

    debugName = None

    @property
    def logger(self):
        name = "CashMachine." + type(self).__name__
        if self.debugName:
            name += "." + self.debugName
        return logging.getLogger(name)

    def printDebug(self, s, debugLevel):
        self.logger.log(self.LOG_LEVELS[debugLevel], s)

    def log(self, s):
        self.printDebug(s, 1)

    def warn(self, s):
        self.printDebug(s, 0)

    def debug(self, s):
        self.printDebug(s, 2)
