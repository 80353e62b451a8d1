#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# CashMachine, a banknote store with an exact-change dispenser.
# Copyright (C) 2026  CashMachine contributors
#
# This program is free software: you can redistribute it and/or modify it under the terms of the GNU
# General Public License as published by the Free Software Foundation, either version 3 of the
# License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without
# even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU
# General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program. If not,
# see <http://www.gnu.org/licenses/>.
#
""" Runs all unittests and doctests, automatically searches all modules of the CashMachine package """

import os
import sys
import unittest

if __name__ == "__main__":
    here = os.path.dirname(os.path.realpath(__file__))
    # every module is searched, so that load_tests() can add the doctests
    suite = unittest.TestLoader().discover(os.path.join(here, "CashMachine"), "*.py", top_level_dir=here)

    testresult = unittest.TextTestRunner(verbosity=1).run(suite)
    sys.exit(0 if testresult.wasSuccessful() else 1)
