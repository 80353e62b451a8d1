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

"""the cash machine: one ledger and one dispenser behind the deposit/withdrawal interfaces"""

import doctest

from .abstract import AbstractCashDeposit, AbstractCashWithdrawal
from .dispenser import Dispenser
from .helpers.withdrawal_helper import PayoutOrder
from .ledger import Ledger
from . import scriptHelper


class CashMachine(AbstractCashDeposit, AbstractCashWithdrawal):
    """
    banknote machine with per-denomination capacities

    >>> machine = CashMachine({100: 10, 500: 10})
    >>> machine.deposit(500, 1)
    >>> machine.deposit(100, 4)
    >>> machine.total_value()
    900
    >>> machine.withdraw(700).toHumanString()
    '/2x100,1x500/'
    >>> machine.stored_cash.toHumanString()
    '/2x100/'
    >>> machine.try_withdraw(800)
    (False, None)

    :param capacities: ``{denomination: maximum number of notes}``
    :type capacities: dict[CashMachine.cashState.Denomination | int, int]
    :param str name: name used in log messages
    """

    def __init__(self, capacities, name="main"):
        self.debugName = name
        self.ledger = Ledger(capacities, name=name)
        self.dispenser = Dispenser(self.ledger)

    @classmethod
    def fromConfig(cls, cfg, name="main"):
        """create a machine with the capacities from the ``[capacities]`` section of the configuration

        :type cfg: configparser.ConfigParser
        :rtype: CashMachine"""
        return cls(scriptHelper.getCapacities(cfg), name=name)

    def denominations(self):
        return self.ledger.denominations()

    def held(self, denomination):
        return self.ledger.held(denomination)

    def capacity(self, denomination):
        return self.ledger.capacity(denomination)

    def remaining_capacity(self, denomination):
        return self.ledger.remaining_capacity(denomination)

    def total_value(self):
        return self.ledger.total_value()

    @property
    def stored_cash(self):
        return self.ledger.snapshot()

    def deposit(self, denomination, count):
        self.ledger.deposit(denomination, count)

    def deposit_batch(self, items):
        self.ledger.deposit_batch(items)

    def withdraw(self, amount, order=PayoutOrder.DESCENDING):
        return self.dispenser.withdraw(amount, order)

    def try_withdraw(self, amount, order=PayoutOrder.DESCENDING):
        return super(CashMachine, self).try_withdraw(amount, order)

    def statesStr(self):
        """
        held, capacity and remaining capacity of every denomination, together with the total value

        :rtype: str
        """
        s = "denomination\theld\tcapacity\tremaining\n"
        for denomination in self.denominations():
            s += "{0}\t{1}\t{2}\t{3}\n".format(int(denomination), self.held(denomination),
                                               self.capacity(denomination), self.remaining_capacity(denomination))
        s += "===========\n"
        s += "TOTAL:\t{0}".format(self.stored_cash.toVerboseString())
        return s


def load_tests(loader, tests, ignore):
    """loader function to load the doctests in this module into unittest"""
    tests.addTests(doctest.DocTestSuite('CashMachine.machine'))
    return tests
