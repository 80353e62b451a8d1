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

"""abstract interfaces of a cash machine

A machine is used through narrower views than its full interface: a deposit
terminal only needs :class:`AbstractCashDeposit`, a display only needs
:class:`AbstractCashInfo`. :class:`CashMachine.machine.CashMachine` implements all of them.
"""

from abc import ABCMeta, abstractmethod  # abstract base class support

from .DebugBase import DebugBase
from .ledger import CashMachineError


class AbstractCashInfo(DebugBase, metaclass=ABCMeta):
    """read-only access to the stored notes"""

    @abstractmethod
    def denominations(self):
        """configured denominations, ascending

        :rtype: list[CashMachine.cashState.Denomination]"""
        pass

    @abstractmethod
    def held(self, denomination):
        """number of stored notes of the given denomination"""
        pass

    @abstractmethod
    def capacity(self, denomination):
        """maximum number of notes of the given denomination"""
        pass

    @abstractmethod
    def remaining_capacity(self, denomination):
        """number of notes of the given denomination that can still be deposited"""
        pass

    @abstractmethod
    def total_value(self):
        """value of all stored notes

        :rtype: int"""
        pass

    @property
    @abstractmethod
    def stored_cash(self):
        """copy of the stored notes

        :rtype: CashMachine.cashState.CashState"""
        pass


class AbstractCashDeposit(AbstractCashInfo):
    """access for storing notes"""

    @abstractmethod
    def deposit(self, denomination, count):
        """store ``count`` notes of one denomination

        :raise: CashMachine.ledger.CashMachineError"""
        pass

    @abstractmethod
    def deposit_batch(self, items):
        """store a bundle of notes, either completely or not at all

        :param items: ``{denomination: count}``
        :raise: CashMachine.ledger.CashMachineError"""
        pass


class AbstractCashWithdrawal(AbstractCashInfo):
    """access for paying out notes"""

    @abstractmethod
    def withdraw(self, amount, order):
        """pay out exactly ``amount``

        :return: the paid out notes
        :rtype: CashMachine.cashState.CashState
        :raise: CashMachine.ledger.CashMachineError"""
        pass

    def try_withdraw(self, amount, order):
        """like :meth:`withdraw`, but report failure by the return value

        The reason for a failure is logged.

        :return: ``(True, paid out notes)`` or ``(False, None)``
        :rtype: (bool, CashMachine.cashState.CashState | None)"""
        try:
            return (True, self.withdraw(amount, order))
        except CashMachineError as e:
            self.log("withdrawal of {0} failed: {1}: {2}".format(repr(amount), type(e).__name__, e))
            return (False, None)
