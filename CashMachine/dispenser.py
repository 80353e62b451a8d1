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

"""withdrawal of an exact amount from a :class:`CashMachine.ledger.Ledger`"""

from .cashState import CashState
from .DebugBase import DebugBase
from .helpers.withdrawal_helper import PayoutOrder, find_payout
from .ledger import CashMachineError


class ZeroAmount(CashMachineError):
    """a withdrawal of nothing was requested"""
    pass


class InvalidAmount(CashMachineError):
    """the requested amount is negative or not an integer"""
    pass


class InsufficientOrUnreachableAmount(CashMachineError):
    """the held notes cannot be combined to exactly the requested amount"""
    pass


class Dispenser(DebugBase):
    """
    pays out exact amounts from a ledger

    The dispenser itself has no state. For every withdrawal it reads the held notes,
    searches a combination that matches the requested amount exactly
    (see :func:`CashMachine.helpers.withdrawal_helper.find_payout`) and removes these
    notes from the ledger. Reading, planning and removing happen while holding the
    ledger's lock, so the plan is always valid for the state it is applied to.

    :param CashMachine.ledger.Ledger ledger: the ledger to pay out from
    """

    def __init__(self, ledger):
        self.ledger = ledger
        self.debugName = ledger.debugName

    def plan(self, amount, order=PayoutOrder.DESCENDING):
        """
        compute which notes would be paid out, without changing the ledger

        :param int amount: requested amount
        :param PayoutOrder order: denomination preference
        :return: the notes to pay out
        :rtype: CashState
        :raise: ZeroAmount, InvalidAmount, InsufficientOrUnreachableAmount
        """
        if not isinstance(amount, int) or isinstance(amount, bool) or amount < 0:
            self.warn("rejected withdrawal of {0}: invalid amount".format(repr(amount)))
            raise InvalidAmount("cannot withdraw {0}".format(repr(amount)))
        if amount == 0:
            self.warn("rejected withdrawal of 0")
            raise ZeroAmount("cannot withdraw nothing")
        if not isinstance(order, PayoutOrder):
            raise TypeError("order must be a PayoutOrder, got {0}".format(repr(order)))
        with self.ledger.lock:
            available = self.ledger.snapshot()
            if amount > available.sum:
                self.warn("rejected withdrawal of {0}: only {1} available".format(amount, available.sum))
                raise InsufficientOrUnreachableAmount("cannot withdraw {0}, only {1} available".format(
                    amount, available.sum))
            notes = available.toDict()
            payout = find_payout(notes, amount, order)
            if payout is None:
                self.warn("rejected withdrawal of {0}: no exact combination of {1}".format(
                    amount, available.toHumanString()))
                raise InsufficientOrUnreachableAmount("cannot withdraw exactly {0} from {1}".format(
                    amount, available.toHumanString()))
            plan = CashState(payout)
            assert plan.sum == amount, "plan does not match the requested amount"
            for (denomination, count) in plan.items():
                assert 0 < count <= notes[denomination], "plan uses more notes than available"
            self.debug("plan for {0} ({1}): {2}".format(amount, order.value, plan.toHumanString()))
            return plan

    def withdraw(self, amount, order=PayoutOrder.DESCENDING):
        """
        pay out exactly the requested amount

        :param int amount: requested amount
        :param PayoutOrder order: denomination preference,
            :attr:`PayoutOrder.ASCENDING` uses smaller bills
        :return: the notes that were removed from the ledger
        :rtype: CashState
        :raise: ZeroAmount, InvalidAmount, InsufficientOrUnreachableAmount. The ledger is unchanged then.
        """
        with self.ledger.lock:
            plan = self.plan(amount, order)
            self.ledger.withdraw_apply(plan)
        return plan
