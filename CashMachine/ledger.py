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

"""banknote ledger: how many notes of each denomination are held, and how many fit in"""

import threading

from .cashState import CashState, Denomination
from .DebugBase import DebugBase


class CashMachineError(Exception):
    """base class for all rejected cash machine operations.

    These errors are reported to the caller and never leave the ledger in a changed state."""
    pass


class UnknownDenomination(CashMachineError):
    """the denomination is not a valid face value or not configured in this machine"""
    pass


class InvalidCount(CashMachineError):
    """the number of notes is zero, negative or not an integer"""
    pass


class CapacityExceeded(CashMachineError):
    """the notes would not fit into the store for their denomination"""
    pass


class EmptyBatch(CashMachineError):
    """a batch deposit without any entries"""
    pass


def _isInteger(value):
    return isinstance(value, int) and not isinstance(value, bool)


class Ledger(DebugBase):
    """
    record of the banknotes held by one cash machine

    For every configured denomination, the ledger stores ``held`` (notes currently stored)
    and ``capacity`` (maximum number of notes). ``0 <= held <= capacity`` holds after every
    operation. Denominations that were not configured at construction can neither be
    deposited nor withdrawn.

    Every mutation is checked completely before anything is changed, so a failed
    operation has no effect. Mutations take :attr:`lock`; callers that need a
    consistent read-compute-write sequence (see :class:`CashMachine.dispenser.Dispenser`)
    hold the lock for the whole sequence.

    :param capacities: ``{denomination: maximum number of notes}``, may be empty
    :type capacities: dict[Denomination | int, int]
    :param str name: name used in log messages
    :raise: ValueError if a denomination is not a valid face value or a capacity is negative
    """

    def __init__(self, capacities, name="main"):
        self.debugName = name
        self.lock = threading.RLock()
        self._held = {}
        self._capacity = {}
        for (denomination, capacity) in capacities.items():
            if not _isInteger(denomination) or not Denomination.isValid(denomination):
                raise ValueError("invalid denomination {0}".format(repr(denomination)))
            if not _isInteger(capacity) or capacity < 0:
                raise ValueError("capacity for {0} must be a non-negative integer, got {1}".format(
                    int(denomination), repr(capacity)))
            denomination = Denomination(denomination)
            self._held[denomination] = 0
            self._capacity[denomination] = capacity
        self.debug("configured capacities {0}".format(
            {int(d): c for (d, c) in sorted(self._capacity.items())}))

    def _denomination(self, denomination):
        """
        check that the denomination is configured in this ledger

        :rtype: Denomination
        :raise: UnknownDenomination
        """
        if not _isInteger(denomination) or not Denomination.isValid(denomination):
            raise UnknownDenomination("invalid denomination {0}".format(repr(denomination)))
        denomination = Denomination(denomination)
        if denomination not in self._capacity:
            raise UnknownDenomination("denomination {0} is not supported by this machine".format(int(denomination)))
        return denomination

    def denominations(self):
        """configured denominations, ascending

        :rtype: list[Denomination]"""
        return sorted(self._capacity.keys())

    def held(self, denomination):
        """number of notes currently stored

        :raise: UnknownDenomination"""
        return self._held[self._denomination(denomination)]

    def capacity(self, denomination):
        """maximum number of notes that can be stored

        :raise: UnknownDenomination"""
        return self._capacity[self._denomination(denomination)]

    def remaining_capacity(self, denomination):
        """number of notes that can still be deposited

        :raise: UnknownDenomination"""
        denomination = self._denomination(denomination)
        return self._capacity[denomination] - self._held[denomination]

    def total_value(self):
        """value of all stored notes. Computed from the counts on every call.

        :rtype: int"""
        return sum([int(denomination) * count for (denomination, count) in self._held.items()])

    def snapshot(self):
        """copy of the stored notes

        :rtype: CashState"""
        with self.lock:
            return CashState(dict(self._held))

    def deposit(self, denomination, count):
        """
        store ``count`` notes of the given denomination

        :raise: UnknownDenomination, InvalidCount, CapacityExceeded
        """
        with self.lock:
            denomination = self._denomination(denomination)
            if not _isInteger(count) or count <= 0:
                self.warn("rejected deposit of {0} x {1}: invalid count".format(repr(count), int(denomination)))
                raise InvalidCount("cannot deposit {0} notes".format(repr(count)))
            remaining = self.remaining_capacity(denomination)
            if count > remaining:
                self.warn("rejected deposit of {0} x {1}: only {2} fit".format(count, int(denomination), remaining))
                raise CapacityExceeded("cannot store {0} more notes of {1}, remaining capacity is {2}".format(
                    count, int(denomination), remaining))
            self._held[denomination] += count
            self._checkInvariants()
            self.log("deposit {0} x {1}, total value {2}".format(count, int(denomination), self.total_value()))

    def deposit_batch(self, items):
        """
        store several denominations at once, all or nothing

        Every entry is checked against the current state before any entry is applied.
        Entries with count 0 are skipped, like in :class:`CashState`. A batch without any
        note to store is rejected as empty.

        :param items: ``{denomination: count}``
        :type items: dict[Denomination | int, int] | CashState
        :raise: EmptyBatch, UnknownDenomination, InvalidCount, CapacityExceeded
        """
        if isinstance(items, CashState):
            items = items.toDict()
        with self.lock:
            if not items:
                self.warn("rejected empty batch deposit")
                raise EmptyBatch("nothing to deposit")
            checked = {}
            for (denomination, count) in items.items():
                denomination = self._denomination(denomination)
                if not _isInteger(count) or count < 0:
                    self.warn("rejected batch deposit: invalid count {0} for {1}".format(repr(count), int(denomination)))
                    raise InvalidCount("cannot deposit {0} notes".format(repr(count)))
                remaining = self.remaining_capacity(denomination)
                if count > remaining:
                    self.warn("rejected batch deposit: {0} x {1} do not fit, only {2}".format(
                        count, int(denomination), remaining))
                    raise CapacityExceeded("cannot store {0} more notes of {1}, remaining capacity is {2}".format(
                        count, int(denomination), remaining))
                if count > 0:
                    checked[denomination] = count
            if not checked:
                self.warn("rejected batch deposit without notes: {0}".format(repr(items)))
                raise EmptyBatch("nothing to deposit")
            # everything fits, now apply
            for (denomination, count) in checked.items():
                self._held[denomination] += count
            self._checkInvariants()
            self.log("batch deposit {0}, total value {1}".format(
                CashState(checked).toHumanString(), self.total_value()))

    def withdraw_apply(self, plan):
        """
        remove the notes of a withdrawal plan

        The caller must have checked ``plan(d) <= held(d)`` against the current,
        unmodified state while holding :attr:`lock`.

        :type plan: CashState | dict[Denomination | int, int]
        :raise: UnknownDenomination if the plan contains an unconfigured denomination
        """
        if isinstance(plan, CashState):
            plan = plan.toDict()
        with self.lock:
            plan = {self._denomination(denomination): count for (denomination, count) in plan.items()}
            for (denomination, count) in plan.items():
                self._held[denomination] -= count
            self._checkInvariants()
            self.log("withdraw {0}, total value {1}".format(CashState(plan).toHumanString(), self.total_value()))

    def _checkInvariants(self):
        for denomination in self._capacity:
            assert 0 <= self._held[denomination] <= self._capacity[denomination], \
                "held count for {0} out of range".format(int(denomination))
