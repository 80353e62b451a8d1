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

"""banknote denominations and cash states (how many notes of each denomination)

A :class:`CashState` is the common currency of this package: ledger snapshots,
withdrawal plans and batch deposits are all expressed as cash states.
"""

import copy
import doctest
import operator as op
from enum import IntEnum


class Denomination(IntEnum):
    """face values of the supported banknotes"""
    NOTE_10 = 10
    NOTE_50 = 50
    NOTE_100 = 100
    NOTE_500 = 500
    NOTE_1000 = 1000
    NOTE_2000 = 2000
    NOTE_5000 = 5000

    @classmethod
    def values(cls):
        """all face values, ascending

        >>> Denomination.values()
        [10, 50, 100, 500, 1000, 2000, 5000]

        :rtype: list[int]
        """
        return sorted(int(d) for d in cls)

    @classmethod
    def isValid(cls, value):
        """
        >>> Denomination.isValid(500)
        True
        >>> Denomination.isValid(20)
        False
        """
        return value in cls.values()


class CashState(object):

    """
    cash state of one store, e.g. the banknotes held by the machine or a withdrawal plan

    stores the information, how many notes of each denomination are present, e.g. "4 * 100 and 1 * 500"

    This class supports addition and subtraction. Counts may become negative
    while calculating differences; a state used as stock or plan never has negative counts.

    >>> CashState({500: 1, 100: 4}).sum
    900
    >>> (CashState({500: 1, 100: 4}) - CashState({100: 2})).toHumanString()
    '/2x100,1x500/'
    """

    def __init__(self, dictionary=None):
        # a default value dictionary={} would be a dangerous piece of code, google PyLint W0102 for more infos.
        if dictionary is None:
            dictionary = {}
        for key in dictionary.keys():
            assert isinstance(key, int) and not isinstance(key, bool), "denomination must be an integer"
            assert key > 0, "denomination must be positive"
        for value in dictionary.values():
            assert isinstance(value, int) and not isinstance(value, bool), "count must be an integer"

        # remove useless zero-entries like "0x100"
        self._d = {key: value for (key, value) in dictionary.items() if value != 0}

    def __add__(self, other):
        assert type(self) == type(other)
        sumState = copy.deepcopy(self._d)
        stateDelta = other.toDict()

        for denomination in stateDelta.keys():
            if denomination not in sumState:
                sumState[denomination] = 0
            sumState[denomination] += stateDelta[denomination]

        sumState = CashState(sumState)

        # sanity check
        assert self.sum + other.sum == sumState.sum
        return sumState

    def __sub__(self, other):
        assert type(other) == type(self)
        # basic check: negating twice should be identity
        assert op.neg(op.neg(other)) == other
        return self + (-other)

    def __neg__(self):
        negative = CashState({key: -value for (key, value) in self._d.items()})
        assert self.sum == -(negative.sum)
        return negative

    def __eq__(self, other):
        if type(self) != type(other):
            return False
        return self._d == other.toDict()

    def __len__(self):
        return len(self._d)

    def __bool__(self):
        return bool(self._d)

    def __repr__(self):
        return "CashState({0})".format(self.toHumanString())

    @property
    def sum(self):
        """
        total value of all notes
        """
        return sum([key * value for (key, value) in self._d.items()])

    @property
    def noteCount(self):
        """number of notes (sum of all counts)

        :rtype: int"""
        return sum(self._d.values())

    def get(self, denomination):
        """count for the given denomination, 0 if it is not contained

        :rtype: int"""
        return self._d.get(denomination, 0)

    def items(self):
        """``(denomination, count)`` pairs, ascending by denomination

        :rtype: list[(int, int)]"""
        return sorted(self._d.items())

    def toDict(self):
        """
        :returns: dictionary {denomination: count, ...}
        :rtype: dict[int, int]
        """
        return copy.deepcopy(self._d)

    def toHumanString(self):
        """ output state in the format ``/4x100,1x500/`` that :meth:`fromHumanString` takes

        :rtype: str"""
        s = "/" + ",".join("{0}x{1}".format(count, int(denomination))
                           for (denomination, count) in self.items()) + "/"
        assert self == CashState.fromHumanString(s), \
            "decoding didnt return equal state"
        return s

    def toVerboseString(self):
        """ output sum and state in the format ``900 \\t /4x100,1x500/`` for two-column printing

        :rtype: str"""
        return "{0}\t{1}".format(self.sum, self.toHumanString())

    @classmethod
    def fromHumanString(cls, s):
        """ state from string with a more human-friendly format: ``/4x100,1x500/``

        ``//`` is the empty state.

        >>> CashState.fromHumanString("/4x100,1x500/").toDict() == {100: 4, 500: 1}
        True
        >>> CashState.fromHumanString("//").sum
        0

        :raise: ValueError if the string is malformed
        """
        state = {}
        s = s.strip()
        if len(s) < 2 or s[0] != "/" or s[-1] != "/":
            raise ValueError("state string must be enclosed in /.../, for the empty state use //")
        s = s[1:-1]
        if s == "":
            return cls()
        for t in s.split(","):
            tempList = t.strip().split("x")
            if len(tempList) != 2:
                raise ValueError("state format must be /4x100,1x500/ (4 * 100, 1 * 500), got {0}".format(repr(t)))
            [val, key] = tempList
            try:
                key = int(key)
                val = int(val)
            except ValueError:
                raise ValueError("count and denomination must be integers, got {0}".format(repr(t)))
            if key <= 0:
                raise ValueError("denomination must be positive, got {0}".format(key))
            if key in state:
                raise ValueError("denominations must be unique, NOT e.g. /1x100,2x100/")
            state[key] = val
        return cls(state)


def load_tests(loader, tests, ignore):
    """loader function to load the doctests in this module into unittest"""
    tests.addTests(doctest.DocTestSuite('CashMachine.cashState'))
    return tests
