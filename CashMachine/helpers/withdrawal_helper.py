#!/usr/bin/env python3
# -*- coding: utf-8 -*-

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

"""helper functions for exact-change payout from a limited stock of notes"""

import doctest
from enum import Enum


class PayoutOrder(Enum):
    """order in which denominations are tried when several exact payouts exist"""
    #: prefer few, large notes
    DESCENDING = "descending"
    #: prefer many, small notes ("use smaller bills")
    ASCENDING = "ascending"

    def sort(self, denominations):
        """
        :param denominations: iterable of face values
        :return: the face values sorted in this order
        :rtype: list[int]
        """
        return sorted(denominations, reverse=(self is PayoutOrder.DESCENDING))


def find_payout(notes, requested, order=PayoutOrder.DESCENDING):
    """
    find a combination of notes that sums up exactly to the requested amount

    This is a bounded subset sum: every denomination may be used at most as
    often as notes of it are available. The set of reachable sums starts
    with ``{0}`` and is extended once per available note, so that a note is
    never counted twice for the same sum. For every newly reached sum, the
    denomination that produced it is stored, which allows walking back from
    the requested amount to zero afterwards.

    The result is the first combination found in the given order, it is not
    guaranteed to use the minimum number of notes.

    >>> find_payout({500: 1, 100: 4}, 700) == {500: 1, 100: 2}
    True
    >>> find_payout({1000: 1, 500: 2}, 1000)
    {1000: 1}
    >>> find_payout({1000: 1, 500: 2}, 1000, PayoutOrder.ASCENDING)
    {500: 2}
    >>> find_payout({5000: 1, 2000: 4}, 8000)
    {2000: 4}
    >>> find_payout({500: 1, 100: 4}, 850) is None
    True

    :param notes: available notes as ``{value: count}``. Values must be positive integers,
        counts must be non-negative integers.
    :type notes: dict[int, int]
    :param int requested: requested amount, must be positive
    :param PayoutOrder order: order in which the denominations are tried
    :return: ``{value: count}`` with ``sum(value * count) == requested``
        and ``count <= notes[value]``, or ``None`` if the amount cannot be paid exactly.
        Denominations that are not used do not appear in the result.
    :rtype: dict[int, int] | None
    """
    assert isinstance(requested, int)
    assert requested > 0, "requested amount must be positive"
    for (value, count) in notes.items():
        assert isinstance(value, int) and value > 0
        assert isinstance(count, int) and count >= 0

    # producer[s] is the denomination that first reached the sum s.
    # None means unreachable (or s == 0, which needs no notes).
    producer = [None] * (requested + 1)
    reachable = [0]
    limits = max_note_counts(notes, requested)

    for value in order.sort(notes.keys()):
        for _ in range(limits[value]):
            # extend the sums as they were before this pass, so that this pass
            # adds exactly one more note of this value
            newly_reached = []
            for s in reachable:
                new_sum = s + value
                if new_sum > requested or producer[new_sum] is not None:
                    continue
                producer[new_sum] = value
                newly_reached.append(new_sum)
            if not newly_reached:
                # another note of this value cannot reach anything new
                break
            reachable.extend(newly_reached)
            if producer[requested] is not None:
                return _walk_back(producer, requested)
    return None


def _walk_back(producer, requested):
    """reconstruct the notes for the requested sum from the producer table of :func:`find_payout`"""
    payout = {}
    remaining = requested
    while remaining > 0:
        value = producer[remaining]
        assert value is not None, "broken producer chain at {0}".format(remaining)
        payout[value] = payout.get(value, 0) + 1
        remaining -= value
    assert remaining == 0
    return payout


def max_note_counts(notes, requested):
    """
    upper bound for the number of notes of each value that can be useful for
    a payout of the requested amount

    :type notes: dict[int, int]
    :param int requested: requested amount
    :rtype: dict[int, int]

    >>> max_note_counts({500: 3, 100: 40, 1000: 2}, 700) == {500: 1, 100: 7, 1000: 0}
    True
    """
    return {value: min(count, requested // value) for (value, count) in notes.items()}


def load_tests(loader, tests, ignore):
    """loader function to load the doctests in this module into unittest"""
    tests.addTests(doctest.DocTestSuite('CashMachine.helpers.withdrawal_helper'))
    return tests
