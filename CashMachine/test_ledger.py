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

"""unittests for ledger.py"""

import threading
import unittest

from .cashState import CashState, Denomination
from .ledger import (
    Ledger,
    CashMachineError,
    UnknownDenomination,
    InvalidCount,
    CapacityExceeded,
    EmptyBatch,
)


def same_capacities(capacity):
    """capacity table with the same capacity for every denomination"""
    return {denomination: capacity for denomination in Denomination}


class LedgerTestCase(unittest.TestCase):
    """unittests for :class:`Ledger`"""

    def assertUnchanged(self, ledger, held):
        """check that the held counts are exactly ``held``"""
        self.assertEqual(ledger.snapshot(), CashState(held))

    def test_construction(self):
        for capacity in [0, 10, 100, 1000]:
            ledger = Ledger(same_capacities(capacity))
            self.assertEqual(ledger.total_value(), 0)
            for denomination in Denomination:
                self.assertEqual(ledger.capacity(denomination), capacity)
                self.assertEqual(ledger.held(denomination), 0)
                self.assertEqual(ledger.remaining_capacity(denomination), capacity)
            self.assertEqual(ledger.denominations(), list(Denomination))

    def test_construction_with_plain_integers(self):
        ledger = Ledger({500: 3, 100: 10})
        self.assertEqual(ledger.denominations(), [Denomination.NOTE_100, Denomination.NOTE_500])
        self.assertEqual(ledger.capacity(Denomination.NOTE_500), 3)

    def test_invalid_construction(self):
        with self.assertRaises(ValueError):
            Ledger({20: 10})
        with self.assertRaises(ValueError):
            Ledger({100: -1})
        with self.assertRaises(ValueError):
            Ledger({100: "10"})

    def test_empty_ledger(self):
        ledger = Ledger({})
        self.assertEqual(ledger.denominations(), [])
        self.assertEqual(ledger.total_value(), 0)
        self.assertEqual(ledger.snapshot(), CashState())
        with self.assertRaises(UnknownDenomination):
            ledger.deposit(Denomination.NOTE_10, 1)
        with self.assertRaises(UnknownDenomination):
            ledger.deposit(1000, 1)
        self.assertEqual(ledger.total_value(), 0)

    def test_unknown_denomination(self):
        ledger = Ledger({100: 10})
        for denomination in [500, 20, 0, -100, "100", 100.0, True, None]:
            for query in [ledger.held, ledger.capacity, ledger.remaining_capacity]:
                with self.assertRaises(UnknownDenomination, msg=repr(denomination)):
                    query(denomination)
            with self.assertRaises(UnknownDenomination):
                ledger.deposit(denomination, 1)
            with self.assertRaises(UnknownDenomination):
                ledger.deposit_batch({denomination: 1})
        self.assertUnchanged(ledger, {})

    def test_errors_share_base_class(self):
        for error in [UnknownDenomination, InvalidCount, CapacityExceeded, EmptyBatch]:
            self.assertTrue(issubclass(error, CashMachineError))

    def test_deposit(self):
        for (count, denomination) in [(10, 10), (20, 10), (50, 10), (10, 100), (30, 100)]:
            ledger = Ledger(same_capacities(5000))
            for i in range(100):
                ledger.deposit(denomination, count)
                self.assertEqual(ledger.held(denomination), count * (i + 1))
                self.assertEqual(ledger.total_value(), count * denomination * (i + 1))

    def test_deposit_invalid_count(self):
        ledger = Ledger(same_capacities(5000))
        for count in [0, -1, 1.5, "1", None, True]:
            with self.assertRaises(InvalidCount, msg=repr(count)):
                ledger.deposit(100, count)
        self.assertUnchanged(ledger, {})

    def test_deposit_overflow(self):
        for count in [10, 20, 50]:
            ledger = Ledger(same_capacities(count * 10))
            for _ in range(10):
                ledger.deposit(100, count)
            self.assertEqual(ledger.remaining_capacity(100), 0)
            for _ in range(10):
                with self.assertRaises(CapacityExceeded):
                    ledger.deposit(100, count)
                self.assertEqual(ledger.held(100), count * 10)
                self.assertEqual(ledger.total_value(), count * 10 * 100)

    def test_deposit_up_to_capacity(self):
        ledger = Ledger({100: 5})
        ledger.deposit(100, 3)
        with self.assertRaises(CapacityExceeded):
            ledger.deposit(100, 3)
        ledger.deposit(100, 2)
        self.assertEqual(ledger.held(100), 5)
        self.assertEqual(ledger.remaining_capacity(100), 0)

    def test_zero_capacity(self):
        ledger = Ledger({100: 0})
        with self.assertRaises(CapacityExceeded):
            ledger.deposit(100, 1)
        self.assertUnchanged(ledger, {})

    def test_deposit_batch(self):
        for count in [1, 10, 100]:
            ledger = Ledger(same_capacities(100000))
            batch = {Denomination.NOTE_100: count, Denomination.NOTE_500: 10 * count}
            for i in range(100):
                ledger.deposit_batch(batch)
                self.assertEqual(ledger.held(100), count * (i + 1))
                self.assertEqual(ledger.held(500), 10 * count * (i + 1))
                self.assertEqual(ledger.total_value(), (100 * count + 500 * 10 * count) * (i + 1))

    def test_deposit_batch_as_cash_state(self):
        ledger = Ledger(same_capacities(10))
        ledger.deposit_batch(CashState.fromHumanString("/4x100,1x500/"))
        self.assertEqual(ledger.total_value(), 900)

    def test_deposit_batch_empty(self):
        ledger = Ledger(same_capacities(5000))
        for _ in range(10):
            with self.assertRaises(EmptyBatch):
                ledger.deposit_batch({})
            with self.assertRaises(EmptyBatch):
                ledger.deposit_batch(CashState())
        self.assertUnchanged(ledger, {})

    def test_deposit_batch_zero_counts(self):
        """zero entries are skipped the same way for dicts and cash states"""
        ledger = Ledger(same_capacities(10))
        for batch in [{100: 0}, {100: 0, 500: 0}, CashState({100: 0})]:
            with self.assertRaises(EmptyBatch, msg=repr(batch)):
                ledger.deposit_batch(batch)
        self.assertUnchanged(ledger, {})
        ledger.deposit_batch({100: 0, 500: 2})
        self.assertUnchanged(ledger, {500: 2})
        with self.assertRaises(InvalidCount):
            ledger.deposit_batch({100: 0, 500: -1})
        self.assertUnchanged(ledger, {500: 2})

    def test_deposit_batch_overflow_is_all_or_nothing(self):
        for count in [10, 20, 50]:
            ledger = Ledger(same_capacities(count * 100))
            batch = {100: count, 500: 10 * count}
            for _ in range(10):
                ledger.deposit_batch(batch)
            for _ in range(10):
                with self.assertRaises(CapacityExceeded):
                    ledger.deposit_batch(batch)
                self.assertEqual(ledger.held(100), count * 10)
                self.assertEqual(ledger.held(500), count * 100)

    def test_deposit_batch_checks_every_entry_first(self):
        """the first entry fits, the second does not -> nothing is stored"""
        ledger = Ledger({100: 10, 500: 2, 1000: 10})
        with self.assertRaises(CapacityExceeded):
            ledger.deposit_batch({100: 5, 500: 3})
        self.assertUnchanged(ledger, {})
        with self.assertRaises(UnknownDenomination):
            ledger.deposit_batch({100: 5, 2000: 1})
        self.assertUnchanged(ledger, {})
        with self.assertRaises(InvalidCount):
            ledger.deposit_batch({100: 5, 1000: -1})
        self.assertUnchanged(ledger, {})

    def test_withdraw_apply(self):
        ledger = Ledger({100: 10, 500: 10})
        ledger.deposit_batch({100: 4, 500: 1})
        ledger.withdraw_apply(CashState({500: 1, 100: 2}))
        self.assertUnchanged(ledger, {100: 2})
        ledger.withdraw_apply({100: 2})
        self.assertEqual(ledger.total_value(), 0)

    def test_total_value_follows_counts(self):
        ledger = Ledger(same_capacities(50))
        expected = 0
        for denomination in Denomination:
            ledger.deposit(denomination, 3)
            expected += 3 * denomination
            self.assertEqual(ledger.total_value(), expected)
            self.assertEqual(ledger.snapshot().sum, expected)

    def test_logging(self):
        ledger = Ledger({100: 1}, name="kiosk")
        with self.assertLogs("CashMachine.Ledger.kiosk", level="INFO") as cm:
            ledger.deposit(100, 1)
            with self.assertRaises(CapacityExceeded):
                ledger.deposit(100, 1)
        self.assertEqual(cm.records[0].levelname, "INFO")
        self.assertIn("deposit 1 x 100", cm.records[0].getMessage())
        self.assertEqual(cm.records[1].levelname, "WARNING")

    def test_concurrent_deposits(self):
        """deposits from several threads are neither lost nor exceed the capacity"""
        ledger = Ledger({10: 1000})

        def depositor():
            for _ in range(200):
                try:
                    ledger.deposit(10, 1)
                except CapacityExceeded:
                    pass

        threads = [threading.Thread(target=depositor) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(ledger.held(10), 1000)


if __name__ == "__main__":
    unittest.main()
