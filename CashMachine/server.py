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

"""Cash machine command server

Owns one cash machine and executes one command per line from stdin.
Every answer is one line on stdout, prefixed with "COMMAND ANSWER:".

Usage:
  cashmachine-server [--config=<dir>] [--log=<file>]
  cashmachine-server -h | --help

Options:
  --config=<dir>   Directory containing config.ini [default: ./]
  --log=<file>     Log file, overrides the logfile from config.ini
  -h, --help       Show this screen.

Commands:
  DEPOSIT <denomination> <count>   store notes                     -> OK
  DEPOSIT-BATCH <state>            store e.g. /4x100,1x500/        -> OK
  WITHDRAW <amount>                pay out, prefer large notes     -> OK <state>
  WITHDRAW-SMALL <amount>          pay out, prefer small notes     -> OK <state>
  STATE                            stored notes and total value    -> <state> <total>
  TOTAL                            total value                     -> <total>
  CAPACITY <denomination>          -> <held> <capacity> <remaining>
  QUIT                             exit (also on end of input)

Rejected commands answer "ERROR <reason>", e.g. "ERROR CapacityExceeded".
"""

import re
import sys

from docopt import docopt

from . import scriptHelper
from .cashState import CashState
from .DebugBase import DebugBase
from .helpers.withdrawal_helper import PayoutOrder
from .ledger import CashMachineError
from .machine import CashMachine


class CashMachineServer(DebugBase):

    """
    line-based command interface for one :class:`CashMachine.machine.CashMachine`

    Commands are executed strictly one after another, so the machine is never
    accessed concurrently.

    :param CashMachine.machine.CashMachine machine: the machine to operate
    :param output: stream for the answers (default: stdout)
    """

    def __init__(self, machine, output=None):
        self.machine = machine
        self.output = output if output is not None else sys.stdout
        self.debugName = machine.ledger.debugName

    def reply(self, s):
        s = "COMMAND ANSWER:" + str(s)
        self.output.write(s + "\n")
        self.output.flush()  # necessary if not run from console
        self.log(s)

    def handleCommand(self, command):
        """
        execute one command

        :param str command: command line without trailing newline
        :return: answer (without the "COMMAND ANSWER:" prefix)
        :rtype: str
        """
        command = command.strip()
        depositMatch = re.match("^DEPOSIT ([0-9]+) ([0-9]+)$", command)
        depositBatchMatch = re.match("^DEPOSIT-BATCH (/.*/)$", command)
        withdrawMatch = re.match("^WITHDRAW(-SMALL)? ([0-9]+)$", command)
        capacityMatch = re.match("^CAPACITY ([0-9]+)$", command)
        try:
            if depositMatch:
                [denomination, count] = [int(x) for x in depositMatch.groups()]
                self.machine.deposit(denomination, count)
                return "OK"
            elif depositBatchMatch:
                try:
                    batch = CashState.fromHumanString(depositBatchMatch.group(1))
                except ValueError as e:
                    self.warn("cannot parse batch: {0}".format(e))
                    return "ERROR UnknownCommand"
                self.machine.deposit_batch(batch)
                return "OK"
            elif withdrawMatch:
                order = PayoutOrder.ASCENDING if withdrawMatch.group(1) else PayoutOrder.DESCENDING
                plan = self.machine.withdraw(int(withdrawMatch.group(2)), order)
                return "OK " + plan.toHumanString()
            elif command == "STATE":
                state = self.machine.stored_cash
                return "{0} {1}".format(state.toHumanString(), state.sum)
            elif command == "TOTAL":
                return str(self.machine.total_value())
            elif capacityMatch:
                denomination = int(capacityMatch.group(1))
                return "{0} {1} {2}".format(self.machine.held(denomination), self.machine.capacity(denomination),
                                            self.machine.remaining_capacity(denomination))
        except CashMachineError as e:
            self.warn("command {0} rejected: {1}".format(repr(command), e))
            return "ERROR " + type(e).__name__
        self.warn("unknown command {0}".format(repr(command)))
        return "ERROR UnknownCommand"

    def run(self, stdin=None):
        """read and execute commands until QUIT or end of input"""
        if stdin is None:
            stdin = sys.stdin
        self.log("starting up")
        while True:
            command = stdin.readline()
            if command == "":
                # if readline() returns an empty string, the input was closed or EOF was received
                self.log("Exiting (stdin closed)")
                return
            command = command.strip()
            if command == "":
                continue
            self.log("cmd: " + command)
            if command == "QUIT":
                self.reply("OK")
                self.log("Exiting (QUIT)")
                return
            self.reply(self.handleCommand(command))


def main(argv=None):
    arguments = docopt(__doc__, argv=argv)
    configDir = arguments['--config']
    if not configDir.endswith("/"):
        configDir += "/"
    cfg = scriptHelper.getConfig(configDir)
    logfile = arguments['--log'] or cfg.get("general", "logfile", fallback="cashmachine.log")
    scriptHelper.setupLogging(logfile)
    scriptHelper.setupSigInt()
    machine = CashMachine.fromConfig(cfg)
    CashMachineServer(machine).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
