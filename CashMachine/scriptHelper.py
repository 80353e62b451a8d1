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

"""process setup shared by the scripts: logging, signals and configuration"""

import codecs
import logging
import logging.handlers
import signal
import sys
from configparser import ConfigParser

from .cashState import Denomination


def setupLogging(logfile):
    """configures the logging and logrotation"""
    my_logger = logging.getLogger()
    # rotate every day at 00:00, delete after 14 days
    handler = logging.handlers.TimedRotatingFileHandler(logfile, when='midnight', interval=1, backupCount=14)
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', '%Y-%m-%d %H:%M:%S'))
    my_logger.setLevel(0)  # change this to 0 to log everything, even DEBUG-1, change to DEBUG to limit the amount of useless messages
    my_logger.addHandler(handler)
    consolehandler = logging.StreamHandler()  # log to stderr
    consolehandler.setLevel(logging.INFO)
    my_logger.addHandler(consolehandler)
    my_logger.info("started logging to " + logfile)


def setupSigInt():
    def sigint(num, frame):
        logging.error("killed")
        sys.exit(1)
    signal.signal(signal.SIGINT, sigint)


def getConfig(path="./"):
    """
    read ``config.ini`` from the given directory

    :rtype: ConfigParser
    """
    cfg = ConfigParser()
    try:
        with codecs.open(path + 'config.ini', 'r', 'utf8') as f:
            cfg.read_file(f)
    except IOError:
        raise Exception("Cannot open configuration file. If you want to try the program and do not have a config, just copy config.ini.example to config.ini")
    return cfg


def getCapacities(cfg):
    """
    denomination table from the ``[capacities]`` section, one line ``<face value> = <maximum number of notes>``
    per denomination

    :type cfg: ConfigParser
    :rtype: dict[Denomination, int]
    :raise: ValueError on unknown denominations or invalid capacities
    """
    capacities = {}
    for (key, value) in cfg.items("capacities"):
        try:
            denomination = int(key)
        except ValueError:
            raise ValueError("invalid denomination '{0}' in [capacities]".format(key))
        if not Denomination.isValid(denomination):
            raise ValueError("unsupported denomination {0} in [capacities], allowed are {1}".format(
                denomination, Denomination.values()))
        try:
            capacity = int(value)
        except ValueError:
            raise ValueError("invalid capacity '{0}' for {1} in [capacities]".format(value, denomination))
        if capacity < 0:
            raise ValueError("capacity for {0} must not be negative".format(denomination))
        capacities[Denomination(denomination)] = capacity
    return capacities
