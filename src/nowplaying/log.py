# -*- coding: utf-8 -*-
# SPDX-License-Identifier: GPL-2.0


##########################################################################################
# Imports
##########################################################################################

from logging import DEBUG, WARNING, Logger, StreamHandler, getLogger
from logging.handlers import SysLogHandler
from pathlib import Path


##########################################################################################
# Constants
##########################################################################################

_syslog_path = Path('/dev/log')


##########################################################################################
# Functions
##########################################################################################

def setup_logger(debug: bool) -> Logger:
    '''
    Set up the root logger.

    Arguments:
        debug - enable debug messages

    Messages go to syslog, or to stderr if no syslog socket is available.
    The standard output is reserved for the status bar.
    '''

    lg = getLogger()

    if _syslog_path.exists():
        lg.addHandler(SysLogHandler(_syslog_path.as_posix()))
    else:
        lg.addHandler(StreamHandler())

    lg.setLevel(DEBUG if debug else WARNING)

    return lg
