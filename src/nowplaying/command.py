# -*- coding: utf-8 -*-
# SPDX-License-Identifier: GPL-2.0


##########################################################################################
# Imports
##########################################################################################

from subprocess import run as prun

from .errors import ControllerErrorType, ControllerException


##########################################################################################
# Functions
##########################################################################################

def run_command(cmdline: str) -> str:
    '''
    Run a controller command and return its standard output.

    Arguments:
        cmdline - executable name plus whitespace separated arguments

    The exit status of the command is ignored, playerctl exits non-zero
    when no player is available.
    '''

    p_args = cmdline.split()
    if len(p_args) == 0:
        raise ControllerException(ControllerErrorType.Launch, 'empty command line')

    try:
        p = prun(p_args, capture_output=True)

    except OSError as exc:
        raise ControllerException(ControllerErrorType.Launch, f'failed to execute command \'{cmdline}\': {exc}')

    try:
        return p.stdout.decode('utf-8')

    except UnicodeDecodeError as exc:
        raise ControllerException(ControllerErrorType.Decode, f'stdout of \'{cmdline}\' is not valid UTF-8: {exc}')
