# -*- coding: utf-8 -*-
# SPDX-License-Identifier: GPL-2.0


##########################################################################################
# Imports
##########################################################################################

import sys

from ..config import NowPlayingConfig
from ..errors import ControllerException
from ..log import setup_logger
from ..nowplaying import NowPlaying
from ..playerctl import PlayerCtl
from ..state import FilePlayerStore


##########################################################################################
# Constants
##########################################################################################

_log_prefix = 'waybar-nowplaying: '


##########################################################################################
# Main
##########################################################################################

def main(args: list[str]) -> int:
    '''
    Main function.

    Arguments:
        args - list of string arguments from the CLI

    Prints either the now-playing JSON line or a blank line, and forwards
    an optional play-pause|next|previous command to the active player.
    '''

    try:
        config = NowPlayingConfig.read_environ()

    except Exception as exc:
        print(f'error: failed to read config from environment: {exc}', file=sys.stderr)

        return 1

    lg = setup_logger(config.debug)

    ctl = PlayerCtl(config.controller)
    store = FilePlayerStore(config.state_path)

    np = NowPlaying(ctl, store, sys.stdout, config.max_length, config.css_class, lg)

    try:
        np.run(args)

    except ControllerException as exc:
        lg.error(_log_prefix + f'controller failure: {exc}')

        return 2

    except BrokenPipeError as exc:
        lg.error(_log_prefix + f'lost standard output pipe: {exc}')

        return 4

    except (OSError, UnicodeDecodeError) as exc:
        lg.error(_log_prefix + f'failed to access remembered player: {store.get_path()}: {exc}')

        return 3

    return 0
