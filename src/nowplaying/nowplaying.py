# -*- coding: utf-8 -*-
# SPDX-License-Identifier: GPL-2.0


##########################################################################################
# Imports
##########################################################################################

import sys

from logging import Logger, getLogger
from typing import Optional, TextIO

from .playerctl import PlayerCtl, PlayerStatus
from .render import default_css_class, default_max_length, format_text, render_line
from .state import PlayerStore


##########################################################################################
# Constants
##########################################################################################

_log_prefix = 'nowplaying: '


##########################################################################################
# Class definitions
##########################################################################################

class NowPlaying:
    '''
    Decides what the status bar widget shows and where user commands go.

    Arguments:
        ctl        - control facade of the media controller
        store      - storage of the remembered player
        out        - stream receiving the widget line
        max_length - number of characters shown before the text is cut
        css_class  - CSS class emitted in the JSON line
        lg         - logger used for diagnostics
    '''

    def __init__(self, ctl: PlayerCtl, store: PlayerStore, out: Optional[TextIO] = None,
                 max_length: int = default_max_length, css_class: str = default_css_class,
                 lg: Optional[Logger] = None):
        self._ctl = ctl
        self._store = store
        self._out = sys.stdout if out is None else out
        self._max_length = max_length
        self._css_class = css_class
        self._lg = getLogger() if lg is None else lg

    def _emit(self, line: str) -> None:
        print(line, file=self._out, flush=True)

    def _vanish(self) -> None:
        self._emit('')

    def _draw(self, player: str) -> None:
        metadata = self._ctl.metadata(player)
        text = format_text(metadata, self._max_length)

        self._emit(render_line(text, self._css_class))

    def handle_command(self, player: Optional[str], args: list[str]) -> bool:
        '''
        Forward a CLI command to a player and remember that player.

        Arguments:
            player - name of the target player, nothing is done if None
            args   - list of string arguments from the CLI

        Returns True if a command was forwarded.
        '''

        if player is None or len(player) == 0 or len(args) != 2:
            return False

        cmd = args[1]

        if cmd == 'play-pause':
            self._ctl.play_pause(player)
        elif cmd == 'next':
            self._ctl.next(player)
        elif cmd == 'previous':
            self._ctl.previous(player)
        else:
            self._lg.debug(_log_prefix + f'ignoring unknown command: {cmd}')

            return False

        self._lg.debug(_log_prefix + f'forwarded {cmd} to player: {player}')

        self._store.write(player)

        return True

    def run(self, args: list[str]) -> None:
        '''
        Perform a single widget refresh.

        Arguments:
            args - list of string arguments from the CLI
        '''

        if self._ctl.status() == PlayerStatus.NoPlayer:
            player = None
        else:
            player = self._ctl.active_player()

        self._lg.debug(_log_prefix + f'active player: {player}')

        if player is None:
            self._vanish()

            '''
            Nothing is playing, a remembered player allows resuming playback.
            '''
            self.handle_command(self._store.read(), args)

            return

        self._draw(player)
        self.handle_command(player, args)
