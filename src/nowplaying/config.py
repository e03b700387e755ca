# -*- coding: utf-8 -*-
# SPDX-License-Identifier: GPL-2.0

from __future__ import annotations


##########################################################################################
# Imports
##########################################################################################

from dataclasses import dataclass
from os import environ as os_environ
from pathlib import Path
from typing import Mapping

from .render import default_css_class, default_max_length
from .state import default_state_path


##########################################################################################
# Constants
##########################################################################################

_default_controller = 'playerctl'


##########################################################################################
# Dataclass definitions
##########################################################################################

@dataclass(frozen=True)
class NowPlayingConfig:
    '''
    Dataclass encoding the now-playing configuration.

    controller - name of the playerctl compatible controller binary
    state_path - path of the scratch file holding the remembered player
    max_length - number of characters shown before the text is cut
    css_class  - CSS class emitted in the JSON line
    debug      - enable debug logging
    '''

    controller: str
    state_path: Path
    max_length: int
    css_class: str
    debug: bool

    @staticmethod
    def read_environ(environ: Mapping[str, str] = os_environ) -> NowPlayingConfig:
        '''
        Create a now-playing config from environment variables.

        Arguments:
            environ - the environment to read from
        '''

        controller = environ.get('NOWPLAYING_CONTROLLER')
        if controller is None or len(controller) == 0:
            controller = _default_controller

        state_path = environ.get('NOWPLAYING_STATE_PATH')
        if state_path is None or len(state_path) == 0:
            state_path = default_state_path
        else:
            state_path = Path(state_path).expanduser()

        max_length_raw = environ.get('NOWPLAYING_MAX_LENGTH')
        if max_length_raw is None or len(max_length_raw) == 0:
            max_length = default_max_length
        else:
            try:
                max_length = int(max_length_raw)

            except ValueError:
                raise RuntimeError(f'invalid maximum length: {max_length_raw}')

            if max_length <= 0:
                raise RuntimeError(f'maximum length must be positive: {max_length}')

        css_class = environ.get('NOWPLAYING_CLASS')
        if css_class is None or len(css_class) == 0:
            css_class = default_css_class

        debug = len(environ.get('NOWPLAYING_DEBUG', '')) != 0

        return NowPlayingConfig(controller, state_path, max_length, css_class, debug)
