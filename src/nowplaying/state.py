# -*- coding: utf-8 -*-
# SPDX-License-Identifier: GPL-2.0


##########################################################################################
# Imports
##########################################################################################

from pathlib import Path
from typing import Optional


##########################################################################################
# Constants
##########################################################################################

'''
Scratch file holding the name of the remembered player.
'''
default_state_path = Path('/tmp/waybar_player')


##########################################################################################
# Class definitions
##########################################################################################

class PlayerStore:
    '''
    Storage for the remembered player name.
    '''

    def read(self) -> Optional[str]:
        raise NotImplementedError

    def write(self, player: str) -> None:
        raise NotImplementedError

class FilePlayerStore(PlayerStore):
    '''
    Remembered player backed by a single plain-text file.

    Arguments:
        path - path of the scratch file

    The file holds the player name verbatim and is overwritten on each write.
    An empty file means no player is remembered.
    '''

    def __init__(self, path: Path = default_state_path):
        self._path = path

    def get_path(self) -> Path:
        return self._path

    def read(self) -> Optional[str]:
        if not self._path.exists():
            return None

        player = self._path.read_text(encoding='utf-8')
        if len(player.strip()) == 0:
            return None

        return player

    def write(self, player: str) -> None:
        self._path.write_text(player, encoding='utf-8')

class MemoryPlayerStore(PlayerStore):
    def __init__(self, player: Optional[str] = None):
        self._player = player

    def read(self) -> Optional[str]:
        return self._player

    def write(self, player: str) -> None:
        self._player = player
