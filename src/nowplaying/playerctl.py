# -*- coding: utf-8 -*-
# SPDX-License-Identifier: GPL-2.0

from __future__ import annotations


##########################################################################################
# Imports
##########################################################################################

from dataclasses import dataclass
from enum import IntEnum, unique
from typing import Callable, Optional

from .command import run_command
from .errors import ControllerErrorType, ControllerException


##########################################################################################
# Constants
##########################################################################################

_default_binary = 'playerctl'


##########################################################################################
# Enumerator definitions
##########################################################################################

@unique
class PlayerStatus(IntEnum):
    '''
    Player status enumerator.

    Playing  - media is currently playing
    Paused   - media is currently paused
    Stopped  - media is currently stopped
    NoPlayer - no player found, or the controller reported something unknown
    '''

    Playing  = 0
    Paused   = 1
    Stopped  = 2
    NoPlayer = 3

    @staticmethod
    def from_string(raw: str) -> PlayerStatus:
        '''
        Parse a player status from raw controller output.

        Arguments:
            raw - the raw string input

        Never fails, anything unknown (e.g. "No players found") maps to NoPlayer.
        '''

        return _player_status_map.get(raw.strip(), PlayerStatus.NoPlayer)

@unique
class LoopStatus(IntEnum):
    '''
    Loop status enumerator.

    NoLoop   - media is not looping (controller text: None)
    Track    - the current track will loop
    Playlist - all tracks will loop
    '''

    NoLoop   = 0
    Track    = 1
    Playlist = 2

    @staticmethod
    def from_string(raw: str) -> LoopStatus:
        for status in LoopStatus:
            if status.to_string() == raw.strip():
                return status

        raise ControllerException(ControllerErrorType.Malformed, f'failed to parse loop status: {raw.strip()}')

    def to_string(self) -> str:
        if self == LoopStatus.NoLoop:
            return 'None'

        return self.name

@unique
class ShuffleStatus(IntEnum):
    '''
    Shuffle status enumerator.

    On     - media will be shuffled
    Off    - media will not be shuffled
    Toggle - the shuffle status will be toggled
    '''

    On     = 0
    Off    = 1
    Toggle = 2

    @staticmethod
    def from_string(raw: str) -> ShuffleStatus:
        for status in ShuffleStatus:
            if status.to_string() == raw.strip():
                return status

        raise ControllerException(ControllerErrorType.Malformed, f'failed to parse shuffle status: {raw.strip()}')

    def to_string(self) -> str:
        return self.name


_player_status_map = {
    'Playing': PlayerStatus.Playing,
    'Paused': PlayerStatus.Paused,
    'Stopped': PlayerStatus.Stopped,
}


##########################################################################################
# Dataclass definitions
##########################################################################################

@dataclass(frozen=True)
class TrackMetadata:
    '''
    Metadata of the currently playing track.

    artist - the track's artist
    title  - the track's title
    album  - the track's album

    Fields that are not available are empty strings.
    '''

    artist: str
    title: str
    album: str


##########################################################################################
# Internal functions
##########################################################################################

def _signed_arg(value: float) -> str:
    '''
    Encode a relative value as used by position and volume.

    Arguments:
        value - the relative value, negative values go backwards
    '''

    magnitude = abs(value)

    if float(magnitude).is_integer():
        magnitude_str = str(int(magnitude))
    else:
        magnitude_str = repr(float(magnitude))

    if value < 0:
        return f'{magnitude_str}-'
    else:
        return f'{magnitude_str}+'


##########################################################################################
# Class definitions
##########################################################################################

class PlayerCtl:
    '''
    Control facade around a playerctl compatible command line tool.

    Arguments:
        binary - name of the controller executable
        runner - callable that executes a command line and returns its stdout
    '''

    def __init__(self, binary: str = _default_binary, runner: Callable[[str], str] = run_command):
        self._binary = binary
        self._runner = runner

    def _command(self, cmd: str, player: Optional[str] = None) -> str:
        if player is not None:
            return self._runner(f'{self._binary} -p {player} {cmd}')

        return self._runner(f'{self._binary} {cmd}')

    def play(self) -> None:
        self._command('play')

    def pause(self) -> None:
        self._command('pause')

    def stop(self) -> None:
        self._command('stop')

    def play_pause(self, player: Optional[str] = None) -> None:
        self._command('play-pause', player)

    def next(self, player: Optional[str] = None) -> None:
        self._command('next', player)

    def previous(self, player: Optional[str] = None) -> None:
        self._command('previous', player)

    def position(self, secs: float) -> None:
        '''
        Seek forwards / backwards in seconds.
        '''

        self._command(f'position {_signed_arg(secs)}')

    def volume(self, percent: float) -> None:
        '''
        Change the volume by the given fraction from 0 to 1.
        '''

        self._command(f'volume {_signed_arg(percent)}')

    def status(self) -> PlayerStatus:
        return PlayerStatus.from_string(self._command('status'))

    def status_of(self, player: str) -> PlayerStatus:
        return PlayerStatus.from_string(self._command('status', player))

    def metadata(self, player: Optional[str] = None) -> TrackMetadata:
        title = self._command('metadata title', player).strip()
        artist = self._command('metadata artist', player).strip()
        album = self._command('metadata album', player).strip()

        return TrackMetadata(artist=artist, title=title, album=album)

    def open(self, uri: str) -> None:
        '''
        Open the given URI in the player.

        Arguments:
            uri - a file path or web URL
        '''

        self._command(f'open {uri}')

    def loop_get(self) -> LoopStatus:
        return LoopStatus.from_string(self._command('loop'))

    def loop_set(self, status: LoopStatus) -> None:
        self._command(f'loop {status.to_string()}')

    def shuffle_get(self) -> ShuffleStatus:
        return ShuffleStatus.from_string(self._command('shuffle'))

    def shuffle_set(self, status: ShuffleStatus) -> None:
        self._command(f'shuffle {status.to_string()}')

    def list_all(self) -> list[str]:
        '''
        List the names of all registered players.

        An empty listing yields a single empty name.
        '''

        return self._command('-l').strip().split('\n')

    def active_player(self) -> Optional[str]:
        '''
        Get the first player, in listing order, that is currently playing.

        Returns None if no player is playing.
        '''

        for player in self.list_all():
            if len(player) == 0:
                continue

            if self.status_of(player) == PlayerStatus.Playing:
                return player

        return None
