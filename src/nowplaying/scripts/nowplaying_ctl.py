# -*- coding: utf-8 -*-
# SPDX-License-Identifier: GPL-2.0


##########################################################################################
# Imports
##########################################################################################

import sys

from argparse import ArgumentParser, Namespace

from ..config import NowPlayingConfig
from ..errors import ControllerException
from ..log import setup_logger
from ..playerctl import LoopStatus, PlayerCtl, ShuffleStatus


##########################################################################################
# Constants
##########################################################################################

_log_prefix = 'nowplaying-ctl: '

_loop_choices = tuple(s.to_string() for s in LoopStatus)
_shuffle_choices = tuple(s.to_string() for s in ShuffleStatus)


##########################################################################################
# Internal functions
##########################################################################################

def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog='nowplaying-ctl', description='Control media players through playerctl.')

    '''
    Only the actions that can be scoped to a single player take -p.
    '''
    scoped = ArgumentParser(add_help=False)
    scoped.add_argument('-p', '--player', help='Name of the player to address')

    sub = parser.add_subparsers(dest='action', required=True)

    for action in ('play-pause', 'next', 'previous', 'status', 'metadata'):
        sub.add_parser(action, parents=[scoped])

    for action in ('play', 'pause', 'stop', 'list', 'active'):
        sub.add_parser(action)

    position = sub.add_parser('position', help='Seek relative to the current position')
    position.add_argument('value', type=float, help='Seconds, negative values seek backwards')

    volume = sub.add_parser('volume', help='Change the volume relative to the current one')
    volume.add_argument('value', type=float, help='Fraction from 0 to 1, negative values lower the volume')

    open_uri = sub.add_parser('open', help='Open a file path or web URL')
    open_uri.add_argument('uri')

    loop = sub.add_parser('loop', help='Get or set the loop status')
    loop.add_argument('value', nargs='?', choices=_loop_choices)

    shuffle = sub.add_parser('shuffle', help='Get or set the shuffle status')
    shuffle.add_argument('value', nargs='?', choices=_shuffle_choices)

    return parser

def _perform(ctl: PlayerCtl, parsed_args: Namespace) -> None:
    action = parsed_args.action
    player = getattr(parsed_args, 'player', None)

    if action == 'play':
        ctl.play()
    elif action == 'pause':
        ctl.pause()
    elif action == 'stop':
        ctl.stop()
    elif action == 'play-pause':
        ctl.play_pause(player)
    elif action == 'next':
        ctl.next(player)
    elif action == 'previous':
        ctl.previous(player)
    elif action == 'position':
        ctl.position(parsed_args.value)
    elif action == 'volume':
        ctl.volume(parsed_args.value)
    elif action == 'open':
        ctl.open(parsed_args.uri)
    elif action == 'status':
        if player is None:
            status = ctl.status()
        else:
            status = ctl.status_of(player)

        print(status.name, file=sys.stdout)

    elif action == 'metadata':
        metadata = ctl.metadata(player)

        print(f'artist: {metadata.artist}', file=sys.stdout)
        print(f'title: {metadata.title}', file=sys.stdout)
        print(f'album: {metadata.album}', file=sys.stdout)

    elif action == 'loop':
        if parsed_args.value is None:
            print(ctl.loop_get().to_string(), file=sys.stdout)
        else:
            ctl.loop_set(LoopStatus.from_string(parsed_args.value))

    elif action == 'shuffle':
        if parsed_args.value is None:
            print(ctl.shuffle_get().to_string(), file=sys.stdout)
        else:
            ctl.shuffle_set(ShuffleStatus.from_string(parsed_args.value))

    elif action == 'list':
        for name in ctl.list_all():
            print(name, file=sys.stdout)

    elif action == 'active':
        active = ctl.active_player()
        if active is not None:
            print(active, file=sys.stdout)


##########################################################################################
# Main
##########################################################################################

def main(args: list[str]) -> int:
    '''
    Main function.

    Arguments:
        args - list of string arguments from the CLI
    '''

    parsed_args = _build_parser().parse_args(args[1:])

    try:
        config = NowPlayingConfig.read_environ()

    except Exception as exc:
        print(f'error: failed to read config from environment: {exc}', file=sys.stderr)

        return 1

    lg = setup_logger(config.debug)

    ctl = PlayerCtl(config.controller)

    try:
        _perform(ctl, parsed_args)

    except ControllerException as exc:
        lg.error(_log_prefix + f'controller failure: {exc}')

        return 2

    return 0
