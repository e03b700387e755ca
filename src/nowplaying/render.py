# -*- coding: utf-8 -*-
# SPDX-License-Identifier: GPL-2.0


##########################################################################################
# Imports
##########################################################################################

from json import dumps as jdumps

from .playerctl import TrackMetadata


##########################################################################################
# Constants
##########################################################################################

default_max_length = 60
default_css_class = 'custom-player'
default_alt = 'playing'

_ellipsis = '.....'


##########################################################################################
# Functions
##########################################################################################

def format_text(metadata: TrackMetadata, max_length: int = default_max_length) -> str:
    '''
    Format the widget text of a track.

    Arguments:
        metadata   - metadata of the track
        max_length - number of characters kept before the ellipsis is appended
    '''

    text = f'{metadata.title} - {metadata.artist}'.replace('&', 'and')

    if len(text) > max_length:
        text = text[:max_length] + _ellipsis

    return text

def render_line(text: str, css_class: str = default_css_class, alt: str = default_alt) -> str:
    '''
    Render the JSON line consumed by waybar.

    Arguments:
        text      - the widget text
        css_class - CSS class of the widget
        alt       - alternative state string of the widget
    '''

    status = {
        'text': text,
        'class': css_class,
        'alt': alt,
    }

    return jdumps(status, ensure_ascii=False, separators=(',', ':'))
