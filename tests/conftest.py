# -*- coding: utf-8 -*-
# SPDX-License-Identifier: GPL-2.0


import pytest

from nowplaying.playerctl import PlayerCtl


class FakeController:
    '''
    Stand-in for the controller binary.

    Records each command line and answers from a table of canned outputs.
    '''

    def __init__(self, responses=None):
        self.responses = dict(responses or {})
        self.calls = []

    def __call__(self, cmdline: str) -> str:
        self.calls.append(cmdline)
        return self.responses.get(cmdline, '')


@pytest.fixture
def controller():
    return FakeController()


@pytest.fixture
def ctl(controller):
    return PlayerCtl(runner=controller)
