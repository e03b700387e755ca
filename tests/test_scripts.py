# -*- coding: utf-8 -*-
# SPDX-License-Identifier: GPL-2.0


from subprocess import CompletedProcess

import pytest

from nowplaying.scripts.nowplaying_ctl import main as ctl_main
from nowplaying.scripts.waybar_nowplaying import main as waybar_main


def _fake_prun(responses, calls):
    def _prun(p_args, capture_output):
        cmdline = ' '.join(p_args)
        calls.append(cmdline)

        stdout = responses.get(cmdline, '')

        return CompletedProcess(p_args, 0, stdout=stdout.encode('utf-8'), stderr=b'')

    return _prun


@pytest.fixture(autouse=True)
def environ(monkeypatch, tmp_path):
    for key in ('NOWPLAYING_CONTROLLER', 'NOWPLAYING_MAX_LENGTH', 'NOWPLAYING_CLASS', 'NOWPLAYING_DEBUG'):
        monkeypatch.delenv(key, raising=False)

    monkeypatch.setenv('NOWPLAYING_STATE_PATH', str(tmp_path / 'waybar_player'))

    return tmp_path / 'waybar_player'


@pytest.fixture(autouse=True)
def quiet_logger(mocker):
    return mocker.patch('nowplaying.scripts.waybar_nowplaying.setup_logger')


def test_waybar_main_playing(mocker, capsys, environ):
    calls = []
    mocker.patch('nowplaying.command.prun', side_effect=_fake_prun({
        'playerctl status': 'Playing\n',
        'playerctl -l': 'spotify\n',
        'playerctl -p spotify status': 'Playing\n',
        'playerctl -p spotify metadata title': 'Song\n',
        'playerctl -p spotify metadata artist': 'Artist\n',
    }, calls))

    assert waybar_main(['waybar-nowplaying', 'next']) == 0

    assert capsys.readouterr().out == '{"text":"Song - Artist","class":"custom-player","alt":"playing"}\n'
    assert calls[-1] == 'playerctl -p spotify next'
    assert environ.read_text() == 'spotify'


def test_waybar_main_missing_controller(mocker, capsys):
    mocker.patch('nowplaying.command.prun', side_effect=FileNotFoundError(2, 'No such file or directory'))

    assert waybar_main(['waybar-nowplaying']) == 2
    assert capsys.readouterr().out == ''


def test_waybar_main_bad_config(monkeypatch, capsys):
    monkeypatch.setenv('NOWPLAYING_MAX_LENGTH', 'many')

    assert waybar_main(['waybar-nowplaying']) == 1
    assert capsys.readouterr().out == ''


def test_waybar_main_unwritable_state(mocker, monkeypatch, tmp_path):
    monkeypatch.setenv('NOWPLAYING_STATE_PATH', str(tmp_path / 'missing' / 'waybar_player'))

    calls = []
    mocker.patch('nowplaying.command.prun', side_effect=_fake_prun({
        'playerctl status': 'Playing\n',
        'playerctl -l': 'spotify\n',
        'playerctl -p spotify status': 'Playing\n',
    }, calls))

    assert waybar_main(['waybar-nowplaying', 'play-pause']) == 3


def test_ctl_main_status(mocker, capsys):
    mocker.patch('nowplaying.scripts.nowplaying_ctl.setup_logger')
    calls = []
    mocker.patch('nowplaying.command.prun', side_effect=_fake_prun({
        'playerctl -p mpv status': 'Paused\n',
    }, calls))

    assert ctl_main(['nowplaying-ctl', 'status', '-p', 'mpv']) == 0
    assert capsys.readouterr().out == 'Paused\n'


def test_ctl_main_loop_set(mocker):
    mocker.patch('nowplaying.scripts.nowplaying_ctl.setup_logger')
    calls = []
    mocker.patch('nowplaying.command.prun', side_effect=_fake_prun({}, calls))

    assert ctl_main(['nowplaying-ctl', 'loop', 'None']) == 0
    assert calls == ['playerctl loop None']


def test_ctl_main_position_backwards(mocker):
    mocker.patch('nowplaying.scripts.nowplaying_ctl.setup_logger')
    calls = []
    mocker.patch('nowplaying.command.prun', side_effect=_fake_prun({}, calls))

    assert ctl_main(['nowplaying-ctl', 'position', '-5']) == 0
    assert calls == ['playerctl position 5-']


def test_ctl_main_shuffle_get_malformed(mocker):
    mocker.patch('nowplaying.scripts.nowplaying_ctl.setup_logger')
    calls = []
    mocker.patch('nowplaying.command.prun', side_effect=_fake_prun({'playerctl shuffle': 'maybe\n'}, calls))

    assert ctl_main(['nowplaying-ctl', 'shuffle']) == 2


def test_ctl_main_list(mocker, capsys):
    mocker.patch('nowplaying.scripts.nowplaying_ctl.setup_logger')
    calls = []
    mocker.patch('nowplaying.command.prun', side_effect=_fake_prun({'playerctl -l': 'mpv\nspotify\n'}, calls))

    assert ctl_main(['nowplaying-ctl', 'list']) == 0
    assert capsys.readouterr().out == 'mpv\nspotify\n'


def test_ctl_main_rejects_player_for_unscoped_action(mocker):
    calls = []
    mocker.patch('nowplaying.command.prun', side_effect=_fake_prun({}, calls))

    with pytest.raises(SystemExit):
        ctl_main(['nowplaying-ctl', 'pause', '-p', 'mpv'])

    assert calls == []


def test_ctl_main_metadata(mocker, capsys):
    mocker.patch('nowplaying.scripts.nowplaying_ctl.setup_logger')
    calls = []
    mocker.patch('nowplaying.command.prun', side_effect=_fake_prun({
        'playerctl -p mpv metadata title': 'Song\n',
        'playerctl -p mpv metadata artist': 'Artist\n',
        'playerctl -p mpv metadata album': 'Album\n',
    }, calls))

    assert ctl_main(['nowplaying-ctl', 'metadata', '-p', 'mpv']) == 0
    assert capsys.readouterr().out == 'artist: Artist\ntitle: Song\nalbum: Album\n'


def test_ctl_main_open(mocker):
    mocker.patch('nowplaying.scripts.nowplaying_ctl.setup_logger')
    calls = []
    mocker.patch('nowplaying.command.prun', side_effect=_fake_prun({}, calls))

    assert ctl_main(['nowplaying-ctl', 'open', '/srv/music/track.flac']) == 0
    assert calls == ['playerctl open /srv/music/track.flac']


def test_ctl_main_volume(mocker):
    mocker.patch('nowplaying.scripts.nowplaying_ctl.setup_logger')
    calls = []
    mocker.patch('nowplaying.command.prun', side_effect=_fake_prun({}, calls))

    assert ctl_main(['nowplaying-ctl', 'volume', '0.1']) == 0
    assert calls == ['playerctl volume 0.1+']


def test_ctl_main_active(mocker, capsys):
    mocker.patch('nowplaying.scripts.nowplaying_ctl.setup_logger')
    calls = []
    mocker.patch('nowplaying.command.prun', side_effect=_fake_prun({
        'playerctl -l': 'mpv\nspotify\n',
        'playerctl -p mpv status': 'Stopped\n',
        'playerctl -p spotify status': 'Playing\n',
    }, calls))

    assert ctl_main(['nowplaying-ctl', 'active']) == 0
    assert capsys.readouterr().out == 'spotify\n'


def test_waybar_main_undecodable_state(mocker, environ):
    environ.write_bytes(b'\xff\xfe')

    calls = []
    mocker.patch('nowplaying.command.prun', side_effect=_fake_prun({}, calls))

    assert waybar_main(['waybar-nowplaying', 'next']) == 3


def test_waybar_main_broken_pipe(mocker, quiet_logger):
    mocker.patch('nowplaying.scripts.waybar_nowplaying.NowPlaying.run', side_effect=BrokenPipeError(32, 'Broken pipe'))

    assert waybar_main(['waybar-nowplaying']) == 4

    message = quiet_logger.return_value.error.call_args[0][0]
    assert 'standard output' in message
