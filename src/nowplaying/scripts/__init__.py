# -*- coding: utf-8 -*-
# SPDX-License-Identifier: GPL-2.0


from sys import argv as sys_argv

def nowplaying_ctl_cli() -> int:
    from .nowplaying_ctl import main as cli_main
    return cli_main(sys_argv)

def waybar_nowplaying_cli() -> int:
    from .waybar_nowplaying import main as cli_main
    return cli_main(sys_argv)
