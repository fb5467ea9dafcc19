"""Who started the game, and when."""

from __future__ import annotations

import getpass
import sys
from datetime import datetime
from typing import TextIO

DEFAULT_USER = "player"


def current_user() -> str:
    """Return the login name of whoever runs the game."""
    try:
        name = getpass.getuser()
    except (OSError, KeyError, ImportError):
        return DEFAULT_USER
    return name or DEFAULT_USER


def print_game_info(stream: TextIO | None = None) -> None:
    """Write a one-line note on who started the game and at what time."""
    out = stream if stream is not None else sys.stdout
    started = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"Game started by {current_user()} on {started}", file=out)