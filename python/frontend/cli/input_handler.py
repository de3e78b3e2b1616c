"""Single-keypress reader for the terminal frontend.

Handles arrow keys, WASD, tile digits, and command keys without
requiring Enter. Works on macOS / Linux (tty+termios) and Windows
(msvcrt).
"""

from __future__ import annotations

import os
import sys


# -- low-level character readers -----------------------------------------------


def _getch_unix() -> str:
    import termios
    import tty

    fd = sys.stdin.fileno()
    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = sys.stdin.read(1)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
    return ch


def _getch_windows() -> str:
    import msvcrt  # type: ignore[import-not-found]

    return msvcrt.getch().decode("utf-8", errors="ignore")


_getch = _getch_windows if os.name == "nt" else _getch_unix


# -- key mapping ---------------------------------------------------------------

_KEY_MAP: dict[str, str] = {
    "w": "up",
    "s": "down",
    "a": "left",
    "d": "right",
    "q": "quit",
    "\x03": "quit",  # Ctrl-C
    "r": "shuffle",
    "v": "solve",
    "n": "hint",
}

_ARROW_MAP: dict[str, str] = {
    "A": "up",
    "B": "down",
    "C": "right",
    "D": "left",
}


def resolve(ch: str) -> str:
    """Map a raw character to its action string.

    Digits 1-8 become ``"tile:<n>"`` so the caller can slide that tile.
    """
    if len(ch) == 1 and ch in "12345678":
        return f"tile:{ch}"
    return _KEY_MAP.get(ch.lower(), "")


# -- public API ----------------------------------------------------------------


def get_key() -> str:
    """Read a single keypress and return a normalised action string.

    Blocks until a key is pressed.

    Possible return values:
        "up", "down", "left", "right"  — tile movement
        "tile:1" … "tile:8"            — slide that tile into the blank
        "shuffle"                      — r
        "solve"                        — v (animated A* playback)
        "hint"                         — n (next best move)
        "quit"                         — q / Ctrl-C / Escape
        ""                             — unrecognised key
    """
    ch = _getch()

    # Arrow keys (Unix escape sequences: ESC [ A/B/C/D)
    if ch == "\x1b":
        if _getch() == "[":
            return _ARROW_MAP.get(_getch(), "")
        return "quit"  # bare Escape

    return resolve(ch)


def get_key_timeout(timeout: float) -> str | None:
    """Read a single keypress, or return ``None`` after *timeout* seconds.

    Uses ``os.read`` (unbuffered) so that ``select`` sees the remaining
    bytes of multi-byte escape sequences.
    """
    if os.name == "nt":
        import msvcrt  # type: ignore[import-not-found]
        import time

        end = time.monotonic() + timeout
        while time.monotonic() < end:
            if msvcrt.kbhit():
                return get_key()
            time.sleep(0.02)
        return None

    import select
    import termios
    import tty

    fd = sys.stdin.fileno()

    def _read(wait: float) -> str | None:
        ready, _, _ = select.select([fd], [], [], wait)
        if not ready:
            return None
        return os.read(fd, 1).decode("utf-8", errors="ignore")

    old = termios.tcgetattr(fd)
    try:
        tty.setraw(fd)
        ch = _read(timeout)
        if ch is None:
            return None
        if ch == "\x1b":
            if _read(0.1) != "[":
                return "quit"
            ch3 = _read(0.1)
            return _ARROW_MAP.get(ch3, "") if ch3 else ""
        return resolve(ch)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, old)
