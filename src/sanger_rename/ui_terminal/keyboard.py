from __future__ import annotations

import os
import select
import sys
from typing import Protocol

from sanger_rename.wizard.keys import Key, KeyPress

ESCAPE_TIMEOUT_S = 0.03

SEQUENCES: dict[str, Key] = {
    "\x1b[A": Key.UP,
    "\x1b[B": Key.DOWN,
    "\x1b[C": Key.RIGHT,
    "\x1b[D": Key.LEFT,
    "\x1bOA": Key.UP,
    "\x1bOB": Key.DOWN,
    "\x1bOC": Key.RIGHT,
    "\x1bOD": Key.LEFT,
    "\x1b[Z": Key.BACKTAB,
    "\x1b[5~": Key.PAGE_UP,
    "\x1b[6~": Key.PAGE_DOWN,
    "\x1b": Key.ESC,
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    "\t": Key.TAB,
    "\x7f": Key.BACKSPACE,
    "\x08": Key.BACKSPACE,
    "\x03": Key.INTERRUPT,
}

# Second character after a "\x00" or "\xe0" prefix from msvcrt.getwch().
WINDOWS_SCAN_CODES: dict[str, Key] = {
    "H": Key.UP,
    "P": Key.DOWN,
    "K": Key.LEFT,
    "M": Key.RIGHT,
    "I": Key.PAGE_UP,
    "Q": Key.PAGE_DOWN,
    "\x0f": Key.BACKTAB,
}


def decode_key(sequence: str) -> KeyPress | None:
    """
    Translate raw terminal input into a KeyPress.

    Examples:
        >>> decode_key("\\x1b[A")
        KeyPress(key=<Key.UP: 'up'>, char='')
        >>> decode_key("q")
        KeyPress(key=<Key.CHAR: 'char'>, char='q')
    """
    key = SEQUENCES.get(sequence)
    if key is not None:
        return KeyPress(key)
    if len(sequence) == 1 and sequence.isprintable():
        return KeyPress.of(sequence)
    return None


class KeyReader(Protocol):
    def __enter__(self) -> KeyReader: ...

    def __exit__(self, *exc_info: object) -> None: ...

    def read_key(self) -> KeyPress | None:
        """Block until a key arrives; None for input with no meaning."""


class PosixKeyReader:
    """Reads keys from a tty switched to cbreak mode (Ctrl-C still signals)."""

    def __init__(self, fd: int | None = None) -> None:
        self._fd = sys.stdin.fileno() if fd is None else fd
        self._saved_attrs: list | None = None

    def __enter__(self) -> PosixKeyReader:
        import termios
        import tty

        self._saved_attrs = termios.tcgetattr(self._fd)
        tty.setcbreak(self._fd)
        return self

    def __exit__(self, *exc_info: object) -> None:
        import termios

        if self._saved_attrs is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._saved_attrs)
            self._saved_attrs = None

    def read_key(self) -> KeyPress | None:
        data = os.read(self._fd, 1)
        if not data:
            return KeyPress(Key.INTERRUPT)
        if data == b"\x1b":
            data += self._read_escape_tail()
        elif data[0] >= 0xC0:
            data += os.read(self._fd, _utf8_tail_length(data[0]))
        return decode_key(data.decode("utf-8", errors="ignore"))

    def _read_escape_tail(self) -> bytes:
        if not self._ready():
            return b""
        tail = os.read(self._fd, 1)
        if tail not in (b"[", b"O"):
            return tail
        while True:
            byte = os.read(self._fd, 1)
            tail += byte
            if not byte or 0x40 <= byte[0] <= 0x7E:
                return tail

    def _ready(self) -> bool:
        readable, _, _ = select.select([self._fd], [], [], ESCAPE_TIMEOUT_S)
        return bool(readable)


class WindowsKeyReader:
    def __enter__(self) -> WindowsKeyReader:
        return self

    def __exit__(self, *exc_info: object) -> None:
        return None

    def read_key(self) -> KeyPress | None:
        import msvcrt

        char = msvcrt.getwch()
        if char in ("\x00", "\xe0"):
            key = WINDOWS_SCAN_CODES.get(msvcrt.getwch())
            return KeyPress(key) if key is not None else None
        return decode_key(char)


def open_key_reader() -> KeyReader:
    if sys.platform == "win32":
        return WindowsKeyReader()
    return PosixKeyReader()


def _utf8_tail_length(lead: int) -> int:
    if lead >= 0xF0:
        return 3
    if lead >= 0xE0:
        return 2
    return 1
