from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Key(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    ENTER = "enter"
    ESC = "esc"
    TAB = "tab"
    BACKTAB = "backtab"
    BACKSPACE = "backspace"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    CHAR = "char"
    INTERRUPT = "interrupt"


@dataclass(frozen=True)
class KeyPress:
    key: Key
    char: str = ""

    @classmethod
    def of(cls, char: str) -> KeyPress:
        return cls(Key.CHAR, char)

    def matches(self, *keys: Key, chars: str = "") -> bool:
        """True for any of the given keys, or a printable char listed in chars."""

        if self.key in keys:
            return True
        return self.key is Key.CHAR and self.char != "" and self.char in chars
