"""Discrete input events, independent of the terminal library that produced them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class KeyCode(Enum):
    CHAR = "char"
    ENTER = "enter"
    BACKSPACE = "backspace"
    ESC = "esc"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Key:
    code: KeyCode
    char: str = ""

    @classmethod
    def of(cls, ch: str) -> "Key":
        return cls(KeyCode.CHAR, ch)

    def is_char(self, *chars: str) -> bool:
        return self.code is KeyCode.CHAR and self.char in chars


# Menu navigation accepts both arrows and vi keys.
def is_up(key: Key) -> bool:
    return key.code is KeyCode.UP or key.is_char("k")


def is_down(key: Key) -> bool:
    return key.code is KeyCode.DOWN or key.is_char("j")


def is_select(key: Key) -> bool:
    return key.code in (KeyCode.ENTER, KeyCode.RIGHT) or key.is_char("l")


def is_back(key: Key) -> bool:
    return key.code in (KeyCode.ESC, KeyCode.LEFT) or key.is_char("q", "h")
