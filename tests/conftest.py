from __future__ import annotations

import random
from itertools import cycle
from typing import Iterable

import pytest

from wordrush.config import Config, Gamemode
from wordrush.dictionary import Dictionary

WORDS = [
    "CRANE",
    "PLANE",
    "BANANA",
    "CANAL",
    "PLANT",
    "GRANT",
    "ANT",
    "ANTHEM",
    "PLUM",
    "QUICK",
    "JUMPS",
    "OVER",
    "LAZY",
    "DOG",
    "FOX",
    "BROWN",
]


class ScriptedRandom(random.Random):
    """Draws prompt letters from ``fragments`` in order, looping forever.

    ``coin`` is returned by every ``random()`` call, so values below 0.8 pick
    two-letter prompts and the rest three-letter ones.
    """

    def __init__(self, fragments: Iterable[str], coin: float = 0.0) -> None:
        super().__init__(0)
        self._letters = cycle("".join(fragments))
        self.coin = coin

    def random(self) -> float:
        return self.coin

    def choice(self, seq):  # type: ignore[override]
        return next(self._letters)


@pytest.fixture()
def dictionary() -> Dictionary:
    return Dictionary(WORDS)


@pytest.fixture()
def config() -> Config:
    return Config(
        gamemode=Gamemode.LIMITED_LIVES,
        min_words_per_prompt=2,
        ticks_per_turn=5,
        tick_rate=4,
        starting_lives=2,
        max_lives=3,
    )


@pytest.fixture()
def rng() -> ScriptedRandom:
    # AN: 8 words, PL: 3 words
    return ScriptedRandom(["AN", "PL"])
