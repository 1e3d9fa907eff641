"""
Round state and the turn operations that drive it.

One RoundState lives for the whole process; its fields are overwritten in
place whenever a game or round starts.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from wordrush.config import Config, Gamemode
from wordrush.dictionary import Dictionary
from wordrush.prompts import ALPHABET, generate_prompt

logger = logging.getLogger(__name__)


class TickOutcome(Enum):
    FROZEN = "frozen"  # paused, practice, or no lives left
    COUNTING = "counting"
    EXPIRED = "expired"
    OUT_OF_LIVES = "out_of_lives"


def check_word(input_buffer: str, prompt: str, dictionary: Dictionary) -> bool:
    word = input_buffer.upper()
    return prompt in word and dictionary.contains_exact(word)


@dataclass
class RoundState:
    prompt: str = ""
    input_buffer: str = ""
    time_left: int = 0
    lives: int = 0
    paused: bool = False
    score: int = 0
    used_letters: set[str] = field(default_factory=set)
    last_result: Optional[bool] = None
    last_word: str = ""
    missed_prompt: str = ""

    def reset_game(self, config: Config) -> None:
        self.lives = min(config.starting_lives, config.max_lives)
        self.score = 0
        self.used_letters.clear()
        self.paused = False
        self.last_word = ""
        self.missed_prompt = ""

    def start_round(
        self, config: Config, dictionary: Dictionary, rng: Optional[random.Random] = None
    ) -> None:
        self.prompt = generate_prompt(dictionary, config.min_words_per_prompt, rng)
        self.input_buffer = ""
        self.time_left = config.ticks_per_turn
        self.last_result = None

    def type_char(self, ch: str) -> None:
        self.last_result = None
        self.input_buffer += ch

    def backspace(self) -> None:
        self.last_result = None
        self.input_buffer = self.input_buffer[:-1]

    def submit(
        self, config: Config, dictionary: Dictionary, rng: Optional[random.Random] = None
    ) -> bool:
        """Check the buffer; a correct word scores and starts the next round.

        A wrong word leaves the buffer as typed and costs nothing.
        """
        if not check_word(self.input_buffer, self.prompt, dictionary):
            self.last_result = False
            return False
        word = self.input_buffer.upper()
        logger.debug("accepted %s for prompt %s", word, self.prompt)
        self.score += 1
        self.last_word = word
        self._use_letters(word, config)
        self.start_round(config, dictionary, rng)
        self.last_result = True
        return True

    def _use_letters(self, word: str, config: Config) -> None:
        self.used_letters.update(ch for ch in word if ch in ALPHABET)
        if len(self.used_letters) < len(ALPHABET):
            return
        self.used_letters.clear()
        if config.gamemode is Gamemode.LIMITED_LIVES and self.lives < config.max_lives:
            self.lives += 1
            logger.info("all letters used, bonus life (%d left)", self.lives)

    def tick(
        self, config: Config, dictionary: Dictionary, rng: Optional[random.Random] = None
    ) -> TickOutcome:
        if self.paused or not config.has_countdown:
            return TickOutcome.FROZEN
        limited = config.gamemode is Gamemode.LIMITED_LIVES
        if limited and self.lives == 0:
            return TickOutcome.FROZEN
        if self.time_left > 1:
            self.time_left -= 1
            return TickOutcome.COUNTING
        # this tick uses up the last of the countdown
        self.time_left = 0
        self.missed_prompt = self.prompt
        outcome = TickOutcome.EXPIRED
        if limited:
            self.lives -= 1
            logger.info("time up on %s, %d lives left", self.prompt, self.lives)
            if self.lives == 0:
                outcome = TickOutcome.OUT_OF_LIVES
        self.start_round(config, dictionary, rng)
        return outcome
