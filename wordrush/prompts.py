"""Random letter fragments that enough dictionary words contain."""

from __future__ import annotations

import logging
import random
import string
from typing import Optional

from wordrush.dictionary import Dictionary
from wordrush.errors import PromptGenerationError

logger = logging.getLogger(__name__)

ALPHABET = string.ascii_uppercase
MAX_PROMPT_ATTEMPTS = 10_000

# Uniform draws below this pick a two-letter fragment, otherwise three.
SHORT_PROMPT_CHANCE = 0.8

_rng = random.Random()

PROMPT_LENGTHS = (2, 3)


def prompt_length(rng: random.Random) -> int:
    return 2 if rng.random() < SHORT_PROMPT_CHANCE else 3


def draw_fragment(rng: random.Random, length: int) -> str:
    return "".join(rng.choice(ALPHABET) for _ in range(length))


def generate_prompt(
    dictionary: Dictionary,
    min_words_per_prompt: int,
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_PROMPT_ATTEMPTS,
) -> str:
    rng = rng or _rng
    length = prompt_length(rng)
    for _ in range(max_attempts):
        candidate = draw_fragment(rng, length)
        if dictionary.count_containing(candidate, limit=min_words_per_prompt) >= min_words_per_prompt:
            logger.debug("new prompt %s", candidate)
            return candidate
    # every qualifying fragment was equally likely to be drawn, so pick one directly
    fragments = dense_fragments(dictionary, length, min_words_per_prompt)
    if fragments:
        candidate = fragments[rng.randrange(len(fragments))]
        logger.debug("new prompt %s after %d misses", candidate, max_attempts)
        return candidate
    logger.error("no %d-letter fragment reaches %d words", length, min_words_per_prompt)
    raise PromptGenerationError(_too_small(dictionary, length, min_words_per_prompt))


def dense_fragments(dictionary: Dictionary, length: int, min_words_per_prompt: int) -> list[str]:
    counts = dictionary.fragment_counts(length)
    return sorted(
        fragment
        for fragment, count in counts.items()
        if count >= min_words_per_prompt and all(ch in ALPHABET for ch in fragment)
    )


def check_density(dictionary: Dictionary, min_words_per_prompt: int) -> None:
    """Fail unless every prompt length can reach ``min_words_per_prompt`` words."""
    for length in PROMPT_LENGTHS:
        if not dense_fragments(dictionary, length, min_words_per_prompt):
            raise PromptGenerationError(_too_small(dictionary, length, min_words_per_prompt))


def _too_small(dictionary: Dictionary, length: int, min_words_per_prompt: int) -> str:
    return (
        f"dictionary too small for requested density: {len(dictionary)} words, "
        f"no {length}-letter fragment appears in min_words_per_prompt={min_words_per_prompt} of them"
    )
