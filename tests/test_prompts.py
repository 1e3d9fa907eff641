from __future__ import annotations

import random

import pytest

from conftest import ScriptedRandom
from wordrush.config import WORDS_PATH
from wordrush.dictionary import Dictionary, load_dictionary
from wordrush.errors import ConfigError, PromptGenerationError
from wordrush.prompts import ALPHABET, check_density, dense_fragments, generate_prompt, prompt_length


def test_accepts_first_dense_enough_candidate(dictionary: Dictionary) -> None:
    assert generate_prompt(dictionary, 2, ScriptedRandom(["AN"])) == "AN"


def test_redraws_until_threshold_is_met(dictionary: Dictionary) -> None:
    # ZQ and PL fall short of 4 words
    rng = ScriptedRandom(["ZQ", "PL", "AN"])
    assert generate_prompt(dictionary, 4, rng) == "AN"


def test_three_letter_prompt_on_high_coin(dictionary: Dictionary) -> None:
    rng = ScriptedRandom(["ANT"], coin=0.9)
    assert generate_prompt(dictionary, 4, rng) == "ANT"


def test_prompt_length_weights() -> None:
    assert prompt_length(ScriptedRandom([], coin=0.0)) == 2
    assert prompt_length(ScriptedRandom([], coin=0.79)) == 2
    assert prompt_length(ScriptedRandom([], coin=0.8)) == 3
    assert prompt_length(ScriptedRandom([], coin=0.99)) == 3


def test_alphabet_is_full_uppercase_range() -> None:
    assert ALPHABET == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def test_sparse_dictionary_raises_instead_of_spinning() -> None:
    tiny = Dictionary(["XYZZY"])
    with pytest.raises(PromptGenerationError, match="too small"):
        generate_prompt(tiny, 5, random.Random(3), max_attempts=50)


def test_generation_error_is_a_config_error() -> None:
    assert issubclass(PromptGenerationError, ConfigError)


def test_bundled_word_list_yields_dense_prompts() -> None:
    words = load_dictionary(WORDS_PATH)
    rng = random.Random(1234)
    for _ in range(10):
        prompt = generate_prompt(words, 25, rng)
        assert prompt.isupper()
        assert len(prompt) in (2, 3)
        assert words.count_containing(prompt) >= 25


def test_fragment_counts_count_each_word_once() -> None:
    d = Dictionary(["BANANA", "CANAL", "PLUM"])
    counts = d.fragment_counts(2)
    assert counts["AN"] == 2
    assert counts["NA"] == 2
    assert counts["PL"] == 1
    assert "ZZ" not in counts
    assert d.fragment_counts(3)["ANA"] == 2


def test_dense_fragments_lists_qualifying_fragments(dictionary: Dictionary) -> None:
    assert dense_fragments(dictionary, 2, 8) == ["AN"]
    assert dense_fragments(dictionary, 3, 4) == ["ANT"]
    assert dense_fragments(dictionary, 3, 9) == []


def test_missed_draws_still_return_a_dense_prompt() -> None:
    d = Dictionary(["ABCX", "ABCY", "ABCZ"])
    # the scripted draws never hit ABC, the only trigram in three words
    rng = ScriptedRandom(["ZZZ"], coin=0.9)
    assert generate_prompt(d, 3, rng, max_attempts=5) == "ABC"


def test_check_density_needs_both_prompt_lengths() -> None:
    # AB is in all three words but no three-letter fragment is in more than one
    two_letters_only = Dictionary(["ABX", "ABY", "ABZ"])
    with pytest.raises(PromptGenerationError, match="no 3-letter fragment"):
        check_density(two_letters_only, 3)
    check_density(Dictionary(["ABCX", "ABCY", "ABCZ"]), 3)


def test_bundled_word_list_density_limits() -> None:
    words = load_dictionary(WORDS_PATH)
    check_density(words, 25)
    with pytest.raises(PromptGenerationError):
        check_density(words, 500)
