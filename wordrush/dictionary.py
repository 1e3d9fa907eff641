"""Word list loaded once at startup: ordered words plus a set for exact lookups."""

from __future__ import annotations

import logging
from collections import Counter
from pathlib import Path
from typing import Iterator, Optional

from wordrush.errors import DictionaryError

logger = logging.getLogger(__name__)


class Dictionary:
    def __init__(self, words: list[str]) -> None:
        self._words: tuple[str, ...] = tuple(words)
        self._index: frozenset[str] = frozenset(self._words)
        self._fragment_counts: dict[int, Counter[str]] = {}

    @classmethod
    def load(cls, raw_text: str) -> "Dictionary":
        """Split on newlines, drop a trailing carriage return and blank lines, uppercase."""
        words: list[str] = []
        for line in raw_text.split("\n"):
            word = line.removesuffix("\r").strip()
            if word:
                words.append(word.upper())
        return cls(words)

    @property
    def words(self) -> tuple[str, ...]:
        return self._words

    def contains_exact(self, word: str) -> bool:
        return word in self._index

    def count_containing(self, fragment: str, limit: Optional[int] = None) -> int:
        """Count words holding ``fragment``; stop early once ``limit`` is reached."""
        count = 0
        for word in self._words:
            if fragment in word:
                count += 1
                if limit is not None and count >= limit:
                    break
        return count

    def fragment_counts(self, length: int) -> dict[str, int]:
        """Map every ``length``-letter substring to the number of words holding it."""
        counts = self._fragment_counts.get(length)
        if counts is None:
            counts = Counter()
            for word in self._words:
                counts.update({word[i : i + length] for i in range(len(word) - length + 1)})
            self._fragment_counts[length] = counts
        return counts

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __contains__(self, word: object) -> bool:
        return word in self._index


def load_dictionary(path: Path) -> Dictionary:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise DictionaryError(f"cannot read word list {path}: {exc}") from exc
    dictionary = Dictionary.load(raw_text)
    if not dictionary:
        raise DictionaryError(f"word list {path} contains no words")
    logger.info("loaded %d words from %s", len(dictionary), path)
    return dictionary
