"""High-frequency term counting."""

from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass

from extraction.stopwords import STOP_WORDS, is_stop_word, remove_stop_words
from extraction.text import cleanup, is_keyword

logger = logging.getLogger(__name__)

_NUMERIC = re.compile(r"^\d+$")
_HAS_WORD_CHAR = re.compile(r"\w")


@dataclass
class KeywordFrequency:
    word: str
    frequency: int

    def to_dict(self) -> dict:
        return {"word": self.word, "frequency": self.frequency}


def top_frequencies(
    tokens: list[str],
    n: int,
    stop_words: frozenset[str] = STOP_WORDS,
) -> list[KeywordFrequency]:
    """Count non-stop tokens and keep the n + 1 most frequent.

    The extra entry is long-standing behavior that callers rely on.  Ties
    keep first-seen order.  Words are cleaned after ranking; any that clean
    down to nothing, to bare digits ("2024.") or to a stop word ("it.") are
    dropped.
    """
    counts: Counter[str] = Counter(remove_stop_words(tokens, stop_words))
    ranked = sorted(
        (
            (word, count)
            for word, count in counts.items()
            if not _NUMERIC.match(word) and _HAS_WORD_CHAR.search(word)
        ),
        key=lambda x: x[1],
        reverse=True,
    )

    results: list[KeywordFrequency] = []
    for word, count in ranked[: n + 1]:
        cleaned = cleanup(word)
        if is_keyword(cleaned) and not is_stop_word(cleaned, stop_words):
            results.append(KeywordFrequency(word=cleaned, frequency=count))

    logger.debug("Frequency pass: %d distinct terms, kept %d", len(counts), len(results))
    return results
