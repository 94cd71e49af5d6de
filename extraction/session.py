"""Extraction sessions: one text (plus optional title) and its keywords.

A session owns a `KeywordSet` that every extraction method appends to,
so calling methods repeatedly on one session accumulates results.
`extract_keywords()` orchestrates the pipeline:
proper nouns → frequent terms → title context → cleanup → subset pass.

Sessions are not thread-safe; use one per text.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator, Sequence

from extraction import proper_nouns, stopwords
from extraction.config import ExtractorConfig
from extraction.errors import InvalidArgumentError
from extraction.frequency import KeywordFrequency, top_frequencies
from extraction.text import cleanup, is_keyword, tokenize
from extraction.title import context_from_title

logger = logging.getLogger(__name__)

_SUBSET_NOISE = re.compile(r"['’.,\s]+")


class KeywordSet:
    """Duplicate-free keywords in insertion order."""

    def __init__(self, keywords: Iterable[str] = ()):
        self._items: dict[str, None] = dict.fromkeys(keywords)

    def add_all(self, keywords: Iterable[str]) -> None:
        for keyword in keywords:
            self._items.setdefault(keyword, None)

    def rebuild(self, keywords: Iterable[str]) -> None:
        self._items = dict.fromkeys(keywords)

    def to_list(self) -> list[str]:
        return list(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._items

    def __repr__(self) -> str:
        return f"KeywordSet({self.to_list()!r})"


def _normalize(candidates: Iterable[str], stop_words: frozenset[str]) -> list[str]:
    """Clean, drop stop words, then keep only real keywords, deduplicated.

    Stop-word removal can leave a phrase as bare digits ("The 2024" with
    a custom list), so the keyword check runs last.
    """
    cleaned = [w for w in map(cleanup, candidates) if w]
    filtered = stopwords.remove_stop_words(cleaned, stop_words)
    return list(dict.fromkeys(w for w in filtered if is_keyword(w)))


def subset_words(keywords: Iterable[str]) -> set[str]:
    """Single words that appear inside some multi-word keyword."""
    covered: set[str] = set()
    for keyword in keywords:
        parts = keyword.split(" ")
        if len(parts) > 1:
            covered.update(_SUBSET_NOISE.sub("", part) for part in parts)
    covered.discard("")
    return covered


class ExtractionSession:
    def __init__(self, content: str, title: str | None = "", config: ExtractorConfig | None = None):
        if not isinstance(content, str):
            raise InvalidArgumentError("Content must be a string")
        if title is None:
            title = ""
        if not isinstance(title, str):
            raise InvalidArgumentError("Title must be a string")

        self.content = content
        self.title = title
        self.config = config or ExtractorConfig()
        self.stop_words = self.config.stop_words
        self.keywords = KeywordSet()

    # ── Building blocks ─────────────────────────────────────────────

    def tokenize(self) -> list[str]:
        return tokenize(self.content)

    def remove_stop_words(self, tokens: Sequence[str]) -> list[str]:
        return stopwords.remove_stop_words(tokens, self.stop_words)

    def find_proper_nouns(self) -> list[str]:
        """Proper nouns and multi-word names, in order of first appearance."""
        candidates = proper_nouns.find_proper_nouns(
            self.tokenize(), self.stop_words, self.config.min_token_length
        )
        found = _normalize(candidates, self.stop_words)
        self.keywords.add_all(found)
        return found

    def find_high_frequency_keywords(self, n: int = 7) -> list[KeywordFrequency]:
        """The n + 1 most frequent non-stop terms, most frequent first."""
        if not isinstance(n, int) or isinstance(n, bool) or n < 1:
            raise InvalidArgumentError("N must be a positive number")

        ranked = top_frequencies(self.tokenize(), n, self.stop_words)
        self.keywords.add_all(item.word for item in ranked)
        return ranked

    def find_context_from_title(self) -> list[str] | None:
        """Title terms without stop words, numbers or prices; None without a title."""
        if not self.title:
            return None
        context = context_from_title(self.title, self.stop_words)
        self.keywords.add_all(context)
        return context

    # ── Aggregation ─────────────────────────────────────────────────

    def cleanup_keywords(self) -> list[str]:
        """Re-clean every accumulated keyword and drop stop words that surface."""
        self.keywords.rebuild(_normalize(self.keywords, self.stop_words))
        return self.keywords.to_list()

    def remove_subset_words(self) -> list[str]:
        """Order keywords longest first.

        With `collapse_subsets` off (the default) this only sorts.  With it
        on, single words already covered by a multi-word keyword are
        dropped, e.g. "iPhone" next to "iPhone 14 Pro".
        """
        ordered = sorted(self.keywords, key=len, reverse=True)
        if not self.config.collapse_subsets:
            return ordered

        covered = subset_words(ordered)
        return [k for k in ordered if " " in k or k not in covered]

    def extract_keywords(self) -> list[str]:
        self.find_proper_nouns()
        self.find_high_frequency_keywords(self.config.top_n)
        self.find_context_from_title()
        self.cleanup_keywords()
        final = self.remove_subset_words()
        logger.debug("Extracted %d keywords (%d accumulated)", len(final), len(self.keywords))
        return final


def create_session(
    content: str,
    title: str | None = "",
    config: ExtractorConfig | None = None,
) -> ExtractionSession:
    return ExtractionSession(content, title, config)


# ── Stateless helpers ───────────────────────────────────────────────


def remove_stop_words(tokens: Sequence[str]) -> list[str]:
    return ExtractionSession("").remove_stop_words(tokens)


def find_proper_nouns(content: str) -> list[str]:
    return ExtractionSession(content).find_proper_nouns()


def find_high_frequency_keywords(content: str, n: int = 7) -> list[KeywordFrequency]:
    return ExtractionSession(content).find_high_frequency_keywords(n)
