"""Shared text preprocessing: sentence-aware tokenizing and keyword cleanup.

Tokens keep their terminal punctuation ("OpenAI.") so later stages can
re-derive sentence starts and phrase boundaries by scanning the flat
token list.  Clause punctuation (, ; :) becomes a token of its own.
"""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)

# Break after . ! ? followed by whitespace, or glued to a capital ("end.Next").
# The second form needs a lowercase letter or digit before the mark so that
# initialisms like "U.S" stay whole.
_SENTENCE_SPLIT = re.compile(r"(?<=[.!?])\s+|(?<=[a-z0-9][.!?])(?=[A-Z])")
_CLAUSE_PUNCT = re.compile(r"([,;:])(?=\s|$)")
_WHITESPACE = re.compile(r"\s+")

# Closing quotes/brackets may trail the terminal mark: 'said "Go."'
_SENTENCE_END = re.compile(r"[.!?][\"'’”)\]]*$")

_EDGE_CHARS = "'\"‘’“”«»?:.,!;()[]{}<>|/\\~@#$%^&*=_\\-—–…"
_LEADING = re.compile(f"^[{re.escape(_EDGE_CHARS)}]+")
_TRAILING = re.compile(f"[{re.escape(_EDGE_CHARS)}]+$")
_QUOTES = re.compile("[\"“”«»„]")
_POSSESSIVE = re.compile(r"['’]s\b")
_WORD_CHAR = re.compile(r"\w")


# ── Tokenizing ──────────────────────────────────────────────────────


def split_sentences(text: str) -> list[str]:
    return [s for s in _SENTENCE_SPLIT.split(text) if s and s.strip()]


def tokenize(text: str) -> list[str]:
    """Sentence split → detach , ; : → split on whitespace → drop empties.

    Never raises; input that cannot be tokenized yields an empty list.
    """
    try:
        tokens: list[str] = []
        for sentence in split_sentences(text):
            spaced = _CLAUSE_PUNCT.sub(r" \1", sentence)
            tokens.extend(t.strip() for t in _WHITESPACE.split(spaced) if t.strip())
        return tokens
    except (TypeError, AttributeError) as e:
        logger.warning("Could not tokenize %s input: %s", type(text).__name__, e)
        return []


def ends_sentence(token: str) -> bool:
    return bool(_SENTENCE_END.search(token))


def sentence_starts(tokens: list[str]) -> set[int]:
    """Indexes of tokens that open a sentence."""
    if not tokens:
        return set()
    starts = {0}
    for i in range(1, len(tokens)):
        if ends_sentence(tokens[i - 1]):
            starts.add(i)
    return starts


# ── Cleanup ─────────────────────────────────────────────────────────


def _cleanup_once(word: str) -> str:
    cleaned = _TRAILING.sub("", word)
    cleaned = _LEADING.sub("", cleaned)
    cleaned = _QUOTES.sub("", cleaned)
    cleaned = _WHITESPACE.sub(" ", cleaned).strip()
    return _POSSESSIVE.sub("", cleaned).strip()


def cleanup(word: str) -> str:
    """Strip edge punctuation, quotes and possessives from a word or phrase.

    `+` is not an edge character, so "9300+" and "C++" survive.  Passes
    repeat until nothing changes, which makes cleanup idempotent.
    Returns "" when nothing is left.
    """
    previous = None
    while word != previous:
        previous, word = word, _cleanup_once(word)
    return word


def is_keyword(word: str) -> bool:
    """A cleaned word worth keeping: has a word character, not only digits."""
    return bool(_WORD_CHAR.search(word)) and not word.isdigit()
