"""Proper-noun detection: shape classification plus greedy phrase lookahead.

The scan walks the token list once with a single cursor.  A token that
can open a phrase pulls in following capitalized / numeric tokens until
one fails every continuation test or ends in boundary punctuation, then
the cursor jumps past everything it consumed.  Nothing is revisited.

Shapes:
  A  Samsung, Google         plain capitalized word
  B  OpenAI, MacBook, iPhone internal lowercase→uppercase transition
  C  RTX4090, A17, S24+      letters with an uppercase and a digit
"""

from __future__ import annotations

import logging
import re

from extraction.stopwords import STOP_WORDS
from extraction.text import cleanup, sentence_starts

logger = logging.getLogger(__name__)

DEFAULT_MIN_LENGTH = 2

SHAPE_A = re.compile(r"^[A-Z][a-zA-Z]*$")
SHAPE_B = re.compile(r"^[A-Za-z]*[a-z][A-Z][a-zA-Z]*$")
SHAPE_C = re.compile(r"^(?=[A-Za-z0-9]*[A-Z])[A-Za-z][A-Za-z0-9]*\d[A-Za-z0-9]*\+?$")

_CAPITALIZED = re.compile(r"^[A-Z]")
_SHORT_ALNUM = re.compile(r"^(?=.*\d)(?=.*[A-Za-z])[A-Za-z0-9]{2,4}$")
_MODEL_PLUS = re.compile(r"^[A-Za-z]+\d+\+?$")
_INNER_PLUS = re.compile(r"(?<=[A-Za-z0-9])\+(?=[A-Za-z0-9])")

# A raw token starting with an opener begins a new unit; one ending with a
# closer (or terminal mark) is the last token a phrase may take.
_OPENER = re.compile(r"^[(\[{<\"“‘«]")
_CLOSER = re.compile(r"[.!?)\]}>\"”’'»…]$")


# ── Shapes ──────────────────────────────────────────────────────────


def is_strong_shape(word: str) -> bool:
    """Shapes B and C, which survive first-word suppression."""
    return bool(SHAPE_B.match(word) or SHAPE_C.match(word))


def matches_shape(word: str) -> bool:
    return bool(SHAPE_A.match(word)) or is_strong_shape(word)


def continues_phrase(word: str) -> bool:
    """Whether a (cleaned) token may extend an open phrase."""
    return bool(
        _CAPITALIZED.match(word)
        or word[:1].isdigit()
        or _SHORT_ALNUM.match(word)
        or word == "+"
        or word.lower() == "plus"
        or _MODEL_PLUS.match(word)
    )


def split_plus_tokens(tokens: list[str]) -> list[str]:
    """Split tokens on an interior + ("Galaxy+Note").  "9300+" and "C++" stay."""
    split: list[str] = []
    for token in tokens:
        split.extend(part for part in _INNER_PLUS.split(token) if part)
    return split


# ── Scan ────────────────────────────────────────────────────────────


def _collect_phrase(
    tokens: list[str],
    start: int,
    stop_words: frozenset[str],
) -> tuple[list[str], int]:
    """Greedy lookahead from the opener at `start`.

    Returns (words, next_index).  Stop words that pass the continuation
    tests are consumed but left out of `words`.
    """
    words = [cleanup(tokens[start])]
    j = start + 1
    if _CLOSER.search(tokens[start]):
        return words, j

    while j < len(tokens):
        raw = tokens[j]
        word = cleanup(raw)
        if not word or _OPENER.match(raw) or not continues_phrase(word):
            break
        if word == "+":
            words[-1] += "+"
        elif word.lower() not in stop_words:
            words.append(word)
        j += 1
        if _CLOSER.search(raw):
            break

    return words, j


def find_proper_nouns(
    tokens: list[str],
    stop_words: frozenset[str] = STOP_WORDS,
    min_length: int = DEFAULT_MIN_LENGTH,
) -> list[str]:
    """Scan tokens for proper nouns and multi-word names.

    Returns raw candidates in order of appearance; duplicates are left for
    the caller to fold.

    A plain capitalized word that opens a sentence never starts a phrase,
    but it is still emitted on its own.  Ordinary sentence openers such as
    "Yesterday" or "Analysts" therefore come out as false positives; the
    alternative would drop real names like "Microsoft" at sentence start.
    """
    tokens = split_plus_tokens(tokens)
    starts = sentence_starts(tokens)
    candidates: list[str] = []

    i = 0
    while i < len(tokens):
        word = cleanup(tokens[i])
        if len(word) < min_length or word.lower() in stop_words:
            i += 1
            continue

        sentence_initial = i in starts
        opens_phrase = is_strong_shape(word) or (
            not sentence_initial and bool(_CAPITALIZED.match(word))
        )

        if opens_phrase:
            words, j = _collect_phrase(tokens, i, stop_words)
            if len(words) >= 2:
                candidates.append(" ".join(words))
                i = j
                continue

        if matches_shape(word):
            candidates.append(word)
        i += 1

    logger.debug("Proper-noun scan: %d tokens → %d candidates", len(tokens), len(candidates))
    return candidates
