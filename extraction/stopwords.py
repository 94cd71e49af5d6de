"""Stop-word list and the case-variant stop-word filter.

The built-in list is lowercase and load-once.  Lookups check three case
forms of every candidate (lower, UPPER, Capitalized), so a custom list
that carries acronyms or capitalized entries still matches.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path

from extraction.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

STOP_WORDS = frozenset(
    "a about above after again against all almost also am among an and any are "
    "around as at be because been before being below between both but by can "
    "cannot could did do does doing done down during each either else ever few "
    "for from further get gets got had has have having he her here hers herself "
    "him himself his how however i if in into is it its itself just least less "
    "let like many may me might mine more most much must my myself neither no "
    "nor not now of off often on once only onto or other others otherwise ought "
    "our ours ourselves out over own per rather said same says shall she should "
    "since so some still such than that the their theirs them themselves then "
    "there these they this those though through thus to too toward towards "
    "under until up upon us very via was we well were what whatever when where "
    "whether which while who whom whose why will with within without would yet "
    "you your yours yourself yourselves".split()
)


# ── Loading ─────────────────────────────────────────────────────────


def load_stop_words(path: str, extra: Iterable[str] = ()) -> frozenset[str]:
    """Read a newline-delimited stop-word file.

    Blank lines and ``#`` comments are ignored; entries are lowercased.
    """
    words: set[str] = set()
    for line in Path(path).read_text(encoding="utf-8").splitlines():
        line = line.split("#", 1)[0].strip()
        if line:
            words.add(line.lower())
    words.update(w.lower() for w in extra)
    logger.debug("Loaded %d stop words from %s", len(words), path)
    return frozenset(words)


# ── Filtering ───────────────────────────────────────────────────────


def _case_forms(word: str) -> tuple[str, str, str]:
    lower = word.lower()
    return lower, word.upper(), lower[:1].upper() + lower[1:]


def is_stop_word(word: str, stop_words: frozenset[str] = STOP_WORDS) -> bool:
    return any(form in stop_words for form in _case_forms(word))


def remove_stop_words(
    items: Sequence[str],
    stop_words: frozenset[str] = STOP_WORDS,
) -> list[str]:
    """Drop stop words from single words and from inside phrases.

    A phrase keeps its surviving words joined by single spaces, so
    "Bank of America" becomes "Bank America".  A phrase made only of stop
    words is dropped.
    """
    if isinstance(items, (str, bytes)) or not isinstance(items, Sequence):
        raise InvalidArgumentError("Input must be a sequence of strings")
    if not all(isinstance(item, str) for item in items):
        raise InvalidArgumentError("Input must be a sequence of strings")

    kept: list[str] = []
    for item in items:
        words = item.split(" ")
        if len(words) == 1:
            if not is_stop_word(item, stop_words):
                kept.append(item)
            continue

        survivors = [w for w in words if w and not is_stop_word(w, stop_words)]
        if survivors:
            kept.append(" ".join(survivors))
    return kept
