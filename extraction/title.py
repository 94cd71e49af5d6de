"""Context terms from an article title."""

from __future__ import annotations

import re

from extraction.stopwords import STOP_WORDS, is_stop_word, remove_stop_words
from extraction.text import cleanup, is_keyword

_NUMERIC = re.compile(r"^\d+$")
_PRICE = re.compile(r"^[$€£¥]\d+(?:,\d+)*(?:\.\d+)?$")
_DOLLAR_AMOUNT = re.compile(r"\$\d+")


def is_price(word: str) -> bool:
    """$400, $1,234, €1.99 and anything embedding a $<digits> amount."""
    return bool(_PRICE.match(word) or _DOLLAR_AMOUNT.search(word))


def context_from_title(title: str, stop_words: frozenset[str] = STOP_WORDS) -> list[str]:
    words = remove_stop_words(title.split(), stop_words)
    context: list[str] = []
    for word in words:
        if _NUMERIC.match(word) or is_price(word):
            continue
        cleaned = cleanup(word)
        if is_keyword(cleaned) and not is_stop_word(cleaned, stop_words):
            context.append(cleaned)
    return list(dict.fromkeys(context))
