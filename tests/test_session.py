"""
Tests for extraction sessions and the full keyword pipeline.
"""

from __future__ import annotations

import re

import pytest

from extraction.config import ExtractorConfig
from extraction.errors import InvalidArgumentError
from extraction.session import (
    ExtractionSession,
    KeywordSet,
    create_session,
    remove_stop_words,
    subset_words,
)
from extraction.stopwords import is_stop_word
from extraction.text import cleanup

ARTICLE = (
    "Apple unveiled the iPhone 14 Pro Max on Tuesday. "
    "The iPhone 14 Pro Max ships with the A17 chip."
)
TITLE = "Apple iPhone 14 Pro Max review"

MESSY = (
    'Sales rose in 2024. "It" grew, per IDC! Disney + Hulu (and 300 more) '
    "shipped it. We saw it. Sales rose again in 2024."
)
MESSY_TITLE = "Breaking: Disney + Hulu bundle hits $9.99 in 2024"


@pytest.fixture
def session() -> ExtractionSession:
    return create_session(ARTICLE, TITLE)


@pytest.mark.parametrize("content", [None, 42, b"bytes", ["text"]])
def test_content_must_be_text(content) -> None:
    with pytest.raises(InvalidArgumentError):
        create_session(content)


def test_title_must_be_text() -> None:
    with pytest.raises(InvalidArgumentError):
        create_session("body", title=7)


def test_tokenize_uses_session_content(session: ExtractionSession) -> None:
    tokens = session.tokenize()
    assert tokens[0] == "Apple"
    assert "Tuesday." in tokens


def test_results_accumulate_across_calls(session: ExtractionSession) -> None:
    nouns = session.find_proper_nouns()
    context = session.find_context_from_title()

    for keyword in nouns + context:
        assert keyword in session.keywords
    assert "review" in session.keywords
    assert len(session.keywords.to_list()) == len(set(session.keywords))


def test_extract_keywords_defaults_to_sort_only(session: ExtractionSession) -> None:
    result = session.extract_keywords()

    assert "iPhone 14 Pro Max" in result
    assert "iPhone" in result
    assert "A17" in result
    assert len(result) == len(set(result))
    assert [len(k) for k in result] == sorted((len(k) for k in result), reverse=True)
    assert not any(is_stop_word(k) for k in result)


def test_extract_keywords_can_collapse_subsets() -> None:
    config = ExtractorConfig(collapse_subsets=True)
    result = create_session(ARTICLE, TITLE, config).extract_keywords()

    assert "iPhone 14 Pro Max" in result
    assert "iPhone" not in result
    assert "Pro" not in result
    assert "Max" not in result
    assert "Apple" in result


def test_cleanup_keywords_drops_stop_words_that_surface() -> None:
    session = create_session("")
    session.keywords.add_all(["(The", "Apple's", "Apple", "2024"])

    assert session.cleanup_keywords() == ["Apple"]
    assert session.keywords.to_list() == ["Apple"]


def test_extra_stop_words_from_config() -> None:
    config = ExtractorConfig(extra_stop_words=["Tuesday"])
    session = create_session(ARTICLE, config=config)

    assert "Tuesday" not in session.find_proper_nouns()


def test_min_token_length_from_config() -> None:
    content = "Analysts at IBM and Google agree."

    assert create_session(content).find_proper_nouns() == ["Analysts", "IBM", "Google"]
    strict = ExtractorConfig(min_token_length=4)
    assert create_session(content, config=strict).find_proper_nouns() == ["Analysts", "Google"]


def test_stateless_remove_stop_words() -> None:
    assert remove_stop_words(["the", "Rust"]) == ["Rust"]
    with pytest.raises(InvalidArgumentError):
        remove_stop_words("the Rust")


def test_keyword_set_is_ordered_and_unique() -> None:
    keywords = KeywordSet(["b", "a"])
    keywords.add_all(["a", "c", "b"])

    assert keywords.to_list() == ["b", "a", "c"]
    assert "c" in keywords
    assert len(keywords) == 3


def test_subset_words() -> None:
    assert subset_words(["iPhone 14 Pro", "Apple's Store", "Google"]) == {
        "iPhone",
        "14",
        "Pro",
        "Apples",
        "Store",
    }


@pytest.mark.parametrize(
    "method",
    [
        "find_proper_nouns",
        "find_high_frequency_keywords",
        "find_context_from_title",
        "extract_keywords",
    ],
)
def test_accumulated_keywords_are_clean(method: str) -> None:
    session = create_session(MESSY, MESSY_TITLE)
    getattr(session, method)()

    assert len(session.keywords) > 0
    for keyword in session.keywords:
        assert keyword == cleanup(keyword), keyword
        assert re.search(r"\w", keyword), keyword
        assert not keyword.isdigit(), keyword
        assert not is_stop_word(keyword), keyword
