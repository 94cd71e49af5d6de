"""
Tests for the proper-noun scanner and its session post-processing.
"""

from __future__ import annotations

import pytest

from extraction import proper_nouns
from extraction.session import create_session, find_proper_nouns
from extraction.text import cleanup, tokenize


def test_single_names_in_order_of_appearance() -> None:
    content = "Microsoft and Google are working with OpenAI."
    assert find_proper_nouns(content) == ["Microsoft", "Google", "OpenAI"]


def test_contiguous_model_name_is_one_phrase() -> None:
    result = find_proper_nouns("Apple unveiled the iPhone 14 Pro Max on Tuesday.")

    assert "iPhone 14 Pro Max" in result
    assert "iPhone" not in result
    assert "Pro" not in result
    assert "Max" not in result


def test_trailing_plus_model_number_is_kept() -> None:
    result = find_proper_nouns("The phone runs on the MediaTek Dimensity 9300+ chip.")
    assert result == ["MediaTek Dimensity 9300+"]


def test_standalone_plus_joins_previous_word() -> None:
    assert find_proper_nouns("We tested the Galaxy S24 + yesterday.") == ["Galaxy S24+"]


def test_split_plus_tokens() -> None:
    tokens = ["Disney+Hulu", "9300+", "C++", "+"]
    assert proper_nouns.split_plus_tokens(tokens) == ["Disney", "Hulu", "9300+", "C++", "+"]


def test_sentence_initial_word_does_not_open_phrase() -> None:
    result = find_proper_nouns("Yesterday Apple announced record sales.")

    assert "Yesterday Apple" not in result
    assert "Apple" in result


def test_strong_shape_opens_phrase_at_sentence_start() -> None:
    assert find_proper_nouns("OnePlus Nord launched today.") == ["OnePlus Nord"]


def test_clause_punctuation_closes_phrases() -> None:
    content = "They met Sundar Pichai, Satya Nadella and Tim Cook."
    assert find_proper_nouns(content) == ["Sundar Pichai", "Satya Nadella", "Tim Cook"]


def test_sentence_end_closes_phrase() -> None:
    assert find_proper_nouns("We visited Paris. London was next.") == ["Paris", "London"]


def test_stop_word_inside_run_is_elided() -> None:
    content = "We toured the Bank Of America Tower yesterday."
    assert find_proper_nouns(content) == ["Bank America Tower"]


def test_short_tokens_are_skipped() -> None:
    assert find_proper_nouns("I met X at Google.") == ["Google"]


def test_model_number_shape() -> None:
    assert find_proper_nouns("Nvidia shipped the RTX4090 in volume.") == ["Nvidia", "RTX4090"]


def test_scan_reports_duplicates_and_session_folds_them() -> None:
    content = "Google is big. We like Google."
    assert proper_nouns.find_proper_nouns(tokenize(content)) == ["Google", "Google"]
    assert find_proper_nouns(content) == ["Google"]


@pytest.mark.parametrize(
    "word, strong",
    [("OpenAI", True), ("iPhone", True), ("RTX4090", True), ("S24+", True), ("Samsung", False), ("x86", False)],
)
def test_strong_shapes(word: str, strong: bool) -> None:
    assert proper_nouns.is_strong_shape(word) is strong


def test_outputs_are_clean_and_not_numeric() -> None:
    content = (
        '"Samsung\'s" new (Galaxy S24 Ultra) beat Apple’s iPhone 15, per IDC. '
        "In 2024, 1,200 [Pixel] units—and 300 more—shipped to T-Mobile!"
    )
    for keyword in find_proper_nouns(content):
        assert keyword == cleanup(keyword)
        assert keyword == keyword.strip()
        assert not keyword.isdigit()


def test_repeat_calls_are_stable_and_accumulate_once() -> None:
    session = create_session("Microsoft and Google are working with OpenAI.")

    first = session.find_proper_nouns()
    size = len(session.keywords)
    second = session.find_proper_nouns()

    assert first == second
    assert len(session.keywords) == size
