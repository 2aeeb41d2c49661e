"""Unit tests for n-gram rendering."""

from __future__ import annotations

import pytest

from indexnorm.text.ngram import to_ngram


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("あいう", "あ い う"),
        ("ab", "a b"),
        ("あ", "あ"),
        ("", ""),
    ],
)
def test_to_ngram_separates_every_character(text: str, expected: str) -> None:
    """Plain text should be split with single spaces."""

    assert to_ngram(text) == expected


def test_to_ngram_two_characters_in_parentheses() -> None:
    """Two characters inside parentheses stay space-separated."""

    assert to_ngram("（あい）") == "（ あ い ）"


def test_to_ngram_keeps_single_parenthesized_character_attached() -> None:
    """A lone character in parentheses should be emitted unseparated."""

    assert to_ngram("（あ）") == "（あ）"
    assert to_ngram("（あ）い") == "（あ） い"


def test_to_ngram_parentheses_inside_text() -> None:
    """Parenthetical handling should also apply mid-string."""

    assert to_ngram("a（bc）d") == "a （ b c ） d"


def test_to_ngram_absorbs_ideographic_space_after_character() -> None:
    """A following U+3000 should be consumed instead of emitted."""

    assert to_ngram("あ　い") == "あ い"


def test_to_ngram_flushes_pending_characters_at_end() -> None:
    """An unterminated parenthesis should flush its buffered characters."""

    assert to_ngram("（") == "（"
    assert to_ngram("（あ") == "（ あ"


def test_to_ngram_propagates_none() -> None:
    """`None` input should produce `None`."""

    assert to_ngram(None) is None
