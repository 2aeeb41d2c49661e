"""Unit tests for full-width/half-width and katakana conversions."""

from __future__ import annotations

import pytest

from indexnorm.text.width import (
    merge_katakana,
    to_half_width,
    to_zenkaku_katakana,
    to_zenkaku_katakana_char,
)


def test_to_half_width_folds_letters_digits_and_signs() -> None:
    """Full-width letters, digits, and listed signs should map to ASCII."""

    assert to_half_width("ＡＢＣａｂｃ０１２！＃＄") == "ABCabc012!#$"
    assert to_half_width("（ｔｅｓｔ）＠［１］") == "(test)@[1]"


def test_to_half_width_keeps_ascii_and_other_scripts() -> None:
    """ASCII and non-convertible characters should pass through unchanged."""

    assert to_half_width("Hello World") == "Hello World"
    assert to_half_width("カタカナ　ひらがな") == "カタカナ　ひらがな"
    assert to_half_width("") == ""


def test_to_half_width_folds_minus_sign_to_hyphen() -> None:
    """U+2212 has no half-width slot at the offset and should become `-`."""

    assert to_half_width("−５") == "-5"
    assert to_half_width("－５") == "-5"


def test_to_half_width_propagates_none() -> None:
    """`None` input should produce `None`."""

    assert to_half_width(None) is None


@pytest.mark.parametrize(
    ("char", "expected"),
    [
        ("ｦ", "ヲ"),
        ("ｱ", "ア"),
        ("ﾝ", "ン"),
        ("｡", "。"),
        ("･", "・"),
        ("ｰ", "ー"),
        ("ﾞ", "゛"),
        ("ﾟ", "゜"),
        ("a", "a"),
        ("ア", "ア"),
    ],
)
def test_to_zenkaku_katakana_char_maps_half_width_range(char: str, expected: str) -> None:
    """Single half-width katakana should map to full-width, others pass through."""

    assert to_zenkaku_katakana_char(char) == expected


def test_merge_katakana_composes_voiced_and_semi_voiced_marks() -> None:
    """Eligible bases should compose with their voicing marks."""

    assert merge_katakana("ｶ", "ﾞ") == "ガ"
    assert merge_katakana("ｳ", "ﾞ") == "ヴ"
    assert merge_katakana("ﾎ", "ﾞ") == "ボ"
    assert merge_katakana("ﾊ", "ﾟ") == "パ"
    assert merge_katakana("ﾎ", "ﾟ") == "ポ"


def test_merge_katakana_returns_first_char_when_not_composable() -> None:
    """Ineligible pairs should return the first character unchanged."""

    assert merge_katakana("ｱ", "ﾞ") == "ｱ"
    assert merge_katakana("ｶ", "ﾟ") == "ｶ"
    assert merge_katakana("ｶ", "ｷ") == "ｶ"


def test_to_zenkaku_katakana_converts_plain_and_composed_sequences() -> None:
    """Half-width katakana strings should convert with voicing composition."""

    assert to_zenkaku_katakana("ｱｲｳｴｵ") == "アイウエオ"
    assert to_zenkaku_katakana("ｶﾞｷﾞｸﾞｹﾞｺﾞ") == "ガギグゲゴ"
    assert to_zenkaku_katakana("ﾊﾟﾋﾟﾌﾟﾍﾟﾎﾟ") == "パピプペポ"
    assert to_zenkaku_katakana("ｶﾞｷﾞｸﾞｹﾞｹﾞ") == "ガギグゲゲ"


def test_to_zenkaku_katakana_converts_unvoiceable_bases_one_to_one() -> None:
    """Bases without a voiced form should convert alongside a bare mark."""

    assert to_zenkaku_katakana("ｱﾞ") == "ア゛"
    assert to_zenkaku_katakana("ﾞｶ") == "゛カ"
    assert to_zenkaku_katakana("｢ﾏﾛｶ｣､") == "「マロカ」、"


def test_to_zenkaku_katakana_keeps_other_text_and_none() -> None:
    """Non-katakana text should pass through and `None` should propagate."""

    assert to_zenkaku_katakana("abc ﾃﾞｰﾀ") == "abc データ"
    assert to_zenkaku_katakana("") == ""
    assert to_zenkaku_katakana(None) is None
