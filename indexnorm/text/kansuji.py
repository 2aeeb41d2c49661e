"""Kanji numeral parsing and formatting.

Responsibilities:
- Convert positive kanji numerals such as `百二十三` to decimal strings.
- Format integers from 0 to 100 as kanji numerals.
"""

from __future__ import annotations

from ..errors import EmptyKansujiError, InvalidKansujiCharacterError

KANJI_DIGITS = {
    "一": 1,
    "二": 2,
    "三": 3,
    "四": 4,
    "五": 5,
    "六": 6,
    "七": 7,
    "八": 8,
    "九": 9,
}

KANJI_SMALL_UNITS = {
    "十": 10,
    "百": 100,
    "千": 1_000,
}

KANJI_LARGE_UNITS = {
    "万": 10_000,
    "億": 100_000_000,
}

_KANJI_ZERO_LITERALS = frozenset({"零", "〇"})
_KANJI_ZERO_FORMATTED = "〇"
_DIGIT_GLYPHS = ("一", "二", "三", "四", "五", "六", "七", "八", "九", "十")


def convert_kansuji(text: str | None) -> str:
    """Convert a positive kanji numeral to its decimal string.

    Only the last digit before a unit is used, so `二三十` reads as `30`.
    A unit without a preceding digit counts as one (`十` is `10`, `万` is
    `10000`).

    Args:
        text: Kanji numeral such as `百二十三`, or a zero literal `零`/`〇`.

    Returns:
        Decimal digit string such as `"123"`.

    Raises:
        EmptyKansujiError: If `text` is `None` or empty.
        InvalidKansujiCharacterError: If `text` contains a non-numeral character.
    """

    if not text:
        raise EmptyKansujiError()
    if text in _KANJI_ZERO_LITERALS:
        return "0"

    digit = 1
    section = 0
    total = 0
    for char in text:
        if char in KANJI_DIGITS:
            digit = KANJI_DIGITS[char]
        elif char in KANJI_SMALL_UNITS:
            section += (digit or 1) * KANJI_SMALL_UNITS[char]
            digit = 0
        elif char in KANJI_LARGE_UNITS:
            section += digit
            total += (section or 1) * KANJI_LARGE_UNITS[char]
            section = 0
            digit = 0
        else:
            raise InvalidKansujiCharacterError(char, text)
    return str(total + section + digit)


def get_kanji_digit(number: int) -> str:
    """Return the single kanji glyph for 1 through 10, or `""` otherwise."""

    if 1 <= number <= 10:
        return _DIGIT_GLYPHS[number - 1]
    return ""


def to_kanji(number: int) -> str | None:
    """Format an integer from 0 to 100 as a kanji numeral.

    Returns `None` for negative numbers and numbers above 100.
    """

    if number < 0:
        return None
    if number == 0:
        return _KANJI_ZERO_FORMATTED
    if number <= 10:
        return get_kanji_digit(number)
    if number < 100:
        tens, ones = divmod(number, 10)
        prefix = get_kanji_digit(tens) if tens > 1 else ""
        suffix = get_kanji_digit(ones) if ones > 0 else ""
        return f"{prefix}十{suffix}"
    if number == 100:
        return "百"
    return None
