"""Full-width/half-width conversions for Latin, digits, signs, and katakana.

Responsibilities:
- Fold full-width ASCII variants to half-width.
- Expand half-width katakana to full-width, composing voicing marks.
"""

from __future__ import annotations

from .tables import (
    FULL_WIDTH_OFFSET,
    FULL_WIDTH_SIGNS,
    HANKAKU_KATAKANA_FIRST,
    HANKAKU_KATAKANA_LAST,
    HANKAKU_SEMI_VOICED_MARK,
    HANKAKU_VOICED_MARK,
    MINUS_SIGN,
    SEMI_VOICED_BASES,
    SEMI_VOICED_COMPOSED,
    VOICED_BASES,
    VOICED_COMPOSED,
    ZENKAKU_KATAKANA,
)


def _is_full_width_ascii(char: str) -> bool:
    """Return whether a character is a convertible full-width letter, digit, or sign."""

    return (
        "Ａ" <= char <= "Ｚ"
        or "ａ" <= char <= "ｚ"
        or "０" <= char <= "９"
        or char in FULL_WIDTH_SIGNS
    )


def to_half_width(text: str | None) -> str | None:
    """Convert full-width letters, digits, and listed signs to half-width.

    Args:
        text: Input text, or `None`.

    Returns:
        Converted text, or `None` when the input is `None`.
    """

    if text is None:
        return None

    converted: list[str] = []
    for char in text:
        if _is_full_width_ascii(char):
            converted.append(chr(ord(char) - FULL_WIDTH_OFFSET))
        elif char == MINUS_SIGN:
            converted.append("-")
        else:
            converted.append(char)
    return "".join(converted)


def to_zenkaku_katakana_char(char: str) -> str:
    """Convert one half-width katakana character to full-width."""

    if HANKAKU_KATAKANA_FIRST <= char <= HANKAKU_KATAKANA_LAST:
        return ZENKAKU_KATAKANA[ord(char) - ord(HANKAKU_KATAKANA_FIRST)]
    return char


def merge_katakana(c1: str, c2: str) -> str:
    """Compose a half-width base and voicing mark into one full-width character.

    Returns `c1` unchanged when the pair cannot be composed.
    """

    if c2 == HANKAKU_VOICED_MARK:
        index = VOICED_BASES.find(c1)
        if index >= 0:
            return VOICED_COMPOSED[index]
    elif c2 == HANKAKU_SEMI_VOICED_MARK:
        index = SEMI_VOICED_BASES.find(c1)
        if index >= 0:
            return SEMI_VOICED_COMPOSED[index]
    return c1


def to_zenkaku_katakana(text: str | None) -> str | None:
    """Convert half-width katakana in text to full-width, composing voicing marks.

    Args:
        text: Input text, or `None`.

    Returns:
        Converted text, or `None` when the input is `None`.
    """

    if text is None:
        return None

    converted: list[str] = []
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if index < length - 1:
            merged = merge_katakana(char, text[index + 1])
            if merged != char:
                converted.append(merged)
                index += 2
                continue
        converted.append(to_zenkaku_katakana_char(char))
        index += 1
    return "".join(converted)
