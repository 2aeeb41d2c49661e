"""Whitespace trimming helpers.

Responsibilities:
- Trim control characters and spaces from both ends of text.
- Optionally treat ideographic and no-break spaces as trimmable.
"""

from __future__ import annotations

from .tables import IDEOGRAPHIC_SPACE, NO_BREAK_SPACE

# Every code point up to and including U+0020.
_CONTROL_AND_SPACE = "".join(chr(code) for code in range(0x21))
_FULL_TRIM_CHARS = _CONTROL_AND_SPACE + NO_BREAK_SPACE + IDEOGRAPHIC_SPACE


def trim_to_empty(text: str | None) -> str:
    """Trim control characters and spaces, returning `""` for `None`."""

    if text is None:
        return ""
    return text.strip(_CONTROL_AND_SPACE)


def full_trim(text: str | None) -> str | None:
    """Trim control characters, spaces, U+00A0, and U+3000 from both ends.

    Args:
        text: Input text, or `None`.

    Returns:
        Trimmed text, or `None` when the input is `None`. Untrimmed input is
        returned as the same object.
    """

    if not text:
        return text
    return text.strip(_FULL_TRIM_CHARS)
