"""Space-separated character tokenization for n-gram indexing.

Responsibilities:
- Separate every character with a single space.
- Keep a lone character in full-width parentheses attached, as in `（あ）`.
- Absorb an ideographic space that follows a character instead of emitting it.
"""

from __future__ import annotations

from .tables import IDEOGRAPHIC_SPACE

_OPEN_PAREN = "（"
_CLOSE_PAREN = "）"

_STATE_NORMAL = 0
_STATE_OPENED = 1
_STATE_BUFFERED = 2


def to_ngram(text: str | None) -> str | None:
    """Render text as space-separated characters for n-gram indexing.

    An opening `（` defers output for two characters. When the character after
    them is `）` the three are emitted unseparated before the closer, otherwise
    the two deferred characters are emitted space-separated.

    Args:
        text: Input text, or `None`.

    Returns:
        Space-separated text, or `None` when the input is `None`.
    """

    if text is None:
        return None

    parts: list[str] = []
    state = _STATE_NORMAL
    length = len(text)
    index = 0
    while index < length:
        char = text[index]
        if state == _STATE_NORMAL:
            if char == _OPEN_PAREN:
                state = _STATE_OPENED
                index += 1
                continue
        elif state == _STATE_OPENED:
            state = _STATE_BUFFERED
            index += 1
            continue
        else:
            state = _STATE_NORMAL
            if char == _CLOSE_PAREN:
                parts.append(text[index - 2 : index])
            else:
                parts.append(f"{text[index - 2]} {text[index - 1]} ")

        parts.append(char)
        if index < length - 1:
            parts.append(" ")
            if text[index + 1] == IDEOGRAPHIC_SPACE:
                index += 1
        index += 1

    if state == _STATE_OPENED:
        parts.append(text[-1])
    elif state == _STATE_BUFFERED:
        parts.append(f"{text[-2]} {text[-1]}")
    return "".join(parts)
