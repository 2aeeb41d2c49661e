"""Canonicalizing normalization for index and search comparisons.

Responsibilities:
- Fold hiragana to katakana and variant characters to canonical forms.
- Remove whitespace and expand half-width katakana to full-width.

Two inputs that normalize to the same string are the same logical text.
"""

from __future__ import annotations

import re

from .tables import HIRAGANA_FIRST, HIRAGANA_LAST, HIRAGANA_OFFSET
from .variants import VariantMap, default_variant_map
from .width import to_zenkaku_katakana

# ASCII whitespace plus the ideographic space; U+00A0 is kept.
_WHITESPACE_PATTERN = re.compile("[ \t\n\x0b\f\r\u3000]")


class TextNormalizer:
    """Normalize text into its canonical indexing representation."""

    def __init__(self, variant_map: VariantMap | None = None) -> None:
        """Bind the normalizer to a variant table, defaulting to the bundled one."""

        self._variant_map = variant_map

    @property
    def variant_map(self) -> VariantMap:
        """Return the bound variant table, loading the bundled one when unset."""

        if self._variant_map is None:
            self._variant_map = default_variant_map()
        return self._variant_map

    def normalize(self, text: str | None) -> str | None:
        """Return the canonical form of text, or `None` for `None`."""

        if text is None:
            return None

        variant_map = self.variant_map
        folded: list[str] = []
        for char in text:
            if HIRAGANA_FIRST <= char <= HIRAGANA_LAST:
                char = chr(ord(char) + HIRAGANA_OFFSET)
            folded.append(variant_map.canonical(char))
        return to_zenkaku_katakana(_WHITESPACE_PATTERN.sub("", "".join(folded)))


_default_normalizer = TextNormalizer()


def default_normalizer() -> TextNormalizer:
    """Return the process-wide normalizer bound to the bundled variant table."""

    return _default_normalizer


def normalize(text: str | None) -> str | None:
    """Normalize text with the bundled variant table.

    Args:
        text: Input text, or `None`.

    Returns:
        Canonical text, or `None` when the input is `None`.
    """

    return _default_normalizer.normalize(text)
