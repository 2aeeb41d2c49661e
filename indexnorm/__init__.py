"""Top-level package for indexnorm.

This package normalizes Japanese text for indexing and search: width and kana
folding, variant character unification, kanji numeral conversion, content
fingerprints, and n-gram rendering. Library logging is disabled by default;
the CLI enables it.
"""

from loguru import logger

from .errors import (
    EmptyKansujiError,
    InvalidKansujiCharacterError,
    KansujiError,
    VariantTableError,
)
from .text import (
    TextNormalizer,
    VariantMap,
    content_hash,
    convert_kansuji,
    default_variant_map,
    full_trim,
    get_kanji_digit,
    load_variant_map,
    merge_katakana,
    normalize,
    to_half_width,
    to_kanji,
    to_ngram,
    to_zenkaku_katakana,
    to_zenkaku_katakana_char,
    trim_to_empty,
)

logger.disable("indexnorm")

__all__ = [
    "EmptyKansujiError",
    "InvalidKansujiCharacterError",
    "KansujiError",
    "TextNormalizer",
    "VariantMap",
    "VariantTableError",
    "__version__",
    "content_hash",
    "convert_kansuji",
    "default_variant_map",
    "full_trim",
    "get_kanji_digit",
    "load_variant_map",
    "merge_katakana",
    "normalize",
    "to_half_width",
    "to_kanji",
    "to_ngram",
    "to_zenkaku_katakana",
    "to_zenkaku_katakana_char",
    "trim_to_empty",
]

__version__ = "0.1.0"
