"""Japanese text normalization components.

This package provides width conversion, kana and variant folding, kanji numeral
conversion, content fingerprints, and n-gram rendering for index/search input.
"""

from .hashing import checksum_pair, content_hash
from .kansuji import convert_kansuji, get_kanji_digit, to_kanji
from .ngram import to_ngram
from .normalizer import TextNormalizer, default_normalizer, normalize
from .trimming import full_trim, trim_to_empty
from .variants import VariantMap, default_variant_map, load_bundled_variant_map, load_variant_map
from .width import merge_katakana, to_half_width, to_zenkaku_katakana, to_zenkaku_katakana_char

__all__ = [
    "TextNormalizer",
    "VariantMap",
    "checksum_pair",
    "content_hash",
    "convert_kansuji",
    "default_normalizer",
    "default_variant_map",
    "full_trim",
    "get_kanji_digit",
    "load_bundled_variant_map",
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
