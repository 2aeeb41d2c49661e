"""Content fingerprints for normalized text.

Responsibilities:
- Pack CRC-32 and Adler-32 checksums of normalized text into one 64-bit value.

The fingerprint is suitable for deduplication and comparison, not for security.
"""

from __future__ import annotations

import zlib

from .normalizer import TextNormalizer, default_normalizer

_UINT32_MASK = 0xFFFFFFFF
_INT64_SIGN_BIT = 1 << 63
_UINT64_RANGE = 1 << 64


def checksum_pair(data: bytes, *, signed: bool = False) -> int:
    """Return CRC-32 in the high and Adler-32 in the low 32 bits of a 64-bit value.

    Args:
        data: Bytes to fingerprint.
        signed: Reinterpret the result as a two's-complement signed 64-bit value.
    """

    crc = zlib.crc32(data) & _UINT32_MASK
    adler = zlib.adler32(data) & _UINT32_MASK
    value = (crc << 32) | adler
    if signed and value & _INT64_SIGN_BIT:
        return value - _UINT64_RANGE
    return value


def content_hash(
    text: str,
    *,
    signed: bool = False,
    normalizer: TextNormalizer | None = None,
) -> int:
    """Return the 64-bit fingerprint of text after normalization.

    Texts that normalize identically hash identically.

    Args:
        text: Text to fingerprint.
        signed: Return a signed 64-bit value instead of an unsigned one.
        normalizer: Normalizer to apply; defaults to the bundled variant table.

    Raises:
        ValueError: If `text` is `None`.
    """

    if text is None:
        raise ValueError("Cannot hash `None`; content hash requires text.")
    active_normalizer = normalizer if normalizer is not None else default_normalizer()
    normalized = active_normalizer.normalize(text)
    return checksum_pair(normalized.encode("utf-8"), signed=signed)
