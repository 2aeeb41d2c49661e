"""Variant character table loading and lookup.

Responsibilities:
- Parse line-oriented variant groups into an immutable canonical-form mapping.
- Load the bundled table once per process and fail fast when it is unusable.

Key types:
- `VariantMap`: read-only variant -> canonical character mapping.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
import threading
from types import MappingProxyType
from typing import Iterable, Mapping

from loguru import logger

from ..errors import VariantTableError

_BUNDLED_PACKAGE = "indexnorm"
_BUNDLED_DIRECTORY = "data"
_BUNDLED_FILENAME = "var.txt"
_BMP_LAST = 0xFFFF

_default_variant_map: VariantMap | None = None
_default_variant_map_lock = threading.Lock()


@dataclass(frozen=True, slots=True)
class VariantMap:
    """Immutable mapping from variant characters to their canonical form.

    Attributes:
        source: Label of the table the mapping was built from.
        mapping: Read-only variant -> canonical character mapping.
        skipped_lines: Count of lines ignored for holding non-BMP characters.
    """

    source: str
    mapping: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    skipped_lines: int = 0

    def __len__(self) -> int:
        return len(self.mapping)

    def __contains__(self, char: object) -> bool:
        return char in self.mapping

    def canonical(self, char: str) -> str:
        """Return the canonical form of a character, or the character itself."""

        return self.mapping.get(char, char)

    @classmethod
    def from_lines(cls, lines: Iterable[str], source: str) -> VariantMap:
        """Build a variant map from variant-group lines.

        The first character of each line is canonical and every following
        character on that line maps to it. Lines holding characters outside the
        Basic Multilingual Plane are skipped; blank and single-character lines
        carry no mapping.
        """

        mapping: dict[str, str] = {}
        skipped = 0
        for raw_line in lines:
            line = raw_line.rstrip("\r\n")
            if any(ord(char) > _BMP_LAST for char in line):
                skipped += 1
                continue
            if len(line) < 2:
                continue
            canonical = line[0]
            for variant in line[1:]:
                mapping[variant] = canonical

        variant_map = cls(
            source=source,
            mapping=MappingProxyType(mapping),
            skipped_lines=skipped,
        )
        logger.debug(
            "Loaded variant table source={} entries={} skipped_lines={}",
            source,
            len(mapping),
            skipped,
        )
        return variant_map


def load_variant_map(path: Path) -> VariantMap:
    """Load a variant table from a UTF-8 file on disk.

    Raises:
        VariantTableError: If the file is missing, unreadable, or not UTF-8.
    """

    source = str(path)
    try:
        text = path.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise VariantTableError(source=source, detail="file not found.") from exc
    except UnicodeDecodeError as exc:
        raise VariantTableError(source=source, detail=f"not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise VariantTableError(source=source, detail=f"unreadable: {exc}") from exc
    return VariantMap.from_lines(text.splitlines(), source=source)


def load_bundled_variant_map() -> VariantMap:
    """Load the variant table shipped as `indexnorm/data/var.txt`.

    Raises:
        VariantTableError: If the packaged resource is missing or unreadable.
    """

    resource = resources.files(_BUNDLED_PACKAGE).joinpath(_BUNDLED_DIRECTORY).joinpath(
        _BUNDLED_FILENAME
    )
    source = f"{_BUNDLED_PACKAGE}:{_BUNDLED_DIRECTORY}/{_BUNDLED_FILENAME}"
    try:
        text = resource.read_text(encoding="utf-8-sig")
    except FileNotFoundError as exc:
        raise VariantTableError(source=source, detail="resource not found.") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise VariantTableError(source=source, detail=f"failed to load: {exc}") from exc
    return VariantMap.from_lines(text.splitlines(), source=source)


def default_variant_map() -> VariantMap:
    """Return the process-wide bundled variant map, loading it on first use."""

    global _default_variant_map
    if _default_variant_map is None:
        with _default_variant_map_lock:
            if _default_variant_map is None:
                _default_variant_map = load_bundled_variant_map()
    return _default_variant_map
