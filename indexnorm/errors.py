"""Domain exceptions for numeral parsing, variant tables, and CLI diagnostics."""

from __future__ import annotations


class KansujiError(ValueError):
    """Raised when a kanji numeral string cannot be converted."""


class EmptyKansujiError(KansujiError):
    """Raised when a kanji numeral string is absent or empty."""

    def __init__(self) -> None:
        """Initialize the empty-input error with a fixed message."""

        super().__init__("Kanji numeral input is empty or None.")


class InvalidKansujiCharacterError(KansujiError):
    """Raised when a kanji numeral string contains an unrecognized character."""

    def __init__(self, character: str, text: str) -> None:
        """Initialize the error with the offending character and full input."""

        super().__init__(f"Invalid kanji numeral character `{character}` in `{text}`.")
        self.character = character
        self.text = text


class VariantTableError(RuntimeError):
    """Raised when the variant character table cannot be loaded."""

    def __init__(self, *, source: str, detail: str) -> None:
        """Initialize a table-load error for the given resource label."""

        super().__init__(f"Variant table `{source}`: {detail}")
        self.source = source
        self.detail = detail


class CommandStageError(RuntimeError):
    """Raised when a specific CLI command stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped command error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint
