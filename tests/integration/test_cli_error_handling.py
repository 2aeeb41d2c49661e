"""CLI error-handling tests for concise command diagnostics."""

from __future__ import annotations

from pathlib import Path

from pytest import MonkeyPatch
from typer.testing import CliRunner

from indexnorm.cli import app


def test_kansuji_command_reports_invalid_character() -> None:
    """Unknown numeral characters should fail at the parse stage with a hint."""

    result = CliRunner().invoke(app, ["kansuji", "十a"])

    assert result.exit_code == 1
    assert "kansuji failed at stage `parse`" in result.output
    assert "`a`" in result.output
    assert "Hint:" in result.output


def test_kansuji_command_reports_empty_input() -> None:
    """An empty numeral should fail at the parse stage."""

    result = CliRunner().invoke(app, ["kansuji", ""])

    assert result.exit_code == 1
    assert "kansuji failed at stage `parse`" in result.output


def test_kanji_command_reports_unsupported_value() -> None:
    """Values above 100 should fail at the format stage."""

    result = CliRunner().invoke(app, ["kanji", "101"])

    assert result.exit_code == 1
    assert "kanji failed at stage `format`: `101` is outside the supported range 0-100." in (
        result.output
    )


def test_normalize_command_reports_missing_variant_table(tmp_path: Path) -> None:
    """A missing custom table should fail at the variants stage."""

    missing = tmp_path / "missing.txt"

    result = CliRunner().invoke(app, ["normalize", "abc", "--variant-table", str(missing)])

    assert result.exit_code == 1
    assert "normalize failed at stage `variants`" in result.output
    assert "Hint: Pass an existing UTF-8 table" in result.output


def test_normalize_command_reports_missing_config_file(tmp_path: Path) -> None:
    """A missing `--config` path should fail at the config stage."""

    missing = tmp_path / "missing.yml"

    result = CliRunner().invoke(app, ["normalize", "abc", "--config", str(missing)])

    assert result.exit_code == 1
    assert "normalize failed at stage `config`: Config file not found" in result.output


def test_hash_command_reports_invalid_config_values(tmp_path: Path) -> None:
    """Invalid YAML values should fail at the config stage."""

    config_path = tmp_path / "indexnorm.yml"
    config_path.write_text("signed_hash: maybe\n", encoding="utf-8")

    result = CliRunner().invoke(app, ["hash", "abc", "--config", str(config_path)])

    assert result.exit_code == 1
    assert "hash failed at stage `config`: Invalid config file" in result.output


def test_command_reports_invalid_environment(monkeypatch: MonkeyPatch) -> None:
    """Invalid `INDEXNORM_*` variables should fail at the config stage."""

    monkeypatch.setenv("INDEXNORM_SIGNED_HASH", "maybe")

    result = CliRunner().invoke(app, ["ngram", "abc"])

    assert result.exit_code == 1
    assert "ngram failed at stage `config`: Invalid environment configuration" in result.output


def test_command_reports_non_stage_error(monkeypatch: MonkeyPatch) -> None:
    """Unexpected exceptions should still be reported with exit code 1."""

    def _failing_ngram(_: str) -> str:
        """Raise a generic error to verify fallback CLI diagnostics."""

        raise RuntimeError("unexpected tokenizer error")

    monkeypatch.setattr("indexnorm.cli.to_ngram", _failing_ngram)

    result = CliRunner().invoke(app, ["ngram", "abc"])

    assert result.exit_code == 1
    assert "ngram failed: unexpected tokenizer error" in result.output


def test_failure_is_logged_as_phase_event() -> None:
    """Command failures should emit an ERROR phase line with the error type."""

    result = CliRunner().invoke(app, ["kansuji", "x"])

    assert result.exit_code == 1
    assert (
        "[phase] level=ERROR stage=kansuji event=failure "
        "error_type=InvalidKansujiCharacterError"
    ) in result.output
