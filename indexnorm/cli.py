"""Command-line interface for indexnorm.

Responsibilities:
- Expose every normalization operation as a user-facing command.
- Convert CLI options into `NormalizerConfig` and run the operations.

Commands read `TEXT` when given, otherwise one input per stdin line.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Callable, Optional

import typer

from .cli_rendering import echo_results, exit_with_command_error
from .config import ConfigLoader, NormalizerConfig
from .errors import CommandStageError, KansujiError, VariantTableError
from .telemetry.logger import RunLogger
from .text import (
    TextNormalizer,
    content_hash,
    convert_kansuji,
    full_trim,
    to_half_width,
    to_kanji,
    to_ngram,
    to_zenkaku_katakana,
    trim_to_empty,
)

app = typer.Typer(
    name="indexnorm",
    no_args_is_help=True,
    help="Japanese text normalization for indexing and search.",
)

TextArgument = Annotated[
    Optional[str],
    typer.Argument(help="Input text. Reads one input per stdin line when omitted."),
]
ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", help="Path to YAML config file."),
]
VariantTableOption = Annotated[
    Optional[Path],
    typer.Option("--variant-table", help="Path to a custom variant table."),
]


def _load_env_config() -> NormalizerConfig:
    """Load environment configuration and map failures to stage errors."""

    try:
        return ConfigLoader.from_env()
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid environment configuration: {exc}",
            hint="Fix the `INDEXNORM_*` environment variables and rerun.",
        ) from exc


def _load_yaml_config(config_path: Path, base: NormalizerConfig) -> NormalizerConfig:
    """Load a YAML config file over `base` and map failures to stage errors."""

    try:
        return ConfigLoader.from_yaml(config_path, base=base)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            hint="Fix config schema/values and rerun.",
        ) from exc
    except OSError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            hint="Verify file permissions.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    variant_table: Path | None = None,
) -> NormalizerConfig:
    """Resolve effective config: CLI option > YAML file > environment > defaults."""

    config = _load_env_config()
    if config_file is not None:
        config = _load_yaml_config(config_file, base=config)
    if variant_table is not None:
        config.variant_table = variant_table
    return config


def _build_normalizer(config: NormalizerConfig) -> TextNormalizer:
    """Build the configured normalizer and map table failures to stage errors."""

    try:
        normalizer = config.build_normalizer()
        _ = normalizer.variant_map
    except VariantTableError as exc:
        raise CommandStageError(
            stage="variants",
            detail=str(exc),
            hint="Pass an existing UTF-8 table via `--variant-table <path>`.",
        ) from exc
    return normalizer


def _read_inputs(text: str | None) -> list[str]:
    """Return the explicit input, or every stdin line without its line break."""

    if text is not None:
        return [text]
    stream = typer.get_text_stream("stdin")
    return [line.rstrip("\r\n") for line in stream]


def _run_lines(
    command_name: str,
    text: str | None,
    config: NormalizerConfig,
    transform: Callable[[str], object],
) -> list[object]:
    """Apply `transform` to each input with start/complete/failure logging."""

    run_logger = RunLogger(level=config.log_level)
    run_logger.log_stage_start(command_name)
    try:
        results = [transform(line) for line in _read_inputs(text)]
    except Exception as exc:
        run_logger.log_stage_failure(command_name, type(exc).__name__)
        raise
    run_logger.log_stage_complete(command_name, inputs=len(results))
    return results


@app.command("normalize")
def normalize_command(
    text: TextArgument = None,
    config_file: ConfigOption = None,
    variant_table: VariantTableOption = None,
) -> None:
    """Fold kana, variants, whitespace, and half-width katakana to canonical text."""

    try:
        config = _resolve_command_config(config_file, variant_table)
        normalizer = _build_normalizer(config)
        results = _run_lines("normalize", text, config, normalizer.normalize)
    except Exception as exc:
        exit_with_command_error("normalize", exc)

    echo_results(results)


@app.command("hash")
def hash_command(
    text: TextArgument = None,
    signed: Annotated[
        Optional[bool],
        typer.Option(
            "--signed/--unsigned",
            help="Report signed 64-bit values (overrides config `signed_hash`).",
        ),
    ] = None,
    config_file: ConfigOption = None,
    variant_table: VariantTableOption = None,
) -> None:
    """Print the 64-bit content hash of normalized text."""

    try:
        config = _resolve_command_config(config_file, variant_table)
        normalizer = _build_normalizer(config)
        resolved_signed = signed if signed is not None else config.signed_hash
        results = _run_lines(
            "hash",
            text,
            config,
            lambda line: content_hash(line, signed=resolved_signed, normalizer=normalizer),
        )
    except Exception as exc:
        exit_with_command_error("hash", exc)

    echo_results(results)


@app.command("half-width")
def half_width_command(
    text: TextArgument = None,
    config_file: ConfigOption = None,
) -> None:
    """Convert full-width letters, digits, and signs to half-width."""

    try:
        config = _resolve_command_config(config_file)
        results = _run_lines("half-width", text, config, to_half_width)
    except Exception as exc:
        exit_with_command_error("half-width", exc)

    echo_results(results)


@app.command("katakana")
def katakana_command(
    text: TextArgument = None,
    config_file: ConfigOption = None,
) -> None:
    """Convert half-width katakana to full-width, composing voicing marks."""

    try:
        config = _resolve_command_config(config_file)
        results = _run_lines("katakana", text, config, to_zenkaku_katakana)
    except Exception as exc:
        exit_with_command_error("katakana", exc)

    echo_results(results)


@app.command("trim")
def trim_command(
    text: TextArgument = None,
    full: Annotated[
        bool,
        typer.Option("--full", help="Also trim U+3000 and U+00A0 spaces."),
    ] = False,
    config_file: ConfigOption = None,
) -> None:
    """Trim whitespace from both ends of text."""

    try:
        config = _resolve_command_config(config_file)
        results = _run_lines("trim", text, config, full_trim if full else trim_to_empty)
    except Exception as exc:
        exit_with_command_error("trim", exc)

    echo_results(results)


@app.command("ngram")
def ngram_command(
    text: TextArgument = None,
    config_file: ConfigOption = None,
) -> None:
    """Render text as space-separated characters for n-gram indexing."""

    try:
        config = _resolve_command_config(config_file)
        results = _run_lines("ngram", text, config, to_ngram)
    except Exception as exc:
        exit_with_command_error("ngram", exc)

    echo_results(results)


@app.command("kansuji")
def kansuji_command(
    text: Annotated[str, typer.Argument(help="Kanji numeral, for example `百二十三`.")],
    config_file: ConfigOption = None,
) -> None:
    """Convert a kanji numeral to Arabic digits."""

    try:
        config = _resolve_command_config(config_file)
        try:
            results = _run_lines("kansuji", text, config, convert_kansuji)
        except KansujiError as exc:
            raise CommandStageError(
                stage="parse",
                detail=str(exc),
                hint="Use only 零, 〇, 一-九, 十, 百, 千, 万 and 億.",
            ) from exc
    except Exception as exc:
        exit_with_command_error("kansuji", exc)

    echo_results(results)


@app.command("kanji")
def kanji_command(
    number: Annotated[int, typer.Argument(help="Integer from 0 to 100.")],
    config_file: ConfigOption = None,
) -> None:
    """Format an integer from 0 to 100 as a kanji numeral."""

    try:
        config = _resolve_command_config(config_file)
        run_logger = RunLogger(level=config.log_level)
        run_logger.log_stage_start("kanji")
        formatted = to_kanji(number)
        if formatted is None:
            run_logger.log_stage_failure("kanji", "UnsupportedValue")
            raise CommandStageError(
                stage="format",
                detail=f"`{number}` is outside the supported range 0-100.",
                hint="Pass an integer from 0 to 100.",
            )
        run_logger.log_stage_complete("kanji")
    except Exception as exc:
        exit_with_command_error("kanji", exc)

    typer.echo(formatted)


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
