"""Configuration model and loaders for indexnorm.

Responsibilities:
- Define command configuration as a typed dataclass.
- Provide loader entry points for file- and environment-based configuration.
- Build the `TextNormalizer` a configuration describes.

Key types:
- `NormalizerConfig`: normalized settings for one command invocation.
- `ConfigLoader`: static construction helpers for `NormalizerConfig`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from .parsing import normalize_optional_string, parse_permissive_boolean
from .text.normalizer import TextNormalizer, default_normalizer
from .text.variants import load_variant_map

_DEFAULT_LOG_LEVEL = "WARNING"
_SUPPORTED_LOG_LEVELS = frozenset(
    {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}
)


@dataclass(slots=True)
class NormalizerConfig:
    """Runtime configuration for normalization commands.

    Attributes:
        variant_table: Optional path to a custom variant table; `None` selects
            the bundled table.
        log_level: `loguru` level name for command logs.
        signed_hash: Whether `hash` reports signed 64-bit values by default.
        extra: Additional metadata for future extensions.
    """

    variant_table: Path | None = None
    log_level: str = _DEFAULT_LOG_LEVEL
    signed_hash: bool = False
    extra: dict[str, str] = field(default_factory=dict)

    def validate(self) -> None:
        """Validate configuration values before use."""

        if self.log_level not in _SUPPORTED_LOG_LEVELS:
            supported = ", ".join(sorted(_SUPPORTED_LOG_LEVELS))
            raise ValueError(
                f"Unsupported `log_level` value `{self.log_level}`; supported: {supported}."
            )

    def build_normalizer(self) -> TextNormalizer:
        """Return a normalizer bound to the configured variant table."""

        if self.variant_table is None:
            return default_normalizer()
        return TextNormalizer(load_variant_map(self.variant_table))


class ConfigLoader:
    """Factory methods for creating `NormalizerConfig` from external sources."""

    _SUPPORTED_YAML_KEYS = frozenset({"variant_table", "log_level", "signed_hash", "extra"})

    @staticmethod
    def from_yaml(path: Path, base: NormalizerConfig | None = None) -> NormalizerConfig:
        """Create a validated config from a YAML file.

        Keys missing from the file keep the values of `base`, or the defaults.
        """

        path_text = path.read_text(encoding="utf-8")
        payload = ConfigLoader._parse_yaml_payload(path_text, path)
        fallback = base if base is not None else NormalizerConfig()
        return ConfigLoader._build_config_from_mapping(
            payload, source_label=f"YAML `{path}`", fallback=fallback
        )

    @staticmethod
    def from_env(env: Mapping[str, str] | None = None) -> NormalizerConfig:
        """Create a validated config from environment variables."""

        env_map: Mapping[str, str] = os.environ if env is None else env

        variant_table = ConfigLoader._optional_env_string(env_map, "INDEXNORM_VARIANT_TABLE")
        log_level = ConfigLoader._optional_env_string(env_map, "INDEXNORM_LOG_LEVEL")
        signed_hash = ConfigLoader._optional_env_boolean(env_map, "INDEXNORM_SIGNED_HASH")

        config = NormalizerConfig(
            variant_table=Path(variant_table) if variant_table is not None else None,
            log_level=log_level.upper() if log_level is not None else _DEFAULT_LOG_LEVEL,
            signed_hash=signed_hash or False,
        )
        config.validate()
        return config

    @staticmethod
    def _parse_yaml_payload(raw_text: str, path: Path) -> Mapping[str, Any]:
        """Parse YAML text and enforce a mapping root payload."""

        try:
            payload = yaml.safe_load(raw_text)
        except yaml.YAMLError as exc:
            raise ValueError(f"YAML config `{path}` is not valid YAML: {exc}") from exc

        if payload is None:
            payload = {}
        if not isinstance(payload, Mapping):
            raise ValueError(f"YAML config `{path}` must contain a top-level mapping/object.")
        return payload

    @staticmethod
    def _build_config_from_mapping(
        payload: Mapping[str, Any],
        source_label: str,
        fallback: NormalizerConfig,
    ) -> NormalizerConfig:
        """Build a validated config from a normalized mapping payload."""

        unknown = sorted(set(payload).difference(ConfigLoader._SUPPORTED_YAML_KEYS))
        if unknown:
            key_list = ", ".join(str(key) for key in unknown)
            raise ValueError(f"{source_label} includes unsupported key(s): {key_list}.")

        variant_table = fallback.variant_table
        if "variant_table" in payload:
            raw_table = normalize_optional_string(payload["variant_table"])
            variant_table = Path(raw_table) if raw_table is not None else None

        log_level = fallback.log_level
        raw_level = normalize_optional_string(payload.get("log_level"))
        if raw_level is not None:
            log_level = raw_level.upper()

        signed_hash = ConfigLoader._optional_boolean(
            payload, "signed_hash", source_label, default=fallback.signed_hash
        )
        extra = dict(fallback.extra)
        extra.update(ConfigLoader._optional_string_map(payload, "extra", source_label))

        config = NormalizerConfig(
            variant_table=variant_table,
            log_level=log_level,
            signed_hash=signed_hash,
            extra=extra,
        )
        config.validate()
        return config

    @staticmethod
    def _optional_boolean(
        payload: Mapping[str, Any], key: str, source_label: str, default: bool
    ) -> bool:
        """Read and validate a boolean field from a payload."""

        if key not in payload:
            return default

        parsed = parse_permissive_boolean(payload[key])
        if parsed is None:
            raise ValueError(
                f"{source_label} field `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed

    @staticmethod
    def _optional_string_map(
        payload: Mapping[str, Any], key: str, source_label: str
    ) -> dict[str, str]:
        """Read an optional mapping with non-empty string keys and values."""

        raw = payload.get(key)
        if raw is None:
            return {}
        if not isinstance(raw, Mapping):
            raise ValueError(f"{source_label} field `{key}` must be a mapping/object.")

        normalized: dict[str, str] = {}
        for raw_key, raw_value in raw.items():
            key_value = normalize_optional_string(raw_key)
            value_value = normalize_optional_string(raw_value)
            if key_value is None:
                raise ValueError(f"{source_label} field `{key}` contains a blank key.")
            if value_value is None:
                raise ValueError(
                    f"{source_label} field `{key}` contains blank value for `{key_value}`."
                )
            normalized[key_value] = value_value
        return normalized

    @staticmethod
    def _optional_env_string(env: Mapping[str, str], key: str) -> str | None:
        """Read and normalize optional string environment variable values."""

        if key not in env:
            return None
        return normalize_optional_string(env.get(key))

    @staticmethod
    def _optional_env_boolean(env: Mapping[str, str], key: str) -> bool | None:
        """Read an optional boolean from environment mapping."""

        if key not in env:
            return None
        parsed = parse_permissive_boolean(env.get(key))
        if parsed is None:
            raise ValueError(
                f"Environment variable `{key}` must be a boolean value "
                "(`true`/`false`, `1`/`0`, `yes`/`no`)."
            )
        return parsed
