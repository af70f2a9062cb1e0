from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import cast
import warnings

from .formats import DEFAULT_FORMAT
from .transformers.base import DEFAULT_TIMEZONE, resolve_timezone
from .transformers.datetime_to_string import DateTimeToStringTransformer

DEFAULT_CONFIG_FILE = Path("datetime_transformer.toml")


@dataclass(frozen=True, slots=True)
class TransformerConfig:
    input_timezone: str = DEFAULT_TIMEZONE
    output_timezone: str = DEFAULT_TIMEZONE
    format: str = DEFAULT_FORMAT

    def __post_init__(self) -> None:
        resolve_timezone(self.input_timezone)
        resolve_timezone(self.output_timezone)
        if not self.format:
            raise ValueError("format must be a non-empty pattern")

    @classmethod
    def from_env(cls) -> TransformerConfig:
        return cls(
            input_timezone=_env_or_default("DT_INPUT_TIMEZONE", DEFAULT_TIMEZONE),
            output_timezone=_env_or_default("DT_OUTPUT_TIMEZONE", DEFAULT_TIMEZONE),
            format=os.getenv("DT_FORMAT") or DEFAULT_FORMAT,
        )

    def create_transformer(self) -> DateTimeToStringTransformer:
        return DateTimeToStringTransformer(
            self.input_timezone, self.output_timezone, self.format
        )


class ConfigLoader:
    pass

    @staticmethod
    def load(config_file: Path | None = None) -> TransformerConfig:
        config = TransformerConfig.from_env()
        if config_file is None:
            config_file = DEFAULT_CONFIG_FILE
        if config_file.exists():
            try:
                config = ConfigLoader._load_from_toml(config_file, config)
            except (OSError, tomllib.TOMLDecodeError, ValueError) as e:
                warnings.warn(
                    f"Failed to load config from {config_file}: {e}", stacklevel=2
                )
        return config

    @staticmethod
    def _load_from_toml(
        config_file: Path, base_config: TransformerConfig
    ) -> TransformerConfig:
        with config_file.open("rb") as handle:
            data = tomllib.load(handle)
        timezones = _get_table(data, "timezones")
        format_section = _get_table(data, "format")
        input_timezone = base_config.input_timezone
        if value := timezones.get("input"):
            input_timezone = _coerce_str(value, key="timezones.input")
        output_timezone = base_config.output_timezone
        if value := timezones.get("output"):
            output_timezone = _coerce_str(value, key="timezones.output")
        pattern = base_config.format
        if value := format_section.get("pattern"):
            pattern = _coerce_str(value, key="format.pattern")
        return TransformerConfig(
            input_timezone=input_timezone,
            output_timezone=output_timezone,
            format=pattern,
        )


def _env_or_default(name: str, default: str) -> str:
    raw = os.getenv(name)
    cleaned = raw.strip() if raw else ""
    return cleaned or default


def _get_table(data: Mapping[str, object], key: str) -> Mapping[str, object]:
    value = data.get(key)
    if isinstance(value, Mapping):
        return cast("Mapping[str, object]", value)
    return {}


def _coerce_str(value: object, *, key: str) -> str:
    if isinstance(value, str):
        return value.strip()
    raise ValueError(f"{key} must be a string, got {type(value).__name__}")
