"""Shared option handling for CLI commands."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from pathlib import Path
from typing import Any, TypeAlias

import click

from ..config import ConfigLoader, TransformerConfig
from ..exceptions import DateTimeTransformerError
from ..transformers import DateTimeToStringTransformer

CommandFunc: TypeAlias = Callable[..., Any]


def config_options(func: CommandFunc) -> CommandFunc:
    """Attach the --config/--input-timezone/--output-timezone/-v options."""
    options = [
        click.option(
            "--config",
            "config_file",
            type=click.Path(exists=True, dir_okay=False, path_type=Path),
            help="Path to a datetime_transformer.toml config file "
            "(default: ./datetime_transformer.toml)",
        ),
        click.option(
            "--input-timezone",
            help="Zone of datetime values (default from config, else UTC)",
        ),
        click.option(
            "--output-timezone",
            help="Zone of formatted strings (default from config, else UTC)",
        ),
        click.option(
            "-v",
            "--verbose",
            count=True,
            help="Increase verbosity (-v verbose, -vv debug)",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def load_config(
    config_file: Path | None,
    *,
    input_timezone: str | None = None,
    output_timezone: str | None = None,
    format: str | None = None,
) -> TransformerConfig:
    """Load configuration and apply command line overrides on top of it."""
    try:
        config = ConfigLoader.load(config_file)
        overrides: dict[str, str] = {}
        if input_timezone:
            overrides["input_timezone"] = input_timezone
        if output_timezone:
            overrides["output_timezone"] = output_timezone
        if format:
            overrides["format"] = format
        return replace(config, **overrides) if overrides else config
    except (DateTimeTransformerError, ValueError) as e:
        raise click.UsageError(str(e)) from e


def build_transformer(
    config: TransformerConfig, format: str | None = None
) -> DateTimeToStringTransformer:
    try:
        if format is not None:
            config = replace(config, format=format)
        return config.create_transformer()
    except (DateTimeTransformerError, ValueError) as e:
        raise click.UsageError(str(e)) from e
