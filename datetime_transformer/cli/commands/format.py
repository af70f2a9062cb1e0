"""Format command - Render an ISO 8601 datetime with a format pattern."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import click

from ...exceptions import DateTimeTransformerError
from ..helpers import build_transformer, config_options, load_config
from ..logging_config import create_logger


@click.command()
@click.argument("value")
@click.option(
    "-f",
    "--format",
    "pattern",
    help="Format pattern, e.g. 'd/m/Y H:i' (default from config, else 'Y-m-d H:i:s')",
)
@config_options
def format_command(
    value: str,
    pattern: str | None,
    config_file: Path | None,
    input_timezone: str | None,
    output_timezone: str | None,
    verbose: int,
) -> None:
    """Render VALUE, an ISO 8601 datetime, in the output time zone.

    A VALUE without an offset is taken as wall time in the input time zone.

    Examples:

    \b
        datetime-transformer format 2010-02-03T16:05:06Z -f 'D, d M Y'
        datetime-transformer format 2010-02-03T16:05:06 --output-timezone Asia/Hong_Kong
    """
    logger = create_logger(verbosity=verbose)
    config = load_config(
        config_file,
        input_timezone=input_timezone,
        output_timezone=output_timezone,
        format=pattern,
    )
    transformer = build_transformer(config)
    logger.debug(f"Using {transformer!r}")

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError as e:
        raise click.BadParameter(
            f"{value!r} is not an ISO 8601 datetime", param_hint="VALUE"
        ) from e

    try:
        result = transformer.transform(parsed)
    except DateTimeTransformerError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    logger.log_conversion("transform", parsed, result)
    click.echo(result)
