"""Parse command - Read a formatted string back into an ISO 8601 datetime."""

from __future__ import annotations

from pathlib import Path

import click

from ...exceptions import DateTimeTransformerError
from ..helpers import build_transformer, config_options, load_config
from ..logging_config import create_logger


@click.command()
@click.argument("text")
@click.option(
    "-f",
    "--format",
    "pattern",
    help="Format pattern TEXT is written in (default from config, else 'Y-m-d H:i:s')",
)
@config_options
def parse_command(
    text: str,
    pattern: str | None,
    config_file: Path | None,
    input_timezone: str | None,
    output_timezone: str | None,
    verbose: int,
) -> None:
    """Parse TEXT and print it as ISO 8601 in the input time zone.

    TEXT is read as wall time in the output time zone unless the pattern
    contains a zone token. Empty TEXT prints an empty line.

    Examples:

    \b
        datetime-transformer parse '03/02/2010' -f 'd/m/Y'
        datetime-transformer parse '2010-02-03 16:05:06' --output-timezone Asia/Hong_Kong
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
        result = transformer.reverse_transform(text)
    except DateTimeTransformerError as e:
        logger.error(str(e))
        raise click.ClickException(str(e)) from e

    logger.log_conversion("reverse transform", text, result)
    click.echo("" if result is None else result.isoformat())
