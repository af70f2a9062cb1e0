"""Convert command - Rewrite date/time columns of a CSV file in another format."""

from __future__ import annotations

from pathlib import Path
from typing import Literal

import click
import pandas as pd
from rich.markup import escape

from ...transformations import TransformationContext, TransformationPipeline
from ...transformations.dates import DateTimeColumnFormatter, DateTimeColumnParser
from ..helpers import build_transformer, config_options, load_config
from ..logging_config import create_logger


@click.command()
@click.argument("input_file", type=click.Path(exists=True, path_type=Path))
@click.option(
    "-c",
    "--column",
    "columns",
    multiple=True,
    required=True,
    help="Column to convert (repeatable)",
)
@click.option("--from-format", required=True, help="Pattern the column is written in")
@click.option("--to-format", required=True, help="Pattern to rewrite the column in")
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output CSV file (default: print to stdout)",
)
@click.option(
    "--fail-safe/--strict",
    default=False,
    show_default=True,
    help="Leave values that cannot be converted empty instead of failing",
)
@config_options
def convert_command(
    input_file: Path,
    columns: tuple[str, ...],
    from_format: str,
    to_format: str,
    output: Path | None,
    fail_safe: bool,
    config_file: Path | None,
    input_timezone: str | None,
    output_timezone: str | None,
    verbose: int,
) -> None:
    """Convert date/time COLUMNS of INPUT_FILE between two patterns.

    Values are parsed with --from-format and rendered with --to-format,
    both as wall time in the output time zone.

    Examples:

    \b
        datetime-transformer convert visits.csv -c VISITDT --from-format d/m/Y --to-format Y-m-d
    """
    logger = create_logger(verbosity=verbose)
    config = load_config(
        config_file, input_timezone=input_timezone, output_timezone=output_timezone
    )
    reader = build_transformer(config, from_format)
    writer = build_transformer(config, to_format)

    frame = pd.read_csv(input_file, dtype=str, keep_default_na=False)
    missing = [column for column in columns if column not in frame.columns]
    if missing:
        raise click.BadParameter(
            f"Columns not found in {input_file.name}: {', '.join(missing)}",
            param_hint="--column",
        )
    logger.verbose(f"Loaded {len(frame):,} rows from {input_file.name}")

    on_error: Literal["report", "coerce"] = "coerce" if fail_safe else "report"
    pipeline = TransformationPipeline(logger=logger)
    pipeline.add_transformer(DateTimeColumnParser(columns, reader, logger, on_error))
    pipeline.add_transformer(DateTimeColumnFormatter(columns, writer, logger, on_error))
    result = pipeline.execute(
        frame, TransformationContext(dataset=input_file.stem, source_file=str(input_file))
    )

    logger.verbose(escape(result.summary()))
    for warning in result.warnings:
        logger.warning(escape(warning))
    for error in result.errors:
        logger.error(escape(error))
    logger.log_final_stats()
    if result.errors:
        raise click.ClickException(
            f"{len(result.errors)} value(s) could not be converted"
        )

    if output is None:
        click.echo(result.data.to_csv(index=False), nl=False)
    else:
        result.data.to_csv(output, index=False)
        logger.success(f"Wrote {len(result.data):,} rows to {output}")
