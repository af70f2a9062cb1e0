"""Parses formatted string columns of a DataFrame into datetimes."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Literal

import pandas as pd

from ...exceptions import TransformationFailedError, UnexpectedTypeError
from ...infrastructure.logging import NullLogger
from ...pandas_utils import is_missing_scalar
from ...ports import LoggerPort
from ...transformers import DateTimeToStringTransformer
from ..base import TransformationContext, TransformationResult


class DateTimeColumnParser:
    """Transformer that applies ``DateTimeToStringTransformer.reverse_transform``.

    Parsed cells hold timezone-aware ``datetime`` objects in the transformer's
    input zone (column dtype ``object``). Empty and missing cells become
    ``None``. Every cell that fails is reported as ``"<column>[<index>]:
    <reason>"`` and set to ``None``; the remaining cells are still parsed.
    With ``errors="report"`` (default) failures go to
    ``TransformationResult.errors``; with ``errors="coerce"`` they go to
    ``warnings`` and the result still counts as a success.
    """

    def __init__(
        self,
        columns: Sequence[str],
        transformer: DateTimeToStringTransformer | None = None,
        logger: LoggerPort | None = None,
        errors: Literal["report", "coerce"] = "report",
    ) -> None:
        if errors not in ("report", "coerce"):
            raise ValueError(f"errors must be 'report' or 'coerce', got {errors!r}")
        self.columns = list(columns)
        self.errors = errors
        self.transformer = transformer or DateTimeToStringTransformer()
        self.logger = logger or NullLogger()

    def can_transform(self, df: pd.DataFrame, dataset: str) -> bool:
        _ = dataset
        return any(column in df.columns for column in self.columns)

    def transform(
        self, df: pd.DataFrame, context: TransformationContext
    ) -> TransformationResult:
        _ = context
        transformed_df = df.copy()
        processed: list[str] = []
        result = TransformationResult(data=transformed_df)
        report = result.add_warning if self.errors == "coerce" else result.add_error

        for column in self.columns:
            if column not in transformed_df.columns:
                continue
            parsed: list[datetime | None] = []
            failed = 0
            for index, raw_value in transformed_df[column].items():
                if is_missing_scalar(raw_value):
                    parsed.append(None)
                    continue
                try:
                    parsed.append(self.transformer.reverse_transform(raw_value))
                except (TransformationFailedError, UnexpectedTypeError) as exc:
                    report(f"{column}[{index}]: {exc}")
                    parsed.append(None)
                    failed += 1
            transformed_df[column] = pd.Series(
                parsed, index=transformed_df.index, dtype="object"
            )
            processed.append(column)
            self.logger.log_column_processed(column, len(parsed), failed)

        if not processed:
            result.applied = False
            result.message = "No date/time columns found"
            return result

        result.message = (
            f"Parsed {len(processed)} date/time column"
            f"{'s' if len(processed) > 1 else ''} with {self.transformer.format!r}"
        )
        result.metadata = {
            "columns_processed": processed,
            "failed_values": len(result.errors) + len(result.warnings),
            "input_rows": len(df),
            "output_rows": len(transformed_df),
        }
        return result
