"""Renders datetime columns of a DataFrame as formatted strings."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Literal

import pandas as pd

from ...exceptions import UnexpectedTypeError
from ...infrastructure.logging import NullLogger
from ...pandas_utils import is_missing_scalar
from ...ports import LoggerPort
from ...transformers import DateTimeToStringTransformer
from ..base import TransformationContext, TransformationResult


class DateTimeColumnFormatter:
    """Transformer that applies ``DateTimeToStringTransformer.transform`` per cell.

    Missing cells (``None``, ``NaT``, ``NaN``) become ``""``. Cells that are
    not datetimes are left empty and reported in
    ``TransformationResult.errors``, or in ``warnings`` when
    ``errors="coerce"``.

    Example:
        >>> formatter = DateTimeColumnFormatter(
        ...     ["created_at"],
        ...     DateTimeToStringTransformer("UTC", "Europe/Amsterdam", "d-m-Y H:i"),
        ... )
        >>> result = formatter.transform(df, TransformationContext(dataset="orders"))
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
            rendered: list[str] = []
            failed = 0
            for index, raw_value in transformed_df[column].items():
                if is_missing_scalar(raw_value):
                    rendered.append(self.transformer.transform(None))
                    continue
                try:
                    rendered.append(self.transformer.transform(raw_value))
                except UnexpectedTypeError as exc:
                    report(f"{column}[{index}]: {exc}")
                    rendered.append("")
                    failed += 1
            transformed_df[column] = pd.Series(
                rendered, index=transformed_df.index, dtype="object"
            )
            processed.append(column)
            self.logger.log_column_processed(column, len(rendered), failed)

        if not processed:
            result.applied = False
            result.message = "No date/time columns found"
            return result

        result.message = (
            f"Formatted {len(processed)} date/time column"
            f"{'s' if len(processed) > 1 else ''} with {self.transformer.format!r}"
        )
        result.metadata = {
            "columns_processed": processed,
            "failed_values": len(result.errors) + len(result.warnings),
            "input_rows": len(df),
            "output_rows": len(transformed_df),
        }
        return result
