"""Transformation pipeline for composing DataFrame transformers."""

from __future__ import annotations

from typing import Any

import pandas as pd

from ..exceptions import DateTimeTransformerError
from ..infrastructure.logging import NullLogger
from ..ports import LoggerPort
from .base import (
    TransformationContext,
    TransformationResult,
    TransformerPort,
    is_transformer,
)


class TransformationPipeline:
    """Executes transformers in sequence, feeding each the previous output.

    Transformers whose ``can_transform`` returns False are skipped. When a
    transformer reports errors (or raises), the pipeline stops unless
    ``fail_safe`` is set, in which case the failed step's output is discarded
    and execution continues with the data as it was before that step.

    Example:
        >>> pipeline = TransformationPipeline()
        >>> pipeline.add_transformer(DateTimeColumnParser(["start"]))
        >>> result = pipeline.execute(df, TransformationContext(dataset="visits"))
    """

    def __init__(self, fail_safe: bool = False, logger: LoggerPort | None = None):
        self.transformers: list[TransformerPort] = []
        self.fail_safe = fail_safe
        self.logger = logger or NullLogger()

    def add_transformer(self, transformer: TransformerPort) -> TransformationPipeline:
        """Append a transformer; returns self for chaining.

        Raises:
            TypeError: If the object lacks ``can_transform`` or ``transform``
        """
        if not is_transformer(transformer):
            raise TypeError(
                f"{type(transformer).__name__} does not implement TransformerPort"
            )
        self.transformers.append(transformer)
        return self

    def execute(
        self, df: pd.DataFrame, context: TransformationContext
    ) -> TransformationResult:
        if not self.transformers:
            return TransformationResult(
                data=df,
                applied=False,
                message="Pipeline is empty (no transformers registered)",
            )

        current_data = df
        applied_transformers: list[dict[str, Any]] = []
        skipped_transformers: list[str] = []
        all_warnings: list[str] = []
        all_errors: list[str] = []

        def stopped(name: str, message: str) -> TransformationResult:
            self.logger.error(message)
            return TransformationResult(
                data=current_data,
                applied=True,
                message=message,
                warnings=all_warnings,
                errors=all_errors,
                metadata={
                    "input_rows": len(df),
                    "output_rows": len(current_data),
                    "applied_transformers": applied_transformers,
                    "skipped_transformers": skipped_transformers,
                    "stopped_at": name,
                },
            )

        for transformer in self.transformers:
            name = transformer.__class__.__name__

            if not transformer.can_transform(current_data, context.dataset):
                skipped_transformers.append(name)
                self.logger.debug(f"Skipped {name} for {context.dataset}")
                continue

            try:
                result = transformer.transform(current_data, context)
            except (DateTimeTransformerError, KeyError, ValueError, TypeError) as e:
                all_errors.append(f"{name}: Unexpected error: {e}")
                if not self.fail_safe:
                    return stopped(name, f"Pipeline stopped: {name} raised exception")
                all_warnings.append(
                    f"{name}: Caught exception, continuing (fail-safe mode)"
                )
                continue

            if not result.applied:
                skipped_transformers.append(name)
                continue

            applied_transformers.append(
                {
                    "name": name,
                    "input_rows": len(current_data),
                    "output_rows": len(result.data),
                    "message": result.message,
                    "metadata": result.metadata,
                }
            )
            all_warnings.extend(f"{name}: {w}" for w in result.warnings)
            all_errors.extend(f"{name}: {e}" for e in result.errors)

            if result.success:
                current_data = result.data
                self.logger.verbose(f"{name}: {result.message}")
            elif self.fail_safe:
                all_warnings.append(
                    f"{name}: Transformation failed but continuing (fail-safe mode)"
                )
            else:
                return stopped(name, f"Pipeline stopped: {name} failed")

        if not applied_transformers:
            message = "No transformers were applicable"
        else:
            names = ", ".join(t["name"] for t in applied_transformers)
            count = len(applied_transformers)
            message = f"Applied {count} transformer{'s' if count > 1 else ''}: {names}"

        return TransformationResult(
            data=current_data,
            applied=len(applied_transformers) > 0,
            message=message,
            warnings=all_warnings,
            errors=all_errors,
            metadata={
                "input_rows": len(df),
                "output_rows": len(current_data),
                "applied_transformers": applied_transformers,
                "skipped_transformers": skipped_transformers,
                "transformers_count": len(self.transformers),
            },
        )
