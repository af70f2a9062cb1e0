"""Base interface for DataFrame transformations.

Value transformers (see :mod:`datetime_transformer.transformers`) work on one
value at a time. The classes here lift them to whole DataFrames so that a
table of user-entered dates can be parsed, or a table of datetimes rendered,
with every failing cell reported instead of aborting at the first one.

Example:
    >>> from datetime_transformer.transformations import TransformationContext
    >>> from datetime_transformer.transformations.dates import DateTimeColumnParser
    >>>
    >>> parser = DateTimeColumnParser(["visit_date"])
    >>> context = TransformationContext(dataset="visits")
    >>> result = parser.transform(df, context)
    >>> if not result.success:
    ...     print(result.errors)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

import pandas as pd


def _empty_str_list() -> list[str]:
    return []


def _empty_metadata() -> dict[str, object]:
    return {}


@dataclass
class TransformationContext:
    """Context information for transformation operations.

    Attributes:
        dataset: Name of the table being transformed
        source_file: Path to source data file (optional)
        metadata: Additional metadata for transformer-specific settings
    """

    dataset: str
    source_file: str | None = None
    metadata: dict[str, object] = field(default_factory=_empty_metadata)


@dataclass
class TransformationResult:
    """Result of a transformation operation.

    Attributes:
        data: Transformed DataFrame
        applied: Whether transformation was applied
        message: Human-readable description of what was done
        warnings: Non-fatal issues
        errors: Values that could not be transformed
        metadata: Additional result metadata (row counts, columns touched)
    """

    data: pd.DataFrame
    applied: bool = True
    message: str = ""
    warnings: list[str] = field(default_factory=_empty_str_list)
    errors: list[str] = field(default_factory=_empty_str_list)
    metadata: dict[str, object] = field(default_factory=_empty_metadata)

    @property
    def success(self) -> bool:
        """Whether transformation completed without errors."""
        return self.applied and len(self.errors) == 0

    def add_warning(self, warning: str) -> None:
        self.warnings.append(warning)

    def add_error(self, error: str) -> None:
        self.errors.append(error)

    def summary(self) -> str:
        """Generate a summary string of the transformation result.

        Example:
            >>> print(result.summary())
            Transformation applied: Parsed 1 date/time column
            Errors (1): visit_date[3]: Unable to parse '2010-04-31' ...
        """
        lines: list[str] = []
        if self.message:
            status = "applied" if self.applied else "skipped"
            lines.append(f"Transformation {status}: {self.message}")

        if self.warnings:
            lines.append(f"Warnings ({len(self.warnings)}): {', '.join(self.warnings)}")

        if self.errors:
            lines.append(f"Errors ({len(self.errors)}): {', '.join(self.errors)}")

        return "\n".join(lines) if lines else "No transformation applied"


class TransformerPort(Protocol):
    """Protocol for DataFrame transformers.

    Structural: any class with ``can_transform`` and ``transform`` qualifies.
    Implementations should report bad values through
    ``TransformationResult.errors`` rather than raise.
    """

    def can_transform(self, df: pd.DataFrame, dataset: str) -> bool: ...

    def transform(
        self, df: pd.DataFrame, context: TransformationContext
    ) -> TransformationResult: ...


def is_transformer(obj: object) -> bool:
    """Check if an object implements the TransformerPort protocol."""
    can_transform = getattr(obj, "can_transform", None)
    transform = getattr(obj, "transform", None)
    return callable(can_transform) and callable(transform)
