"""Transformation framework.

This module provides a pluggable framework for applying value transformers
to whole DataFrames.
"""

from .base import (
    TransformationContext,
    TransformationResult,
    TransformerPort,
    is_transformer,
)
from .pipeline import TransformationPipeline

__all__ = [
    "TransformationContext",
    "TransformationPipeline",
    "TransformationResult",
    "TransformerPort",
    "is_transformer",
]
