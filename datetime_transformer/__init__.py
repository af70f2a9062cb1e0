"""datetime-transformer package.

Converts between timezone-aware datetimes and strings written in a
configurable format pattern, with separate zones for stored values and for
displayed text.

Features:
- PHP ``date()`` style format patterns, rendered and strictly parsed
- Input/output time zone handling
- DataFrame column formatting and parsing
- ``datetime-transformer`` command line interface
"""

from importlib.metadata import PackageNotFoundError, version

try:  # pragma: no cover
    __version__ = version("datetime-transformer")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

from datetime_transformer.exceptions import (
    DateTimeTransformerError,
    InvalidTimezoneError,
    TransformationFailedError,
    UnexpectedTypeError,
)
from datetime_transformer.formats import DEFAULT_FORMAT, compile_pattern
from datetime_transformer.transformers import DateTimeToStringTransformer

__all__ = [
    "__version__",
    "DEFAULT_FORMAT",
    "compile_pattern",
    # Transformers
    "DateTimeToStringTransformer",
    # Errors
    "DateTimeTransformerError",
    "InvalidTimezoneError",
    "TransformationFailedError",
    "UnexpectedTypeError",
]
