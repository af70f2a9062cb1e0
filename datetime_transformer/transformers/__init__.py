"""Value transformers.

These convert single values between their model and view representations.
"""

from .base import (
    DEFAULT_TIMEZONE,
    BaseDateTimeTransformer,
    DataTransformerPort,
    resolve_timezone,
)
from .datetime_to_string import DateTimeToStringTransformer

__all__ = [
    "DEFAULT_TIMEZONE",
    "BaseDateTimeTransformer",
    "DataTransformerPort",
    "DateTimeToStringTransformer",
    "resolve_timezone",
]
