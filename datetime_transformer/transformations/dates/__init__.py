"""Date/time column transformers.

This module lifts the string/datetime value transformer to DataFrame columns:
- Rendering datetime columns as formatted strings
- Parsing formatted string columns into datetimes
"""

from .column_formatter import DateTimeColumnFormatter
from .column_parser import DateTimeColumnParser

__all__ = [
    "DateTimeColumnFormatter",
    "DateTimeColumnParser",
]
