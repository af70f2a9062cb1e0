"""Transforms between datetime values and formatted strings."""

from __future__ import annotations

from datetime import datetime

from ..exceptions import UnexpectedTypeError
from ..formats import DEFAULT_FORMAT, FormatPattern, compile_pattern
from .base import BaseDateTimeTransformer


class DateTimeToStringTransformer(BaseDateTimeTransformer):
    """Transforms a ``datetime`` into a string and back.

    ``transform`` renders the value in the output zone. ``reverse_transform``
    reads the wall time in the output zone (unless the text names its own
    zone) and returns the instant expressed in the input zone.

    Example:
        >>> transformer = DateTimeToStringTransformer("UTC", "Europe/Amsterdam", "Y-m-d H:i")
        >>> transformer.transform(datetime(2010, 2, 3, 16, 5, tzinfo=ZoneInfo("UTC")))
        '2010-02-03 17:05'
        >>> transformer.reverse_transform("2010-02-03 17:05")
        datetime.datetime(2010, 2, 3, 16, 5, tzinfo=zoneinfo.ZoneInfo(key='UTC'))
    """

    __slots__ = ("_pattern",)

    def __init__(
        self,
        input_timezone: str | None = None,
        output_timezone: str | None = None,
        format: str = DEFAULT_FORMAT,
    ) -> None:
        super().__init__(input_timezone, output_timezone)
        if not isinstance(format, str):
            raise UnexpectedTypeError(format, "str")
        self._pattern: FormatPattern = compile_pattern(format)

    @property
    def format(self) -> str:
        return self._pattern.pattern

    def transform(self, value: object) -> str:
        """Render a datetime in the output zone.

        Naive datetimes, and those whose tzinfo gives no UTC offset, are
        taken as wall time in the input zone.

        Args:
            value: A ``datetime`` or ``None``

        Returns:
            The formatted string, or ``""`` for ``None``

        Raises:
            UnexpectedTypeError: If value is not a ``datetime``
        """
        if value is None:
            return ""
        if not isinstance(value, datetime):
            raise UnexpectedTypeError(value, "datetime")

        if value.utcoffset() is None:
            value = value.replace(tzinfo=self.input_zone)
        return self._pattern.format(value.astimezone(self.output_zone))

    def reverse_transform(self, value: object) -> datetime | None:
        """Parse a string into a datetime expressed in the input zone.

        Args:
            value: A string, ``""`` or ``None``

        Returns:
            An aware ``datetime`` in the input zone, or ``None`` for empty input

        Raises:
            UnexpectedTypeError: If value is not a string
            TransformationFailedError: If the string does not match the format
                or names a date that does not exist
        """
        if value is None:
            return None
        if not isinstance(value, str):
            raise UnexpectedTypeError(value, "str")
        if value == "":
            return None

        parsed = self._pattern.parse(value, self.output_zone)
        return parsed.astimezone(self.input_zone)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(input_timezone={self.input_timezone!r}, "
            f"output_timezone={self.output_timezone!r}, format={self.format!r})"
        )
