"""Base interface for value transformers.

A value transformer converts a model value (what the application stores) to a
view value (what the user reads and edits) with ``transform`` and back with
``reverse_transform``.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..exceptions import InvalidTimezoneError, UnexpectedTypeError

DEFAULT_TIMEZONE = "UTC"


@runtime_checkable
class DataTransformerPort(Protocol):
    """Protocol for bidirectional value transformers.

    Methods:
        transform: Model value -> view value
        reverse_transform: View value -> model value
    """

    def transform(self, value: object) -> object: ...

    def reverse_transform(self, value: object) -> object: ...


def resolve_timezone(name: object) -> ZoneInfo:
    """Resolve an IANA zone identifier.

    Args:
        name: Zone identifier such as ``"Europe/Amsterdam"``

    Returns:
        The matching ``ZoneInfo``

    Raises:
        UnexpectedTypeError: If ``name`` is not a string
        InvalidTimezoneError: If no zone with that identifier exists
    """
    if not isinstance(name, str):
        raise UnexpectedTypeError(name, "str")
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise InvalidTimezoneError(name) from exc


class BaseDateTimeTransformer:
    """Shared time zone handling for date/time transformers.

    ``input_timezone`` is the zone of model values: values returned by
    ``reverse_transform`` are expressed in it. ``output_timezone`` is the zone
    of view values: ``transform`` renders in it.
    """

    __slots__ = ("_input_timezone", "_input_zone", "_output_timezone", "_output_zone")

    def __init__(
        self,
        input_timezone: str | None = None,
        output_timezone: str | None = None,
    ) -> None:
        super().__init__()
        self._input_timezone = (
            DEFAULT_TIMEZONE if input_timezone is None else input_timezone
        )
        self._output_timezone = (
            DEFAULT_TIMEZONE if output_timezone is None else output_timezone
        )
        self._input_zone = resolve_timezone(self._input_timezone)
        self._output_zone = resolve_timezone(self._output_timezone)

    @property
    def input_timezone(self) -> str:
        return self._input_timezone

    @property
    def output_timezone(self) -> str:
        return self._output_timezone

    @property
    def input_zone(self) -> ZoneInfo:
        return self._input_zone

    @property
    def output_zone(self) -> ZoneInfo:
        return self._output_zone
