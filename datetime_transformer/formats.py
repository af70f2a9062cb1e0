"""Date format patterns.

Patterns use the PHP ``date()`` token alphabet, e.g. ``"Y-m-d H:i:s"``. A
backslash escapes the following character; every character that is not a
token is copied (or expected) literally.

Rendering tokens:
    d j         day of month, zero padded / plain
    D l         weekday name, abbreviated / full
    N w         ISO weekday (1-7) / weekday (0 = Sunday)
    S           English ordinal suffix for the day of month
    z           day of year, starting at 0
    W o         ISO-8601 week number / week-numbering year
    F M         month name, full / abbreviated
    m n         month number, zero padded / plain
    t L         days in month / leap year flag
    Y y         four digit year / two digit year
    a A         lowercase / uppercase meridiem
    B           Swatch internet time
    g G h H     hour: 12h plain, 24h plain, 12h padded, 24h padded
    i s         minutes / seconds
    u v         microseconds / milliseconds
    e T         zone identifier / abbreviation
    I Z         DST flag / UTC offset in seconds
    O P p       UTC offset as +0200 / +02:00 / Z-or-+02:00
    c r         ISO-8601 / RFC 2822 full date
    U           seconds since the Unix epoch

Parsing is strict: the whole input must be consumed, and components must
form an existing calendar date and a valid time of day. Components that the
pattern does not contain default to 1970-01-01 00:00:00.000000.
"""

from __future__ import annotations

import calendar
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone, tzinfo
from functools import lru_cache
import re
from typing import TypeAlias
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .exceptions import TransformationFailedError

DEFAULT_FORMAT = "Y-m-d H:i:s"

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

DAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

Renderer: TypeAlias = Callable[[datetime], str]


def _ordinal_suffix(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


def _utc_offset_seconds(value: datetime) -> int:
    offset = value.utcoffset()
    return 0 if offset is None else int(offset.total_seconds())


def _format_offset(value: datetime, separator: str) -> str:
    seconds = _utc_offset_seconds(value)
    sign = "-" if seconds < 0 else "+"
    hours, remainder = divmod(abs(seconds), 3600)
    return f"{sign}{hours:02d}{separator}{remainder // 60:02d}"


def _zone_identifier(value: datetime) -> str:
    if isinstance(value.tzinfo, ZoneInfo):
        return value.tzinfo.key
    if value.tzname() == "UTC":
        return "UTC"
    return _format_offset(value, ":")


def _zone_abbreviation(value: datetime) -> str:
    name = value.tzname()
    if name is None or name[0] in "+-" or (name.startswith("UTC") and name != "UTC"):
        return _format_offset(value, ":")
    return name


def _swatch_beat(value: datetime) -> str:
    utc = value.astimezone(timezone.utc)
    seconds = utc.hour * 3600 + utc.minute * 60 + utc.second + 3600
    return f"{(seconds * 10 // 864) % 1000:03d}"


def _epoch_seconds(value: datetime) -> int:
    return (value - EPOCH) // timedelta(seconds=1)


_RENDERERS: dict[str, Renderer] = {
    "d": lambda v: f"{v.day:02d}",
    "D": lambda v: DAY_NAMES[v.weekday()][:3],
    "j": lambda v: str(v.day),
    "l": lambda v: DAY_NAMES[v.weekday()],
    "N": lambda v: str(v.isoweekday()),
    "S": lambda v: _ordinal_suffix(v.day),
    "w": lambda v: str(v.isoweekday() % 7),
    "z": lambda v: str(v.timetuple().tm_yday - 1),
    "W": lambda v: f"{v.isocalendar().week:02d}",
    "F": lambda v: MONTH_NAMES[v.month - 1],
    "m": lambda v: f"{v.month:02d}",
    "M": lambda v: MONTH_NAMES[v.month - 1][:3],
    "n": lambda v: str(v.month),
    "t": lambda v: str(calendar.monthrange(v.year, v.month)[1]),
    "L": lambda v: "1" if calendar.isleap(v.year) else "0",
    "o": lambda v: str(v.isocalendar().year),
    "Y": lambda v: f"{v.year:04d}",
    "y": lambda v: f"{v.year % 100:02d}",
    "a": lambda v: "am" if v.hour < 12 else "pm",
    "A": lambda v: "AM" if v.hour < 12 else "PM",
    "B": _swatch_beat,
    "g": lambda v: str(v.hour % 12 or 12),
    "G": lambda v: str(v.hour),
    "h": lambda v: f"{v.hour % 12 or 12:02d}",
    "H": lambda v: f"{v.hour:02d}",
    "i": lambda v: f"{v.minute:02d}",
    "s": lambda v: f"{v.second:02d}",
    "u": lambda v: f"{v.microsecond:06d}",
    "v": lambda v: f"{v.microsecond // 1000:03d}",
    "e": _zone_identifier,
    "I": lambda v: "1" if v.dst() else "0",
    "O": lambda v: _format_offset(v, ""),
    "P": lambda v: _format_offset(v, ":"),
    "p": lambda v: "Z" if _utc_offset_seconds(v) == 0 else _format_offset(v, ":"),
    "T": _zone_abbreviation,
    "Z": lambda v: str(_utc_offset_seconds(v)),
    "c": lambda v: compile_pattern("Y-m-d\\TH:i:sP").format(v),
    "r": lambda v: compile_pattern("D, d M Y H:i:s O").format(v),
    "U": lambda v: str(_epoch_seconds(v)),
}


@dataclass(slots=True)
class _ParsedFields:
    year: int | None = None
    month: int | None = None
    day: int | None = None
    day_of_year: int | None = None
    hour: int | None = None
    hour12: int | None = None
    meridiem: str | None = None
    minute: int | None = None
    second: int | None = None
    microsecond: int | None = None
    zone: tzinfo | None = None
    zone_name: str | None = None
    timestamp: int | None = None

    def resolve(self, default_zone: tzinfo) -> datetime:
        microsecond = self.microsecond or 0
        if self.timestamp is not None:
            return EPOCH + timedelta(seconds=self.timestamp, microseconds=microsecond)

        year = 1970 if self.year is None else self.year
        month = 1 if self.month is None else self.month
        day = 1 if self.day is None else self.day
        if self.day_of_year is not None:
            days_in_year = 366 if calendar.isleap(year) else 365
            if self.day_of_year >= days_in_year:
                raise ValueError(
                    f"day of year {self.day_of_year} is out of range for {year}"
                )
            resolved = date(year, 1, 1) + timedelta(days=self.day_of_year)
            if (self.month is not None and self.month != resolved.month) or (
                self.day is not None and self.day != resolved.day
            ):
                raise ValueError("day of year does not match month and day")
            month, day = resolved.month, resolved.day

        if self.hour12 is not None:
            if not 1 <= self.hour12 <= 12:
                raise ValueError(f"12-hour value {self.hour12} is out of range")
            hour = self.hour12
            if self.meridiem is not None:
                hour = self.hour12 % 12 + (12 if self.meridiem == "pm" else 0)
        else:
            hour = 0 if self.hour is None else self.hour

        wall = datetime(
            year,
            month,
            day,
            hour,
            0 if self.minute is None else self.minute,
            0 if self.second is None else self.second,
            microsecond,
            tzinfo=self.zone or default_zone,
        )
        if self.zone is None and self.zone_name is not None:
            return _resolve_zone_name(wall, self.zone_name)
        return wall


def _resolve_zone_name(wall: datetime, name: str) -> datetime:
    """Attach the zone written as ``name`` to a wall time.

    An abbreviation such as ``HKT`` or ``EDT`` is accepted when the wall
    time's own zone uses it at that moment; ``fold`` picks the matching
    side of a repeated hour. Anything else must be UTC, an offset or an
    IANA identifier.
    """
    for candidate in (wall, wall.replace(fold=1)):
        if (candidate.tzname() or "").upper() == name.upper():
            return candidate
    return wall.replace(tzinfo=parse_timezone(name), fold=0)


def _name_alternatives(names: tuple[str, ...]) -> str:
    return "|".join([*names, *(name[:3] for name in names)])


def _month_from_name(text: str) -> int:
    prefix = text[:3].lower()
    for index, name in enumerate(MONTH_NAMES, start=1):
        if name[:3].lower() == prefix:
            return index
    raise ValueError(f"Unknown month name {text!r}")


def _expand_two_digit_year(text: str) -> int:
    value = int(text)
    return value + (1900 if value >= 70 else 2000)


def parse_timezone(text: str) -> tzinfo:
    """Resolve a zone written in text: ``Z``, an offset, or an IANA name."""
    if text.upper() in ("Z", "UTC", "GMT"):
        return timezone.utc
    if text[0] in "+-":
        digits = text[1:].replace(":", "")
        offset = timedelta(hours=int(digits[:2]), minutes=int(digits[2:]))
        return timezone(-offset if text[0] == "-" else offset)
    try:
        return ZoneInfo(text)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ValueError(f"Unknown time zone {text!r}") from exc


def _assign(name: str, convert: Callable[[str], object] = int):
    def apply(fields: _ParsedFields, text: str) -> None:
        setattr(fields, name, convert(text))

    return apply


def _ignore(fields: _ParsedFields, text: str) -> None:
    _ = fields, text


@dataclass(frozen=True, slots=True)
class _TokenParser:
    regex: re.Pattern[str]
    apply: Callable[[_ParsedFields, str], None]


def _parser(
    expression: str,
    apply: Callable[[_ParsedFields, str], None],
    flags: int = 0,
) -> _TokenParser:
    return _TokenParser(re.compile(expression, flags), apply)


_ZONE_EXPRESSION = r"[A-Za-z][A-Za-z0-9_+\-]*(?:/[A-Za-z0-9_+\-]+)*|[+-]\d{2}:?\d{2}"

_PARSERS: dict[str, _TokenParser] = {
    "d": _parser(r"\d{1,2}", _assign("day")),
    "j": _parser(r"\d{1,2}", _assign("day")),
    "D": _parser(_name_alternatives(DAY_NAMES), _ignore, re.IGNORECASE),
    "l": _parser(_name_alternatives(DAY_NAMES), _ignore, re.IGNORECASE),
    "S": _parser(r"st|nd|rd|th", _ignore, re.IGNORECASE),
    "z": _parser(r"\d{1,3}", _assign("day_of_year")),
    "F": _parser(
        _name_alternatives(MONTH_NAMES), _assign("month", _month_from_name), re.IGNORECASE
    ),
    "M": _parser(
        _name_alternatives(MONTH_NAMES), _assign("month", _month_from_name), re.IGNORECASE
    ),
    "m": _parser(r"\d{1,2}", _assign("month")),
    "n": _parser(r"\d{1,2}", _assign("month")),
    "Y": _parser(r"\d{1,4}", _assign("year")),
    "y": _parser(r"\d{2}", _assign("year", _expand_two_digit_year)),
    "a": _parser(r"am|pm", _assign("meridiem", str.lower), re.IGNORECASE),
    "A": _parser(r"am|pm", _assign("meridiem", str.lower), re.IGNORECASE),
    "g": _parser(r"\d{1,2}", _assign("hour12")),
    "h": _parser(r"\d{1,2}", _assign("hour12")),
    "G": _parser(r"\d{1,2}", _assign("hour")),
    "H": _parser(r"\d{1,2}", _assign("hour")),
    "i": _parser(r"\d{2}", _assign("minute")),
    "s": _parser(r"\d{2}", _assign("second")),
    "u": _parser(r"\d{1,6}", _assign("microsecond", lambda t: int(t.ljust(6, "0")))),
    "v": _parser(r"\d{3}", _assign("microsecond", lambda t: int(t) * 1000)),
    "e": _parser(_ZONE_EXPRESSION, _assign("zone", parse_timezone)),
    "T": _parser(_ZONE_EXPRESSION, _assign("zone_name", str)),
    "O": _parser(r"[+-]\d{2}:?\d{2}", _assign("zone", parse_timezone)),
    "P": _parser(r"[+-]\d{2}:?\d{2}", _assign("zone", parse_timezone)),
    "p": _parser(r"Z|[+-]\d{2}:?\d{2}", _assign("zone", parse_timezone)),
    "U": _parser(r"[+-]?\d+", _assign("timestamp")),
}


@dataclass(frozen=True, slots=True)
class PatternItem:
    text: str
    literal: bool


@dataclass(frozen=True, slots=True)
class FormatPattern:
    """A compiled date format pattern.

    Use :func:`compile_pattern` rather than instantiating directly; it caches
    compiled patterns.

    Example:
        >>> pattern = compile_pattern("Y-m-d")
        >>> pattern.format(datetime(2010, 2, 3, tzinfo=timezone.utc))
        '2010-02-03'
    """

    pattern: str
    items: tuple[PatternItem, ...]

    @property
    def tokens(self) -> tuple[str, ...]:
        return tuple(item.text for item in self.items if not item.literal)

    @property
    def unparseable_tokens(self) -> tuple[str, ...]:
        """Tokens that can be rendered but not read back."""
        return tuple(token for token in self.tokens if token not in _PARSERS)

    def format(self, value: datetime) -> str:
        return "".join(
            item.text if item.literal else _RENDERERS[item.text](value)
            for item in self.items
        )

    def parse(self, text: str, default_zone: tzinfo) -> datetime:
        """Parse ``text`` into an aware datetime.

        The wall time is interpreted in ``default_zone`` unless the text
        carries its own zone (``e T O P p``) or is an epoch timestamp (``U``).
        ``T`` also accepts the abbreviation ``default_zone`` uses at the
        parsed wall time.

        Raises:
            TransformationFailedError: If the text does not match the pattern
                or describes a date or time that does not exist.
        """
        fields = _ParsedFields()
        position = 0
        for item in self.items:
            if item.literal:
                if not text.startswith(item.text, position):
                    raise self._failure(
                        text, f"Expected {item.text!r} at position {position}"
                    )
                position += len(item.text)
                continue

            parser = _PARSERS.get(item.text)
            if parser is None:
                raise self._failure(
                    text, f"Format character {item.text!r} cannot be parsed"
                )
            match = parser.regex.match(text, position)
            if match is None:
                raise self._failure(
                    text,
                    f"Unexpected data for format character {item.text!r} "
                    f"at position {position}",
                )
            try:
                parser.apply(fields, match.group())
            except ValueError as exc:
                raise self._failure(text, str(exc)) from exc
            position = match.end()

        if position != len(text):
            raise self._failure(text, f"Trailing data at position {position}")

        try:
            return fields.resolve(default_zone)
        except (ValueError, OverflowError) as exc:
            raise self._failure(text, f"The parsed date was invalid: {exc}") from exc

    def _failure(self, text: str, reason: str) -> TransformationFailedError:
        return TransformationFailedError(
            f"Unable to parse {text!r} with format {self.pattern!r}: {reason}",
            value=text,
            pattern=self.pattern,
        )


@lru_cache(maxsize=128)
def compile_pattern(pattern: str) -> FormatPattern:
    """Split a pattern into tokens and literal runs."""
    items: list[PatternItem] = []
    literal: list[str] = []
    chars = iter(pattern)
    for char in chars:
        if char == "\\":
            literal.append(next(chars, "\\"))
        elif char in _RENDERERS:
            if literal:
                items.append(PatternItem("".join(literal), literal=True))
                literal = []
            items.append(PatternItem(char, literal=False))
        else:
            literal.append(char)
    if literal:
        items.append(PatternItem("".join(literal), literal=True))
    return FormatPattern(pattern, tuple(items))
