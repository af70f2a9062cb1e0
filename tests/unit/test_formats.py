"""Unit tests for format pattern compilation, rendering and parsing."""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from datetime_transformer.exceptions import TransformationFailedError
from datetime_transformer.formats import compile_pattern, parse_timezone

UTC = ZoneInfo("UTC")
NEW_YORK = ZoneInfo("America/New_York")
HONG_KONG = ZoneInfo("Asia/Hong_Kong")

# Wednesday 3 February 2010, 16:05:06.123456 UTC
SAMPLE = datetime(2010, 2, 3, 16, 5, 6, 123456, tzinfo=UTC)


class TestCompilePattern:
    """Tests for splitting patterns into tokens and literals."""

    def test_tokens_and_literals(self):
        pattern = compile_pattern("Y-m-d H:i:s")

        assert pattern.tokens == ("Y", "m", "d", "H", "i", "s")
        assert [item.text for item in pattern.items if item.literal] == [
            "-",
            "-",
            " ",
            ":",
            ":",
        ]

    def test_backslash_escapes_token(self):
        pattern = compile_pattern("Y-m-d\\TH:i")

        assert "T" not in pattern.tokens
        assert pattern.format(SAMPLE) == "2010-02-03T16:05"

    def test_trailing_backslash_is_literal(self):
        assert compile_pattern("Y\\").format(SAMPLE) == "2010\\"

    def test_compiled_patterns_are_cached(self):
        assert compile_pattern("d/m/Y") is compile_pattern("d/m/Y")

    def test_unparseable_tokens(self):
        assert compile_pattern("o-\\WW N").unparseable_tokens == ("o", "W", "N")
        assert compile_pattern("Y-m-d").unparseable_tokens == ()


class TestRender:
    """Tests for rendering single tokens."""

    @pytest.mark.parametrize(
        ("token", "expected"),
        [
            ("d", "03"),
            ("D", "Wed"),
            ("j", "3"),
            ("l", "Wednesday"),
            ("N", "3"),
            ("S", "rd"),
            ("w", "3"),
            ("z", "33"),
            ("W", "05"),
            ("F", "February"),
            ("m", "02"),
            ("M", "Feb"),
            ("n", "2"),
            ("t", "28"),
            ("L", "0"),
            ("o", "2010"),
            ("Y", "2010"),
            ("y", "10"),
            ("a", "pm"),
            ("A", "PM"),
            ("B", "711"),
            ("g", "4"),
            ("G", "16"),
            ("h", "04"),
            ("H", "16"),
            ("i", "05"),
            ("s", "06"),
            ("u", "123456"),
            ("v", "123"),
            ("e", "UTC"),
            ("I", "0"),
            ("O", "+0000"),
            ("P", "+00:00"),
            ("p", "Z"),
            ("Z", "0"),
            ("c", "2010-02-03T16:05:06+00:00"),
            ("r", "Wed, 03 Feb 2010 16:05:06 +0000"),
            ("U", "1265213106"),
        ],
    )
    def test_token(self, token, expected):
        assert compile_pattern(token).format(SAMPLE) == expected

    @pytest.mark.parametrize(
        ("day", "suffix"),
        [
            (1, "st"),
            (2, "nd"),
            (3, "rd"),
            (4, "th"),
            (11, "th"),
            (12, "th"),
            (13, "th"),
            (21, "st"),
            (22, "nd"),
            (23, "rd"),
            (31, "st"),
        ],
    )
    def test_ordinal_suffix(self, day, suffix):
        assert compile_pattern("S").format(datetime(2010, 1, day, tzinfo=UTC)) == suffix

    def test_midnight_and_noon_in_twelve_hour_clock(self):
        pattern = compile_pattern("g a")

        assert pattern.format(datetime(2010, 1, 1, 0, tzinfo=UTC)) == "12 am"
        assert pattern.format(datetime(2010, 1, 1, 12, tzinfo=UTC)) == "12 pm"

    def test_zone_tokens_for_named_zone(self):
        winter = datetime(2010, 2, 3, 11, 5, 6, tzinfo=NEW_YORK)
        summer = datetime(2010, 7, 3, 11, 5, 6, tzinfo=NEW_YORK)
        pattern = compile_pattern("e T O P p Z I")

        assert pattern.format(winter) == "America/New_York EST -0500 -05:00 -05:00 -18000 0"
        assert pattern.format(summer) == "America/New_York EDT -0400 -04:00 -04:00 -14400 1"

    def test_zone_tokens_for_fixed_offset(self):
        value = datetime(2010, 2, 3, 16, 5, tzinfo=timezone(timedelta(hours=5, minutes=30)))

        assert compile_pattern("e|T|O").format(value) == "+05:30|+05:30|+0530"

    def test_leap_year_tokens(self):
        value = datetime(2012, 2, 3, tzinfo=UTC)

        assert compile_pattern("L t").format(value) == "1 29"

    def test_iso_week_year_differs_from_calendar_year(self):
        value = datetime(2010, 1, 1, tzinfo=UTC)

        assert compile_pattern("o-W Y").format(value) == "2009-53 2010"

    def test_epoch_before_1970(self):
        value = datetime(1969, 12, 31, 23, 59, 59, tzinfo=UTC)

        assert compile_pattern("U").format(value) == "-1"

    def test_year_is_padded_to_four_digits(self):
        assert compile_pattern("Y").format(datetime(999, 1, 1, tzinfo=UTC)) == "0999"


class TestParse:
    """Tests for strict parsing."""

    def test_missing_components_default_to_epoch_start(self):
        assert compile_pattern("i").parse("05", UTC) == datetime(1970, 1, 1, 0, 5, tzinfo=UTC)

    def test_wall_time_uses_default_zone(self):
        result = compile_pattern("Y-m-d H:i").parse("2010-02-03 16:05", HONG_KONG)

        assert result.tzinfo is HONG_KONG
        assert result == datetime(2010, 2, 3, 8, 5, tzinfo=UTC)

    def test_day_and_month_names(self):
        result = compile_pattern("D, jS F Y").parse("Wed, 3rd February 2010", UTC)

        assert result == datetime(2010, 2, 3, tzinfo=UTC)

    def test_names_are_case_insensitive(self):
        result = compile_pattern("d M Y g A").parse("03 FEB 2010 4 pm", UTC)

        assert result == datetime(2010, 2, 3, 16, tzinfo=UTC)

    def test_full_month_name_accepts_abbreviation(self):
        assert compile_pattern("F Y").parse("Sep 2010", UTC).month == 9

    def test_two_digit_year_pivot(self):
        pattern = compile_pattern("y")

        assert pattern.parse("69", UTC).year == 2069
        assert pattern.parse("70", UTC).year == 1970

    def test_twelve_am_is_midnight(self):
        assert compile_pattern("h:i a").parse("12:30 am", UTC).hour == 0

    def test_twelve_hour_without_meridiem(self):
        assert compile_pattern("g:i").parse("4:30", UTC).hour == 4

    def test_fractions(self):
        assert compile_pattern("s.u").parse("06.5", UTC).microsecond == 500000
        assert compile_pattern("s.v").parse("06.123", UTC).microsecond == 123000

    def test_timestamp_with_fraction(self):
        result = compile_pattern("U.u").parse("1265213106.250000", HONG_KONG)

        assert result == datetime(2010, 2, 3, 16, 5, 6, 250000, tzinfo=UTC)

    def test_negative_timestamp(self):
        result = compile_pattern("U").parse("-1", UTC)

        assert result == datetime(1969, 12, 31, 23, 59, 59, tzinfo=UTC)

    @pytest.mark.parametrize(
        ("pattern", "text", "expected"),
        [
            ("Y-m-d H:i O", "2010-02-03 16:05 +0200", datetime(2010, 2, 3, 14, 5, tzinfo=UTC)),
            ("Y-m-d H:i P", "2010-02-03 16:05 -05:00", datetime(2010, 2, 3, 21, 5, tzinfo=UTC)),
            ("Y-m-d H:ip", "2010-02-03 16:05Z", datetime(2010, 2, 3, 16, 5, tzinfo=UTC)),
            ("Y-m-d H:i e", "2010-02-03 16:05 Asia/Hong_Kong", datetime(2010, 2, 3, 8, 5, tzinfo=UTC)),
            ("Y-m-d H:i T", "2010-02-03 16:05 UTC", datetime(2010, 2, 3, 16, 5, tzinfo=UTC)),
        ],
    )
    def test_zone_in_text(self, pattern, text, expected):
        assert compile_pattern(pattern).parse(text, NEW_YORK) == expected

    def test_day_of_year_in_leap_year(self):
        result = compile_pattern("Y-z").parse("2012-365", UTC)

        assert result == datetime(2012, 12, 31, tzinfo=UTC)

    def test_day_of_year_consistent_with_month_and_day(self):
        result = compile_pattern("Y-m-d z").parse("2010-02-03 33", UTC)

        assert result == datetime(2010, 2, 3, tzinfo=UTC)

    def test_leap_day(self):
        assert compile_pattern("Y-m-d").parse("2012-02-29", UTC).day == 29

    @pytest.mark.parametrize(
        ("pattern", "text"),
        [
            ("Y-m-d", "2010-04-31"),
            ("Y-m-d", "2010-02-29"),
            ("Y-m-d", "2010-13-01"),
            ("Y-m-d", "2010-00-10"),
            ("Y-m-d", "2010-01-00"),
            ("Y-m-d", "0000-01-01"),
            ("Y-z", "2010-365"),
            ("Y-m-d z", "2010-02-04 33"),
            ("H:i", "24:00"),
            ("H:i", "16:60"),
            ("H:i:s", "16:05:60"),
            ("g a", "13 pm"),
            ("g a", "0 am"),
        ],
    )
    def test_invalid_calendar_values(self, pattern, text):
        with pytest.raises(TransformationFailedError, match="invalid"):
            compile_pattern(pattern).parse(text, UTC)

    @pytest.mark.parametrize(
        ("pattern", "text"),
        [
            ("Y-m-d H:i:s", "2010-2010-2010"),
            ("Y-m-d", "2010-02-03 "),
            ("Y-m-d", " 2010-02-03"),
            ("Y-m-d", "2010/02/03"),
            ("Y-M-d", "2010-Fbr-03"),
            ("H:i", "16:5"),
            ("y", "2010"),
            ("Y-m-d H:i O", "2010-02-03 16:05 Mars/Phobos"),
            ("Y-m-d e", "2010-02-03 Mars/Phobos"),
        ],
    )
    def test_syntax_errors(self, pattern, text):
        with pytest.raises(TransformationFailedError):
            compile_pattern(pattern).parse(text, UTC)

    def test_unparseable_token(self):
        with pytest.raises(TransformationFailedError, match="'W' cannot be parsed"):
            compile_pattern("Y-W").parse("2010-05", UTC)

    def test_error_carries_value_and_pattern(self):
        with pytest.raises(TransformationFailedError) as exc_info:
            compile_pattern("d/m/Y").parse("31/04/2010", UTC)

        assert exc_info.value.value == "31/04/2010"
        assert exc_info.value.pattern == "d/m/Y"
        assert "31/04/2010" in str(exc_info.value)


class TestParseTimezone:
    """Tests for reading zones written in text."""

    @pytest.mark.parametrize("text", ["Z", "UTC", "gmt"])
    def test_utc_aliases(self, text):
        assert parse_timezone(text) is timezone.utc

    def test_offsets(self):
        assert parse_timezone("+0530") == timezone(timedelta(hours=5, minutes=30))
        assert parse_timezone("-03:00") == timezone(timedelta(hours=-3))

    def test_identifier(self):
        assert parse_timezone("Europe/Amsterdam") == ZoneInfo("Europe/Amsterdam")

    def test_unknown_identifier(self):
        with pytest.raises(ValueError, match="Unknown time zone"):
            parse_timezone("Mars/Phobos")
