"""Tests for token rules and tokenization."""

from __future__ import annotations

import datetime

import pytest

from chronofmt import FormatterContext
from chronofmt.core.locale import LocaleView
from chronofmt.core.snapshot import DateSnapshot
from chronofmt.core.tokens import TOKENS, TokenTable, _compile, format_offset

UTC = datetime.timezone.utc


def snap(*args: int, offset_minutes: int = 0) -> DateSnapshot:
    tz = datetime.timezone(datetime.timedelta(minutes=offset_minutes))
    return DateSnapshot.from_datetime(datetime.datetime(*args, tzinfo=tz))


class TestDateTokens:
    """Year, month and day tokens for 2024-08-09 (a Friday)."""

    @pytest.mark.parametrize(
        ("pattern", "expected"),
        [
            ("YYYY", "2024"),
            ("YY", "24"),
            ("MMMM", "August"),
            ("MMM", "Aug"),
            ("MM", "08"),
            ("M", "8"),
            ("DDD", "Friday"),
            ("DD", "Fri"),
            ("D", "Fr"),
            ("dd", "09"),
            ("d", "9"),
        ],
    )
    def test_token(self, context: FormatterContext, pattern: str, expected: str) -> None:
        """Each date token renders its component."""
        assert context.format(pattern, datetime.datetime(2024, 8, 9)) == expected

    def test_two_digit_year_padded(self, context: FormatterContext) -> None:
        """YY keeps the leading zero."""
        assert context.format("YY", datetime.datetime(2005, 3, 1)) == "05"

    def test_year_natural_width(self) -> None:
        """YYYY does not pad years below 1000."""
        assert TokenTable().resolve("YYYY", snap(987, 6, 5), LocaleView(None)) == "987"


class TestTimeTokens:
    """Hour, minute, second and millisecond tokens."""

    def test_sample_instant(self, context: FormatterContext, sample_datetime: datetime.datetime) -> None:
        """2024-08-09T14:30:05.123 renders each field."""
        assert context.format("YYYY", sample_datetime) == "2024"
        assert context.format("MMMM", sample_datetime) == "August"
        assert context.format("dd", sample_datetime) == "09"
        assert context.format("hh", sample_datetime) == "02"
        assert context.format("A", sample_datetime) == "PM"
        assert context.format("ff", sample_datetime) == "123"

    def test_hour24(self, context: FormatterContext) -> None:
        """HH pads, H does not."""
        assert context.format("HH", datetime.datetime(2024, 8, 9, 4, 30)) == "04"
        assert context.format("H", datetime.datetime(2024, 8, 9, 23)) == "23"
        assert context.format("H", datetime.datetime(2024, 8, 9, 4)) == "4"

    @pytest.mark.parametrize(
        ("hour", "padded", "plain"),
        [(0, "12", "12"), (1, "01", "1"), (11, "11", "11"), (12, "12", "12"), (13, "01", "1"), (23, "11", "11")],
    )
    def test_hour12(self, context: FormatterContext, hour: int, padded: str, plain: str) -> None:
        """hh and h wrap at noon and midnight."""
        value = datetime.datetime(2024, 8, 9, hour, 30)
        assert context.format("hh", value) == padded
        assert context.format("h", value) == plain

    def test_minutes_seconds(self, context: FormatterContext) -> None:
        """mm/ss pad, m/s do not."""
        value = datetime.datetime(2024, 8, 9, 14, 5, 7)
        assert context.format("mm:ss", value) == "05:07"
        assert context.format("m:s", value) == "5:7"

    def test_milliseconds(self, context: FormatterContext) -> None:
        """ff pads to three digits, f does not."""
        value = datetime.datetime(2024, 8, 9, 14, 30, 5, 23000)
        assert context.format("ff", value) == "023"
        assert context.format("f", value) == "23"

    def test_microseconds_truncated(self, context: FormatterContext) -> None:
        """Sub-millisecond precision is dropped, not rounded."""
        value = datetime.datetime(2024, 8, 9, 14, 30, 5, 999999)
        assert context.format("ff", value) == "999"

    @pytest.mark.parametrize(
        ("hour", "upper", "lower"),
        [(0, "AM", "am"), (11, "AM", "am"), (12, "PM", "pm"), (14, "PM", "pm"), (23, "PM", "pm")],
    )
    def test_meridiem(self, context: FormatterContext, hour: int, upper: str, lower: str) -> None:
        """A and a agree with the noon boundary."""
        value = datetime.datetime(2024, 8, 9, hour, 30)
        assert context.format("A", value) == upper
        assert context.format("a", value) == lower


class TestOffsetTokens:
    """ZZ and Z render the snapshot offset."""

    @pytest.mark.parametrize(
        ("minutes", "compact", "colon"),
        [(0, "+0000", "+00:00"), (180, "+0300", "+03:00"), (-240, "-0400", "-04:00"), (330, "+0530", "+05:30"), (-570, "-0930", "-09:30")],
    )
    def test_format_offset(self, minutes: int, compact: str, colon: str) -> None:
        """Sign and magnitude are rendered exactly."""
        assert format_offset(minutes) == compact
        assert format_offset(minutes, ":") == colon

    def test_offset_tokens_from_snapshot(self) -> None:
        """Z is ZZ with a colon after the hours."""
        table = TokenTable()
        locale = LocaleView(None)
        for minutes in (-720, -300, 0, 60, 345, 840):
            snapshot = snap(2024, 1, 1, offset_minutes=minutes)
            zz = table.resolve("ZZ", snapshot, locale)
            z = table.resolve("Z", snapshot, locale)
            assert z == f"{zz[:3]}:{zz[3:]}"

    def test_context_timezone(self) -> None:
        """A fixed context zone sets the rendered offset."""
        tz = datetime.timezone(-datetime.timedelta(hours=5, minutes=30))
        ctx = FormatterContext(timezone=tz)
        value = datetime.datetime(2024, 8, 9, 12, 0, tzinfo=UTC)
        assert ctx.format("HH:mm Z", value) == "06:30 -05:30"
        assert ctx.format("ZZ", value) == "-0530"


class TestTokenization:
    """Longest-match scanning and literal passthrough."""

    def test_longest_match_wins(self) -> None:
        """YYYY is one token, not two YY tokens."""
        table = TokenTable()
        assert table.tokenize("YYYY") == [("YYYY", True)]
        assert table.tokenize("MMMMM") == [("MMMM", True), ("M", True)]

    def test_literals_merged(self) -> None:
        """Adjacent literal characters form one piece."""
        table = TokenTable()
        assert table.tokenize("YYYY/.,MM") == [("YYYY", True), ("/.,", False), ("MM", True)]

    def test_case_sensitive(self, context: FormatterContext) -> None:
        """yyyy is not a token."""
        assert context.format("yyyy", datetime.datetime(2024, 8, 9)) == "yyyy"

    def test_separators_pass_through(self, context: FormatterContext) -> None:
        """Unknown characters are copied verbatim."""
        value = datetime.datetime(2024, 8, 9, 14, 30, 5)
        assert context.format("YYYY-MM-ddTHH:mm:ss", value) == "2024-08-09T14:30:05"
        assert context.format("[*] ", value) == "[*] "

    def test_empty_pattern(self, context: FormatterContext) -> None:
        """An empty pattern formats to an empty string."""
        assert context.format("") == ""

    def test_table_contents(self) -> None:
        """The default table holds every documented token."""
        table = TokenTable()
        assert set(table) == set(TOKENS)
        assert len(table) == 25
        assert "YYYY" in table
        assert "yyyy" not in table

    def test_custom_rules(self) -> None:
        """A table built from custom rules only knows those tokens."""
        table = TokenTable({"Q": lambda s, _: str((s.month - 1) // 3 + 1)})
        snapshot = snap(2024, 8, 9)
        assert table.substitute("Q/YYYY", snapshot, LocaleView(None)) == "3/YYYY"

    def test_empty_table(self) -> None:
        """A table without rules copies the pattern."""
        table = TokenTable({})
        assert table.substitute("YYYY", snap(2024, 8, 9), LocaleView(None)) == "YYYY"

    def test_matcher_shared_between_tables(self) -> None:
        """Tables with the same tokens reuse one compiled matcher."""
        _compile._clear_cache()
        first, second = TokenTable(), TokenTable()
        assert len(_compile._cache) == 1
        TokenTable({"Q": TOKENS["M"]})
        assert len(_compile._cache) == 2
        assert first.tokenize("YYYY") == second.tokenize("YYYY")

    def test_unknown_token_resolve_raises(self) -> None:
        """resolve() rejects tokens outside the table."""
        with pytest.raises(KeyError):
            TokenTable().resolve("Q", snap(2024, 8, 9), LocaleView(None))


class TestTokenProperties:
    """Relations that hold for any instant."""

    INSTANTS = [
        datetime.datetime(1999, 12, 31, 23, 59, 59, 999000),
        datetime.datetime(2000, 1, 1, 0, 0, 0),
        datetime.datetime(2024, 2, 29, 12, 0, 1, 1000),
        datetime.datetime(2024, 8, 9, 11, 30),
        datetime.datetime(2031, 7, 4, 6, 7, 8, 9000),
    ]

    @pytest.mark.parametrize("value", INSTANTS)
    def test_iso_date_shape(self, context: FormatterContext, value: datetime.datetime) -> None:
        """YYYY-MM-dd parses back to the same calendar date."""
        year, month, day = context.format("YYYY-MM-dd", value).split("-")
        assert (len(year), len(month), len(day)) == (4, 2, 2)
        assert (int(year), int(month), int(day)) == (value.year, value.month, value.day)

    @pytest.mark.parametrize("value", INSTANTS)
    def test_short_year_suffix(self, context: FormatterContext, value: datetime.datetime) -> None:
        """YY is the last two characters of YYYY."""
        assert context.format("YY", value) == context.format("YYYY", value)[-2:]

    @pytest.mark.parametrize("value", INSTANTS)
    def test_hour_ranges(self, context: FormatterContext, value: datetime.datetime) -> None:
        """hh is 01-12, HH is 00-23, and they agree."""
        hh = int(context.format("hh", value))
        big = int(context.format("HH", value))
        assert 1 <= hh <= 12
        assert 0 <= big <= 23
        assert hh % 12 == big % 12

    @pytest.mark.parametrize("value", INSTANTS)
    def test_meridiem_case(self, context: FormatterContext, value: datetime.datetime) -> None:
        """a is the lowercase form of A."""
        assert context.format("a", value) == context.format("A", value).lower()
