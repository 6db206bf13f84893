"""Pattern tokens and their formatting rules.

Supported Tokens:
    YYYY - Year at natural width (2024)
    YY   - Last two digits of the year (24)
    MMMM - Full month name (August)
    MMM  - Short month name (Aug)
    MM   - Month, zero-padded (08)
    M    - Month (8)
    DDD  - Full weekday name (Friday)
    DD   - Short weekday name (Fri)
    D    - Two-letter weekday name (Fr)
    dd   - Day of month, zero-padded (09)
    d    - Day of month (9)
    HH   - Hour 0-23, zero-padded (14)
    H    - Hour 0-23 (14)
    hh   - Hour 1-12, zero-padded (02)
    h    - Hour 1-12 (2)
    mm   - Minute, zero-padded (05)
    m    - Minute (5)
    ss   - Second, zero-padded (05)
    s    - Second (5)
    ff   - Millisecond, zero-padded to 3 (023)
    f    - Millisecond (23)
    A    - AM / PM
    a    - am / pm
    ZZ   - UTC offset (+0300)
    Z    - UTC offset with colon (+03:00)

Tokens are case sensitive. A pattern is scanned left to right taking the
longest token that matches at each position; everything else is copied
to the output unchanged.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Mapping
from typing import Callable

from chronofmt._internal.constants import MINUTES_PER_HOUR
from chronofmt._internal.decorators import memoize
from chronofmt.core.locale import LocaleView
from chronofmt.core.snapshot import DateSnapshot

TokenRule = Callable[[DateSnapshot, LocaleView], str]


def _padded(attr: str, width: int) -> TokenRule:
    def rule(snapshot: DateSnapshot, locale: LocaleView) -> str:
        return f"{getattr(snapshot, attr):0{width}d}"

    return rule


def _named(field: str) -> TokenRule:
    def rule(snapshot: DateSnapshot, locale: LocaleView) -> str:
        return locale.name(field, snapshot)

    return rule


def format_offset(minutes: int, separator: str = "") -> str:
    """Format a UTC offset in minutes as ``±HHMM`` (or ``±HH:MM``).

    Examples:
        >>> format_offset(180)
        '+0300'
        >>> format_offset(-330, ":")
        '-05:30'
        >>> format_offset(0, ":")
        '+00:00'
    """
    sign = "-" if minutes < 0 else "+"
    hours, mins = divmod(abs(minutes), MINUTES_PER_HOUR)
    return f"{sign}{hours:02d}{separator}{mins:02d}"


TOKENS: dict[str, TokenRule] = {
    "YYYY": _padded("year", 1),
    "YY": lambda s, _: f"{s.year % 100:02d}",
    "MMMM": _named("months"),
    "MMM": _named("months_short"),
    "MM": _padded("month", 2),
    "M": _padded("month", 1),
    "DDD": _named("weekdays"),
    "DD": _named("weekdays_short"),
    "D": _named("weekdays_min"),
    "dd": _padded("day", 2),
    "d": _padded("day", 1),
    "HH": _padded("hour24", 2),
    "H": _padded("hour24", 1),
    "hh": _padded("hour12", 2),
    "h": _padded("hour12", 1),
    "mm": _padded("minute", 2),
    "m": _padded("minute", 1),
    "ss": _padded("second", 2),
    "s": _padded("second", 1),
    "ff": _padded("millisecond", 3),
    "f": _padded("millisecond", 1),
    "A": lambda s, _: "PM" if s.is_pm else "AM",
    "a": lambda s, _: "pm" if s.is_pm else "am",
    "ZZ": lambda s, _: format_offset(s.utc_offset_minutes),
    "Z": lambda s, _: format_offset(s.utc_offset_minutes, ":"),
}


@memoize
def _compile(tokens: tuple[str, ...]) -> re.Pattern[str]:
    if not tokens:
        return re.compile(r"(?!)")
    # Longest alternative first so YYYY wins over YY at the same position
    ordered = sorted(tokens, key=lambda token: (-len(token), token))
    return re.compile("|".join(re.escape(token) for token in ordered))


class TokenTable:
    """Mapping from token string to formatting rule.

    The matcher is built once when the table is created.

    Args:
        rules: Token rules to use. Defaults to TOKENS.

    Examples:
        >>> table = TokenTable()
        >>> [text for text, is_token in table.tokenize("YYYY-MM") if is_token]
        ['YYYY', 'MM']
    """

    __slots__ = ("_rules", "_regex")

    def __init__(self, rules: Mapping[str, TokenRule] | None = None) -> None:
        self._rules: dict[str, TokenRule] = dict(TOKENS if rules is None else rules)
        self._regex = _compile(tuple(sorted(self._rules)))

    def resolve(self, token: str, snapshot: DateSnapshot, locale: LocaleView) -> str:
        """Return the substitution text for one token.

        Raises:
            KeyError: If token is not in the table.
        """
        return self._rules[token](snapshot, locale)

    def substitute(self, pattern: str, snapshot: DateSnapshot, locale: LocaleView) -> str:
        """Replace every token in ``pattern`` and keep all other characters."""
        return self._regex.sub(
            lambda match: self._rules[match.group(0)](snapshot, locale), pattern
        )

    def tokenize(self, pattern: str) -> list[tuple[str, bool]]:
        """Split a pattern into ``(text, is_token)`` pieces.

        Adjacent literal characters are merged into one piece.
        """
        pieces: list[tuple[str, bool]] = []
        position = 0
        for match in self._regex.finditer(pattern):
            if match.start() > position:
                pieces.append((pattern[position : match.start()], False))
            pieces.append((match.group(0), True))
            position = match.end()
        if position < len(pattern):
            pieces.append((pattern[position:], False))
        return pieces

    def __contains__(self, token: object) -> bool:
        return token in self._rules

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __repr__(self) -> str:
        return f"TokenTable({len(self._rules)} tokens)"


__all__ = [
    "TOKENS",
    "TokenRule",
    "TokenTable",
    "format_offset",
]
