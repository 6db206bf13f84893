"""Date component snapshot.

A DateSnapshot holds every field the token rules read, extracted once
per format call from the input value rendered in local time.

Accepted inputs (DateLike):
    datetime.datetime: naive values are local wall time, aware values
        are converted to the local zone
    datetime.date: local midnight of that day
    int | float: milliseconds since the Unix epoch
    str: ISO 8601 text accepted by ``datetime.fromisoformat``

Any other value, or a value that cannot be converted, is replaced by
the current instant.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import math
from dataclasses import dataclass
from typing import Union

from chronofmt._internal.constants import (
    MICROS_PER_MILLISECOND,
    MILLIS_PER_SECOND,
    SECONDS_PER_MINUTE,
)

logger = logging.getLogger(__name__)

DateLike = Union[_datetime.datetime, _datetime.date, int, float, str, None]

# Errors the datetime module raises for values outside its supported range
_CONVERSION_ERRORS = (ValueError, OverflowError, OSError)


@dataclass(frozen=True)
class DateSnapshot:
    """Immutable date/time fields of one instant in local time.

    Attributes:
        year: Calendar year.
        month: Month of year, 1-12.
        day: Day of month, 1-31.
        weekday: Day of week, 0=Sunday through 6=Saturday.
        hour24: Hour of day, 0-23.
        hour12: Hour on the 12-hour clock, 1-12 (0 and 12 both map to 12).
        minute: Minute, 0-59.
        second: Second, 0-59.
        millisecond: Millisecond, 0-999.
        utc_offset_minutes: Minutes the local time is ahead of UTC, as
            reported by the runtime for this instant.

    Examples:
        >>> snap = DateSnapshot.from_datetime(
        ...     _datetime.datetime(2024, 8, 9, 14, 30, 5, 123000,
        ...                        tzinfo=_datetime.timezone.utc))
        >>> snap.weekday, snap.hour12, snap.millisecond
        (5, 2, 123)
    """

    year: int
    month: int
    day: int
    weekday: int
    hour24: int
    hour12: int
    minute: int
    second: int
    millisecond: int
    utc_offset_minutes: int

    @classmethod
    def from_datetime(cls, value: _datetime.datetime) -> DateSnapshot:
        """Build a snapshot from an aware datetime already in the target zone.

        Args:
            value: An aware datetime.

        Returns:
            A new DateSnapshot.

        Raises:
            ValueError: If value is naive.
        """
        offset = value.utcoffset()
        if offset is None:
            raise ValueError("DateSnapshot.from_datetime requires an aware datetime")
        return cls(
            year=value.year,
            month=value.month,
            day=value.day,
            weekday=value.isoweekday() % 7,
            hour24=value.hour,
            hour12=value.hour % 12 or 12,
            minute=value.minute,
            second=value.second,
            millisecond=value.microsecond // MICROS_PER_MILLISECOND,
            utc_offset_minutes=round(offset.total_seconds() / SECONDS_PER_MINUTE),
        )

    @property
    def is_pm(self) -> bool:
        """Return True from noon onwards."""
        return self.hour24 >= 12


def now(tz: _datetime.tzinfo | None = None) -> _datetime.datetime:
    """Return the current instant as an aware datetime in the local zone.

    Args:
        tz: Zone to use instead of the host local zone.
    """
    if tz is not None:
        return _datetime.datetime.now(tz)
    return _datetime.datetime.now().astimezone()


def to_local(value: object, tz: _datetime.tzinfo | None = None) -> _datetime.datetime | None:
    """Convert a DateLike value to an aware datetime in the local zone.

    Args:
        value: The value to convert.
        tz: Zone to use instead of the host local zone.

    Returns:
        The aware datetime, or None if value is not usable.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, str):
        try:
            value = _datetime.datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    elif isinstance(value, (int, float)):
        try:
            if not math.isfinite(value):
                return None
            value = _datetime.datetime.fromtimestamp(
                value / MILLIS_PER_SECOND, tz=_datetime.timezone.utc
            )
        except _CONVERSION_ERRORS:
            return None

    if isinstance(value, _datetime.datetime):
        try:
            if value.tzinfo is not None and value.utcoffset() is not None:
                return value.astimezone(tz)
            if tz is not None:
                return value.replace(tzinfo=tz)
            return value.astimezone()
        except _CONVERSION_ERRORS:
            return None
    if isinstance(value, _datetime.date):
        midnight = _datetime.datetime.combine(value, _datetime.time())
        return to_local(midnight, tz)
    return None


def capture(value: DateLike = None, tz: _datetime.tzinfo | None = None) -> DateSnapshot:
    """Build the snapshot for one format call.

    Missing or unusable values fall back to the current instant instead of
    raising.

    Args:
        value: The DateLike value to snapshot.
        tz: Zone to use instead of the host local zone.

    Returns:
        A new DateSnapshot.
    """
    local = to_local(value, tz) if value is not None else None
    if local is None:
        if value is not None:
            logger.debug("Unusable date %r, formatting the current instant", value)
        local = now(tz)
    return DateSnapshot.from_datetime(local)


__all__ = [
    "DateLike",
    "DateSnapshot",
    "capture",
    "now",
    "to_local",
]
