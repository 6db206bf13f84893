"""Internal constants for Chronofmt.

Default name tables and named formats. This module is not part of the
public API.
"""

from __future__ import annotations

DEFAULT_LOCALE: str = "en"

# Weekday tables start on Sunday to match DateSnapshot.weekday
EN_MONTHS: tuple[str, ...] = (
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
EN_MONTHS_SHORT: tuple[str, ...] = tuple(name[:3] for name in EN_MONTHS)
EN_WEEKDAYS: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)
EN_WEEKDAYS_SHORT: tuple[str, ...] = tuple(name[:3] for name in EN_WEEKDAYS)
EN_WEEKDAYS_MIN: tuple[str, ...] = tuple(name[:2] for name in EN_WEEKDAYS)

DEFAULT_NAMED_FORMATS: dict[str, str] = {
    "ISODate": "YYYY-MM-dd",
    "ISOTime": "hh:mm:ss",
    "ISODateTime": "YYYY-MM-ddThh:mm:ss",
    "ISODateTimeTZ": "YYYY-MM-ddThh:mm:ssZ",
}

MILLIS_PER_SECOND: int = 1_000
MICROS_PER_MILLISECOND: int = 1_000
MINUTES_PER_HOUR: int = 60
SECONDS_PER_MINUTE: int = 60

# Environment variables read by chronofmt.config
ENV_LOCALE: str = "CHRONOFMT_LOCALE"
ENV_UTC_OFFSET: str = "CHRONOFMT_UTC_OFFSET"


__all__ = [
    "DEFAULT_LOCALE",
    "EN_MONTHS",
    "EN_MONTHS_SHORT",
    "EN_WEEKDAYS",
    "EN_WEEKDAYS_SHORT",
    "EN_WEEKDAYS_MIN",
    "DEFAULT_NAMED_FORMATS",
    "MILLIS_PER_SECOND",
    "MICROS_PER_MILLISECOND",
    "MINUTES_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "ENV_LOCALE",
    "ENV_UTC_OFFSET",
]
