"""Configuration for the default formatter context.

FormatterSettings collects the values a FormatterContext starts from.
``settings_from_env`` fills them from environment variables:

    CHRONOFMT_LOCALE      Initial current locale name (default "en")
    CHRONOFMT_UTC_OFFSET  Fixed offset such as "+02:00" used instead of
                          the host local zone

``load_locale_file`` reads a locale definition from a JSON file:

    {"months": ["styczeń", ...], "weekdays_min": ["Nd", ...]}

Multi-word keys may also be written in camelCase ("weekdaysMin").
"""

from __future__ import annotations

import datetime as _datetime
import json
import logging
import os
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from chronofmt._internal.constants import (
    DEFAULT_LOCALE,
    DEFAULT_NAMED_FORMATS,
    ENV_LOCALE,
    ENV_UTC_OFFSET,
    MINUTES_PER_HOUR,
)
from chronofmt.core.locale import Locale, canonical_field
from chronofmt.errors import LocaleFileError

logger = logging.getLogger(__name__)

_OFFSET_RE = re.compile(r"^(?P<sign>[+-])(?P<hours>\d{2}):?(?P<minutes>\d{2})$")


@dataclass
class FormatterSettings:
    """Starting values for a FormatterContext.

    Attributes:
        default_locale: Locale that is current when the context is created.
        named_formats: Named formats to register up front.
        timezone: Fixed zone to render in; None uses the host local zone.
    """

    default_locale: str = DEFAULT_LOCALE
    named_formats: dict[str, str] = field(
        default_factory=lambda: dict(DEFAULT_NAMED_FORMATS)
    )
    timezone: _datetime.tzinfo | None = None


def parse_offset(text: str) -> _datetime.timezone:
    """Parse ``±HH:MM`` or ``±HHMM`` into a fixed-offset timezone.

    Raises:
        ValueError: If text is not a valid offset.

    Examples:
        >>> parse_offset("+02:00")
        datetime.timezone(datetime.timedelta(seconds=7200))
    """
    match = _OFFSET_RE.match(text.strip())
    if not match:
        raise ValueError(f"invalid UTC offset {text!r}, expected ±HH:MM")
    minutes = int(match["hours"]) * MINUTES_PER_HOUR + int(match["minutes"])
    if match["sign"] == "-":
        minutes = -minutes
    return _datetime.timezone(_datetime.timedelta(minutes=minutes))


def settings_from_env(environ: Mapping[str, str] | None = None) -> FormatterSettings:
    """Build FormatterSettings from environment variables.

    Invalid values are logged and ignored.

    Args:
        environ: Mapping to read instead of ``os.environ``.
    """
    env = os.environ if environ is None else environ
    settings = FormatterSettings()

    locale = env.get(ENV_LOCALE, "").strip()
    if locale:
        settings.default_locale = locale

    offset = env.get(ENV_UTC_OFFSET, "").strip()
    if offset:
        try:
            settings.timezone = parse_offset(offset)
        except ValueError:
            logger.warning("Ignoring %s=%r: not a ±HH:MM offset", ENV_UTC_OFFSET, offset)
    return settings


def load_locale_file(path: str | os.PathLike[str]) -> Locale:
    """Load a locale definition from a JSON file.

    Args:
        path: Path to a JSON object whose keys are Locale field names and
            whose values are lists of names.

    Returns:
        The Locale described by the file.

    Raises:
        LocaleFileError: If the file cannot be read or has the wrong shape.
    """
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise LocaleFileError(f"cannot load locale file {path}: {e}") from e

    if not isinstance(data, dict):
        raise LocaleFileError(f"locale file {path} must contain a JSON object")

    tables: dict[str, tuple[str, ...] | None] = {}
    for key, value in data.items():
        if canonical_field(key) is None:
            logger.warning("Ignoring unknown key %r in locale file %s", key, path)
            continue
        if value is None:
            tables[key] = None
            continue
        if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
            raise LocaleFileError(
                f"{key} in locale file {path} must be a list of strings"
            )
        tables[key] = tuple(value)
    return Locale.from_mapping(tables)


__all__ = [
    "FormatterSettings",
    "load_locale_file",
    "parse_offset",
    "settings_from_env",
]
