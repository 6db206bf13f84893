"""Chronofmt: token-pattern date formatting with pluggable locales.

Chronofmt renders a date as text from a pattern such as ``"DDD, d MMMM
YYYY HH:mm"``. Each recognized token is replaced by the matching date
component; every other character is copied through.

Functions:
    format: Format a date with a pattern or a named format
    lang: Read or set the current locale, optionally defining it
    formatters: List the registered named formats
    register: Add a named format
    no_conflict: Undo a host export and return the formatter

Core Types:
    FormatterContext: Registry, tokens and named formats used for formatting
    DateSnapshot: Date/time fields of one instant
    Locale: Month and weekday name tables

Exceptions:
    ChronofmtError: Base exception
    PatternTypeError: Pattern or format name is not a string
    LocaleFileError: Locale file cannot be loaded

Example:
    >>> import datetime
    >>> from chronofmt import format
    >>> format("YYYY-MM-dd HH:mm", datetime.datetime(2024, 8, 9, 14, 30))
    '2024-08-09 14:30'
    >>> format("ISODate", datetime.datetime(2024, 8, 9, 14, 30))
    '2024-08-09'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from chronofmt.core.engine import (
    FormatterContext,
    format,
    formatters,
    get_default_context,
    lang,
    register,
    set_default_context,
)
from chronofmt.core.locale import Locale
from chronofmt.core.snapshot import DateSnapshot

# Host integration
from chronofmt.host import export, no_conflict

# Exceptions
from chronofmt.errors import ChronofmtError, LocaleFileError, PatternTypeError

__all__: list[str] = [
    "__version__",
    # Functions
    "format",
    "formatters",
    "lang",
    "register",
    "no_conflict",
    "export",
    "get_default_context",
    "set_default_context",
    # Core types
    "DateSnapshot",
    "FormatterContext",
    "Locale",
    # Exceptions
    "ChronofmtError",
    "LocaleFileError",
    "PatternTypeError",
]
