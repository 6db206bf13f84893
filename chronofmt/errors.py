"""Chronofmt exception hierarchy.

All Chronofmt-specific exceptions inherit from ChronofmtError.
"""

from __future__ import annotations


class ChronofmtError(Exception):
    """Base exception for all Chronofmt errors."""

    pass


class PatternTypeError(ChronofmtError, TypeError):
    """A pattern or format name is not a string.

    This is the only error raised while formatting. It is raised before
    the date argument is inspected, so no partial output is produced.

    Examples:
        - format(1234)
        - register("Short", None)
    """

    pass


class LocaleFileError(ChronofmtError):
    """A locale definition file cannot be used.

    Examples:
        - File does not exist or is not valid JSON
        - JSON root is not an object
        - A name table is neither a list of strings nor absent
    """

    pass


__all__ = [
    "ChronofmtError",
    "PatternTypeError",
    "LocaleFileError",
]
