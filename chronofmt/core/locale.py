"""Locale definitions and the locale registry.

A locale supplies the names used by the textual tokens (MMMM, MMM, DDD,
DD, D). Each name table is either a fixed sequence, indexed by month
(January first) or weekday (Sunday first), or a callable that receives
the DateSnapshot and returns the name.

Definitions may be Locale instances or plain mappings using the same
keys. Fields a definition leaves out are taken from English when a name
is looked up, so a locale that only overrides ``months`` still renders
weekday names.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Optional, Union

from chronofmt._internal.constants import (
    DEFAULT_LOCALE,
    EN_MONTHS,
    EN_MONTHS_SHORT,
    EN_WEEKDAYS,
    EN_WEEKDAYS_MIN,
    EN_WEEKDAYS_SHORT,
)
from chronofmt._internal.decorators import synchronized
from chronofmt.core.snapshot import DateSnapshot

logger = logging.getLogger(__name__)

NameSource = Union[Sequence[str], Callable[[DateSnapshot], str]]

# Field name -> True when the table is indexed by month, False for weekday
NAME_FIELDS: dict[str, bool] = {
    "months": True,
    "months_short": True,
    "weekdays": False,
    "weekdays_short": False,
    "weekdays_min": False,
}

# Mapping definitions may also spell multi-word tables in camelCase
FIELD_ALIASES: dict[str, str] = {
    "monthsShort": "months_short",
    "weekdaysShort": "weekdays_short",
    "weekdaysMin": "weekdays_min",
}
_CAMEL_NAMES: dict[str, str] = {field: alias for alias, field in FIELD_ALIASES.items()}


def canonical_field(key: str) -> str | None:
    """Return the table name for ``key`` (``weekdaysMin`` -> ``weekdays_min``).

    Returns None for keys that are not name tables.
    """
    key = FIELD_ALIASES.get(key, key)
    return key if key in NAME_FIELDS else None


@dataclass(frozen=True)
class Locale:
    """Month and weekday name tables for one language.

    Every field is optional. A ``None`` field falls back to English.

    Attributes:
        months: Full month names (12 entries) or a callable.
        months_short: Abbreviated month names.
        weekdays: Full weekday names (7 entries, Sunday first) or a callable.
        weekdays_short: Abbreviated weekday names.
        weekdays_min: Two-letter weekday names.

    Examples:
        >>> de = Locale(months=("Januar", "Februar", "März", "April", "Mai",
        ...                     "Juni", "Juli", "August", "September",
        ...                     "Oktober", "November", "Dezember"))
        >>> de.weekdays is None
        True
    """

    months: Optional[NameSource] = None
    months_short: Optional[NameSource] = None
    weekdays: Optional[NameSource] = None
    weekdays_short: Optional[NameSource] = None
    weekdays_min: Optional[NameSource] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Locale:
        """Create a Locale from a mapping, ignoring unknown keys.

        camelCase table names (``monthsShort``) are accepted; a snake_case
        key wins when both spellings are present.
        """
        tables: dict[str, Any] = {}
        for key, value in data.items():
            field = canonical_field(key)
            if field is not None and (field == key or field not in tables):
                tables[field] = value
        return cls(**tables)


ENGLISH = Locale(
    months=EN_MONTHS,
    months_short=EN_MONTHS_SHORT,
    weekdays=EN_WEEKDAYS,
    weekdays_short=EN_WEEKDAYS_SHORT,
    weekdays_min=EN_WEEKDAYS_MIN,
)

LocaleDefinition = Union[Locale, Mapping[str, Any]]


def _field(definition: object, name: str) -> object:
    if isinstance(definition, Mapping):
        value = definition.get(name)
        if value is None and name in _CAMEL_NAMES:
            value = definition.get(_CAMEL_NAMES[name])
        return value
    return getattr(definition, name, None)


def _resolve(source: object, index: int, snapshot: DateSnapshot) -> str | None:
    if source is None:
        return None
    if callable(source):
        return str(source(snapshot))
    if isinstance(source, Sequence) and not isinstance(source, str):
        if 0 <= index < len(source):
            return str(source[index])
    return None


class LocaleView:
    """Name lookups against one definition with English fallback.

    Args:
        definition: The active definition, or None for plain English.
    """

    __slots__ = ("_definition",)

    def __init__(self, definition: LocaleDefinition | None) -> None:
        self._definition = definition

    def name(self, field: str, snapshot: DateSnapshot) -> str:
        """Return the name from table ``field`` for the snapshot.

        Args:
            field: One of NAME_FIELDS.
            snapshot: The snapshot being formatted.

        Raises:
            KeyError: If field is not a known name table.
        """
        by_month = NAME_FIELDS[field]
        index = snapshot.month - 1 if by_month else snapshot.weekday
        if self._definition is not None:
            resolved = _resolve(_field(self._definition, field), index, snapshot)
            if resolved is not None:
                return resolved
        return _resolve(getattr(ENGLISH, field), index, snapshot) or ""


class LocaleRegistry:
    """Named locale definitions plus the current-locale pointer.

    The registry stores each definition exactly as passed in. Setting the
    current locale to a name that was never defined is allowed; such a
    locale renders English names.

    Examples:
        >>> registry = LocaleRegistry()
        >>> registry.lang()
        'en'
        >>> registry.lang("pl", {})
        'pl'
        >>> registry.lang()
        'pl'
    """

    def __init__(self, current: str = DEFAULT_LOCALE) -> None:
        self._lock = threading.RLock()
        self._languages: dict[str, LocaleDefinition] = {DEFAULT_LOCALE: ENGLISH}
        self._current = current

    @synchronized
    def lang(self, name: str | None = None, definition: LocaleDefinition | None = None) -> str:
        """Read or set the current locale.

        Args:
            name: Locale to make current. When omitted or empty, nothing
                changes and the current name is returned.
            definition: Definition to store under ``name`` first.

        Returns:
            The current locale name after the call.
        """
        if not name:
            return self._current
        if definition is not None:
            self._languages[name] = definition
            logger.debug("Defined locale %r", name)
        if name != self._current:
            logger.debug("Switching locale from %r to %r", self._current, name)
        self._current = name
        return self._current

    @synchronized
    def define(self, name: str, definition: LocaleDefinition) -> None:
        """Store a definition without changing the current locale."""
        self._languages[name] = definition
        logger.debug("Defined locale %r", name)

    @property
    def current(self) -> str:
        """Return the current locale name."""
        return self._current

    @property
    def languages(self) -> Mapping[str, LocaleDefinition]:
        """Return a read-only view of the registered definitions."""
        return MappingProxyType(self._languages)

    @synchronized
    def view(self, name: str | None = None) -> LocaleView:
        """Return name lookups for ``name`` (default: the current locale)."""
        return LocaleView(self._languages.get(name or self._current))

    def __contains__(self, name: object) -> bool:
        return name in self._languages

    def __repr__(self) -> str:
        return f"LocaleRegistry(current={self._current!r}, languages={sorted(self._languages)!r})"


__all__ = [
    "ENGLISH",
    "FIELD_ALIASES",
    "Locale",
    "LocaleDefinition",
    "LocaleRegistry",
    "LocaleView",
    "NAME_FIELDS",
    "NameSource",
    "canonical_field",
]
