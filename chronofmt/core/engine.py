"""Format engine.

The FormatterContext owns a locale registry, a token table and the named
formats, and turns ``(pattern, date)`` into text in two steps:

    1. If the whole pattern is a registered named format (``ISODate``),
       replace it with that format's pattern.
    2. Substitute every token in the pattern from a DateSnapshot of the
       date, copying all other characters through.

The module-level ``format``, ``lang``, ``formatters`` and ``register``
functions act on a shared default context.

Examples:
    >>> import datetime
    >>> ctx = FormatterContext()
    >>> ctx.format("DDD, d MMMM YYYY", datetime.datetime(2024, 8, 9))
    'Friday, 9 August 2024'
    >>> ctx("ISODate", datetime.datetime(2024, 8, 9))
    '2024-08-09'
"""

from __future__ import annotations

import datetime as _datetime
import logging
import threading
from collections.abc import Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING

from chronofmt._internal.constants import DEFAULT_LOCALE, DEFAULT_NAMED_FORMATS
from chronofmt._internal.decorators import synchronized
from chronofmt._internal.validation import require_str
from chronofmt.core.locale import LocaleDefinition, LocaleRegistry
from chronofmt.core.snapshot import DateLike, capture
from chronofmt.core.tokens import TokenTable

if TYPE_CHECKING:
    from chronofmt.config import FormatterSettings

logger = logging.getLogger(__name__)


class FormatterContext:
    """Locale registry, token table and named formats used for formatting.

    A context is callable: ``ctx(pattern, date)`` is ``ctx.format(pattern, date)``.
    Registry and named-format updates are serialized by an internal lock,
    so one context can be shared between threads.

    Args:
        locale: Initial current locale name.
        named_formats: Named formats to start with. Defaults to the ISO
            formats (ISODate, ISOTime, ISODateTime, ISODateTimeTZ).
        tokens: Token table. Defaults to the standard tokens.
        timezone: Fixed zone to render in instead of the host local zone.
    """

    def __init__(
        self,
        *,
        locale: str = DEFAULT_LOCALE,
        named_formats: Mapping[str, str] | None = None,
        tokens: TokenTable | None = None,
        timezone: _datetime.tzinfo | None = None,
    ) -> None:
        self._lock = threading.RLock()
        self.registry = LocaleRegistry(locale)
        self.tokens = tokens if tokens is not None else TokenTable()
        self.timezone = timezone
        self._formats: dict[str, str] = dict(
            DEFAULT_NAMED_FORMATS if named_formats is None else named_formats
        )

    @classmethod
    def from_settings(cls, settings: FormatterSettings) -> FormatterContext:
        """Create a context from FormatterSettings."""
        return cls(
            locale=settings.default_locale,
            named_formats=settings.named_formats,
            timezone=settings.timezone,
        )

    @require_str("pattern")
    def format(self, pattern: str, date: DateLike = None) -> str:
        """Format ``date`` according to ``pattern``.

        Args:
            pattern: Token pattern or the name of a registered named format.
            date: The value to format. Missing or unusable values mean now.

        Returns:
            The formatted text.

        Raises:
            PatternTypeError: If pattern is not a string.
        """
        with self._lock:
            expanded = self._expand(pattern)
            locale = self.registry.view()
        snapshot = capture(date, self.timezone)
        return self.tokens.substitute(expanded, snapshot, locale)

    __call__ = format

    def _expand(self, pattern: str) -> str:
        seen: set[str] = set()
        while pattern in self._formats and pattern not in seen:
            seen.add(pattern)
            pattern = self._formats[pattern]
        return pattern

    @require_str("name", "pattern")
    @synchronized
    def register(self, name: str, pattern: str) -> None:
        """Register (or replace) a named format.

        Raises:
            PatternTypeError: If name or pattern is not a string.
        """
        if name in self._formats:
            logger.debug("Replacing named format %r", name)
        else:
            logger.debug("Registering named format %r", name)
        self._formats[name] = pattern

    @synchronized
    def formatters(self) -> list[str]:
        """Return the registered named-format names."""
        return list(self._formats)

    @property
    def named_formats(self) -> Mapping[str, str]:
        """Return a read-only view of the named formats."""
        return MappingProxyType(self._formats)

    def lang(self, name: str | None = None, definition: LocaleDefinition | None = None) -> str:
        """Read or set the current locale. See LocaleRegistry.lang."""
        return self.registry.lang(name, definition)

    @property
    def languages(self) -> Mapping[str, LocaleDefinition]:
        """Return a read-only view of the registered locales."""
        return self.registry.languages

    def no_conflict(self) -> FormatterContext:
        """Undo the latest host export of this context and return it."""
        from chronofmt import host

        return host.no_conflict(self)

    def __repr__(self) -> str:
        return (
            f"FormatterContext(locale={self.registry.current!r}, "
            f"formatters={len(self._formats)})"
        )


_default_context: FormatterContext | None = None
_default_lock = threading.Lock()


def get_default_context() -> FormatterContext:
    """Return the shared context, creating it from the environment on first use."""
    global _default_context
    with _default_lock:
        if _default_context is None:
            from chronofmt.config import settings_from_env

            _default_context = FormatterContext.from_settings(settings_from_env())
        return _default_context


def set_default_context(context: FormatterContext | None) -> FormatterContext | None:
    """Replace the shared context and return the previous one.

    Passing None makes the next get_default_context() build a fresh one.
    """
    global _default_context
    with _default_lock:
        previous, _default_context = _default_context, context
    return previous


def format(pattern: str, date: DateLike = None) -> str:  # noqa: A001
    """Format ``date`` with ``pattern`` using the default context."""
    return get_default_context().format(pattern, date)


def lang(name: str | None = None, definition: LocaleDefinition | None = None) -> str:
    """Read or set the current locale of the default context."""
    return get_default_context().lang(name, definition)


def formatters() -> list[str]:
    """Return the named formats of the default context."""
    return get_default_context().formatters()


def register(name: str, pattern: str) -> None:
    """Register a named format in the default context."""
    get_default_context().register(name, pattern)


__all__ = [
    "FormatterContext",
    "format",
    "formatters",
    "get_default_context",
    "lang",
    "register",
    "set_default_context",
]
