"""Host integration: exporting the formatter under a well-known name.

Some embedding environments look the formatter up by name in a shared
namespace (``builtins`` by default), others hand out a module-definition
callable that wants a factory. ``export`` supports both; ``no_conflict``
undoes a namespace export, putting back whatever was bound to the name
before, and returns the formatter so callers can keep it under a name
of their own.

Examples:
    >>> ns = {"chronofmt": "previous"}
    >>> binding = export(ns)
    >>> ns["chronofmt"] is binding.entry
    True
    >>> fmt = no_conflict()
    >>> ns["chronofmt"]
    'previous'
"""

from __future__ import annotations

import builtins
import logging
import threading
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Callable

from chronofmt.core.engine import FormatterContext, get_default_context

logger = logging.getLogger(__name__)

DEFAULT_NAME = "chronofmt"

# Marks a name that had no value before export
_MISSING: Any = object()

_bindings: list[HostBinding] = []
_bindings_lock = threading.Lock()


@dataclass
class HostBinding:
    """One namespace export and the value it replaced."""

    namespace: MutableMapping[str, Any]
    name: str
    entry: FormatterContext
    previous: Any = _MISSING

    @property
    def had_previous(self) -> bool:
        """Return True if the name was bound before the export."""
        return self.previous is not _MISSING

    def restore(self) -> None:
        """Put the previous occupant back, or remove the name."""
        if self.had_previous:
            self.namespace[self.name] = self.previous
        else:
            self.namespace.pop(self.name, None)
        logger.debug("Restored previous binding of %r", self.name)


def export(
    namespace: MutableMapping[str, Any] | None = None,
    name: str = DEFAULT_NAME,
    define: Callable[[Callable[[], FormatterContext]], Any] | None = None,
    context: FormatterContext | None = None,
) -> HostBinding | None:
    """Make the formatter available to the host environment.

    Args:
        namespace: Namespace to bind into. Defaults to ``builtins``.
        name: Name to bind.
        define: Module-definition callable. When given, it is called with a
            factory returning the formatter and nothing is bound.
        context: Formatter to export. Defaults to the shared context.

    Returns:
        The HostBinding for a namespace export, or None when ``define``
        was used.
    """
    entry = context if context is not None else get_default_context()
    if define is not None:
        define(lambda: entry)
        logger.debug("Registered formatter through module-definition host")
        return None

    target = vars(builtins) if namespace is None else namespace
    binding = HostBinding(target, name, entry, target.get(name, _MISSING))
    target[name] = entry
    with _bindings_lock:
        _bindings.append(binding)
    logger.debug("Exported formatter as %r", name)
    return binding


def no_conflict(context: FormatterContext | None = None) -> FormatterContext:
    """Undo the most recent namespace export of a formatter.

    Does nothing to any namespace if the formatter was never exported.

    Args:
        context: Formatter whose export to undo. Defaults to the shared
            context.

    Returns:
        The formatter itself.
    """
    entry = context if context is not None else get_default_context()
    with _bindings_lock:
        for index in range(len(_bindings) - 1, -1, -1):
            if _bindings[index].entry is entry:
                binding = _bindings.pop(index)
                break
        else:
            binding = None
    if binding is not None:
        binding.restore()
    return entry


__all__ = [
    "DEFAULT_NAME",
    "HostBinding",
    "export",
    "no_conflict",
]
