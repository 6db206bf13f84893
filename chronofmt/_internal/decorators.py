"""Custom decorators for Chronofmt.

This module provides decorator utilities for the library:
    - @synchronized: Run a method while holding the instance lock
    - @memoize: Simple memoization decorator

This module is not part of the public API.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar, ParamSpec

P = ParamSpec("P")
T = TypeVar("T")


def synchronized(method: Callable[..., T]) -> Callable[..., T]:
    """Run a method while holding ``self._lock``.

    The owning class must create ``self._lock`` (a ``threading.RLock``)
    before any decorated method is called. The lock is reentrant so
    decorated methods may call each other.

    Args:
        method: The method to wrap.

    Returns:
        The wrapped method.
    """

    @functools.wraps(method)
    def wrapper(self: Any, *args: Any, **kwargs: Any) -> T:
        with self._lock:
            return method(self, *args, **kwargs)

    return wrapper


def memoize(func: Callable[P, T]) -> Callable[P, T]:
    """Simple memoization decorator for functions with hashable arguments.

    Note: Arguments must be hashable. For complex caching needs,
    use functools.lru_cache instead.

    Args:
        func: The function to memoize.

    Returns:
        A memoized version of the function.

    Examples:
        >>> @memoize
        ... def compile_tokens(tokens: tuple[str, ...]) -> str:
        ...     return "|".join(tokens)
    """
    cache: dict[tuple, T] = {}

    @functools.wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
        key = (args, tuple(sorted(kwargs.items())))
        if key not in cache:
            cache[key] = func(*args, **kwargs)
        return cache[key]

    # Expose cache for testing/introspection
    wrapper._cache = cache  # type: ignore[attr-defined]
    wrapper._clear_cache = cache.clear  # type: ignore[attr-defined]
    return wrapper


__all__ = [
    "synchronized",
    "memoize",
]
