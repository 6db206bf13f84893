"""Validation utilities for Chronofmt.

This module provides the argument checks shared by the public entry
points. This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, TypeVar, ParamSpec

from chronofmt.errors import PatternTypeError

P = ParamSpec("P")
T = TypeVar("T")


def require_str(*names: str) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that the named parameters are strings.

    Checks run before the wrapped function body, so a bad argument never
    reaches date handling or registry state.

    Args:
        *names: Parameter names that must be bound to ``str`` values.

    Returns:
        A decorator function.

    Examples:
        >>> @require_str("pattern")
        ... def render(pattern, date=None):
        ...     pass

        >>> render(1234)
        Traceback (most recent call last):
        ...
        PatternTypeError: pattern must be a string, got int
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind(*args, **kwargs)
            for param_name in names:
                if param_name not in bound.arguments:
                    continue
                ensure_str(bound.arguments[param_name], param_name)
            return func(*args, **kwargs)

        return wrapper

    return decorator


def ensure_str(value: object, name: str) -> str:
    """Return value unchanged if it is a string.

    Args:
        value: The value to check.
        name: Parameter name used in the error message.

    Raises:
        PatternTypeError: If value is not a ``str``.
    """
    if not isinstance(value, str):
        raise PatternTypeError(
            f"{name} must be a string, got {type(value).__name__}"
        )
    return value


__all__ = [
    "require_str",
    "ensure_str",
]
