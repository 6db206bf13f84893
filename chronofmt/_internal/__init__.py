"""Internal utilities for Chronofmt.

This module contains private implementation details:
    - Argument validation (@require_str)
    - Constants and default name tables
    - Custom decorators (@synchronized, @memoize)

Note: This module is not part of the public API.
"""

from __future__ import annotations

from chronofmt._internal.decorators import memoize, synchronized
from chronofmt._internal.validation import ensure_str, require_str

__all__: list[str] = [
    "ensure_str",
    "memoize",
    "require_str",
    "synchronized",
]
