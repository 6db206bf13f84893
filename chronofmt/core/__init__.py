"""Core formatting components.

    - DateSnapshot: date/time fields extracted once per format call
    - Locale, LocaleRegistry: month/weekday name tables and the current locale
    - TokenTable: token rules and longest-match tokenization
    - FormatterContext: the format engine tying them together
"""

from __future__ import annotations

from chronofmt.core.engine import FormatterContext
from chronofmt.core.locale import ENGLISH, Locale, LocaleRegistry, LocaleView
from chronofmt.core.snapshot import DateSnapshot
from chronofmt.core.tokens import TOKENS, TokenTable

__all__: list[str] = [
    "DateSnapshot",
    "ENGLISH",
    "FormatterContext",
    "Locale",
    "LocaleRegistry",
    "LocaleView",
    "TOKENS",
    "TokenTable",
]
