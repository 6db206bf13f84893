"""Bundled locale definitions.

Available: de, fr, pl, uk. ``install`` defines them in a context without
switching to them; call ``lang(name)`` afterwards to make one current.

Examples:
    >>> from chronofmt import FormatterContext
    >>> ctx = FormatterContext()
    >>> install("de", context=ctx)
    >>> ctx.lang("de")
    'de'
"""

from __future__ import annotations

import logging

from chronofmt.core.engine import FormatterContext, get_default_context
from chronofmt.core.locale import Locale

logger = logging.getLogger(__name__)

DE = Locale(
    months=(
        "Januar", "Februar", "März", "April", "Mai", "Juni",
        "Juli", "August", "September", "Oktober", "November", "Dezember",
    ),
    months_short=(
        "Jan.", "Feb.", "März", "Apr.", "Mai", "Juni",
        "Juli", "Aug.", "Sep.", "Okt.", "Nov.", "Dez.",
    ),
    weekdays=(
        "Sonntag", "Montag", "Dienstag", "Mittwoch",
        "Donnerstag", "Freitag", "Samstag",
    ),
    weekdays_short=("So.", "Mo.", "Di.", "Mi.", "Do.", "Fr.", "Sa."),
    weekdays_min=("So", "Mo", "Di", "Mi", "Do", "Fr", "Sa"),
)

FR = Locale(
    months=(
        "janvier", "février", "mars", "avril", "mai", "juin",
        "juillet", "août", "septembre", "octobre", "novembre", "décembre",
    ),
    months_short=(
        "janv.", "févr.", "mars", "avr.", "mai", "juin",
        "juil.", "août", "sept.", "oct.", "nov.", "déc.",
    ),
    weekdays=(
        "dimanche", "lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi",
    ),
    weekdays_short=("dim.", "lun.", "mar.", "mer.", "jeu.", "ven.", "sam."),
    weekdays_min=("di", "lu", "ma", "me", "je", "ve", "sa"),
)

PL = Locale(
    months=(
        "styczeń", "luty", "marzec", "kwiecień", "maj", "czerwiec",
        "lipiec", "sierpień", "wrzesień", "październik", "listopad", "grudzień",
    ),
    months_short=(
        "sty", "lut", "mar", "kwi", "maj", "cze",
        "lip", "sie", "wrz", "paź", "lis", "gru",
    ),
    weekdays=(
        "niedziela", "poniedziałek", "wtorek", "środa",
        "czwartek", "piątek", "sobota",
    ),
    weekdays_short=("ndz", "pon", "wt", "śr", "czw", "pt", "sob"),
    weekdays_min=("Nd", "Pn", "Wt", "Śr", "Cz", "Pt", "So"),
)

UK = Locale(
    months=(
        "січень", "лютий", "березень", "квітень", "травень", "червень",
        "липень", "серпень", "вересень", "жовтень", "листопад", "грудень",
    ),
    months_short=(
        "січ", "лют", "бер", "квіт", "трав", "черв",
        "лип", "серп", "вер", "жовт", "лист", "груд",
    ),
    weekdays=(
        "неділя", "понеділок", "вівторок", "середа",
        "четвер", "пʼятниця", "субота",
    ),
    weekdays_short=("нд", "пн", "вт", "ср", "чт", "пт", "сб"),
    weekdays_min=("Нд", "Пн", "Вт", "Ср", "Чт", "Пт", "Сб"),
)

BUNDLED: dict[str, Locale] = {
    "de": DE,
    "fr": FR,
    "pl": PL,
    "uk": UK,
}


def install(*names: str, context: FormatterContext | None = None) -> None:
    """Define bundled locales in a context.

    Args:
        *names: Locales to install. With no names, all bundled locales.
        context: Target context. Defaults to the shared context.

    Raises:
        KeyError: If a name is not bundled. Nothing is installed then.
    """
    ctx = context if context is not None else get_default_context()
    selected = names or tuple(BUNDLED)
    unknown = [name for name in selected if name not in BUNDLED]
    if unknown:
        raise KeyError(f"no bundled locale {unknown[0]!r}, available: {sorted(BUNDLED)}")
    for name in selected:
        ctx.registry.define(name, BUNDLED[name])
    logger.debug("Installed bundled locales %s", names or sorted(BUNDLED))


__all__ = [
    "BUNDLED",
    "install",
]
