"""Resolve display separators and grouping conventions for a locale."""
from __future__ import annotations

import re
from functools import lru_cache

from ..config import get_settings
from ..models.separators import GroupingStyle, LocaleNumberFormat, Separators
from ..utils.logging import get_logger

logger = get_logger(__name__)

NBSP = "\u00a0"
NARROW_NBSP = "\u202f"

DEFAULT_SEPARATORS = Separators(decimal=".", group=",")

_STANDARD = GroupingStyle()
_INDIAN = GroupingStyle(primary=3, secondary=2)
_MIN_TWO = GroupingStyle(min_grouping_digits=2)

# Locale tag → (decimal, group, grouping); looked up by full tag, then shorter prefixes
LOCALE_NUMBER_FORMATS: dict[str, tuple[str, str, GroupingStyle]] = {
    'en': ('.', ',', _STANDARD),
    'en-IN': ('.', ',', _INDIAN),
    'en-ZA': (',', NBSP, _STANDARD),
    'hi': ('.', ',', _INDIAN),
    'de': (',', '.', _STANDARD),
    'de-AT': (',', NBSP, _STANDARD),
    'de-CH': ('.', '’', _STANDARD),
    'de-LI': ('.', '’', _STANDARD),
    'fr': (',', NARROW_NBSP, _STANDARD),
    'fr-CH': (',', NARROW_NBSP, _STANDARD),
    'it': (',', '.', _STANDARD),
    'it-CH': ('.', '’', _STANDARD),
    'es': (',', '.', _MIN_TWO),
    'es-MX': ('.', ',', _STANDARD),
    'es-US': ('.', ',', _STANDARD),
    'pt': (',', '.', _STANDARD),
    'pt-PT': (',', NBSP, _MIN_TWO),
    'nl': (',', '.', _STANDARD),
    'da': (',', '.', _STANDARD),
    'sv': (',', NBSP, _STANDARD),
    'nb': (',', NBSP, _STANDARD),
    'no': (',', NBSP, _STANDARD),
    'fi': (',', NBSP, _STANDARD),
    'pl': (',', NBSP, _MIN_TWO),
    'cs': (',', NBSP, _STANDARD),
    'ru': (',', NBSP, _STANDARD),
    'uk': (',', NBSP, _STANDARD),
    'tr': (',', '.', _STANDARD),
    'el': (',', '.', _STANDARD),
    'ja': ('.', ',', _STANDARD),
    'ko': ('.', ',', _STANDARD),
    'zh': ('.', ',', _STANDARD),
    'he': ('.', ',', _STANDARD),
    'th': ('.', ',', _STANDARD),
}

_LOCALE_TAG = re.compile(r'^[A-Za-z]{2,3}(?:[-_][A-Za-z0-9]{1,8})*$')


def _normalize_subtag(subtag: str, position: int) -> str:
    if position == 0:
        return subtag.lower()
    if len(subtag) == 2 and subtag.isalpha():
        return subtag.upper()  # region
    if len(subtag) == 4 and subtag.isalpha():
        return subtag.title()  # script
    return subtag.lower()


def _candidate_tags(locale: str) -> list[str]:
    """Full normalised tag first, then each shorter prefix down to the language."""
    subtags = [_normalize_subtag(part, i) for i, part in enumerate(re.split(r'[-_]', locale))]
    return ['-'.join(subtags[:end]) for end in range(len(subtags), 0, -1)]


@lru_cache(maxsize=128)
def _lookup(locale: str | None) -> LocaleNumberFormat | None:
    if not isinstance(locale, str) or not _LOCALE_TAG.match(locale.strip()):
        return None
    for tag in _candidate_tags(locale.strip()):
        entry = LOCALE_NUMBER_FORMATS.get(tag)
        if entry is not None:
            decimal, group, grouping = entry
            return LocaleNumberFormat(
                locale=tag,
                separators=Separators(decimal=decimal, group=group),
                grouping=grouping,
            )
    return None


def resolve_number_format(locale: str | None = None, default_locale: str | None = None) -> LocaleNumberFormat:
    """Resolve separators and grouping for *locale*.

    ``None`` means the configured default locale. Unknown or malformed tags never
    raise; they resolve to ``{".", ","}`` with standard grouping.
    """
    requested = locale if locale is not None else (default_locale or get_settings().default_locale)
    try:
        resolved = _lookup(requested)
    except TypeError:  # unhashable garbage passed as a locale
        resolved = None

    if resolved is None:
        logger.debug("separators_locale_fallback", locale=repr(requested))
        return LocaleNumberFormat(locale='und', separators=DEFAULT_SEPARATORS, grouping=_STANDARD)
    return resolved


def resolve_separators(locale: str | None = None) -> Separators:
    """Return the decimal and group separators for *locale*."""
    return resolve_number_format(locale).separators
