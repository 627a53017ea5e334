# langnames/locales/resolver.py
"""
Resolve BCP 47 language tags to display names using Babel's CLDR data.

    >>> resolve_tag("pt-br")
    LanguageTagRecord(tag='pt-br', english_name='Portuguese (Brazil)', localized_name='português (Brasil)', error_message=None)
"""

import re
from typing import Iterable, Iterator, NamedTuple, Optional, Tuple

from babel import Locale, UnknownLocaleError
from babel.core import parse_locale

from langnames.locales.constants import INVALID_TAG_MESSAGE, REFERENCE_LOCALE, ROOT_LANGUAGES
from langnames.logger import get_logger

logger = get_logger("langnames.resolver")

# language subtag, then any number of script/region/variant subtags
TAG_SYNTAX = re.compile(r"[A-Za-z]{2,8}(?:-[A-Za-z0-9]{1,8})*")

_reference = Locale.parse(REFERENCE_LOCALE)


class InvalidLanguageTagError(ValueError):
    def __init__(self, tag: str):
        super().__init__(f"Invalid language tag: {tag!r}")
        self.tag = tag


class LanguageTagRecord(NamedTuple):
    tag: str
    english_name: Optional[str] = None
    localized_name: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_message is None


def parse_tag(tag: str) -> Tuple[str, Optional[str], Optional[str], Optional[str]]:
    """
    Split ``tag`` into ``(language, territory, script, variant)``.

    Subtags come back in Babel's normalized case. Raises InvalidLanguageTagError
    when the text is not tag-shaped or names the root/undefined locale.
    """
    if not TAG_SYNTAX.fullmatch(tag):
        raise InvalidLanguageTagError(tag)

    try:
        language, territory, script, variant = parse_locale(tag, sep="-")[:4]
    except ValueError as e:
        logger.debug("Babel rejected %r: %s", tag, e)
        raise InvalidLanguageTagError(tag) from e

    if language in ROOT_LANGUAGES:
        raise InvalidLanguageTagError(tag)
    return language, territory, script, variant


def _display_name(names: Locale, language, territory, script, variant) -> Optional[str]:
    """Same "Language (Script, Region, Variant)" shape as Locale.get_display_name."""
    name = names.languages.get(language)
    if not name:
        return None
    details = [
        names.scripts.get(script) if script else None,
        names.territories.get(territory) if territory else None,
        names.variants.get(variant) if variant else None,
    ]
    details = [d for d in details if d]
    if details:
        name += f" ({', '.join(details)})"
    return name


def _names_from_subtags(tag, language, territory, script, variant) -> Tuple[str, str]:
    # CLDR ships no data for this combination (fr-US, en-AQ): name the parts
    try:
        native = Locale.parse(language)
    except (ValueError, UnknownLocaleError) as e:
        raise InvalidLanguageTagError(tag) from e

    english = _display_name(_reference, native.language, territory, script, variant)
    if english is None:
        raise InvalidLanguageTagError(tag)
    localized = _display_name(native, native.language, territory, script, variant) or english
    return english, localized


def lookup_display_names(tag: str) -> Tuple[str, str]:
    """Return ``(english_name, localized_name)`` for ``tag``."""
    subtags = parse_tag(tag)

    try:
        locale = Locale.parse(tag, sep="-")
    except UnknownLocaleError as e:
        logger.debug("No locale data for %r (%s), naming it from its subtags", tag, e)
        return _names_from_subtags(tag, *subtags)
    except ValueError as e:
        raise InvalidLanguageTagError(tag) from e

    english = locale.get_display_name(_reference) or str(locale)
    localized = locale.get_display_name(locale) or english
    return english, localized


def resolve_tag(tag: str) -> LanguageTagRecord:
    try:
        english, localized = lookup_display_names(tag)
    except InvalidLanguageTagError:
        return LanguageTagRecord(tag, error_message=INVALID_TAG_MESSAGE)
    return LanguageTagRecord(tag, english, localized)


def resolve_tags(tags: Iterable[str]) -> Iterator[LanguageTagRecord]:
    for tag in tags:
        yield resolve_tag(tag)
