"""i18n system - locale matching and localized content selection.

Main components:
- models: LocaleTag, ROOT_LOCALE and the parse_locale_tag() parser
- resolvers: LocaleResolver with the exact/region/language/default fallback
- content: LocalizedContentResolver for locale-keyed content mappings
"""

from infrastructure.i18n.models import ROOT_LOCALE, LocaleTag, parse_locale_tag
from infrastructure.i18n.resolvers import LocaleResolver, resolve_locale
from infrastructure.i18n.content import (
    LocalizedContentResolver,
    resolve_localized_content,
)

__all__ = [
    "LocaleTag",
    "ROOT_LOCALE",
    "parse_locale_tag",
    "LocaleResolver",
    "resolve_locale",
    "LocalizedContentResolver",
    "resolve_localized_content",
]
