"""Localized content selection.

Picks the best localized string out of a mapping keyed by locale strings,
e.g. ``{"en": "Hello", "en_GB": "Hello", "fr": "Bonjour"}``.
"""

from typing import Dict, Mapping, Optional

from infrastructure.i18n.models import LocaleTag, parse_locale_tag
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.logging import get_module_logger

logger = get_module_logger()


class LocalizedContentResolver:
    """Selects localized content for a desired locale.

    Attributes:
        resolver: LocaleResolver used for matching.
        default_locale: Locale used when no language matches, and as the desired
            locale when none is given.
    """

    def __init__(
        self,
        default_locale: Optional[LocaleTag] = None,
        resolver: Optional[LocaleResolver] = None,
    ):
        """Initialize the content resolver.

        Args:
            default_locale: Fallback locale. Defaults to the configured
                settings.i18n.DEFAULT_LOCALE.
            resolver: Optional LocaleResolver instance.
        """
        if default_locale is None:
            from infrastructure.services.providers import get_settings

            default_locale = get_settings().i18n.default_locale_tag

        self.default_locale = default_locale
        self.resolver = resolver or LocaleResolver()

    def resolve_content(
        self,
        desired: Optional[LocaleTag],
        content_by_locale_key: Optional[Mapping[str, str]],
    ) -> Optional[str]:
        """Return the content whose locale key best matches ``desired``.

        Mapping order is preserved as the candidate pool order. Keys that
        parse to the same locale keep the first key's position and the
        last key's value.

        Args:
            desired: Desired locale; the default locale when None.
            content_by_locale_key: Content strings keyed by locale string.

        Returns:
            Selected content, or None when no candidate applies.

        Raises:
            ValueError: If a key is not a locale string.
        """
        if not content_by_locale_key:
            return None

        if desired is None:
            desired = self.default_locale

        content_by_locale: Dict[LocaleTag, str] = {}
        for locale_key, content in content_by_locale_key.items():
            content_by_locale[parse_locale_tag(locale_key)] = content

        selected = self.resolver.resolve(
            desired, content_by_locale.keys(), self.default_locale
        )
        if selected is None:
            logger.debug(
                "localized_content_unresolved",
                desired=str(desired),
                available=[str(tag) for tag in content_by_locale],
            )
            return None

        return content_by_locale[selected]


def resolve_localized_content(
    desired: Optional[LocaleTag],
    content_by_locale_key: Optional[Mapping[str, str]],
) -> Optional[str]:
    """Resolve content with the configured default locale.

    Args:
        desired: Desired locale.
        content_by_locale_key: Content strings keyed by locale string.

    Returns:
        Selected content or None.
    """
    return LocalizedContentResolver().resolve_content(desired, content_by_locale_key)
