"""Localization feature settings."""

from typing import TYPE_CHECKING

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings

if TYPE_CHECKING:
    from infrastructure.i18n.models import LocaleTag


class LocalizationSettings(FeatureSettings):
    """Localization configuration.

    Environment Variables:
        DEFAULT_LOCALE: Process-wide default locale used when a localized
            value has no language match (default: "en"). Accepts the
            ``language_REGION_variant`` format, "-" separators are accepted too.

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        default_locale = settings.i18n.default_locale_tag
        ```
    """

    DEFAULT_LOCALE: str = Field(default="en", alias="DEFAULT_LOCALE")

    @property
    def default_locale_tag(self) -> "LocaleTag":
        """Parsed DEFAULT_LOCALE."""
        from infrastructure.i18n.models import parse_locale_tag

        return parse_locale_tag(self.DEFAULT_LOCALE)
