"""Locale models for the i18n system.

Defines the locale tag value type and the locale-string parser used to turn
configuration keys such as ``en_GB`` into tags.
"""

import re
from dataclasses import dataclass, field
from typing import ClassVar

_SEPARATORS = re.compile(r"[_-]")


@dataclass(frozen=True)
class LocaleTag:
    """Language/region/variant triple identifying a locale.

    Equality and hashing are case-insensitive per field, so ``en_GB`` and
    ``EN_gb`` are the same tag. The original spelling is kept for display.
    Frozen to ensure immutability and hashability.

    Attributes:
        language: ISO language code, e.g. "en" ("" for the root locale).
        region: Region/country code, e.g. "GB" (may be empty).
        variant: Variant, e.g. "POSIX" (may be empty).
    """

    language: str = field(default="", compare=False)
    region: str = field(default="", compare=False)
    variant: str = field(default="", compare=False)
    # Lower-cased (language, region, variant); the only compared field
    _key: tuple = field(init=False, repr=False)

    ROOT: ClassVar["LocaleTag"]

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_key",
            (self.language.lower(), self.region.lower(), self.variant.lower()),
        )

    def __str__(self) -> str:
        """Render as ``language_REGION_variant`` without trailing empty parts."""
        parts = [self.language, self.region, self.variant]
        while parts and not parts[-1]:
            parts.pop()
        return "_".join(parts)

    @property
    def is_root(self) -> bool:
        """True for the root locale (all fields empty)."""
        return self._key == ("", "", "")

    def matches_language(self, other: "LocaleTag") -> bool:
        return self._key[0] == other._key[0]

    def matches_region(self, other: "LocaleTag") -> bool:
        return self._key[:2] == other._key[:2]

    def matches_exactly(self, other: "LocaleTag") -> bool:
        return self._key == other._key


LocaleTag.ROOT = LocaleTag()
ROOT_LOCALE = LocaleTag.ROOT


def parse_locale_tag(value: str) -> LocaleTag:
    """Parse a locale string into a LocaleTag.

    Accepts ``_`` or ``-`` separators. The first token is the language, the
    second the region, and everything after the second separator is the
    variant (kept verbatim). An empty string is the root locale.

    Args:
        value: Locale string (e.g. "en", "en_GB", "pt-BR", "ja_JP_JP").

    Returns:
        Parsed LocaleTag.

    Raises:
        ValueError: If value is not a string.
    """
    if not isinstance(value, str):
        raise ValueError(f"Locale string must be a str: {value!r}")

    stripped = value.strip()
    if not stripped:
        return ROOT_LOCALE

    parts = _SEPARATORS.split(stripped, maxsplit=2)
    language = parts[0]
    region = parts[1] if len(parts) > 1 else ""
    variant = parts[2] if len(parts) > 2 else ""
    return LocaleTag(language=language, region=region, variant=variant)
